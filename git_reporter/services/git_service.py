"""Repository access service"""
import configparser
import os
import struct
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Union

import git
from git.index.typ import IndexEntry

from git_reporter.constants import FROZEN_FLAG
from git_reporter.exceptions import (
    ConfigUnavailableError,
    GitOperationError,
    IndexWriteError,
    NoHeadError,
    PathNotIndexedError,
    RemoteResolutionError,
    RepositoryNotFoundError,
)
from git_reporter.logging_config import get_logger
from git_reporter.models.repository import GitConfig, Remote, RepositoryState, User
from git_reporter.models.status import CHANGED_MASK, STAGED_MASK, FileStatus, StatusEntry
from git_reporter.services.status_parser import parse_status_porcelain

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# Index versions GitPython reads and writes itself
PARSED_INDEX_VERSIONS = (1, 2, 3)

# Checked in order; the first marker present in the git directory wins.
# REVERT and CHERRY_PICK become their *_SEQUENCE variant while sequencer/todo exists.
_STATE_MARKERS = [
    ("rebase-merge/interactive", RepositoryState.REBASE_INTERACTIVE),
    ("rebase-merge", RepositoryState.REBASE_MERGE),
    ("rebase-apply/rebasing", RepositoryState.REBASE),
    ("rebase-apply/applying", RepositoryState.APPLY_MAILBOX),
    ("rebase-apply", RepositoryState.APPLY_MAILBOX_OR_REBASE),
    ("MERGE_HEAD", RepositoryState.MERGE),
    ("REVERT_HEAD", RepositoryState.REVERT),
    ("CHERRY_PICK_HEAD", RepositoryState.CHERRY_PICK),
    ("BISECT_LOG", RepositoryState.BISECT),
]

_SEQUENCED = {
    RepositoryState.REVERT: RepositoryState.REVERT_SEQUENCE,
    RepositoryState.CHERRY_PICK: RepositoryState.CHERRY_PICK_SEQUENCE,
}


class GitService:
    """Typed, decoded view of a single git repository."""

    def __init__(self, repo_path: PathLike):
        """Open the repository rooted at or above repo_path.

        Args:
            repo_path: Path inside the working tree (or the git directory itself)

        Raises:
            RepositoryNotFoundError: If no repository can be found
        """
        self.repo_path = str(repo_path)
        try:
            self._repo = git.Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryNotFoundError(self.repo_path) from e
        logger.info(f"Opened repository at {self._repo.git_dir}")

    @classmethod
    def open(cls, repo_path: PathLike) -> "GitService":
        return cls(repo_path)

    def close(self) -> None:
        self._repo.close()

    def __enter__(self) -> "GitService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Configuration

    def _read_config_value(self, reader, section: str, option: str) -> str:
        try:
            return reader.get_value(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError) as e:
            raise ConfigUnavailableError(f"{section}.{option}") from e

    def _read_user(self) -> User:
        reader = self._repo.config_reader()
        name = self._read_config_value(reader, "user", "name")
        email = self._read_config_value(reader, "user", "email")
        return User(name=str(name), email=str(email))

    def config(self) -> GitConfig:
        """Read the configured user; a missing key yields a config without user."""
        try:
            user = self._read_user()
        except ConfigUnavailableError as e:
            logger.debug(f"No user configured: {e}")
            user = None
        return GitConfig(user=user)

    def remotes(self) -> List[Remote]:
        """List remotes in configuration order.

        Raises:
            RemoteResolutionError: If a listed remote has no readable URL
        """
        remotes = []
        for remote in self._repo.remotes:
            try:
                url = remote.url
            except (configparser.Error, AttributeError) as e:
                raise RemoteResolutionError(remote.name, str(e)) from e
            remotes.append(Remote(name=remote.name, url=url))
        return remotes

    # Frozen files

    def _index_version(self) -> Optional[int]:
        """Version from the on-disk index header, or None if there is no index."""
        try:
            with open(Path(self._repo.git_dir) / "index", "rb") as f:
                header = f.read(12)
        except FileNotFoundError:
            return None
        if len(header) < 12:
            return None
        signature, version, _ = struct.unpack(">4sLL", header)
        if signature != b"DIRC":
            raise GitOperationError("read_index", message="Index has no DIRC signature")
        return version

    def _parsed_index(self) -> bool:
        """Whether GitPython can read and write this index in-process."""
        version = self._index_version()
        if version is None or version in PARSED_INDEX_VERSIONS:
            return True
        logger.debug(f"Index version {version}, using git plumbing for the frozen bit")
        return False

    def _entries_where(self, predicate: Callable[[IndexEntry], bool]) -> List[IndexEntry]:
        return [entry for entry in self._repo.index.entries.values() if predicate(entry)]

    def _ls_files(self, *args: str) -> str:
        try:
            return self._repo.git.ls_files(*args)
        except git.exc.GitCommandError as e:
            raise GitOperationError("ls_files", message=str(e)) from e

    def _frozen_files_from_git(self) -> List[str]:
        # `ls-files -v` tags assume-valid (bit 15) entries with a lowercase letter
        output = self._ls_files("-v", "-z")
        frozen = set()
        for record in output.split("\0"):
            if len(record) > 2 and record[0].islower():
                frozen.add(record[2:])
        return sorted(frozen)

    def frozen_files(self) -> List[str]:
        """Return repository-relative paths of index entries carrying the frozen bit."""
        if not self._parsed_index():
            return self._frozen_files_from_git()
        return sorted(
            entry.path for entry in self._entries_where(lambda entry: entry.flags & FROZEN_FLAG)
        )

    def _index_path(self, path: PathLike) -> str:
        """Convert a user path into the key the index stores it under."""
        candidate = Path(path)
        if candidate.is_absolute():
            if self._repo.working_tree_dir is None:
                raise PathNotIndexedError(str(path))
            root = Path(self._repo.working_tree_dir).resolve()
            # Resolve the parent only so a tracked symlink keeps its own name
            absolute = candidate.parent.resolve() / candidate.name
            try:
                candidate = absolute.relative_to(root)
            except ValueError as e:
                raise PathNotIndexedError(str(path)) from e
        return candidate.as_posix()

    def _stage_zero_paths(self) -> Set[str]:
        output = self._ls_files("--stage", "-z")
        paths = set()
        for record in output.split("\0"):
            if not record:
                continue
            info, _, path = record.partition("\t")
            if info.split()[-1] == "0":
                paths.add(path)
        return paths

    def _set_frozen_with_git(self, paths: Iterable[PathLike], frozen: bool) -> int:
        tracked = self._stage_zero_paths()
        keys = []
        for path in paths:
            key = self._index_path(path)
            if key not in tracked:
                raise PathNotIndexedError(str(path))
            if key not in keys:
                keys.append(key)

        if keys:
            flag = "--assume-unchanged" if frozen else "--no-assume-unchanged"
            try:
                self._repo.git.update_index(flag, "--", *keys)
            except git.exc.GitCommandError as e:
                raise IndexWriteError(str(e)) from e
        return len(keys)

    def _set_frozen_in_process(self, paths: Iterable[PathLike], frozen: bool) -> int:
        index = self._repo.index
        updates = {}
        for path in paths:
            key = (self._index_path(path), 0)
            entry = updates.get(key) or index.entries.get(key)
            if entry is None:
                raise PathNotIndexedError(str(path))

            if frozen:
                flags = entry.flags | FROZEN_FLAG
            else:
                flags = entry.flags & ~FROZEN_FLAG
            updates[key] = entry._replace(flags=flags)

        if updates:
            index.entries.update(updates)
            try:
                index.write()
            except (OSError, git.exc.GitError) as e:
                raise IndexWriteError(str(e)) from e
        return len(updates)

    def set_files_frozen(self, paths: Iterable[PathLike], frozen: bool) -> None:
        """Set or clear the frozen bit on each path and write the index once.

        Every path is looked up before anything is written, so a path that is
        not tracked leaves the on-disk index untouched. Index formats GitPython
        cannot parse are updated through `git update-index`, which touches
        the same bit.

        Args:
            paths: Absolute paths, or paths relative to the repository root
            frozen: True to set the bit, False to clear it

        Raises:
            PathNotIndexedError: If a path has no stage-0 index entry
            IndexWriteError: If the index cannot be written
        """
        paths = list(paths)
        if self._parsed_index():
            count = self._set_frozen_in_process(paths, frozen)
        else:
            count = self._set_frozen_with_git(paths, frozen)
        if count:
            logger.info(f"{'Froze' if frozen else 'Unfroze'} {count} file(s)")

    # Status

    def statuses(self) -> List[StatusEntry]:
        """Run one status scan over the working tree, index and HEAD."""
        try:
            output = self._repo.git.status("--porcelain", "-z", "--untracked-files=all")
        except git.exc.GitCommandError as e:
            raise GitOperationError("status", message=str(e)) from e
        return parse_status_porcelain(output)

    def _files_with_status(self, mask: FileStatus) -> List[str]:
        return [entry.path for entry in self.statuses() if entry.intersects(mask)]

    def staged_files(self) -> List[str]:
        """Paths whose index differs from HEAD."""
        return self._files_with_status(STAGED_MASK)

    def change_files(self) -> List[str]:
        """Paths whose working tree copy differs from the index."""
        return self._files_with_status(CHANGED_MASK)

    def stash_len(self) -> int:
        try:
            output = self._repo.git.stash("list")
        except git.exc.GitCommandError as e:
            raise GitOperationError("stash_list", message=str(e)) from e
        return sum(1 for line in output.splitlines() if line.strip())

    def state(self) -> RepositoryState:
        """Operation in progress, read from marker files in the git directory."""
        git_dir = Path(self._repo.git_dir)
        for marker, state in _STATE_MARKERS:
            if not (git_dir / marker).exists():
                continue
            if state in _SEQUENCED and (git_dir / "sequencer" / "todo").is_file():
                return _SEQUENCED[state]
            return state
        return RepositoryState.CLEAN

    # Branches

    def _head_branch(self) -> str:
        head = self._repo.head
        if not head.is_detached:
            for branch in self._repo.branches:
                if head.reference == branch:
                    return branch.name
        raise NoHeadError()

    def _head_ref(self) -> str:
        try:
            target = self._repo.head.reference
        except (TypeError, ValueError) as e:
            # HEAD holds a commit id rather than a symbolic target
            raise NoHeadError() from e
        return target.name

    def current_branch(self) -> str:
        """Name of the checked-out branch.

        Prefers the local branch HEAD points at, then falls back to the
        short name of HEAD's symbolic target (an unborn branch has no ref yet).

        Raises:
            NoHeadError: If HEAD is detached or missing
        """
        try:
            return self._head_branch()
        except NoHeadError:
            logger.debug("No checked-out branch found, reading HEAD target")
            return self._head_ref()
