"""Core orchestration for git-reporter"""
from pathlib import Path
from typing import Optional

from git_reporter.config import Config
from git_reporter.constants import COMMAND_FREEZE, COMMAND_REPORT, COMMAND_UNFREEZE
from git_reporter.exceptions import NoHeadError
from git_reporter.logging_config import get_logger
from git_reporter.services.display_service import DisplayService
from git_reporter.services.git_service import GitService
from git_reporter.services.path_validation_service import PathValidationService

logger = get_logger(__name__)


class Reporter:
    """Runs one report or freeze/unfreeze command against a repository."""

    def __init__(self, config: Config, display: Optional[DisplayService] = None):
        """Initialize the reporter.

        Args:
            config: Run configuration built from the command line
            display: Output service; a console-backed one is created if omitted
        """
        self.config = config
        self.display = display or DisplayService()

    def _open(self) -> GitService:
        return GitService.open(self.config.path)

    def run(self) -> None:
        """Dispatch the configured command."""
        if self.config.command == COMMAND_REPORT:
            self.report()
        elif self.config.command == COMMAND_FREEZE:
            self.freeze()
        elif self.config.command == COMMAND_UNFREEZE:
            self.unfreeze()
        else:
            raise ValueError(f"Reporter cannot run '{self.config.command}'")

    @staticmethod
    def _branch_or_none(git_service: GitService) -> Optional[str]:
        try:
            return git_service.current_branch()
        except NoHeadError as e:
            logger.debug(f"Branch unresolved: {e}")
            return None

    def report(self) -> None:
        """Print the status report for the configured path."""
        with self._open() as git_service:
            path = Path(self.config.path).resolve()
            remotes = git_service.remotes()
            config = git_service.config()

            staged_files = git_service.staged_files()
            change_files = git_service.change_files()
            frozen_files = git_service.frozen_files()

            self.display.display_report(
                path=path,
                remotes=remotes,
                config=config,
                branch=self._branch_or_none(git_service),
                state=git_service.state(),
                staged_files=staged_files,
                change_files=change_files,
                frozen_files=frozen_files,
                stash_len=git_service.stash_len(),
            )

    def freeze(self) -> None:
        self._set_frozen(True)

    def unfreeze(self) -> None:
        self._set_frozen(False)

    def _set_frozen(self, frozen: bool) -> None:
        # All paths must exist before the repository is even opened
        paths = PathValidationService.validate_existing(self.config.paths)

        with self._open() as git_service:
            git_service.set_files_frozen(paths, frozen)

        self.display.display_frozen_change(self.config.paths, frozen)
