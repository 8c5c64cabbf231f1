"""Status report formatting utilities."""

from pathlib import Path
from typing import Optional

from rich.markup import escape

from git_reporter.constants import NO_USER, REPORT_COLORS, UNKNOWN_BRANCH
from git_reporter.models.repository import Remote, RepositoryState, User


def _styled(text: str, color_key: str) -> str:
    style = REPORT_COLORS[color_key]
    return f"[{style}]{escape(text)}[/{style}]"


def format_path(path: Path) -> str:
    """Format the working tree path heading the report."""
    return _styled(str(path), "path")


def format_remote(remote: Remote) -> str:
    """
    Format a remote as "name -> url".

    Args:
        remote: Remote to format

    Returns:
        Markup string
    """
    return f"{_styled(remote.name, 'remote_name')} -> {_styled(remote.url, 'remote_url')}"


def format_user(user: Optional[User]) -> str:
    """
    Format the configured user line.

    Args:
        user: Configured user, or None when user.name/user.email are unset

    Returns:
        "user = Name <email>" or "user = None" as markup
    """
    if user is None:
        value = _styled(NO_USER, "none")
    else:
        value = f"{_styled(user.name, 'user')} <{_styled(user.email, 'user')}>"
    return f"{_styled('user', 'label')} = {value}"


def format_branch(branch: Optional[str]) -> str:
    """Format the current branch, or the unknown-branch sentinel."""
    if branch is None:
        return f"\\[{_styled(UNKNOWN_BRANCH, 'unknown_branch')}]"
    return f"\\[{_styled(branch, 'branch')}]"


def format_state(state: RepositoryState) -> str:
    """Format the repository state label, green only when clean."""
    color_key = "state_clean" if state is RepositoryState.CLEAN else "state_busy"
    return _styled(state.label, color_key)


def format_status_line(
    branch: Optional[str], state: RepositoryState, has_staged: bool, has_changes: bool
) -> str:
    """
    Format the "[branch] (state | staged | changed)" line.

    Args:
        branch: Current branch name or None
        state: Repository state
        has_staged: Whether any file is staged
        has_changes: Whether any file differs from the index

    Returns:
        Markup string
    """
    parts = [format_state(state)]
    if has_staged:
        parts.append(_styled("staged", "staged"))
    if has_changes:
        parts.append(_styled("changed", "changed"))
    return f"{format_branch(branch)} ({' | '.join(parts)})"


def format_counts(staged: int, changes: int, frozen: int, stashed: int) -> str:
    """Format the count summary line."""
    counts = [
        (staged, "staged", "staged"),
        (changes, "changes", "changed"),
        (frozen, "frozen", "frozen"),
        (stashed, "stashed", "stashed"),
    ]
    return "  ".join(
        f"{_styled(str(count), key)} {_styled(label, key)}" for count, label, key in counts
    )


def format_frozen_file(path: str) -> str:
    return _styled(path, "frozen")
