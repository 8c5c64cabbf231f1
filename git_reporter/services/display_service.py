"""Display service for the repository status report"""
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_reporter.formatters import (
    format_counts,
    format_frozen_file,
    format_path,
    format_remote,
    format_status_line,
    format_user,
)
from git_reporter.logging_config import get_logger
from git_reporter.models.repository import GitConfig, Remote, RepositoryState

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def display_report(
            self,
            path: Path,
            remotes: List[Remote],
            config: GitConfig,
            branch: Optional[str],
            state: RepositoryState,
            staged_files: List[str],
            change_files: List[str],
            frozen_files: List[str],
            stash_len: int,
        ) -> None:
        """Print the status report in its fixed order."""
        self.console.print(format_path(path))
        for remote in remotes:
            self.console.print(format_remote(remote))
        self.console.print(format_user(config.user))

        self.console.print(
            format_status_line(branch, state, bool(staged_files), bool(change_files))
        )
        self.console.print(
            format_counts(len(staged_files), len(change_files), len(frozen_files), stash_len)
        )

        for frozen_file in frozen_files:
            self.console.print(format_frozen_file(frozen_file))

    def display_frozen_change(self, paths: List[str], frozen: bool) -> None:
        """Confirm which files were frozen or unfrozen."""
        action = "frozen" if frozen else "unfrozen"
        style = "cyan" if frozen else "yellow"
        for path in paths:
            self.console.print(f"{format_frozen_file(path)} [{style}]{action}[/{style}]")
        logger.debug(f"Displayed {len(paths)} {action} path(s)")

    def display_error(self, error: Exception) -> None:
        self.console.print(f"[red]Error: {escape(str(error))}[/red]")
