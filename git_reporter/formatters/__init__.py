"""Formatting utilities for git-reporter.

Each function returns Rich markup for one part of the status report.
"""

from .report import (
    format_branch,
    format_counts,
    format_frozen_file,
    format_path,
    format_remote,
    format_state,
    format_status_line,
    format_user,
)

__all__ = [
    "format_branch",
    "format_counts",
    "format_frozen_file",
    "format_path",
    "format_remote",
    "format_state",
    "format_status_line",
    "format_user",
]
