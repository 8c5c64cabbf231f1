"""Data models for git-reporter."""

from .repository import GitConfig, Remote, RepositoryState, User
from .status import CHANGED_MASK, STAGED_MASK, FileStatus, StatusEntry

__all__ = [
    "GitConfig",
    "Remote",
    "RepositoryState",
    "User",
    "FileStatus",
    "StatusEntry",
    "STAGED_MASK",
    "CHANGED_MASK",
]
