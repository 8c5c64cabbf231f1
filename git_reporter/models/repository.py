"""Repository snapshot models and enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Identity configured through user.name and user.email."""
    name: str
    email: str


@dataclass(frozen=True)
class Remote:
    """A configured remote and its fetch URL."""
    name: str
    url: str


@dataclass(frozen=True)
class GitConfig:
    """Relevant git configuration. user is None when either key is unset."""
    user: Optional[User] = None


class RepositoryState(Enum):
    """Operation in progress in a repository, as left on disk by git.

    Values double as the labels shown in the report.
    """
    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revertsequence"
    CHERRY_PICK = "cherrypick"
    CHERRY_PICK_SEQUENCE = "cherrypicksequence"
    BISECT = "bisect"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebaseinteractive"
    REBASE_MERGE = "rebasemerge"
    APPLY_MAILBOX = "applymailbox"
    APPLY_MAILBOX_OR_REBASE = "applymailboxorrebase"

    @property
    def label(self) -> str:
        return self.value
