"""File status flags and entries produced by a status scan."""
from enum import IntFlag
from dataclasses import dataclass


class FileStatus(IntFlag):
    """Per-path status bits.

    Index-side and working-tree-side flags occupy separate bit ranges, so a
    path can carry both kinds at once.
    """
    CURRENT = 0

    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4

    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11
    WT_UNREADABLE = 1 << 12

    IGNORED = 1 << 14
    CONFLICTED = 1 << 15


STAGED_MASK = (
    FileStatus.INDEX_NEW
    | FileStatus.INDEX_MODIFIED
    | FileStatus.INDEX_DELETED
    | FileStatus.INDEX_TYPECHANGE
    | FileStatus.INDEX_RENAMED
)

CHANGED_MASK = (
    FileStatus.WT_NEW
    | FileStatus.WT_MODIFIED
    | FileStatus.WT_DELETED
    | FileStatus.WT_TYPECHANGE
    | FileStatus.WT_RENAMED
)


@dataclass(frozen=True)
class StatusEntry:
    """Status of a single path relative to the repository root."""
    path: str
    status: FileStatus

    def intersects(self, mask: FileStatus) -> bool:
        return bool(self.status & mask)
