"""Parser for `git status --porcelain -z` output."""

from typing import Dict, List

from git_reporter.models.status import FileStatus, StatusEntry

# X column (index vs HEAD)
INDEX_CODES: Dict[str, FileStatus] = {
    "A": FileStatus.INDEX_NEW,
    "C": FileStatus.INDEX_NEW,
    "M": FileStatus.INDEX_MODIFIED,
    "D": FileStatus.INDEX_DELETED,
    "R": FileStatus.INDEX_RENAMED,
    "T": FileStatus.INDEX_TYPECHANGE,
}

# Y column (working tree vs index)
WORKTREE_CODES: Dict[str, FileStatus] = {
    "A": FileStatus.WT_NEW,
    "M": FileStatus.WT_MODIFIED,
    "D": FileStatus.WT_DELETED,
    "R": FileStatus.WT_RENAMED,
    "T": FileStatus.WT_TYPECHANGE,
}

UNMERGED_CODES = {"DD", "AU", "UD", "UA", "DU", "AA", "UU"}


def parse_status_code(code: str) -> FileStatus:
    """
    Translate a two-character porcelain XY code into status flags.

    Args:
        code: The XY code, e.g. "M ", " M", "??"

    Returns:
        Combined FileStatus flags for the code
    """
    if code == "??":
        return FileStatus.WT_NEW
    if code == "!!":
        return FileStatus.IGNORED
    if code in UNMERGED_CODES:
        return FileStatus.CONFLICTED

    status = FileStatus.CURRENT
    status |= INDEX_CODES.get(code[0], FileStatus.CURRENT)
    status |= WORKTREE_CODES.get(code[1], FileStatus.CURRENT)
    return status


def parse_status_porcelain(output: str) -> List[StatusEntry]:
    """
    Parse NUL-separated porcelain v1 status output.

    Each record is "XY path". Renamed and copied records are followed by a
    second record holding the source path, which is skipped.

    Args:
        output: Raw output of `git status --porcelain -z`

    Returns:
        One StatusEntry per reported path, in output order
    """
    entries = []
    records = output.split("\0")
    i = 0
    while i < len(records):
        record = records[i]
        i += 1
        if len(record) < 4:
            continue

        code = record[:2]
        path = record[3:]
        if "R" in code or "C" in code:
            i += 1  # source path

        entries.append(StatusEntry(path=path, status=parse_status_code(code)))

    return entries
