"""Custom exceptions for git-reporter"""

from typing import Iterable, Optional


class GitReporterError(Exception):
    """Base exception for all git-reporter errors."""
    pass


class GitOperationError(GitReporterError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, path: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if path:
            error_msg += f" for '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class RepositoryNotFoundError(GitOperationError):
    """Exception raised when no repository exists at or above a path."""

    def __init__(self, path: str):
        super().__init__("open_repository", path, "Not a git repository")


class ConfigUnavailableError(GitOperationError):
    """Exception raised when a configuration key cannot be read."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("read_config", message=f"Key '{key}' is not set")


class RemoteResolutionError(GitOperationError):
    """Exception raised when a configured remote has no resolvable URL."""

    def __init__(self, remote: str, message: Optional[str] = None):
        self.remote = remote
        super().__init__("resolve_remote", remote, message or "Remote URL could not be resolved")


class PathNotIndexedError(GitOperationError):
    """Exception raised when a path has no stage-0 entry in the index."""

    def __init__(self, path: str):
        super().__init__("find_index_entry", path, "Path is not tracked in the index")


class IndexWriteError(GitOperationError):
    """Exception raised when the index cannot be written back to disk."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("write_index", message=message)


class NoHeadError(GitOperationError):
    """Exception raised when neither a checked-out branch nor a symbolic HEAD exists."""

    def __init__(self):
        super().__init__("resolve_head", message="No HEAD branch found")


class PathDoesNotExistError(GitReporterError):
    """Exception raised when user-supplied paths are missing from the filesystem."""

    def __init__(self, paths: Iterable[str]):
        self.paths = list(paths)
        super().__init__(f"Path(s) do not exist: {', '.join(self.paths)}")
