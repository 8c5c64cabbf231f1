"""Validation of user-supplied file paths"""
from pathlib import Path
from typing import Iterable, List, Optional

from git_reporter.exceptions import PathDoesNotExistError
from git_reporter.logging_config import get_logger

logger = get_logger(__name__)


class PathValidationService:
    """Checks paths before any repository mutation happens."""

    @staticmethod
    def find_missing(paths: Iterable[str], base_dir: Optional[Path] = None) -> List[str]:
        """
        Return the paths that do not exist on the filesystem.

        Args:
            paths: Paths as given by the user
            base_dir: Directory relative paths are resolved against (default: cwd)

        Returns:
            Missing paths in the order they were given
        """
        base = base_dir or Path.cwd()
        return [path for path in paths if not (base / path).exists()]

    @staticmethod
    def validate_existing(paths: Iterable[str], base_dir: Optional[Path] = None) -> List[Path]:
        """
        Ensure every path exists and return them as absolute paths.

        Args:
            paths: Paths as given by the user
            base_dir: Directory relative paths are resolved against (default: cwd)

        Returns:
            Absolute paths, in the order they were given

        Raises:
            PathDoesNotExistError: Listing every missing path, if any
        """
        paths = list(paths)
        base = base_dir or Path.cwd()
        missing = PathValidationService.find_missing(paths, base)
        if missing:
            logger.debug(f"Rejecting {len(missing)} missing path(s)")
            raise PathDoesNotExistError(missing)
        return [base / path for path in paths]
