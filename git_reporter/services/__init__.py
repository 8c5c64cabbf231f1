"""Services for git-reporter."""

from .git_service import GitService
from .display_service import DisplayService
from .path_validation_service import PathValidationService

__all__ = ["GitService", "DisplayService", "PathValidationService"]
