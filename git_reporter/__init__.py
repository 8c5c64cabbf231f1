"""
git-reporter - A colorized status report for a git working tree
"""

from .__version__ import __version__
from .core import Reporter
from .services.git_service import GitService

__all__ = ["GitService", "Reporter", "__version__"]
