"""Version information for git-reporter."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-reporter")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0+unknown"
