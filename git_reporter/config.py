"""Configuration handling for git-reporter"""

from dataclasses import dataclass, field
from typing import List, Optional

from git_reporter.constants import (
    COMMAND_COMPLETION,
    COMMAND_FREEZE,
    COMMAND_REPORT,
    COMMAND_UNFREEZE,
    COMMANDS,
)


@dataclass
class Config:
    """Run configuration built once from the command line."""

    # Repository location
    path: str = "."

    # Selected subcommand and its arguments
    command: str = COMMAND_REPORT
    paths: List[str] = field(default_factory=list)  # freeze / unfreeze targets
    shell: Optional[str] = None  # completion target

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_path()
        self._validate_command()
        self._validate_paths()
        self._validate_shell()

    def _validate_path(self):
        """Validate path is not empty."""
        if not self.path or not str(self.path).strip():
            raise ValueError("path cannot be empty")

    def _validate_command(self):
        """Validate command is one of allowed values."""
        if self.command not in COMMANDS:
            raise ValueError(f"command must be one of {COMMANDS}, got '{self.command}'")

    def _validate_paths(self):
        """Validate freeze/unfreeze receive at least one path."""
        if not isinstance(self.paths, list):
            raise ValueError("paths must be a list")
        if self.command in (COMMAND_FREEZE, COMMAND_UNFREEZE) and not self.paths:
            raise ValueError(f"{self.command} requires at least one path")

    def _validate_shell(self):
        """Validate completion receives a shell."""
        if self.command == COMMAND_COMPLETION and not self.shell:
            raise ValueError("completion requires a shell")

    def to_dict(self) -> dict:
        """Convert config to dictionary for debug output."""
        return {
            "path": self.path,
            "command": self.command,
            "paths": self.paths,
            "shell": self.shell,
            "verbose": self.verbose,
            "debug": self.debug,
        }
