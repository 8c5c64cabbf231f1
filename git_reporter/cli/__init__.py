"""Command-line interface for git-reporter.

This package provides the CLI entry point, argument parsing and
completion script generation.
"""

from .main import main
from .args import build_parser, parse_args

__all__ = ["main", "build_parser", "parse_args"]
