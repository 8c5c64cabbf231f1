"""Command-line argument parsing for git-reporter."""

import argparse
from typing import List, Optional

import shtab

from git_reporter.__version__ import __version__
from git_reporter.constants import (
    COMMAND_COMPLETION,
    COMMAND_FREEZE,
    COMMAND_REPORT,
    COMMAND_UNFREEZE,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, including the completion subcommand."""
    parser = argparse.ArgumentParser(
        prog="git-reporter",
        description="Colorized status report for a git working tree",
        epilog="Without a subcommand the status report is printed. "
        "Frozen files are marked with a spare bit in the repository index.",
    )
    parser.add_argument(
        "-p",
        "--path",
        default=".",
        help="Repository location (default: current directory)",
    ).complete = shtab.DIRECTORY
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-reporter {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    freeze = subparsers.add_parser(COMMAND_FREEZE, help="Mark files as frozen")
    freeze.add_argument(
        "paths", nargs="+", metavar="PATH", help="Tracked files to freeze"
    ).complete = shtab.FILE

    unfreeze = subparsers.add_parser(COMMAND_UNFREEZE, help="Clear the frozen mark")
    unfreeze.add_argument(
        "paths", nargs="+", metavar="PATH", help="Tracked files to unfreeze"
    ).complete = shtab.FILE

    completion = subparsers.add_parser(
        COMMAND_COMPLETION, help="Print a shell completion script"
    )
    completion.add_argument("shell", choices=shtab.SUPPORTED_SHELLS, help="Target shell")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    args = build_parser().parse_args(argv)
    if args.command is None:
        args.command = COMMAND_REPORT
    return args
