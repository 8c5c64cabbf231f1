"""Shell completion script generation."""

import shtab

from git_reporter.cli.args import build_parser


def generate_completion(shell: str) -> str:
    """
    Render a completion script for the git-reporter command line.

    Args:
        shell: One of shtab.SUPPORTED_SHELLS

    Returns:
        The script text
    """
    return shtab.complete(build_parser(), shell=shell)
