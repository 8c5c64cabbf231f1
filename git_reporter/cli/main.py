"""Entry point for the git-reporter command."""

import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_reporter.cli.args import parse_args
from git_reporter.cli.completion import generate_completion
from git_reporter.config import Config
from git_reporter.constants import COMMAND_COMPLETION
from git_reporter.core import Reporter
from git_reporter.logging_config import get_logger, setup_logging
from git_reporter.services.display_service import DisplayService

console = Console(highlight=False, soft_wrap=True)
logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)
    display = DisplayService(console)

    try:
        config = Config(
            path=parsed_args.path,
            command=parsed_args.command,
            paths=list(getattr(parsed_args, "paths", [])),
            shell=getattr(parsed_args, "shell", None),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if config.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(str(value))}")

        if config.command == COMMAND_COMPLETION:
            # Plain write so the script is not wrapped or styled
            sys.stdout.write(generate_completion(config.shell))
            return 0

        Reporter(config, display).run()
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        logger.debug(f"Command failed: {e!r}")
        display.display_error(e)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
