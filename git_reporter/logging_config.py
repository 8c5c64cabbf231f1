"""Logging setup: stderr for the console, a log file under --debug"""
import logging
import sys
from pathlib import Path

LOG_DIR_NAME = '.git-reporter'
LOG_FILE_NAME = 'git-reporter.log'

DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s [%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_PACKAGE_PREFIX = 'git_reporter.'


class LevelColorFormatter(logging.Formatter):
    """Colors the level name when the handler writes to a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }

    def __init__(self, fmt: str, datefmt: str = None, use_color: bool = False):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if not (self.use_color and color):
            return super().formatMessage(record)
        # Work on a copy so other handlers see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}\033[0m"
        return super().formatMessage(colored)


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def log_file_path() -> Path:
    return Path.home() / LOG_DIR_NAME / LOG_FILE_NAME


def _file_handler() -> logging.Handler:
    log_file = log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='w')  # overwritten each run
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level: int, debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(LevelColorFormatter(
        fmt=DEBUG_FORMAT if debug else CONSOLE_FORMAT,
        datefmt=DATE_FORMAT,
        use_color=sys.stderr.isatty(),
    ))
    return handler


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Replace the root logger's handlers for one command run.

    Args:
        verbose: Show INFO messages on stderr
        debug: Show DEBUG messages and mirror them to the log file
    """
    level = _level_for(verbose, debug)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        root_logger.addHandler(_file_handler())
    root_logger.addHandler(_console_handler(level, debug))


def get_logger(name: str) -> logging.Logger:
    """Logger named after the module, without the package prefix."""
    if name.startswith(_PACKAGE_PREFIX):
        name = name[len(_PACKAGE_PREFIX):]
    return logging.getLogger(name)
