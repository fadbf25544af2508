"""Logging configuration."""

import logging
from logging import Formatter, LogRecord, StreamHandler
import sys
from typing import Dict, NoReturn, Optional, TextIO


class ColorFormatter(Formatter):

    """Log formatter that prints bold, colorized level names."""

    COLORS = {
        logging.FATAL: 31,  # red
        logging.ERROR: 31,  # red
        logging.WARNING: 33,  # yellow
        logging.INFO: 32,  # green
        logging.DEBUG: 35,  # magenta
    }

    FORMAT = "%(message)s"

    def __init__(self, use_color: bool):  # pylint: disable=super-init-not-called
        self.default = Formatter(f"%(levelname)s: {self.FORMAT}")
        self.formatters: Dict[int, Formatter] = {}
        if use_color:
            for level, code in self.COLORS.items():
                fmt = f"\x1b[{code};1m%(levelname)s:\x1b[0m {self.FORMAT}"
                self.formatters[level] = Formatter(fmt)

    def format(self, record: LogRecord) -> str:
        formatter = self.formatters.get(record.levelno, self.default)
        return formatter.format(record)


class ExitStreamHandler(StreamHandler):

    """Stream handler that exits the program after severe logs.

    Exits with status 1 after emitting a record at exit_level or higher. The
    adjgraph command uses ERROR by default so that a bad graph file stops it,
    and FATAL with --keep-going.
    """

    def __init__(
        self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL
    ):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def verbosity_level(verbose: Optional[int]) -> int:
    """Map the number of -v flags to a log level."""
    if not verbose:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(stream: TextIO, log_level: int, exit_level: int) -> StreamHandler:
    """Set up the root logger and return the installed handler.

    Uses color if the stream is a TTY. The log_level must not be higher than
    exit_level, and the exit_level must not be higher than FATAL. A handler
    installed by an earlier call is replaced, not duplicated.
    """
    assert log_level <= exit_level
    assert exit_level <= logging.FATAL
    logger = logging.getLogger()
    logger.setLevel(log_level)
    for old in logger.handlers[:]:
        if isinstance(old, ExitStreamHandler):
            logger.removeHandler(old)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    logger.addHandler(handler)
    # FATAL and CRITICAL are the same. FATAL reads better next to exit codes.
    logging.addLevelName(logging.FATAL, "FATAL")
    return handler


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """A wrapper around logging.fatal.

    With setup_logging in place, fatal logs always exit. The NoReturn type lets
    checkers know the code after a call is unreachable.
    """
    logging.fatal(msg, *args, **kwargs)
    assert False  # convince mypy it will not return
