"""Logging setup for the git-ai command line."""

import logging
import sys

import click


PREFIX = "[git-ai]"


class PrefixFormatter(logging.Formatter):
    """Formats records as a yellow [git-ai] prefix followed by the message."""

    def __init__(self, color: bool = True):
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = click.style(PREFIX, fg="yellow") if self.color else PREFIX
        if record.levelno >= logging.WARNING:
            return f"{prefix} {record.levelname.lower()}: {message}"
        return f"{prefix} {message}"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a stderr handler to the git_ai logger.

    Debug records are only shown when debug is on; warnings always are.
    Calling this more than once replaces the previous handler.
    """
    logger = logging.getLogger("git_ai")
    for handler in list(logger.handlers):
        if getattr(handler, "_git_ai", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(PrefixFormatter(color=sys.stderr.isatty()))
    handler._git_ai = True
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
