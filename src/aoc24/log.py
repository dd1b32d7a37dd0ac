"""
The diagnostic channel: standard `logging`, rendered on stderr by rich.
"""

import enum
import logging

from rich.console import Console
from rich.logging import RichHandler

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class LogLevel(enum.StrEnum):
    OFF = "off"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    @property
    def level(self) -> int:
        return {
            LogLevel.OFF: logging.CRITICAL + 10,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.TRACE: TRACE,
        }[self]


def configure(log_level: LogLevel) -> None:
    """
    Routes the `aoc24` loggers to stderr at the given level. Calling this again replaces
    the previous configuration.
    """
    root = logging.getLogger("aoc24")
    root.setLevel(log_level.level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setLevel(log_level.level)
    root.addHandler(handler)
    root.propagate = False
