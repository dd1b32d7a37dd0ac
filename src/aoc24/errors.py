"""
Errors raised by the harness and by day solutions.

Everything derives from `AocError`, so the command line has a single thing to catch.
"""

from pathlib import Path


class AocError(Exception):
    pass


class ParseError(AocError, ValueError):
    """
    The input text does not have the shape a day expects.
    """


class DayNotImplementedError(AocError, LookupError):
    def __init__(self, day: int) -> None:
        super().__init__(f"Day {day} not implemented")
        self.day = day


class InputUnavailableError(AocError, OSError):
    """
    The input for a day could not be opened or read.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read input {path}: {reason}")
        self.path = path
