import logging

import pytest

from aoc24 import output


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """
    Prints results without colour, to whatever `sys.stdout` is at the time.
    """
    monkeypatch.setattr(output, "console", output.make_console(color_system=None))
    monkeypatch.setattr(output, "errors", output.make_console(stderr=True, color_system=None))


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("aoc24")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
