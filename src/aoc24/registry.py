import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TextIO

from aoc24 import output
from aoc24.errors import AocError, DayNotImplementedError, InputUnavailableError
from aoc24.solution import Solution

logger = logging.getLogger(__name__)

# A type-erased solution: runs some day on an input stream, optionally printing timings.
type SolutionFn = Callable[[TextIO, bool], None]


def solution_fn(solution: type[Solution]) -> SolutionFn:
    """
    Wraps a `Solution` subclass so that it can be stored alongside days with different
    input and output types. Every call runs a fresh instance.
    """
    def run(input: TextIO, timing: bool) -> None:
        solution().run(input, timing)

    run.__name__ = f"run_{solution.__name__}"
    run.__doc__ = f"Runs `{solution.__module__}.{solution.__qualname__}`."
    return run


def open_input(path: Path) -> TextIO:
    try:
        return path.open("r", encoding="utf-8")
    except OSError as e:
        raise InputUnavailableError(path, e.strerror or str(e)) from e


class Registry:
    """
    The days that have solutions, keyed by day number.

    Built once from `(day, solution_fn)` pairs and never modified afterwards. If a day
    appears more than once, the last pair wins.
    """

    def __init__(self, solutions: Iterable[tuple[int, SolutionFn]], inputs_dir: Path = Path("inputs")) -> None:
        self._solutions: dict[int, SolutionFn] = dict(solutions)
        self.inputs_dir = inputs_dir
        logger.debug("Registered days: %s", self.available_days())

    def __contains__(self, day: object) -> bool:
        return day in self._solutions

    def __len__(self) -> int:
        return len(self._solutions)

    def available_days(self) -> list[int]:
        return sorted(self._solutions)

    def input_path(self, day: int) -> Path:
        return self.inputs_dir / f"day{day}.txt"

    def _lookup(self, day: int) -> SolutionFn:
        try:
            return self._solutions[day]
        except KeyError:
            raise DayNotImplementedError(day) from None

    def run_day(self, day: int, input: TextIO, timing: bool) -> None:
        run = self._lookup(day)
        logger.debug("Running day %d with %s", day, run.__name__)
        run(input, timing)

    def run_path(self, day: int, path: Path, timing: bool) -> None:
        """
        Runs a day on the contents of a file. Unknown days fail before the file is opened.
        """
        self._lookup(day)
        logger.info("Reading day %d input from %s", day, path)
        with open_input(path) as input:
            try:
                self.run_day(day, input, timing)
            except UnicodeDecodeError as e:
                raise InputUnavailableError(path, f"not valid UTF-8 at byte {e.start}") from e
            except OSError as e:
                if isinstance(e, AocError):
                    raise
                raise InputUnavailableError(path, e.strerror or str(e)) from e

    def run_all(self, timing: bool) -> None:
        """
        Runs every registered day in ascending order on its default input, stopping at
        the first day that fails.
        """
        for day in self.available_days():
            output.console.print(f"\n[bright_green]Day[/bright_green] {day}")
            self.run_path(day, self.input_path(day), timing)
