import logging
import time
from abc import ABC, abstractmethod
from typing import TextIO

from rich.markup import escape

from aoc24 import output
from aoc24.log import TRACE

logger = logging.getLogger(__name__)

_DURATION_UNITS = [(1.0, "s"), (1e-3, "ms"), (1e-6, "µs")]


def format_duration(seconds: float) -> str:
    """
    Formats a duration with two decimals in the largest unit that keeps it at least 1,
    e.g. `1.50s`, `12.34ms`, `456.70µs` or `80.00ns`.
    """
    for scale, unit in _DURATION_UNITS:
        if seconds >= scale:
            return f"{seconds / scale:.2f}{unit}"
    return f"{seconds / 1e-9:.2f}ns"


class Solution[Input, Output](ABC):
    """
    A single day's solution.

    Subclasses implement `parse` and whichever of `part1` and `part2` they solve. A part
    that returns `None` is treated as not implemented and is skipped when running.
    """

    @abstractmethod
    def parse(self, input: TextIO) -> Input:
        """
        Reads the puzzle input. Raises `ParseError` if the input is malformed.
        """

    def part1(self, data: Input) -> Output | None:
        return None

    def part2(self, data: Input) -> Output | None:
        return None

    def run(self, input: TextIO, timing: bool) -> None:
        """
        Parses the input and prints the answer to each implemented part.

        With `timing`, the time taken by parsing and by each part is printed as
        soon as that step finishes.
        """
        start = time.perf_counter()
        data = self.parse(input)
        elapsed = time.perf_counter() - start
        logger.log(TRACE, "Parsed input in %s", format_duration(elapsed))

        if timing:
            output.console.print(f"  [bright_black]Parse time:[/bright_black] {format_duration(elapsed)}")

        for number, part in [(1, self.part1), (2, self.part2)]:
            start = time.perf_counter()
            answer = part(data)
            elapsed = time.perf_counter() - start
            logger.log(TRACE, "Part %d computed in %s", number, format_duration(elapsed))

            if answer is None:
                logger.debug("Part %d not implemented, skipping", number)
                continue

            output.console.print(f"  [bright_blue]Part {number}:[/bright_blue] {escape(str(answer))}")
            if timing:
                output.console.print(f"    [bright_black]Time:[/bright_black] {format_duration(elapsed)}")
