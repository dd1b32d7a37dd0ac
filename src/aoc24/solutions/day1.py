"""
Day 1: Historian Hysteria.

Two columns of location IDs. Part 1 pairs them up smallest-to-smallest and sums the
distances, part 2 weights each left ID by how often it appears on the right.
"""

from dataclasses import dataclass
from typing import TextIO

import numpy as np

from aoc24.errors import ParseError
from aoc24.solution import Solution

_INT64 = np.iinfo(np.int64)


@dataclass(frozen=True)
class Lists:
    # Both sorted ascending.
    left: np.ndarray
    right: np.ndarray


class Day(Solution[Lists, int]):
    def parse(self, input: TextIO) -> Lists:
        left: list[int] = []
        right: list[int] = []

        for line in input:
            line = line.rstrip("\r\n")

            match line.split():
                case [a, b, *_]:
                    try:
                        pair = int(a), int(b)
                    except ValueError as e:
                        raise ParseError(f"Invalid number in line: {line}") from e
                    if not all(_INT64.min <= x <= _INT64.max for x in pair):
                        raise ParseError(f"Number out of range in line: {line}")
                    left.append(pair[0])
                    right.append(pair[1])
                case _:
                    raise ParseError(f"Invalid line format: {line}")

        return Lists(
            left=np.sort(np.array(left, dtype=np.int64)),
            right=np.sort(np.array(right, dtype=np.int64)),
        )

    def part1(self, data: Lists) -> int:
        # Python ints, since differences and products of int64 values can overflow.
        return int(np.abs(data.left.astype(object) - data.right.astype(object)).sum())

    def part2(self, data: Lists) -> int:
        values, counts = np.unique(data.right, return_counts=True)
        if len(values) == 0:
            return 0

        # Index of each left value among the distinct right values, if present.
        idx = np.clip(np.searchsorted(values, data.left), 0, len(values) - 1)
        occurrences = np.where(values[idx] == data.left, counts[idx], 0)
        return int((data.left.astype(object) * occurrences.astype(object)).sum())
