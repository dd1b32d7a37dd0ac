from pathlib import Path

from aoc24.registry import Registry, SolutionFn, solution_fn
from aoc24.solutions import day1

# Every implemented day. Add a line here when adding a `dayN` module.
SOLUTIONS: list[tuple[int, SolutionFn]] = [
    (1, solution_fn(day1.Day)),
]


def get_registry(inputs_dir: Path = Path("inputs")) -> Registry:
    return Registry(SOLUTIONS, inputs_dir=inputs_dir)
