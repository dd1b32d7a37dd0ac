"""
Helpers for testing solutions against the worked examples from the puzzle text.
"""

import io
import textwrap

from aoc24.solution import Solution


def solution_tests(solution: type[Solution], example: str, **expected: object) -> type:
    """
    Builds a pytest test class for a solution from an example input and the expected
    answer of each part, given as `part1=...` and/or `part2=...`.

    The example may be indented; common leading whitespace and surrounding blank lines
    are removed. Assign the result to a `Test*` name in a test module so pytest collects it:

        TestExample = solution_tests(Day, EXAMPLE, part1=11, part2=31)
    """
    unknown = set(expected) - {"part1", "part2"}
    assert not unknown, f"Unknown parts: {', '.join(sorted(unknown))}"

    text = textwrap.dedent(example).strip("\n") + "\n"

    def parse():
        return solution().parse(io.StringIO(text))

    def test_parse(self):
        parse()

    namespace = {"test_parse": test_parse}

    for part, answer in expected.items():
        def test_part(self, part=part, answer=answer):
            result = getattr(solution(), part)(parse())
            assert result is not None, f"{part} is not implemented"
            assert str(result) == str(answer)

        test_part.__name__ = f"test_{part}"
        namespace[test_part.__name__] = test_part

    return type(f"Test{solution.__name__}Example", (), namespace)
