"""Search for a way to combine whole numbers into a target value (the "24 game")."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import NamedTuple

DEFAULT_TARGET = 24


class Step(NamedTuple):
    """One arithmetic operation: ``left op right = result``."""

    left: int
    op: str
    right: int
    result: int

    def __str__(self) -> str:
        return f"{self.left} {self.op} {self.right} = {self.result}"


def _combinations(first: int, second: int) -> Iterator[Step]:
    """Yield the candidate operations for a pair, in search order."""
    yield Step(first, "+", second, first + second)
    yield Step(first, "*", second, first * second)
    if first > second:
        yield Step(first, "-", second, first - second)
        if second != 0 and first % second == 0:
            yield Step(first, "/", second, first // second)
    else:
        yield Step(second, "-", first, second - first)
        if first != 0 and second % first == 0:
            yield Step(second, "/", first, second // first)


def _search(values: list[int], target: int) -> list[Step] | None:
    last = len(values) - 1
    if last == 0 and values[0] == target:
        return []
    for i in range(last):
        first = values[i]
        remaining = values[:last]
        remaining[i] = values[last]
        for j in range(i, last):
            second = remaining[j]
            for step in _combinations(first, second):
                trial = list(remaining)
                trial[j] = step.result
                found = _search(trial, target)
                if found is not None:
                    return [step, *found]
    return None


def solve(numbers: Iterable[int], target: int = DEFAULT_TARGET) -> list[Step] | None:
    """Return the steps that reduce ``numbers`` to ``target``, or None.

    Only whole-number results are allowed: subtraction takes the larger value
    minus the smaller one and division must be exact.  Steps are listed in the
    order they are applied.
    """
    return _search(list(numbers), target)


def format_solution(steps: Sequence[Step]) -> str:
    """Render steps one per line, the final step first."""
    return "\n".join(str(step) for step in reversed(steps))


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_numbers() -> list[int]:
    tokens = _tokens(sys.stdin)
    print("Enter the number of numbers:")
    try:
        count = int(next(tokens))
    except StopIteration:
        raise SystemExit("expected the number of numbers") from None
    print("Enter the numbers:")
    numbers = [int(token) for token in islice(tokens, count)]
    if len(numbers) != count:
        raise SystemExit(f"expected {count} numbers, got {len(numbers)}")
    return numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Solve for 24 with numbers from the arguments, or from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    numbers = [int(arg) for arg in args] if args else _read_numbers()
    steps = solve(numbers)
    if steps is None:
        print("No Solution\n")
    elif steps:
        print(format_solution(steps))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())