"""Calibration equations solved by inserting operators evaluated left to right."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import product

Operator = Callable[[int, int], int]


def concat(a: int, b: int) -> int:
    """Join the decimal digits of ``a`` and ``b``."""
    return a * 10 ** len(str(abs(b))) + b


ADD: Operator = operator.add
MULTIPLY: Operator = operator.mul
CONCAT: Operator = concat


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that must combine to reach it."""

    result: int
    members: tuple[int, ...]

    def is_solvable(self, operators: Sequence[Operator]) -> bool:
        """Tell whether some choice of operators makes the members reach the result."""
        if not self.members:
            raise ValueError("equation has no numbers")
        first, *rest = self.members
        for chosen in product(operators, repeat=len(rest)):
            value = reduce(lambda acc, pair: pair[0](acc, pair[1]), zip(chosen, rest), first)
            if value == self.result:
                return True
        return False


def parse_equations(text: str) -> list[Equation]:
    """Parse lines such as ``190: 10 19``."""
    equations = []
    for line in text.split("\n"):
        if not line:
            continue
        result, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"malformed equation {line!r}")
        equations.append(Equation(int(result), tuple(int(member) for member in rest.split())))
    return equations


def _calibration(text: str, operators: Sequence[Operator]) -> int:
    return sum(eq.result for eq in parse_equations(text) if eq.is_solvable(operators))


def part_one(text: str) -> int:
    """Sum of results reachable with addition and multiplication."""
    return _calibration(text, (ADD, MULTIPLY))


def part_two(text: str) -> int:
    """Sum of results reachable with addition, multiplication and concatenation."""
    return _calibration(text, (ADD, MULTIPLY, CONCAT))