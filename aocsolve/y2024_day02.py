"""Safety checks for reactor level reports."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def is_safe(levels: Sequence[int]) -> bool:
    """A report is safe when it strictly rises or falls by 1 to 3 at each step."""
    diffs = [b - a for a, b in pairwise(levels)]
    in_range = all(1 <= abs(diff) <= 3 for diff in diffs)
    return in_range and (all(d > 0 for d in diffs) or all(d < 0 for d in diffs))


def _reports(text: str):
    for line in text.splitlines():
        fields = line.split()
        if fields:
            yield [int(field) for field in fields]


def _safe_with_dampener(levels: list[int]) -> bool:
    return is_safe(levels) or any(
        is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels))
    )


def part_one(text: str) -> int:
    """Count the safe reports."""
    return sum(1 for levels in _reports(text) if is_safe(levels))


def part_two(text: str) -> int:
    """Count reports that are safe, or become safe when one level is removed."""
    return sum(1 for levels in _reports(text) if _safe_with_dampener(levels))