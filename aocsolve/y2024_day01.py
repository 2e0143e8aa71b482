"""Distance and similarity between two lists of location IDs."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Read the two columns, separated by three spaces.

    Lines that do not hold exactly two columns are skipped.
    """
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.split("\n")):
        columns = line.split("   ")
        if len(columns) != 2:
            continue
        try:
            first, second = int(columns[0]), int(columns[1])
        except ValueError as exc:
            raise ValueError(f"bad number on line {number} ({line!r}): {exc}") from None
        left.append(first)
        right.append(second)
    return left, right


def part_one(text: str) -> int:
    """Total distance between the lists once both are sorted."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(text: str) -> int:
    """Similarity score: each left number times its count in the right list."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)