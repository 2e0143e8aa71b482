"""Antinodes created by pairs of antennas on the same frequency.

Input is expected to end with a newline; the text after the last newline
is not part of the map.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

_HARMONICS = range(1, 25)


def _antinodes(text: str, factors: Iterable[int]) -> int:
    lines = text.split("\n")[:-1]
    if not lines:
        raise ValueError("map is empty")
    height, width = len(lines), len(lines[0])
    factors = tuple(factors)

    antennas: dict[str, list[tuple[int, int]]] = {}
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != ".":
                antennas.setdefault(char, []).append((x, y))

    found: set[tuple[int, int]] = set()
    for positions in antennas.values():
        for (ax, ay), (bx, by) in combinations(positions, 2):
            dx, dy = bx - ax, by - ay
            for k in factors:
                for point in ((ax + k * dx, ay + k * dy), (bx - k * dx, by - k * dy)):
                    if 0 <= point[0] < width and 0 <= point[1] < height:
                        found.add(point)
    return len(found)


def part_one(text: str) -> int:
    """Cells twice as far from one antenna of a pair as from the other."""
    return _antinodes(text, (2,))


def part_two(text: str) -> int:
    """Cells in line with a pair at whole multiples of their spacing."""
    return _antinodes(text, _HARMONICS)