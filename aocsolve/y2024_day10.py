"""Hiking trails on a topographic map that climb from height 0 to 9.

Input is expected to end with a newline; the text after the last newline
is not part of the map.
"""

from __future__ import annotations

from functools import cache

_NEIGHBOURS = ((-1, 0), (0, -1), (0, 1), (1, 0))
_PEAK = 9

Cell = tuple[int, int]


def _parse(text: str) -> list[list[int]]:
    lines = text.split("\n")[:-1]
    if not lines:
        raise ValueError("map is empty")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("map rows differ in length")
    return [[ord(char) - ord("0") for char in line] for line in lines]


class _Map:
    def __init__(self, text: str):
        self.heights = _parse(text)
        self.height = len(self.heights)
        self.width = len(self.heights[0])

    def trailheads(self) -> list[Cell]:
        return [
            (x, y)
            for y, row in enumerate(self.heights)
            for x, value in enumerate(row)
            if value == 0
        ]

    def uphill(self, cell: Cell) -> list[Cell]:
        x, y = cell
        level = self.heights[y][x]
        return [
            (nx, ny)
            for dx, dy in _NEIGHBOURS
            for nx, ny in ((x + dx, y + dy),)
            if 0 <= nx < self.width
            and 0 <= ny < self.height
            and self.heights[ny][nx] - level == 1
        ]

    def level(self, cell: Cell) -> int:
        return self.heights[cell[1]][cell[0]]


def part_one(text: str) -> int:
    """Sum over trailheads of the number of distinct peaks each can reach."""
    terrain = _Map(text)

    @cache
    def peaks(cell: Cell) -> frozenset[Cell]:
        found = frozenset({cell}) if terrain.level(cell) == _PEAK else frozenset()
        return found.union(*(peaks(step) for step in terrain.uphill(cell)))

    return sum(len(peaks(start)) for start in terrain.trailheads())


def part_two(text: str) -> int:
    """Sum over trailheads of the number of distinct trails to any peak."""
    terrain = _Map(text)

    @cache
    def trails(cell: Cell) -> int:
        here = 1 if terrain.level(cell) == _PEAK else 0
        return here + sum(trails(step) for step in terrain.uphill(cell))

    return sum(trails(start) for start in terrain.trailheads())