"""Fencing prices for garden plot regions.

Input is expected to end with a newline; the text after the last newline
is not part of the map.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

Cell = tuple[int, int]

_NEIGHBOURS = ((-1, 0), (0, -1), (0, 1), (1, 0))
_CORNERS = {
    (1, 1): ((1, 0), (0, 1)),
    (-1, 1): ((-1, 0), (0, 1)),
    (1, -1): ((1, 0), (0, -1)),
    (-1, -1): ((-1, 0), (0, -1)),
}


class _Garden:
    def __init__(self, text: str):
        self.rows = text.split("\n")[:-1]
        if not self.rows:
            raise ValueError("map is empty")
        self.height = len(self.rows)
        self.width = len(self.rows[0])
        if any(len(row) != self.width for row in self.rows):
            raise ValueError("map rows differ in length")

    def inside(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def plant(self, cell: Cell) -> str:
        return self.rows[cell[1]][cell[0]]

    def same(self, first: Cell, second: Cell) -> bool:
        """Both outside the map, or both inside with the same plant."""
        first_in, second_in = self.inside(first), self.inside(second)
        if not first_in and not second_in:
            return True
        if first_in and second_in:
            return self.plant(first) == self.plant(second)
        return False

    def alike_neighbours(self, cell: Cell) -> list[Cell]:
        x, y = cell
        plant = self.plant(cell)
        return [
            (x + dx, y + dy)
            for dx, dy in _NEIGHBOURS
            if self.inside((x + dx, y + dy)) and self.plant((x + dx, y + dy)) == plant
        ]

    def corners(self, cell: Cell) -> int:
        x, y = cell
        total = 0
        for (cx, cy), ((ax, ay), (bx, by)) in _CORNERS.items():
            diagonal = (x + cx, y + cy)
            first_same = self.same((x + ax, y + ay), cell)
            second_same = self.same((x + bx, y + by), cell)
            if not first_same and not second_same:
                total += 1
            if first_same and second_same and not self.same(cell, diagonal):
                total += 1
        return total

    def regions(self) -> Iterator[list[Cell]]:
        seen: set[Cell] = set()
        for y in range(self.height):
            for x in range(self.width):
                if (x, y) in seen:
                    continue
                region = []
                queue = deque([(x, y)])
                seen.add((x, y))
                while queue:
                    cell = queue.popleft()
                    region.append(cell)
                    for neighbour in self.alike_neighbours(cell):
                        if neighbour not in seen:
                            seen.add(neighbour)
                            queue.append(neighbour)
                yield region


def part_one(text: str) -> int:
    """Total price of fencing, each region costing area times perimeter."""
    garden = _Garden(text)
    return sum(
        len(region)
        * sum(4 - len(garden.alike_neighbours(cell)) for cell in region)
        for region in garden.regions()
    )


def part_two(text: str) -> int:
    """Total price with bulk discount, each region costing area times sides."""
    garden = _Garden(text)
    return sum(
        len(region) * sum(garden.corners(cell) for cell in region)
        for region in garden.regions()
    )