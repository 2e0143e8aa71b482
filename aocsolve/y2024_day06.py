"""A patrolling guard: cells covered, and obstructions that trap it in a loop.

Input is expected to end with a newline; the text after the last newline
is not part of the map.
"""

from __future__ import annotations

_GUARD = "^"
_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))

Cell = tuple[int, int]


def _parse(text: str) -> tuple[list[str], int, int]:
    grid = text.split("\n")[:-1]
    for y, row in enumerate(grid):
        x = row.find(_GUARD)
        if x >= 0:
            return grid, x, y
    raise ValueError("no guard on the map")


def _patrol(grid: list[str], x: int, y: int, obstruction: Cell | None = None) -> set[Cell] | None:
    """Cells the guard covers before leaving the map, or None if it loops."""
    height, width = len(grid), len(grid[0])
    direction = 0
    seen: set[tuple[int, int, int]] = set()
    while True:
        state = (x, y, direction)
        if state in seen:
            return None
        seen.add(state)
        dx, dy = _DIRECTIONS[direction]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < width and 0 <= ny < height):
            return {(sx, sy) for sx, sy, _ in seen}
        if grid[ny][nx] == "#" or (nx, ny) == obstruction:
            direction = (direction + 1) % 4
        else:
            x, y = nx, ny


def part_one(text: str) -> int:
    """Number of distinct cells the guard visits before leaving the map."""
    grid, x, y = _parse(text)
    visited = _patrol(grid, x, y)
    if visited is None:
        raise ValueError("the guard never leaves the map")
    return len(visited)


def part_two(text: str) -> int:
    """Number of cells where one new obstruction makes the guard loop forever."""
    grid, x, y = _parse(text)
    visited = _patrol(grid, x, y)
    if visited is None:
        raise ValueError("the guard never leaves the map")
    return sum(
        1
        for cx, cy in visited
        if grid[cy][cx] == "." and (cx, cy) != (x, y) and _patrol(grid, x, y, (cx, cy)) is None
    )