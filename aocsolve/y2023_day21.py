"""Garden plots an elf can reach in an exact number of steps."""

from __future__ import annotations

from collections.abc import Sequence

_PART_ONE_STEPS = 64
_PART_TWO_STEPS = 26501365


def _count(
    grid: Sequence[str], start_x: int, start_y: int, max_steps: int, wrap: bool
) -> int:
    if max_steps < 0:
        return 0
    height, width = len(grid), len(grid[0])
    parity = max_steps % 2
    seen = {(start_x, start_y)}
    frontier = [(start_x, start_y)]
    total = 1 if parity == 0 else 0

    for step in range(1, max_steps + 1):
        reached = []
        for x, y in frontier:
            for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                if (nx, ny) in seen:
                    continue
                if wrap:
                    cell = grid[ny % height][nx % width]
                elif 0 <= nx < width and 0 <= ny < height:
                    cell = grid[ny][nx]
                else:
                    continue
                if cell == "#":
                    continue
                seen.add((nx, ny))
                reached.append((nx, ny))
        if not reached:
            break
        if step % 2 == parity:
            total += len(reached)
        frontier = reached
    return total


def count_reachable(
    grid: Sequence[str], start_x: int, start_y: int, max_steps: int
) -> int:
    """Plots reachable in exactly ``max_steps`` on the grid tiled without end."""
    return _count(grid, start_x, start_y, max_steps, wrap=True)


def _parse(text: str) -> tuple[list[str], int, int]:
    grid = [line for line in text.splitlines() if line]
    if not grid:
        raise ValueError("grid is empty")
    for y, row in enumerate(grid):
        x = row.find("S")
        if x >= 0:
            return grid, x, y
    raise ValueError("no starting position in grid")


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def part_one(text: str, steps: int = _PART_ONE_STEPS) -> int:
    """Plots reachable in exactly ``steps`` steps within the single map."""
    grid, x, y = _parse(text)
    return _count(grid, x, y, steps, wrap=False)


def part_two(text: str) -> int:
    """Plots reachable in 26501365 steps, extrapolated with a quadratic fit."""
    grid, x, y = _parse(text)
    size = len(grid)
    offset = _PART_TWO_STEPS % size

    a = count_reachable(grid, x, y, offset)
    b = count_reachable(grid, x, y, offset + size)
    c = count_reachable(grid, x, y, offset + 2 * size)

    first = b - a
    second = c - b
    quad = _trunc_div(second - first, 2)
    lin = first - 3 * quad
    const = a - lin - quad

    n = -(-_PART_TWO_STEPS // size)
    return quad * n * n + lin * n + const