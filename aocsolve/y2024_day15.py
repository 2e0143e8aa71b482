"""A robot pushing boxes around a warehouse, plain and twice as wide.

Input is expected to end with a newline; the text after the last newline
is not part of the puzzle.
"""

from __future__ import annotations

_MOVES = {"^": (0, -1), "v": (0, 1), "<": (-1, 0), ">": (1, 0)}
_WIDEN = {"#": "##", "O": "[]", ".": "..", "@": "@."}
_BOXES = "O[]"

Cell = tuple[int, int]


def _parse(text: str) -> tuple[list[str], str]:
    lines = text.split("\n")[:-1]
    try:
        blank = lines.index("")
    except ValueError:
        return lines, ""
    return lines[:blank], "".join(lines[blank + 1 :])


def _box_cells(x: int, y: int, cell: str) -> tuple[Cell, ...]:
    if cell == "[":
        return (x, y), (x + 1, y)
    if cell == "]":
        return (x, y), (x - 1, y)
    return ((x, y),)


def _step(grid: list[list[str]], robot: Cell, move: str) -> Cell:
    """Move the robot once, pushing every box in the way; return its new cell."""
    if move not in _MOVES:
        return robot
    dx, dy = _MOVES[move]
    moving = [robot]
    seen = {robot}
    index = 0
    while index < len(moving):
        x, y = moving[index]
        index += 1
        nx, ny = x + dx, y + dy
        if not (0 <= ny < len(grid) and 0 <= nx < len(grid[ny])):
            return robot
        cell = grid[ny][nx]
        if cell == "#":
            return robot
        if cell in _BOXES:
            for part in _box_cells(nx, ny, cell):
                if part not in seen:
                    seen.add(part)
                    moving.append(part)

    contents = {(x, y): grid[y][x] for x, y in moving}
    for x, y in moving:
        grid[y][x] = "."
    for (x, y), char in contents.items():
        grid[y + dy][x + dx] = char
    return robot[0] + dx, robot[1] + dy


def _simulate(rows: list[str], moves: str, box: str) -> int:
    grid = [list(row) for row in rows]
    robot = next(
        ((x, y) for y, row in enumerate(grid) for x, char in enumerate(row) if char == "@"),
        None,
    )
    if robot is None:
        raise ValueError("no robot in the warehouse")
    for move in moves:
        robot = _step(grid, robot, move)
    return sum(
        x + 100 * y
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char == box
    )


def _widen(rows: list[str]) -> list[str]:
    wide = []
    for row in rows:
        try:
            wide.append("".join(_WIDEN[char] for char in row))
        except KeyError as exc:
            raise ValueError(f"unknown warehouse tile {exc.args[0]!r}") from None
    return wide


def part_one(text: str) -> int:
    """Sum of box GPS coordinates after the robot finishes moving."""
    rows, moves = _parse(text)
    return _simulate(rows, moves, "O")


def part_two(text: str) -> int:
    """Same sum in the warehouse widened to twice its width."""
    rows, moves = _parse(text)
    return _simulate(_widen(rows), moves, "[")