"""Word search for XMAS and for crossed MAS shapes.

Input is expected to end with a newline; the text after the last newline
is not part of the grid.
"""

from __future__ import annotations

from collections import Counter

_WORD = "MAS"
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1), (-1, -1), (-1, 1), (1, -1), (1, 1))
_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _lines(text: str) -> list[str]:
    return text.split("\n")[:-1]


def _in_grid(lines: list[str], i: int, j: int) -> bool:
    return 0 <= i < len(lines) and 0 <= j < len(lines[i])


def _spells(lines: list[str], i: int, j: int, di: int, dj: int) -> bool:
    for char in _WORD:
        i += di
        j += dj
        if not _in_grid(lines, i, j) or lines[i][j] != char:
            return False
    return True


def _is_x_mas(lines: list[str], i: int, j: int) -> bool:
    corners = {
        (di, dj): lines[i + di][j + dj]
        for di, dj in _DIAGONALS
        if _in_grid(lines, i + di, j + dj)
    }
    counts = Counter(corners.values())
    if counts["M"] != 2 or counts["S"] != 2:
        return False
    return corners[(-1, -1)] != corners[(1, 1)]


def part_one(text: str) -> int:
    """Count XMAS in every direction, including backwards and diagonally."""
    lines = _lines(text)
    return sum(
        _spells(lines, i, j, di, dj)
        for i, line in enumerate(lines)
        for j, char in enumerate(line)
        if char == "X"
        for di, dj in _DIRECTIONS
    )


def part_two(text: str) -> int:
    """Count A cells at the centre of two crossing MAS words."""
    lines = _lines(text)
    return sum(
        _is_x_mas(lines, i, j)
        for i, line in enumerate(lines)
        for j, char in enumerate(line)
        if char == "A"
    )