"""Lagoon volume from a dig plan, using the shoelace formula and Pick's theorem."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Point = tuple[int, int]

_OFFSETS = {"R": (1, 0), "L": (-1, 0), "U": (0, -1), "D": (0, 1)}
_HEX_DIRECTIONS = {"0": "R", "1": "D", "2": "L", "3": "U"}


def lagoon_area(points: Sequence[Point]) -> int:
    """Count the lattice cells inside and on a closed trench through ``points``.

    Fewer than three points do not form a polygon and give 0.
    """
    pts = list(points)
    if len(pts) < 3:
        return 0

    twice_area = 0
    boundary = 0
    for (x1, y1), (x2, y2) in zip(pts, pts[1:] + pts[:1]):
        twice_area += x1 * y2 - x2 * y1
        boundary += math.gcd(x1 - x2, y1 - y2)

    total = twice_area + boundary + 2
    return total // 2 if total >= 0 else -(-total // 2)


def _trace(steps: Iterable[tuple[str, int]]) -> list[Point]:
    x = y = 0
    points = []
    for direction, distance in steps:
        try:
            dx, dy = _OFFSETS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        x += dx * distance
        y += dy * distance
        points.append((x, y))
    return points


def _plain_steps(text: str):
    for line in text.splitlines():
        if not line.strip():
            continue
        direction, distance, *_ = line.split(" ")
        yield direction[:1], int(distance)


def _colour_steps(text: str):
    for line in text.splitlines():
        if not line.strip():
            continue
        code = line.split(" ")[2]
        try:
            direction = _HEX_DIRECTIONS[code[-2]]
        except (KeyError, IndexError):
            raise ValueError(f"bad colour code {code!r}") from None
        yield direction, int(code[2:-2], 16)


def part_one(text: str) -> int:
    """Lagoon size following the plain directions and distances."""
    return lagoon_area(_trace(_plain_steps(text)))


def part_two(text: str) -> int:
    """Lagoon size following the instructions hidden in the colour codes."""
    return lagoon_area(_trace(_colour_steps(text)))