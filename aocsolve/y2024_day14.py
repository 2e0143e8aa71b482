"""Security robots moving across a wrapping bathroom floor."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

WIDTH = 101
HEIGHT = 103
_SECONDS = 100
_SEARCH_LIMIT = 100000
_LINE_LENGTH = 8

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+)\s+v=(-?\d+),(-?\d+)")


@dataclass(frozen=True)
class Robot:
    """Starting position and velocity of one robot."""

    px: int
    py: int
    vx: int
    vy: int

    def position_after(self, seconds: int, width: int, height: int) -> tuple[int, int]:
        """Where the robot stands after ``seconds``, wrapping at the floor edges."""
        return (
            (self.px + seconds * self.vx) % width,
            (self.py + seconds * self.vy) % height,
        )


def parse_robots(text: str) -> list[Robot]:
    """Parse lines such as ``p=0,4 v=3,-3``."""
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROBOT.search(line)
        if not match:
            raise ValueError(f"malformed robot {line!r}")
        robots.append(Robot(*(int(value) for value in match.groups())))
    return robots


def safety_factor(
    robots: Iterable[Robot], width: int, height: int, seconds: int
) -> int:
    """Product of the robot counts in the four quadrants after ``seconds``.

    Robots on the middle row or column belong to no quadrant.
    """
    half_x, half_y = width // 2, height // 2
    counts: Counter[tuple[int, int]] = Counter()
    for robot in robots:
        x, y = robot.position_after(seconds, width, height)
        if x < half_x:
            column = 0
        elif x >= width - half_x:
            column = 1
        else:
            continue
        if y < half_y:
            row = 0
        elif y >= height - half_y:
            row = 1
        else:
            continue
        counts[(row, column)] += 1
    return math.prod(counts[quadrant] for quadrant in ((0, 0), (0, 1), (1, 0), (1, 1)))


def _has_line(occupied: set[tuple[int, int]]) -> bool:
    for x, y in occupied:
        if (x - 1, y) in occupied:
            continue
        run = 1
        while (x + run, y) in occupied:
            run += 1
            if run >= _LINE_LENGTH:
                return True
    return False


def _first_line(robots: Sequence[Robot], width: int, height: int) -> int:
    if len(robots) < _LINE_LENGTH:
        return 0
    # Positions repeat with this period, so later seconds bring nothing new.
    limit = min(_SEARCH_LIMIT, math.lcm(width, height))
    for seconds in range(1, limit + 1):
        occupied = {robot.position_after(seconds, width, height) for robot in robots}
        if _has_line(occupied):
            return seconds
    return 0


def part_one(text: str) -> int:
    """Safety factor after 100 seconds on the 101 by 103 floor."""
    return safety_factor(parse_robots(text), WIDTH, HEIGHT, _SECONDS)


def part_two(text: str) -> int:
    """First second at which eight or more robots stand side by side in a row.

    Returns 0 if that never happens within 100000 seconds.
    """
    return _first_line(parse_robots(text), WIDTH, HEIGHT)