"""Falling sand bricks: which can be removed and how many fall in a chain."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

Point = tuple[int, int, int]

_BRICK = re.compile(r"^\s*(\d+),(\d+),(\d+)~(\d+),(\d+),(\d+)\s*$")


@dataclass(frozen=True)
class Brick:
    """A brick spanning the cells between two corners, inclusive."""

    index: int
    start: Point
    end: Point

    @property
    def bottom(self) -> int:
        return min(self.start[2], self.end[2])

    @property
    def top(self) -> int:
        return max(self.start[2], self.end[2])

    def footprint(self) -> Iterator[tuple[int, int]]:
        """The (x, y) columns the brick covers."""
        for x in range(min(self.start[0], self.end[0]), max(self.start[0], self.end[0]) + 1):
            for y in range(min(self.start[1], self.end[1]), max(self.start[1], self.end[1]) + 1):
                yield x, y

    def cells(self) -> Iterator[Point]:
        for x, y in self.footprint():
            for z in range(self.bottom, self.top + 1):
                yield x, y, z

    def lowered_to(self, z: int) -> Brick:
        """The same brick moved so that its bottom sits at height ``z``."""
        shift = z - self.bottom
        return replace(
            self,
            start=(self.start[0], self.start[1], self.start[2] + shift),
            end=(self.end[0], self.end[1], self.end[2] + shift),
        )


def parse_bricks(text: str) -> list[Brick]:
    """Parse lines such as ``1,0,1~1,2,1``."""
    bricks = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _BRICK.match(line)
        if not match:
            raise ValueError(f"malformed brick {line!r}")
        values = [int(group) for group in match.groups()]
        bricks.append(Brick(len(bricks), tuple(values[:3]), tuple(values[3:])))
    return bricks


def settle(bricks: Iterable[Brick]) -> tuple[list[Brick], dict[int, set[int]]]:
    """Let every brick fall; return the settled bricks and who supports whom.

    The second value maps each brick index to the indices of the bricks
    directly beneath it.
    """
    occupied: dict[Point, int] = {}
    supported_by: dict[int, set[int]] = {}
    settled = []

    for brick in sorted(bricks, key=lambda b: b.bottom):
        columns = list(brick.footprint())
        z = brick.bottom
        while True:
            below = {occupied[(x, y, z)] for x, y in columns if (x, y, z) in occupied}
            if below:
                rest = z + 1
                break
            if z == 0:
                rest = 0
                break
            z -= 1
        supported_by[brick.index] = below
        placed = brick.lowered_to(rest)
        for cell in placed.cells():
            occupied[cell] = placed.index
        settled.append(placed)

    return settled, supported_by


def _supporting(supported_by: dict[int, set[int]]) -> dict[int, list[int]]:
    supporting: dict[int, list[int]] = {}
    for upper, lowers in supported_by.items():
        for lower in lowers:
            supporting.setdefault(lower, []).append(upper)
    return supporting


def part_one(text: str) -> int:
    """Count bricks that can be removed without any other brick falling."""
    settled, supported_by = settle(parse_bricks(text))
    supporting = _supporting(supported_by)
    return sum(
        1
        for brick in settled
        if all(len(supported_by[upper]) != 1 for upper in supporting.get(brick.index, []))
    )


def _chain(index: int, supporting: dict[int, list[int]], supported_by: dict[int, set[int]]) -> int:
    falling: set[int] = set()
    queue = deque([index])
    while queue:
        current = queue.popleft()
        for upper in supporting.get(current, []):
            if upper in falling:
                continue
            if all(
                lower == current or lower in falling for lower in supported_by[upper]
            ):
                falling.add(upper)
                queue.append(upper)
    return len(falling)


def part_two(text: str) -> int:
    """Sum, over every brick, of how many other bricks fall when it is removed."""
    settled, supported_by = settle(parse_bricks(text))
    supporting = _supporting(supported_by)
    return sum(_chain(brick.index, supporting, supported_by) for brick in settled)