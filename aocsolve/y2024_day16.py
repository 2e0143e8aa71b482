"""Cheapest routes for a reindeer through a maze, where turning is expensive.

Input is expected to end with a newline; the text after the last newline
is not part of the maze.
"""

from __future__ import annotations

import heapq
from collections import deque

State = tuple[int, int, int]

_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_RIGHT = 1
_MOVE_COST = 1
_TURN_COST = 1000


def _turn_cost(facing: int, heading: int) -> int:
    quarter_turns = (heading - facing) % 4
    return _TURN_COST * min(quarter_turns, 4 - quarter_turns)


def _parse(text: str) -> tuple[list[str], int, int]:
    grid = text.split("\n")[:-1]
    for y, row in enumerate(grid):
        x = row.find("S")
        if x >= 0:
            return grid, x, y
    raise ValueError("no start tile in maze")


def _open(grid: list[str], x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y]) and grid[y][x] in ".E"


def _search(grid: list[str], start_x: int, start_y: int) -> dict[State, int]:
    start = (start_x, start_y, _RIGHT)
    dist = {start: 0}
    heap = [(0, start)]
    while heap:
        cost, state = heapq.heappop(heap)
        if cost > dist[state]:
            continue
        x, y, facing = state
        if grid[y][x] == "E":
            continue
        for heading, (dx, dy) in enumerate(_STEPS):
            nx, ny = x + dx, y + dy
            if not _open(grid, nx, ny):
                continue
            following = (nx, ny, heading)
            total = cost + _MOVE_COST + _turn_cost(facing, heading)
            if total < dist.get(following, total + 1):
                dist[following] = total
                heapq.heappush(heap, (total, following))
    return dist


def _best(grid: list[str], dist: dict[State, int]) -> int:
    finals = [cost for (x, y, _), cost in dist.items() if grid[y][x] == "E"]
    if not finals:
        raise ValueError("the end tile cannot be reached")
    return min(finals)


def part_one(text: str) -> int:
    """Lowest score from the start, facing east, to the end tile."""
    grid, x, y = _parse(text)
    dist = _search(grid, x, y)
    return _best(grid, dist)


def part_two(text: str) -> int:
    """Number of tiles that lie on at least one lowest-score route."""
    grid, x, y = _parse(text)
    dist = _search(grid, x, y)
    best = _best(grid, dist)

    ends = [
        state
        for state, cost in dist.items()
        if cost == best and grid[state[1]][state[0]] == "E"
    ]
    on_route = set(ends)
    queue = deque(ends)
    while queue:
        cx, cy, heading = queue.popleft()
        dx, dy = _STEPS[heading]
        px, py = cx - dx, cy - dy
        for facing in range(4):
            previous = (px, py, facing)
            if previous in on_route or previous not in dist:
                continue
            if grid[py][px] == "E":
                continue
            if dist[previous] + _MOVE_COST + _turn_cost(facing, heading) == dist[(cx, cy, heading)]:
                on_route.add(previous)
                queue.append(previous)
    return len({(sx, sy) for sx, sy, _ in on_route})