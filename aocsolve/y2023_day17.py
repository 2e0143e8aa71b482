"""Least heat loss route for a crucible moving through a grid of city blocks."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import count

Direction = tuple[int, int]

LEFT: Direction = (0, -1)
RIGHT: Direction = (0, 1)
UP: Direction = (-1, 0)
DOWN: Direction = (1, 0)

_DIRECTIONS = (LEFT, RIGHT, UP, DOWN)
_ROTATIONS = {
    LEFT: (UP, DOWN),
    RIGHT: (UP, DOWN),
    UP: (LEFT, RIGHT),
    DOWN: (LEFT, RIGHT),
}
_REVERSE = {LEFT: RIGHT, RIGHT: LEFT, UP: DOWN, DOWN: UP}

_State = tuple[int, int, Direction, int]


def min_heat_loss(
    grid: Sequence[Sequence[int]],
    max_consecutive: int,
    moves_needed_before_turn: int,
) -> int:
    """Return the least heat loss from the top-left to the bottom-right block.

    A crucible may move at most ``max_consecutive`` blocks in a straight line
    and must move at least ``moves_needed_before_turn`` blocks before turning
    or stopping. Raises ValueError when no route exists.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    rows, cols = len(grid), len(grid[0])

    starts: list[_State] = [(0, 0, RIGHT, 0), (0, 0, DOWN, 0)]
    best: dict[_State, int] = {state: 0 for state in starts}
    tie = count()
    heap = [(0, next(tie), state) for state in starts]
    heapq.heapify(heap)

    while heap:
        loss, _, state = heapq.heappop(heap)
        if best[state] < loss:
            continue
        row, col, direction, moves = state
        if row == rows - 1 and col == cols - 1 and moves >= moves_needed_before_turn:
            return loss

        for step in _DIRECTIONS:
            if step == _REVERSE[direction]:
                continue
            if moves == max_consecutive and step not in _ROTATIONS[direction]:
                continue

            if moves < moves_needed_before_turn:
                if step != direction:
                    continue
                next_moves = moves + 1
            elif step != direction:
                next_moves = 1
            else:
                next_moves = moves % max_consecutive + 1

            next_row, next_col = row + step[0], col + step[1]
            if not (0 <= next_row < rows and 0 <= next_col < cols):
                continue

            next_loss = loss + grid[next_row][next_col]
            next_state = (next_row, next_col, step, next_moves)
            if next_state in best and best[next_state] <= next_loss:
                continue
            best[next_state] = next_loss
            heapq.heappush(heap, (next_loss, next(tie), next_state))

    raise ValueError("no route reaches the bottom-right block")


def _parse_grid(text: str) -> list[list[int]]:
    return [[int(char) for char in line] for line in text.splitlines() if line]


def part_one(text: str) -> int:
    """Least heat loss for a normal crucible (at most three blocks straight)."""
    return min_heat_loss(_parse_grid(text), 3, 0)


def part_two(text: str) -> int:
    """Least heat loss for an ultra crucible (four to ten blocks straight)."""
    return min_heat_loss(_parse_grid(text), 10, 4)