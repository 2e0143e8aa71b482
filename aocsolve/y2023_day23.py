"""Longest hike through a forest map with steep one-way slopes."""

from __future__ import annotations

_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_SLOPES = {"^": (0, -1), ">": (1, 0), "v": (0, 1), "<": (-1, 0)}


def _parse(text: str) -> list[str]:
    grid = [line for line in text.splitlines() if line]
    if not grid:
        raise ValueError("map is empty")
    return grid


def part_one(text: str) -> int:
    """Longest walk from the top opening that never climbs a slope.

    Each cell is entered at most once. The walk is measured in steps.
    """
    grid = _parse(text)
    end_x, end_y = len(grid[0]) - 2, len(grid) - 1
    visited: set[tuple[int, int]] = set()
    stack: list[list[int]] = []

    def blocked(x: int, y: int, from_x: int, from_y: int) -> bool:
        if not (0 <= x <= end_x and 0 <= y <= end_y):
            return True
        if (x, y) in visited:
            return True
        cell = grid[y][x]
        if cell == "#":
            return True
        slope = _SLOPES.get(cell)
        return slope is not None and (from_x, from_y) == (x + slope[0], y + slope[1])

    def enter(x: int, y: int, from_x: int, from_y: int) -> int | None:
        """Return the value of a cell that needs no exploring, else open a frame."""
        if (x, y) == (end_x, end_y):
            return 1
        if blocked(x, y, from_x, from_y):
            return 0
        visited.add((x, y))
        stack.append([x, y, 0, 0])
        return None

    first = enter(1, 0, 1, 0)
    if first is not None:
        return first - 1

    while True:
        frame = stack[-1]
        x, y, direction, best = frame
        if direction < len(_STEPS):
            frame[2] += 1
            dx, dy = _STEPS[direction]
            value = enter(x + dx, y + dy, x, y)
            if value is not None:
                frame[3] = max(best, value)
            continue
        stack.pop()
        visited.discard((x, y))
        value = best + 1
        if not stack:
            return value - 1
        stack[-1][3] = max(stack[-1][3], value)


def _drop_edge(edges: list[tuple[int, int]], node: int) -> None:
    for i, (target, _) in enumerate(edges):
        if target == node:
            del edges[i]
            return


def _simplify(graph: dict[int, list[tuple[int, int]]]) -> None:
    """Merge every node with exactly two neighbours into a single weighted edge."""
    for node in sorted(graph):
        neighbours = graph.get(node)
        if neighbours is None or len(neighbours) != 2:
            continue
        (first, first_dist), (second, second_dist) = neighbours
        dist = first_dist + second_dist
        _drop_edge(graph.setdefault(first, []), node)
        _drop_edge(graph.setdefault(second, []), node)
        del graph[node]
        graph.setdefault(first, []).append((second, dist))
        graph.setdefault(second, []).append((first, dist))


def part_two(text: str) -> int:
    """Longest hike when slopes can be walked like ordinary paths."""
    grid = _parse(text)
    end_x, end_y = len(grid[0]) - 2, len(grid) - 1
    width = end_x + 1

    graph: dict[int, list[tuple[int, int]]] = {}
    for y in range(end_y + 1):
        for x in range(width):
            if grid[y][x] == "#":
                continue
            for dx, dy in _STEPS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx <= end_x and 0 <= ny <= end_y) or grid[ny][nx] == "#":
                    continue
                graph.setdefault(y * width + x, []).append((ny * width + nx, 1))

    _simplify(graph)

    target = end_y * width + end_x
    visited: set[int] = set()

    def walk(node: int, dist: int) -> int:
        if node in visited:
            return 0
        if node == target:
            return dist
        visited.add(node)
        best = 0
        for neighbour, weight in graph.get(node, ()):
            if neighbour in visited:
                continue
            path = walk(neighbour, weight)
            if path == 0:
                continue
            best = max(best, path + dist)
        visited.discard(node)
        return best

    return walk(1, 1)