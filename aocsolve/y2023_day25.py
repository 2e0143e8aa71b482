"""Split a component graph into two groups joined by exactly three wires."""

from __future__ import annotations


def part_one(text: str) -> int:
    """Grow one group greedily until three wires remain; return the size product."""
    graph: dict[str, list[str]] = {}
    start: str | None = None
    for line in text.splitlines():
        if not line.strip():
            continue
        head, _, tail = line.partition(":")
        head = head.strip()
        if start is None:
            start = head
        for other in tail.split():
            graph.setdefault(head, []).append(other)
            graph.setdefault(other, []).append(head)

    if start is None:
        raise ValueError("graph is empty")

    component = {start}
    frontier: dict[tuple[str, str], None] = {
        (start, end): None for end in graph.get(start, [])
    }

    while len(frontier) > 3:
        chosen = None
        best_score = None
        for _, node in frontier:
            score = sum(-1 if end in component else 1 for end in graph[node])
            if best_score is None or score < best_score:
                best_score = score
                chosen = node

        component.add(chosen)
        for end in graph[chosen]:
            if end in component:
                frontier.pop((end, chosen), None)
            else:
                frontier[(chosen, end)] = None

    return len(component) * (len(graph) - len(component))