"""Page ordering rules for safety manual updates."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_RULE = re.compile(r"^\s*(-?\d+)\|(-?\d+)")


@dataclass(frozen=True)
class Rule:
    """Page ``first`` must be printed before page ``second`` when both appear."""

    first: int
    second: int

    def _positions(self, pages: Sequence[int]) -> tuple[int | None, int | None]:
        first = second = None
        for index, page in enumerate(pages):
            if page == self.first:
                first = index
            if page == self.second:
                second = index
        return first, second

    def verify(self, pages: Sequence[int]) -> bool:
        """Tell whether the update respects this rule."""
        first, second = self._positions(pages)
        if first is None or second is None:
            return True
        return first <= second

    def apply(self, pages: list[int]) -> list[int]:
        """Swap the two pages in place if they break the rule; return the list."""
        first, second = self._positions(pages)
        if first is not None and second is not None and first > second:
            pages[first], pages[second] = pages[second], pages[first]
        return pages


def _follows_all(rules: Iterable[Rule], pages: Sequence[int]) -> bool:
    return all(rule.verify(pages) for rule in rules)


def parse_manual(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Read the ordering rules, a blank line, then the comma-separated updates."""
    lines = iter(text.splitlines())
    rules = []
    for line in lines:
        if not line:
            break
        match = _RULE.match(line)
        if not match:
            raise ValueError(f"malformed rule {line!r}")
        rules.append(Rule(int(match.group(1)), int(match.group(2))))

    updates = []
    for line in lines:
        if not line:
            break
        updates.append([int(page) for page in line.split(",")])
    return rules, updates


def _middle(pages: Sequence[int]) -> int:
    return pages[len(pages) // 2]


def part_one(text: str) -> int:
    """Sum of the middle pages of updates already in the right order."""
    rules, updates = parse_manual(text)
    return sum(_middle(pages) for pages in updates if _follows_all(rules, pages))


def part_two(text: str) -> int:
    """Sum of the middle pages of misordered updates once they are reordered."""
    rules, updates = parse_manual(text)
    total = 0
    for pages in updates:
        if _follows_all(rules, pages):
            continue
        while not _follows_all(rules, pages):
            for rule in rules:
                rule.apply(pages)
        total += _middle(pages)
    return total