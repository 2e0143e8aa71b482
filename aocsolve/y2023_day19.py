"""Part sorting through workflows of comparison rules."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

CATEGORIES = ("x", "m", "a", "s")
_LOWEST, _HIGHEST = 1, 4000


@dataclass(frozen=True)
class Rule:
    """Send a part to ``target``, optionally only when a rating comparison holds."""

    target: str
    category: str | None = None
    op: str | None = None
    value: int = 0

    @property
    def has_condition(self) -> bool:
        return self.category is not None

    def matches(self, part: Mapping[str, int]) -> bool:
        """Tell whether the rule applies to a part with the given ratings."""
        if not self.has_condition:
            return True
        rating = part.get(self.category, 0)
        if self.op == "<":
            return rating < self.value
        if self.op == ">":
            return rating > self.value
        return False


def _parse_rule(text: str) -> Rule:
    if ":" not in text:
        return Rule(text)
    condition, target = text.split(":", 1)
    if len(condition) < 3:
        raise ValueError(f"malformed rule {text!r}")
    return Rule(target, condition[0], condition[1], int(condition[2:]))


def parse_workflows(lines: Iterable[str]) -> dict[str, list[Rule]]:
    """Parse workflow lines such as ``px{a<2006:qkq,m>2090:A,rfg}``.

    Parsing stops at the first blank line.
    """
    workflows: dict[str, list[Rule]] = {}
    for line in lines:
        if not line.strip():
            break
        name, brace, rest = line.partition("{")
        if not brace:
            raise ValueError(f"malformed workflow {line!r}")
        body = rest.split("}", 1)[0]
        workflows[name] = [_parse_rule(rule) for rule in body.split(",")]
    return workflows


def count_accepted(
    workflows: Mapping[str, list[Rule]],
    name: str,
    ranges: Mapping[str, tuple[int, int]],
) -> int:
    """Count rating combinations within ``ranges`` that end up accepted."""
    if name == "R":
        return 0
    if name == "A":
        return math.prod(max(0, high - low + 1) for low, high in ranges.values())

    remaining = dict(ranges)
    total = 0
    for rule in workflows[name]:
        if not rule.has_condition:
            total += count_accepted(workflows, rule.target, remaining)
            continue
        low, high = remaining[rule.category]
        if rule.op == "<":
            passing = (low, min(high, rule.value - 1))
            failing = (max(low, rule.value), high)
        elif rule.op == ">":
            passing = (max(low, rule.value + 1), high)
            failing = (low, min(high, rule.value))
        else:
            continue
        total += count_accepted(
            workflows, rule.target, {**remaining, rule.category: passing}
        )
        remaining[rule.category] = failing
    return total


def _parse_part(line: str) -> dict[str, int]:
    body = line.strip().lstrip("{").split("}", 1)[0]
    part = {}
    for field in body.split(","):
        key, _, value = field.partition("=")
        part[key] = int(value)
    return part


def _accepts(workflows: Mapping[str, list[Rule]], part: Mapping[str, int]) -> bool:
    name = "in"
    while name not in ("A", "R"):
        target = next(
            (rule.target for rule in workflows[name] if rule.matches(part)), None
        )
        if target is None:
            raise ValueError(f"no rule of workflow {name!r} applies")
        name = target
    return name == "A"


def part_one(text: str) -> int:
    """Sum the ratings of every accepted part."""
    lines = text.splitlines()
    workflows = parse_workflows(lines)
    blank = next((i for i, line in enumerate(lines) if not line.strip()), len(lines))
    parts = [_parse_part(line) for line in lines[blank + 1 :] if line.strip()]
    return sum(sum(part.values()) for part in parts if _accepts(workflows, part))


def part_two(text: str) -> int:
    """Count all rating combinations from 1 to 4000 that are accepted."""
    workflows = parse_workflows(text.splitlines())
    ranges = {category: (_LOWEST, _HIGHEST) for category in CATEGORIES}
    return count_accepted(workflows, "in", ranges)