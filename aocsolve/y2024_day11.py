"""Stones that change with every blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_MULTIPLIER = 2024


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * _MULTIPLIER,)


def blink_count(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after blinking ``blinks`` times."""
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, amount in counts.items():
            for new in _blink(stone):
                following[new] += amount
        counts = following
    return sum(counts.values())


def _parse(text: str) -> list[int]:
    return [int(field) for field in text.split()]


def part_one(text: str) -> int:
    """Stones after 25 blinks."""
    return blink_count(_parse(text), 25)


def part_two(text: str) -> int:
    """Stones after 75 blinks."""
    return blink_count(_parse(text), 75)