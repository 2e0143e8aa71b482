"""Sum of multiplication instructions in corrupted memory."""

from __future__ import annotations

import re

_MUL_TAIL = re.compile(r"ul\([^\S\n]*([+-]?\d+),[^\S\n]*([+-]?\d+)\)")


def _product_at(text: str, index: int) -> tuple[int | None, int]:
    """Try to read ``ul(a,b)`` at ``index``; return the product and the next index."""
    match = _MUL_TAIL.match(text, index)
    if not match:
        return None, index
    a, b = int(match.group(1)), int(match.group(2))
    if not (1 <= a <= 999 and 1 <= b <= 999):
        return None, match.end()
    return a * b, match.end()


def _scan(text: str, conditional: bool) -> int:
    total = 0
    enabled = True
    i = 0
    while i < len(text):
        char = text[i]
        i += 1
        if conditional and char == "d":
            word = text[i : i + 3]
            i += len(word)
            if word == "o()":
                enabled = True
            elif word == "on'":
                rest = text[i : i + 3]
                i += len(rest)
                if rest == "t()":
                    enabled = False
            continue
        if char == "m":
            product, i = _product_at(text, i)
            if product is not None and enabled:
                total += product
    return total


def part_one(text: str) -> int:
    """Sum every valid ``mul(a,b)`` with both numbers from 1 to 999."""
    return _scan(text, conditional=False)


def part_two(text: str) -> int:
    """Same sum, honouring ``do()`` and ``don't()`` switches."""
    return _scan(text, conditional=True)