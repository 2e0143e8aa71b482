"""Fewest tokens to win prizes from claw machines with two buttons."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_BUTTON_A = re.compile(r"Button A: X\+(-?\d+), Y\+(-?\d+)")
_BUTTON_B = re.compile(r"Button B: X\+(-?\d+), Y\+(-?\d+)")
_PRIZE = re.compile(r"Prize: X=(-?\d+), Y=(-?\d+)")
_FAR_OFFSET = 10000000000000


@dataclass(frozen=True)
class ClawMachine:
    """Button movements and prize location of one machine."""

    ax: int
    ay: int
    bx: int
    by: int
    gx: int
    gy: int

    def tokens(self) -> int:
        """Tokens needed to reach the prize (A costs 3, B costs 1), or 0 if impossible.

        Raises ValueError when the two buttons move along the same line.
        """
        det = self.ax * self.by - self.ay * self.bx
        if det == 0:
            raise ValueError("button movements are collinear")
        a_num = self.by * self.gx - self.bx * self.gy
        b_num = self.ay * self.gx - self.ax * self.gy
        if a_num % det or b_num % det:
            return 0
        return (a_num // det) * 3 + b_num // -det


def _read(pattern: re.Pattern[str], line: str) -> tuple[int, int]:
    match = pattern.search(line)
    if not match:
        raise ValueError(f"malformed line {line!r}")
    return int(match.group(1)), int(match.group(2))


def parse_machines(text: str) -> list[ClawMachine]:
    """Parse blocks of three lines: button A, button B and the prize."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) % 3:
        raise ValueError("each machine needs three lines")
    machines = []
    for start in range(0, len(lines), 3):
        ax, ay = _read(_BUTTON_A, lines[start])
        bx, by = _read(_BUTTON_B, lines[start + 1])
        gx, gy = _read(_PRIZE, lines[start + 2])
        machines.append(ClawMachine(ax, ay, bx, by, gx, gy))
    return machines


def part_one(text: str) -> int:
    """Total tokens to win every winnable prize."""
    return sum(machine.tokens() for machine in parse_machines(text))


def part_two(text: str) -> int:
    """Total tokens with every prize moved 10000000000000 further on both axes."""
    return sum(
        replace(machine, gx=machine.gx + _FAR_OFFSET, gy=machine.gy + _FAR_OFFSET).tokens()
        for machine in parse_machines(text)
    )