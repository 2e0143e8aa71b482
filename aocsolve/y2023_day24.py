"""Hailstone paths: crossings in a test area and the rock that hits them all."""

from __future__ import annotations

import re
import subprocess
import tempfile
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path

_TEST_AREA_MIN = 200000000000000
_TEST_AREA_MAX = 400000000000000

_HAILSTONE = re.compile(
    r"^\s*(-?\d+),\s*(-?\d+),\s*(-?\d+)\s*@\s*(-?\d+),\s*(-?\d+),\s*(-?\d+)\s*$"
)
_Z3_VALUES = re.compile(
    r"^sat\s*\(\(rx (-?\d+)\.0\)\s*\(ry (-?\d+)\.0\)\s*\(rz (-?\d+)\.0\)\)"
)


@dataclass(frozen=True)
class Hailstone:
    """Starting position and velocity of one hailstone."""

    px: int
    py: int
    pz: int
    vx: int
    vy: int
    vz: int


def parse_hailstones(text: str) -> list[Hailstone]:
    """Parse lines such as ``19, 13, 30 @ -2, 1, -2``."""
    hailstones = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _HAILSTONE.match(line)
        if not match:
            raise ValueError(f"malformed hailstone {line!r}")
        hailstones.append(Hailstone(*(int(value) for value in match.groups())))
    return hailstones


def _crossing(first: Hailstone, second: Hailstone) -> tuple[float, float, float, float] | None:
    if first.vx == 0 or second.vx == 0:
        return None
    slope = first.vy / first.vx
    intercept = first.py - slope * first.px
    other_slope = second.vy / second.vx
    other_intercept = second.py - other_slope * second.px
    if slope == other_slope:
        return None
    x = (other_intercept - intercept) / (slope - other_slope)
    y = slope * x + intercept
    t = (x - first.px) / first.vx
    other_t = (x - second.px) / second.vx
    return x, y, t, other_t


def count_intersections(hailstones: Sequence[Hailstone], low: float, high: float) -> int:
    """Count pairs whose future x-y paths cross strictly inside the test area."""
    total = 0
    for first, second in combinations(hailstones, 2):
        crossing = _crossing(first, second)
        if crossing is None:
            continue
        x, y, t, other_t = crossing
        if low < x < high and low < y < high and t > 0 and other_t > 0:
            total += 1
    return total


def z3_script(hailstones: Sequence[Hailstone]) -> str:
    """An SMT-LIB script for the rock position, constrained by three hailstones."""
    lines = [
        f"(declare-const {name} Real)"
        for name in ("rx", "ry", "rz", "rvx", "rvy", "rvz")
    ]
    for i, stone in enumerate(hailstones[:3]):
        lines.append(f"(declare-const t{i} Real)")
        for axis, position, velocity in (
            ("x", stone.px, stone.vx),
            ("y", stone.py, stone.vy),
            ("z", stone.pz, stone.vz),
        ):
            lines.append(
                f"(assert (= (+ r{axis} (* rv{axis} t{i})) "
                f"(+ {position} (* {velocity} t{i}))))"
            )
    lines.append("(check-sat)")
    lines.append("(get-value (rx ry rz))")
    return "\n".join(lines) + "\n"


def part_one(text: str) -> int:
    """Future crossings inside the standard test area."""
    return count_intersections(parse_hailstones(text), _TEST_AREA_MIN, _TEST_AREA_MAX)


def part_two(text: str) -> int:
    """Sum of the rock's starting coordinates, solved with the z3 program.

    Returns 0 when z3 cannot be run or fails.
    """
    script = z3_script(parse_hailstones(text))
    with tempfile.TemporaryDirectory() as workdir:
        path = Path(workdir) / "temp.z3"
        path.write_text(script)
        try:
            result = subprocess.run(
                ["z3", str(path)],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError):
            return 0
    match = _Z3_VALUES.match(result.stdout or "")
    if not match:
        return 0
    return sum(int(value) for value in match.groups())