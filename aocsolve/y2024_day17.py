"""A three-bit computer and the search for a program that prints itself."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from enum import IntEnum

_SEARCH_OFFSET = 10000000
_FIXED_DIGITS_FROM = 4

_REGISTER = {
    name: re.compile(rf"Register {name.upper()}:\s*(-?\d+)") for name in ("a", "b", "c")
}
_PROGRAM = re.compile(r"Program:\s*(-?\d+(?:\s*,\s*-?\d+)*)")


class Opcode(IntEnum):
    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


def _shift_divide(value: int, power: int) -> int:
    """``value`` divided by ``2**power``, truncated toward zero."""
    magnitude = abs(value) >> power if power >= 0 else abs(value) << -power
    return magnitude if value >= 0 else -magnitude


def _mod8(value: int) -> int:
    remainder = abs(value) % 8
    return remainder if value >= 0 else -remainder


@dataclass
class Computer:
    """Registers and instruction pointer of the machine."""

    a: int = 0
    b: int = 0
    c: int = 0
    ip: int = 0

    def _combo(self, operand: int) -> int:
        return {4: self.a, 5: self.b, 6: self.c}.get(operand, operand)

    def _step(self, opcode: int, operand: int) -> int | None:
        combo = self._combo(operand)
        output = None
        if opcode == Opcode.ADV:
            self.a = _shift_divide(self.a, combo)
        elif opcode == Opcode.BXL:
            self.b ^= operand
        elif opcode == Opcode.BST:
            self.b = _mod8(combo)
        elif opcode == Opcode.JNZ:
            if self.a != 0:
                self.ip = operand
                return None
        elif opcode == Opcode.BXC:
            self.b ^= self.c
        elif opcode == Opcode.OUT:
            output = _mod8(combo)
        elif opcode == Opcode.BDV:
            self.b = _shift_divide(self.a, combo)
        elif opcode == Opcode.CDV:
            self.c = _shift_divide(self.a, combo)
        self.ip += 2
        return output

    def execute(self, program: Sequence[int]) -> Iterator[int]:
        """Run until the pointer leaves the program, yielding each output."""
        while 0 <= self.ip <= len(program) - 2:
            output = self._step(program[self.ip], program[self.ip + 1])
            if output is not None:
                yield output

    def run(self, program: Sequence[int]) -> str:
        """Run the program and return its outputs joined by commas."""
        return ",".join(str(value) for value in self.execute(program))


def parse_program(text: str) -> tuple[Computer, list[int]]:
    """Read the three registers and the comma-separated program."""
    registers = {}
    for name, pattern in _REGISTER.items():
        match = pattern.search(text)
        if not match:
            raise ValueError(f"register {name.upper()} is missing")
        registers[name] = int(match.group(1))
    match = _PROGRAM.search(text)
    if not match:
        raise ValueError("program is missing")
    program = [int(value) for value in match.group(1).split(",")]
    return Computer(**registers), program


def _outputs(initial: Computer, program: Sequence[int], a: int) -> list[int]:
    return list(replace(initial, a=a, ip=0).execute(program))


def _octal_value(digits: Sequence[int]) -> int:
    return sum(digit << (3 * position) for position, digit in enumerate(digits))


def part_one(text: str) -> str:
    """The program's output for the given registers."""
    computer, program = parse_program(text)
    return computer.run(program)


def part_two(text: str) -> int:
    """A value of register A for which the program outputs itself.

    The upper octal digits are guessed one at a time, then values above that
    guess are tried in turn until one works; the search does not stop until
    it finds one.
    """
    initial, program = parse_program(text)
    digits = [1] * len(program)
    for position in range(len(program) - 1, _FIXED_DIGITS_FROM - 1, -1):
        for digit in range(8):
            digits[position] = digit
            out = _outputs(initial, program, _octal_value(digits))
            if position > len(out) - 1:
                continue
            if out[position] == program[position]:
                break

    a = _octal_value(digits) + _SEARCH_OFFSET
    out = [0]
    while out != list(program):
        a += 1
        out = _outputs(initial, program, a)
    return a