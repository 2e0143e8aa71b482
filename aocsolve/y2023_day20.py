"""Pulse propagation through a network of flip-flop and conjunction modules."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import count

BUTTON = "button"
BROADCASTER = "broadcaster"
_PRESSES = 1000


class ModuleKind(Enum):
    """The behaviour of a module in the network."""

    BROADCASTER = "broadcaster"
    FLIP_FLOP = "%"
    CONJUNCTION = "&"


@dataclass(frozen=True)
class Pulse:
    """A pulse travelling from one module to another."""

    source: str
    target: str
    high: bool


class Network:
    """Modules wired together, holding every flip-flop and conjunction state."""

    def __init__(self, specs: Mapping[str, tuple[ModuleKind, Sequence[str]]]):
        self._kinds = {name: kind for name, (kind, _) in specs.items()}
        self._targets = {name: tuple(targets) for name, (_, targets) in specs.items()}
        self.inputs: dict[str, list[str]] = {}
        for name, (_, targets) in specs.items():
            for target in targets:
                self.inputs.setdefault(target, []).append(name)
        self.flip_flops = {
            name: False
            for name, kind in self._kinds.items()
            if kind is ModuleKind.FLIP_FLOP
        }
        self.memory: dict[str, dict[str, bool]] = {
            name: {source: False for source in self.inputs.get(name, [])}
            for name, kind in self._kinds.items()
            if kind is ModuleKind.CONJUNCTION
        }

    def deliver(self, pulse: Pulse) -> list[Pulse]:
        """Hand a pulse to its target module and return the pulses it sends."""
        kind = self._kinds.get(pulse.target)
        if kind is None:
            return []
        name = pulse.target
        if kind is ModuleKind.BROADCASTER:
            high = pulse.high
        elif kind is ModuleKind.FLIP_FLOP:
            if pulse.high:
                return []
            high = self.flip_flops[name] = not self.flip_flops[name]
        else:
            memory = self.memory[name]
            memory[pulse.source] = pulse.high
            high = not all(memory.values())
        return [Pulse(name, target, high) for target in self._targets[name]]

    def press(self) -> Iterator[Pulse]:
        """Press the button, yielding each pulse once it has been delivered."""
        queue = deque([Pulse(BUTTON, BROADCASTER, False)])
        while queue:
            pulse = queue.popleft()
            queue.extend(self.deliver(pulse))
            yield pulse


def parse_network(text: str) -> Network:
    """Parse lines such as ``%a -> inv, con`` into a network."""
    specs: dict[str, tuple[ModuleKind, list[str]]] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        left, arrow, right = line.partition(" -> ")
        if not arrow:
            raise ValueError(f"malformed module line {line!r}")
        targets = [target.strip() for target in right.split(",") if target.strip()]
        left = left.strip()
        if left == BROADCASTER:
            specs[left] = (ModuleKind.BROADCASTER, targets)
        elif left[:1] in ("%", "&"):
            specs[left[1:]] = (ModuleKind(left[0]), targets)
        else:
            raise ValueError(f"unknown module type in {line!r}")
    return Network(specs)


def lcm_of(values: Iterable[int]) -> int:
    """Least common multiple of a non-empty collection of integers."""
    numbers = list(values)
    if not numbers:
        raise ValueError("no values to combine")
    return math.lcm(*numbers)


def part_one(text: str) -> int:
    """Product of low and high pulse counts over a thousand button presses."""
    network = parse_network(text)
    lows = highs = 0
    for _ in range(_PRESSES):
        for pulse in network.press():
            if pulse.high:
                highs += 1
            else:
                lows += 1
    return highs * lows


def part_two(text: str) -> int:
    """Fewest button presses before a single low pulse reaches ``rx``."""
    network = parse_network(text)
    feeders = network.inputs.get("rx")
    if not feeders:
        raise ValueError("no module sends to rx")
    required = feeders[0]
    if required not in network.memory:
        raise ValueError(f"module {required!r} feeding rx is not a conjunction")
    conditions = set(network.inputs.get(required, []))
    if not conditions:
        raise ValueError(f"module {required!r} has no inputs")
    memory = network.memory[required]

    cycles: dict[str, int] = {}
    for press in count(1):
        if len(cycles) == len(conditions):
            break
        for _ in network.press():
            for name in conditions:
                if name not in cycles and memory.get(name, False):
                    cycles[name] = press
    return lcm_of(cycles.values())