import pytest

from aocsolve.y2023_day20 import (
    ModuleKind,
    Pulse,
    lcm_of,
    parse_network,
    part_one,
    part_two,
)

LOOP = """broadcaster -> a, b, c
%a -> b
%b -> c
%c -> inv
&inv -> a"""

EXAMPLE = """broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output"""

WITH_RX = """broadcaster -> e, g
%e -> f
%f -> kj
%g -> h
%h -> i
%i -> kj
&kj -> rx"""


def test_part_one_simple_loop():
    assert part_one(LOOP) == 32000000


def test_part_one_example():
    assert part_one(EXAMPLE) == 11687500


def test_broadcaster_forwards_pulse():
    network = parse_network(EXAMPLE)
    sent = network.deliver(Pulse("button", "broadcaster", False))
    assert sent == [Pulse("broadcaster", "a", False)]


def test_flip_flop_ignores_high_and_toggles_on_low():
    network = parse_network(EXAMPLE)
    assert network.deliver(Pulse("broadcaster", "a", True)) == []
    assert network.deliver(Pulse("broadcaster", "a", False)) == [
        Pulse("a", "inv", True),
        Pulse("a", "con", True),
    ]
    assert network.deliver(Pulse("broadcaster", "a", False)) == [
        Pulse("a", "inv", False),
        Pulse("a", "con", False),
    ]


def test_conjunction_inverts_single_input():
    network = parse_network(EXAMPLE)
    assert network.deliver(Pulse("a", "inv", True)) == [Pulse("inv", "b", False)]
    assert network.deliver(Pulse("a", "inv", False)) == [Pulse("inv", "b", True)]


def test_conjunction_memory_starts_low_for_each_input():
    network = parse_network(EXAMPLE)
    assert network.memory["con"] == {"a": False, "b": False}


def test_unknown_target_sends_nothing():
    network = parse_network(EXAMPLE)
    assert network.deliver(Pulse("con", "output", False)) == []


def test_press_starts_with_button_pulse():
    network = parse_network(EXAMPLE)
    pulses = list(network.press())
    assert pulses[0] == Pulse("button", "broadcaster", False)


def test_parse_rejects_unknown_prefix():
    with pytest.raises(ValueError):
        parse_network("?x -> y")


def test_module_kinds_from_prefix():
    assert ModuleKind("%") is ModuleKind.FLIP_FLOP
    assert ModuleKind("&") is ModuleKind.CONJUNCTION


def test_part_two_cycles():
    assert part_two(WITH_RX) == 4


def test_part_two_without_rx():
    with pytest.raises(ValueError):
        part_two(EXAMPLE)


def test_lcm_of_is_common_multiple():
    result = lcm_of([4, 6])
    assert result % 4 == 0 and result % 6 == 0
    assert result == lcm_of([6, 4])
    assert lcm_of([5]) == 5


def test_lcm_of_empty():
    with pytest.raises(ValueError):
        lcm_of([])