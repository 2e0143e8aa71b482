import pytest

from aocsolve.y2024_day13 import ClawMachine, parse_machines, part_one, part_two

EXAMPLE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""

SIMPLE = """Button A: X+1, Y+0
Button B: X+0, Y+1
Prize: X=5, Y=7
"""


def test_parse_reads_all_machines():
    machines = parse_machines(EXAMPLE)
    assert len(machines) == 4
    assert machines[0] == ClawMachine(94, 34, 22, 67, 8400, 5400)


def test_parse_rejects_malformed_block():
    with pytest.raises(ValueError):
        parse_machines("Button A: X+1, Y+2\nButton B: X+3, Y+4\nPrize: 5, 6\n")


def test_parse_rejects_incomplete_block():
    with pytest.raises(ValueError):
        parse_machines("Button A: X+1, Y+2\n")


def test_example_total():
    assert part_one(EXAMPLE) == 480


def test_tokens_for_known_presses():
    a_presses, b_presses = 3, 5
    machine = ClawMachine(7, 2, 1, 4, 7 * a_presses + b_presses, 2 * a_presses + 4 * b_presses)
    assert machine.tokens() == 3 * a_presses + b_presses


def test_unreachable_prize_costs_nothing():
    assert ClawMachine(2, 0, 0, 2, 3, 4).tokens() == 0


def test_collinear_buttons_are_rejected():
    with pytest.raises(ValueError):
        ClawMachine(1, 2, 2, 4, 10, 20).tokens()


def test_part_one_simple_machine():
    assert part_one(SIMPLE) == 3 * 5 + 7


def test_part_two_moves_prize_far_away():
    offset = 10000000000000
    assert part_two(SIMPLE) == 3 * (5 + offset) + (7 + offset)