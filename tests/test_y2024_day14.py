import pytest

from aocsolve.y2024_day14 import Robot, parse_robots, part_one, part_two, safety_factor

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_parse_reads_every_robot():
    robots = parse_robots(EXAMPLE)
    assert len(robots) == 12
    assert robots[0] == Robot(0, 4, 3, -3)
    assert robots[-1] == Robot(9, 5, -3, -3)


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_robots("not a robot\n")


def test_example_safety_factor():
    assert safety_factor(parse_robots(EXAMPLE), 11, 7, 100) == 12


def test_position_after_zero_seconds_is_start():
    for robot in parse_robots(EXAMPLE):
        assert robot.position_after(0, 11, 7) == (robot.px, robot.py)


def test_positions_repeat_with_floor_period():
    for robot in parse_robots(EXAMPLE):
        assert robot.position_after(77 + 11 * 7, 11, 7) == robot.position_after(77, 11, 7)


def test_positions_stay_on_floor():
    for robot in parse_robots(EXAMPLE):
        for seconds in (1, 13, 250):
            x, y = robot.position_after(seconds, 11, 7)
            assert 0 <= x < 11
            assert 0 <= y < 7


def test_part_one_uses_full_floor_after_hundred_seconds():
    assert part_one(EXAMPLE) == safety_factor(parse_robots(EXAMPLE), 101, 103, 100)


def test_part_two_finds_line_of_eight():
    text = "".join(f"p={x},5 v=1,0\n" for x in range(8))
    assert part_two(text) == 1


def test_part_two_without_enough_robots():
    text = "".join(f"p={x},5 v=1,0\n" for x in range(7))
    assert part_two(text) == 0


def test_part_two_never_lined_up():
    text = "".join(f"p={2 * x},5 v=0,0\n" for x in range(8))
    assert part_two(text) == 0