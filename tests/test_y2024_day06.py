import pytest

from aocsolve.y2024_day06 import part_one, part_two

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 41


def test_part_two_example():
    assert part_two(EXAMPLE) == 6


def test_single_cell_map():
    assert part_one("^\n") == 1


def test_loop_positions_are_fewer_than_visited_cells():
    assert part_two(EXAMPLE) <= part_one(EXAMPLE) - 1


def test_no_guard_raises():
    with pytest.raises(ValueError):
        part_one("...\n...\n")


def test_trapped_guard_raises():
    trapped = ".#.\n#^#\n.#.\n"
    with pytest.raises(ValueError):
        part_one(trapped)
    with pytest.raises(ValueError):
        part_two(trapped)


def test_text_after_last_newline_is_ignored():
    assert part_one(EXAMPLE + "#########") == part_one(EXAMPLE)