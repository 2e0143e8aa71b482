import pytest

from aocsolve import y2024_day12

EXAMPLE = "AAAA\nBBCD\nBBCC\nEEEC\n"

GRIDS = [
    EXAMPLE,
    "A\n",
    "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO\n",
    "ABAB\nBABA\n",
]


def test_part_one_example():
    assert y2024_day12.part_one(EXAMPLE) == 140


def test_part_two_example():
    assert y2024_day12.part_two(EXAMPLE) == 80


@pytest.mark.parametrize("grid", GRIDS)
def test_sides_never_exceed_perimeter(grid):
    assert y2024_day12.part_two(grid) <= y2024_day12.part_one(grid)


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (4, 4)])
def test_rectangle_has_four_sides(rows, cols):
    grid = ("A" * cols + "\n") * rows
    assert y2024_day12.part_two(grid) == 4 * rows * cols


def test_single_cells_have_equal_perimeter_and_sides():
    grid = "ABAB\nBABA\n"
    assert y2024_day12.part_one(grid) == y2024_day12.part_two(grid)


def test_text_after_last_newline_is_ignored():
    assert y2024_day12.part_one(EXAMPLE + "ZZZZ") == y2024_day12.part_one(EXAMPLE)


def test_empty_map_raises():
    with pytest.raises(ValueError):
        y2024_day12.part_one("")


def test_ragged_map_raises():
    with pytest.raises(ValueError):
        y2024_day12.part_two("AAA\nA\n")