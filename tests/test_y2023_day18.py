import pytest

from aocsolve.y2023_day18 import lagoon_area, part_one, part_two

_CODES = {"R": "0", "D": "1", "L": "2", "U": "3"}


def _line(direction, distance):
    return f"{direction} {distance} (#{distance:05x}{_CODES[direction]})"


def _plan(*moves):
    return "\n".join(_line(direction, distance) for direction, distance in moves)


def _rectangle(width, height):
    return _plan(("R", width), ("D", height), ("L", width), ("U", height))


L_SHAPE = _plan(("R", 4), ("D", 2), ("L", 2), ("D", 2), ("L", 2), ("U", 4))


def test_l_shape_points():
    points = [(4, 0), (4, 2), (2, 2), (2, 4), (0, 4), (0, 0)]
    assert lagoon_area(points) == 21


def test_part_one_l_shape():
    assert part_one(L_SHAPE) == 21


def test_part_two_l_shape_matches_part_one():
    assert part_two(L_SHAPE) == 21


def test_too_few_points_gives_zero():
    assert lagoon_area([(0, 0), (3, 0)]) == 0


@pytest.mark.parametrize("width,height", [(1, 1), (2, 5), (7, 3), (10, 10)])
def test_rectangle_counts_all_cells(width, height):
    assert part_one(_rectangle(width, height)) == (width + 1) * (height + 1)


@pytest.mark.parametrize("width,height", [(1, 1), (4, 9), (300, 17)])
def test_colour_codes_encoding_the_same_plan_agree(width, height):
    text = _rectangle(width, height)
    assert part_two(text) == part_one(text)


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        part_one("X 3 (#000030)\nD 3 (#000031)\nL 3 (#000032)")


def test_bad_colour_code_raises():
    with pytest.raises(ValueError):
        part_two("R 3 (#000039)\nD 3 (#000031)\nL 3 (#000032)")