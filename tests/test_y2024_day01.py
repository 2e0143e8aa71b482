import pytest

from aocsolve.y2024_day01 import parse_lists, part_one, part_two

EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3
"""


def _swap_columns(text):
    return "\n".join("   ".join(line.split("   ")[::-1]) for line in text.split("\n"))


def test_parse_lists_reads_both_columns():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_parse_skips_lines_without_two_columns():
    assert parse_lists("5\n1   2\n\n") == ([1], [2])


def test_parse_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_lists("1   x")


def test_example_distance():
    assert part_one(EXAMPLE) == 11


def test_example_similarity():
    assert part_two(EXAMPLE) == 31


def test_distance_is_symmetric():
    assert part_one(_swap_columns(EXAMPLE)) == part_one(EXAMPLE)


def test_identical_lists_have_no_distance():
    text = "5   1\n1   5\n7   7\n"
    assert part_one(text) == 0


def test_similarity_without_common_numbers_is_zero():
    assert part_two("1   2\n3   4\n") == 0