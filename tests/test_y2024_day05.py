import pytest

from aocsolve.y2024_day05 import Rule, parse_manual, part_one, part_two

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 143


def test_part_two_example():
    assert part_two(EXAMPLE) == 123


def test_parse_manual():
    rules, updates = parse_manual(EXAMPLE)
    assert rules[0] == Rule(47, 53)
    assert len(rules) == 21
    assert len(updates) == 6
    assert updates[0] == [75, 47, 61, 53, 29]


def test_verify():
    rule = Rule(1, 2)
    assert rule.verify([1, 2]) is True
    assert rule.verify([2, 1]) is False
    assert rule.verify([3, 4]) is True
    assert rule.verify([2, 3]) is True


def test_apply_swaps_in_place():
    pages = [2, 5, 1]
    result = Rule(1, 2).apply(pages)
    assert result is pages
    assert pages == [1, 5, 2]
    assert Rule(1, 2).verify(pages)


def test_apply_leaves_ordered_pages():
    pages = [1, 5, 2]
    assert Rule(1, 2).apply(pages) == [1, 5, 2]


def test_reordering_is_a_permutation():
    rules, updates = parse_manual(EXAMPLE)
    for pages in updates:
        original = sorted(pages)
        for rule in rules:
            rule.apply(pages)
        assert sorted(pages) == original


def test_malformed_rule():
    with pytest.raises(ValueError):
        parse_manual("abc\n\n1,2\n")