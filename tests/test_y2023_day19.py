import pytest

from aocsolve.y2023_day19 import Rule, count_accepted, parse_workflows, part_one, part_two

SAMPLE = """in{x<100:lo,hi}
lo{m>3000:A,R}
hi{a<500:R,s>2000:A,R}

{x=50,m=3500,a=1,s=1}
{x=50,m=10,a=1,s=1}
{x=200,m=1,a=600,s=2500}
{x=200,m=1,a=100,s=3000}"""

FULL = {c: (1, 4000) for c in "xmas"}


def test_part_one_sample():
    assert part_one(SAMPLE) == 3552 + 3301


def test_part_two_sample():
    low_branch = 99 * 1000 * 4000 * 4000
    high_branch = 3901 * 4000 * 3501 * 2000
    assert part_two(SAMPLE) == low_branch + high_branch


def test_parse_workflows():
    assert parse_workflows(["lo{a<2006:qkq,m>2090:A,rfg}"]) == {
        "lo": [Rule("qkq", "a", "<", 2006), Rule("A", "m", ">", 2090), Rule("rfg")]
    }


def test_parse_stops_at_blank_line():
    workflows = parse_workflows(SAMPLE.splitlines())
    assert set(workflows) == {"in", "lo", "hi"}


def test_rule_matches():
    rule = Rule("qkq", "a", "<", 2006)
    assert rule.matches({"x": 1, "m": 1, "a": 2005, "s": 1})
    assert not rule.matches({"x": 1, "m": 1, "a": 2006, "s": 1})
    assert Rule("A").matches({})


def test_accept_and_reject_partition_everything():
    accept = {"in": [Rule("A", "x", "<", 2001), Rule("R")]}
    reject = {"in": [Rule("R", "x", "<", 2001), Rule("A")]}
    everything = {"in": [Rule("A")]}
    total = count_accepted(everything, "in", FULL)
    assert count_accepted(accept, "in", FULL) + count_accepted(reject, "in", FULL) == total
    assert count_accepted(accept, "in", FULL) == count_accepted(
        everything, "in", {**FULL, "x": (1, 2000)}
    )


def test_reject_counts_nothing():
    assert count_accepted({}, "R", FULL) == 0


def test_unknown_workflow_raises():
    with pytest.raises(KeyError):
        count_accepted({}, "zz", FULL)


def test_part_without_applicable_rule_raises():
    with pytest.raises(ValueError):
        part_one("in{x<5:A}\n\n{x=10,m=1,a=1,s=1}")