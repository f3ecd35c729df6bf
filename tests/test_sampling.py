from __future__ import annotations

import random
from collections import Counter

from chance_list import ChanceEntry, ChanceList
from chance_list.utils.sampling import clamp, eligible, weighted_choice, weighted_unique


def test_draw_boundary_between_two_outcomes(fixed_random):
    chances = ChanceList([("first", 70), ("second", 30)], rng=fixed_random([0.6999]))
    assert chances.get_random_item() == "first"

    chances.rng = fixed_random([0.7001])
    assert chances.get_random_item() == "second"


def test_lowest_draw_picks_first_eligible(fixed_random):
    chances = ChanceList([("zero", 0), ("a", 50), ("b", 50)], rng=fixed_random([0.0]))
    assert chances.get_random_item() == "a"


def test_none_is_a_valid_outcome(fixed_random):
    chances = ChanceList([(None, 60), ("x", 40)], rng=fixed_random([0.1, 0.9]))
    assert chances.get_random_item() is None
    assert chances.get_random_item() == "x"


def test_all_zero_weights_yield_none(fixed_random):
    rng = fixed_random([0.5])
    chances = ChanceList([("a", 0), ("b", 0)], rng=rng)
    assert chances.get_random_item() is None
    assert chances.get_random_items(3) == [None, None, None]
    assert chances.get_unique_random_items(3) == []
    assert rng.calls == 0


def test_sampling_does_not_touch_weights():
    chances = ChanceList([("a", 7), ("b", 93)], rng=random.Random(3))
    chances.get_random_items(50)
    chances.get_unique_random_items(2)
    assert [e.weight for e in chances.entries()] == [7, 93]


def test_random_items_count(fixed_random):
    chances = ChanceList([("a", 50), ("b", 50)], rng=fixed_random([0.2, 0.8, 0.3]))
    assert chances.get_random_items(0) == []
    assert chances.get_random_items(-2) == []
    assert chances.get_random_items(3) == ["a", "b", "a"]


def test_unique_items_capped_by_eligible_entries():
    chances = ChanceList([("a", 40), ("b", 0), ("c", 30), ("d", 30)], rng=random.Random(7))
    picked = chances.get_unique_random_items(5)
    assert len(picked) == 3
    assert sorted(picked) == ["a", "c", "d"]


def test_unique_items_drawn_without_replacement(fixed_random):
    chances = ChanceList([("a", 50), ("b", 30), ("c", 20)], rng=fixed_random([0.99]))
    # 99 of 100 lands on c, then 79.2 of 80 on b, then only a is left
    assert chances.get_unique_random_items(3) == ["c", "b", "a"]

    chances.rng = fixed_random([0.0])
    assert chances.get_unique_random_items(2) == ["a", "b"]


def test_unique_items_non_positive_count(fixed_random):
    chances = ChanceList([("a", 100)], rng=fixed_random([0.5]))
    assert chances.get_unique_random_items(0) == []
    assert chances.get_unique_random_items(-1) == []


def test_distribution_roughly_follows_weights():
    chances = ChanceList([("common", 70), ("rare", 30)], rng=random.Random(1234))
    counts = Counter(chances.get_random_items(20000))
    assert 0.67 < counts["common"] / 20000 < 0.73


def test_helpers_work_on_plain_entries(fixed_random):
    entries = [ChanceEntry("a", 0), ChanceEntry("b", 25), ChanceEntry("c", 75)]
    assert [e.item for e in eligible(entries)] == ["b", "c"]
    assert weighted_choice(fixed_random([0.5]), entries) == "c"
    assert weighted_unique(fixed_random([0.1]), entries, 1) == ["b"]
    assert weighted_choice(fixed_random([0.5]), []) is None


def test_clamp():
    assert clamp(150, 0, 100) == 100
    assert clamp(-3, 0, 100) == 0
    assert clamp(42, 0, 100) == 42


def test_unique_items_can_include_none(fixed_random):
    chances = ChanceList([(None, 60), ("x", 40)], rng=fixed_random([0.1]))
    assert chances.get_unique_random_items(2) == [None, "x"]
