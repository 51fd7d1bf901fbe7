import functools

import pytest

from sort_by_example import (
    IncompatibleOptionsError,
    InvalidFallbackError,
    InvalidReferenceError,
    RankMap,
    build_comparator,
    build_key,
)
from sort_by_example.core.comparer import RankComparator
from sort_by_example.core.models import resolve_reference

ENGLISH = ["first", "second", "third", "fourth"]


def by_length(a, b):
    return len(a) - len(b)


def test_comparator_works_with_cmp_to_key():
    by_eng = build_comparator(ENGLISH)
    words = ["second", "third", "unknown", "fourth", "first"]
    assert sorted(words, key=functools.cmp_to_key(by_eng)) == [
        "first", "second", "third", "fourth", "unknown",
    ]


def test_build_key_returns_sort_key():
    words = ["second", "third", "unknown", "fourth", "first"]
    words.sort(key=build_key(ENGLISH))
    assert words == ["first", "second", "third", "fourth", "unknown"]


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("first", "second", -1),
        ("fourth", "first", 1),
        ("third", "third", 0),
        ("first", "unknown", -1),
        ("unknown", "fourth", 1),
        ("unknown", "other", 0),
    ],
)
def test_comparator_decision_table_without_fallback(a, b, expected):
    assert build_comparator(ENGLISH)(a, b) == expected


def test_fallback_result_is_reduced_to_sign():
    cmp = build_comparator(ENGLISH, by_length)
    assert cmp("x", "garbage") == -1
    assert cmp("garbage", "x") == 1
    assert cmp("abc", "xyz") == 0


def test_fallback_breaks_equal_ranks():
    cmp = build_comparator({"x": 1, "xyzzy": 1, "bar": 2}, fallback=by_length)
    assert cmp("xyzzy", "x") == 1
    assert cmp("x", "xyzzy") == -1
    assert cmp("xyzzy", "bar") == -1


def test_equal_ranks_without_fallback_compare_equal():
    cmp = build_comparator(RankMap({"x": 1, "y": 1}))
    assert cmp("x", "y") == 0


def test_fallback_not_consulted_when_ranks_differ():
    calls = []

    def fallback(a, b):
        calls.append((a, b))
        return 0

    cmp = build_comparator(ENGLISH, fallback)
    cmp("first", "second")
    cmp("first", "unknown")
    assert calls == []


def test_rank_scores_can_be_any_ordered_type():
    cmp = build_comparator({"low": "a", "high": "z"})
    assert cmp("high", "low") == 1
    cmp = build_comparator({"low": (0, 1), "high": (0, 2)})
    assert cmp("low", "high") == -1


def test_comparator_rejects_xform():
    with pytest.raises(IncompatibleOptionsError):
        build_comparator(ENGLISH, {"xform": str.lower})
    with pytest.raises(IncompatibleOptionsError):
        build_comparator(ENGLISH, xform=str.lower)


def test_comparator_rejects_bad_arguments():
    with pytest.raises(InvalidReferenceError):
        build_comparator("first second third")
    with pytest.raises(InvalidFallbackError):
        build_comparator(ENGLISH, "not callable")


def test_comparator_holds_its_own_rank_table():
    example = list(ENGLISH)
    cmp = build_comparator(example)
    example.reverse()
    assert cmp("first", "fourth") == -1


def test_compare_keys_forwards_originals_to_fallback():
    seen = []

    def fallback(*args):
        seen.append(args)
        return -1

    cmp = RankComparator(resolve_reference(["a"]), fallback)
    assert cmp.compare_keys("k1", "k2", "item1", "item2") == -1
    assert seen == [("k1", "k2", "item1", "item2")]


def test_unhashable_values_compare_as_unranked():
    cmp = build_comparator(ENGLISH)
    assert cmp(["first"], "second") == 1
    assert cmp("second", {"word": "first"}) == -1
    assert cmp(["first"], ["second"]) == 0


def test_unhashable_values_are_ordered_by_fallback():
    cmp = build_comparator(ENGLISH, lambda a, b: len(a) - len(b))
    assert cmp(["a", "b"], ["a"]) == 1
    assert cmp(["a"], ["a", "b"]) == -1
