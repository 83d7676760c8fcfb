# tests/test_sorter.py
import random
import pytest
from phonebook.models import Entry
from phonebook.sorter import merge, merge_sort


def _entries():
    return [
        Entry("Bob", "Z", "111-222-3333"),
        Entry("alice", "A", "444-555-6666"),
        Entry("Alice", "M", "777-888-9999"),
        Entry("Bob", "B", "000-000-0000"),
    ]


def test_empty_and_single():
    assert merge_sort([], "first_name") == []
    one = [Entry("A", "B", "111-111-1111")]
    assert merge_sort(one, "last_name") == one


def test_sorts_by_code_point():
    result = merge_sort(_entries(), "first_name")
    # uppercase sorts before lowercase
    assert [e.first_name for e in result] == ["Alice", "Bob", "Bob", "alice"]


def test_stable_on_equal_keys():
    items = _entries()
    result = merge_sort(items, "first_name")
    bobs = [e for e in result if e.first_name == "Bob"]
    assert [e.last_name for e in bobs] == ["Z", "B"]


def test_does_not_modify_input():
    items = _entries()
    before = list(items)
    result = merge_sort(items, "phone_number")
    assert items == before
    assert result is not items


def test_matches_builtin_stable_sort():
    rng = random.Random(42)
    names = ["Ann", "Bea", "Cid", "Dee"]
    items = [
        Entry(rng.choice(names), rng.choice(names), f"{rng.randint(100, 999)}-555-{i:04d}")
        for i in range(50)
    ]
    for field in ("first_name", "last_name", "phone_number"):
        assert merge_sort(items, field) == sorted(items, key=lambda e: getattr(e, field))


def test_merge_takes_left_on_tie():
    left = [Entry("Sam", "Left", "111-111-1111")]
    right = [Entry("Sam", "Right", "222-222-2222")]
    assert [e.last_name for e in merge(left, right, "first_name")] == ["Left", "Right"]


def test_merge_appends_remainder():
    left = [Entry("A", "", "111-111-1111"), Entry("D", "", "111-111-1111")]
    right = [Entry("B", "", "111-111-1111"), Entry("C", "", "111-111-1111"), Entry("E", "", "111-111-1111")]
    assert [e.first_name for e in merge(left, right, "first_name")] == ["A", "B", "C", "D", "E"]


def test_unknown_field():
    with pytest.raises(ValueError):
        merge_sort(_entries(), "email")
