# tests/test_repository.py
import logging
import pytest
from phonebook import Entry, EntryIndexError, PhoneBook, ValidationError


def test_add_to_empty_book(book):
    entry = book.add_or_update("John", "Doe", "555-123-4567")
    assert entry == Entry("John", "Doe", "555-123-4567")
    assert book.entries == (Entry("John", "Doe", "555-123-4567"),)


def test_invalid_number_leaves_book_unchanged(book):
    book.add_or_update("John", "Doe", "555-123-4567")
    with pytest.raises(ValidationError) as exc:
        book.add_or_update("Jane", "Doe", "not-a-number")
    assert exc.value.value == "not-a-number"
    assert book.entries == (Entry("John", "Doe", "555-123-4567"),)


def test_invalid_number_logged(book, caplog):
    with caplog.at_level(logging.WARNING, logger="phonebook"):
        with pytest.raises(ValidationError):
            book.add_or_update("Jane", "Doe", "12345")
    assert "Rejected phone number" in caplog.text


def test_add_appends_at_end(three_entries):
    three_entries.add_or_update("Dan", "White", "444-444-4444")
    assert len(three_entries) == 4
    assert three_entries[3] == Entry("Dan", "White", "444-444-4444")


def test_duplicates_allowed(book):
    book.add_or_update("John", "Doe", "555-123-4567")
    book.add_or_update("John", "Doe", "555-123-4567")
    assert len(book) == 2


def test_edit_replaces_only_target(three_entries):
    before = three_entries.entries
    assert three_entries.begin_edit(1) == before[1]
    assert three_entries.editing_index == 1
    three_entries.add_or_update("X", "Y", "111-111-1111")
    after = three_entries.entries
    assert len(after) == 3
    assert after[1] == Entry("X", "Y", "111-111-1111")
    assert after[0] == before[0] and after[2] == before[2]
    assert three_entries.is_editing is False


def test_edit_cursor_cleared_after_commit(three_entries):
    three_entries.begin_edit(0)
    three_entries.add_or_update("X", "Y", "111-111-1111")
    three_entries.add_or_update("Z", "W", "222-222-2222")
    assert len(three_entries) == 4
    assert three_entries[0].first_name == "X"
    assert three_entries[3].first_name == "Z"


def test_invalid_edit_keeps_cursor(three_entries):
    three_entries.begin_edit(2)
    with pytest.raises(ValidationError):
        three_entries.add_or_update("X", "Y", "bad")
    assert three_entries.editing_index == 2
    three_entries.add_or_update("X", "Y", "999-999-9999")
    assert three_entries[2] == Entry("X", "Y", "999-999-9999")
    assert len(three_entries) == 3


def test_begin_edit_out_of_range(three_entries):
    with pytest.raises(EntryIndexError):
        three_entries.begin_edit(3)
    with pytest.raises(EntryIndexError):
        three_entries.begin_edit(-1)
    assert three_entries.editing_index is None


def test_cancel_edit(three_entries):
    three_entries.begin_edit(0)
    three_entries.cancel_edit()
    three_entries.add_or_update("X", "Y", "111-111-1111")
    assert len(three_entries) == 4


def test_delete_shifts_later_entries(three_entries):
    before = three_entries.entries
    removed = three_entries.delete(1)
    assert removed == before[1]
    assert three_entries.entries == (before[0], before[2])


@pytest.mark.parametrize("index", [3, -1, 100])
def test_delete_out_of_range(three_entries, index):
    before = three_entries.entries
    with pytest.raises(EntryIndexError):
        three_entries.delete(index)
    assert three_entries.entries == before


def test_delete_on_empty_book(book):
    with pytest.raises(EntryIndexError):
        book.delete(0)


def test_delete_clears_pending_edit(three_entries):
    three_entries.begin_edit(2)
    three_entries.delete(0)
    assert three_entries.is_editing is False
    # next write appends instead of landing on a shifted entry
    three_entries.add_or_update("X", "Y", "111-111-1111")
    assert len(three_entries) == 3
    assert three_entries[2] == Entry("X", "Y", "111-111-1111")
    assert three_entries[1].first_name == "Bob"


def test_sort_scenario(book):
    book.add_or_update("Bob", "Z", "111-222-3333")
    book.add_or_update("Alice", "A", "444-555-6666")
    book.sort_by("first_name")
    assert [e.first_name for e in book] == ["Alice", "Bob"]


def test_sort_is_idempotent(three_entries):
    three_entries.sort_by("last_name")
    once = three_entries.entries
    three_entries.sort_by("last_name")
    assert three_entries.entries == once


def test_sort_is_stable(book):
    book.add_or_update("Sam", "First", "111-111-1111")
    book.add_or_update("Ann", "Other", "222-222-2222")
    book.add_or_update("Sam", "Second", "333-333-3333")
    book.sort_by("first_name")
    assert [e.last_name for e in book] == ["Other", "First", "Second"]


def test_sort_then_resort(three_entries):
    three_entries.sort_by("first_name")
    three_entries.sort_by("last_name")
    names = [e.last_name for e in three_entries]
    assert names == sorted(names)


def test_sort_by_phone_number(three_entries):
    three_entries.add_or_update("Eve", "Adams", "000-999-9999")
    three_entries.sort_by("phone_number")
    assert [e.phone_number for e in three_entries] == [
        "000-999-9999", "111-111-1111", "222-222-2222", "333-333-3333",
    ]


def test_sort_clears_pending_edit(three_entries):
    three_entries.begin_edit(0)
    three_entries.sort_by("first_name")
    assert three_entries.editing_index is None


def test_sort_small_book_is_noop(book):
    book.sort_by("last_name")
    assert len(book) == 0
    book.add_or_update("John", "Doe", "555-123-4567")
    book.sort_by("last_name")
    assert book.entries == (Entry("John", "Doe", "555-123-4567"),)


def test_sort_unknown_field(three_entries):
    three_entries.begin_edit(1)
    with pytest.raises(ValueError):
        three_entries.sort_by("email")
    assert three_entries.editing_index == 1


def test_clear_all(three_entries):
    three_entries.begin_edit(1)
    three_entries.clear_all()
    assert len(three_entries) == 0
    assert three_entries.is_editing is False


def test_snapshot_is_a_copy(three_entries):
    snap = three_entries.snapshot()
    three_entries.delete(0)
    assert len(snap) == 3
    assert len(three_entries.snapshot()) == 2


def test_initial_entries_are_validated():
    book = PhoneBook([Entry("John", "Doe", "555-123-4567")])
    assert len(book) == 1
    with pytest.raises(ValidationError):
        PhoneBook([Entry("Jane", "Doe", "555-1234")])


def test_separate_instances_do_not_share_state():
    a, b = PhoneBook(), PhoneBook()
    a.add_or_update("John", "Doe", "555-123-4567")
    assert len(b) == 0
