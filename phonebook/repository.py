"""
Design (repository.py)
- Purpose: Encapsulate the contact list behind a tiny API so the UI never touches the
           list directly. Every write goes through phone number validation.
- Inputs: Raw field values from the form; list indices from the UI selection.
- Outputs: Entry objects and snapshots (tuples) of the current ordered list.
- Side effects: Mutates the internal list and edit cursor; logs each mutation.
- Thread-safety: None needed. One owner (UI or test) drives the store from a single thread.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .config import SORT_FIELDS
from .errors import EntryIndexError, ValidationError
from .models import Entry
from .sorter import merge_sort
from .utils import is_valid_phone_number

log = logging.getLogger(__name__)


class PhoneBook:
    """
    Design (PhoneBook)
    - State:
        _entries: [Entry] in insertion order, until sort_by() reorders them
        _edit_index: index the next add_or_update() replaces, or None to append
    - Edit cursor rule: any structural change (delete, sort_by, clear_all) clears the
      cursor so a pending edit can never land on a shifted entry.
    """

    def __init__(self, entries: Optional[List[Entry]] = None) -> None:
        self._entries: List[Entry] = []
        self._edit_index: Optional[int] = None
        for entry in entries or []:
            if not is_valid_phone_number(entry.phone_number):
                raise ValidationError(entry.phone_number)
            self._entries.append(entry)

    # -------- Read access --------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> Entry:
        self._check_index(index)
        return self._entries[index]

    @property
    def entries(self) -> Tuple[Entry, ...]:
        """Current ordered list (copy)."""
        return tuple(self._entries)

    def snapshot(self) -> Tuple[Entry, ...]:
        """
        Purpose: Return a copy of the list for rendering.
        Outputs: tuple of Entry, in display order.
        """
        return tuple(self._entries)

    @property
    def editing_index(self) -> Optional[int]:
        return self._edit_index

    @property
    def is_editing(self) -> bool:
        return self._edit_index is not None

    # -------- Writes --------

    def add_or_update(self, first_name: str, last_name: str, phone_number: str) -> Entry:
        """
        Purpose: Validate and store a contact.
        Inputs: first_name, last_name, phone_number (must be XXX-XXX-XXXX)
        Outputs: The stored Entry.
        Side effects: Replaces the entry under the edit cursor (and clears the cursor),
                      otherwise appends at the end.
        Raises: ValidationError if the phone number is malformed; nothing changes.
        """
        if not is_valid_phone_number(phone_number):
            log.warning("Rejected phone number %r", phone_number)
            raise ValidationError(phone_number)

        entry = Entry(first_name=first_name, last_name=last_name, phone_number=phone_number)
        if self._edit_index is not None:
            index = self._edit_index
            self._entries[index] = entry
            self._edit_index = None
            log.info("Updated entry %d: %s %s", index, first_name, last_name)
        else:
            self._entries.append(entry)
            log.info("Added entry %d: %s %s", len(self._entries) - 1, first_name, last_name)
        return entry

    def delete(self, index: int) -> Entry:
        """
        Purpose: Remove the entry at index; later entries shift down by one.
        Outputs: The removed Entry.
        Side effects: Clears the edit cursor.
        Raises: EntryIndexError if index is out of range.
        """
        self._check_index(index)
        removed = self._entries.pop(index)
        if self._edit_index is not None:
            log.debug("Edit of entry %d dropped by delete", self._edit_index)
        self._edit_index = None
        log.info("Deleted entry %d: %s %s", index, removed.first_name, removed.last_name)
        return removed

    def begin_edit(self, index: int) -> Entry:
        """
        Purpose: Mark the entry at index as the target of the next add_or_update().
        Outputs: The Entry, so the caller can pre-populate its form.
        Raises: EntryIndexError if index is out of range (cursor unchanged).
        """
        self._check_index(index)
        self._edit_index = index
        log.debug("Editing entry %d", index)
        return self._entries[index]

    def cancel_edit(self) -> None:
        self._edit_index = None

    def sort_by(self, field: str) -> None:
        """
        Purpose: Reorder the list ascending by field (first_name, last_name, phone_number).
        Side effects: Replaces the list with the merge-sorted copy; clears the edit cursor.
        Raises: ValueError for an unknown field.
        """
        if field not in SORT_FIELDS.values():
            raise ValueError(f"Unknown sort field: {field!r}")
        self._edit_index = None
        if len(self._entries) < 2:
            return
        self._entries = merge_sort(self._entries, field)
        log.info("Sorted %d entries by %s", len(self._entries), field)

    def clear_all(self) -> None:
        """Remove every entry and any pending edit."""
        self._entries.clear()
        self._edit_index = None
        log.info("Cleared all entries")

    # -------- Internal --------

    def _check_index(self, index: int) -> None:
        # negative indices are out of range, not Python-style offsets from the end
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._entries):
            raise EntryIndexError(index, len(self._entries))
