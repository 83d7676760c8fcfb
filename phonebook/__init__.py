"""Phone book: an in-memory contact list with phone number validation and merge-sort ordering."""

from .errors import EntryIndexError, PhoneBookError, ValidationError
from .models import Entry
from .repository import PhoneBook
from .sorter import merge_sort

__all__ = [
    "Entry",
    "EntryIndexError",
    "PhoneBook",
    "PhoneBookError",
    "ValidationError",
    "merge_sort",
]
