"""
Design (errors.py)
- Purpose: Exception types raised by the phone book core.
- ValidationError: a submitted phone number failed the format check; store left unchanged.
- EntryIndexError: delete/begin_edit got an index outside the current list.
"""

from .config import INVALID_PHONE_MESSAGE


class PhoneBookError(Exception):
    """Base class for phone book errors."""


class ValidationError(PhoneBookError, ValueError):
    def __init__(self, value: object, message: str = INVALID_PHONE_MESSAGE) -> None:
        super().__init__(message)
        self.value = value
        self.message = message


class EntryIndexError(PhoneBookError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        if size:
            message = f"Entry index {index} out of range (0..{size - 1})"
        else:
            message = f"Entry index {index} out of range (phone book is empty)"
        super().__init__(message)
        self.index = index
        self.size = size
