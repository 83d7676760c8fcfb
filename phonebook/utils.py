"""
Design (utils.py)
- Purpose: Reusable helpers: phone number validation and list-row formatting.
- Inputs: Raw form values / Entry instances.
- Outputs: Helper results (bools, strings).
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

import re

from .config import PHONE_PATTERN
from .models import Entry

_PHONE_RE = re.compile(PHONE_PATTERN)


def is_valid_phone_number(value: object) -> bool:
    """
    Purpose: Check a phone number against the XXX-XXX-XXXX format.
    Inputs: value (anything; non-strings are invalid)
    Outputs: True only if the whole string matches (no leading/trailing characters).
    Side Effects: None.
    """
    if not isinstance(value, str):
        return False
    return _PHONE_RE.fullmatch(value) is not None


def format_entry(entry: Entry) -> str:
    """List display line, e.g. 'John Doe: 555-123-4567'."""
    return f"{entry.first_name} {entry.last_name}: {entry.phone_number}"
