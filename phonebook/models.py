"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (Entry).
- Inputs: Field values (str).
- Outputs: Dataclass instances.
- Side effects: None.
- Thread-safety: Entries are frozen; edits replace the whole Entry.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """
    Design (Entry)
    - Purpose: Represents a single contact in the phone book.
    - Fields:
        first_name: Contact first name (free text).
        last_name: Contact last name (free text).
        phone_number: Validated XXX-XXX-XXXX string (PhoneBook only stores valid numbers).
    """
    first_name: str
    last_name: str
    phone_number: str
