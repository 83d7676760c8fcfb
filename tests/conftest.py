# tests/conftest.py
import pytest
from phonebook import PhoneBook


@pytest.fixture
def book():
    return PhoneBook()


@pytest.fixture
def three_entries():
    b = PhoneBook()
    b.add_or_update("Carol", "Smith", "111-111-1111")
    b.add_or_update("Alice", "Jones", "222-222-2222")
    b.add_or_update("Bob", "Brown", "333-333-3333")
    return b
