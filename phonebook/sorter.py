"""
Design (sorter.py)
- Purpose: Order entries by one of their string fields using a top-down merge sort.
- Inputs: A sequence of objects exposing the field as an attribute, and the field name.
- Outputs: A new list; the input sequence is never modified.
- Ordering: Ascending, plain str comparison (code point order), stable.
- Thread-safety: Pure functions; safe to call from any thread.
"""

from typing import List, Sequence, TypeVar

from .config import SORT_FIELDS

T = TypeVar("T")


def merge_sort(items: Sequence[T], field: str) -> List[T]:
    """
    Purpose: Return the items sorted ascending by getattr(item, field).
    Inputs: items (any sequence), field (one of the SORT_FIELDS attribute names)
    Outputs: New list with the same elements; equal keys keep their input order.
    Raises: ValueError for an unknown field.
    """
    if field not in SORT_FIELDS.values():
        raise ValueError(f"Unknown sort field: {field!r}")
    return _merge_sort(list(items), field)


def _merge_sort(items: List[T], field: str) -> List[T]:
    if len(items) < 2:
        return items

    mid = len(items) // 2
    return merge(_merge_sort(items[:mid], field), _merge_sort(items[mid:], field), field)


def merge(left: Sequence[T], right: Sequence[T], field: str) -> List[T]:
    """
    Merge two runs already sorted by `field` into one sorted list.
    Ties take from `left` first, which keeps the sort stable.
    """
    result: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if getattr(right[j], field) < getattr(left[i], field):
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result
