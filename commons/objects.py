"""
Object helpers: emptiness checks, None-safe equality and sequence conversion.
"""

from collections.abc import Mapping, Sized
from typing import Any, List


def is_empty(obj: Any) -> bool:
    """
    True for None and for empty strings, bytes, sequences, sets and mappings.
    Any other object is considered non-empty.
    """
    if obj is None:
        return True
    if isinstance(obj, (str, bytes, bytearray, list, tuple, set, frozenset, Mapping)):
        return len(obj) == 0
    if isinstance(obj, Sized) and not isinstance(obj, type):
        return len(obj) == 0
    return False


def null_safe_equals(a: Any, b: Any) -> bool:
    """
    Equality that tolerates None and compares sequences element-wise.

    Lists and tuples holding the same elements are considered equal.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    if a == b:
        return True
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(null_safe_equals(x, y) for x, y in zip(a, b))
    return False


def to_object_list(source: Any) -> List[Any]:
    """
    Convert a list, tuple, range or bytes object to a list.

    Raises:
        ValueError: If source is not a sequence (strings are rejected)
    """
    if source is None:
        return []
    if isinstance(source, list):
        return source
    if isinstance(source, (tuple, range, bytes, bytearray, memoryview)):
        return list(source)
    raise ValueError(f"Source is not an array: {source!r}")
