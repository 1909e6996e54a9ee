"""
Random character sequences for codes, tokens and test fixtures.
"""

import random
import string

_RANDOM = random.Random()

NUMBERS = string.digits
UPPER = string.ascii_uppercase
LOWER = string.ascii_lowercase
WORDS = UPPER + LOWER
ALPHANUMERIC = WORDS + NUMBERS


def _pick(alphabet: str, length: int) -> str:
    if length < 0:
        raise ValueError(f"Length must not be negative, got {length}")
    return ''.join(_RANDOM.choice(alphabet) for _ in range(length))


def next_number(length: int) -> str:
    """Random digits, e.g. a verification code."""
    return _pick(NUMBERS, length)


def next_upper(length: int) -> str:
    return _pick(UPPER, length)


def next_lower(length: int) -> str:
    return _pick(LOWER, length)


def next_word(length: int) -> str:
    """Random letters from A-Z and a-z."""
    return _pick(WORDS, length)


def next_string(length: int) -> str:
    """Random letters and digits."""
    return _pick(ALPHANUMERIC, length)
