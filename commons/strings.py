"""
String Utilities - null-safe checks, trimming, case conversion and random strings.

Case conversion is shared with the introspection package, which turns property
names such as `first_name` or `firstName` into accessor names.
"""

import random
import re
from typing import Optional

EMPTY = ""

_RANDOM = random.Random()

# Separator between words for studly/camel conversion: underscore, dash or whitespace
_WORD_SEPARATOR = re.compile(r"\s*(?:_|-|\s)\s*")
_MULTI_WHITESPACE = re.compile(r"\s\s+")
_BEFORE_UPPER = re.compile(r"(?=[A-Z])")


def _require(value, name: str = "Value"):
    if value is None:
        raise ValueError(f"{name} must not be None.")


def equals(a: Optional[str], b: Optional[str]) -> bool:
    """None-safe equality."""
    if a is None:
        return b is None
    return a == b


def equals_ignore_case(a: Optional[str], b: Optional[str]) -> bool:
    """None-safe, case-insensitive equality."""
    if a is None:
        return b is None
    if b is None:
        return False
    return a.casefold() == b.casefold()


def is_empty(text: Optional[str]) -> bool:
    """
    Check if a string is None or "".

    Examples:
        >>> is_empty(None)
        True
        >>> is_empty(" ")
        False
    """
    return text is None or len(text) == 0


def is_not_empty(text: Optional[str]) -> bool:
    return not is_empty(text)


def is_blank(text: Optional[str]) -> bool:
    """
    Check if a string is None, empty or whitespace only.

    Examples:
        >>> is_blank("  ")
        True
        >>> is_blank("  bob  ")
        False
    """
    return text is None or text.strip() == ""


def is_not_blank(text: Optional[str]) -> bool:
    return not is_blank(text)


def trim(text: Optional[str]) -> Optional[str]:
    return None if text is None else text.strip()


def trim_to_none(text: Optional[str]) -> Optional[str]:
    """Trim, returning None when nothing is left."""
    trimmed = trim(text)
    return None if is_empty(trimmed) else trimmed


def trim_to_empty(text: Optional[str]) -> str:
    return EMPTY if text is None else text.strip()


def is_number(text: Optional[str]) -> bool:
    """
    Check whether the string is a valid numeric literal.

    Accepts an optional leading minus, hexadecimal with a `0x` prefix,
    decimals, scientific notation and a trailing type qualifier
    (`l`/`L` for integers, `f`/`F`/`d`/`D` for floating values).
    None and "" are not numbers.

    Examples:
        >>> is_number("-45.9954")
        True
        >>> is_number("0x0085")
        True
        >>> is_number("79.34.45")
        False
        >>> is_number("99,685,434,343")
        False
    """
    if is_empty(text):
        return False
    chars = text
    size = len(chars)
    start = 1 if chars[0] == '-' else 0

    if size > start + 1 and chars[start] == '0' and chars[start + 1] in 'xX':
        i = start + 2
        if i == size:
            return False
        return all(c in '0123456789abcdefABCDEF' for c in chars[i:])

    has_exp = False
    has_dec_point = False
    allow_signs = False
    found_digit = False

    # Loop to the next to last char, the last one may be a type qualifier
    last = size - 1
    i = start
    while i < last or (i < last + 1 and allow_signs and not found_digit):
        c = chars[i]
        if '0' <= c <= '9':
            found_digit = True
            allow_signs = False
        elif c == '.':
            if has_dec_point or has_exp:
                return False
            has_dec_point = True
        elif c in 'eE':
            if has_exp or not found_digit:
                return False
            has_exp = True
            allow_signs = True
        elif c in '+-':
            if not allow_signs:
                return False
            allow_signs = False
            found_digit = False
        else:
            return False
        i += 1

    if i < size:
        c = chars[i]
        if '0' <= c <= '9':
            return True
        if c in 'eE':
            return False
        if c == '.':
            if has_dec_point or has_exp:
                return False
            return found_digit
        if not allow_signs and c in 'dDfF':
            return found_digit
        if c in 'lL':
            return found_digit and not has_exp and not has_dec_point
        return False

    return not allow_signs and found_digit


# =============================================================================
# RANDOM STRINGS
# =============================================================================

def _is_surrogate(code_point: int) -> bool:
    return 0xD800 <= code_point <= 0xDFFF


def _accepts(code_point: int, letters: bool, numbers: bool) -> bool:
    if _is_surrogate(code_point):
        return False
    if not letters and not numbers:
        return True
    ch = chr(code_point)
    return (letters and ch.isalpha()) or (numbers and ch.isdigit())


def random_string(
    count: int,
    letters: bool = False,
    numbers: bool = False,
    start: int = 0,
    end: int = 0,
    rng: Optional[random.Random] = None
) -> str:
    """
    Create a random string of `count` characters.

    Characters are drawn from the code point range [start, end). When both
    bounds are 0 the range defaults to ' '..'z' if letters or numbers are
    requested, otherwise to the whole Unicode range (surrogates excluded).
    Letters and numbers are any Unicode letters and digits in the range.

    Args:
        count: Length of the string to create
        letters: Include alphabetic characters
        numbers: Include numeric characters
        start: First code point (inclusive)
        end: Last code point (exclusive)
        rng: Random source, defaults to a module level instance

    Returns:
        The random string

    Raises:
        ValueError: If count is negative, the range is empty or outside
            Unicode, or the range holds no acceptable character
    """
    if count == 0:
        return EMPTY
    if count < 0:
        raise ValueError(f"Requested random string length {count} is less than 0.")
    rng = rng or _RANDOM

    if start == 0 and end == 0:
        if letters or numbers:
            start, end = ord(' '), ord('z') + 1
        else:
            end = 0x110000
    if end <= start or start < 0 or end > 0x110000:
        raise ValueError(f"Invalid code point range [{start}, {end}).")
    if not any(_accepts(cp, letters, numbers) for cp in range(start, end)):
        raise ValueError(f"No acceptable character in code point range [{start}, {end}).")

    buffer = []
    while len(buffer) < count:
        code_point = rng.randrange(start, end)
        if _accepts(code_point, letters, numbers):
            buffer.append(chr(code_point))
    return "".join(buffer)


def random_ascii(count: int) -> str:
    """Random string of printable ASCII characters (32..126)."""
    return random_string(count, start=32, end=127)


def random_alphanumeric(count: int) -> str:
    return random_string(count, letters=True, numbers=True)


def random_numeric(count: int) -> str:
    return random_string(count, numbers=True)


# =============================================================================
# AFFIXES AND WHITESPACE
# =============================================================================

def remove_left(value: str, prefix: str, case_sensitive: bool = True) -> str:
    """
    Return `value` with `prefix` removed, if present.

    Raises:
        ValueError: If value or prefix is None
    """
    if value is None or prefix is None:
        raise ValueError("Value or prefix must not be None.")
    if case_sensitive:
        return value[len(prefix):] if value.startswith(prefix) else value
    return value[len(prefix):] if value.lower().startswith(prefix.lower()) else value


def remove_right(value: str, suffix: str, case_sensitive: bool = True) -> str:
    """
    Return `value` with `suffix` removed, if present.

    Raises:
        ValueError: If value or suffix is None
    """
    if value is None or suffix is None:
        raise ValueError("Value or suffix must not be None.")
    if suffix and ends_with(value, suffix, case_sensitive=case_sensitive):
        return value[:len(value) - len(suffix)]
    return value


def ends_with(
    value: str,
    search: str,
    case_sensitive: bool = True,
    position: Optional[int] = None
) -> bool:
    """
    Test if `value` (cut at `position`, default: full length) ends with `search`.
    """
    _require(value)
    if position is None:
        position = len(value)
    head = value[:position]
    if case_sensitive:
        return head.endswith(search)
    return head.lower().endswith(search.lower())


def collapse_whitespace(value: str) -> str:
    """Trim and replace runs of whitespace with a single space."""
    _require(value)
    return _MULTI_WHITESPACE.sub(" ", value.strip())


# =============================================================================
# CASE CONVERSION
# =============================================================================

def upper_first(value: str) -> str:
    """Upper-case the first character."""
    _require(value)
    if len(value) <= 1:
        return value.upper()
    return value[0].upper() + value[1:]


def lower_first(value: str) -> str:
    """Lower-case the first character."""
    _require(value)
    if len(value) <= 1:
        return value.lower()
    return value[0].lower() + value[1:]


def to_studly_case(value: str) -> str:
    """
    Transform to StudlyCaps.

    Examples:
        >>> to_studly_case("first_name")
        'FirstName'
        >>> to_studly_case("firstName")
        'FirstName'
    """
    _require(value)
    words = _WORD_SEPARATOR.split(collapse_whitespace(value))
    return "".join(upper_first(word) for word in words if word)


def to_camel_case(value: str) -> str:
    """
    Transform to camelCase.

    Examples:
        >>> to_camel_case("first_name")
        'firstName'
        >>> to_camel_case("role-id")
        'roleId'
    """
    _require(value)
    studly = to_studly_case(value)
    if not studly:
        return studly
    return studly[0].lower() + studly[1:]


def to_decamelize(value: str, separator: str) -> str:
    """
    Split a camel/studly/snake string into lower-case words joined by `separator`.

    Examples:
        >>> to_decamelize("firstName", "-")
        'first-name'
    """
    camel = to_camel_case(value)
    words = [w for w in _BEFORE_UPPER.split(camel) if w]
    return separator.join(w.lower() for w in words)


def to_snake_case(value: str) -> str:
    """
    Transform to snake_case.

    Examples:
        >>> to_snake_case("firstName")
        'first_name'
        >>> to_snake_case("first_name")
        'first_name'
    """
    return to_decamelize(value, "_")
