"""Tests for commons.strings."""

import random

import pytest

from commons import strings


@pytest.mark.parametrize('text', [
    '9987744232', '-98787544332', '34.9995834', '-45.9954', '23245.8', '0x0085',
    '1e5', '2.5E-3', '12L', '1.5f', '7d',
])
def test_is_number_accepts(text) -> None:
    assert strings.is_number(text)


@pytest.mark.parametrize('text', [
    '79.34.45', '99,685,434,343', '--4454', '', None, '-', '.', '1e', '0x', '1.5L', 'abc', '12a',
])
def test_is_number_rejects(text) -> None:
    assert not strings.is_number(text)


def test_emptiness_checks() -> None:
    assert strings.is_empty(None)
    assert strings.is_empty('')
    assert not strings.is_empty(' ')
    assert strings.is_blank(' \t')
    assert strings.is_not_blank(' bob ')
    assert strings.is_not_empty('x')


def test_trimming() -> None:
    assert strings.trim(None) is None
    assert strings.trim('  a ') == 'a'
    assert strings.trim_to_none('   ') is None
    assert strings.trim_to_empty(None) == ''


def test_equality() -> None:
    assert strings.equals(None, None)
    assert not strings.equals('a', None)
    assert strings.equals_ignore_case('ABC', 'abc')
    assert not strings.equals_ignore_case('abc', None)


@pytest.mark.parametrize('value, expected', [
    ('first_name', 'firstName'),
    ('first-name', 'firstName'),
    ('first name', 'firstName'),
    ('firstName', 'firstName'),
    ('FirstName', 'firstName'),
    ('  role   id ', 'roleId'),
    ('', ''),
])
def test_to_camel_case(value, expected) -> None:
    assert strings.to_camel_case(value) == expected


def test_to_studly_case() -> None:
    assert strings.to_studly_case('first_name') == 'FirstName'
    assert strings.to_studly_case('firstName') == 'FirstName'


@pytest.mark.parametrize('value, expected', [
    ('firstName', 'first_name'),
    ('FirstName', 'first_name'),
    ('first_name', 'first_name'),
    ('id', 'id'),
])
def test_to_snake_case(value, expected) -> None:
    assert strings.to_snake_case(value) == expected


def test_to_decamelize() -> None:
    assert strings.to_decamelize('employeeNo', '-') == 'employee-no'


def test_case_helpers_reject_none() -> None:
    with pytest.raises(ValueError):
        strings.to_camel_case(None)
    with pytest.raises(ValueError):
        strings.upper_first(None)


def test_first_letter_case() -> None:
    assert strings.upper_first('abc') == 'Abc'
    assert strings.lower_first('ABC') == 'aBC'
    assert strings.upper_first('a') == 'A'


def test_affixes() -> None:
    assert strings.remove_left('foobar', 'foo') == 'bar'
    assert strings.remove_left('FOObar', 'foo', case_sensitive=False) == 'bar'
    assert strings.remove_left('foobar', 'bar') == 'foobar'
    assert strings.remove_right('foobar', 'bar') == 'foo'
    assert strings.remove_right('fooBAR', 'bar', case_sensitive=False) == 'foo'
    assert strings.remove_right('foobar', '') == 'foobar'
    with pytest.raises(ValueError):
        strings.remove_left(None, 'x')


def test_ends_with() -> None:
    assert strings.ends_with('foobar', 'bar')
    assert strings.ends_with('foobar', 'foo', position=3)
    assert strings.ends_with('fooBAR', 'bar', case_sensitive=False)
    assert not strings.ends_with('foobar', 'foo')


def test_collapse_whitespace() -> None:
    assert strings.collapse_whitespace('  a   b \t\n c ') == 'a b c'


def test_random_strings() -> None:
    """Generated strings have the requested size and alphabet."""
    assert len(strings.random_string(12)) == 12
    assert strings.random_numeric(8).isdigit()
    alnum = strings.random_alphanumeric(40)
    assert len(alnum) == 40 and alnum.isascii() and alnum.isalnum()
    assert all(32 <= ord(c) <= 126 for c in strings.random_ascii(50))
    assert strings.random_string(0) == ''


def test_random_string_with_seeded_source() -> None:
    first = strings.random_string(10, letters=True, rng=random.Random(7))
    second = strings.random_string(10, letters=True, rng=random.Random(7))
    assert first == second
    assert first.isalpha()


def test_random_string_rejects_negative_length() -> None:
    with pytest.raises(ValueError, match='less than 0'):
        strings.random_string(-1)


def test_random_string_letters_from_cjk_range() -> None:
    """Letters outside ASCII are accepted when the range asks for them."""
    value = strings.random_string(4, letters=True, start=0x4E00, end=0x9FA5, rng=random.Random(3))
    assert len(value) == 4
    assert all(0x4E00 <= ord(c) < 0x9FA5 for c in value)


@pytest.mark.parametrize('kwargs', [
    {'letters': True, 'start': ord('0'), 'end': ord('9') + 1},
    {'numbers': True, 'start': ord('a'), 'end': ord('z') + 1},
    {'start': 0xD800, 'end': 0xE000},
])
def test_random_string_range_without_candidates(kwargs) -> None:
    with pytest.raises(ValueError, match='No acceptable character'):
        strings.random_string(5, **kwargs)


@pytest.mark.parametrize('start, end', [(10, 10), (-1, 5), (0, 0x110001)])
def test_random_string_invalid_range(start, end) -> None:
    with pytest.raises(ValueError, match='Invalid code point range'):
        strings.random_string(3, start=start, end=end)
