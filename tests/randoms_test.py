"""Tests for commons.randoms."""

import string

import pytest

from commons import randoms


@pytest.mark.parametrize('generate, alphabet', [
    (randoms.next_number, string.digits),
    (randoms.next_upper, string.ascii_uppercase),
    (randoms.next_lower, string.ascii_lowercase),
    (randoms.next_word, string.ascii_letters),
    (randoms.next_string, string.ascii_letters + string.digits),
])
def test_alphabets(generate, alphabet) -> None:
    value = generate(64)
    assert len(value) == 64
    assert set(value) <= set(alphabet)


def test_zero_length() -> None:
    assert randoms.next_number(0) == ''


def test_negative_length() -> None:
    with pytest.raises(ValueError, match='must not be negative'):
        randoms.next_word(-1)
