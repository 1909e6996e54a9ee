"""Tests for commons.validation."""

import pytest

from commons import validation
from commons.validation import TelecomProvider


class TestValidateRegex:
    """Whole-string regex matching."""

    def test_full_match_only(self) -> None:
        assert validation.validate_regex('abc123', r'[a-z]+\d+')
        assert not validation.validate_regex('abc123x', r'[a-z]+\d+')

    def test_value_is_trimmed(self) -> None:
        assert validation.validate_regex('  abc  ', r'abc')

    def test_case_insensitive(self) -> None:
        assert not validation.validate_regex('ABC', r'abc')
        assert validation.validate_regex('ABC', r'abc', case_sensitive=False)

    @pytest.mark.parametrize('value, expression', [(None, 'a'), ('  ', 'a'), ('a', None), ('a', ' ')])
    def test_blank_never_matches(self, value, expression) -> None:
        assert not validation.validate_regex(value, expression)


@pytest.mark.parametrize('email, expected', [
    ('user.name@example.com', True),
    ('dev-team@mail.example.com.cn', True),
    ('bad@', False),
    ('no-at-sign.com', False),
    (None, False),
])
def test_is_valid_email(email, expected) -> None:
    assert validation.is_valid_email(email) is expected


@pytest.mark.parametrize('domain, expected', [
    ('www.example.com', True),
    ('https://example.org', True),
    ('example', False),
])
def test_is_valid_domain(domain, expected) -> None:
    assert validation.is_valid_domain(domain) is expected


@pytest.mark.parametrize('ip, expected', [
    ('192.168.1.1', True),
    ('1.2.3', False),
    ('1.2.3.4.5', False),
    (None, False),
])
def test_is_valid_ip(ip, expected) -> None:
    assert validation.is_valid_ip(ip) is expected


@pytest.mark.parametrize('mobile, expected', [
    ('13812345678', True),
    ('19912345678', True),
    ('12812345678', False),
    ('1381234567', False),
    (None, False),
])
def test_is_valid_mobile(mobile, expected) -> None:
    assert validation.is_valid_mobile(mobile) is expected


@pytest.mark.parametrize('mobile, provider', [
    ('13812345678', TelecomProvider.MOBILE),
    ('13401234567', TelecomProvider.MOBILE),
    ('13012345678', TelecomProvider.CHINA_UNICOM),
    ('18612345678', TelecomProvider.CHINA_UNICOM),
    ('18912345678', TelecomProvider.TELECOM),
    ('19912345678', TelecomProvider.TELECOM),
    ('19012345678', None),
    (None, None),
])
def test_detect_provider(mobile, provider) -> None:
    assert TelecomProvider.detect(mobile) is provider


def test_provider_matches() -> None:
    assert TelecomProvider.TELECOM.matches('17712345678')
    assert not TelecomProvider.MOBILE.matches('17712345678')
