"""
Validation Utilities - regex checks for e-mail, domain, IP and mainland China mobile numbers.
"""

import re
from enum import Enum
from typing import Optional

from config.constants import (
    EMAIL_PATTERN,
    DOMAIN_PATTERN,
    IP_PATTERN,
    MOBILE_PATTERN,
    CARRIER_PATTERNS,
)


def validate_regex(value: Optional[str], expression: Optional[str], case_sensitive: bool = True) -> bool:
    """
    Match the whole (trimmed) value against a regular expression.

    Args:
        value: String to check; None or blank never matches
        expression: Regular expression; None or blank never matches
        case_sensitive: False to ignore case

    Returns:
        True if the value matches
    """
    if value is None or not value.strip() or expression is None or not expression.strip():
        return False
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.fullmatch(expression, value.strip(), flags) is not None


def is_valid_email(email: Optional[str]) -> bool:
    return validate_regex(email, EMAIL_PATTERN, True)


def is_valid_domain(domain: Optional[str]) -> bool:
    """Domain name with an optional http:// or https:// scheme."""
    return validate_regex(domain, DOMAIN_PATTERN, True)


def is_valid_ip(ip: Optional[str]) -> bool:
    """Dotted quad shape check (octet ranges are not checked)."""
    return ip is not None and re.fullmatch(IP_PATTERN, ip) is not None


def is_valid_mobile(mobile: Optional[str]) -> bool:
    return mobile is not None and re.fullmatch(MOBILE_PATTERN, mobile) is not None


class TelecomProvider(Enum):
    """Mainland China carriers, identified by number segment."""
    MOBILE = 'MOBILE'
    CHINA_UNICOM = 'CHINA_UNICOM'
    TELECOM = 'TELECOM'

    def matches(self, mobile: Optional[str]) -> bool:
        if mobile is None:
            return False
        return re.fullmatch(CARRIER_PATTERNS[self.value], mobile) is not None

    @classmethod
    def detect(cls, mobile: Optional[str]) -> Optional['TelecomProvider']:
        """Carrier owning the number, or None when no segment matches."""
        for provider in cls:
            if provider.matches(mobile):
                return provider
        return None
