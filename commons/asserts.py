"""
Argument assertions raising InvalidArgumentError.
"""

from typing import Any, Optional

from commons import objects, strings
from introspection.exceptions import InvalidArgumentError


def is_true(expression: bool, message: str = "Expression must be true") -> None:
    if not expression:
        raise InvalidArgumentError(message)


def has_length(text: Optional[str], message: str = "Text must contain at least one character") -> None:
    """Fail if text is None or empty."""
    if strings.is_empty(text):
        raise InvalidArgumentError(message)


def has_text(
    text: Optional[str],
    message: str = "Text must not be None and must contain at least one non-whitespace character"
) -> None:
    """Fail if text is None, empty or whitespace only."""
    if strings.is_blank(text):
        raise InvalidArgumentError(message)


def not_empty(value: Any, message: str = "Value must not be None or empty") -> None:
    """Fail if a collection, mapping or sequence is None or empty."""
    if objects.is_empty(value):
        raise InvalidArgumentError(message)


def not_none(value: Any, message: str = "Value must not be None") -> None:
    if value is None:
        raise InvalidArgumentError(message)


def is_instance_of(cls: type, obj: Any, message: str = "") -> None:
    """
    Fail unless obj is an instance of cls.

    Raises:
        InvalidArgumentError: If cls is None or obj is not an instance
    """
    if cls is None:
        raise InvalidArgumentError("Type to check against must not be None")
    if not isinstance(obj, cls):
        prefix = f"{message} " if message else ""
        owner = type(obj).__qualname__ if obj is not None else "None"
        raise InvalidArgumentError(
            f"{prefix}Object of class [{owner}] must be an instance of {cls.__qualname__}"
        )
