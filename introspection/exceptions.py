"""
Exception types raised by the introspection package and commons.asserts.
"""

from typing import Optional


class InvalidArgumentError(ValueError):
    """A required argument was None, blank or otherwise unusable."""


class InvocationError(RuntimeError):
    """
    A reflective call could not be made, or the called code raised.

    Attributes:
        cause: The underlying exception, if any (also chained as __cause__)
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class IntrospectionError(InvocationError):
    """Metadata (e.g. a property descriptor) could not be built for a class."""


class PropertyNotFoundError(AttributeError):
    """No matching getter or setter exists (raised only in strict mode)."""

    def __init__(self, owner: type, property_name: str, accessor: str):
        super().__init__(
            f"No {accessor} for property '{property_name}' on {owner.__qualname__}"
        )
        self.owner = owner
        self.property_name = property_name
        self.accessor = accessor
