"""Tests for introspection.generics."""

import inspect
from typing import Any

import pytest

from introspection import (
    InvalidArgumentError,
    collection_element_type,
    generic_argument,
    is_assignable,
    parameter_actual_type,
    user_class,
)
from tests.beans import BaseDao, Role, RoleDao


def _sample(items: list[int], names: list, tags: set[str], mapping: dict, count: int, *rest: float):
    pass


PARAMS = inspect.signature(_sample).parameters


def test_collection_element_type() -> None:
    """Parameterized collections expose their element type."""
    assert collection_element_type(PARAMS['items']) is int
    assert collection_element_type(PARAMS['tags']) is str
    assert collection_element_type(PARAMS['names']) is None
    assert collection_element_type(PARAMS['count']) is None


def test_mappings_are_not_collections() -> None:
    assert collection_element_type(PARAMS['mapping']) is None
    assert parameter_actual_type(PARAMS['mapping']) is None


def test_parameter_actual_type() -> None:
    """Bare collections default to str, variadics give their annotation."""
    assert parameter_actual_type(PARAMS['items']) is int
    assert parameter_actual_type(PARAMS['names']) is str
    assert parameter_actual_type(PARAMS['rest']) is float
    assert parameter_actual_type(PARAMS['count']) is None


def test_none_parameter_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        collection_element_type(None)


def test_generic_argument() -> None:
    assert generic_argument(RoleDao) is Role
    assert generic_argument(RoleDao, 1) is object
    assert generic_argument(BaseDao) is object
    assert generic_argument(Role) is object


@pytest.mark.parametrize('source, target, expected', [
    (bool, int, True),
    (int, float, True),
    (int, complex, True),
    (float, int, False),
    (str, int, False),
    (None, str, True),
    (int, None, False),
    (int, Any, True),
    (list, list[int], True),
])
def test_is_assignable(source, target, expected) -> None:
    assert is_assignable(source, target) is expected


def test_user_class_unwraps_wrapped() -> None:
    class Proxy:
        __wrapped__ = Role

    assert user_class(Proxy) is Role
    assert user_class(Role) is Role
