"""
Type helpers: generic arguments, collection element types and assignability.
"""

import inspect
import typing
from collections import abc
from typing import Any, Optional

from introspection.exceptions import InvalidArgumentError

# Implicit numeric widening, int -> float -> complex
_NUMERIC_WIDENING = {
    int: (float, complex),
    float: (complex,),
}


def _annotation(parameter: inspect.Parameter) -> Any:
    if parameter is None:
        raise InvalidArgumentError("Parameter must not be None.")
    annotation = parameter.annotation
    return Any if annotation is inspect.Parameter.empty else annotation


def _is_collection(tp: Any) -> bool:
    origin = typing.get_origin(tp) or tp
    return (inspect.isclass(origin) and issubclass(origin, abc.Collection)
            and not issubclass(origin, (str, bytes, bytearray, abc.Mapping)))


def collection_element_type(parameter: inspect.Parameter) -> Optional[Any]:
    """
    Element type of a collection-typed parameter.

    `items: list[int]` gives `int`. Returns None when the parameter is not a
    collection or the collection is not parameterized.
    """
    annotation = _annotation(parameter)
    if not _is_collection(annotation):
        return None
    args = typing.get_args(annotation)
    if not args or args[0] is Ellipsis:
        return None
    return args[0]


def parameter_actual_type(parameter: inspect.Parameter) -> Optional[Any]:
    """
    The "real" type of a parameter that holds several values.

    For a collection this is its element type, `str` when unparameterized.
    Variadic `*args: int` gives `int`. Other parameters give None.
    """
    annotation = _annotation(parameter)
    if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
        return annotation
    if _is_collection(annotation):
        element = collection_element_type(parameter)
        return element if element is not None else str
    return None


def generic_argument(cls: type, index: int = 0) -> Any:
    """
    Type argument of a parameterized base class.

    `class UserDao(BaseDao[User])` gives `User` for index 0. Parameterized
    generic bases are searched in declaration order; `object` is returned
    when nothing can be determined.
    """
    if cls is None:
        raise InvalidArgumentError("Class must not be None.")
    for base in getattr(cls, '__orig_bases__', ()):
        args = typing.get_args(base)
        if not args:
            continue
        if 0 <= index < len(args):
            arg = args[index]
            if isinstance(arg, typing.TypeVar):
                return object
            return arg
        return object
    return object


def is_assignable(cls: Optional[type], to_cls: Optional[type]) -> bool:
    """
    Whether a value of type cls can be used where to_cls is expected.

    None (the type of a missing value) is assignable to anything except None,
    and ints widen to float and complex.
    """
    if to_cls is None:
        return False
    if cls is None:
        return True
    if cls == to_cls or to_cls is Any:
        return True
    if to_cls in _NUMERIC_WIDENING.get(cls, ()):
        return True
    target = typing.get_origin(to_cls) or to_cls
    source = typing.get_origin(cls) or cls
    try:
        return issubclass(source, target)
    except TypeError:
        return False


def user_class(cls: type) -> type:
    """Unwrap a proxy/wrapper class exposing the real class as `__wrapped__`."""
    wrapped = getattr(cls, '__wrapped__', None)
    if inspect.isclass(wrapped) and wrapped is not cls:
        return wrapped
    return cls
