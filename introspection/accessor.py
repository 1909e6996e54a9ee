"""
Bean Accessor - name-based property access on top of the metadata registry.

Property names may be given in snake_case or camelCase: `first_name` and
`firstName` both resolve to `get_first_name()` or, failing that,
`getFirstName()`.

A missing getter/setter is a soft miss by default: it is logged at ERROR,
`get` returns None and `set` does nothing. With strict mode
(STRICT_PROPERTY_ACCESS=true or `BeanAccessor(strict=True)`) a
PropertyNotFoundError is raised instead.
"""

import inspect
from typing import Any, Callable, Dict, Optional, Union

from config.settings import settings
from commons import strings
from commons.logger import setup_logger
from introspection.exceptions import (
    InvalidArgumentError,
    InvocationError,
    PropertyNotFoundError,
)
from introspection.metadata import (
    GETTER_PREFIX,
    SETTER_PREFIX,
    FieldInfo,
    MetadataRegistry,
    MethodInfo,
    default_registry,
    is_interface,
    property_name_of,
)

logger = setup_logger('accessor')


def _root_cause(error: BaseException) -> BaseException:
    while isinstance(error, InvocationError) and error.cause is not None:
        error = error.cause
    return error


def invoke_method(method: Union[MethodInfo, Callable, None], target: Any, *args: Any) -> Any:
    """
    Call a method on a target.

    Args:
        method: MethodInfo from the registry, or a plain function taking the
            target as first argument
        target: Instance to call the method on (ignored for static methods)
        *args: Positional arguments

    Returns:
        Whatever the method returns

    Raises:
        InvocationError: "Method not found" when there is nothing to call,
            "Could not access method" when the target or arguments do not fit
            the signature, or the original message (with the original error
            as cause) when the method itself raised
    """
    if method is None:
        raise InvocationError("Method not found: None")

    if isinstance(method, MethodInfo):
        function = method.function
        name = f"{method.declaring_class.__qualname__}#{method.name}"
        if function is None:
            raise InvocationError(f"Method not found: {name}")
        if method.is_static:
            call_args = args
        elif method.is_classmethod:
            owner = target if isinstance(target, type) else type(target)
            call_args = (owner,) + args
        else:
            if not is_interface(method.declaring_class) and not isinstance(target, method.declaring_class):
                raise InvocationError(
                    f"Could not access method: {name} on {type(target).__qualname__}"
                )
            call_args = (target,) + args
    else:
        function = method
        name = getattr(method, '__qualname__', repr(method))
        if not callable(function):
            raise InvocationError(f"Method not found: {name}")
        call_args = (target,) + args

    try:
        inspect.signature(function).bind(*call_args)
    except TypeError as e:
        raise InvocationError(f"Could not access method: {name}: {e}", cause=e) from e
    except ValueError:
        # Builtins without a signature are called as is
        pass

    try:
        return function(*call_args)
    except Exception as e:
        root = _root_cause(e)
        raise InvocationError(str(root), cause=root) from root


def get_field_value(field: FieldInfo, target: Any) -> Any:
    """Read a field directly, bypassing accessors."""
    if field is None or target is None:
        raise InvalidArgumentError("Field and target must not be None.")
    try:
        return getattr(target, field.name)
    except AttributeError as e:
        raise InvocationError(f"Could not access field: {field.name}: {e}", cause=e) from e


def set_field_value(field: FieldInfo, target: Any, value: Any) -> None:
    """Write a field directly, bypassing accessors (fails on frozen objects)."""
    if field is None or target is None:
        raise InvalidArgumentError("Field and target must not be None.")
    try:
        setattr(target, field.name, value)
    except (AttributeError, TypeError) as e:
        raise InvocationError(f"Could not access field: {field.name}: {e}", cause=e) from e


def instantiate(cls: type) -> Any:
    """
    Create an instance through the no-argument constructor.

    Raises:
        InvalidArgumentError: If cls is None
        InvocationError: If cls is abstract or a protocol, the constructor
            needs arguments, or it raised
    """
    if cls is None:
        raise InvalidArgumentError("Class must not be None.")
    if is_interface(cls):
        raise InvocationError(f"Could not instantiate {cls.__qualname__}: is it an abstract class or protocol?")
    try:
        inspect.signature(cls).bind()
    except TypeError as e:
        raise InvocationError(f"Could not instantiate {cls.__qualname__}: {e}", cause=e) from e
    except ValueError:
        pass
    try:
        return cls()
    except Exception as e:
        raise InvocationError(f"Could not instantiate {cls.__qualname__}: {e}", cause=e) from e


class BeanAccessor:
    """
    Generic get/set by property name.

    Args:
        registry: Metadata registry to use (default: the process-wide one)
        strict: Raise PropertyNotFoundError on a missing accessor instead of
            logging; defaults to settings.STRICT_PROPERTY_ACCESS
    """

    def __init__(self, registry: Optional[MetadataRegistry] = None, strict: Optional[bool] = None):
        self.registry = registry if registry is not None else default_registry
        self.strict = settings.STRICT_PROPERTY_ACCESS if strict is None else strict

    def _report_missing(self, owner: type, property_name: str, accessor: str) -> None:
        if self.strict:
            raise PropertyNotFoundError(owner, property_name, accessor)
        logger.error(f"Method not found {owner.__qualname__}#{property_name} ({accessor})")

    def get(self, target: Any, property_name: str) -> Any:
        """
        Read a property through its getter.

        Returns:
            The getter's result, or None when no getter exists (soft miss)

        Raises:
            InvalidArgumentError: If target is None or property_name is blank
            PropertyNotFoundError: On a missing getter in strict mode
            InvocationError: If the getter raised
        """
        if target is None:
            raise InvalidArgumentError(f"Cannot read '{property_name}' of None.")
        if strings.is_blank(property_name):
            raise InvalidArgumentError("Property name must not be blank.")

        owner = type(target)
        getter = self.registry.find_accessor(owner, GETTER_PREFIX, property_name)
        if getter is None:
            self._report_missing(owner, property_name, 'getter')
            return None
        return invoke_method(getter, target)

    def set(self, target: Any, property_name: str, value: Any) -> None:
        """
        Write a property through its setter.

        The setter must take a single parameter annotated with exactly
        `type(value)` (or unannotated). A None value matches any
        single-parameter setter. Without a matching setter this is a no-op
        (soft miss) or PropertyNotFoundError in strict mode.
        """
        if target is None:
            raise InvalidArgumentError(f"Cannot write '{property_name}' of None.")
        if strings.is_blank(property_name):
            raise InvalidArgumentError("Property name must not be blank.")

        owner = type(target)
        if value is None:
            setter = self.registry.find_accessor(owner, SETTER_PREFIX, property_name)
        else:
            setter = self.registry.find_accessor(owner, SETTER_PREFIX, property_name, type(value))
        if setter is None:
            self._report_missing(owner, property_name, 'setter')
            return
        invoke_method(setter, target, value)

    def nested_get(self, target: Any, path: str) -> Any:
        """
        Follow a dotted path of getters, e.g. `user.role.id`.

        Raises:
            InvalidArgumentError: If target is None or path is blank, and when
                a step in the middle of the path yields None
        """
        if target is None:
            raise InvalidArgumentError("Target must not be None.")
        if strings.is_blank(path):
            raise InvalidArgumentError("Property path must not be blank.")

        value = target
        for name in path.split('.'):
            value = self.get(value, name)
        return value

    def to_map(self, bean: Any, *property_names: str) -> Dict[str, Any]:
        """
        Collect non-None property values into a dict.

        Without property names every getter of the bean (inherited ones
        included) is called and keyed by its property name (`get_first_name`
        gives `first_name`, `getFirstName` gives `firstName`). With names, each
        is read through `get` and keyed by the name as given.
        """
        if bean is None:
            raise InvalidArgumentError("Bean must not be None.")

        result: Dict[str, Any] = {}
        if not property_names:
            for getter in self.registry.getters(type(bean), False):
                value = invoke_method(getter, bean)
                if value is not None:
                    result[property_name_of(getter)] = value
            return result

        for name in property_names:
            value = self.get(bean, name)
            if value is not None:
                result[name] = value
        return result


default_accessor = BeanAccessor()


def get(target: Any, property_name: str) -> Any:
    return default_accessor.get(target, property_name)


def set(target: Any, property_name: str, value: Any) -> None:
    default_accessor.set(target, property_name, value)


def nested_get(target: Any, path: str) -> Any:
    return default_accessor.nested_get(target, path)


def to_map(bean: Any, *property_names: str) -> Dict[str, Any]:
    return default_accessor.to_map(bean, *property_names)
