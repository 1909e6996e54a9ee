"""
Reflective Metadata Registry.

Computes and memoizes the structural metadata of a class: fields (own and
inherited), declared methods (including concrete methods of the abstract or
Protocol bases it implements), getter/setter lists and property descriptors.

Fields are the names a class annotates in its own body (dataclasses, pydantic
models, typed plain classes), excluding ClassVar, followed by its own
`__slots__`. Attributes only assigned in `__init__` are not fields.

Ordering contract, used everywhere: the most-derived class comes first, then its
ancestors in MRO order; `object` is never included. Within a class, members are
in definition order.
"""

import inspect
import threading
import types
import typing
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from config.settings import settings
from commons import strings
from commons.logger import setup_logger
from introspection.exceptions import InvalidArgumentError, IntrospectionError

logger = setup_logger('introspection')

GETTER_PREFIX = 'get'
SETTER_PREFIX = 'set'


# =============================================================================
# METADATA TYPES
# =============================================================================

@dataclass(frozen=True)
class FieldInfo:
    """A field declared on a class body."""
    name: str
    type: Any
    declaring_class: type


@dataclass(frozen=True)
class MethodInfo:
    """A callable declared on a class body, with its positional parameter types."""
    name: str
    function: Callable
    declaring_class: type
    parameter_types: Tuple[Any, ...] = ()
    is_abstract: bool = False
    is_static: bool = False
    is_classmethod: bool = False

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)

    def accepts(self, param_types: Tuple[Any, ...]) -> bool:
        """
        Exact parameter list match.

        `typing.Any` (an unannotated parameter) matches any requested type, and
        an Optional/Union annotation matches each of its members.
        """
        if len(param_types) != len(self.parameter_types):
            return False
        return all(_type_matches(declared, requested)
                   for declared, requested in zip(self.parameter_types, param_types))


@dataclass(frozen=True)
class PropertyDescriptor:
    """A read/write property: a getter/setter pair or a Python property with a setter."""
    name: str
    property_type: Any
    read_method: Callable
    write_method: Callable
    declaring_class: type


def _type_matches(declared: Any, requested: Any) -> bool:
    if declared is Any or declared == requested:
        return True
    if typing.get_origin(declared) in (typing.Union, types.UnionType):
        return requested in typing.get_args(declared)
    return False


# =============================================================================
# CLASS INSPECTION (uncached)
# =============================================================================

def ancestors(cls: type) -> Tuple[type, ...]:
    """The class followed by its ancestors in MRO order, without `object`."""
    return tuple(c for c in inspect.getmro(cls) if c is not object)


def is_interface(cls: type) -> bool:
    """Protocols and abstract classes play the role of interfaces."""
    return bool(getattr(cls, '_is_protocol', False)) or inspect.isabstract(cls)


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(('ClassVar', 'typing.ClassVar'))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _own_annotations(cls: type) -> Dict[str, Any]:
    try:
        return inspect.get_annotations(cls, eval_str=True)
    except Exception as e:
        # Unresolvable forward references: keep the raw strings
        logger.debug(f"Could not resolve annotations of {cls.__qualname__}: {e}")
        return inspect.get_annotations(cls)


def _own_slots(cls: type) -> Tuple[str, ...]:
    slots = cls.__dict__.get('__slots__', ())
    if isinstance(slots, str):
        slots = (slots,)
    return tuple(s for s in slots if s not in ('__dict__', '__weakref__'))


def compute_declared_fields(cls: type) -> Tuple[FieldInfo, ...]:
    fields = []
    seen = {}
    for name, annotation in _own_annotations(cls).items():
        if name.startswith('__') or _is_class_var(annotation):
            continue
        fields.append(FieldInfo(name, annotation, cls))
        seen[name] = True
    for name in _own_slots(cls):
        if name not in seen:
            fields.append(FieldInfo(name, Any, cls))
    return tuple(fields)


def _parameter_types(function: Callable, skip_first: bool) -> Tuple[Any, ...]:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return ()
    try:
        hints = typing.get_type_hints(function)
    except Exception:
        hints = getattr(function, '__annotations__', {}) or {}

    params = [p for p in signature.parameters.values()
              if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    if skip_first and params:
        params = params[1:]
    return tuple(hints.get(p.name, Any) for p in params)


def build_method_info(name: str, member: Any, declaring_class: type) -> Optional[MethodInfo]:
    """Describe a class-body member, or None when it is not a method."""
    if isinstance(member, staticmethod):
        function = member.__func__
        return MethodInfo(name, function, declaring_class, _parameter_types(function, False),
                          getattr(function, '__isabstractmethod__', False), is_static=True)
    if isinstance(member, classmethod):
        function = member.__func__
        return MethodInfo(name, function, declaring_class, _parameter_types(function, True),
                          getattr(function, '__isabstractmethod__', False), is_classmethod=True)
    if inspect.isfunction(member):
        return MethodInfo(name, member, declaring_class, _parameter_types(member, True),
                          getattr(member, '__isabstractmethod__', False))
    return None


def own_methods(cls: type) -> Tuple[MethodInfo, ...]:
    """Methods defined in the class body; dunder hooks are left out."""
    methods = []
    for name, member in cls.__dict__.items():
        if name.startswith('__') and name.endswith('__'):
            continue
        info = build_method_info(name, member, cls)
        if info is not None:
            methods.append(info)
    return tuple(methods)


def compute_declared_methods(cls: type) -> Tuple[MethodInfo, ...]:
    """
    Methods of the class body, then concrete methods of the interfaces
    (abstract or Protocol bases) the class directly implements.
    """
    methods = list(own_methods(cls))
    names = {m.name for m in methods}
    for base in cls.__bases__:
        if base is object or not is_interface(base):
            continue
        for method in own_methods(base):
            if method.is_abstract or method.name in names:
                continue
            methods.append(method)
            names.add(method.name)
    return tuple(methods)


def interface_methods(cls: type) -> Tuple[MethodInfo, ...]:
    """Public callables of an interface, abstract ones included."""
    return tuple(m for m in own_methods(cls) if not m.name.startswith('_'))


def is_getter(method: Optional[MethodInfo]) -> bool:
    """`get_xxx` / `getXxx` instance method without parameters."""
    return (method is not None and not method.is_static and not method.is_classmethod
            and _accessor_suffix(method.name, GETTER_PREFIX) is not None
            and method.parameter_count == 0)


def is_setter(method: Optional[MethodInfo]) -> bool:
    """`set_xxx` / `setXxx` instance method with exactly one parameter."""
    return (method is not None and not method.is_static and not method.is_classmethod
            and _accessor_suffix(method.name, SETTER_PREFIX) is not None
            and method.parameter_count == 1)


def _accessor_suffix(name: str, prefix: str) -> Optional[str]:
    if not name.startswith(prefix) or len(name) <= len(prefix):
        return None
    rest = name[len(prefix):]
    if rest.startswith('_') and len(rest) > 1 and not rest.startswith('__'):
        return rest[1:]
    if rest[0].isupper():
        return rest
    return None


def property_name_of(method: MethodInfo) -> str:
    """`get_first_name` -> `first_name`, `getFirstName` -> `firstName`."""
    for prefix in (GETTER_PREFIX, SETTER_PREFIX):
        suffix = _accessor_suffix(method.name, prefix)
        if suffix is not None:
            return suffix if method.name[len(prefix)] == '_' else strings.lower_first(suffix)
    return method.name


def accessor_names(prefix: str, property_name: str) -> Tuple[str, ...]:
    """Candidate accessor names: `<prefix>_<snake>` then `<prefix><Studly>`."""
    if strings.is_blank(property_name):
        raise InvalidArgumentError("Property name must not be blank.")
    candidates = (
        f"{prefix}_{strings.to_snake_case(property_name)}",
        f"{prefix}{strings.to_studly_case(property_name)}",
    )
    return tuple(dict.fromkeys(candidates))


# =============================================================================
# REGISTRY
# =============================================================================

class MetadataRegistry:
    """
    Thread-safe memo of class metadata.

    Entries are keyed by class identity, so subclasses have their own entries.
    Values are computed outside the lock and stored with setdefault: two
    threads populating the same entry may both compute it, and both get the
    first stored value.

    Args:
        max_types: Keep at most this many classes, evicting the least recently
            used one. None (default) keeps every class for the registry's life.
    """

    def __init__(self, max_types: Optional[int] = None):
        if max_types is not None and max_types <= 0:
            raise InvalidArgumentError(f"max_types must be positive, got {max_types}")
        self._max_types = max_types
        self._entries: 'OrderedDict[type, Dict[Hashable, Any]]' = OrderedDict()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, cls: type) -> bool:
        with self._lock:
            return cls in self._entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _memo(self, cls: type, key: Hashable, compute: Callable[[], Any]) -> Any:
        with self._lock:
            entry = self._entries.get(cls)
            if entry is not None:
                self._entries.move_to_end(cls)
                if key in entry:
                    return entry[key]

        value = compute()

        with self._lock:
            entry = self._entries.get(cls)
            if entry is None:
                entry = self._entries[cls] = {}
            self._entries.move_to_end(cls)
            stored = entry.setdefault(key, value)
            if self._max_types is not None:
                while len(self._entries) > self._max_types:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug(f"Evicted metadata of {evicted.__qualname__}")
            return stored

    @staticmethod
    def _require_class(cls: Any) -> None:
        if cls is None:
            raise InvalidArgumentError("Class must not be None.")
        if not isinstance(cls, type):
            raise InvalidArgumentError(f"Expected a class, got {cls!r}")

    # --- Fields ---

    def get_declared_fields(self, cls: type) -> Tuple[FieldInfo, ...]:
        self._require_class(cls)
        return self._memo(cls, 'declared_fields', lambda: compute_declared_fields(cls))

    def get_fields(self, cls: type) -> Tuple[FieldInfo, ...]:
        """
        All fields of the class and its ancestors (without `object`).

        Raises:
            InvalidArgumentError: If cls is None
        """
        self._require_class(cls)

        def compute():
            fields = []
            for klass in ancestors(cls):
                fields.extend(self.get_declared_fields(klass))
            return tuple(fields)

        return self._memo(cls, 'fields', compute)

    def find_field(self, cls: type, name: Optional[str] = None, field_type: Any = None) -> Optional[FieldInfo]:
        """
        First field up the ancestor chain matching name and/or type (exact equality).

        Raises:
            InvalidArgumentError: If cls is None or neither name nor field_type is given
        """
        self._require_class(cls)
        if name is None and field_type is None:
            raise InvalidArgumentError("Either name or type of the field must be specified.")
        for klass in ancestors(cls):
            for field in self.get_declared_fields(klass):
                if (name is None or name == field.name) and (field_type is None or field_type == field.type):
                    return field
        return None

    # --- Methods ---

    def get_declared_methods(self, cls: type) -> Tuple[MethodInfo, ...]:
        self._require_class(cls)
        return self._memo(cls, 'declared_methods', lambda: compute_declared_methods(cls))

    def find_method(self, cls: type, name: str, *param_types: Any) -> Optional[MethodInfo]:
        """
        Find a method by name and exact parameter types, walking up the ancestors.

        Interfaces are searched through their public callables, classes through
        their declared methods. `find_method(cls, name, None)` matches by name only;
        `find_method(cls, name)` requires a method without parameters.

        Raises:
            InvalidArgumentError: If cls is None or name is blank
        """
        self._require_class(cls)
        if strings.is_blank(name):
            raise InvalidArgumentError("Method name must not be blank.")
        any_signature = param_types == (None,)

        for klass in ancestors(cls):
            candidates = interface_methods(klass) if is_interface(klass) else self.get_declared_methods(klass)
            for method in candidates:
                if method.name != name:
                    continue
                if any_signature or method.accepts(param_types):
                    return method
        return None

    def _accessors(self, cls: type, declared_only: bool, predicate: Callable[[MethodInfo], bool]) -> Tuple[MethodInfo, ...]:
        if declared_only:
            return tuple(m for m in self.get_declared_methods(cls) if predicate(m))
        found = {}
        for klass in ancestors(cls):
            for method in self.get_declared_methods(klass):
                # Overrides in a more derived class win
                if method.name not in found and predicate(method):
                    found[method.name] = method
        return tuple(found.values())

    def getters(self, cls: type, declared_only: bool = False) -> Tuple[MethodInfo, ...]:
        """Getter methods; with declared_only=False inherited ones are included."""
        self._require_class(cls)
        return self._memo(cls, ('getters', bool(declared_only)),
                          lambda: self._accessors(cls, declared_only, is_getter))

    def setters(self, cls: type, declared_only: bool = False) -> Tuple[MethodInfo, ...]:
        """Setter methods; with declared_only=False inherited ones are included."""
        self._require_class(cls)
        return self._memo(cls, ('setters', bool(declared_only)),
                          lambda: self._accessors(cls, declared_only, is_setter))

    # --- Property descriptors ---

    def build_property_descriptor(self, cls: type, field: FieldInfo) -> PropertyDescriptor:
        """
        Describe a field as a read/write property.

        Raises:
            IntrospectionError: If no read accessor or no write accessor exists
        """
        attribute = inspect.getattr_static(cls, field.name, None)
        if isinstance(attribute, property):
            if attribute.fget is None or attribute.fset is None:
                raise IntrospectionError(
                    f"Property '{field.name}' of {cls.__qualname__} is not readable and writable"
                )
            return PropertyDescriptor(field.name, field.type, attribute.fget, attribute.fset, field.declaring_class)

        reader = self.find_accessor(cls, GETTER_PREFIX, field.name)
        if reader is None:
            raise IntrospectionError(f"Method not found: {cls.__qualname__}#get {field.name}")
        writer = self.find_accessor(cls, SETTER_PREFIX, field.name)
        if writer is None:
            raise IntrospectionError(f"Method not found: {cls.__qualname__}#set {field.name}")
        return PropertyDescriptor(field.name, field.type, reader.function, writer.function, field.declaring_class)

    def find_accessor(self, cls: type, prefix: str, property_name: str, *param_types: Any) -> Optional[MethodInfo]:
        """
        Getter or setter for a property, trying each candidate name in turn.

        Without param_types a getter must take no parameters and a setter
        exactly one parameter of any type.
        """
        predicate = is_getter if prefix == GETTER_PREFIX else is_setter
        for name in accessor_names(prefix, property_name):
            if param_types:
                method = self.find_method(cls, name, *param_types)
            elif prefix == GETTER_PREFIX:
                method = self.find_method(cls, name)
            else:
                method = self.find_method(cls, name, None)
            if method is not None and predicate(method):
                return method
        return None

    def get_property_descriptors(self, cls: type) -> Tuple[PropertyDescriptor, ...]:
        """
        One descriptor per field (first occurrence of a name wins).
        Fields without a getter/setter pair are logged and skipped.
        """
        self._require_class(cls)

        def compute():
            descriptors = []
            names = {}
            for field in self.get_fields(cls):
                if field.name in names:
                    continue
                names[field.name] = True
                try:
                    descriptors.append(self.build_property_descriptor(cls, field))
                except IntrospectionError as e:
                    logger.warning(f"Skipping property '{field.name}' of {cls.__qualname__}: {e}")
            return tuple(descriptors)

        return self._memo(cls, 'property_descriptors', compute)


# Process-wide registry used when none is injected
default_registry = MetadataRegistry(max_types=settings.METADATA_CACHE_MAX_TYPES)
