"""
Introspection package: cached class metadata and name-based property access.

--- Quick Reference ---

1. Metadata (metadata.py)
   from introspection import default_registry, MetadataRegistry
   - registry.get_fields(cls)                 fields of cls and ancestors, most-derived first
   - registry.find_field(cls, name, type)     first matching field up the chain
   - registry.find_method(cls, name, *types)  exact parameter types; (name, None) = any signature
   - registry.getters(cls) / setters(cls)     accessor methods
   - registry.get_property_descriptors(cls)   read/write properties

2. Property access (accessor.py)
   from introspection import get, set, nested_get, to_map
   - get(obj, "first_name")                   calls get_first_name() or getFirstName()
   - set(obj, "age", 30)                      calls set_age(30) if it takes an int
   - nested_get(obj, "role.id")               chained getters
   - to_map(obj)                              {property: value} for non-None getters

3. Types (generics.py)
   - generic_argument(cls), parameter_actual_type(param), is_assignable(a, b)
"""

from .exceptions import (
    InvalidArgumentError,
    InvocationError,
    IntrospectionError,
    PropertyNotFoundError,
)
from .metadata import (
    FieldInfo,
    MethodInfo,
    PropertyDescriptor,
    MetadataRegistry,
    default_registry,
    is_getter,
    is_setter,
)
from .accessor import (
    BeanAccessor,
    default_accessor,
    invoke_method,
    get_field_value,
    set_field_value,
    instantiate,
    get,
    set,
    nested_get,
    to_map,
)
from .generics import (
    collection_element_type,
    parameter_actual_type,
    generic_argument,
    is_assignable,
    user_class,
)


def get_fields(cls):
    return default_registry.get_fields(cls)


def find_field(cls, name=None, field_type=None):
    return default_registry.find_field(cls, name, field_type)


def get_declared_methods(cls):
    return default_registry.get_declared_methods(cls)


def find_method(cls, name, *param_types):
    return default_registry.find_method(cls, name, *param_types)


def get_property_descriptors(cls):
    return default_registry.get_property_descriptors(cls)


def getters(cls, declared_only=False):
    return default_registry.getters(cls, declared_only)


def setters(cls, declared_only=False):
    return default_registry.setters(cls, declared_only)


__all__ = [
    'InvalidArgumentError',
    'InvocationError',
    'IntrospectionError',
    'PropertyNotFoundError',
    'FieldInfo',
    'MethodInfo',
    'PropertyDescriptor',
    'MetadataRegistry',
    'default_registry',
    'BeanAccessor',
    'default_accessor',
    'get_fields',
    'find_field',
    'get_declared_methods',
    'find_method',
    'get_property_descriptors',
    'getters',
    'setters',
    'is_getter',
    'is_setter',
    'invoke_method',
    'get_field_value',
    'set_field_value',
    'instantiate',
    'get',
    'set',
    'nested_get',
    'to_map',
    'collection_element_type',
    'parameter_actual_type',
    'generic_argument',
    'is_assignable',
    'user_class',
]
