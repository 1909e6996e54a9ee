"""
Conversion of flat parameter maps with dotted keys into nested dictionaries.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional


def _unwrap(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            return None
        if len(value) == 1:
            return value[0]
    return value


def inheritable_params(flat: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Turn dotted keys into nested dictionaries.

    `{'user.name': 'sam', 'user.role.id': ['1'], 'page': ['2', '3']}` becomes
    `{'user': {'name': 'sam', 'role': {'id': '1'}}, 'page': ['2', '3']}`.

    Single-item lists and tuples are unwrapped, empty ones become None,
    longer ones are kept. When a plain key and a dotted key share a prefix
    the one seen later wins.

    Args:
        flat: Request style parameters, usually values are lists of strings

    Returns:
        Nested dictionary (empty for None or empty input)
    """
    if not flat:
        return {}

    result: Dict[str, Any] = {}
    for key, value in flat.items():
        prefix, dot, rest = key.partition('.')
        if dot and prefix:
            child = result.get(prefix)
            if not isinstance(child, dict):
                child = {}
                result[prefix] = child
            child[rest] = value
        else:
            result[key] = _unwrap(value)

    for key, value in result.items():
        if isinstance(value, Mapping):
            result[key] = inheritable_params(value)
    return result
