"""
Field Coercion

Lenient converters used by the from_dict constructors. The API does not
always honour its documented types (string fields sometimes arrive as
boolean false), so each converter falls back to the type's empty value
instead of failing the whole response.
"""

import logging
import math
from typing import Any, Callable, Dict, List, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _mismatch(name: str, expected: str, value: Any) -> None:
    logger.debug(f"Field '{name}': expected {expected}, got {type(value).__name__} ({value!r})")


def as_str(data: Dict[str, Any], name: str) -> str:
    value = data.get(name)
    if isinstance(value, str):
        return value
    if value is None or value is False:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    _mismatch(name, "str", value)
    return ""


def as_int(data: Dict[str, Any], name: str) -> int:
    value = data.get(name)
    if value is None:
        return 0
    if isinstance(value, bool):
        _mismatch(name, "int", value)
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value)
        _mismatch(name, "int", value)
        return 0
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    _mismatch(name, "int", value)
    return 0


def as_bool(data: Dict[str, Any], name: str) -> bool:
    value = data.get(name)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.lower() in ("true", "1", "y", "yes")
    _mismatch(name, "bool", value)
    return False


def as_dict(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name)
    if isinstance(value, dict):
        return value
    if value is not None and value is not False:
        _mismatch(name, "object", value)
    return {}


def as_str_list(data: Dict[str, Any], name: str) -> List[str]:
    value = data.get(name)
    if not isinstance(value, list):
        if value is not None and value is not False:
            _mismatch(name, "list", value)
        return []
    return [item for item in value if isinstance(item, str)]


def as_list(data: Dict[str, Any], name: str, decode: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Decode a list of objects, skipping entries that are not objects."""
    value = data.get(name)
    if not isinstance(value, list):
        if value is not None and value is not False:
            _mismatch(name, "list", value)
        return []

    items = []
    for item in value:
        if isinstance(item, dict):
            items.append(decode(item))
        else:
            _mismatch(f"{name}[]", "object", item)
    return items
