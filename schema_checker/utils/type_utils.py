from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Union


class TypeTag(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNKNOWN = "unknown"

    # pseudo-tag: only meaningful as an is_of_type() target
    ANY = "any"


_ARTICLE_A = {TypeTag.STRING, TypeTag.NUMBER, TypeTag.BOOLEAN}
_ARTICLE_AN = {TypeTag.OBJECT, TypeTag.ARRAY, TypeTag.INTEGER}


def _to_tag(tag_or_name: Union[TypeTag, str]) -> TypeTag:
    if isinstance(tag_or_name, TypeTag):
        return tag_or_name
    try:
        return TypeTag(tag_or_name)
    except ValueError:
        raise ValueError(f"Unknown type name: '{tag_or_name}'") from None


def get_type(value: Any) -> TypeTag:
    """Classify a value of a parsed JSON/YAML tree.

    ``bool`` is checked before numbers since it subclasses ``int``. Integral
    floats (``3.0``) classify as integers, as they do in JSON.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, int):
        return TypeTag.INTEGER
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return TypeTag.INTEGER
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    return TypeTag.UNKNOWN


def is_of_type(value: Any, tag_or_name: Union[TypeTag, str]) -> bool:
    tag = _to_tag(tag_or_name)
    if tag is TypeTag.ANY:
        return True
    actual = get_type(value)
    if tag is TypeTag.NUMBER:
        return actual in (TypeTag.NUMBER, TypeTag.INTEGER)
    return actual is tag


def pretty_type(tag_or_name: Union[TypeTag, str]) -> str:
    """Render a type tag for messages, e.g. ``an integer`` or ``null``."""
    tag = _to_tag(tag_or_name)
    if tag in _ARTICLE_A:
        return f"a {tag.value}"
    if tag in _ARTICLE_AN:
        return f"an {tag.value}"
    if tag is TypeTag.ANY:
        return "any type"
    if tag is TypeTag.UNKNOWN:
        return "an unsupported value"
    return tag.value
