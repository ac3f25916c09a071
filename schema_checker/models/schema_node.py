# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Typed view over one schema node.

A parsed schema document is a tree of plain mappings. ``SchemaNode`` lifts one
mapping into a closed set of attribute slots so checks can address attributes
by name instead of probing the mapping. Slots that are not set in the document
hold :data:`ABSENT`; ``None`` is a real value (JSON ``null``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Union

from ..utils.type_utils import TypeTag, get_type


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def _slot(key: str):
    return field(default=ABSENT, metadata={"key": key})


@dataclass(frozen=True)
class SchemaNode:
    # union attributes
    type: Any = _slot("type")
    disallow: Any = _slot("disallow")

    required: Any = _slot("required")
    enum: Any = _slot("enum")

    # object shape
    properties: Any = _slot("properties")
    pattern_properties: Any = _slot("patternProperties")
    additional_properties: Any = _slot("additionalProperties")

    # array shape
    items: Any = _slot("items")
    additional_items: Any = _slot("additionalItems")
    min_items: Any = _slot("minItems")
    max_items: Any = _slot("maxItems")
    unique_items: Any = _slot("uniqueItems")

    # numbers
    minimum: Any = _slot("minimum")
    maximum: Any = _slot("maximum")
    exclusive_minimum: Any = _slot("exclusiveMinimum")
    exclusive_maximum: Any = _slot("exclusiveMaximum")
    divisible_by: Any = _slot("divisibleBy")

    # strings
    min_length: Any = _slot("minLength")
    max_length: Any = _slot("maxLength")
    pattern: Any = _slot("pattern")

    default: Any = _slot("default")

    # unrecognised keys (title, description, format, dependencies, $ref, ...)
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)
    raw: Optional[Mapping] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "SchemaNode":
        """Build a node from a schema mapping without modifying it."""
        values = {}
        for slot in ATTRIBUTE_SLOTS.values():
            key = slot.metadata["key"]
            if key in mapping:
                values[slot.name] = mapping[key]
        extra = {key: value for key, value in mapping.items() if key not in ATTRIBUTE_NAMES}
        return cls(**values, extra=extra, raw=mapping)

    def get(self, key: str) -> Any:
        """Value of the attribute stored under document key ``key``."""
        slot = ATTRIBUTE_SLOTS.get(key)
        if slot is None:
            raise KeyError(f"Unknown schema attribute: '{key}'")
        return getattr(self, slot.name)


# document key -> dataclass field
ATTRIBUTE_SLOTS = {f.metadata["key"]: f for f in fields(SchemaNode) if "key" in f.metadata}
ATTRIBUTE_NAMES = frozenset(ATTRIBUTE_SLOTS)


@dataclass(frozen=True)
class TypeName:
    """A union member naming a type (``"string"``, ``"null"``, ...)."""
    name: str


@dataclass(frozen=True)
class SubSchema:
    """A union member given as an inline schema."""
    schema: Mapping


UnionMember = Union[TypeName, SubSchema]


def union_member(value: Any) -> Optional[UnionMember]:
    """Classify one element of a 'type' or 'disallow' union.

    Returns None when the element is neither a type name nor a schema.
    """
    tag = get_type(value)
    if tag is TypeTag.STRING:
        return TypeName(value)
    if tag is TypeTag.OBJECT:
        return SubSchema(value)
    return None
