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

"""Leaf checks for single schema attributes.

Each check looks at one attribute family of a :class:`SchemaNode` and returns
the first :class:`SchemaIssue` it finds, or None. None of them recurse; nested
schema positions are handled by :mod:`schema_checker.schema.schema_validator`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Optional, Tuple, Union

from ..models.schema_node import ABSENT, SchemaNode
from ..utils.name_path import JsonPointer, describe_path, join_pointer
from ..utils.type_utils import TypeTag, get_type, is_of_type, pretty_type
from .issues import IssueKind, SchemaIssue


@dataclass(frozen=True)
class CheckContext:
    """Where a node sits in the tree being checked."""

    names: Tuple[str, ...] = ()
    pointer: JsonPointer = ""
    depth: int = 0
    max_depth: int = 100
    # ids of the mappings on the current recursion stack
    ancestors: FrozenSet[int] = frozenset()

    @property
    def label(self) -> str:
        return "Schema" + describe_path(self.names)

    def attribute_pointer(self, *tokens) -> JsonPointer:
        return join_pointer(self.pointer, *tokens)

    def property_child(self, container: str, name: str) -> "CheckContext":
        return CheckContext(
            names=self.names + (name,),
            pointer=join_pointer(self.pointer, container, name),
            depth=self.depth,
            max_depth=self.max_depth,
            ancestors=self.ancestors,
        )

    def anonymous_child(self, *tokens) -> "CheckContext":
        # inline sub-schemas start a fresh name path; the pointer keeps going
        return CheckContext(
            names=(),
            pointer=join_pointer(self.pointer, *tokens),
            depth=self.depth,
            max_depth=self.max_depth,
            ancestors=self.ancestors,
        )

    def enter(self, mapping: Any) -> "CheckContext":
        return CheckContext(
            names=self.names,
            pointer=self.pointer,
            depth=self.depth + 1,
            max_depth=self.max_depth,
            ancestors=self.ancestors | {id(mapping)},
        )


def invalid_type_issue(
    ctx: CheckContext,
    subject: str,
    value: Any,
    expected: str,
    pointer: JsonPointer,
) -> SchemaIssue:
    return SchemaIssue(
        kind=IssueKind.INVALID_ATTRIBUTE_TYPE,
        message=f"{ctx.label}: {subject} is {pretty_type(get_type(value))} when it should be {expected}",
        yaml_path=pointer,
    )


def assert_type(
    node: SchemaNode,
    key: str,
    expected: Union[TypeTag, str],
    ctx: CheckContext,
) -> Optional[SchemaIssue]:
    value = node.get(key)
    if value is ABSENT or is_of_type(value, expected):
        return None
    return invalid_type_issue(ctx, f"'{key}' attribute", value, pretty_type(expected), ctx.attribute_pointer(key))


def assert_types(
    node: SchemaNode,
    expectations: Iterable[Tuple[str, TypeTag]],
    ctx: CheckContext,
) -> Optional[SchemaIssue]:
    for key, expected in expectations:
        issue = assert_type(node, key, expected, ctx)
        if issue is not None:
            return issue
    return None


def check_required(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    return assert_type(node, "required", TypeTag.BOOLEAN, ctx)


def check_enum(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    # the allowed values themselves can be anything
    return assert_type(node, "enum", TypeTag.ARRAY, ctx)


def check_item_counts(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    return assert_types(node, (("minItems", TypeTag.INTEGER), ("maxItems", TypeTag.INTEGER)), ctx)


def check_unique_items(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    return assert_type(node, "uniqueItems", TypeTag.BOOLEAN, ctx)


def check_number(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    """Numeric bounds and ``divisibleBy``.

    ``exclusiveMinimum``/``exclusiveMaximum`` are not required to come with
    their bound.
    """
    issue = assert_types(
        node,
        (
            ("minimum", TypeTag.NUMBER),
            ("exclusiveMinimum", TypeTag.BOOLEAN),
            ("maximum", TypeTag.NUMBER),
            ("exclusiveMaximum", TypeTag.BOOLEAN),
            ("divisibleBy", TypeTag.NUMBER),
        ),
        ctx,
    )
    if issue is not None:
        return issue

    if node.divisible_by is not ABSENT and node.divisible_by == 0:
        return SchemaIssue(
            kind=IssueKind.DIVISOR_ZERO,
            message=f"{ctx.label}: 'divisibleBy' attribute must not be 0",
            yaml_path=ctx.attribute_pointer("divisibleBy"),
        )
    return None


def check_string(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    # 'pattern' is not compiled here
    return assert_types(
        node,
        (
            ("minLength", TypeTag.INTEGER),
            ("maxLength", TypeTag.INTEGER),
            ("pattern", TypeTag.STRING),
        ),
        ctx,
    )


def check_item(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    """Constraints on scalar instances."""
    # TODO: validate 'format' values once a format vocabulary is settled on
    return check_number(node, ctx) or check_string(node, ctx)
