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

"""Recursive validation of schema documents.

Every node reachable from the root is checked with the same ordered list of
checks; the first issue found stops the whole run. Failures found inside an
inline sub-schema (union member, ``items``, ``additionalItems``,
``additionalProperties``) are wrapped with the attribute they were found under.
"""

import logging
from functools import partial
from typing import Any, Optional

from ..config import CheckerConfig, checker_config
from ..exceptions import (
    CyclicSchemaError,
    DivisorZeroError,
    InstanceValidationError,
    InvalidAttributeTypeError,
    InvalidDefaultError,
    InvalidNodeTypeError,
    InvalidRootTypeError,
    InvalidRootTypeValueError,
    InvalidUnionElementTypeError,
    MissingTypeError,
    SchemaMissingError,
    SchemaTooDeepError,
    UnionTooShortError,
)
from ..models.schema_node import ABSENT, SchemaNode, SubSchema, union_member
from ..utils.type_utils import TypeTag, get_type, is_of_type, pretty_type
from .attribute_checks import (
    CheckContext,
    assert_type,
    check_enum,
    check_item,
    check_item_counts,
    check_required,
    check_unique_items,
    invalid_type_issue,
)
from .instance_validator import validate_instance
from .issues import IssueKind, SchemaIssue

logger = logging.getLogger(__name__)


ROOT_TYPES = ("object", "array")

_ERRORS_BY_KIND = {
    IssueKind.SCHEMA_MISSING: SchemaMissingError,
    IssueKind.INVALID_ROOT_TYPE: InvalidRootTypeError,
    IssueKind.MISSING_TYPE: MissingTypeError,
    IssueKind.INVALID_ROOT_TYPE_VALUE: InvalidRootTypeValueError,
    IssueKind.INVALID_NODE_TYPE: InvalidNodeTypeError,
    IssueKind.INVALID_ATTRIBUTE_TYPE: InvalidAttributeTypeError,
    IssueKind.UNION_TOO_SHORT: UnionTooShortError,
    IssueKind.INVALID_UNION_ELEMENT_TYPE: InvalidUnionElementTypeError,
    IssueKind.DIVISOR_ZERO: DivisorZeroError,
    IssueKind.INVALID_DEFAULT: InvalidDefaultError,
    IssueKind.CYCLIC_SCHEMA: CyclicSchemaError,
    IssueKind.SCHEMA_TOO_DEEP: SchemaTooDeepError,
}


def _check_union(node: SchemaNode, ctx: CheckContext, *, key: str) -> Optional[SchemaIssue]:
    """'type' and 'disallow': a type name, or a union of two or more members."""
    value = node.get(key)
    if value is ABSENT:
        return None

    tag = get_type(value)
    if tag is TypeTag.STRING:
        # any name is accepted
        return None
    if tag is not TypeTag.ARRAY:
        return invalid_type_issue(
            ctx, f"'{key}' attribute", value, "either a string or an array", ctx.attribute_pointer(key)
        )

    if len(value) < 2:
        return SchemaIssue(
            kind=IssueKind.UNION_TOO_SHORT,
            message=f"{ctx.label}: '{key}' attribute union length is {len(value)} when it should be at least 2",
            yaml_path=ctx.attribute_pointer(key),
        )

    for index, element in enumerate(value):
        member = union_member(element)
        if member is None:
            return SchemaIssue(
                kind=IssueKind.INVALID_UNION_ELEMENT_TYPE,
                message=(
                    f"{ctx.label}: '{key}' attribute union element {index} is "
                    f"{pretty_type(get_type(element))} when it should be either an object (schema) or a string"
                ),
                yaml_path=ctx.attribute_pointer(key, index),
            )
        if isinstance(member, SubSchema):
            issue = _check_node(member.schema, ctx.anonymous_child(key, index))
            if issue is not None:
                return issue.wrap(f"{ctx.label}: '{key}' attribute union element {index} is not a valid schema")
    return None


def _check_schema_or_false(node: SchemaNode, ctx: CheckContext, *, key: str) -> Optional[SchemaIssue]:
    """'additionalProperties' and 'additionalItems': ``false`` or a schema."""
    value = node.get(key)
    if value is ABSENT or value is False:
        return None
    if not is_of_type(value, TypeTag.OBJECT):
        return invalid_type_issue(
            ctx, f"'{key}' attribute", value, "either an object (schema) or false", ctx.attribute_pointer(key)
        )
    issue = _check_node(value, ctx.anonymous_child(key))
    if issue is not None:
        return issue.wrap(f"{ctx.label}: '{key}' attribute is not a valid schema")
    return None


def _check_schema_map(node: SchemaNode, ctx: CheckContext, *, key: str) -> Optional[SchemaIssue]:
    """'properties' and 'patternProperties': every value is a schema.

    Nested failures are reported under the extended name path rather than
    wrapped. Pattern keys are not compiled.
    """
    issue = assert_type(node, key, TypeTag.OBJECT, ctx)
    if issue is not None:
        return issue

    schemas = node.get(key)
    if schemas is ABSENT:
        return None
    for name, sub_schema in schemas.items():
        issue = _check_node(sub_schema, ctx.property_child(key, str(name)))
        if issue is not None:
            return issue
    return None


def _check_object(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    # TODO: check 'dependencies' (property name, array of names, or schema per key)
    return (
        _check_schema_map(node, ctx, key="properties")
        or _check_schema_map(node, ctx, key="patternProperties")
        or _check_schema_or_false(node, ctx, key="additionalProperties")
    )


def _check_items(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    items = node.items
    if items is ABSENT:
        return None

    tag = get_type(items)
    if tag is TypeTag.OBJECT:
        # one schema for every element
        issue = _check_node(items, ctx.anonymous_child("items"))
        if issue is not None:
            return issue.wrap(f"{ctx.label}: 'items' attribute is not a valid schema")
        return None

    if tag is TypeTag.ARRAY:
        # element i of the instance must match schema i
        for index, item_schema in enumerate(items):
            issue = _check_node(item_schema, ctx.anonymous_child("items", index))
            if issue is not None:
                return issue.wrap(f"{ctx.label}: 'items' attribute element {index} is not a valid schema")
        return None

    return invalid_type_issue(
        ctx, "'items' attribute", items, "either an object (schema) or an array", ctx.attribute_pointer("items")
    )


def _check_array(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    return (
        check_item_counts(node, ctx)
        or _check_items(node, ctx)
        or _check_schema_or_false(node, ctx, key="additionalItems")
        or check_unique_items(node, ctx)
    )


def _check_default(node: SchemaNode, ctx: CheckContext) -> Optional[SchemaIssue]:
    """A declared default must itself be valid against the node.

    Runs after every structural check so the schema handed over is well formed.
    """
    if node.default is ABSENT:
        return None
    try:
        validate_instance(node.default, node.raw)
    except InstanceValidationError as e:
        return SchemaIssue(
            kind=IssueKind.INVALID_DEFAULT,
            message=f"{ctx.label}: 'default' attribute value is not valid according to the schema: {e}",
            yaml_path=ctx.attribute_pointer("default"),
        )
    return None


# order matters: the first issue found is the one reported
_NODE_CHECKS = (
    check_required,
    partial(_check_union, key="type"),
    partial(_check_union, key="disallow"),
    check_enum,
    _check_object,
    _check_array,
    check_item,
    _check_default,
)


def _check_node(value: Any, ctx: CheckContext) -> Optional[SchemaIssue]:
    if not is_of_type(value, TypeTag.OBJECT):
        return SchemaIssue(
            kind=IssueKind.INVALID_NODE_TYPE,
            message=f"{ctx.label} is {pretty_type(get_type(value))} when it should be an object",
            yaml_path=ctx.pointer,
        )
    if id(value) in ctx.ancestors:
        return SchemaIssue(
            kind=IssueKind.CYCLIC_SCHEMA,
            message=f"{ctx.label} at '{ctx.pointer}' contains itself",
            yaml_path=ctx.pointer,
        )
    if ctx.depth >= ctx.max_depth:
        return SchemaIssue(
            kind=IssueKind.SCHEMA_TOO_DEEP,
            message=f"{ctx.label} at '{ctx.pointer}' is nested deeper than {ctx.max_depth} levels",
            yaml_path=ctx.pointer,
        )

    ctx = ctx.enter(value)
    node = SchemaNode.from_mapping(value)
    logger.debug(f"Checking schema node '{ctx.pointer or '/'}' (depth {ctx.depth})")

    for check in _NODE_CHECKS:
        issue = check(node, ctx)
        if issue is not None:
            return issue
    return None


def check_schema(schema: Any, config: Optional[CheckerConfig] = None) -> Optional[SchemaIssue]:
    """Check a schema document and return the first issue found, or None.

    The root must be an object whose 'type' is 'object' or 'array'; below the
    root, every node is checked with the same rules.
    """
    config = config or checker_config

    if schema is None:
        return SchemaIssue(kind=IssueKind.SCHEMA_MISSING, message="Schema is undefined", yaml_path="")

    if not is_of_type(schema, TypeTag.OBJECT):
        return SchemaIssue(
            kind=IssueKind.INVALID_ROOT_TYPE,
            message=f"Schema is {pretty_type(get_type(schema))} when it should be an object",
            yaml_path="",
        )

    if "type" not in schema:
        return SchemaIssue(kind=IssueKind.MISSING_TYPE, message="Schema: 'type' is required", yaml_path="")

    root_type = schema["type"]
    if not is_of_type(root_type, TypeTag.STRING) or root_type not in ROOT_TYPES:
        shown = f"'{root_type}'" if is_of_type(root_type, TypeTag.STRING) else pretty_type(get_type(root_type))
        return SchemaIssue(
            kind=IssueKind.INVALID_ROOT_TYPE_VALUE,
            message=f"Schema: 'type' is {shown} when it should be either 'object' or 'array'",
            yaml_path="/type",
        )

    issue = _check_node(schema, CheckContext(max_depth=config.max_depth))
    if issue is not None:
        logger.debug(f"Schema rejected ({issue.kind.value}): {issue.message}")
    return issue


def validate_schema(schema: Any, config: Optional[CheckerConfig] = None) -> None:
    """Validate a schema document.

    Raises:
        SchemaValidationError: The subclass matching the kind of the first
            issue found. The issue itself is available as ``error.issue``.
    """
    issue = check_schema(schema, config)
    if issue is not None:
        raise _ERRORS_BY_KIND[issue.kind](issue.message, issue=issue)
