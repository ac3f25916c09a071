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

"""Instance validation against an already well-formed schema.

Backed by jsonschema's Draft 3 validator, which speaks the same vocabulary
(boolean ``required``, ``disallow``, ``divisibleBy``, union ``type``). The
validator is extended so that instance types are classified exactly as the
schema checks classify them, and so that keywords the schema checks leave
alone (``dependencies``, ``extends``, ``$ref``) fail cleanly when malformed.
"""

import logging
import re
from typing import Any, Iterable, Mapping, Optional, Tuple

from jsonschema import Draft3Validator, validators
from jsonschema.exceptions import SchemaError, UnknownType
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from referencing.exceptions import Unresolvable

from ..exceptions import InstanceValidationError
from ..utils.name_path import join_pointer
from ..utils.type_utils import TypeTag, get_type, is_of_type, pretty_type

logger = logging.getLogger(__name__)


def _classified_as(tag: TypeTag):
    def check(checker, instance) -> bool:
        return is_of_type(instance, tag)
    return check


def _shape_guard(keyword: str, expected: str, accepts, keyword_fn):
    """Wrap a keyword function so a malformed keyword value raises SchemaError."""

    def guarded(validator, value, instance, schema):
        if not accepts(value):
            raise SchemaError(f"'{keyword}' is {pretty_type(get_type(value))} when it should be {expected}")
        yield from keyword_fn(validator, value, instance, schema)

    return guarded


def _is_dependency(value: Any) -> bool:
    if is_of_type(value, TypeTag.STRING) or is_of_type(value, TypeTag.OBJECT):
        return True
    return is_of_type(value, TypeTag.ARRAY) and all(is_of_type(v, TypeTag.STRING) for v in value)


def _accepts_dependencies(value: Any) -> bool:
    return is_of_type(value, TypeTag.OBJECT) and all(_is_dependency(v) for v in value.values())


def _accepts_extends(value: Any) -> bool:
    if is_of_type(value, TypeTag.OBJECT):
        return True
    return is_of_type(value, TypeTag.ARRAY) and all(is_of_type(v, TypeTag.OBJECT) for v in value)


_DRAFT3_KEYWORDS = Draft3Validator.VALIDATORS

DefaultValidator = validators.extend(
    Draft3Validator,
    validators={
        "dependencies": _shape_guard(
            "dependencies",
            "an object of property names, name arrays or schemas",
            _accepts_dependencies,
            _DRAFT3_KEYWORDS["dependencies"],
        ),
        "extends": _shape_guard(
            "extends", "either an object (schema) or an array of schemas", _accepts_extends, _DRAFT3_KEYWORDS["extends"]
        ),
        "$ref": _shape_guard(
            "$ref", "a string", lambda value: is_of_type(value, TypeTag.STRING), _DRAFT3_KEYWORDS["$ref"]
        ),
    },
    type_checker=Draft3Validator.TYPE_CHECKER.redefine_many(
        {
            "integer": _classified_as(TypeTag.INTEGER),
            "array": _classified_as(TypeTag.ARRAY),
            "object": _classified_as(TypeTag.OBJECT),
        }
    ),
)


def _error_path(error) -> str:
    return join_pointer("", *error.absolute_path)


def _most_specific(errors: Iterable[JsonSchemaValidationError]) -> Optional[JsonSchemaValidationError]:
    # deepest instance location wins, first found among equals; jsonschema's
    # best_match/relevance raise on 'type' unions holding schema members
    return max(errors, key=lambda error: len(error.absolute_path), default=None)


def _first_error(value: Any, schema: Mapping) -> Tuple[Optional[JsonSchemaValidationError], Optional[str]]:
    """Run the validator; returns (error, None) or (None, reason the schema cannot be used)."""
    schema_id = schema.get("id")
    if schema_id is not None and not is_of_type(schema_id, TypeTag.STRING):
        return None, f"schema cannot be evaluated: 'id' is {pretty_type(get_type(schema_id))} when it should be a string"

    validator = DefaultValidator(schema)
    try:
        return _most_specific(validator.iter_errors(value)), None
    except UnknownType as e:
        return None, f"unknown type '{e.type}' cannot be checked"
    except re.error as e:
        return None, f"pattern cannot be compiled: {e}"
    except SchemaError as e:
        return None, f"schema cannot be evaluated: {e.message}"
    except Unresolvable as e:
        return None, f"reference cannot be resolved: {e}"


def validate_instance(value: Any, schema: Mapping) -> None:
    """Validate ``value`` against ``schema``.

    Only the most specific violation is reported.

    Raises:
        InstanceValidationError: If the value does not conform, or the schema
            uses a type name, pattern, reference or keyword value the
            validator cannot evaluate.
    """
    error, unusable = _first_error(value, schema)
    if unusable is not None:
        logger.debug(f"Instance could not be checked: {unusable}")
        raise InstanceValidationError(unusable)

    if error is None:
        return

    path = _error_path(error)
    logger.debug(f"Instance rejected at '{path or '/'}': {error.message}")
    if path:
        raise InstanceValidationError(f"{error.message} (at {path})", yaml_path=path)
    raise InstanceValidationError(error.message, yaml_path=path)
