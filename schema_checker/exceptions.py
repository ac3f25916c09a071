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

"""Custom exceptions for the schema checker."""


class SchemaCheckerError(Exception):
    """Base exception for schema-checker related errors."""
    pass


class ValidationError(SchemaCheckerError):
    """Exception raised for validation errors."""
    pass


class InstanceValidationError(ValidationError):
    """Exception raised when a value does not conform to a schema."""

    def __init__(self, message, yaml_path=None):
        super().__init__(message)
        self.yaml_path = yaml_path


class SchemaValidationError(ValidationError):
    """Exception raised when a schema document itself is malformed.

    ``issue`` holds the :class:`~schema_checker.schema.issues.SchemaIssue`
    the error was raised from, including the chain of wrapped causes.
    """

    def __init__(self, message, issue=None):
        super().__init__(message)
        self.issue = issue


class SchemaMissingError(SchemaValidationError):
    """No schema was given."""
    pass


class InvalidRootTypeError(SchemaValidationError):
    """The root schema is not an object."""
    pass


class MissingTypeError(SchemaValidationError):
    """The root schema does not declare 'type'."""
    pass


class InvalidRootTypeValueError(SchemaValidationError):
    """The root schema 'type' is neither 'object' nor 'array'."""
    pass


class InvalidNodeTypeError(SchemaValidationError):
    """A nested schema position does not hold an object."""
    pass


class InvalidAttributeTypeError(SchemaValidationError):
    """A recognised attribute holds a value of the wrong type."""
    pass


class UnionTooShortError(SchemaValidationError):
    """A 'type' or 'disallow' union has fewer than two members."""
    pass


class InvalidUnionElementTypeError(SchemaValidationError):
    """A union member is neither a type name nor a schema."""
    pass


class DivisorZeroError(SchemaValidationError):
    """'divisibleBy' is zero."""
    pass


class InvalidDefaultError(SchemaValidationError):
    """'default' is not a valid instance of its own schema."""
    pass


class CyclicSchemaError(SchemaValidationError):
    """A schema node contains itself."""
    pass


class SchemaTooDeepError(SchemaValidationError):
    """Schema nesting exceeds the configured depth limit."""
    pass
