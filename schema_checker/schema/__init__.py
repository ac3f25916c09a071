"""Schema document validation.

Checks run on in-memory schema trees only; nothing here reads files.
"""

from .issues import IssueKind, SchemaIssue
from .instance_validator import validate_instance
from .schema_validator import ROOT_TYPES, check_schema, validate_schema
