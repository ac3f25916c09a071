from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..utils.name_path import JsonPointer


class IssueKind(str, Enum):
    SCHEMA_MISSING = "SchemaMissing"
    INVALID_ROOT_TYPE = "InvalidRootType"
    MISSING_TYPE = "MissingType"
    INVALID_ROOT_TYPE_VALUE = "InvalidRootTypeValue"
    INVALID_NODE_TYPE = "InvalidNodeType"
    INVALID_ATTRIBUTE_TYPE = "InvalidAttributeType"
    UNION_TOO_SHORT = "UnionTooShort"
    INVALID_UNION_ELEMENT_TYPE = "InvalidUnionElementType"
    DIVISOR_ZERO = "DivisorZero"
    INVALID_DEFAULT = "InvalidDefault"
    CYCLIC_SCHEMA = "CyclicSchema"
    SCHEMA_TOO_DEEP = "SchemaTooDeep"


@dataclass(frozen=True)
class SchemaIssue:
    kind: IssueKind
    message: str
    yaml_path: Optional[JsonPointer] = None
    # issue this one wraps, for failures found inside a nested schema
    cause: Optional["SchemaIssue"] = None

    def wrap(self, message_prefix: str) -> "SchemaIssue":
        """Return a new issue whose message embeds this one.

        The kind and location of the root cause are kept.
        """
        return SchemaIssue(
            kind=self.kind,
            message=f"{message_prefix}: {self.message}",
            yaml_path=self.yaml_path,
            cause=self,
        )

