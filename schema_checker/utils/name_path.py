from __future__ import annotations

from typing import Optional, Sequence


JsonPointer = str


def describe_path(names: Sequence[str]) -> str:
    """Render a name path for the ``Schema<path>: ...`` message prefix.

    The root renders as an empty string so messages read ``Schema: ...``.
    """
    if not names:
        return ""
    return " property '" + ".".join(str(name) for name in names) + "'"


def escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_pointer(base: Optional[JsonPointer], *tokens) -> JsonPointer:
    path = base or ""
    for token in tokens:
        path = f"{path}/{escape_pointer_token(str(token))}"
    return path

