"""Minimal GVariant text codec for the values nordterm reads and writes.

Only strings, booleans and string arrays are needed; `dconf` and `gsettings`
print and accept these in a syntax close enough to Python literals that
`ast.literal_eval` parses them once the optional type annotation is removed.
"""

from __future__ import annotations

import ast
from typing import Iterable, Optional


def format_string(value: str) -> str:
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_string_list(values: Iterable[str]) -> str:
    return "[" + ", ".join(format_string(v) for v in values) + "]"


def _strip_type_annotation(text: str) -> str:
    # e.g. "@as []" for an empty string array
    if text.startswith("@"):
        parts = text.split(" ", 1)
        return parts[1].strip() if len(parts) == 2 else ""
    return text


def parse_string(text: Optional[str]) -> Optional[str]:
    """Parse a GVariant string literal; None if *text* is empty or not a string."""

    if text is None:
        return None
    raw = _strip_type_annotation(text.strip())
    if not raw:
        return None
    try:
        value = ast.literal_eval(raw)
    except (ValueError, SyntaxError):
        return None
    return value if isinstance(value, str) else None


def parse_string_list(text: Optional[str]) -> Optional[list[str]]:
    """Parse a GVariant `as` literal; None if *text* is not a string array."""

    if text is None:
        return None
    raw = _strip_type_annotation(text.strip())
    if not raw:
        return None
    try:
        value = ast.literal_eval(raw)
    except (ValueError, SyntaxError):
        return None
    if not isinstance(value, (list, tuple)):
        return None
    if not all(isinstance(v, str) for v in value):
        return None
    return list(value)
