"""Project name casing helpers used to fill template placeholders."""

from __future__ import annotations

import re

_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_KEBAB_SEPARATORS = re.compile(r"[\s_]+")
_KEBAB_INVALID = re.compile(r"[^a-zA-Z0-9-]")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")
_PASCAL_SEPARATORS = re.compile(r"[-_\s]+(.)?")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def to_kebab_case(value: object) -> str:
    """Convert ``value`` to kebab-case.

    ``"myProjectName"`` and ``"MY_PROJECT_NAME"`` both become
    ``"my-project-name"``. Non-string or empty input yields ``""``.
    """
    if not value or not isinstance(value, str):
        return ""
    text = _CASE_BOUNDARY.sub(r"\1-\2", value.strip())
    text = _KEBAB_SEPARATORS.sub("-", text)
    text = _KEBAB_INVALID.sub("", text)
    return _EDGE_HYPHENS.sub("", text.lower())


def to_pascal_case(value: object) -> str:
    """Convert ``value`` to PascalCase.

    Only the character after a separator and the leading character are
    upper-cased; letters that are already capitals stay as they are, so
    ``"MY_PROJECT_NAME"`` becomes ``"MYPROJECTNAME"``.
    """
    if not value or not isinstance(value, str):
        return ""
    text = _PASCAL_SEPARATORS.sub(lambda m: m.group(1).upper() if m.group(1) else "", value.strip())
    text = _NON_ALNUM.sub("", text)
    if text and "a" <= text[0] <= "z":
        text = text[0].upper() + text[1:]
    return text


def to_camel_case(value: object) -> str:
    """Convert ``value`` to camelCase (PascalCase with a lowercase first letter)."""
    pascal = to_pascal_case(value)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


__all__ = ["to_camel_case", "to_kebab_case", "to_pascal_case"]
