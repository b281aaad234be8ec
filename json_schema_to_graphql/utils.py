"""
Naming and description helpers for JSON Schema to GraphQL conversion.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")

# A legal GraphQL name: /[_A-Za-z][_0-9A-Za-z]*/
_GRAPHQL_NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")
_GRAPHQL_NAME_INVALID_RE = re.compile(r"[^_0-9A-Za-z]")

# Enum values GraphQL reserves for its own literals
_RESERVED_ENUM_NAMES = {"true", "false", "null"}


def _split_into_words(text: str) -> list[str]:
    """Split text into words; every non-alphanumeric character is a boundary."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def to_type_name(text: str) -> str:
    """Convert an identifier or qualified name to an UpperCamelCase type name.

    Examples:
        "person" -> "Person"
        "first_name" -> "FirstName"
        "Person.oneOf[0]" -> "PersonOneOf0"
        "Person.address" -> "PersonAddress"
        "HTTPRequest" -> "HttpRequest"
        "3d-model" -> "_3DModel"

    Args:
        text: Any string ($id, qualified name, property name)

    Returns:
        A string usable as a GraphQL type name (empty for empty input)
    """
    if not text:
        return ""
    name = _capitalize_and_join(_split_into_words(text))
    if name and name[0].isdigit():
        name = f"_{name}"
    return name


def lower_first(text: str) -> str:
    """Lowercase the first character only ("PostComment" -> "postComment")."""
    return text[:1].lower() + text[1:]


def graphql_safe_name(text: str) -> str:
    """Map an arbitrary string to a legal GraphQL name.

    Legal names come back unchanged. Otherwise surrounding whitespace is
    stripped, every illegal character becomes ``_`` and a leading digit is
    prefixed with ``_``. Best-effort, not injective: "a-b" and "a_b" both
    map to "a_b".
    """
    if _GRAPHQL_NAME_PATTERN.match(text):
        return text
    name = _GRAPHQL_NAME_INVALID_RE.sub("_", text.strip())
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


def graphql_safe_enum_key(value: Any) -> str:
    """Map an enum literal to a legal GraphQL enum value name.

    Examples:
        "a" -> "a"
        "b-c" -> "b_c"
        "1st" -> "_1st"
        "null" -> "null_"
    """
    key = graphql_safe_name(str(value))
    if key in _RESERVED_ENUM_NAMES:
        key = f"{key}_"
    return key


def build_description(schema: Mapping[str, Any]) -> str | None:
    """Merge ``title`` and ``description`` into one description string.

    Returns "<title>: <description>" when both are present, whichever one is
    present otherwise, and None when neither is.
    """
    title = schema.get("title")
    description = schema.get("description")
    if title and description:
        return f"{title}: {description}"
    return title or description or None
