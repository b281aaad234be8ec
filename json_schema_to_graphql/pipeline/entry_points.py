"""
Default root operations: one list query field per top-level type.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Mapping

from graphql import GraphQLField, GraphQLList, GraphQLObjectType, GraphQLType

from ..utils import lower_first, to_type_name
from .errors import NameCollisionError

logger = logging.getLogger(__name__)

_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "goose": "geese",
    "foot": "feet",
    "tooth": "teeth",
}

_LAST_WORD_RE = re.compile(r"[A-Z]?[a-z]+$")


def pluralize(name: str) -> str:
    """
    Pluralize the last word of a type name for list queries.

    Examples:
        "Post" -> "Posts"
        "Person" -> "People"
        "BlogCategory" -> "BlogCategories"
        "Box" -> "Boxes"
    """
    value = str(name or "").strip()
    if not value:
        return value

    match = _LAST_WORD_RE.search(value)
    if match:
        head, word = value[: match.start()], match.group()
        irregular = _IRREGULAR_PLURALS.get(word.lower())
        if irregular:
            return head + (irregular.capitalize() if word[0].isupper() else irregular)

    lowered = value.lower()
    if lowered.endswith(("s", "x", "z", "ch", "sh")):
        return f"{value}es"
    if lowered.endswith("y") and lowered[-2:-1] not in ("a", "e", "i", "o", "u", ""):
        return f"{value[:-1]}ies"
    return f"{value}s"


def default_entry_points(
    types: Mapping[str, GraphQLType],
    query_type_name: str = "Query",
    exclude: Collection[str] = (),
) -> dict[str, GraphQLObjectType]:
    """
    Build a query block with one list field per top-level type.

    Field names come from the pluralized ``$id``, so an alias document
    (``{"$id": "Author", "$ref": "Person"}``) gets its own field.

    For ``Person`` and ``Post`` types this gives::

        type Query {
          people: [Person]
          posts: [Post]
        }

    Args:
        types: Top-level ``$id`` -> built type
        query_type_name: Name of the query root type
        exclude: ``$id``s that get no query field

    Returns:
        ``{"query": <query type>}``
    """
    fields: dict[str, GraphQLField] = {}
    for type_id, type_ in types.items():
        if type_id in exclude:
            continue
        field_name = lower_first(pluralize(to_type_name(type_id)))
        if field_name in fields:
            raise NameCollisionError(f"Two types produce the query field '{field_name}'.", type_id)
        fields[field_name] = GraphQLField(GraphQLList(type_))

    logger.debug("Built %d default query fields", len(fields))
    return {"query": GraphQLObjectType(name=query_type_name, fields=fields)}
