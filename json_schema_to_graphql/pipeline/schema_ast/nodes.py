"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

Each node is one shape of schema: exactly one node class applies to any
given schema dict. References stay unresolved at this stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in schema (for error messages)
    source_path: str = ""

    title: str | None = None
    description: str | None = None

    # The schema dict this node was parsed from
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass
class UnionNode(SchemaNode):
    """Represents a oneOf; cases are keyed by their position in the list."""

    cases: dict[str, SchemaNode] = field(default_factory=dict)


@dataclass
class PropertyDef:
    """Represents a property in an object."""

    name: str = ""
    type_node: SchemaNode | None = None
    is_required: bool = False


@dataclass
class ObjectNode(SchemaNode):
    """Represents an object type with properties."""

    properties: list[PropertyDef] = field(default_factory=list)
    required: list[str] = field(default_factory=list)


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type. ``items`` is None when the schema omits it."""

    items: SchemaNode | None = None


@dataclass
class EnumNode(SchemaNode):
    """Represents an enum; only string enums can be converted."""

    values: list[Any] = field(default_factory=list)
    base_type: Any = None  # declared "type", must be "string"


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref to a top-level schema's $id."""

    ref: str = ""


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents string, integer, number or boolean."""

    type_name: str = ""


@dataclass
class UnrecognizedNode(SchemaNode):
    """A schema matching none of the supported shapes."""

    type_name: Any = None
