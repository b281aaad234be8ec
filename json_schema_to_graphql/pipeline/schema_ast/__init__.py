"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaNode,
    UnionNode,
    UnrecognizedNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "UnionNode",
    "ObjectNode",
    "PropertyDef",
    "ArrayNode",
    "EnumNode",
    "RefNode",
    "PrimitiveNode",
    "UnrecognizedNode",
    "SchemaParser",
]
