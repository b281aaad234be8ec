"""
JSON Schema parser that builds an AST.

Phase 1 of the pipeline: classify every schema dict into exactly one node
shape without resolving references or building GraphQL types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

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


class SchemaParser:
    """Parses JSON Schema into an AST."""

    # Primitive type names
    PRIMITIVE_TYPES = {"string", "integer", "number", "boolean"}

    def parse(self, schema: Mapping[str, Any], path: str = "#") -> SchemaNode:
        """
        Parse a schema dict into a node.

        Shapes are tried in a fixed order, so a node carrying several markers
        (say an object with a stray ``enum``) always gets the same reading:
        oneOf, object, array, enum, $ref, primitive.

        Args:
            schema: The JSON Schema dictionary
            path: Current path in schema (for error messages)

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, Mapping):
            return UnrecognizedNode(type_name=None, source_path=path)

        common = {
            "source_path": path,
            "title": schema.get("title"),
            "description": schema.get("description"),
            "raw": dict(schema),
        }

        # Handle oneOf
        if schema.get("oneOf") is not None:
            return self._parse_union_node(schema["oneOf"], path, common)

        schema_type = schema.get("type")

        # Handle object
        if schema_type == "object":
            return self._parse_object_node(schema, path, common)

        # Handle array
        if schema_type == "array":
            items = schema.get("items")
            return ArrayNode(
                items=self.parse(items, f"{path}/items") if items is not None else None,
                **common,
            )

        # Handle enum
        if schema.get("enum") is not None:
            return EnumNode(values=list(schema["enum"]), base_type=schema_type, **common)

        # Handle $ref
        if schema.get("$ref") is not None:
            return RefNode(ref=schema["$ref"], **common)

        # Handle primitive types
        if isinstance(schema_type, str) and schema_type in self.PRIMITIVE_TYPES:
            return PrimitiveNode(type_name=schema_type, **common)

        return UnrecognizedNode(type_name=schema_type, **common)

    def _parse_union_node(self, cases: Any, path: str, common: dict[str, Any]) -> UnionNode:
        """Parse a oneOf, unwrapping each case's optional ``then`` wrapper."""
        items = cases.items() if isinstance(cases, Mapping) else enumerate(cases)

        parsed = {}
        for key, case_schema in items:
            case_key = str(key)
            case_path = f"{path}/oneOf/{case_key}"
            if isinstance(case_schema, Mapping) and case_schema.get("then") is not None:
                case_schema = case_schema["then"]
                case_path = f"{case_path}/then"
            parsed[case_key] = self.parse(case_schema, case_path)

        return UnionNode(cases=parsed, **common)

    def _parse_object_node(self, schema: Mapping[str, Any], path: str, common: dict[str, Any]) -> ObjectNode:
        """Parse an object type node."""
        required_fields = list(schema.get("required") or [])

        properties = []
        for prop_name, prop_schema in (schema.get("properties") or {}).items():
            properties.append(
                PropertyDef(
                    name=prop_name,
                    type_node=self.parse(prop_schema, f"{path}/properties/{prop_name}"),
                    is_required=prop_name in required_fields,
                )
            )

        return ObjectNode(properties=properties, required=required_fields, **common)
