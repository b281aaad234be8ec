"""
Schema compiler: turns schema AST nodes into graphql-core types.

Phase 2 of the pipeline. Nested objects, enums and unions are named after
the qualified name of the position they appear at; ``$ref`` nodes are looked
up in the batch's :class:`TypeRegistry`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from graphql import (
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLFloat,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
    GraphQLType,
    GraphQLUnionType,
)

from ...utils import build_description, graphql_safe_enum_key, graphql_safe_name, to_type_name
from ..config import ConverterConfig
from ..errors import (
    NameCollisionError,
    UnrecognizedShapeError,
    UnresolvedReferenceError,
    UnsupportedEnumBaseTypeError,
)
from ..schema_ast import (
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaNode,
    SchemaParser,
    UnionNode,
)
from .registry import LazyFields, TypeRegistry

logger = logging.getLogger(__name__)

# (type name, shape marker) -> extra GraphQL type constructor kwargs
GetTypeProperties = Callable[[str, str], Mapping[str, Any] | None]

# Maps basic JSON schema types to basic GraphQL types
BASIC_TYPE_MAPPING: dict[str, GraphQLType] = {
    "string": GraphQLString,
    "integer": GraphQLInt,
    "number": GraphQLFloat,
    "boolean": GraphQLBoolean,
}


def _property_resolver(key: str):
    """Resolver reading a property whose JSON name is not a legal field name."""

    def resolve(source, info, **args):
        if isinstance(source, Mapping):
            return source.get(key)
        return getattr(source, key, None)

    return resolve


class TypeBuilder:
    """Builds GraphQL types for one batch, sharing a registry."""

    def __init__(
        self,
        registry: TypeRegistry,
        get_type_properties: GetTypeProperties | None = None,
        config: ConverterConfig | None = None,
    ):
        """
        Initialize the builder.

        Args:
            registry: Types of the top-level documents compiled so far
            get_type_properties: Optional hook called once per object and enum
                type; its result is merged into the type's constructor kwargs
            config: Conversion configuration
        """
        self.registry = registry
        self.get_type_properties = get_type_properties
        self.config = config or ConverterConfig()
        self.parser = SchemaParser()

    def build_schema(self, qualified_name: str, schema: Mapping[str, Any]) -> GraphQLType:
        """Parse a raw schema dict and build its type."""
        return self.build(qualified_name, self.parser.parse(schema))

    def build(self, qualified_name: str, node: SchemaNode) -> GraphQLType:
        """
        Build the GraphQL type for a node.

        Args:
            qualified_name: Path-like name of the position being built
            node: Parsed schema node

        Returns:
            The constructed (or shared, or referenced) GraphQL type
        """
        name = to_type_name(qualified_name)

        if isinstance(node, UnionNode):
            return self._build_union(name, node)
        if isinstance(node, ObjectNode):
            return self._build_object(name, node)
        if isinstance(node, ArrayNode):
            return self._build_array(qualified_name, name, node)
        if isinstance(node, EnumNode):
            return self._build_enum(name, node)
        if isinstance(node, RefNode):
            return self._resolve_ref(name, node)
        if isinstance(node, PrimitiveNode):
            return BASIC_TYPE_MAPPING[node.type_name]

        raise UnrecognizedShapeError(f"The type {node.raw.get('type')} on property {name} is unknown.", name)

    def _build_union(self, name: str, node: UnionNode) -> GraphQLUnionType:
        # Cases are expected to be objects; anything else is left for schema validation to reject
        types = [self.build(f"{name}.oneOf[{case_key}]", case) for case_key, case in node.cases.items()]
        logger.debug("Built union %s with %d members", name, len(types))
        return GraphQLUnionType(name=name, types=types, description=build_description(node.raw))

    def _build_object(self, name: str, node: ObjectNode) -> GraphQLObjectType:
        def build_fields() -> dict[str, GraphQLField]:
            # GraphQL doesn't allow types with no fields, so put a placeholder
            if not node.properties:
                return {self.config.empty_field_name: GraphQLField(GraphQLString)}

            fields: dict[str, GraphQLField] = {}
            source_names: dict[str, str] = {}
            for prop in node.properties:
                field_name = graphql_safe_name(prop.name)
                if field_name in source_names:
                    raise NameCollisionError(
                        f"Properties '{source_names[field_name]}' and '{prop.name}' both map to field '{field_name}'.",
                        name,
                    )
                source_names[field_name] = prop.name

                field_type = self.build(f"{name}.{prop.name}", prop.type_node)
                fields[field_name] = GraphQLField(
                    GraphQLNonNull(field_type) if prop.is_required else field_type,
                    description=build_description(prop.type_node.raw),
                    resolve=_property_resolver(prop.name) if field_name != prop.name else None,
                )
            return fields

        kwargs: dict[str, Any] = {
            "name": name,
            "description": build_description(node.raw),
            "fields": self.registry.defer(LazyFields(name, build_fields)),
        }
        kwargs.update(self._type_properties(name, "object"))
        logger.debug("Built object %s", name)
        return GraphQLObjectType(**kwargs)

    def _build_array(self, qualified_name: str, name: str, node: ArrayNode) -> GraphQLList:
        if node.items is None:
            raise UnrecognizedShapeError(f"The array on property {name} has no `items`.", name)
        # Items share the array's name: a list of objects under "Post.tags" yields type "PostTags"
        element_type = self.build(qualified_name, node.items)
        return GraphQLList(GraphQLNonNull(element_type))

    def _build_enum(self, name: str, node: EnumNode) -> GraphQLEnumType:
        if node.base_type != "string":
            raise UnsupportedEnumBaseTypeError("Only string enums are supported.", name)

        values: dict[str, GraphQLEnumValue] = {}
        for value in node.values:
            key = graphql_safe_enum_key(value)
            if key in values and values[key].value != value:
                raise NameCollisionError(
                    f"Enum values {values[key].value!r} and {value!r} both map to key '{key}'.",
                    name,
                )
            values[key] = GraphQLEnumValue(value)

        kwargs: dict[str, Any] = {
            "name": name,
            "values": values,
            "description": build_description(node.raw),
        }
        kwargs.update(self._type_properties(name, "enum"))
        logger.debug("Built enum %s with %d values", name, len(values))
        return GraphQLEnumType(**kwargs)

    def _resolve_ref(self, name: str, node: RefNode) -> GraphQLType:
        type_ = self.registry.get(node.ref)
        if type_ is None:
            raise UnresolvedReferenceError(node.ref, name)
        return type_

    def _type_properties(self, name: str, shape: str) -> Mapping[str, Any]:
        if self.get_type_properties is None:
            return {}
        return self.get_type_properties(name, shape) or {}
