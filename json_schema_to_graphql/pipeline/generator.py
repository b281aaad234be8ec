"""
Schema assembler: runs the pipeline and returns a GraphQLSchema.

1. Normalize input to a list of schema dicts
2. Fold the documents into a type registry
3. Build root operations with the entry points callback
4. Assemble the GraphQLSchema
5. Apply the schema transforms (post-processing directive pass)
6. Optionally validate the result
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from functools import partial
from typing import Any, Union

from graphql import GraphQLObjectType, GraphQLSchema, GraphQLType, print_schema, validate_schema

from .analyzer import GetTypeProperties, TypeRegistry
from .config import ConverterConfig
from .entry_points import default_entry_points
from .errors import InvalidGraphQLSchemaError
from .reducer import SchemaData, reduce_schemas

logger = logging.getLogger(__name__)

SchemaInput = Union[Mapping[str, Any], str]
EntryPoints = Callable[[Mapping[str, GraphQLType]], Mapping[str, GraphQLObjectType]]
SchemaTransform = Callable[[GraphQLSchema], GraphQLSchema]


def _to_list(json_schema: SchemaInput | Sequence[SchemaInput]) -> list[SchemaInput]:
    if isinstance(json_schema, (list, tuple)):
        return list(json_schema)
    return [json_schema]


def _to_schema(item: SchemaInput) -> Mapping[str, Any]:
    if isinstance(item, Mapping):
        return item
    return json.loads(item)


def build_types(
    json_schema: SchemaInput | Sequence[SchemaInput],
    get_type_properties: GetTypeProperties | None = None,
    config: ConverterConfig | None = None,
) -> TypeRegistry:
    """Compile one or more schemas (dicts or JSON text) into a type registry."""
    schemas = [SchemaData(_to_schema(item), get_type_properties) for item in _to_list(json_schema)]
    return reduce_schemas(schemas, config)


def convert(
    json_schema: SchemaInput | Sequence[SchemaInput],
    entry_points: EntryPoints | None = None,
    get_type_properties: GetTypeProperties | None = None,
    config: ConverterConfig | None = None,
    schema_transforms: Sequence[SchemaTransform] = (),
) -> GraphQLSchema:
    """
    Convert JSON Schemas into a GraphQL schema.

    Args:
        json_schema: A schema or a list of schemas, as dicts or JSON text.
            Documents referencing others must come after them.
        entry_points: Callback taking the ``$id`` -> type mapping and returning
            ``query`` and optional ``mutation``/``subscription`` root types.
            By default each type gets a query field returning a list of it,
            named after the pluralized `$id`.
        get_type_properties: Hook called with (type name, "object" | "enum");
            its result is merged into that type's constructor kwargs
        config: Conversion configuration
        schema_transforms: Passes applied, in order, to the assembled schema

    Returns:
        The assembled GraphQLSchema

    Raises:
        SchemaConversionError: If any document cannot be converted
    """
    config = config or ConverterConfig()
    if entry_points is None:
        entry_points = partial(
            default_entry_points,
            query_type_name=config.query_type_name,
            exclude=config.exclude_from_query,
        )

    registry = build_types(json_schema, get_type_properties, config)
    roots = entry_points(registry.as_dict())

    try:
        schema = GraphQLSchema(
            query=roots.get("query"),
            mutation=roots.get("mutation"),
            subscription=roots.get("subscription"),
            types=registry.named_types(),
        )
    except TypeError as e:
        # e.g. a nested type and a top-level type sharing one name
        raise InvalidGraphQLSchemaError([e]) from e

    for transform in schema_transforms:
        schema = transform(schema)

    if config.validate_output:
        errors = validate_schema(schema)
        if errors:
            raise InvalidGraphQLSchemaError(list(errors))

    logger.debug("Converted %d schemas into %d GraphQL types", len(registry), len(schema.type_map))
    return schema


def to_sdl(schema: GraphQLSchema, comment: str | None = None) -> str:
    """Print a schema as SDL, optionally headed by a ``#`` comment."""
    sdl = print_schema(schema)
    if comment:
        header = "\n".join(f"# {line}" for line in comment.splitlines())
        sdl = f"{header}\n\n{sdl}"
    return sdl + "\n"
