"""
Batch reducer: folds an ordered list of top-level schemas into one registry.

Documents are compiled strictly in order. A ``$ref`` built eagerly (at the
top level, as array items or as a union case) only sees documents that came
earlier; object fields are deferred and resolved once the whole batch is in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .analyzer import GetTypeProperties, TypeBuilder, TypeRegistry
from .config import ConverterConfig
from .errors import DuplicateIdentifierError, MissingIdentifierError
from .meta_schema import check_meta_schema

logger = logging.getLogger(__name__)


@dataclass
class SchemaData:
    """A top-level schema and the type properties hook to build it with."""

    schema: Mapping[str, Any]
    get_type_properties: GetTypeProperties | None = None


def schema_reducer(registry: TypeRegistry, data: SchemaData, config: ConverterConfig | None = None) -> TypeRegistry:
    """
    Compile one top-level document into the registry.

    Args:
        registry: Types of the documents compiled so far (updated in place)
        data: The document and its hook
        config: Conversion configuration

    Returns:
        The same registry, holding the document's type under its ``$id``

    Raises:
        MissingIdentifierError: If the document has no ``$id``
        DuplicateIdentifierError: If the ``$id`` was already compiled
    """
    config = config or ConverterConfig()
    schema = data.schema

    type_name = schema.get("$id")
    if type_name is None:
        raise MissingIdentifierError("Schema does not have an `$id` property.")

    check_meta_schema(schema, config.meta_schema_validation, type_name)

    if type_name in registry:
        if not config.allow_duplicate_ids:
            raise DuplicateIdentifierError(f"Schema `$id` {type_name} is declared more than once.", type_name)
        logger.warning("Schema %s is declared more than once; the last one wins", type_name)

    builder = TypeBuilder(registry, data.get_type_properties, config)
    registry.set(type_name, builder.build_schema(type_name, schema))
    logger.debug("Compiled schema %s", type_name)
    return registry


def reduce_schemas(
    schemas: Iterable[SchemaData],
    config: ConverterConfig | None = None,
    registry: TypeRegistry | None = None,
) -> TypeRegistry:
    """
    Compile a batch of documents, in order, into one registry.

    Args:
        schemas: The documents, in dependency order
        config: Conversion configuration
        registry: Starting registry (a fresh one by default)

    Returns:
        The registry with every document's type and all field maps resolved
    """
    registry = registry if registry is not None else TypeRegistry()
    for data in schemas:
        registry = schema_reducer(registry, data, config)
    registry.resolve_pending()
    return registry
