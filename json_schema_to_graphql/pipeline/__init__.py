"""
Pipeline - JSON Schema to GraphQL schema converter.

1. Phase 1 (Parser): Classify JSON Schema dicts into Schema AST nodes
2. Phase 2 (Analyzer): Build GraphQL types into a shared registry
3. Phase 3 (Reducer): Fold a batch of documents, in order, into one registry
4. Phase 4 (Generator): Assemble root operations, transforms and validation
5. Phase 5 (Writer): Optional atomic write of the SDL
"""

from __future__ import annotations

from .analyzer import TypeBuilder, TypeRegistry
from .config import ConverterConfig, MetaSchemaMode, OutputMode
from .entry_points import default_entry_points, pluralize
from .errors import (
    DuplicateIdentifierError,
    InvalidGraphQLSchemaError,
    MetaSchemaValidationError,
    MissingIdentifierError,
    NameCollisionError,
    SchemaConversionError,
    UnrecognizedShapeError,
    UnresolvedReferenceError,
    UnsupportedEnumBaseTypeError,
)
from .generator import build_types, convert, to_sdl
from .reducer import SchemaData, reduce_schemas, schema_reducer
from .writer import AtomicWriter, SdlWriteError

__all__ = [
    "convert",
    "build_types",
    "to_sdl",
    "default_entry_points",
    "pluralize",
    "reduce_schemas",
    "schema_reducer",
    "SchemaData",
    "TypeBuilder",
    "TypeRegistry",
    "ConverterConfig",
    "MetaSchemaMode",
    "OutputMode",
    "AtomicWriter",
    "SdlWriteError",
    "SchemaConversionError",
    "MissingIdentifierError",
    "DuplicateIdentifierError",
    "UnresolvedReferenceError",
    "UnsupportedEnumBaseTypeError",
    "UnrecognizedShapeError",
    "NameCollisionError",
    "MetaSchemaValidationError",
    "InvalidGraphQLSchemaError",
]
