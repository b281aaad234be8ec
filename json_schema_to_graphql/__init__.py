"""JSON Schema to GraphQL

Converts a batch of JSON Schema documents into a graphql-core schema,
resolving cross-document ``$ref``s, naming nested types and mapping
objects, arrays, string enums, ``oneOf`` unions and primitives.
"""

__version__ = "1.0.1"
__author__ = "François Lagunas"

from .pipeline import (
    ConverterConfig,
    MetaSchemaMode,
    OutputMode,
    SchemaConversionError,
    build_types,
    convert,
    default_entry_points,
    to_sdl,
)

__all__ = [
    "convert",
    "build_types",
    "to_sdl",
    "default_entry_points",
    "ConverterConfig",
    "MetaSchemaMode",
    "OutputMode",
    "SchemaConversionError",
]
