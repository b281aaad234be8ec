"""
Exceptions raised while converting JSON Schemas to a GraphQL schema.

All of them abort the conversion of the current batch; there is no
partial-result mode.
"""

from __future__ import annotations


class SchemaConversionError(Exception):
    """Base class for conversion failures.

    Attributes:
        message: Human readable description of the problem
        qualified_name: Name of the type being built when the error occurred
    """

    def __init__(self, message: str, qualified_name: str | None = None):
        self.message = message
        self.qualified_name = qualified_name
        super().__init__(f"{message} (at {qualified_name})" if qualified_name else message)


class MissingIdentifierError(SchemaConversionError):
    """A top-level schema has no ``$id``."""


class DuplicateIdentifierError(SchemaConversionError):
    """Two top-level schemas of one batch declare the same ``$id``."""


class UnresolvedReferenceError(SchemaConversionError):
    """A ``$ref`` names a type that is not in the registry."""

    def __init__(self, ref: str, qualified_name: str | None = None):
        self.ref = ref
        super().__init__(f"The referenced type {ref} is unknown.", qualified_name)


class UnsupportedEnumBaseTypeError(SchemaConversionError):
    """An ``enum`` is declared on a node whose type is not ``string``."""


class UnrecognizedShapeError(SchemaConversionError):
    """A schema node matches none of the supported shapes."""


class NameCollisionError(SchemaConversionError):
    """Two distinct source names map to the same GraphQL name."""


class MetaSchemaValidationError(SchemaConversionError):
    """A document is not a valid JSON Schema (strict mode only)."""


class InvalidGraphQLSchemaError(SchemaConversionError):
    """The assembled GraphQL schema does not pass validation."""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__("Generated GraphQL schema is not valid: " + "; ".join(str(e) for e in errors))
