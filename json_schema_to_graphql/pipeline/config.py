"""
Configuration for the JSON Schema to GraphQL pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MetaSchemaMode(str, Enum):
    """What to do when a document fails the JSON Schema meta-schema check."""

    OFF = "off"  # Skip the check
    WARN = "warn"  # Default: log a warning and keep going
    ERROR = "error"  # Abort the batch


class OutputMode(str, Enum):
    """Controls behavior when the output file already exists."""

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class ConverterConfig:
    """Configuration options for schema conversion."""

    # Meta-schema validation of each input document
    meta_schema_validation: MetaSchemaMode = MetaSchemaMode.WARN

    # Let a later document overwrite an earlier one with the same $id
    allow_duplicate_ids: bool = False

    # Run graphql validate_schema over the assembled schema
    validate_output: bool = True

    # Name of the root query type built by the default entry points
    query_type_name: str = "Query"

    # Placeholder field for objects without properties
    empty_field_name: str = "_empty"

    # Add generation comment at top of the SDL output
    add_generation_comment: bool = True

    # Output file handling
    output_mode: OutputMode = OutputMode.ERROR_IF_EXISTS

    # Extra types (by $id) to leave out of the default query fields
    exclude_from_query: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.meta_schema_validation = MetaSchemaMode(self.meta_schema_validation)
        self.output_mode = OutputMode(self.output_mode)

    @staticmethod
    def from_dict(d: dict) -> ConverterConfig:
        """Create a config from a dictionary."""
        config = ConverterConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.meta_schema_validation = MetaSchemaMode(config.meta_schema_validation)
        config.output_mode = OutputMode(config.output_mode)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "meta_schema_validation": self.meta_schema_validation.value,
            "allow_duplicate_ids": self.allow_duplicate_ids,
            "validate_output": self.validate_output,
            "query_type_name": self.query_type_name,
            "empty_field_name": self.empty_field_name,
            "add_generation_comment": self.add_generation_comment,
            "output_mode": self.output_mode.value,
            "exclude_from_query": self.exclude_from_query,
        }
