"""
Meta-schema check of input documents, backed by the jsonschema library.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import SchemaError

from .config import MetaSchemaMode
from .errors import MetaSchemaValidationError

logger = logging.getLogger(__name__)


def check_meta_schema(schema: Mapping[str, Any], mode: MetaSchemaMode, name: str | None = None) -> bool:
    """
    Check a document against the meta-schema named by its ``$schema``.

    Documents without ``$schema`` are checked as draft-07.

    Args:
        schema: The document to check
        mode: OFF skips, WARN logs failures, ERROR raises them
        name: The document's ``$id``, for messages

    Returns:
        True if the document is valid (or the check is off)

    Raises:
        MetaSchemaValidationError: In ERROR mode, if the document is invalid
    """
    mode = MetaSchemaMode(mode)
    if mode is MetaSchemaMode.OFF:
        return True

    validator_cls = validators.validator_for(schema, default=Draft7Validator)
    try:
        validator_cls.check_schema(schema)
    except SchemaError as e:
        if mode is MetaSchemaMode.ERROR:
            raise MetaSchemaValidationError(f"Schema is not a valid JSON Schema: {e.message}", name) from e
        logger.warning("Schema %s is not a valid JSON Schema: %s", name, e.message)
        return False
    return True
