"""
Analyzer module.

Contains the type registry and the schema compiler that fills it.
"""

from __future__ import annotations

from .registry import LazyFields, TypeRegistry
from .type_builder import BASIC_TYPE_MAPPING, GetTypeProperties, TypeBuilder

__all__ = [
    "TypeRegistry",
    "LazyFields",
    "TypeBuilder",
    "GetTypeProperties",
    "BASIC_TYPE_MAPPING",
]
