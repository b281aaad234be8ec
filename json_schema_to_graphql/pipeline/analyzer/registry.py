"""
Type registry shared by every document of one batch.

Maps a top-level schema's ``$id`` to the GraphQL type built for it, and keeps
the deferred object field maps that still have to be resolved.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any

from graphql import GraphQLNamedType, GraphQLType, get_named_type

logger = logging.getLogger(__name__)


class LazyFields:
    """Memoizing thunk for an object type's field map.

    graphql-core accepts any callable as ``fields``; the registry calls it
    first so that build errors surface as conversion errors.
    """

    def __init__(self, type_name: str, build: Callable[[], dict[str, Any]]):
        self.type_name = type_name
        self._build = build
        self._fields: dict[str, Any] | None = None

    @property
    def is_resolved(self) -> bool:
        return self._fields is not None

    def __call__(self) -> dict[str, Any]:
        if self._fields is None:
            self._fields = self._build()
        return self._fields


class TypeRegistry:
    """Mutable ``$id`` -> type mapping for one batch."""

    def __init__(self) -> None:
        self._types: dict[str, GraphQLType] = {}
        self._pending: deque[LazyFields] = deque()

    def get(self, name: str) -> GraphQLType | None:
        """Return the type built for a top-level ``$id``, or None."""
        return self._types.get(name)

    def set(self, name: str, type_: GraphQLType) -> None:
        """Insert or overwrite the type for a top-level ``$id``."""
        self._types[name] = type_

    def defer(self, fields: LazyFields) -> LazyFields:
        """Remember a field thunk so :meth:`resolve_pending` can force it."""
        self._pending.append(fields)
        return fields

    def resolve_pending(self) -> None:
        """Force every deferred field map, including ones created on the way."""
        resolved = 0
        while self._pending:
            fields = self._pending.popleft()
            if not fields.is_resolved:
                fields()
                resolved += 1
        logger.debug("Resolved %d deferred field maps", resolved)

    def named_types(self) -> list[GraphQLNamedType]:
        """Named types behind every entry (lists are unwrapped)."""
        return [get_named_type(type_) for type_ in self._types.values()]

    def as_dict(self) -> dict[str, GraphQLType]:
        return dict(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def items(self):
        return self._types.items()
