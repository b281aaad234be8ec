"""
Atomic file writer for generated SDL.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

from graphql import GraphQLError, build_schema

from .config import OutputMode


class SdlWriteError(Exception):
    """Raised when generated SDL fails validation before being written."""


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_sdl: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_sdl: Optional validation function for SDL text
        """
        self._validate_sdl = validate_sdl or self._default_validate_sdl

    def write(self, path: Path, content: str, mode: OutputMode = OutputMode.ERROR_IF_EXISTS, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: SDL to write
            mode: Whether an existing file may be replaced
            validate: Whether to validate before finalizing

        Raises:
            FileExistsError: If the file exists and mode is ERROR_IF_EXISTS
            SdlWriteError: If validation fails
            OSError: If file operations fail
        """
        mode = OutputMode(mode)
        if mode is OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_sdl(content)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def _default_validate_sdl(self, content: str) -> None:
        """Check that the SDL parses and builds into a schema.

        Raises:
            SdlWriteError: If validation fails
        """
        try:
            build_schema(content)
        except (GraphQLError, TypeError) as e:
            raise SdlWriteError(f"Generated SDL is not valid: {e}") from e
