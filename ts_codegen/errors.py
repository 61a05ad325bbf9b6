"""Exceptions raised while loading, resolving and writing a client."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base exception for ts-codegen errors."""


class DocumentLoadError(GeneratorError):
    """Raised when the API document cannot be fetched, read or parsed."""


class SchemaResolutionError(GeneratorError):
    """Raised when a schema node cannot be turned into a type expression."""


class MissingTagError(GeneratorError):
    """Raised when an operation declares no tag, so no module can own it."""

    def __init__(self, method: str, url: str, operation_id: str) -> None:
        self.method = method
        self.url = url
        self.operation_id = operation_id
        super().__init__(
            f"{method.upper()} {url} ({operation_id}) has no tags; "
            "the first tag selects the output module"
        )


class SchemaCollisionError(GeneratorError):
    """Raised when a synthetic query schema name is already taken."""

    def __init__(self, name: str, operation_id: str) -> None:
        self.name = name
        self.operation_id = operation_id
        super().__init__(
            f"query schema {name!r} for operation {operation_id!r} "
            "collides with an existing schema"
        )


class OutputWriteError(GeneratorError):
    """Raised when a generated file cannot be created or written."""
