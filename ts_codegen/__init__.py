"""Generate a typed TypeScript client from an OpenAPI v3 document."""

__version__ = "0.3.0"
