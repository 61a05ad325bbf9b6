"""Resolve OpenAPI schema nodes to TypeScript type expressions.

Handles:
- $ref names (path stripped, «» generic markers removed)
- Optional namespace prefix (NS.Name)
- Arrays, composed recursively through the Array<T> template
- Primitive type table, unknown types fall back to void
"""

from __future__ import annotations

import re

from .document import ComponentSchema, Schema
from .errors import SchemaResolutionError

ARRAY_TEMPLATE = "Array<T>"
VOID = "void"

_GENERIC_PLACEHOLDER = "<T>"
_REF_PATH = re.compile(r".*/")
_GENERIC_MARKERS = re.compile(r"[«»]")

_TS_TYPES: dict[str, str] = {
    "array": "Array",
    "number": "number",
    "int": "number",
    "integer": "number",
    "double": "number",
    "float": "number",
    "long": "number",
    "short": "number",
    "char": "string",
    "string": "string",
    "date": "string",
    "datetime": "string",
    "binary": "string",
    "object": "any",
    "map": "any",
    "file": "any",
    "boolean": "boolean",
}


def ts_type_transform(schema_type: str) -> str:
    """Map an OpenAPI primitive type name to its TypeScript type."""
    return _TS_TYPES.get(schema_type.lower(), VOID)


def schema_name_from_ref(ref: str) -> str:
    """'#/components/schemas/Result«User»' -> 'Result«User»'"""
    return _REF_PATH.sub("", ref)


def type_name_from_ref(ref: str) -> str:
    """'#/components/schemas/Result«User»' -> 'ResultUser'"""
    return _GENERIC_MARKERS.sub("", schema_name_from_ref(ref))


def with_namespace(name: str, namespace: str | None) -> str:
    if namespace:
        return f"{namespace}.{name}"
    return name


def _apply_generic(generic: str, type_name: str) -> str:
    if not generic:
        return type_name
    return generic.replace(_GENERIC_PLACEHOLDER, f"<{type_name}>")


def resolve_type(
    schema: Schema,
    namespace: str | None = None,
    generic: str = "",
) -> str:
    """Resolve a schema node to a TypeScript type expression.

    ``generic`` is a template holding a single ``<T>`` placeholder; the
    resolved name is substituted into it. Arrays recurse with
    ``Array<T>`` so nested arrays compose to ``Array<Array<Name>>``.
    """
    if schema.ref:
        name = with_namespace(type_name_from_ref(schema.ref), namespace)
        return _apply_generic(generic, name)

    if schema.type == "array":
        if schema.items is None:
            raise SchemaResolutionError("array schema has no items")
        inner = resolve_type(schema.items, namespace, ARRAY_TEMPLATE)
        return _apply_generic(generic, inner)

    if schema.type:
        return _apply_generic(generic, ts_type_transform(schema.type))

    return _apply_generic(generic, VOID)


def schema_has_any_required(schemas: dict[str, ComponentSchema], ref: str) -> bool:
    """Whether the referenced component schema declares any required property.

    This says nothing about a particular occurrence of the schema; it only
    decides whether a request type gets a ``| void`` suffix.
    """
    component = schemas.get(schema_name_from_ref(ref))
    if component is None or not component.required:
        return False
    return True
