"""Render TypeScript source text from descriptors and schemas.

Pure string production: every function returns text and touches no file.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import jinja2

from .config import CONTROLLER_DIR_NAME
from .context_builder import EndpointDescriptor, ModuleDescriptor
from .document import ComponentSchema, Schema
from .naming import call_method_name
from .schema_parser import resolve_type, type_name_from_ref, with_namespace

TEMPLATE_DIR = Path(__file__).parent / "templates"

RESOURCE_VERBS: tuple[str, ...] = (
    "post",
    "get",
    "update",
    "delete",
    "put",
    "postNoAuth",
    "getNoAuth",
    "deleteNoAuth",
    "putNoAuth",
)

_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def _render(template_name: str, **context: Any) -> str:
    return _env.get_template(template_name).render(**context)


def _describe(schema: Schema) -> str:
    """Property description, with enum values appended when declared."""
    description = schema.description or ""
    if schema.enum:
        values = ", ".join(str(v) for v in schema.enum)
        if description:
            return f"{description} (values: {values})"
        return f"Values: {values}"
    return description


def render_api_call(endpoint: EndpointDescriptor) -> str:
    """Exported function that calls the resource helper for one endpoint."""
    return _render(
        "api_call.ts.j2",
        endpoint=endpoint,
        method_name=call_method_name(endpoint.method, endpoint.summary),
    )


def render_interface(
    name: str,
    schema: ComponentSchema,
    *,
    is_request_type: bool = False,
    ignore_required: bool = False,
) -> str:
    """Interface declaration for one component schema.

    A property is required when the schema lists it as required, or when
    ``ignore_required`` is on and the interface is not used as a request
    type. Request types always keep their real requiredness.
    """
    interface_name = type_name_from_ref(name)
    required = set(schema.required or ())
    all_required = ignore_required and not is_request_type
    properties = [
        {
            "name": prop_name,
            "type": resolve_type(prop_schema),
            "description": _describe(prop_schema),
            "required": all_required or prop_name in required,
        }
        for prop_name, prop_schema in sorted(schema.properties.items())
    ]
    return _render("interface.ts.j2", name=interface_name, properties=properties)


def render_declarations(
    schemas: dict[str, ComponentSchema],
    request_schema_names: Iterable[str],
    namespace: str | None = None,
    ignore_required: bool = False,
) -> str:
    """Content of api.d.ts: every interface, sorted by schema name."""
    request_names = set(request_schema_names)
    interfaces = [
        render_interface(
            name,
            schemas[name],
            is_request_type=with_namespace(type_name_from_ref(name), namespace) in request_names,
            ignore_required=ignore_required,
        )
        for name in sorted(schemas)
    ]
    return _render("api.d.ts.j2", interfaces=interfaces, namespace=namespace)


def render_entry_export(
    module: ModuleDescriptor,
    controller_dir_name: str = CONTROLLER_DIR_NAME,
) -> str:
    return _render("entry_export.ts.j2", module=module, controller_dir_name=controller_dir_name)


def render_barrel_export(operation_id: str) -> str:
    return _render("barrel_export.ts.j2", operation_id=operation_id)


def render_api_import(split: bool) -> str:
    """Import header of a generated call file; split files sit one level deeper."""
    return _render("api_import.ts.j2", split=split)


def render_resource_stub() -> str:
    return _render("resource.ts.j2", verbs=RESOURCE_VERBS)
