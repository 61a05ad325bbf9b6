"""Enumerate the operations of a parsed document into endpoint descriptors.

Walks paths in sorted order and methods in a fixed order, assigns each
operation to the module named by its first tag, derives request and
response type expressions, and collects the synthetic query schemas for
GET/DELETE parameters. The input document is never mutated; synthetic
schemas are merged into a fresh mapping once enumeration is done.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import GeneratorConfig
from .document import ComponentSchema, Document, Operation, Schema
from .errors import MissingTagError, SchemaCollisionError
from .naming import query_schema_name
from .schema_parser import (
    VOID,
    resolve_type,
    schema_has_any_required,
    type_name_from_ref,
    with_namespace,
)

logger = logging.getLogger(__name__)

METHODS: tuple[str, ...] = ("get", "post", "put", "delete")

# Methods whose parameters are merged into a synthetic query schema
_QUERY_METHODS = {"get", "delete"}

_JSON_MEDIA_TYPE = "application/json"
_OK_STATUS = "200"
_OPTIONAL_SUFFIX = " | void"


@dataclass(frozen=True)
class EndpointDescriptor:
    module: str
    operation_id: str
    summary: str
    url: str
    method: str
    request_schema_name: str
    request_type: str
    response_type: str
    is_form: bool


@dataclass(frozen=True)
class ModuleDescriptor:
    name: str
    description: str


@dataclass(frozen=True)
class ApiContext:
    """Everything the emitter needs for one run."""

    endpoints: tuple[EndpointDescriptor, ...]
    modules: tuple[ModuleDescriptor, ...]
    schemas: dict[str, ComponentSchema]

    @property
    def request_schema_names(self) -> frozenset[str]:
        return frozenset(e.request_schema_name for e in self.endpoints)

    @property
    def endpoint_count(self) -> int:
        return len(self.endpoints)


def _tag_allowed(tag: str, config: GeneratorConfig) -> bool:
    return not config.tags or tag in config.tags


def get_module_list(document: Document, config: GeneratorConfig) -> list[ModuleDescriptor]:
    """Modules declared by the document's tags, filtered by the allow-list."""
    return [
        ModuleDescriptor(name=tag.name, description=tag.description)
        for tag in document.tags
        if _tag_allowed(tag.name, config)
    ]


def _build_query_schema(operation: Operation) -> ComponentSchema | None:
    """Merge an operation's parameters into one object schema of strings."""
    if not operation.parameters:
        return None
    properties: dict[str, Schema] = {}
    required: list[str] = []
    for param in operation.parameters:
        properties[param.name] = Schema(type="string", description=param.description)
        if param.required:
            required.append(param.name)
    return ComponentSchema(
        title=query_schema_name(operation.operation_id),
        type="object",
        properties=properties,
        required=required,
    )


def get_query_request_type(
    operation: Operation,
    config: GeneratorConfig,
    schemas: dict[str, ComponentSchema],
    synthetic: dict[str, ComponentSchema],
) -> tuple[str, str]:
    """Request type for GET/DELETE: a synthetic schema of all parameters.

    Returns (schema name, type expression). The schema is recorded in
    ``synthetic``; nothing is recorded for parameterless operations. A name
    already present in ``schemas`` or ``synthetic`` is an error.
    """
    query_schema = _build_query_schema(operation)
    if query_schema is None:
        return VOID, VOID

    name = query_schema_name(operation.operation_id)
    if name in schemas or name in synthetic:
        raise SchemaCollisionError(name, operation.operation_id)
    synthetic[name] = query_schema

    type_name = with_namespace(name, config.namespace)
    if query_schema.required:
        return type_name, type_name
    return type_name, f"{type_name}{_OPTIONAL_SUFFIX}"


def get_body_request_type(
    operation: Operation,
    config: GeneratorConfig,
    schemas: dict[str, ComponentSchema],
) -> tuple[str, str]:
    """Request type for POST/PUT: the referenced JSON body schema."""
    body = operation.request_body
    media = body.content.get(_JSON_MEDIA_TYPE) if body else None
    ref = media.schema_.ref if media and media.schema_ else None
    if not ref:
        return VOID, VOID

    type_name = with_namespace(type_name_from_ref(ref), config.namespace)
    if schema_has_any_required(schemas, ref):
        return type_name, type_name
    return type_name, f"{type_name}{_OPTIONAL_SUFFIX}"


def get_response_type(operation: Operation, config: GeneratorConfig) -> str:
    """Type of the first media type declared for the 200 response."""
    response = operation.responses.get(_OK_STATUS)
    if response is None or not response.content:
        return VOID
    for media in response.content.values():
        if media is not None and media.schema_ is not None:
            return resolve_type(media.schema_, config.namespace)
    return VOID


def build_context(document: Document, config: GeneratorConfig) -> ApiContext:
    """Enumerate every visible operation of the document."""
    schemas = document.components.schemas
    synthetic: dict[str, ComponentSchema] = {}
    endpoints: list[EndpointDescriptor] = []

    for url, path_item in sorted(document.paths.items()):
        for method in METHODS:
            operation: Operation | None = getattr(path_item, method)
            if operation is None:
                continue

            if not operation.tags:
                raise MissingTagError(method, url, operation.operation_id)
            module = operation.tags[0]
            if not _tag_allowed(module, config):
                logger.debug("skip %s %s: tag %s filtered out", method.upper(), url, module)
                continue

            if method in _QUERY_METHODS:
                schema_name, request_type = get_query_request_type(
                    operation, config, schemas, synthetic,
                )
            else:
                schema_name, request_type = get_body_request_type(operation, config, schemas)

            endpoints.append(EndpointDescriptor(
                module=module,
                operation_id=f"{config.operation_prefix}{operation.operation_id}",
                summary=operation.summary,
                url=url,
                method=method,
                request_schema_name=schema_name,
                request_type=request_type,
                response_type=get_response_type(operation, config),
                is_form=method == "post" and bool(operation.parameters),
            ))

    return ApiContext(
        endpoints=tuple(endpoints),
        modules=tuple(get_module_list(document, config)),
        schemas={**schemas, **synthetic},
    )
