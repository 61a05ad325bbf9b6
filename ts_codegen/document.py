"""Object model for the OpenAPI v3 subset the generator understands.

Only the fields needed to resolve types and enumerate operations are
modeled; unknown keys are ignored. Missing required fields fail validation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Schema(_Model):
    """A schema node: reference, array, primitive or enum."""

    ref: str | None = Field(default=None, alias="$ref")
    type: str | None = None
    items: Schema | None = None
    enum: list[Any] | None = None
    format: str | None = None
    description: str | None = None


class ComponentSchema(_Model):
    """A named object schema under components.schemas."""

    title: str | None = None
    type: str = "object"
    properties: dict[str, Schema] = {}
    required: list[str] | None = None


class Components(_Model):
    schemas: dict[str, ComponentSchema] = {}


class Parameter(_Model):
    name: str
    location: str = Field(default="query", alias="in")
    required: bool = False
    description: str | None = None


class MediaType(_Model):
    schema_: Schema | None = Field(default=None, alias="schema")


class RequestBody(_Model):
    content: dict[str, MediaType] = {}


class Response(_Model):
    description: str = ""
    content: dict[str, MediaType | None] | None = None


class Operation(_Model):
    """A single operation under a path item."""

    operation_id: str = Field(alias="operationId")
    summary: str = ""
    tags: list[str] = []
    parameters: list[Parameter] | None = None
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    responses: dict[str, Response] = {}


class PathItem(_Model):
    """The supported methods of one URL. Other methods are ignored."""

    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None


class Tag(_Model):
    name: str
    description: str = ""


class Document(_Model):
    """A parsed API description document."""

    components: Components = Components()
    paths: dict[str, PathItem]
    tags: list[Tag] = []
