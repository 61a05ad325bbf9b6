"""Load and parse the OpenAPI document.

The source is either an http(s) URL or a local file. JSON and YAML are
both accepted; the result is validated into a ``Document``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pydantic
import yaml

from .document import Document
from .errors import DocumentLoadError

_YAML_SUFFIXES = (".yaml", ".yml")
_TIMEOUT = 30.0


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _is_yaml(name: str, content_type: str = "") -> bool:
    return name.lower().endswith(_YAML_SUFFIXES) or "yaml" in content_type


def fetch_text(
    url: str,
    *,
    verify: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> tuple[str, str]:
    """GET ``url`` and return (body, content type)."""
    try:
        with httpx.Client(
            verify=verify,
            transport=transport,
            follow_redirects=True,
            timeout=_TIMEOUT,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
    except httpx.HTTPError as e:
        raise DocumentLoadError(f"cannot fetch {url}: {e}") from e
    return response.text, response.headers.get("content-type", "")


def parse_text(text: str, yaml_format: bool = False) -> dict[str, Any]:
    """Parse a JSON or YAML document into a dict."""
    try:
        data = yaml.safe_load(text) if yaml_format else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"cannot parse document: {e}") from e
    if not isinstance(data, dict):
        raise DocumentLoadError("document root is not an object")
    return data


def parse_document(data: dict[str, Any]) -> Document:
    try:
        return Document.model_validate(data)
    except pydantic.ValidationError as e:
        raise DocumentLoadError(f"invalid document: {e}") from e


def load_spec(
    source: str | Path,
    *,
    verify: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """Load the raw document from a URL or a local path."""
    source = str(source)
    if _is_url(source):
        text, content_type = fetch_text(source, verify=verify, transport=transport)
        return parse_text(text, _is_yaml(source, content_type))

    try:
        text = Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"cannot read {source}: {e}") from e
    return parse_text(text, _is_yaml(source))


def load_document(
    source: str | Path,
    *,
    verify: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> Document:
    """Load and validate the document."""
    return parse_document(load_spec(source, verify=verify, transport=transport))
