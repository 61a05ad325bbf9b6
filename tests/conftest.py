"""Shared fixtures for ts-codegen tests.

The petstore fixture covers every request/response shape the generator
handles: query schemas, body refs with and without required fields,
nested arrays, «» generic names, [No Auth] summaries and multi-tag
operations.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from ts_codegen.config import GeneratorConfig
from ts_codegen.document import Document
from ts_codegen.loader import parse_document

FIXTURES = Path(__file__).parent / "fixtures"
PETSTORE = FIXTURES / "petstore.json"


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def petstore_spec() -> dict[str, Any]:
    """Raw petstore document as loaded from disk."""
    return json.loads(PETSTORE.read_text(encoding="utf-8"))


@pytest.fixture()
def petstore(petstore_spec) -> Document:
    """Validated petstore document, fresh for every test."""
    return parse_document(petstore_spec)


# ---------------------------------------------------------------------------
# Config factory
# ---------------------------------------------------------------------------

@pytest.fixture()
def make_config(tmp_path) -> Callable[..., GeneratorConfig]:
    """Return a factory building a config that writes under tmp_path/out."""

    def _make(**options: Any) -> GeneratorConfig:
        return GeneratorConfig.from_options(tmp_path / "out", str(PETSTORE), **options)

    return _make
