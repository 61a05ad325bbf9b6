"""Name helpers shared by the enumerator, the emitter and the CLI.

  - capitalize("listUsers")             -> "ListUsers"
  - query_schema_name("listUsers")      -> "ListUsersQuery"
  - build_operation_prefix(" my api ")  -> "myapi_"
  - build_namespace("my api")           -> "Myapi"
  - call_method_name("get", "[No Auth] Login") -> "getNoAuth"
"""

from __future__ import annotations

import re

NO_AUTH_MARKER = "[No Auth]"
QUERY_SCHEMA_SUFFIX = "Query"

_WHITESPACE = re.compile(r"\s+")


def capitalize(name: str) -> str:
    """Upper-case the first character, leave the rest untouched."""
    return name[:1].upper() + name[1:]


def query_schema_name(operation_id: str) -> str:
    """Name of the synthetic schema holding an operation's parameters."""
    return f"{capitalize(operation_id)}{QUERY_SCHEMA_SUFFIX}"


def _squash(value: str) -> str:
    return _WHITESPACE.sub("", value)


def build_operation_prefix(namespace: str | None) -> str:
    """Derive the function-name prefix from a namespace argument."""
    if not namespace:
        return ""
    squashed = _squash(namespace)
    if not squashed:
        return ""
    return f"{squashed.lower()}_"


def build_namespace(namespace: str | None) -> str | None:
    """Derive the TypeScript namespace from a namespace argument."""
    if not namespace:
        return None
    squashed = _squash(namespace)
    return capitalize(squashed) or None


def parse_tag_list(raw: str | None) -> list[str]:
    """Split a comma-separated tag list, dropping blanks."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def call_method_name(method: str, summary: str) -> str:
    """Name of the resource method a generated call delegates to."""
    if summary.startswith(NO_AUTH_MARKER):
        return f"{method}NoAuth"
    return method
