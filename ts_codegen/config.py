"""Generation run configuration."""

from __future__ import annotations

from pathlib import Path

import pydantic

from .naming import build_namespace, build_operation_prefix, parse_tag_list

CONTROLLER_DIR_NAME = "module"


class GeneratorConfig(pydantic.BaseModel):
    """Options for one generation run.

    ``operation_prefix`` and ``namespace`` are normally derived from the same
    namespace argument; see :meth:`from_options`.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    output_dir: Path
    source: str
    split: bool = False
    ignore_required: bool = False
    tags: list[str] = []
    operation_prefix: str = ""
    namespace: str | None = None
    controller_dir_name: str = CONTROLLER_DIR_NAME
    insecure: bool = False

    @pydantic.field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, v: object) -> object:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return parse_tag_list(v)
        return v

    @classmethod
    def from_options(
        cls,
        output_dir: Path | str,
        source: str,
        *,
        split: bool = False,
        ignore_required: bool = False,
        tags: str | list[str] | None = None,
        namespace: str | None = None,
        prefix: str | None = None,
        insecure: bool = False,
    ) -> GeneratorConfig:
        """Build a config from raw command line values."""
        operation_prefix = build_operation_prefix(namespace)
        if prefix is not None:
            operation_prefix = build_operation_prefix(prefix)
        return cls(
            output_dir=Path(output_dir),
            source=source,
            split=split,
            ignore_required=ignore_required,
            tags=tags or [],
            operation_prefix=operation_prefix,
            namespace=build_namespace(namespace),
            insecure=insecure,
        )

    @property
    def controller_dir(self) -> Path:
        return self.output_dir / self.controller_dir_name
