"""CLI entry point for ts-codegen."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import click

from .codegen import generate
from .config import GeneratorConfig
from .context_builder import build_context
from .errors import GeneratorError
from .loader import load_document


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI output."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        force=True,
    )


@click.command()
@click.option("-o", "--output", required=True, type=click.Path(file_okay=False, path_type=Path), help="Output directory.")
@click.option("-c", "--config", "source", required=True, help="URL or path of the OpenAPI document.")
@click.option("-s", "--split", is_flag=True, default=False, help="Write one file per operation.")
@click.option("-i", "--ignore-option", "ignore_required", is_flag=True, default=False, help="Make non-request interface properties required.")
@click.option("--tags", default=None, help="Comma-separated tags to generate (default: all).")
@click.option("--namespace", default=None, help="Namespace for type names; also prefixes function names.")
@click.option("--prefix", default=None, help="Function name prefix (overrides the one derived from --namespace).")
@click.option("--insecure", is_flag=True, default=False, help="Skip TLS certificate validation when fetching.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.version_option(package_name="ts-codegen")
def main(
    output: Path,
    source: str,
    split: bool,
    ignore_required: bool,
    tags: str | None,
    namespace: str | None,
    prefix: str | None,
    insecure: bool,
    verbose: bool,
) -> None:
    """Generate a typed TypeScript client from an OpenAPI v3 document."""
    _setup_logging(verbose)
    config = GeneratorConfig.from_options(
        output,
        source,
        split=split,
        ignore_required=ignore_required,
        tags=tags,
        namespace=namespace,
        prefix=prefix,
        insecure=insecure,
    )

    try:
        start = time.perf_counter()
        document = load_document(config.source, verify=not config.insecure)
        click.echo(f"get config use time: {(time.perf_counter() - start) * 1000:.0f}ms")

        start = time.perf_counter()
        context = build_context(document, config)
        generate(context, config)
        click.echo(f"generate use time: {(time.perf_counter() - start) * 1000:.0f}ms")
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {context.endpoint_count} calls in {config.output_dir}")
