"""Write the generated client tree.

Takes the context from context_builder and produces, under the output
directory:

  index.ts                      one export per visible module
  api.d.ts                      every interface
  helper/resource.ts            transport stub, only when missing
  module/<tag>.ts               all calls of a module (default)
  module/<tag>/<operation>.ts   one call per file (split mode)
  module/<tag>/index.ts         barrel of a split module
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import GeneratorConfig
from .context_builder import ApiContext, EndpointDescriptor
from .emitter import (
    render_api_call,
    render_api_import,
    render_barrel_export,
    render_declarations,
    render_entry_export,
    render_resource_stub,
)
from .errors import OutputWriteError
from .writer import OutputSession, write_file, write_file_if_missing

logger = logging.getLogger(__name__)

FILE_SUFFIX = ".ts"
ENTRY_FILE = "index.ts"
DECLARATION_FILE = "api.d.ts"
RESOURCE_FILE = Path("helper") / "resource.ts"


def init_workspace(config: GeneratorConfig) -> None:
    logger.info("init workspace %s", config.output_dir)
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"cannot create {config.output_dir}: {e}") from e


def create_default_resource_file(config: GeneratorConfig) -> None:
    """Write the transport stub unless the user already has one."""
    if write_file_if_missing(config.output_dir / RESOURCE_FILE, render_resource_stub()):
        logger.info("create default resource file")


def create_declarations(context: ApiContext, config: GeneratorConfig) -> None:
    logger.info("create %s", DECLARATION_FILE)
    content = render_declarations(
        context.schemas,
        context.request_schema_names,
        namespace=config.namespace,
        ignore_required=config.ignore_required,
    )
    write_file(config.output_dir / DECLARATION_FILE, content)


def create_entry_file(context: ApiContext, config: GeneratorConfig) -> None:
    logger.info("create entry file")
    content = "".join(
        render_entry_export(module, config.controller_dir_name) for module in context.modules
    )
    write_file(config.output_dir / ENTRY_FILE, content)


def endpoint_path(endpoint: EndpointDescriptor, config: GeneratorConfig) -> Path:
    """File that receives an endpoint's call."""
    if config.split:
        return config.controller_dir / endpoint.module / f"{endpoint.operation_id}{FILE_SUFFIX}"
    return config.controller_dir / f"{endpoint.module}{FILE_SUFFIX}"


def barrel_path(module: str, config: GeneratorConfig) -> Path:
    return config.controller_dir / module / ENTRY_FILE


def create_controllers(
    context: ApiContext,
    config: GeneratorConfig,
    session: OutputSession,
) -> None:
    """Write every endpoint call through the run's session."""
    visible = {module.name for module in context.modules}
    header = render_api_import(config.split)

    for endpoint in context.endpoints:
        if endpoint.module not in visible:
            logger.warning(
                "skip %s: tag %s is not declared in the document",
                endpoint.operation_id,
                endpoint.module,
            )
            continue

        logger.debug("generate call %s", endpoint.operation_id)
        if config.split:
            session.write(
                barrel_path(endpoint.module, config),
                render_barrel_export(endpoint.operation_id),
            )
        session.write(endpoint_path(endpoint, config), render_api_call(endpoint), header=header)


def generate(context: ApiContext, config: GeneratorConfig) -> OutputSession:
    """Write the whole client tree for one run and return the run's session."""
    init_workspace(config)
    create_default_resource_file(config)
    create_declarations(context, config)
    create_entry_file(context, config)

    session = OutputSession()
    create_controllers(context, config, session)
    logger.info(
        "generated %d calls into %d files", context.endpoint_count, len(session.paths),
    )
    return session
