import argparse
import json
import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator, Dict, List, Optional, Sequence

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .batch import JobResult
from .core.config import JenkinsConfig, resolve_log_level
from .core.errors import ConfigurationError
from .core.jenkins_client import JenkinsClient
from .handlers import ToolHandlers

logger = logging.getLogger(__name__)

_handlers: ToolHandlers | None = None


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Close the Jenkins HTTP client when the server shuts down."""
    try:
        yield
    finally:
        if _handlers is not None:
            await _handlers.client.aclose()
            set_handlers(None)


mcp = FastMCP(os.environ.get("SERVER_NAME", "jenkins-server"), lifespan=lifespan)


def get_handlers() -> ToolHandlers:
    """Return the process-wide handlers, building the Jenkins client on first use."""
    global _handlers
    if _handlers is None:
        _handlers = ToolHandlers(JenkinsClient(JenkinsConfig.from_env()))
    return _handlers


def set_handlers(handlers: ToolHandlers | None) -> None:
    global _handlers
    _handlers = handlers


def format_response(results: List[JobResult]) -> str:
    return json.dumps([result.to_dict() for result in results], indent=2)


# Tool arguments keep the camelCase names of the published tool schema.
JobPaths = Annotated[
    List[str],
    Field(description='List of paths to the Jenkins jobs (e.g., ["view/xxx_debug", "folder/my_job"])'),
]
BuildNumbers = Annotated[
    List[str],
    Field(
        description=(
            'List of build numbers (use "lastBuild" for most recent). '
            "Must match the length and order of jobPaths."
        )
    ),
]
JobPath = Annotated[str, Field(description="Path to the Jenkins job")]


@mcp.tool()
async def get_build_status(jobPaths: JobPaths, buildNumbers: BuildNumbers) -> str:  # noqa: N803
    """Get the status of one or more Jenkins builds."""
    return format_response(await get_handlers().get_build_status(jobPaths, buildNumbers))


@mcp.tool()
async def trigger_build(
    jobPath: JobPath,  # noqa: N803
    parameters: Annotated[
        Optional[Dict[str, str]], Field(description="Build parameters (optional)")
    ] = None,
) -> str:
    """Trigger a new Jenkins build."""
    return await get_handlers().trigger_build(jobPath, parameters)


@mcp.tool()
async def get_build_log(
    jobPath: JobPath,  # noqa: N803
    buildNumber: Annotated[  # noqa: N803
        str, Field(description='Build number (use "lastBuild" for most recent)')
    ],
) -> str:
    """Get the console output of a Jenkins build."""
    return await get_handlers().get_build_log(jobPath, buildNumber)


@mcp.tool()
async def get_latest_success_build_params(jobPaths: JobPaths) -> str:  # noqa: N803
    """Get parameters from the latest successful build for one or more jobs."""
    return format_response(await get_handlers().get_latest_success_build_params(jobPaths))


@mcp.tool()
async def get_build_params(jobPaths: JobPaths, buildNumbers: BuildNumbers) -> str:  # noqa: N803
    """Get parameters and status from a specific build for one or more jobs."""
    return format_response(await get_handlers().get_build_params(jobPaths, buildNumbers))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the Jenkins MCP server over stdio."""
    parser = argparse.ArgumentParser(description="Jenkins MCP server (stdio)")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL")
    args = parser.parse_args(argv)

    # stdout carries the JSON-RPC stream; logs must go to stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = JenkinsConfig.from_env(env_file=args.env_file)
        log_level = resolve_log_level(args.log_level) if args.log_level else config.log_level
    except ConfigurationError as exc:
        logger.error("Failed to start Jenkins MCP server: %s", exc)
        sys.exit(1)

    logging.getLogger().setLevel(log_level)
    set_handlers(ToolHandlers(JenkinsClient(config)))

    logger.info(
        "Jenkins MCP server running on stdio (%s v%s)",
        config.server_name,
        config.server_version,
    )
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
