import asyncio
import json
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version

import click
from dotenv import load_dotenv

from confluence_blocks.utils.env import is_env_truthy
from confluence_blocks.utils.logging import LOGGER_NAME, setup_logging

try:
    __version__ = version("confluence-blocks")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"

# handlers are only installed by the CLI entry point
logger = logging.getLogger(LOGGER_NAME)

# CLI parameter -> environment variable read by the server
OPTION_ENV_VARS = {
    "confluence_url": "CONFLUENCE_URL",
    "confluence_username": "CONFLUENCE_USERNAME",
    "confluence_token": "CONFLUENCE_API_TOKEN",
    "confluence_ssl_verify": "CONFLUENCE_SSL_VERIFY",
    "read_only": "READ_ONLY_MODE",
    "enabled_tools": "ENABLED_TOOLS",
}


def resolve_logging_level(verbose: int) -> int:
    """``-v`` is INFO and ``-vv`` DEBUG; without flags the MCP_* variables decide."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    if is_env_truthy("MCP_VERY_VERBOSE", "false"):
        return logging.DEBUG
    if is_env_truthy("MCP_VERBOSE", "false"):
        return logging.INFO
    return logging.WARNING


def export_cli_options(ctx: click.Context) -> list[str]:
    """Copy explicitly given CLI options into the environment.

    Options left at their defaults do not override values from ``.env``.

    Returns:
        The environment variables that were set
    """
    exported = []
    for param_name, env_var in OPTION_ENV_VARS.items():
        source = ctx.get_parameter_source(param_name)
        if source in (
            click.core.ParameterSource.DEFAULT,
            click.core.ParameterSource.DEFAULT_MAP,
            None,
        ):
            continue
        value = ctx.params[param_name]
        os.environ[env_var] = str(value).lower() if isinstance(value, bool) else value
        exported.append(env_var)
    return exported


def run_connection_check() -> int:
    """Run the app health check against the environment config and print it."""
    from confluence_blocks.app import app
    from confluence_blocks.confluence import ConfluenceConfig

    try:
        config = ConfluenceConfig.from_env()
    except ValueError as e:
        click.echo(json.dumps({"newStatus": "failed", "customStatusDescription": str(e)}))
        return 1

    result = app.on_sync(config)
    click.echo(json.dumps(result.to_dict(), indent=2))
    return 0 if result.is_ready else 1


@click.version_option(__version__, prog_name="confluence-blocks")
@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--confluence-url",
    help="Confluence Cloud URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--confluence-username", help="Confluence account email")
@click.option("--confluence-token", help="Confluence API token")
@click.option(
    "--confluence-ssl-verify/--no-confluence-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Hide and refuse the write blocks (create, update, delete, comment)",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated list of tools to enable (enables all if not specified)",
)
@click.option(
    "--check",
    is_flag=True,
    help="Validate the credentials with the app health check and exit",
)
@click.pass_context
def main(ctx: click.Context, verbose: int, env_file: str | None, check: bool, **_options) -> None:
    """Confluence Blocks - Confluence Cloud REST v2 blocks as MCP tools

    Authenticates with the account email and an API token (Basic auth).
    """
    level = resolve_logging_level(verbose)
    stream = sys.stdout if is_env_truthy("MCP_LOGGING_STDOUT") else sys.stderr

    global logger
    logger = setup_logging(level, stream)
    logger.debug(f"Logging level set to: {logging.getLevelName(level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
    load_dotenv(env_file, override=True)

    exported = export_cli_options(ctx)
    if exported:
        logger.debug(f"Environment set from CLI options: {', '.join(exported)}")

    if check:
        sys.exit(run_connection_check())

    from confluence_blocks.servers import main_mcp

    logger.info("Starting server with STDIO transport.")

    try:
        asyncio.run(main_mcp.run_async(transport="stdio"))
    except (KeyboardInterrupt, SystemExit) as e:
        logger.info(f"Server shutdown initiated: {type(e).__name__}")
    except Exception as e:
        logger.error(f"Server encountered an error: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
