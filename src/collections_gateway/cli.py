#!/usr/bin/env python3
"""
Main CLI entry point for the Collections Gateway server.
"""

import os
import sys

import click
import uvicorn

from collections_gateway import __version__
from collections_gateway.config import reload_settings, settings
from collections_gateway.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="collections-gateway")
def cli() -> None:
    """Collections Gateway CLI - run the GraphQL server."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help=f"Port to bind to (default: {settings.api_port}, or $PORT)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: from settings)",
)
def serve(host: str | None, port: int | None, reload: bool, log_level: str | None) -> None:
    """Start the GraphQL API server."""
    host = host or settings.api_host
    port = port or settings.api_port
    log_level = (log_level or settings.log_level).lower()

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting Collections Gateway server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app module configures logging from settings on import; publish the
    # chosen level to the environment for reload children and re-read it here
    if log_level == "debug":
        os.environ["COLLECTIONS_DEBUG"] = "true"
    os.environ["COLLECTIONS_LOG_LEVEL"] = log_level
    reload_settings()

    try:
        if reload or settings.api_reload:
            # Reload needs an import string
            uvicorn.run(
                "collections_gateway.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
            )
        else:
            from collections_gateway.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema (SDL)."""
    from collections_gateway.graphql.schema import print_schema

    click.echo(print_schema())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
