"""Server command for the CF Pulse CLI."""

from typing import Optional

import typer

from cfpulse.constants import TRANSPORT_MODES
from cfpulse.server_settings import ServerSettings
from cli.common import logger
from tools.cloud_foundry import server as cloud_foundry_server


def serve(
    transport: Optional[str] = typer.Option(
        None,
        "--transport",
        "-t",
        help=f"MCP transport: {', '.join(TRANSPORT_MODES)}. Defaults to TRANSPORT_MODE.",
    ),
    host: Optional[str] = typer.Option(
        None, "--host", help="Host to bind for the sse and streamable-http transports."
    ),
    port: Optional[int] = typer.Option(
        None, "--port", help="Port to bind for the sse and streamable-http transports."
    ),
):
    """Start the CF Pulse MCP server."""
    try:
        env_settings = ServerSettings.from_env()
        settings = ServerSettings(
            transport=(transport or env_settings.transport).lower(),
            host=host or env_settings.host,
            port=port or env_settings.port,
        )
    except ValueError as e:
        logger.error(f"Invalid server settings: {e}")
        raise typer.Exit(2)

    try:
        cloud_foundry_server.main(settings)
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")
