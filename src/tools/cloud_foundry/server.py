"""MCP Server: Cloud Foundry platform tools.

Tools are not declared with ``@mcp.tool()``: they come from the frozen
registry built by :func:`cfpulse.catalog.build_registry`, and every call goes
through the invocation dispatcher so the result envelope is uniform. Resources
and prompts are plain read-only responders registered with FastMCP's
decorators.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional, Sequence

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import TextContent
from mcp.types import Tool as MCPTool

from cf import CloudControllerClient, CloudFoundrySettings, PlatformClient
from cfpulse import __version__
from cfpulse.catalog import build_registry
from cfpulse.constants import SERVER_NAME, SYSTEM_INFO_RESOURCE
from cfpulse.dispatcher import InvocationDispatcher
from cfpulse.logging_config import setup_logging
from cfpulse.server_settings import ServerSettings

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Tools for managing applications, services, organizations and spaces "
    "on a Cloud Foundry foundation."
)


class GatewayMCP(FastMCP):
    """FastMCP server whose tools are served from an invocation dispatcher."""

    def __init__(self, dispatcher: InvocationDispatcher, name: str = SERVER_NAME, **settings: Any):
        self.dispatcher = dispatcher
        super().__init__(name, **settings)
        # Advertised in the initialize handshake instead of the mcp package version
        self._mcp_server.version = __version__

    async def list_tools(self) -> list[MCPTool]:
        return [
            MCPTool(
                name=capability["name"],
                description=capability["description"],
                inputSchema=capability["inputSchema"],
            )
            for capability in self.dispatcher.capabilities()
        ]

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Sequence[TextContent]:
        result = await self.dispatcher.invoke(name, arguments)
        if result.is_error:
            # Surfaces to the client as a CallToolResult with isError=true
            raise ToolError(result.text)
        return [TextContent(type="text", text=block.text) for block in result.content]


def system_info(settings: CloudFoundrySettings, dispatcher: InvocationDispatcher) -> Dict[str, Any]:
    """Static description of this server and its Cloud Foundry target."""
    return {
        "server": SERVER_NAME,
        "version": __version__,
        "apiHost": settings.api_host or None,
        "organization": settings.organization,
        "space": settings.space,
        "tools": len(dispatcher.registry),
    }


def greeting_text(name: str = "there") -> str:
    return (
        f"Hello {name}! I can list, push, scale, start, stop, restart and delete "
        "Cloud Foundry applications, manage service instances and service keys, "
        "and show your organizations, spaces and space quotas. What would you like to do?"
    )


def create_server(
    client: Optional[PlatformClient] = None,
    cf_settings: Optional[CloudFoundrySettings] = None,
    server_settings: Optional[ServerSettings] = None,
) -> GatewayMCP:
    """Wire the platform client, tool registry, dispatcher and MCP server."""
    cf_settings = cf_settings or CloudFoundrySettings.from_env()
    server_settings = server_settings or ServerSettings()
    client = client or CloudControllerClient(cf_settings)

    dispatcher = InvocationDispatcher(build_registry(client))
    mcp = GatewayMCP(
        dispatcher,
        instructions=INSTRUCTIONS,
        host=server_settings.host,
        port=server_settings.port,
    )
    mcp.platform_client = client

    @mcp.resource(SYSTEM_INFO_RESOURCE)
    def resource_system_info() -> str:
        """Provides server version and the targeted Cloud Foundry API, org and space."""
        return json.dumps(system_info(cf_settings, dispatcher), indent=2)

    @mcp.prompt()
    def greeting(name: str = "there") -> str:
        """Template for greeting a user and listing what this server can do."""
        return greeting_text(name)

    @mcp.prompt()
    def deploy_application(name: str, path: str) -> str:
        """Template for deploying a JAR to Cloud Foundry."""
        return f"""I need to deploy the application '{name}' from '{path}'.

Follow this approach:
1. Use applicationsList to check whether '{name}' already exists
2. Use pushApplication(name="{name}", path="{path}") to upload, configure and start it
3. If the push reports a failed step, fix the cause and resume from that step:
   - failed at 'configure': the app is uploaded; retry the push
   - failed at 'start': the app is uploaded and configured; use startApplication
4. Use applicationDetails(name="{name}") to confirm it is running and get its URLs"""

    logger.info(f"{SERVER_NAME} ready with {len(dispatcher.registry)} tools")
    return mcp


def main(server_settings: Optional[ServerSettings] = None):
    """Run the MCP server."""
    setup_logging()
    server_settings = server_settings or ServerSettings.from_env()
    cf_settings = CloudFoundrySettings.from_env()
    client = CloudControllerClient(cf_settings)
    mcp = create_server(client, cf_settings, server_settings)

    logger.info(f"Starting {SERVER_NAME} with {server_settings.transport} transport")
    try:
        mcp.run(transport=server_settings.transport)
    finally:
        asyncio.run(client.aclose())


if __name__ == "__main__":
    main()
