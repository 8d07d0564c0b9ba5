"""CF Pulse - Cloud Foundry operations exposed as MCP tools."""

from cfpulse.catalog import build_registry
from cfpulse.constants import SERVER_VERSION as __version__
from cfpulse.dispatcher import InvocationDispatcher, InvocationRequest
from cfpulse.tool_registry import ToolDefinition, ToolRegistry

__all__ = [
    "InvocationDispatcher",
    "InvocationRequest",
    "ToolDefinition",
    "ToolRegistry",
    "build_registry",
    "__version__",
]
