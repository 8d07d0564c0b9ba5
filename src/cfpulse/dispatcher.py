"""Invocation dispatcher: routes a named request to its handler and normalizes the outcome."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from cfpulse.tool_registry import ToolRegistry
from models import ToolResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvocationRequest:
    """A single tool invocation: tool name plus raw argument mapping."""

    tool_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


class InvocationDispatcher:
    """Dispatches invocation requests against a tool registry.

    The dispatcher holds no per-invocation state, so a single instance can
    serve any number of concurrent requests. Every outcome, including an
    unknown tool name or a handler fault, comes back as a :class:`ToolResult`.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def capabilities(self) -> List[Dict[str, Any]]:
        """Name, description and argument schema of every registered tool."""
        return [definition.describe() for definition in self.registry.list_all()]

    async def invoke(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> ToolResult:
        return await self.dispatch(InvocationRequest(tool_name, arguments or {}))

    async def dispatch(self, request: InvocationRequest) -> ToolResult:
        definition = self.registry.get(request.tool_name)
        if definition is None:
            logger.warning(f"Invocation of unknown tool: {request.tool_name!r}")
            return ToolResult.failure(f"Unknown tool: {request.tool_name}")

        arguments = dict(request.arguments or {})
        logger.debug(f"Invoking tool {definition.name} with arguments {arguments}")

        try:
            content = await definition.handler(arguments)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning(f"Tool {definition.name} failed: {message}")
            logger.debug("Handler traceback", exc_info=True)
            return ToolResult.failure(message)

        logger.debug(f"Tool {definition.name} succeeded with {len(content)} content blocks")
        return ToolResult.success(content)
