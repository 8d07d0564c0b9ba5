"""Centralized Pydantic models for CF Pulse."""

# Enums
from models.enums import ResponseStatus

# MCP models
from models.mcp import ContentBlock, ToolResult

__all__ = [
    # Enums
    "ResponseStatus",
    # MCP models
    "ContentBlock",
    "ToolResult",
]
