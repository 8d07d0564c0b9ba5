"""Standard result envelope returned for every tool invocation."""

import json
from typing import Any, Dict, Iterable, List, Literal, Union

from pydantic import BaseModel, Field, model_validator

from models.enums import ResponseStatus


class ContentBlock(BaseModel):
    """A single typed unit of tool output. Only text blocks are produced."""

    type: Literal["text"] = Field("text", description="Content block type")
    text: str = Field(..., description="Text payload of the block")

    @classmethod
    def of(cls, value: Any) -> "ContentBlock":
        """Render a value as a text block.

        Pydantic models are rendered as their JSON form, mappings and lists
        through ``json.dumps`` and everything else with ``str()``.
        """
        if isinstance(value, BaseModel):
            return cls(text=value.model_dump_json(exclude_none=True))
        if isinstance(value, (dict, list)):
            return cls(text=json.dumps(value, default=str))
        return cls(text=str(value))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text}


class ToolResult(BaseModel):
    """Uniform success/failure wrapper for a tool invocation.

    A result is exactly one of success or failure. A failure always carries
    at least one content block describing what happened; a success may be
    empty (for example, listing an empty collection).

    Attributes:
        status: ``success`` or ``error``
        content: Ordered content blocks produced by the invocation
    """

    status: ResponseStatus = Field(..., description="Result status")
    content: List[ContentBlock] = Field(
        default_factory=list, description="Ordered content blocks"
    )

    @model_validator(mode="after")
    def _failure_has_content(self) -> "ToolResult":
        if self.status == ResponseStatus.ERROR and not self.content:
            raise ValueError("A failure result must carry at least one content block")
        return self

    @classmethod
    def success(cls, content: Iterable[ContentBlock] = ()) -> "ToolResult":
        """Create a success result."""
        return cls(status=ResponseStatus.SUCCESS, content=list(content))

    @classmethod
    def failure(
        cls, content: Union[str, ContentBlock, Iterable[ContentBlock]]
    ) -> "ToolResult":
        """Create a failure result from a message or from content blocks."""
        if isinstance(content, str):
            blocks = [ContentBlock(text=content)]
        elif isinstance(content, ContentBlock):
            blocks = [content]
        else:
            blocks = list(content)
        return cls(status=ResponseStatus.ERROR, content=blocks)

    @property
    def is_error(self) -> bool:
        return self.status == ResponseStatus.ERROR

    @property
    def text(self) -> str:
        """All text blocks joined by newlines."""
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire envelope ``{isError, content}``."""
        return {
            "isError": self.is_error,
            "content": [block.to_dict() for block in self.content],
        }
