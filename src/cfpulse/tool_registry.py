"""Tool definitions and the registry that holds them."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)

from cfpulse.errors import DuplicateToolError, RegistryFrozenError, UnknownToolError
from models import ContentBlock

logger = logging.getLogger(__name__)

# A handler receives the raw argument mapping and produces content blocks.
Handler = Callable[[Mapping[str, Any]], Awaitable[List[ContentBlock]]]


@dataclass(frozen=True)
class ToolDefinition:
    """Immutable descriptor of an invocable tool."""

    name: str
    description: str
    argument_schema: Dict[str, Any] = field(compare=False)
    handler: Handler = field(compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Tool name must be a non-empty string")

    def describe(self) -> Dict[str, Any]:
        """Capability entry advertised to callers."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.argument_schema,
        }


class ToolRegistry:
    """Name -> ToolDefinition mapping, populated once and read-only afterwards.

    Definitions keep their insertion order so capability advertisement is
    deterministic. After :meth:`freeze` the backing map is exposed through a
    read-only proxy and further registrations are rejected, so concurrent
    lookups need no locking.

    Example:
        registry = ToolRegistry.build([definition_a, definition_b])
        registry.lookup("applicationsList")
    """

    def __init__(self):
        self._tools: Dict[str, ToolDefinition] = {}
        self._view: Mapping[str, ToolDefinition] = MappingProxyType(self._tools)
        self._frozen = False

    @classmethod
    def build(cls, definitions: Iterable[ToolDefinition]) -> "ToolRegistry":
        """Register a fixed list of definitions and freeze the registry."""
        registry = cls()
        for definition in definitions:
            registry.register(definition)
        registry.freeze()
        return registry

    def register(self, definition: ToolDefinition) -> None:
        """Add a definition.

        Raises:
            DuplicateToolError: If a tool with the same name exists
            RegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise RegistryFrozenError(definition.name)
        if definition.name in self._tools:
            raise DuplicateToolError(definition.name)
        self._tools[definition.name] = definition
        logger.debug(f"Registered tool: {definition.name}")

    def freeze(self) -> None:
        self._frozen = True
        logger.debug(f"Tool registry frozen with {len(self._tools)} tools")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> ToolDefinition:
        """Return the definition for ``name``.

        Raises:
            UnknownToolError: If no tool has that name
        """
        definition = self._view.get(name)
        if definition is None:
            raise UnknownToolError(name)
        return definition

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._view.get(name)

    def list_all(self) -> Tuple[ToolDefinition, ...]:
        return tuple(self._view.values())

    def names(self) -> Tuple[str, ...]:
        return tuple(self._view.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._view

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self.list_all())

    def __len__(self) -> int:
        return len(self._view)
