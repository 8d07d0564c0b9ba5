"""Transport settings for the MCP server."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from cfpulse.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TRANSPORT, TRANSPORT_MODES


@dataclass(frozen=True)
class ServerSettings:
    transport: str = DEFAULT_TRANSPORT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self):
        if self.transport not in TRANSPORT_MODES:
            raise ValueError(
                f"Invalid transport '{self.transport}'. Valid values: {', '.join(TRANSPORT_MODES)}"
            )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        """Read TRANSPORT_MODE, MCP_HOST and MCP_PORT."""
        env = os.environ if env is None else env
        raw_port = env.get("MCP_PORT") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"MCP_PORT must be an integer, got {raw_port!r}")
        return cls(
            transport=(env.get("TRANSPORT_MODE") or DEFAULT_TRANSPORT).strip().lower(),
            host=env.get("MCP_HOST") or DEFAULT_HOST,
            port=port,
        )
