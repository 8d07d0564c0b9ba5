"""Shared helpers for the CF Pulse CLI."""

import logging

from rich.console import Console

from cf import CloudControllerClient, CloudFoundrySettings, PlatformClient

# Shared console and logger
console = Console()
logger = logging.getLogger(__name__)


class DetachedClient:
    """Stands in for the platform client when only tool metadata is read.

    Registering handlers only stores the client; any attempt to actually call
    the platform through this object fails.
    """

    def __getattr__(self, name: str):
        raise RuntimeError(f"Platform call '{name}' needs a Cloud Foundry connection")


def build_client() -> PlatformClient:
    """Platform client for the foundation configured in the environment.

    Raises:
        ValueError: If a CF_* variable cannot be parsed
    """
    return CloudControllerClient(CloudFoundrySettings.from_env())


async def close_client(client: PlatformClient):
    aclose = getattr(client, "aclose", None)
    if aclose is not None:
        await aclose()
