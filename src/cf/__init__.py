"""Cloud Foundry platform client: interface, request records, entities and the v3 API client."""

from cf.client import PlatformClient
from cf.cloud_controller import CloudControllerClient
from cf.errors import EntityNotFoundError, RemoteOperationError
from cf.settings import CloudFoundrySettings

__all__ = [
    "CloudControllerClient",
    "CloudFoundrySettings",
    "EntityNotFoundError",
    "PlatformClient",
    "RemoteOperationError",
]
