"""Interface of the platform client the tool handlers talk to."""

from typing import List, Protocol, runtime_checkable

from cf.models import (
    ApplicationDetail,
    ApplicationSummary,
    OrganizationSummary,
    ServiceInstance,
    ServiceInstanceSummary,
    ServiceKey,
    ServiceOffering,
    SpaceQuota,
    SpaceSummary,
)
from cf.requests import (
    ApplicationRequest,
    BindServiceInstanceRequest,
    CreateServiceInstanceRequest,
    CreateServiceKeyRequest,
    ListServiceKeysRequest,
    PushApplicationRequest,
    ScaleApplicationRequest,
    ServiceInstanceRequest,
    ServiceKeyRequest,
    SetEnvironmentVariableRequest,
    SpaceQuotaRequest,
    UnbindServiceInstanceRequest,
)


@runtime_checkable
class PlatformClient(Protocol):
    """One coroutine per remote platform action.

    Implementations are shared by every concurrent invocation and must be
    safe to call concurrently. Failures are raised as
    :class:`cf.errors.RemoteOperationError`.
    """

    # Applications
    async def list_applications(self) -> List[ApplicationSummary]: ...

    async def get_application(self, request: ApplicationRequest) -> ApplicationDetail: ...

    async def push_application(self, request: PushApplicationRequest) -> None: ...

    async def set_environment_variable(self, request: SetEnvironmentVariableRequest) -> None: ...

    async def scale_application(self, request: ScaleApplicationRequest) -> None: ...

    async def start_application(self, request: ApplicationRequest) -> None: ...

    async def stop_application(self, request: ApplicationRequest) -> None: ...

    async def restart_application(self, request: ApplicationRequest) -> None: ...

    async def delete_application(self, request: ApplicationRequest) -> None: ...

    # Organizations and spaces
    async def list_organizations(self) -> List[OrganizationSummary]: ...

    async def list_spaces(self) -> List[SpaceSummary]: ...

    async def get_space_quota(self, request: SpaceQuotaRequest) -> SpaceQuota: ...

    # Services
    async def list_service_instances(self) -> List[ServiceInstanceSummary]: ...

    async def get_service_instance(self, request: ServiceInstanceRequest) -> ServiceInstance: ...

    async def list_service_offerings(self) -> List[ServiceOffering]: ...

    async def create_service_instance(self, request: CreateServiceInstanceRequest) -> None: ...

    async def bind_service_instance(self, request: BindServiceInstanceRequest) -> None: ...

    async def unbind_service_instance(self, request: UnbindServiceInstanceRequest) -> None: ...

    async def delete_service_instance(self, request: ServiceInstanceRequest) -> None: ...

    # Service keys
    async def create_service_key(self, request: CreateServiceKeyRequest) -> None: ...

    async def list_service_keys(self, request: ListServiceKeysRequest) -> List[ServiceKey]: ...

    async def get_service_key(self, request: ServiceKeyRequest) -> ServiceKey: ...

    async def delete_service_key(self, request: ServiceKeyRequest) -> None: ...
