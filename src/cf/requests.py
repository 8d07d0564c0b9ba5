"""Request records passed to the platform client."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ApplicationRequest:
    """Targets a single application by name (get/start/stop/restart/delete)."""

    name: str


@dataclass(frozen=True)
class PushApplicationRequest:
    name: str
    path: str
    no_start: bool = True
    buildpack: Optional[str] = None
    memory: Optional[int] = None  # MB
    disk_quota: Optional[int] = None  # MB


@dataclass(frozen=True)
class SetEnvironmentVariableRequest:
    name: str
    variable_name: str
    variable_value: str


@dataclass(frozen=True)
class ScaleApplicationRequest:
    """Scale request; ``None`` fields are left unchanged on the platform."""

    name: str
    instances: Optional[int] = None
    memory_limit: Optional[int] = None  # MB
    disk_limit: Optional[int] = None  # MB


@dataclass(frozen=True)
class ServiceInstanceRequest:
    name: str


@dataclass(frozen=True)
class CreateServiceInstanceRequest:
    service_instance_name: str
    service_name: str
    plan_name: str
    parameters: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None


@dataclass(frozen=True)
class BindServiceInstanceRequest:
    service_instance_name: str
    application_name: str
    parameters: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class UnbindServiceInstanceRequest:
    service_instance_name: str
    application_name: str


@dataclass(frozen=True)
class CreateServiceKeyRequest:
    service_instance_name: str
    service_key_name: str
    parameters: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ServiceKeyRequest:
    service_instance_name: str
    service_key_name: str


@dataclass(frozen=True)
class ListServiceKeysRequest:
    service_instance_name: str


@dataclass(frozen=True)
class SpaceQuotaRequest:
    name: str
