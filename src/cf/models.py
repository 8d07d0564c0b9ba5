"""Platform entities returned by the Cloud Foundry client."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ApplicationSummary(BaseModel):
    id: str
    name: str
    state: str


class ApplicationDetail(BaseModel):
    id: str
    name: str
    state: str
    buildpacks: List[str] = Field(default_factory=list)
    instances: Optional[int] = None
    memory_in_mb: Optional[int] = None
    disk_in_mb: Optional[int] = None
    urls: List[str] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class OrganizationSummary(BaseModel):
    id: str
    name: str


class SpaceSummary(BaseModel):
    id: str
    name: str


class ServiceInstanceSummary(BaseModel):
    id: str
    name: str
    type: str
    last_operation: Optional[str] = Field(
        None, description="Type and state of the last operation, e.g. 'create succeeded'"
    )
    tags: List[str] = Field(default_factory=list)


class ServiceInstance(ServiceInstanceSummary):
    service: Optional[str] = None
    plan: Optional[str] = None
    dashboard_url: Optional[str] = None
    description: Optional[str] = None


class ServiceOffering(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    available: bool = True
    plans: List[str] = Field(default_factory=list)


class ServiceKey(BaseModel):
    id: str
    name: str
    credentials: Optional[Dict[str, Any]] = None


class SpaceQuota(BaseModel):
    id: str
    name: str
    total_memory_in_mb: Optional[int] = None
    per_process_memory_in_mb: Optional[int] = None
    total_instances: Optional[int] = None
    total_service_instances: Optional[int] = None
    paid_services_allowed: Optional[bool] = None
    total_routes: Optional[int] = None
