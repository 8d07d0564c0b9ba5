"""Tool handlers backed by the platform client.

Each handler takes the raw argument mapping, coerces what it needs through
:class:`Arguments` (before any remote call is made), performs one platform
call and maps the outcome to content blocks:

- list tools produce one text block per entity (none for an empty list);
- detail tools produce one block with the entity;
- action tools produce exactly one acknowledgement block.

The push handler is the exception: it runs the multi-step
:class:`PushApplicationWorkflow`.
"""

import logging
from typing import Any, Iterable, List, Mapping

from cf.client import PlatformClient
from cf.requests import (
    ApplicationRequest,
    BindServiceInstanceRequest,
    CreateServiceInstanceRequest,
    CreateServiceKeyRequest,
    ListServiceKeysRequest,
    ScaleApplicationRequest,
    ServiceInstanceRequest,
    ServiceKeyRequest,
    SpaceQuotaRequest,
    UnbindServiceInstanceRequest,
)
from cfpulse.arguments import Arguments
from cfpulse.workflow import PushApplicationWorkflow
from models import ContentBlock

logger = logging.getLogger(__name__)

Content = List[ContentBlock]


def blocks(entities: Iterable[Any]) -> Content:
    """One text block per entity."""
    return [ContentBlock.of(entity) for entity in entities]


def acknowledge(message: str) -> Content:
    return [ContentBlock(text=message)]


class CloudFoundryHandlers:
    """Handlers for every Cloud Foundry tool, sharing one platform client."""

    def __init__(self, client: PlatformClient):
        self.client = client

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    async def applications_list(self, arguments: Mapping[str, Any]) -> Content:
        return blocks(await self.client.list_applications())

    async def application_details(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("name", required=True)
        return blocks([await self.client.get_application(ApplicationRequest(name))])

    async def push_application(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        workflow = PushApplicationWorkflow(
            self.client,
            name=args.string("name", required=True),
            path=args.string("path", required=True),
            no_start=args.boolean("noStart", default=False),
            memory=args.integer("memory", minimum=1),
            disk=args.integer("disk", minimum=1),
        )
        return acknowledge(await workflow.run())

    async def scale_application(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        request = ScaleApplicationRequest(
            name=args.string("name", required=True),
            instances=args.integer("instances", minimum=0),
            memory_limit=args.integer("memory", minimum=1),
            disk_limit=args.integer("disk", minimum=1),
        )
        await self.client.scale_application(request)

        changes = [
            f"{label}={value}"
            for label, value in (
                ("instances", request.instances),
                ("memory", request.memory_limit),
                ("disk", request.disk_limit),
            )
            if value is not None
        ]
        summary = ", ".join(changes) if changes else "no changes requested"
        return acknowledge(f"Application '{request.name}' scaled ({summary}).")

    async def start_application(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("name", required=True)
        await self.client.start_application(ApplicationRequest(name))
        return acknowledge(f"Application '{name}' started.")

    async def stop_application(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("name", required=True)
        await self.client.stop_application(ApplicationRequest(name))
        return acknowledge(f"Application '{name}' stopped.")

    async def restart_application(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("name", required=True)
        await self.client.restart_application(ApplicationRequest(name))
        return acknowledge(f"Application '{name}' restarted.")

    async def delete_application(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("name", required=True)
        await self.client.delete_application(ApplicationRequest(name))
        return acknowledge(f"Application '{name}' deleted.")

    # ------------------------------------------------------------------
    # Organizations and spaces
    # ------------------------------------------------------------------

    async def organizations_list(self, arguments: Mapping[str, Any]) -> Content:
        return blocks(await self.client.list_organizations())

    async def spaces_list(self, arguments: Mapping[str, Any]) -> Content:
        return blocks(await self.client.list_spaces())

    async def get_space_quota(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("spaceName", required=True)
        return blocks([await self.client.get_space_quota(SpaceQuotaRequest(name))])

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------

    async def service_instances_list(self, arguments: Mapping[str, Any]) -> Content:
        return blocks(await self.client.list_service_instances())

    async def service_instance_details(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("serviceInstanceName", required=True)
        return blocks([await self.client.get_service_instance(ServiceInstanceRequest(name))])

    async def service_offerings_list(self, arguments: Mapping[str, Any]) -> Content:
        return blocks(await self.client.list_service_offerings())

    async def create_service_instance(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        request = CreateServiceInstanceRequest(
            service_instance_name=args.string("serviceInstanceName", required=True),
            service_name=args.string("serviceOfferingName", required=True),
            plan_name=args.string("planName", required=True),
            parameters=args.json_object("parameters"),
            tags=args.string_list("tags"),
        )
        await self.client.create_service_instance(request)
        return acknowledge(
            f"Service instance '{request.service_instance_name}' created "
            f"({request.service_name}/{request.plan_name})."
        )

    async def bind_service_instance(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        request = BindServiceInstanceRequest(
            service_instance_name=args.string("serviceInstanceName", required=True),
            application_name=args.string("applicationName", required=True),
            parameters=args.json_object("parameters"),
        )
        await self.client.bind_service_instance(request)
        return acknowledge(
            f"Service instance '{request.service_instance_name}' bound to "
            f"application '{request.application_name}'."
        )

    async def unbind_service_instance(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        request = UnbindServiceInstanceRequest(
            service_instance_name=args.string("serviceInstanceName", required=True),
            application_name=args.string("applicationName", required=True),
        )
        await self.client.unbind_service_instance(request)
        return acknowledge(
            f"Service instance '{request.service_instance_name}' unbound from "
            f"application '{request.application_name}'."
        )

    async def delete_service_instance(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("serviceInstanceName", required=True)
        await self.client.delete_service_instance(ServiceInstanceRequest(name))
        return acknowledge(f"Service instance '{name}' deleted.")

    # ------------------------------------------------------------------
    # Service keys
    # ------------------------------------------------------------------

    async def create_service_key(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        request = CreateServiceKeyRequest(
            service_instance_name=args.string("serviceInstanceName", required=True),
            service_key_name=args.string("serviceKeyName", required=True),
            parameters=args.json_object("parameters"),
        )
        await self.client.create_service_key(request)
        return acknowledge(
            f"Service key '{request.service_key_name}' created for "
            f"service instance '{request.service_instance_name}'."
        )

    async def list_service_keys(self, arguments: Mapping[str, Any]) -> Content:
        name = Arguments(arguments).string("serviceInstanceName", required=True)
        return blocks(await self.client.list_service_keys(ListServiceKeysRequest(name)))

    async def get_service_key(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        request = ServiceKeyRequest(
            service_instance_name=args.string("serviceInstanceName", required=True),
            service_key_name=args.string("serviceKeyName", required=True),
        )
        return blocks([await self.client.get_service_key(request)])

    async def delete_service_key(self, arguments: Mapping[str, Any]) -> Content:
        args = Arguments(arguments)
        request = ServiceKeyRequest(
            service_instance_name=args.string("serviceInstanceName", required=True),
            service_key_name=args.string("serviceKeyName", required=True),
        )
        await self.client.delete_service_key(request)
        return acknowledge(
            f"Service key '{request.service_key_name}' deleted from "
            f"service instance '{request.service_instance_name}'."
        )
