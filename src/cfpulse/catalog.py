"""The declarative list of Cloud Foundry tools and the registry built from it."""

from typing import Any, Dict, List, Optional, Sequence

from cf.client import PlatformClient
from cfpulse.handlers import CloudFoundryHandlers
from cfpulse.tool_registry import ToolDefinition, ToolRegistry

# Argument descriptions
NAME_PARAM = "Name of the Cloud Foundry application"
PATH_PARAM = "Fully qualified directory pathname to the compiled JAR file for the application"
NO_START_PARAM = "Set this flag to true if you want to explicitly prevent the app from starting after being pushed."
INSTANCES_PARAM = "The new number of instances of the Cloud Foundry application"
MEMORY_PARAM = "The memory limit, in megabytes, of the Cloud Foundry application"
DISK_PARAM = "The disk size, in megabytes, of the Cloud Foundry application"
SI_NAME_PARAM = "Name of the Cloud Foundry service instance"
SERVICE_KEY_NAME_PARAM = "Name of the service key"
SPACE_QUOTA_NAME_PARAM = "Name of the Cloud Foundry space quota"


def _string(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def _number(description: str) -> Dict[str, Any]:
    return {"type": "number", "description": description}


def _schema(
    properties: Optional[Dict[str, Dict[str, Any]]] = None,
    required: Sequence[str] = (),
) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties or {},
        "required": list(required),
    }


_APP_NAME_SCHEMA = _schema({"name": _string(NAME_PARAM)}, ["name"])
_SI_NAME_SCHEMA = _schema({"serviceInstanceName": _string(SI_NAME_PARAM)}, ["serviceInstanceName"])
_SERVICE_KEY_SCHEMA = _schema(
    {
        "serviceInstanceName": _string(SI_NAME_PARAM),
        "serviceKeyName": _string(SERVICE_KEY_NAME_PARAM),
    },
    ["serviceInstanceName", "serviceKeyName"],
)


def build_definitions(client: PlatformClient) -> List[ToolDefinition]:
    """Tool definitions in advertisement order, bound to ``client``."""
    h = CloudFoundryHandlers(client)
    return [
        # Applications
        ToolDefinition(
            "applicationsList",
            "Return the applications (apps) in my Cloud Foundry space",
            _schema(),
            h.applications_list,
        ),
        ToolDefinition(
            "applicationDetails",
            "Gets detailed information about a Cloud Foundry application",
            _APP_NAME_SCHEMA,
            h.application_details,
        ),
        ToolDefinition(
            "pushApplication",
            "Push an application JAR file to the Cloud Foundry space.",
            _schema(
                {
                    "name": _string(NAME_PARAM),
                    "path": _string(PATH_PARAM),
                    "noStart": {"type": "boolean", "description": NO_START_PARAM},
                    "memory": _number(MEMORY_PARAM),
                    "disk": _number(DISK_PARAM),
                },
                ["name", "path"],
            ),
            h.push_application,
        ),
        ToolDefinition(
            "scaleApplication",
            "Scale the number of instances, memory, or disk size of an application.",
            _schema(
                {
                    "name": _string(NAME_PARAM),
                    "instances": _number(INSTANCES_PARAM),
                    "memory": _number(MEMORY_PARAM),
                    "disk": _number(DISK_PARAM),
                },
                ["name"],
            ),
            h.scale_application,
        ),
        ToolDefinition(
            "startApplication",
            "Start a Cloud Foundry application",
            _APP_NAME_SCHEMA,
            h.start_application,
        ),
        ToolDefinition(
            "stopApplication",
            "Stop a running Cloud Foundry application",
            _APP_NAME_SCHEMA,
            h.stop_application,
        ),
        ToolDefinition(
            "restartApplication",
            "Restart a running Cloud Foundry application",
            _APP_NAME_SCHEMA,
            h.restart_application,
        ),
        ToolDefinition(
            "deleteApplication",
            "Delete a Cloud Foundry application",
            _APP_NAME_SCHEMA,
            h.delete_application,
        ),
        # Organizations and spaces
        ToolDefinition(
            "organizationsList",
            "Return the organizations (orgs) in my Cloud Foundry foundation",
            _schema(),
            h.organizations_list,
        ),
        ToolDefinition(
            "spacesList",
            "Returns the spaces in my Cloud Foundry organization (org)",
            _schema(),
            h.spaces_list,
        ),
        ToolDefinition(
            "getSpaceQuota",
            "Returns a quota (set of resource limits) scoped to a Cloud Foundry space",
            _schema({"spaceName": _string(SPACE_QUOTA_NAME_PARAM)}, ["spaceName"]),
            h.get_space_quota,
        ),
        # Services
        ToolDefinition(
            "serviceInstancesList",
            "Return the service instances (SIs) in my Cloud Foundry space",
            _schema(),
            h.service_instances_list,
        ),
        ToolDefinition(
            "serviceInstanceDetails",
            "Get detailed information about a service instance in my Cloud Foundry space",
            _SI_NAME_SCHEMA,
            h.service_instance_details,
        ),
        ToolDefinition(
            "serviceOfferingsList",
            "Return the service offerings available to me in the Cloud Foundry marketplace",
            _schema(),
            h.service_offerings_list,
        ),
        ToolDefinition(
            "createServiceInstance",
            "Create a service instance in the Cloud Foundry space",
            _schema(
                {
                    "serviceInstanceName": _string("Name for the new service instance"),
                    "serviceOfferingName": _string("Name of the service offering from the marketplace"),
                    "planName": _string("Name of the service plan"),
                    "parameters": _string("JSON string of configuration parameters (optional)"),
                    "tags": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "List of tags to apply to the service instance (optional)",
                    },
                },
                ["serviceInstanceName", "serviceOfferingName", "planName"],
            ),
            h.create_service_instance,
        ),
        ToolDefinition(
            "bindServiceInstance",
            "Bind a service instance to a Cloud Foundry application",
            _schema(
                {
                    "serviceInstanceName": _string(SI_NAME_PARAM),
                    "applicationName": _string(NAME_PARAM),
                    "parameters": _string("JSON string of binding parameters (optional)"),
                },
                ["serviceInstanceName", "applicationName"],
            ),
            h.bind_service_instance,
        ),
        ToolDefinition(
            "unbindServiceInstance",
            "Unbind a service instance from a Cloud Foundry application",
            _schema(
                {
                    "serviceInstanceName": _string(SI_NAME_PARAM),
                    "applicationName": _string(NAME_PARAM),
                },
                ["serviceInstanceName", "applicationName"],
            ),
            h.unbind_service_instance,
        ),
        ToolDefinition(
            "deleteServiceInstance",
            "Delete a Cloud Foundry service instance",
            _SI_NAME_SCHEMA,
            h.delete_service_instance,
        ),
        # Service keys
        ToolDefinition(
            "createServiceKey",
            "Create a service key for a Cloud Foundry service instance",
            _schema(
                {
                    "serviceInstanceName": _string(SI_NAME_PARAM),
                    "serviceKeyName": _string(SERVICE_KEY_NAME_PARAM),
                    "parameters": _string("JSON string of parameters for the service key (optional)"),
                },
                ["serviceInstanceName", "serviceKeyName"],
            ),
            h.create_service_key,
        ),
        ToolDefinition(
            "listServiceKeys",
            "List all service keys for a Cloud Foundry service instance",
            _SI_NAME_SCHEMA,
            h.list_service_keys,
        ),
        ToolDefinition(
            "getServiceKey",
            "Get details of a specific service key",
            _SERVICE_KEY_SCHEMA,
            h.get_service_key,
        ),
        ToolDefinition(
            "deleteServiceKey",
            "Delete a service key from a Cloud Foundry service instance",
            _SERVICE_KEY_SCHEMA,
            h.delete_service_key,
        ),
    ]


def build_registry(client: PlatformClient) -> ToolRegistry:
    """Build the frozen registry of every Cloud Foundry tool."""
    return ToolRegistry.build(build_definitions(client))
