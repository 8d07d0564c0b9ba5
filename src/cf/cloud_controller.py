"""Platform client backed by the Cloud Foundry v3 Cloud Controller API."""

from __future__ import annotations

import asyncio
import io
import logging
import os
import time
import zipfile
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import httpx

from cf.errors import EntityNotFoundError, RemoteOperationError
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
from cf.settings import CloudFoundrySettings

logger = logging.getLogger(__name__)

# Seconds shaved off the token lifetime so a token is never used right at expiry.
TOKEN_EXPIRY_MARGIN = 30


def _error_detail(response: httpx.Response) -> str:
    """Extract a human-readable message from a failed API response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            details = [e.get("detail") or e.get("title") or "" for e in errors if isinstance(e, dict)]
            details = [d for d in details if d]
            if details:
                return "; ".join(details)
        # UAA error shape
        if body.get("error_description") or body.get("error"):
            return str(body.get("error_description") or body.get("error"))

    text = response.text.strip()
    if len(text) > 200:
        text = text[:200] + "..."
    return f"HTTP {response.status_code}: {text}" if text else f"HTTP {response.status_code}"


def _resource_errors(resource: Dict[str, Any]) -> str:
    """Failure detail carried by a job, build or package resource."""
    if resource.get("error"):
        return str(resource["error"])
    errors = resource.get("errors") or []
    details = [e.get("detail") or e.get("title") or "" for e in errors if isinstance(e, dict)]
    return "; ".join(d for d in details if d) or "no detail provided"


def _read_bits(path: Path) -> bytes:
    """Return the upload payload: an archive as-is, or a directory zipped in memory."""
    if path.is_file():
        return path.read_bytes()

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for root, _dirs, files in os.walk(path):
            for filename in files:
                full = Path(root) / filename
                archive.write(full, full.relative_to(path).as_posix())
    return buffer.getvalue()


def _guid_ref(guid: str) -> Dict[str, Any]:
    return {"data": {"guid": guid}}


class CloudControllerClient:
    """Async client for the Cloud Controller v3 API.

    One instance is shared by every tool invocation. Token acquisition and
    org/space resolution are serialized with locks; platform calls are not.
    Every failure is raised as :class:`RemoteOperationError`.

    Example:
        async with CloudControllerClient(CloudFoundrySettings.from_env()) as client:
            apps = await client.list_applications()
    """

    def __init__(
        self,
        settings: CloudFoundrySettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            base_url=settings.api_host,
            timeout=settings.http_timeout,
            verify=not settings.skip_ssl_validation,
        )

        self._token: Optional[str] = None
        self._token_expires_at = 0.0
        self._auth_lock = asyncio.Lock()

        self._org_guid: Optional[str] = None
        self._space_guid: Optional[str] = None
        self._target_lock = asyncio.Lock()

    async def __aenter__(self) -> "CloudControllerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        logger.debug(f"{method} {url}")
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise RemoteOperationError(f"{method} {url} failed: {e}") from e
        if response.is_error:
            raise RemoteOperationError(_error_detail(response), status_code=response.status_code)
        return response

    async def _access_token(self) -> str:
        async with self._auth_lock:
            if self._token and time.monotonic() < self._token_expires_at:
                return self._token

            if not self.settings.is_configured:
                raise RemoteOperationError(
                    "Cloud Foundry credentials are not configured "
                    "(set CF_API_HOST, CF_USERNAME and CF_PASSWORD)"
                )

            root = (await self._send("GET", "/")).json()
            links = root.get("links", {})
            login = links.get("login") or links.get("uaa")
            if not login or not login.get("href"):
                raise RemoteOperationError("API root does not advertise a login endpoint")

            response = await self._send(
                "POST",
                f"{login['href'].rstrip('/')}/oauth/token",
                data={
                    "grant_type": "password",
                    "username": self.settings.username,
                    "password": self.settings.password,
                },
                auth=(self.settings.client_id, self.settings.client_secret),
                headers={"Accept": "application/json"},
            )
            payload = response.json()
            self._token = payload["access_token"]
            expires_in = int(payload.get("expires_in", 600))
            self._token_expires_at = time.monotonic() + max(expires_in - TOKEN_EXPIRY_MARGIN, 0)
            logger.info(f"Authenticated to {self.settings.api_host} as {self.settings.username}")
            return self._token

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        headers = dict(kwargs.pop("headers", None) or {})
        headers["Authorization"] = f"bearer {await self._access_token()}"
        return await self._send(method, url, headers=headers, **kwargs)

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return (await self._request("GET", url, params=params)).json()

    async def _get_optional(self, url: str) -> Optional[Dict[str, Any]]:
        try:
            return await self._get(url)
        except RemoteOperationError as e:
            if e.status_code == 404:
                return None
            raise

    async def _post(self, url: str, body: Dict[str, Any]) -> httpx.Response:
        return await self._request("POST", url, json=body)

    async def _list(self, url: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Collect every resource of a paginated list endpoint."""
        resources: List[Dict[str, Any]] = []
        next_url: Optional[str] = url
        while next_url:
            page = await self._get(next_url, params=params)
            resources.extend(page.get("resources", []))
            next_link = (page.get("pagination") or {}).get("next")
            next_url = next_link.get("href") if next_link else None
            params = None  # the next href already carries the query
        return resources

    async def _wait_for_state(
        self,
        url: str,
        done: Iterable[str],
        failed: Iterable[str],
        what: str,
    ) -> Dict[str, Any]:
        """Poll ``url`` until the resource reaches a terminal state."""
        done, failed = set(done), set(failed)
        deadline = time.monotonic() + self.settings.operation_timeout
        while True:
            resource = await self._get(url)
            state = resource.get("state")
            if state in done:
                return resource
            if state in failed:
                raise RemoteOperationError(f"{what} failed: {_resource_errors(resource)}")
            if time.monotonic() >= deadline:
                raise RemoteOperationError(
                    f"Timed out after {self.settings.operation_timeout:g}s waiting for {what} "
                    f"(last state: {state})"
                )
            await asyncio.sleep(self.settings.poll_interval)

    async def _wait_for_job(self, response: httpx.Response, what: str) -> None:
        """Wait for the asynchronous job behind a ``202 Accepted`` response, if any."""
        location = response.headers.get("Location")
        if response.status_code != 202 or not location:
            return
        await self._wait_for_state(location, done={"COMPLETE"}, failed={"FAILED"}, what=what)

    # ------------------------------------------------------------------
    # Target resolution
    # ------------------------------------------------------------------

    async def _resolve_org_guid(self) -> Optional[str]:
        if self._org_guid or not self.settings.organization:
            return self._org_guid
        orgs = await self._list("/v3/organizations", {"names": self.settings.organization})
        if not orgs:
            raise EntityNotFoundError("Organization", self.settings.organization)
        self._org_guid = orgs[0]["guid"]
        return self._org_guid

    async def _target_org_guid(self) -> Optional[str]:
        async with self._target_lock:
            return await self._resolve_org_guid()

    async def _target_space_guid(self) -> str:
        async with self._target_lock:
            if self._space_guid:
                return self._space_guid
            if not self.settings.space:
                raise RemoteOperationError("No target space configured (set CF_SPACE)")
            params: Dict[str, Any] = {"names": self.settings.space}
            org_guid = await self._resolve_org_guid()
            if org_guid:
                params["organization_guids"] = org_guid
            spaces = await self._list("/v3/spaces", params)
            if not spaces:
                raise EntityNotFoundError("Space", self.settings.space)
            self._space_guid = spaces[0]["guid"]
            logger.info(f"Targeting space {self.settings.space} ({self._space_guid})")
            return self._space_guid

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    async def _find_app(self, name: str) -> Optional[Dict[str, Any]]:
        space_guid = await self._target_space_guid()
        apps = await self._list("/v3/apps", {"names": name, "space_guids": space_guid})
        return apps[0] if apps else None

    async def _app(self, name: str) -> Dict[str, Any]:
        app = await self._find_app(name)
        if app is None:
            raise EntityNotFoundError("Application", name)
        return app

    async def list_applications(self) -> List[ApplicationSummary]:
        space_guid = await self._target_space_guid()
        apps = await self._list("/v3/apps", {"space_guids": space_guid, "order_by": "name"})
        return [ApplicationSummary(id=a["guid"], name=a["name"], state=a["state"]) for a in apps]

    async def get_application(self, request: ApplicationRequest) -> ApplicationDetail:
        app = await self._app(request.name)
        guid = app["guid"]
        process = await self._get_optional(f"/v3/apps/{guid}/processes/web") or {}
        routes = await self._list(f"/v3/apps/{guid}/routes")
        lifecycle = (app.get("lifecycle") or {}).get("data") or {}
        return ApplicationDetail(
            id=guid,
            name=app["name"],
            state=app["state"],
            buildpacks=lifecycle.get("buildpacks") or [],
            instances=process.get("instances"),
            memory_in_mb=process.get("memory_in_mb"),
            disk_in_mb=process.get("disk_in_mb"),
            urls=[r["url"] for r in routes if r.get("url")],
            created_at=app.get("created_at"),
            updated_at=app.get("updated_at"),
        )

    async def push_application(self, request: PushApplicationRequest) -> None:
        """Create or update the app and upload its bits.

        Staging and starting are left to :meth:`start_application`; with
        ``no_start`` unset the app is started at the end.
        """
        path = Path(request.path).expanduser()
        if not path.exists():
            raise RemoteOperationError(f"Application path not found: {request.path}")

        space_guid = await self._target_space_guid()
        lifecycle = {
            "type": "buildpack",
            "data": {"buildpacks": [request.buildpack] if request.buildpack else []},
        }

        app = await self._find_app(request.name)
        if app is None:
            app = (
                await self._post(
                    "/v3/apps",
                    {
                        "name": request.name,
                        "relationships": {"space": _guid_ref(space_guid)},
                        "lifecycle": lifecycle,
                    },
                )
            ).json()
            logger.info(f"Created application {request.name} ({app['guid']})")
        else:
            if app.get("state") == "STARTED":
                await self._request("POST", f"/v3/apps/{app['guid']}/actions/stop")
            if request.buildpack:
                await self._request("PATCH", f"/v3/apps/{app['guid']}", json={"lifecycle": lifecycle})
        app_guid = app["guid"]

        if request.memory is not None or request.disk_quota is not None:
            await self._scale_web_process(
                app_guid, memory=request.memory, disk=request.disk_quota
            )

        package = (
            await self._post(
                "/v3/packages",
                {"type": "bits", "relationships": {"app": _guid_ref(app_guid)}},
            )
        ).json()
        bits = await asyncio.to_thread(_read_bits, path)
        await self._request(
            "POST",
            f"/v3/packages/{package['guid']}/upload",
            files={"bits": ("application.zip", bits, "application/zip")},
        )
        await self._wait_for_state(
            f"/v3/packages/{package['guid']}",
            done={"READY"},
            failed={"FAILED", "EXPIRED"},
            what=f"upload of application '{request.name}'",
        )
        logger.info(f"Uploaded {path} as application {request.name}")

        if not request.no_start:
            await self.start_application(ApplicationRequest(request.name))

    async def set_environment_variable(self, request: SetEnvironmentVariableRequest) -> None:
        app = await self._app(request.name)
        await self._request(
            "PATCH",
            f"/v3/apps/{app['guid']}/environment_variables",
            json={"var": {request.variable_name: request.variable_value}},
        )

    async def _scale_web_process(
        self,
        app_guid: str,
        instances: Optional[int] = None,
        memory: Optional[int] = None,
        disk: Optional[int] = None,
    ) -> None:
        body: Dict[str, Any] = {}
        if instances is not None:
            body["instances"] = instances
        if memory is not None:
            body["memory_in_mb"] = memory
        if disk is not None:
            body["disk_in_mb"] = disk
        if not body:
            logger.debug(f"Nothing to scale for app {app_guid}")
            return
        await self._post(f"/v3/apps/{app_guid}/processes/web/actions/scale", body)

    async def scale_application(self, request: ScaleApplicationRequest) -> None:
        app = await self._app(request.name)
        await self._scale_web_process(
            app["guid"],
            instances=request.instances,
            memory=request.memory_limit,
            disk=request.disk_limit,
        )

    async def _ensure_staged(self, app_guid: str, name: str) -> None:
        """Stage the newest ready package unless the current droplet already came from it."""
        page = await self._get(
            "/v3/packages",
            params={
                "app_guids": app_guid,
                "states": "READY",
                "order_by": "-created_at",
                "per_page": 1,
            },
        )
        packages = page.get("resources", [])
        if not packages:
            return
        package_guid = packages[0]["guid"]

        droplet = await self._get_optional(f"/v3/apps/{app_guid}/droplets/current")
        if droplet:
            package_href = ((droplet.get("links") or {}).get("package") or {}).get("href", "")
            if package_href.rstrip("/").endswith(package_guid):
                return

        build = (await self._post("/v3/builds", {"package": {"guid": package_guid}})).json()
        build = await self._wait_for_state(
            f"/v3/builds/{build['guid']}",
            done={"STAGED"},
            failed={"FAILED"},
            what=f"staging of application '{name}'",
        )
        await self._request(
            "PATCH",
            f"/v3/apps/{app_guid}/relationships/current_droplet",
            json={"data": {"guid": build["droplet"]["guid"]}},
        )
        logger.info(f"Staged application {name}")

    async def start_application(self, request: ApplicationRequest) -> None:
        app = await self._app(request.name)
        await self._ensure_staged(app["guid"], request.name)
        await self._request("POST", f"/v3/apps/{app['guid']}/actions/start")

    async def stop_application(self, request: ApplicationRequest) -> None:
        app = await self._app(request.name)
        await self._request("POST", f"/v3/apps/{app['guid']}/actions/stop")

    async def restart_application(self, request: ApplicationRequest) -> None:
        app = await self._app(request.name)
        await self._request("POST", f"/v3/apps/{app['guid']}/actions/restart")

    async def delete_application(self, request: ApplicationRequest) -> None:
        app = await self._app(request.name)
        response = await self._request("DELETE", f"/v3/apps/{app['guid']}")
        await self._wait_for_job(response, f"deletion of application '{request.name}'")

    # ------------------------------------------------------------------
    # Organizations and spaces
    # ------------------------------------------------------------------

    async def list_organizations(self) -> List[OrganizationSummary]:
        orgs = await self._list("/v3/organizations", {"order_by": "name"})
        return [OrganizationSummary(id=o["guid"], name=o["name"]) for o in orgs]

    async def list_spaces(self) -> List[SpaceSummary]:
        params: Dict[str, Any] = {"order_by": "name"}
        org_guid = await self._target_org_guid()
        if org_guid:
            params["organization_guids"] = org_guid
        spaces = await self._list("/v3/spaces", params)
        return [SpaceSummary(id=s["guid"], name=s["name"]) for s in spaces]

    async def get_space_quota(self, request: SpaceQuotaRequest) -> SpaceQuota:
        params: Dict[str, Any] = {"names": request.name}
        org_guid = await self._target_org_guid()
        if org_guid:
            params["organization_guids"] = org_guid
        quotas = await self._list("/v3/space_quotas", params)
        if not quotas:
            raise EntityNotFoundError("Space quota", request.name)
        quota = quotas[0]
        apps = quota.get("apps") or {}
        services = quota.get("services") or {}
        routes = quota.get("routes") or {}
        return SpaceQuota(
            id=quota["guid"],
            name=quota["name"],
            total_memory_in_mb=apps.get("total_memory_in_mb"),
            per_process_memory_in_mb=apps.get("per_process_memory_in_mb"),
            total_instances=apps.get("total_instances"),
            total_service_instances=services.get("total_service_instances"),
            paid_services_allowed=services.get("paid_services_allowed"),
            total_routes=routes.get("total_routes"),
        )

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------

    @staticmethod
    def _last_operation(resource: Dict[str, Any]) -> Optional[str]:
        op = resource.get("last_operation") or {}
        if not op:
            return None
        return f"{op.get('type', '')} {op.get('state', '')}".strip() or None

    async def _service_instance(self, name: str, with_plan: bool = False) -> Dict[str, Any]:
        space_guid = await self._target_space_guid()
        params: Dict[str, Any] = {"names": name, "space_guids": space_guid}
        if with_plan:
            params["fields[service_plan]"] = "name"
            params["fields[service_plan.service_offering]"] = "name"
        page = await self._get("/v3/service_instances", params=params)
        resources = page.get("resources", [])
        if not resources:
            raise EntityNotFoundError("Service instance", name)
        instance = resources[0]
        if with_plan:
            instance["_included"] = page.get("included") or {}
        return instance

    async def list_service_instances(self) -> List[ServiceInstanceSummary]:
        space_guid = await self._target_space_guid()
        instances = await self._list(
            "/v3/service_instances", {"space_guids": space_guid, "order_by": "name"}
        )
        return [
            ServiceInstanceSummary(
                id=si["guid"],
                name=si["name"],
                type=si.get("type", "managed"),
                last_operation=self._last_operation(si),
                tags=si.get("tags") or [],
            )
            for si in instances
        ]

    async def get_service_instance(self, request: ServiceInstanceRequest) -> ServiceInstance:
        si = await self._service_instance(request.name, with_plan=True)
        included = si.pop("_included", {})
        plans = included.get("service_plans") or []
        offerings = included.get("service_offerings") or []
        return ServiceInstance(
            id=si["guid"],
            name=si["name"],
            type=si.get("type", "managed"),
            last_operation=self._last_operation(si),
            tags=si.get("tags") or [],
            service=offerings[0]["name"] if offerings else None,
            plan=plans[0]["name"] if plans else None,
            dashboard_url=si.get("dashboard_url"),
            description=(si.get("last_operation") or {}).get("description"),
        )

    async def list_service_offerings(self) -> List[ServiceOffering]:
        space_guid = await self._target_space_guid()
        offerings = await self._list(
            "/v3/service_offerings", {"space_guids": space_guid, "order_by": "name"}
        )
        if not offerings:
            return []

        plans = await self._list(
            "/v3/service_plans",
            {
                "service_offering_guids": ",".join(o["guid"] for o in offerings),
                "space_guids": space_guid,
            },
        )
        plans_by_offering: Dict[str, List[str]] = {}
        for plan in plans:
            offering_guid = (
                ((plan.get("relationships") or {}).get("service_offering") or {}).get("data") or {}
            ).get("guid")
            plans_by_offering.setdefault(offering_guid, []).append(plan["name"])

        return [
            ServiceOffering(
                id=o["guid"],
                name=o["name"],
                description=o.get("description"),
                available=o.get("available", True),
                plans=plans_by_offering.get(o["guid"], []),
            )
            for o in offerings
        ]

    async def create_service_instance(self, request: CreateServiceInstanceRequest) -> None:
        space_guid = await self._target_space_guid()
        plans = await self._list(
            "/v3/service_plans",
            {
                "names": request.plan_name,
                "service_offering_names": request.service_name,
                "space_guids": space_guid,
            },
        )
        if not plans:
            raise RemoteOperationError(
                f"Service plan '{request.plan_name}' of service '{request.service_name}' not found",
                status_code=404,
            )

        body: Dict[str, Any] = {
            "type": "managed",
            "name": request.service_instance_name,
            "relationships": {
                "space": _guid_ref(space_guid),
                "service_plan": _guid_ref(plans[0]["guid"]),
            },
        }
        if request.parameters:
            body["parameters"] = request.parameters
        if request.tags:
            body["tags"] = request.tags
        response = await self._post("/v3/service_instances", body)
        await self._wait_for_job(
            response, f"creation of service instance '{request.service_instance_name}'"
        )

    async def bind_service_instance(self, request: BindServiceInstanceRequest) -> None:
        si = await self._service_instance(request.service_instance_name)
        app = await self._app(request.application_name)
        body: Dict[str, Any] = {
            "type": "app",
            "relationships": {
                "service_instance": _guid_ref(si["guid"]),
                "app": _guid_ref(app["guid"]),
            },
        }
        if request.parameters:
            body["parameters"] = request.parameters
        response = await self._post("/v3/service_credential_bindings", body)
        await self._wait_for_job(
            response,
            f"binding of '{request.service_instance_name}' to '{request.application_name}'",
        )

    async def unbind_service_instance(self, request: UnbindServiceInstanceRequest) -> None:
        si = await self._service_instance(request.service_instance_name)
        app = await self._app(request.application_name)
        bindings = await self._list(
            "/v3/service_credential_bindings",
            {"type": "app", "service_instance_guids": si["guid"], "app_guids": app["guid"]},
        )
        if not bindings:
            raise RemoteOperationError(
                f"Application '{request.application_name}' is not bound to "
                f"service instance '{request.service_instance_name}'",
                status_code=404,
            )
        response = await self._request(
            "DELETE", f"/v3/service_credential_bindings/{bindings[0]['guid']}"
        )
        await self._wait_for_job(
            response,
            f"unbinding of '{request.service_instance_name}' from '{request.application_name}'",
        )

    async def delete_service_instance(self, request: ServiceInstanceRequest) -> None:
        si = await self._service_instance(request.name)
        response = await self._request("DELETE", f"/v3/service_instances/{si['guid']}")
        await self._wait_for_job(response, f"deletion of service instance '{request.name}'")

    # ------------------------------------------------------------------
    # Service keys
    # ------------------------------------------------------------------

    async def _service_key(self, instance_name: str, key_name: str) -> Dict[str, Any]:
        si = await self._service_instance(instance_name)
        keys = await self._list(
            "/v3/service_credential_bindings",
            {"type": "key", "names": key_name, "service_instance_guids": si["guid"]},
        )
        if not keys:
            raise EntityNotFoundError("Service key", key_name)
        return keys[0]

    async def create_service_key(self, request: CreateServiceKeyRequest) -> None:
        si = await self._service_instance(request.service_instance_name)
        body: Dict[str, Any] = {
            "type": "key",
            "name": request.service_key_name,
            "relationships": {"service_instance": _guid_ref(si["guid"])},
        }
        if request.parameters:
            body["parameters"] = request.parameters
        response = await self._post("/v3/service_credential_bindings", body)
        await self._wait_for_job(response, f"creation of service key '{request.service_key_name}'")

    async def list_service_keys(self, request: ListServiceKeysRequest) -> List[ServiceKey]:
        si = await self._service_instance(request.service_instance_name)
        keys = await self._list(
            "/v3/service_credential_bindings",
            {"type": "key", "service_instance_guids": si["guid"], "order_by": "name"},
        )
        return [ServiceKey(id=k["guid"], name=k["name"]) for k in keys]

    async def get_service_key(self, request: ServiceKeyRequest) -> ServiceKey:
        key = await self._service_key(request.service_instance_name, request.service_key_name)
        details = await self._get(f"/v3/service_credential_bindings/{key['guid']}/details")
        return ServiceKey(id=key["guid"], name=key["name"], credentials=details.get("credentials"))

    async def delete_service_key(self, request: ServiceKeyRequest) -> None:
        key = await self._service_key(request.service_instance_name, request.service_key_name)
        response = await self._request("DELETE", f"/v3/service_credential_bindings/{key['guid']}")
        await self._wait_for_job(response, f"deletion of service key '{request.service_key_name}'")
