"""Tests for the Cloud Controller client against a mocked HTTP transport."""

import json
from collections import defaultdict

import httpx
import pytest

from cf import CloudControllerClient, CloudFoundrySettings, EntityNotFoundError, RemoteOperationError
from cf.requests import (
    ApplicationRequest,
    CreateServiceInstanceRequest,
    PushApplicationRequest,
    ScaleApplicationRequest,
    ServiceKeyRequest,
)
from cfpulse.errors import WorkflowAbortedError
from cfpulse.workflow import PushApplicationWorkflow

API = "https://api.example.com"
LOGIN = "https://login.example.com"


class FakeCloudController:
    """Routes requests by (method, path) to queued responses and records them."""

    def __init__(self):
        self.requests = []
        self.routes = defaultdict(list)
        self.add("GET", "/", {"links": {"login": {"href": LOGIN}}})
        self.add("POST", "/oauth/token", {"access_token": "token-1", "expires_in": 3600})
        self.add("GET", "/v3/organizations", {"resources": [{"guid": "org-1", "name": "acme"}]})
        self.add("GET", "/v3/spaces", {"resources": [{"guid": "space-1", "name": "dev"}]})

    def add(self, method, path, body=None, status_code=200, headers=None, repeat=True):
        self.routes[(method, path)].append((status_code, body, headers or {}, repeat))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"errors": [{"detail": f"No route {request.url.path}"}]})
        status_code, body, headers, repeat = queue[0]
        if not repeat or len(queue) > 1:
            queue.pop(0)
        return httpx.Response(status_code, json=body, headers=headers)

    def calls(self, method, path):
        return [r for r in self.requests if r.method == method and r.url.path == path]


@pytest.fixture
def api():
    return FakeCloudController()


@pytest.fixture
def settings():
    return CloudFoundrySettings(
        api_host=API,
        username="admin",
        password="secret",
        organization="acme",
        space="dev",
        poll_interval=0.001,
        operation_timeout=5,
    )


@pytest.fixture
def client(api, settings):
    http = httpx.AsyncClient(base_url=API, transport=httpx.MockTransport(api))
    return CloudControllerClient(settings, http_client=http)


def _app(guid="app-1", name="demo", state="STOPPED"):
    return {"guid": guid, "name": name, "state": state}


@pytest.mark.asyncio
async def test_list_applications_authenticates_once_and_paginates(api, client):
    api.add(
        "GET",
        "/v3/apps",
        {
            "resources": [_app("app-1", "alpha")],
            "pagination": {"next": {"href": f"{API}/v3/apps?page=2&space_guids=space-1"}},
        },
        repeat=False,
    )
    api.add("GET", "/v3/apps", {"resources": [_app("app-2", "beta", "STARTED")], "pagination": {"next": None}})

    first = await client.list_applications()
    second = await client.list_applications()

    assert [a.name for a in first] == ["alpha", "beta"]
    assert [a.name for a in second] == ["beta"]
    assert len(api.calls("POST", "/oauth/token")) == 1
    assert len(api.calls("GET", "/v3/spaces")) == 1

    token_request = api.calls("POST", "/oauth/token")[0]
    assert token_request.url.host == "login.example.com"
    assert b"grant_type=password" in token_request.content

    apps_request = api.calls("GET", "/v3/apps")[0]
    assert apps_request.headers["Authorization"] == "bearer token-1"
    assert apps_request.url.params["space_guids"] == "space-1"
    assert api.calls("GET", "/v3/spaces")[0].url.params["organization_guids"] == "org-1"


@pytest.mark.asyncio
async def test_error_response_detail_is_surfaced(api, client):
    api.add(
        "GET",
        "/v3/apps",
        {"errors": [{"title": "CF-NotAuthorized", "detail": "You are not authorized to perform the requested action"}]},
        status_code=403,
    )

    with pytest.raises(RemoteOperationError) as exc_info:
        await client.list_applications()

    assert exc_info.value.status_code == 403
    assert str(exc_info.value) == "You are not authorized to perform the requested action"


@pytest.mark.asyncio
async def test_missing_application_is_not_found(api, client):
    api.add("GET", "/v3/apps", {"resources": []})

    with pytest.raises(EntityNotFoundError, match="Application 'ghost' not found"):
        await client.get_application(ApplicationRequest("ghost"))


@pytest.mark.asyncio
async def test_scale_sends_only_supplied_fields(api, client):
    api.add("GET", "/v3/apps", {"resources": [_app()]})
    api.add("POST", "/v3/apps/app-1/processes/web/actions/scale", {"instances": 3})

    await client.scale_application(ScaleApplicationRequest(name="demo", instances=3))

    (scale,) = api.calls("POST", "/v3/apps/app-1/processes/web/actions/scale")
    assert json.loads(scale.content) == {"instances": 3}


@pytest.mark.asyncio
async def test_push_with_missing_path_makes_no_request(api, client, tmp_path):
    with pytest.raises(RemoteOperationError, match="Application path not found"):
        await client.push_application(
            PushApplicationRequest(name="demo", path=str(tmp_path / "missing.jar"))
        )

    assert api.requests == []


@pytest.mark.asyncio
async def test_push_creates_app_and_uploads_bits(api, client, tmp_path):
    jar = tmp_path / "demo.jar"
    jar.write_bytes(b"PK\x03\x04fake-jar")
    api.add("GET", "/v3/apps", {"resources": []})
    api.add("POST", "/v3/apps", _app(), status_code=201)
    api.add("POST", "/v3/apps/app-1/processes/web/actions/scale", {})
    api.add("POST", "/v3/packages", {"guid": "pkg-1", "state": "AWAITING_UPLOAD"}, status_code=201)
    api.add("POST", "/v3/packages/pkg-1/upload", {"guid": "pkg-1", "state": "PROCESSING_UPLOAD"})
    api.add("GET", "/v3/packages/pkg-1", {"guid": "pkg-1", "state": "PROCESSING_UPLOAD"}, repeat=False)
    api.add("GET", "/v3/packages/pkg-1", {"guid": "pkg-1", "state": "READY"})

    await client.push_application(
        PushApplicationRequest(
            name="demo",
            path=str(jar),
            no_start=True,
            buildpack="java_buildpack_offline",
            memory=512,
        )
    )

    (create,) = api.calls("POST", "/v3/apps")
    body = json.loads(create.content)
    assert body["name"] == "demo"
    assert body["lifecycle"]["data"]["buildpacks"] == ["java_buildpack_offline"]
    assert body["relationships"]["space"]["data"]["guid"] == "space-1"

    (scale,) = api.calls("POST", "/v3/apps/app-1/processes/web/actions/scale")
    assert json.loads(scale.content) == {"memory_in_mb": 512}

    (upload,) = api.calls("POST", "/v3/packages/pkg-1/upload")
    assert b"fake-jar" in upload.content
    assert len(api.calls("GET", "/v3/packages/pkg-1")) == 2
    assert api.calls("POST", "/v3/apps/app-1/actions/start") == []


@pytest.mark.asyncio
async def test_delete_waits_for_job(api, client):
    api.add("GET", "/v3/apps", {"resources": [_app()]})
    api.add("DELETE", "/v3/apps/app-1", None, status_code=202, headers={"Location": f"{API}/v3/jobs/job-1"})
    api.add("GET", "/v3/jobs/job-1", {"guid": "job-1", "state": "PROCESSING"}, repeat=False)
    api.add("GET", "/v3/jobs/job-1", {"guid": "job-1", "state": "COMPLETE"})

    await client.delete_application(ApplicationRequest("demo"))

    assert len(api.calls("GET", "/v3/jobs/job-1")) == 2


@pytest.mark.asyncio
async def test_failed_job_raises(api, client):
    api.add("GET", "/v3/apps", {"resources": [_app()]})
    api.add("DELETE", "/v3/apps/app-1", None, status_code=202, headers={"Location": f"{API}/v3/jobs/job-1"})
    api.add("GET", "/v3/jobs/job-1", {"state": "FAILED", "errors": [{"detail": "app has routes"}]})

    with pytest.raises(RemoteOperationError, match="deletion of application 'demo' failed: app has routes"):
        await client.delete_application(ApplicationRequest("demo"))


@pytest.mark.asyncio
async def test_create_service_instance_with_unknown_plan(api, client):
    api.add("GET", "/v3/service_plans", {"resources": []})

    with pytest.raises(RemoteOperationError) as exc_info:
        await client.create_service_instance(
            CreateServiceInstanceRequest("db", "postgres", "huge")
        )

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Service plan 'huge' of service 'postgres' not found"
    assert api.calls("POST", "/v3/service_instances") == []


@pytest.mark.asyncio
async def test_get_service_key_reads_credentials(api, client):
    api.add("GET", "/v3/service_instances", {"resources": [{"guid": "si-1", "name": "db"}]})
    api.add("GET", "/v3/service_credential_bindings", {"resources": [{"guid": "key-1", "name": "key1"}]})
    api.add("GET", "/v3/service_credential_bindings/key-1/details", {"credentials": {"uri": "postgres://db"}})

    key = await client.get_service_key(ServiceKeyRequest("db", "key1"))

    assert key.name == "key1"
    assert key.credentials == {"uri": "postgres://db"}
    lookup = api.calls("GET", "/v3/service_credential_bindings")[0]
    assert lookup.url.params["type"] == "key"
    assert lookup.url.params["service_instance_guids"] == "si-1"


@pytest.mark.asyncio
async def test_unconfigured_credentials_fail_without_request(api):
    http = httpx.AsyncClient(base_url=API, transport=httpx.MockTransport(api))
    async with CloudControllerClient(CloudFoundrySettings(api_host=API), http_client=http) as cf:
        with pytest.raises(RemoteOperationError, match="credentials are not configured"):
            await cf.list_organizations()
    await http.aclose()

    assert api.requests == []


@pytest.mark.asyncio
async def test_transport_error_becomes_remote_operation_error(settings):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.AsyncClient(base_url=API, transport=httpx.MockTransport(refuse))
    cf = CloudControllerClient(settings, http_client=http)

    with pytest.raises(RemoteOperationError, match="connection refused"):
        await cf.list_organizations()
    await http.aclose()


@pytest.mark.asyncio
async def test_push_upload_failure_after_stopping_running_app(api, client, tmp_path):
    jar = tmp_path / "demo.jar"
    jar.write_bytes(b"PK\x03\x04fake-jar")
    api.add("GET", "/v3/apps", {"resources": [_app(state="STARTED")]})
    api.add("POST", "/v3/apps/app-1/actions/stop", _app())
    api.add("PATCH", "/v3/apps/app-1", _app())
    api.add("POST", "/v3/packages", {"guid": "pkg-1", "state": "AWAITING_UPLOAD"}, status_code=201)
    api.add("POST", "/v3/packages/pkg-1/upload", {"errors": [{"detail": "upload blew up"}]}, status_code=502)

    workflow = PushApplicationWorkflow(client, "demo", str(jar))
    with pytest.raises(WorkflowAbortedError) as exc_info:
        await workflow.run()

    assert str(exc_info.value) == (
        "Push of application 'demo' failed at step 'upload' before any step completed: "
        "upload blew up. No new bits were uploaded; an existing application may have been "
        "stopped or a new one created."
    )
    assert len(api.calls("POST", "/v3/apps/app-1/actions/stop")) == 1
    assert api.calls("PATCH", "/v3/apps/app-1/environment_variables") == []
    assert api.calls("POST", "/v3/apps/app-1/actions/start") == []
