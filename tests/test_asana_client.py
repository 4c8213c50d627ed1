"""
Unit tests for AsanaClient, using httpx.MockTransport in place of the network.
"""

import json
from typing import Dict, List

import httpx
import pytest

from asana_mcp.config import Settings
from asana_mcp.services import AsanaAPIError, AsanaClient, ConfigurationError


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status: int = 200, body: Dict = None):
        self.status = status
        self.body = {"data": {}} if body is None else body
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Dict:
        return json.loads(self.last.content)


def make_client(recorder, workspace_id="ws-1") -> AsanaClient:
    return AsanaClient(
        access_token="pat-123",
        workspace_id=workspace_id,
        transport=httpx.MockTransport(recorder),
    )


class TestConstruction:

    def test_missing_token_rejected(self):
        with pytest.raises(ConfigurationError):
            AsanaClient(access_token="")

    def test_from_settings_requires_token(self):
        settings = Settings(access_token=None, workspace_id=None,
                            base_url="https://app.asana.com/api/1.0", timeout=30.0, log_level="INFO")
        with pytest.raises(ConfigurationError, match="ASANA_ACCESS_TOKEN"):
            AsanaClient.from_settings(settings)

    @pytest.mark.asyncio
    async def test_auth_header_sent(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.delete_task("1")

        assert recorder.last.headers["Authorization"] == "Bearer pat-123"
        assert recorder.last.url.path == "/api/1.0/tasks/1"


class TestTasks:

    @pytest.mark.asyncio
    async def test_create_task_with_project(self):
        recorder = Recorder(body={"data": {"gid": "1201", "name": "Ship report"}})
        async with make_client(recorder) as client:
            result = await client.create_task("Ship report", notes="n", due_on="2025-05-01", project_id="p1")

        assert result["data"]["gid"] == "1201"
        assert recorder.last.method == "POST"
        assert recorder.last_json == {
            "data": {"name": "Ship report", "notes": "n", "due_on": "2025-05-01", "projects": ["p1"]}
        }

    @pytest.mark.asyncio
    async def test_create_task_without_project_uses_workspace(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.create_task("Loose task")

        assert recorder.last_json == {"data": {"name": "Loose task", "workspace": "ws-1"}}

    @pytest.mark.asyncio
    async def test_list_tasks_by_project(self):
        recorder = Recorder(body={"data": []})
        async with make_client(recorder) as client:
            await client.list_tasks("p1")

        params = recorder.last.url.params
        assert params["project"] == "p1"
        assert "completed" in params["opt_fields"]

    @pytest.mark.asyncio
    async def test_list_tasks_without_project_lists_my_tasks(self):
        recorder = Recorder(body={"data": []})
        async with make_client(recorder) as client:
            await client.list_tasks()

        params = recorder.last.url.params
        assert params["assignee"] == "me"
        assert params["workspace"] == "ws-1"

    @pytest.mark.asyncio
    async def test_list_tasks_without_project_or_workspace(self):
        recorder = Recorder()
        async with make_client(recorder, workspace_id=None) as client:
            with pytest.raises(ConfigurationError):
                await client.list_tasks()

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_complete_task_puts_completed(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.complete_task("1201")

        assert recorder.last.method == "PUT"
        assert recorder.last_json == {"data": {"completed": True}}

    @pytest.mark.asyncio
    async def test_empty_delete_response(self):
        def handler(request):
            return httpx.Response(204)

        client = AsanaClient(access_token="pat", transport=httpx.MockTransport(handler))
        assert await client.delete_task("1") == {"data": {}}
        await client.aclose()


class TestSubtasksProjectsSections:

    @pytest.mark.asyncio
    async def test_create_subtask_sets_parent(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.create_subtask("1201", "Draft", assignee="me")

        assert recorder.last.url.path.endswith("/tasks")
        assert recorder.last_json["data"] == {"name": "Draft", "notes": "", "parent": "1201", "assignee": "me"}

    @pytest.mark.asyncio
    async def test_list_subtasks_path(self):
        recorder = Recorder(body={"data": []})
        async with make_client(recorder) as client:
            await client.list_subtasks("1201")

        assert recorder.last.url.path == "/api/1.0/tasks/1201/subtasks"

    @pytest.mark.asyncio
    async def test_create_project_payload(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.create_project("Launch", color="light-green", public=False)

        assert recorder.last_json["data"] == {
            "name": "Launch", "workspace": "ws-1", "color": "light-green", "public": False
        }

    @pytest.mark.asyncio
    async def test_list_projects_explicit_workspace(self):
        recorder = Recorder(body={"data": []})
        async with make_client(recorder) as client:
            await client.list_projects("ws-2")

        assert recorder.last.url.params["workspace"] == "ws-2"

    @pytest.mark.asyncio
    async def test_create_section_ordering(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.create_section("1401", "Backlog", insert_after="1502")

        assert recorder.last.url.path == "/api/1.0/projects/1401/sections"
        assert recorder.last_json["data"] == {"name": "Backlog", "insert_after": "1502"}

    @pytest.mark.asyncio
    async def test_add_task_to_section(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.add_task_to_section("1501", "1201")

        assert recorder.last.url.path == "/api/1.0/sections/1501/addTask"
        assert recorder.last_json == {"data": {"task": "1201"}}


class TestDependencies:

    @pytest.mark.asyncio
    async def test_add_and_remove(self):
        recorder = Recorder()
        async with make_client(recorder) as client:
            await client.add_dependencies("1201", ["1", "2"])
            await client.remove_dependencies("1201", ["2"])

        add, remove = recorder.requests
        assert add.url.path.endswith("/tasks/1201/addDependencies")
        assert json.loads(add.content) == {"data": {"dependencies": ["1", "2"]}}
        assert remove.url.path.endswith("/tasks/1201/removeDependencies")

    @pytest.mark.asyncio
    async def test_get_dependencies(self):
        recorder = Recorder(body={"data": [{"gid": "1", "name": "Blocker", "completed": False}]})
        async with make_client(recorder) as client:
            result = await client.get_dependencies("1201")

        assert result["data"][0]["name"] == "Blocker"
        assert recorder.last.method == "GET"


class TestErrors:

    @pytest.mark.asyncio
    async def test_api_error_carries_errors_array(self):
        recorder = Recorder(status=400, body={"errors": [{"message": "name: Missing input"}]})
        async with make_client(recorder) as client:
            with pytest.raises(AsanaAPIError) as exc_info:
                await client.create_task("")

        err = exc_info.value
        assert err.status_code == 400
        assert err.message == "name: Missing input"
        assert err.errors == [{"message": "name: Missing input"}]

    @pytest.mark.asyncio
    async def test_api_error_without_json_body(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        client = AsanaClient(access_token="pat", transport=httpx.MockTransport(handler))
        with pytest.raises(AsanaAPIError, match="502"):
            await client.list_subtasks("1")
        await client.aclose()

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        client = AsanaClient(access_token="pat", transport=httpx.MockTransport(handler))
        with pytest.raises(AsanaAPIError, match="connection refused") as exc_info:
            await client.delete_project("1")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        await client.aclose()
