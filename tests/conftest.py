"""
Shared fixtures for the Asana MCP tests.

No test touches the network: the real API path is exercised through
AsyncMock clients or httpx.MockTransport.
"""

from unittest.mock import AsyncMock

import pytest

from asana_mcp import registry
from asana_mcp.config import reload_settings
from asana_mcp.services import AsanaService, ConfigurationError, reset_asana_service


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Start every test without credentials and with fresh module state."""
    for var in ("ASANA_ACCESS_TOKEN", "ASANA_WORKSPACE_ID", "ASANA_BASE_URL",
                "ASANA_TIMEOUT_SECONDS", "ASANA_MCP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reload_settings()
    reset_asana_service()
    registry.reset_registry()
    yield
    reset_asana_service()
    registry.reset_registry()
    reload_settings()


def _failing_loader():
    raise ConfigurationError("ASANA_ACCESS_TOKEN environment variable is not set")


@pytest.fixture
def stub_service() -> AsanaService:
    """Service whose client fails to load, so it answers from the stub."""
    return AsanaService(loader=_failing_loader)


@pytest.fixture
def fake_client() -> AsyncMock:
    """Stand-in for AsanaClient with realistic default responses."""
    client = AsyncMock()
    client.create_task.return_value = {"data": {"gid": "1201", "name": "Ship report"}}
    client.list_tasks.return_value = {"data": []}
    client.update_task.return_value = {"data": {"gid": "1201"}}
    client.complete_task.return_value = {"data": {"gid": "1201", "completed": True}}
    client.delete_task.return_value = {"data": {}}
    client.create_subtask.return_value = {"data": {"gid": "1301", "name": "Draft"}}
    client.list_subtasks.return_value = {"data": []}
    client.update_subtask.return_value = {"data": {"gid": "1301"}}
    client.delete_subtask.return_value = {"data": {}}
    client.create_project.return_value = {"data": {"gid": "1401", "name": "Launch"}}
    client.list_projects.return_value = {"data": []}
    client.delete_project.return_value = {"data": {}}
    client.create_section.return_value = {"data": {"gid": "1501", "name": "Backlog"}}
    client.list_sections.return_value = {"data": []}
    client.add_task_to_section.return_value = {"data": {}}
    client.add_dependencies.return_value = {"data": {}}
    client.remove_dependencies.return_value = {"data": {}}
    client.get_dependencies.return_value = {"data": []}
    return client


@pytest.fixture
def real_service(fake_client) -> AsanaService:
    """Service wired to the fake client, i.e. running in real-API mode."""
    return AsanaService(loader=lambda: fake_client)
