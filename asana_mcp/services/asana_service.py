"""
Asana Service Facade

Single entry point the tools use to reach Asana. The real API client is
loaded lazily on first use; if loading fails the service switches to the
stub client for the rest of the process, so callers always get the same
response shapes.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..config import get_settings
from .asana_client import AsanaClient
from .stub_client import StubAsanaClient

logger = logging.getLogger(__name__)


def _load_asana_client() -> AsanaClient:
    """Build the real API client from the current settings."""
    return AsanaClient.from_settings(get_settings())


class AsanaService:
    """
    Facade over AsanaClient with a stub fallback.

    Loading is attempted once. A failure is logged and never retried; from
    then on every call is answered by StubAsanaClient.
    """

    def __init__(self, loader: Optional[Callable[[], Any]] = None):
        self._loader = loader or _load_asana_client
        self._asana_api: Optional[Any] = None
        self._stub = StubAsanaClient()
        self._load_attempted = False

    def _load_asana_api(self) -> None:
        self._load_attempted = True
        try:
            self._asana_api = self._loader()
            logger.debug("Asana API loaded successfully")
        except Exception as e:
            logger.debug(f"Error loading Asana API: {e}")
            logger.debug("Using stub implementations instead")
            self._asana_api = None

    async def _ensure_initialized(self) -> Any:
        if not self._load_attempted:
            self._load_asana_api()
        return self._asana_api if self._asana_api is not None else self._stub

    def is_real_api_available(self) -> bool:
        return self._load_attempted and self._asana_api is not None

    async def aclose(self) -> None:
        if self._asana_api is not None and hasattr(self._asana_api, "aclose"):
            await self._asana_api.aclose()

    # ---- Tasks ----

    async def create_task(self, name: str, description: Optional[str] = None, due_date: Optional[str] = None,
                          assignee: Optional[str] = None, project: Optional[str] = None) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.create_task(name, notes=description, due_on=due_date, assignee=assignee, project_id=project)

    async def list_tasks(self, project_id: Optional[str] = None) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.list_tasks(project_id)

    async def update_task(self, task_id: str, updated_fields: Dict[str, Any]) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.update_task(task_id, updated_fields)

    async def complete_task(self, task_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.complete_task(task_id)

    async def delete_task(self, task_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.delete_task(task_id)

    # ---- Subtasks ----

    async def create_subtask(self, parent_task_id: str, name: str, description: Optional[str] = None,
                             due_date: Optional[str] = None, assignee: Optional[str] = None) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.create_subtask(parent_task_id, name, notes=description, due_on=due_date, assignee=assignee)

    async def list_subtasks(self, parent_task_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.list_subtasks(parent_task_id)

    async def update_subtask(self, subtask_id: str, updated_fields: Dict[str, Any]) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.update_subtask(subtask_id, updated_fields)

    async def delete_subtask(self, subtask_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.delete_subtask(subtask_id)

    # ---- Projects ----

    async def create_project(self, name: str, notes: Optional[str] = None, color: Optional[str] = None,
                             is_public: Optional[bool] = None, workspace_id: Optional[str] = None) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.create_project(name, notes=notes, color=color, public=is_public, workspace_id=workspace_id)

    async def list_projects(self, workspace_id: Optional[str] = None) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.list_projects(workspace_id)

    async def delete_project(self, project_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.delete_project(project_id)

    # ---- Sections ----

    async def create_section(self, project_id: str, name: str, insert_before: Optional[str] = None,
                             insert_after: Optional[str] = None) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.create_section(project_id, name, insert_before=insert_before, insert_after=insert_after)

    async def list_sections(self, project_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.list_sections(project_id)

    async def add_task_to_section(self, section_id: str, task_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.add_task_to_section(section_id, task_id)

    # ---- Dependencies ----

    async def add_dependencies_to_task(self, task_id: str, dependency_ids: List[str]) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.add_dependencies(task_id, dependency_ids)

    async def remove_dependencies_from_task(self, task_id: str, dependency_ids: List[str]) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.remove_dependencies(task_id, dependency_ids)

    async def get_dependencies_for_task(self, task_id: str) -> Dict[str, Any]:
        api = await self._ensure_initialized()
        return await api.get_dependencies(task_id)


_service: Optional[AsanaService] = None


def get_asana_service() -> AsanaService:
    """Process-wide AsanaService shared by all tools."""
    global _service
    if _service is None:
        _service = AsanaService()
    return _service


def reset_asana_service() -> None:
    """Drop the shared service (mainly for testing)."""
    global _service
    _service = None
