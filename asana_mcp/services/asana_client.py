"""
Asana REST API client.

Thin async wrapper over the Asana endpoints used by the tools. Every method
returns the decoded JSON envelope as-is ({"data": {...}} or {"data": [...]}).
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import Settings
from .errors import AsanaAPIError, ConfigurationError

logger = logging.getLogger(__name__)

TASK_FIELDS = "name,notes,completed,due_on,assignee.name,projects.name"
SUBTASK_FIELDS = "name,completed,due_on,assignee.name"
PROJECT_FIELDS = "name,notes,color,public,archived"
DEPENDENCY_FIELDS = "name,completed"


class AsanaClient:
    """
    Async client for the Asana REST API.

    Usage:
        async with AsanaClient.from_settings(get_settings()) as client:
            tasks = await client.list_tasks(project_id="1204...")
    """

    def __init__(
        self,
        access_token: str,
        workspace_id: Optional[str] = None,
        base_url: str = "https://app.asana.com/api/1.0",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not access_token:
            raise ConfigurationError("Asana access token is required")
        self.workspace_id = workspace_id
        self.base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "AsanaClient":
        if not settings.access_token:
            raise ConfigurationError("ASANA_ACCESS_TOKEN environment variable is not set")
        return cls(
            access_token=settings.access_token,
            workspace_id=settings.workspace_id,
            base_url=settings.base_url,
            timeout=settings.timeout,
            **kwargs,
        )

    async def __aenter__(self) -> "AsanaClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make an API request and return the decoded body."""
        body = {"data": data} if data is not None else None
        logger.debug(f"{method} {path} params={params} body={body}")

        try:
            resp = await self.client.request(method, path, json=body, params=params)
        except httpx.HTTPError as e:
            raise AsanaAPIError(f"HTTP error: {e}") from e

        if resp.status_code >= 400:
            errors: List[Dict] = []
            try:
                errors = resp.json().get("errors", []) or []
            except ValueError:
                pass
            message = ""
            if errors and isinstance(errors[0], dict):
                message = errors[0].get("message", "")
            raise AsanaAPIError(
                message or f"Asana API error ({resp.status_code}): {resp.text}",
                status_code=resp.status_code,
                errors=errors,
            )

        if not resp.content:
            return {"data": {}}
        return resp.json()

    def _require_workspace(self, workspace_id: Optional[str]) -> str:
        workspace = workspace_id or self.workspace_id
        if not workspace:
            raise ConfigurationError("ASANA_WORKSPACE_ID environment variable is not set")
        return workspace

    # ---- Tasks ----

    async def create_task(
        self,
        name: str,
        notes: Optional[str] = None,
        due_on: Optional[str] = None,
        assignee: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": name}
        if notes:
            data["notes"] = notes
        if due_on:
            data["due_on"] = due_on
        if assignee:
            data["assignee"] = assignee
        if project_id:
            data["projects"] = [project_id]
        elif self.workspace_id:
            data["workspace"] = self.workspace_id
        return await self._request("POST", "/tasks", data=data)

    async def list_tasks(self, project_id: Optional[str] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"opt_fields": TASK_FIELDS}
        if project_id:
            params["project"] = project_id
        else:
            # Asana needs a project, or assignee + workspace
            params["assignee"] = "me"
            params["workspace"] = self._require_workspace(None)
        return await self._request("GET", "/tasks", params=params)

    async def update_task(self, task_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/tasks/{task_id}", data=dict(fields))

    async def complete_task(self, task_id: str) -> Dict[str, Any]:
        return await self.update_task(task_id, {"completed": True})

    async def delete_task(self, task_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/tasks/{task_id}")

    # ---- Subtasks ----

    async def create_subtask(
        self,
        parent_task_id: str,
        name: str,
        notes: Optional[str] = None,
        due_on: Optional[str] = None,
        assignee: Optional[str] = None,
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": name, "notes": notes or "", "parent": parent_task_id}
        if due_on:
            data["due_on"] = due_on
        if assignee:
            data["assignee"] = assignee
        return await self._request("POST", "/tasks", data=data)

    async def list_subtasks(self, parent_task_id: str) -> Dict[str, Any]:
        return await self._request(
            "GET", f"/tasks/{parent_task_id}/subtasks", params={"opt_fields": SUBTASK_FIELDS}
        )

    async def update_subtask(self, subtask_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self.update_task(subtask_id, fields)

    async def delete_subtask(self, subtask_id: str) -> Dict[str, Any]:
        return await self.delete_task(subtask_id)

    # ---- Projects ----

    async def create_project(
        self,
        name: str,
        notes: Optional[str] = None,
        color: Optional[str] = None,
        public: Optional[bool] = None,
        workspace_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": name, "workspace": self._require_workspace(workspace_id)}
        if notes:
            data["notes"] = notes
        if color:
            data["color"] = color
        if public is not None:
            data["public"] = public
        return await self._request("POST", "/projects", data=data)

    async def list_projects(self, workspace_id: Optional[str] = None) -> Dict[str, Any]:
        params = {
            "workspace": self._require_workspace(workspace_id),
            "opt_fields": PROJECT_FIELDS,
        }
        return await self._request("GET", "/projects", params=params)

    async def delete_project(self, project_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/projects/{project_id}")

    # ---- Sections ----

    async def create_section(
        self,
        project_id: str,
        name: str,
        insert_before: Optional[str] = None,
        insert_after: Optional[str] = None,
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": name}
        if insert_before:
            data["insert_before"] = insert_before
        if insert_after:
            data["insert_after"] = insert_after
        return await self._request("POST", f"/projects/{project_id}/sections", data=data)

    async def list_sections(self, project_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/projects/{project_id}/sections")

    async def add_task_to_section(self, section_id: str, task_id: str) -> Dict[str, Any]:
        return await self._request("POST", f"/sections/{section_id}/addTask", data={"task": task_id})

    # ---- Dependencies ----

    async def add_dependencies(self, task_id: str, dependency_ids: List[str]) -> Dict[str, Any]:
        return await self._request(
            "POST", f"/tasks/{task_id}/addDependencies", data={"dependencies": list(dependency_ids)}
        )

    async def remove_dependencies(self, task_id: str, dependency_ids: List[str]) -> Dict[str, Any]:
        return await self._request(
            "POST", f"/tasks/{task_id}/removeDependencies", data={"dependencies": list(dependency_ids)}
        )

    async def get_dependencies(self, task_id: str) -> Dict[str, Any]:
        return await self._request(
            "GET", f"/tasks/{task_id}/dependencies", params={"opt_fields": DEPENDENCY_FIELDS}
        )
