"""
Offline stand-in for AsanaClient.

Same method surface as AsanaClient, returning canned data shaped like the
real API envelopes. Used when the real client cannot be loaded.
"""

import random
from typing import Any, Dict, List, Optional


def _random_gid() -> str:
    return str(random.randint(1_000_000_000, 9_999_999_999))


class StubAsanaClient:
    """
    Deterministic-shaped Asana client used when no API access is configured.

    - create_* -> {"data": {"gid": <random numeric string>, "name": name}}
    - update_* -> {"data": {"gid": id}}
    - delete_* and link operations -> {"data": {}}
    - list_* -> canned records
    """

    # ---- Tasks ----

    async def create_task(self, name: str, notes: Optional[str] = None, due_on: Optional[str] = None,
                          assignee: Optional[str] = None, project_id: Optional[str] = None) -> Dict[str, Any]:
        return {"data": {"gid": _random_gid(), "name": name}}

    async def list_tasks(self, project_id: Optional[str] = None) -> Dict[str, Any]:
        return {
            "data": [
                {
                    "gid": "1234567890",
                    "name": "Example Task 1",
                    "completed": False,
                    "due_on": "2025-04-01",
                    "assignee": None,
                },
                {
                    "gid": "0987654321",
                    "name": "Example Task 2",
                    "completed": True,
                    "due_on": "2025-03-15",
                    "assignee": {"name": "Test User"},
                },
            ]
        }

    async def update_task(self, task_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return {"data": {"gid": task_id}}

    async def complete_task(self, task_id: str) -> Dict[str, Any]:
        return {"data": {"gid": task_id}}

    async def delete_task(self, task_id: str) -> Dict[str, Any]:
        return {"data": {}}

    # ---- Subtasks ----

    async def create_subtask(self, parent_task_id: str, name: str, notes: Optional[str] = None,
                             due_on: Optional[str] = None, assignee: Optional[str] = None) -> Dict[str, Any]:
        return {"data": {"gid": _random_gid(), "name": name}}

    async def list_subtasks(self, parent_task_id: str) -> Dict[str, Any]:
        return {
            "data": [
                {"gid": "1111111111", "name": "Example Subtask 1", "completed": False, "due_on": "2025-04-01"},
                {"gid": "2222222222", "name": "Example Subtask 2", "completed": True, "due_on": "2025-03-15"},
            ]
        }

    async def update_subtask(self, subtask_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return {"data": {"gid": subtask_id}}

    async def delete_subtask(self, subtask_id: str) -> Dict[str, Any]:
        return {"data": {}}

    # ---- Projects ----

    async def create_project(self, name: str, notes: Optional[str] = None, color: Optional[str] = None,
                             public: Optional[bool] = None, workspace_id: Optional[str] = None) -> Dict[str, Any]:
        return {"data": {"gid": _random_gid(), "name": name}}

    async def list_projects(self, workspace_id: Optional[str] = None) -> Dict[str, Any]:
        return {"data": []}

    async def delete_project(self, project_id: str) -> Dict[str, Any]:
        return {"data": {}}

    # ---- Sections ----

    async def create_section(self, project_id: str, name: str, insert_before: Optional[str] = None,
                             insert_after: Optional[str] = None) -> Dict[str, Any]:
        return {"data": {"gid": _random_gid(), "name": name}}

    async def list_sections(self, project_id: str) -> Dict[str, Any]:
        return {"data": []}

    async def add_task_to_section(self, section_id: str, task_id: str) -> Dict[str, Any]:
        return {"data": {}}

    # ---- Dependencies ----

    async def add_dependencies(self, task_id: str, dependency_ids: List[str]) -> Dict[str, Any]:
        return {"data": {}}

    async def remove_dependencies(self, task_id: str, dependency_ids: List[str]) -> Dict[str, Any]:
        return {"data": {}}

    async def get_dependencies(self, task_id: str) -> Dict[str, Any]:
        return {
            "data": [
                {"gid": "12345", "name": "Stub dependency 1", "completed": False},
                {"gid": "67890", "name": "Stub dependency 2", "completed": True},
            ]
        }
