"""
Asana Subtask Tools

Subtasks are ordinary Asana tasks with a parent task.
"""

import logging
from typing import List, Optional

from ..base import ToolParameter
from ._common import AsanaTool, changed_fields
from .formatters import completed_mark, record_gid, records, render_list, status_suffix

logger = logging.getLogger(__name__)


class CreateSubtaskTool(AsanaTool):

    @property
    def name(self) -> str:
        return "create-subtask"

    @property
    def description(self) -> str:
        return "Create a subtask for an existing Asana task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="parent_task_id", type="string", description="Parent task ID"),
            ToolParameter(name="name", type="string", description="Subtask name"),
            ToolParameter(name="description", type="string", description="Subtask description", required=False),
            ToolParameter(name="due_date", type="string", description="Due date (YYYY-MM-DD format)", required=False),
            ToolParameter(name="assignee", type="string", description="Assignee email or ID", required=False),
        ]

    async def execute(
        self,
        parent_task_id: str,
        name: str,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        assignee: Optional[str] = None,
    ) -> str:
        logger.debug(f"Creating subtask '{name}' for parent task: {parent_task_id}")
        try:
            result = await self.service.create_subtask(parent_task_id, name, description, due_date, assignee)
        except Exception as e:
            raise self.fail("creating subtask", e) from e

        gid = record_gid(result)
        logger.debug(f"Subtask created with ID: {gid}")
        return f'Subtask "{name}" created successfully with ID: {gid}{status_suffix(self.is_stub)}'


class ListSubtasksTool(AsanaTool):

    @property
    def name(self) -> str:
        return "list-subtasks"

    @property
    def description(self) -> str:
        return "List subtasks for a parent task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [ToolParameter(name="parent_task_id", type="string", description="Parent task ID")]

    async def execute(self, parent_task_id: str) -> str:
        logger.debug(f"Listing subtasks for parent task: {parent_task_id}")
        try:
            result = await self.service.list_subtasks(parent_task_id)
        except Exception as e:
            raise self.fail("listing subtasks", e) from e

        subtasks = records(result)
        logger.debug(f"Found {len(subtasks)} subtasks")
        rows = [
            [
                subtask.get("gid", ""),
                subtask.get("name", ""),
                completed_mark(subtask.get("completed")),
                subtask.get("due_on") or "No due date",
            ]
            for subtask in subtasks
        ]
        return render_list(
            f"Subtasks for Task {parent_task_id}",
            ["ID", "Name", "Completed", "Due Date"],
            rows,
            empty_label="subtasks",
            stub=self.is_stub,
        )


class UpdateSubtaskTool(AsanaTool):

    @property
    def name(self) -> str:
        return "update-subtask"

    @property
    def description(self) -> str:
        return "Update an existing subtask"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="subtask_id", type="string", description="Subtask ID"),
            ToolParameter(name="name", type="string", description="New subtask name", required=False),
            ToolParameter(name="description", type="string", description="New subtask description", required=False),
            ToolParameter(name="due_date", type="string", description="New due date (YYYY-MM-DD format)", required=False),
            ToolParameter(name="assignee", type="string", description="New assignee email or ID", required=False),
            ToolParameter(name="completed", type="boolean", description="Subtask completion status", required=False),
        ]

    async def execute(
        self,
        subtask_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        assignee: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> str:
        fields = changed_fields(name, description, due_date, assignee, completed)
        logger.debug(f"Updating subtask {subtask_id} with {fields}")
        try:
            await self.service.update_subtask(subtask_id, fields)
        except Exception as e:
            raise self.fail("updating subtask", e) from e

        return f"Subtask {subtask_id} updated successfully{status_suffix(self.is_stub)}"


class DeleteSubtaskTool(AsanaTool):

    @property
    def name(self) -> str:
        return "delete-subtask"

    @property
    def description(self) -> str:
        return "Delete a subtask"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [ToolParameter(name="subtask_id", type="string", description="Subtask ID to delete")]

    async def execute(self, subtask_id: str) -> str:
        logger.debug(f"Deleting subtask: {subtask_id}")
        try:
            await self.service.delete_subtask(subtask_id)
        except Exception as e:
            raise self.fail("deleting subtask", e) from e

        return f"Subtask {subtask_id} deleted successfully{status_suffix(self.is_stub)}"
