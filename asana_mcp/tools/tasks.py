"""
Asana Task Tools

create-task, list-tasks, update-task, complete-task and delete-task.
"""

import logging
from typing import List, Optional

from ..base import ToolParameter
from ._common import AsanaTool, changed_fields
from .formatters import completed_mark, record_gid, records, render_list, status_suffix

logger = logging.getLogger(__name__)


class CreateTaskTool(AsanaTool):
    """Create a new Asana task."""

    @property
    def name(self) -> str:
        return "create-task"

    @property
    def description(self) -> str:
        return "Create a new Asana task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="name", type="string", description="Task name"),
            ToolParameter(name="description", type="string", description="Task description", required=False),
            ToolParameter(name="due_date", type="string", description="Due date (YYYY-MM-DD format)", required=False),
            ToolParameter(name="assignee", type="string", description="Assignee email or ID", required=False),
            ToolParameter(name="project", type="string", description="Project ID", required=False),
        ]

    async def execute(
        self,
        name: str,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        assignee: Optional[str] = None,
        project: Optional[str] = None,
    ) -> str:
        logger.debug(
            f"Creating Asana task: {name} (due={due_date or 'N/A'}, "
            f"assignee={assignee or 'N/A'}, project={project or 'N/A'})"
        )
        try:
            result = await self.service.create_task(name, description, due_date, assignee, project)
        except Exception as e:
            raise self.fail("creating task", e) from e

        gid = record_gid(result)
        logger.debug(f"Task created with ID: {gid}")
        return f'Task "{name}" created successfully with ID: {gid}{status_suffix(self.is_stub)}'


class ListTasksTool(AsanaTool):
    """List Asana tasks as a markdown table."""

    @property
    def name(self) -> str:
        return "list-tasks"

    @property
    def description(self) -> str:
        return "List Asana tasks"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="project_id",
                type="string",
                description="Project ID to filter tasks",
                required=False,
            ),
        ]

    async def execute(self, project_id: Optional[str] = None) -> str:
        logger.debug(f"Listing Asana tasks{f' for project {project_id}' if project_id else ''}")
        try:
            result = await self.service.list_tasks(project_id)
        except Exception as e:
            raise self.fail("listing tasks", e) from e

        tasks = records(result)
        logger.debug(f"Found {len(tasks)} tasks")
        rows = [
            [
                task.get("gid", ""),
                task.get("name", ""),
                (task.get("assignee") or {}).get("name") or "Unassigned",
                completed_mark(task.get("completed")),
                task.get("due_on") or "No due date",
            ]
            for task in tasks
        ]
        return render_list(
            "Tasks",
            ["ID", "Name", "Assignee", "Completed", "Due Date"],
            rows,
            empty_label="tasks",
            stub=self.is_stub,
        )


class UpdateTaskTool(AsanaTool):
    """Update an existing Asana task. Only supplied fields are sent."""

    @property
    def name(self) -> str:
        return "update-task"

    @property
    def description(self) -> str:
        return "Update an existing Asana task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="task_id", type="string", description="Task ID"),
            ToolParameter(name="name", type="string", description="New task name", required=False),
            ToolParameter(name="description", type="string", description="New task description", required=False),
            ToolParameter(name="due_date", type="string", description="New due date (YYYY-MM-DD format)", required=False),
            ToolParameter(name="assignee", type="string", description="New assignee email or ID", required=False),
            ToolParameter(name="completed", type="boolean", description="Task completion status", required=False),
        ]

    async def execute(
        self,
        task_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        due_date: Optional[str] = None,
        assignee: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> str:
        fields = changed_fields(name, description, due_date, assignee, completed)
        logger.debug(f"Updating Asana task {task_id} with {fields}")
        try:
            await self.service.update_task(task_id, fields)
        except Exception as e:
            raise self.fail("updating task", e) from e

        return f"Task {task_id} updated successfully{status_suffix(self.is_stub)}"


class CompleteTaskTool(AsanaTool):
    """Mark an Asana task as completed."""

    @property
    def name(self) -> str:
        return "complete-task"

    @property
    def description(self) -> str:
        return "Mark an Asana task as completed"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [ToolParameter(name="task_id", type="string", description="Task ID to complete")]

    async def execute(self, task_id: str) -> str:
        logger.debug(f"Completing task: {task_id}")
        try:
            await self.service.complete_task(task_id)
        except Exception as e:
            raise self.fail("completing task", e) from e

        return f"Task {task_id} marked as completed{status_suffix(self.is_stub)}"


class DeleteTaskTool(AsanaTool):

    @property
    def name(self) -> str:
        return "delete-task"

    @property
    def description(self) -> str:
        return "Delete an Asana task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [ToolParameter(name="task_id", type="string", description="Task ID to delete")]

    async def execute(self, task_id: str) -> str:
        logger.debug(f"Deleting task: {task_id}")
        try:
            await self.service.delete_task(task_id)
        except Exception as e:
            raise self.fail("deleting task", e) from e

        return f"Task {task_id} deleted successfully{status_suffix(self.is_stub)}"
