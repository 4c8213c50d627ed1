"""
Asana Task Dependency Tools

A dependency is a directed edge: the task depends on (is blocked by) each
of the given dependency tasks.
"""

import logging
from typing import List

from ..base import ToolParameter
from ._common import AsanaTool
from .formatters import completed_mark, records, render_list, status_suffix

logger = logging.getLogger(__name__)


class AddDependenciesTool(AsanaTool):

    @property
    def name(self) -> str:
        return "add-dependencies"

    @property
    def description(self) -> str:
        return "Add dependencies to a task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="task_id", type="string", description="Task ID"),
            ToolParameter(
                name="dependency_ids",
                type="array",
                description="Array of dependency task IDs",
                items_type="string",
            ),
        ]

    async def execute(self, task_id: str, dependency_ids: List[str]) -> str:
        joined = ", ".join(dependency_ids)
        logger.debug(f"Adding dependencies {joined} to task {task_id}")
        try:
            await self.service.add_dependencies_to_task(task_id, dependency_ids)
        except Exception as e:
            raise self.fail("adding dependencies to task", e) from e

        return f"Dependencies {joined} added to task {task_id} successfully{status_suffix(self.is_stub)}"


class RemoveDependenciesTool(AsanaTool):

    @property
    def name(self) -> str:
        return "remove-dependencies"

    @property
    def description(self) -> str:
        return "Remove dependencies from a task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="task_id", type="string", description="Task ID"),
            ToolParameter(
                name="dependency_ids",
                type="array",
                description="Array of dependency task IDs to remove",
                items_type="string",
            ),
        ]

    async def execute(self, task_id: str, dependency_ids: List[str]) -> str:
        joined = ", ".join(dependency_ids)
        logger.debug(f"Removing dependencies {joined} from task {task_id}")
        try:
            await self.service.remove_dependencies_from_task(task_id, dependency_ids)
        except Exception as e:
            raise self.fail("removing dependencies from task", e) from e

        return f"Dependencies {joined} removed from task {task_id} successfully{status_suffix(self.is_stub)}"


class GetDependenciesTool(AsanaTool):

    @property
    def name(self) -> str:
        return "get-dependencies"

    @property
    def description(self) -> str:
        return "Get dependencies for a task"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [ToolParameter(name="task_id", type="string", description="Task ID")]

    async def execute(self, task_id: str) -> str:
        logger.debug(f"Getting dependencies for task {task_id}")
        try:
            result = await self.service.get_dependencies_for_task(task_id)
        except Exception as e:
            raise self.fail("getting dependencies for task", e) from e

        rows = [
            [dep.get("gid", ""), dep.get("name", ""), completed_mark(dep.get("completed"))]
            for dep in records(result)
        ]
        return render_list(
            f"Dependencies for Task {task_id}",
            ["ID", "Name", "Completed"],
            rows,
            empty_label="dependencies",
            stub=self.is_stub,
        )
