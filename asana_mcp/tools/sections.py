"""
Asana Section Tools
"""

import logging
from typing import List, Optional

from ..base import ToolParameter
from ._common import AsanaTool
from .formatters import record_gid, records, render_list, status_suffix

logger = logging.getLogger(__name__)


class CreateSectionTool(AsanaTool):
    """Create a section, optionally positioned before/after an existing one."""

    @property
    def name(self) -> str:
        return "create-section"

    @property
    def description(self) -> str:
        return "Create a section in an Asana project"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="project_id", type="string", description="Project ID"),
            ToolParameter(name="name", type="string", description="Section name"),
            ToolParameter(name="insert_before", type="string", description="Insert before this section ID", required=False),
            ToolParameter(name="insert_after", type="string", description="Insert after this section ID", required=False),
        ]

    async def execute(
        self,
        project_id: str,
        name: str,
        insert_before: Optional[str] = None,
        insert_after: Optional[str] = None,
    ) -> str:
        logger.debug(
            f'Creating section "{name}" in project {project_id} '
            f"(before={insert_before}, after={insert_after})"
        )
        try:
            result = await self.service.create_section(project_id, name, insert_before, insert_after)
        except Exception as e:
            raise self.fail("creating section", e) from e

        gid = record_gid(result)
        return (
            f'Section "{name}" created successfully in project {project_id} '
            f"with ID: {gid}{status_suffix(self.is_stub)}"
        )


class ListSectionsTool(AsanaTool):

    @property
    def name(self) -> str:
        return "list-sections"

    @property
    def description(self) -> str:
        return "List sections in an Asana project"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [ToolParameter(name="project_id", type="string", description="Project ID")]

    async def execute(self, project_id: str) -> str:
        logger.debug(f"Listing sections for project: {project_id}")
        try:
            result = await self.service.list_sections(project_id)
        except Exception as e:
            raise self.fail("listing sections", e) from e

        rows = [[section.get("gid", ""), section.get("name", "")] for section in records(result)]
        return render_list(
            f"Sections in Project {project_id}",
            ["ID", "Name"],
            rows,
            empty_label="sections",
            stub=self.is_stub,
        )


class AddTaskToSectionTool(AsanaTool):

    @property
    def name(self) -> str:
        return "add-task-to-section"

    @property
    def description(self) -> str:
        return "Add a task to a specific section"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="section_id", type="string", description="Section ID"),
            ToolParameter(name="task_id", type="string", description="Task ID"),
        ]

    async def execute(self, section_id: str, task_id: str) -> str:
        logger.debug(f"Adding task {task_id} to section {section_id}")
        try:
            await self.service.add_task_to_section(section_id, task_id)
        except Exception as e:
            raise self.fail("adding task to section", e) from e

        return f"Task {task_id} added to section {section_id} successfully{status_suffix(self.is_stub)}"
