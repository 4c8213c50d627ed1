"""
Asana Project Tools
"""

import logging
from typing import List, Optional

from ..base import ToolParameter
from ._common import AsanaTool
from .formatters import record_gid, records, render_list, status_suffix, truncate

logger = logging.getLogger(__name__)


class CreateProjectTool(AsanaTool):
    """Create a project in the given (or configured default) workspace."""

    @property
    def name(self) -> str:
        return "create-project"

    @property
    def description(self) -> str:
        return "Create a new Asana project"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(name="name", type="string", description="Project name"),
            ToolParameter(name="notes", type="string", description="Project notes", required=False),
            ToolParameter(name="color", type="string", description="Project color", required=False),
            ToolParameter(name="is_public", type="boolean", description="Whether the project is public", required=False),
            ToolParameter(name="workspace_id", type="string", description="Workspace ID", required=False),
        ]

    async def execute(
        self,
        name: str,
        notes: Optional[str] = None,
        color: Optional[str] = None,
        is_public: Optional[bool] = None,
        workspace_id: Optional[str] = None,
    ) -> str:
        logger.debug(f"Creating Asana project: {name} (workspace={workspace_id or 'default'})")
        try:
            result = await self.service.create_project(name, notes, color, is_public, workspace_id)
        except Exception as e:
            raise self.fail("creating project", e) from e

        gid = record_gid(result)
        logger.debug(f"Project created with ID: {gid}")
        return f'Project "{name}" created successfully with ID: {gid}{status_suffix(self.is_stub)}'


class ListProjectsTool(AsanaTool):

    @property
    def name(self) -> str:
        return "list-projects"

    @property
    def description(self) -> str:
        return "List Asana projects"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [
            ToolParameter(
                name="workspace_id",
                type="string",
                description="Workspace ID to filter projects",
                required=False,
            ),
        ]

    async def execute(self, workspace_id: Optional[str] = None) -> str:
        logger.debug(f"Listing projects{f' in workspace {workspace_id}' if workspace_id else ''}")
        try:
            result = await self.service.list_projects(workspace_id)
        except Exception as e:
            raise self.fail("listing projects", e) from e

        projects = records(result)
        logger.debug(f"Found {len(projects)} projects")
        rows = [
            [
                project.get("gid", ""),
                project.get("name", ""),
                truncate(project.get("notes")) or "No notes",
            ]
            for project in projects
        ]
        return render_list(
            "Projects",
            ["ID", "Name", "Notes"],
            rows,
            empty_label="projects",
            stub=self.is_stub,
        )


class DeleteProjectTool(AsanaTool):

    @property
    def name(self) -> str:
        return "delete-project"

    @property
    def description(self) -> str:
        return "Delete an Asana project"

    @property
    def parameters(self) -> List[ToolParameter]:
        return [ToolParameter(name="project_id", type="string", description="Project ID to delete")]

    async def execute(self, project_id: str) -> str:
        logger.debug(f"Deleting project: {project_id}")
        try:
            await self.service.delete_project(project_id)
        except Exception as e:
            raise self.fail("deleting project", e) from e

        return f"Project {project_id} deleted successfully{status_suffix(self.is_stub)}"
