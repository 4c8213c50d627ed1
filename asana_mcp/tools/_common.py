"""Shared base for the Asana tools."""

from typing import Any, Dict, Optional

from ..base import ExecutionError, MCPTool
from ..services import AsanaService, get_asana_service
from .formatters import extract_error_message


class AsanaTool(MCPTool):
    """
    MCPTool backed by the AsanaService facade.

    Tools built by the registry use the process-wide service; tests can pass
    their own.
    """

    def __init__(self, service: Optional[AsanaService] = None):
        self._service = service

    @property
    def service(self) -> AsanaService:
        return self._service or get_asana_service()

    @property
    def category(self) -> str:
        return "asana"

    @property
    def is_stub(self) -> bool:
        return not self.service.is_real_api_available()

    def fail(self, action: str, error: Exception) -> ExecutionError:
        """Wrap a service error as an ExecutionError with the best message available."""
        return ExecutionError(
            f"Error {action}: {extract_error_message(error)}",
            tool_name=self.name,
            details={"exception": type(error).__name__},
        )


def changed_fields(
    name: Optional[str] = None,
    description: Optional[str] = None,
    due_date: Optional[str] = None,
    assignee: Optional[str] = None,
    completed: Optional[bool] = None,
) -> Dict[str, Any]:
    """Asana field names for the update arguments that were actually given."""
    fields: Dict[str, Any] = {}
    if name:
        fields["name"] = name
    if description:
        fields["notes"] = description
    if due_date:
        fields["due_on"] = due_date
    if assignee:
        fields["assignee"] = assignee
    if completed is not None:
        fields["completed"] = completed
    return fields
