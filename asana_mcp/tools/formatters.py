"""
Formatting utilities for Asana tool output.

Lists are rendered as markdown tables, single-object operations as one
status sentence.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence

STUB_HEADING_SUFFIX = " (Stub)"
STUB_STATUS_SUFFIX = " (stub implementation)"


def extract_error_message(error: BaseException) -> str:
    """
    Best available message for an error raised by the service layer.

    Order: the exception's own message, then the first entry of an Asana
    style ``errors`` array (on the exception or on its response body), then
    "Unknown error".
    """
    message = str(getattr(error, "message", None) or error)
    if message.strip():
        return message.strip()

    candidates: List[Any] = [getattr(error, "errors", None)]
    response = getattr(error, "response", None)
    if response is not None:
        try:
            body = response.json()
        except Exception:
            body = None
        if isinstance(body, dict):
            candidates.append(body.get("errors"))

    for errors in candidates:
        if errors and isinstance(errors[0], dict) and errors[0].get("message"):
            return errors[0]["message"]

    return "Unknown error"


def completed_mark(completed: Any) -> str:
    return "✓" if completed else "✗"


def truncate(text: Optional[str], limit: int = 50) -> str:
    if not text:
        return ""
    return text[:limit] + ("..." if len(text) > limit else "")


def _cell(value: Any) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


def markdown_table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_cell(v) for v in row) + " |")
    return "\n".join(lines) + "\n"


def render_list(
    title: str,
    headers: Sequence[str],
    rows: List[Sequence[Any]],
    empty_label: str,
    stub: bool = False,
) -> str:
    """
    Render a titled markdown list.

    An empty result renders "No <empty_label> found." instead of a table.
    """
    heading = f"## {title}{STUB_HEADING_SUFFIX if stub else ''}\n\n"
    if not rows:
        return heading + f"No {empty_label} found."
    return heading + markdown_table(headers, rows)


def status_suffix(stub: bool) -> str:
    return STUB_STATUS_SUFFIX if stub else ""


def records(result: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """List payload of a {"data": [...]} envelope, tolerating missing data."""
    if not result:
        return []
    data = result.get("data")
    return data if isinstance(data, list) else []


def record_gid(result: Optional[Dict[str, Any]]) -> str:
    """gid of a {"data": {...}} envelope, or "" if absent."""
    if not result:
        return ""
    data = result.get("data")
    if isinstance(data, dict):
        return str(data.get("gid", ""))
    return ""
