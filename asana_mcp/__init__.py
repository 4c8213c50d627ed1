"""
Asana MCP (Model Context Protocol) Layer

Exposes Asana task management as MCP tools.
All tools are auto-discovered via registry.py
"""

from .registry import get_all_tools, get_tool
from .base import MCPTool

__version__ = "1.0.0"

__all__ = ["get_all_tools", "get_tool", "MCPTool"]
