"""
MCP Tool Registry

Single Source of Truth (SSOT) for tool discovery and collection.
Automatically discovers and registers all tools from asana_mcp/tools/.
"""

import importlib
import inspect
import logging
import pkgutil
from pathlib import Path
from typing import Dict, List, Optional

from .base import MCPTool, ToolDefinition, build_input_schema

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = f"{__package__}.tools"

# Global registry
_tool_registry: Dict[str, ToolDefinition] = {}
_initialized: bool = False


def _discover_tools() -> None:
    """
    Discover and register all tools from asana_mcp/tools/.
    This is the ONLY place where tools are collected.
    """
    global _tool_registry, _initialized

    if _initialized:
        return

    tools_path = Path(__file__).parent / "tools"

    if not tools_path.exists():
        logger.warning(f"Tools directory not found: {tools_path}")
        _initialized = True
        return

    # Import all modules in asana_mcp/tools/
    for _, module_name, _ in pkgutil.iter_modules([str(tools_path)]):
        if module_name.startswith("_"):
            continue

        try:
            full_module_name = f"{TOOLS_PACKAGE}.{module_name}"
            module = importlib.import_module(full_module_name)
            logger.debug(f"Loaded tool module: {full_module_name}")

            # Find all concrete MCPTool subclasses defined in the module
            for name, obj in inspect.getmembers(module, inspect.isclass):
                if (
                    issubclass(obj, MCPTool)
                    and obj.__module__ == module.__name__
                    and not inspect.isabstract(obj)
                ):
                    try:
                        instance = obj()
                        definition = instance.to_definition()
                        _tool_registry[definition.name] = definition
                        logger.debug(f"Registered tool: {definition.name} ({module_name})")
                    except Exception as e:
                        logger.error(f"Failed to instantiate tool {name}: {e}")

        except Exception as e:
            logger.error(f"Failed to load tool module {module_name}: {e}")

    _initialized = True
    logger.info(f"Tool discovery complete. Total tools: {len(_tool_registry)}")


def get_all_tools() -> Dict[str, ToolDefinition]:
    """
    Get all registered tools.
    This is the public API for accessing tools.
    """
    _discover_tools()
    return _tool_registry.copy()


def get_tool(name: str) -> Optional[ToolDefinition]:
    """
    Get a specific tool by name.
    Returns None if tool not found.
    """
    _discover_tools()
    return _tool_registry.get(name)


def get_tools_by_category(category: str) -> Dict[str, ToolDefinition]:
    """Get all tools in a specific category."""
    _discover_tools()
    return {
        name: tool
        for name, tool in _tool_registry.items()
        if tool.category == category
    }


def list_tool_names() -> List[str]:
    """Get list of all registered tool names, sorted."""
    _discover_tools()
    return sorted(_tool_registry.keys())


def get_input_schemas() -> List[Dict]:
    """
    Get all tools as {name, description, inputSchema} dicts.
    Used by the server to answer MCP list_tools requests.
    """
    _discover_tools()
    return [
        {
            "name": name,
            "description": definition.description,
            "inputSchema": build_input_schema(definition.parameters),
        }
        for name, definition in sorted(_tool_registry.items())
    ]


async def execute_tool(tool_name: str, /, **kwargs) -> Dict:
    """
    Execute a tool by name with given arguments.

    tool_name is positional-only so tool arguments may use any key,
    including "name". Returns standardized response format.
    """
    tool = get_tool(tool_name)

    if tool is None:
        return {
            "success": False,
            "tool": tool_name,
            "error": f"Tool not found: {tool_name}",
            "error_type": "not_found"
        }

    return await tool.handler(**kwargs)


def reset_registry() -> None:
    """Reset the registry (mainly for testing)."""
    global _tool_registry, _initialized
    _tool_registry = {}
    _initialized = False
