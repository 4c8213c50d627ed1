"""
MCP Tool Base Classes

Provides common wrapper, validation, and error handling for all Asana tools.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

# JSON schema type -> accepted Python types
_TYPE_CHECKS = {
    "string": (str,),
    "boolean": (bool,),
    "integer": (int,),
    "array": (list, tuple),
    "object": (dict,),
}


@dataclass
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None
    items_type: Optional[str] = None


@dataclass
class ToolDefinition:
    """Complete definition of an MCP tool."""
    name: str
    description: str
    parameters: List[ToolParameter] = field(default_factory=list)
    handler: Optional[Callable] = None
    category: str = "general"


class MCPToolError(Exception):
    """Base exception for MCP tool errors."""
    def __init__(self, message: str, tool_name: str = None, details: Dict = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(MCPToolError):
    """Raised when tool input validation fails."""
    pass


class ExecutionError(MCPToolError):
    """Raised when tool execution fails."""
    pass


def _matches_type(value: Any, type_name: str) -> bool:
    expected = _TYPE_CHECKS.get(type_name)
    if expected is None:
        return True
    # bool is a subclass of int; keep them apart
    if type_name == "integer" and isinstance(value, bool):
        return False
    return isinstance(value, expected)


class MCPTool(ABC):
    """
    Abstract base class for MCP tools.

    All tools must inherit from this class and implement:
    - name: Tool identifier
    - description: What the tool does
    - parameters: List of ToolParameter definitions
    - execute(): The actual tool logic
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for the tool."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    def parameters(self) -> List[ToolParameter]:
        """List of parameters the tool accepts."""
        return []

    @property
    def category(self) -> str:
        """Category for grouping tools."""
        return "general"

    def validate(self, **kwargs) -> Dict[str, Any]:
        """
        Validate input parameters against the declared schema.

        Returns validated/normalized parameters. Keys that are not declared
        parameters are dropped. Raises ValidationError if validation fails.
        """
        validated = {}

        for param in self.parameters:
            value = kwargs.get(param.name)

            if value is None:
                if param.required:
                    raise ValidationError(
                        f"Missing required parameter: {param.name}",
                        tool_name=self.name
                    )
                validated[param.name] = param.default
                continue

            if not _matches_type(value, param.type):
                raise ValidationError(
                    f"Parameter '{param.name}' must be of type {param.type}",
                    tool_name=self.name,
                    details={"parameter": param.name, "value": value}
                )

            if param.type == "array" and param.items_type:
                for item in value:
                    if not _matches_type(item, param.items_type):
                        raise ValidationError(
                            f"Items of '{param.name}' must be of type {param.items_type}",
                            tool_name=self.name,
                            details={"parameter": param.name, "value": value}
                        )
                value = list(value)

            validated[param.name] = value

        return validated

    @abstractmethod
    async def execute(self, **kwargs) -> Any:
        """
        Execute the tool with given parameters.
        This method should contain the actual tool logic.
        """
        pass

    async def run(self, **kwargs) -> Dict[str, Any]:
        """
        Public entry point: validate and execute.
        Returns standardized response format.
        """
        try:
            validated = self.validate(**kwargs)
            result = await self.execute(**validated)
            return {
                "success": True,
                "tool": self.name,
                "result": result
            }
        except ValidationError as e:
            logger.error(f"Validation error in {self.name}: {e.message}")
            return {
                "success": False,
                "tool": self.name,
                "error": e.message,
                "error_type": "validation"
            }
        except ExecutionError as e:
            logger.error(f"Execution error in {self.name}: {e.message}")
            return {
                "success": False,
                "tool": self.name,
                "error": e.message,
                "error_type": "execution"
            }
        except Exception as e:
            logger.exception(f"Unexpected error in {self.name}")
            return {
                "success": False,
                "tool": self.name,
                "error": str(e),
                "error_type": "unexpected"
            }

    def to_definition(self) -> ToolDefinition:
        """Convert tool to ToolDefinition for registry."""
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
            handler=self.run,
            category=self.category
        )


def build_input_schema(parameters: List[ToolParameter]) -> Dict:
    """Build a JSON schema object from a list of ToolParameter definitions."""
    properties: Dict[str, Dict] = {}
    required: List[str] = []

    for param in parameters:
        prop: Dict[str, Any] = {
            "type": param.type,
            "description": param.description
        }
        if param.type == "array":
            prop["items"] = {"type": param.items_type or "string"}
        if param.default is not None:
            prop["default"] = param.default

        properties[param.name] = prop
        if param.required:
            required.append(param.name)

    return {
        "type": "object",
        "properties": properties,
        "required": required
    }
