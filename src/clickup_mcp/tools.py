"""
Tool catalog and argument validation.

Tools:
- list_tasks: List tasks from a ClickUp list
- create_task: Create a new task in a ClickUp list

Validation is structural only: required fields present, primitive types
correct. Violations raise McpError(INVALID_PARAMS) before any remote call.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, ErrorData, Tool

LIST_TASKS = "list_tasks"
CREATE_TASK = "create_task"

TOOLS: tuple[Tool, ...] = (
    Tool(
        name=LIST_TASKS,
        description="List tasks from a ClickUp list",
        inputSchema={
            "type": "object",
            "properties": {
                "list_id": {
                    "type": "string",
                    "description": "The ID of the ClickUp list",
                },
            },
            "required": ["list_id"],
        },
    ),
    Tool(
        name=CREATE_TASK,
        description="Create a new task in a ClickUp list",
        inputSchema={
            "type": "object",
            "properties": {
                "list_id": {
                    "type": "string",
                    "description": "The ID of the ClickUp list to add the task to",
                },
                "name": {
                    "type": "string",
                    "description": "The name of the new task",
                },
                "description": {
                    "type": "string",
                    "description": "Optional description for the task",
                },
                "assignees": {
                    "type": "array",
                    "items": {"type": "integer"},
                    "description": "Optional array of user IDs to assign the task to",
                },
            },
            "required": ["list_id", "name"],
        },
    ),
)


def list_tools() -> list[Tool]:
    """Return the tool catalog, copied so callers cannot mutate it."""
    return [tool.model_copy(deep=True) for tool in TOOLS]


def _invalid(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


def _is_int(value: Any) -> bool:
    # bool is an int subclass but not a user ID
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ListTasksArgs:
    list_id: str


@dataclass(frozen=True)
class CreateTaskArgs:
    list_id: str
    name: str
    description: str | None = None
    assignees: list[int] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Build the ClickUp request body, omitting unset optional fields."""
        payload: dict[str, Any] = {"name": self.name}
        if self.description:
            payload["description"] = self.description
        if self.assignees is not None:
            payload["assignees"] = list(self.assignees)
        return payload


def validate_list_tasks(arguments: Mapping[str, Any]) -> ListTasksArgs:
    """Validate list_tasks arguments."""
    list_id = arguments.get("list_id")
    if not isinstance(list_id, str):
        raise _invalid("list_id (string) is required")
    return ListTasksArgs(list_id=list_id)


def validate_create_task(arguments: Mapping[str, Any]) -> CreateTaskArgs:
    """
    Validate create_task arguments.

    Args:
        arguments: Raw tool arguments

    Returns:
        Typed arguments for the remote call

    Raises:
        McpError: INVALID_PARAMS naming the offending field
    """
    list_id = arguments.get("list_id")
    name = arguments.get("name")
    description = arguments.get("description")
    assignees = arguments.get("assignees")

    if not isinstance(list_id, str) or not list_id:
        raise _invalid("list_id (string) is required")
    if not isinstance(name, str) or not name:
        raise _invalid("name (string) is required")
    if "description" in arguments and not isinstance(description, str):
        raise _invalid("description must be a string if provided")
    if "assignees" in arguments and (
        not isinstance(assignees, list) or not all(_is_int(a) for a in assignees)
    ):
        raise _invalid("assignees must be an array of integers if provided")

    return CreateTaskArgs(
        list_id=list_id,
        name=name,
        description=description,
        assignees=assignees,
    )
