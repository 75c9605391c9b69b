"""
ClickUp MCP - ClickUp task tools for MCP clients

- list_tasks(list_id) returns the tasks of a ClickUp list
- create_task(list_id, name, ...) creates a task and returns it
"""

from .server import main

__all__ = ["main"]
