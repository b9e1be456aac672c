"""Custom exception hierarchy for the coaching tools."""

from __future__ import annotations

from typing import Any


class CoachToolError(Exception):
    """Base exception for all coaching tool errors."""


class ToolValidationError(CoachToolError):
    """Tool arguments failed schema validation."""

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]) -> None:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in errors
        )
        super().__init__(f"Invalid arguments for {tool_name}: {details}")
        self.tool_name = tool_name
        self.errors = errors


class UnknownToolError(CoachToolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name
