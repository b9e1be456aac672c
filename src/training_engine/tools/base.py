"""Abstract base class for all coaching tools."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ValidationError

from training_engine.tools.exceptions import ToolValidationError

FITNESS_SERVER = "fitness-tools"
PLAN_SERVER = "plan-tools"


class CoachTool(ABC):
    """Base class for every deterministic tool the coach can call.

    Each tool wraps one engine operation behind a pydantic argument model
    and returns a JSON-serializable dict. Tools are discovered automatically
    by the ToolRegistry.

    Subclasses must define:
        name: tool name as the agent sees it (e.g. "get_progression")
        description: one-line description shown to the agent
        server: tool server the tool belongs to ("fitness-tools" or "plan-tools")
        args_model: pydantic model validating the raw arguments
        run(): the tool's logic over validated arguments
    """

    name: str
    description: str
    server: str
    args_model: type[BaseModel]

    @property
    def qualified_name(self) -> str:
        """Name under which agent hosts expose the tool."""
        return f"mcp__{self.server}__{self.name}"

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the arguments, camelCase field names."""
        return self.args_model.model_json_schema(by_alias=True)

    def validate(self, arguments: dict[str, Any] | None) -> BaseModel:
        """Parse raw arguments into the tool's argument model.

        Raises:
            ToolValidationError: If the arguments do not match the schema.
        """
        try:
            return self.args_model.model_validate(arguments or {})
        except ValidationError as exc:
            raise ToolValidationError(self.name, exc.errors(include_url=False)) from exc

    @abstractmethod
    def run(self, args: Any) -> dict[str, Any]:
        """Execute the tool on validated arguments and return its payload."""
        ...

    def __call__(self, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.run(self.validate(arguments))
