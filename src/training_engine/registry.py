"""Tool registry with auto-discovery of CoachTool subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from typing import Any

from training_engine.tools.base import CoachTool
from training_engine.tools.exceptions import UnknownToolError

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Discovers and manages all CoachTool implementations.

    Auto-discovers tools by scanning the tools/ package for concrete
    subclasses of CoachTool. A new tool is added by defining it in a module
    under tools/.
    """

    def __init__(self) -> None:
        self._tools: dict[str, CoachTool] = {}

    def discover_tools(self) -> None:
        """Scan the tools package and register all CoachTool subclasses."""
        import training_engine.tools as tools_pkg

        # tools/ has no __init__, so scan its namespace path rather than __file__.
        for _, module_name, _ in pkgutil.walk_packages(
            list(tools_pkg.__path__), prefix=tools_pkg.__name__ + "."
        ):
            module = importlib.import_module(module_name)
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, CoachTool)
                    and attr is not CoachTool
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, tool: CoachTool) -> None:
        """Register a tool instance by its name."""
        self._tools[tool.name] = tool

    def get(self, name: str) -> CoachTool | None:
        """Retrieve a tool by its plain or qualified name."""
        if name.startswith("mcp__"):
            name = name.rsplit("__", 1)[-1]
        return self._tools.get(name)

    def get_all_tools(self) -> list[CoachTool]:
        """Return all registered tools grouped by server, then by name."""
        return sorted(self._tools.values(), key=lambda t: (t.server, t.name))

    @property
    def tool_names(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def call(self, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        """Validate arguments and run a tool.

        Raises:
            UnknownToolError: If no tool is registered under ``name``.
            ToolValidationError: If the arguments fail validation.
        """
        tool = self.get(name)
        if tool is None:
            raise UnknownToolError(name)
        start = time.perf_counter()
        result = tool(arguments)
        logger.info(
            "Tool %s completed in %.1f ms", tool.qualified_name, (time.perf_counter() - start) * 1000
        )
        return result


def default_registry() -> ToolRegistry:
    """Registry with every built-in tool discovered."""
    registry = ToolRegistry()
    registry.discover_tools()
    return registry
