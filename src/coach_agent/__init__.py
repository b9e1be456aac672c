"""Coach agent — Anthropic chat harness, MCP server and CLI."""

from coach_agent.client import CoachClient, TurnResult
from coach_agent.exceptions import (
    CoachAgentError,
    CoachAPIError,
    CoachConfigError,
    CoachRateLimitError,
)

__all__ = [
    "CoachClient",
    "TurnResult",
    "CoachAgentError",
    "CoachAPIError",
    "CoachConfigError",
    "CoachRateLimitError",
]
