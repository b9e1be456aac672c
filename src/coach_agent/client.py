"""High-level coach client facade over the Anthropic Messages API.

A conversational turn is a loop: send the conversation, run any tool calls
the model asks for through the local ToolRegistry, feed the results back,
and repeat until the model answers without tools or the turn limit is hit.
All network calls go through ``_safe_call`` for retry with backoff.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import anthropic

from coach_agent import config
from coach_agent.exceptions import CoachAPIError, CoachConfigError, CoachRateLimitError
from coach_agent.prompts import ALLOWED_TOOLS, FITNESS_COACH_SYSTEM_PROMPT
from training_engine.registry import ToolRegistry, default_registry
from training_engine.tools.exceptions import CoachToolError

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2


@dataclass
class TurnResult:
    """Outcome of one conversational turn."""

    texts: list[str] = field(default_factory=list)
    tool_calls: list[str] = field(default_factory=list)
    turns: int = 0
    input_tokens: int = 0
    output_tokens: int = 0
    stop_reason: str | None = None
    messages: list[dict[str, Any]] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.texts)


class CoachClient:
    """Facade for running coaching conversations against Claude."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        max_turns: int | None = None,
        system_prompt: str = FITNESS_COACH_SYSTEM_PROMPT,
        registry: ToolRegistry | None = None,
    ) -> None:
        key = api_key if api_key is not None else config.ANTHROPIC_API_KEY
        if not key:
            raise CoachConfigError("ANTHROPIC_API_KEY is not set")
        self._setup(
            anthropic.Anthropic(api_key=key),
            model=model,
            max_tokens=max_tokens,
            max_turns=max_turns,
            system_prompt=system_prompt,
            registry=registry,
        )

    @classmethod
    def from_anthropic(
        cls, client: anthropic.Anthropic, **kwargs: Any
    ) -> "CoachClient":
        """Construct around an existing Anthropic client (tests, custom transports)."""
        obj = cls.__new__(cls)
        obj._setup(client, **kwargs)
        return obj

    def _setup(
        self,
        client: Any,
        model: str | None = None,
        max_tokens: int | None = None,
        max_turns: int | None = None,
        system_prompt: str = FITNESS_COACH_SYSTEM_PROMPT,
        registry: ToolRegistry | None = None,
    ) -> None:
        self._client = client
        self._model = model or config.COACH_MODEL
        self._max_tokens = max_tokens or config.COACH_MAX_TOKENS
        self._max_turns = max_turns or config.COACH_MAX_TURNS
        self._system_prompt = system_prompt
        self._registry = registry or default_registry()

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    def tool_definitions(self) -> list[dict[str, Any]]:
        """Tool specs in Messages API form, limited to the allowed tools."""
        return [
            {
                "name": tool.qualified_name,
                "description": tool.description,
                "input_schema": tool.input_schema(),
            }
            for tool in self._registry.get_all_tools()
            if tool.qualified_name in ALLOWED_TOOLS
        ]

    def _run_tool(self, block: Any) -> dict[str, Any]:
        """Execute one tool_use block and build its tool_result block."""
        try:
            payload = self._registry.call(block.name, dict(block.input or {}))
        except CoachToolError as exc:
            logger.warning("Tool %s failed: %s", block.name, exc)
            return {
                "type": "tool_result",
                "tool_use_id": block.id,
                "content": str(exc),
                "is_error": True,
            }
        return {
            "type": "tool_result",
            "tool_use_id": block.id,
            "content": json.dumps(payload, indent=2),
        }

    # ------------------------------------------------------------------
    # Conversation
    # ------------------------------------------------------------------

    def run_turn(
        self,
        prompt: str,
        on_text: Optional[Callable[[str], None]] = None,
        history: list[dict[str, Any]] | None = None,
    ) -> TurnResult:
        """Send a user prompt and resolve tool calls until the model answers.

        Args:
            prompt: The user's message.
            on_text: Called with each assistant text block as it arrives.
            history: Earlier messages of the conversation, oldest first.

        Returns:
            TurnResult with the assistant text, usage and full message list.
        """
        result = TurnResult(messages=list(history or []))
        result.messages.append({"role": "user", "content": prompt})
        tools = self.tool_definitions()

        while result.turns < self._max_turns:
            response = self._safe_call(
                self._client.messages.create,
                model=self._model,
                max_tokens=self._max_tokens,
                system=self._system_prompt,
                tools=tools,
                messages=list(result.messages),
            )
            result.turns += 1
            result.stop_reason = response.stop_reason
            usage = getattr(response, "usage", None)
            result.input_tokens += getattr(usage, "input_tokens", 0) or 0
            result.output_tokens += getattr(usage, "output_tokens", 0) or 0

            content: list[dict[str, Any]] = []
            tool_results: list[dict[str, Any]] = []
            for block in response.content:
                if block.type == "text":
                    content.append({"type": "text", "text": block.text})
                    result.texts.append(block.text)
                    if on_text is not None:
                        on_text(block.text)
                elif block.type == "tool_use":
                    content.append(
                        {
                            "type": "tool_use",
                            "id": block.id,
                            "name": block.name,
                            "input": block.input,
                        }
                    )
                    result.tool_calls.append(block.name)
                    tool_results.append(self._run_tool(block))
            result.messages.append({"role": "assistant", "content": content})
            # Every tool_use block must be answered, or later requests are rejected.
            if tool_results:
                result.messages.append({"role": "user", "content": tool_results})

            if response.stop_reason != "tool_use" or not tool_results:
                break
        else:
            logger.warning("Stopped after %d turns without a final answer", self._max_turns)
            result.stop_reason = "max_turns"

        logger.info(
            "Turn complete: %d turns, %d input / %d output tokens",
            result.turns,
            result.input_tokens,
            result.output_tokens,
        )
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _safe_call(self, fn: Callable, *args: Any, **kwargs: Any) -> Any:
        """Call *fn* with retry + exponential backoff on 429."""
        last_exc: Exception | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                last_exc = exc
                status = getattr(exc, "status_code", None) or getattr(exc, "status", None)
                if status == 429:
                    wait = _BASE_BACKOFF_S * (2 ** attempt)
                    logger.warning(
                        "Rate limited (attempt %d/%d), retrying in %ds",
                        attempt + 1,
                        _MAX_RETRIES,
                        wait,
                    )
                    time.sleep(wait)
                    continue
                raise CoachAPIError(str(exc), status_code=status) from exc

        raise CoachRateLimitError(f"Rate limited after {_MAX_RETRIES} retries: {last_exc}")
