from __future__ import annotations

import pytest

from coach_agent.prompts import (
    ALLOWED_TOOLS,
    FITNESS_COACH_SYSTEM_PROMPT,
    SUBAGENT_PROMPTS,
    agent_names,
    system_prompt_for,
)
from training_engine.registry import ToolRegistry


class TestPrompts:
    def test_coach_prompt_is_default(self) -> None:
        assert system_prompt_for(None) == FITNESS_COACH_SYSTEM_PROMPT
        assert system_prompt_for("coach") == FITNESS_COACH_SYSTEM_PROMPT

    def test_specialist_prompt(self) -> None:
        assert system_prompt_for("plan-creator") == SUBAGENT_PROMPTS["plan-creator"].prompt

    def test_unknown_agent(self) -> None:
        with pytest.raises(KeyError):
            system_prompt_for("nutritionist")

    def test_agent_names(self) -> None:
        assert agent_names() == ["coach", "plan-creator", "form-checker", "progress-analyzer"]

    def test_coach_prompt_mentions_rpe_rules(self) -> None:
        assert "RPE" in FITNESS_COACH_SYSTEM_PROMPT
        assert "kg" in FITNESS_COACH_SYSTEM_PROMPT

    def test_allowed_tools_match_registry(self, registry: ToolRegistry) -> None:
        assert set(ALLOWED_TOOLS) == {tool.qualified_name for tool in registry.get_all_tools()}
