"""Tests for the command line harness."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from coach_agent.cli import interactive_mode, main, run_chat_turn
from coach_agent.client import TurnResult


class TestToolCommand:
    def test_prints_payload(self, capsys) -> None:
        main(["--tool", "calculate_periodization", "--args", '{"totalWeeks": 8, "goal": "hypertrophy"}'])
        payload = json.loads(capsys.readouterr().out)
        assert payload["totalWeeks"] == 8
        assert len(payload["phases"]) == 8

    def test_invalid_json_exits(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--tool", "interpret_effort", "--args", "{not json"])
        assert excinfo.value.code == 1

    def test_non_object_args_exit(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--tool", "interpret_effort", "--args", "[1, 2]"])
        assert excinfo.value.code == 1

    def test_unknown_tool_exits(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--tool", "bench_max"])
        assert excinfo.value.code == 1

    def test_validation_error_exits(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--tool", "log_set", "--args", "{}"])
        assert excinfo.value.code == 1


class TestChat:
    def test_missing_key_exits(self, monkeypatch) -> None:
        from coach_agent import config

        monkeypatch.setattr(config, "ANTHROPIC_API_KEY", "")
        with pytest.raises(SystemExit) as excinfo:
            main(["How should I progress?"])
        assert excinfo.value.code == 1

    def test_unknown_agent_rejected(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--agent", "nutritionist", "hi"])
        assert excinfo.value.code == 2

    @patch("coach_agent.cli.CoachClient")
    def test_single_query_uses_agent_prompt(self, mock_client_cls) -> None:
        from coach_agent.prompts import SUBAGENT_PROMPTS

        mock_client_cls.return_value.run_turn.return_value = TurnResult(turns=1)
        main(["--agent", "form-checker", "squat", "cues"])

        mock_client_cls.assert_called_once_with(
            system_prompt=SUBAGENT_PROMPTS["form-checker"].prompt
        )
        args, _ = mock_client_cls.return_value.run_turn.call_args
        assert args[0] == "squat cues"

    def test_run_chat_turn_summary(self, capsys) -> None:
        client = MagicMock()
        client.run_turn.return_value = TurnResult(
            turns=2, input_tokens=300, output_tokens=80, stop_reason="end_turn"
        )
        run_chat_turn(client, "hello")
        out = capsys.readouterr().out
        assert "User: hello" in out
        assert "Completed in 2 turns (300 input / 80 output tokens)" in out

    def test_run_chat_turn_max_turns(self, capsys) -> None:
        client = MagicMock()
        client.run_turn.return_value = TurnResult(turns=10, stop_reason="max_turns")
        run_chat_turn(client, "hello")
        assert "Ended with: max_turns" in capsys.readouterr().out

    def test_interactive_keeps_history(self, monkeypatch, capsys) -> None:
        lines = iter(["first", "", "second", "exit"])
        monkeypatch.setattr("builtins.input", lambda _prompt: next(lines))
        first_messages = [{"role": "user", "content": "first"}]
        client = MagicMock()
        client.run_turn.side_effect = [
            TurnResult(turns=1, messages=first_messages),
            TurnResult(turns=1),
        ]

        interactive_mode(client)

        assert client.run_turn.call_count == 2
        assert client.run_turn.call_args_list[1].kwargs["history"] == first_messages
        assert "Goodbye! Keep training!" in capsys.readouterr().out

    def test_interactive_eof(self, monkeypatch, capsys) -> None:
        def _eof(_prompt: str) -> str:
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        interactive_mode(MagicMock())
        assert "Goodbye! Keep training!" in capsys.readouterr().out
