"""myhealth-coach command line harness.

Usage:
    myhealth-coach "Bench press 80kg 8 reps, felt pretty good"   # single query
    myhealth-coach                                              # interactive mode
    myhealth-coach --agent plan-creator "4 day plan for strength"
    myhealth-coach --serve [--group plan-tools]                 # MCP stdio server
    myhealth-coach --tool calculate_periodization --args '{"totalWeeks": 8, "goal": "strength"}'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from coach_agent import config
from coach_agent.client import CoachClient, TurnResult
from coach_agent.exceptions import CoachAgentError
from coach_agent.prompts import agent_names, system_prompt_for
from training_engine.registry import default_registry
from training_engine.serialization import to_json_string
from training_engine.tools.base import FITNESS_SERVER, PLAN_SERVER
from training_engine.tools.exceptions import CoachToolError

logger = logging.getLogger(__name__)

_RULE = "─" * 50


def _print_reply(text: str) -> None:
    print(f"\nCoach: {text}")


def run_chat_turn(
    client: CoachClient, prompt: str, history: list[dict[str, Any]] | None = None
) -> TurnResult:
    """Run one conversational turn and print it to the console."""
    print(f"\nUser: {prompt}\n")
    print(_RULE)
    result = client.run_turn(prompt, on_text=_print_reply, history=history)
    if result.stop_reason == "max_turns":
        print(f"\nEnded with: max_turns ({result.turns} turns)")
    else:
        print(
            f"\nCompleted in {result.turns} turns "
            f"({result.input_tokens} input / {result.output_tokens} output tokens)"
        )
    print("\n" + _RULE)
    return result


def interactive_mode(client: CoachClient) -> None:
    """Read prompts from stdin until 'exit' or end of input."""
    print("\nmyHealth Fitness Coach - Interactive Mode")
    print("Type your message or 'exit' to quit.\n")

    history: list[dict[str, Any]] = []
    while True:
        try:
            line = input("You: ").strip()
        except (EOFError, KeyboardInterrupt):
            line = "exit"
        if line.lower() == "exit":
            print("\nGoodbye! Keep training!\n")
            return
        if line:
            history = run_chat_turn(client, line, history).messages


def run_tool_command(name: str, raw_args: str) -> None:
    """Call one tool directly and print its JSON payload."""
    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as exc:
        raise CoachToolError(f"--args is not valid JSON: {exc}") from exc
    if not isinstance(arguments, dict):
        raise CoachToolError("--args must be a JSON object")
    print(to_json_string(default_registry().call(name, arguments)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="myhealth-coach", description="myHealth fitness coach"
    )
    parser.add_argument("prompt", nargs="*", help="Message for a single query")
    parser.add_argument(
        "--agent",
        choices=agent_names(),
        default="coach",
        help="Coach persona to run (default: coach)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--serve", action="store_true", help="Run the MCP stdio tool server")
    mode.add_argument("--tool", metavar="NAME", help="Run one tool and print its result")
    parser.add_argument(
        "--args", default="{}", help="JSON object of arguments for --tool"
    )
    parser.add_argument(
        "--group",
        choices=[FITNESS_SERVER, PLAN_SERVER],
        help="With --serve, expose only this tool group",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.COACH_LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.serve:
            from coach_agent.mcp_server import serve

            serve(args.group)
            return

        if args.tool:
            run_tool_command(args.tool, args.args)
            return

        client = CoachClient(system_prompt=system_prompt_for(args.agent))
        print("\nmyHealth Fitness Coach\n")
        if args.prompt:
            run_chat_turn(client, " ".join(args.prompt))
        else:
            interactive_mode(client)
    except (CoachAgentError, CoachToolError) as exc:
        logger.error("Fatal error: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
