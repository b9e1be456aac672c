"""Environment-variable-based configuration for the coach agent."""

from __future__ import annotations

import os

ANTHROPIC_API_KEY: str = os.environ.get("ANTHROPIC_API_KEY", "")
COACH_MODEL: str = os.environ.get("COACH_MODEL", "claude-sonnet-4-5")
COACH_MAX_TOKENS: int = int(os.environ.get("COACH_MAX_TOKENS", "2048"))
COACH_MAX_TURNS: int = int(os.environ.get("COACH_MAX_TURNS", "10"))
COACH_LOG_LEVEL: str = os.environ.get("COACH_LOG_LEVEL", "INFO").upper()
COACH_SERVER_NAME: str = os.environ.get("COACH_SERVER_NAME", "myhealth-coach")
