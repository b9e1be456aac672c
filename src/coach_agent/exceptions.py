"""Custom exception hierarchy for the coach agent boundary."""

from __future__ import annotations


class CoachAgentError(Exception):
    """Base exception for all coach_agent errors."""


class CoachConfigError(CoachAgentError):
    """Required configuration is missing (e.g. no API key)."""


class CoachAPIError(CoachAgentError):
    """A Messages API call returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CoachRateLimitError(CoachAPIError):
    """HTTP 429 — too many requests, still failing after retries."""

    def __init__(self, message: str = "Rate limited by the Anthropic API") -> None:
        super().__init__(message, status_code=429)
