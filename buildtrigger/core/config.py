"""
Application configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

from buildtrigger.models.policy import PollPolicy


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Command line flags take precedence over every value here.
    """

    # Trigger endpoint
    trigger_token: str | None = None
    trigger_url: str | None = None

    # User's private token for the builds API
    gitlab_private_token: str | None = None

    # Polling policy
    poll_interval: float = 10.0
    discovery_attempts: int = 5
    discovery_delay: float = 2.0
    max_wait: float | None = None

    request_timeout: float = 30.0
    log_level: str = "INFO"

    @field_validator("trigger_token", "trigger_url", "gitlab_private_token", mode="before")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        cleaned = str(value).strip()
        return cleaned or None

    @field_validator("max_wait", mode="before")
    @classmethod
    def _zero_means_unbounded(cls, value):
        if value in (None, ""):
            return None
        if float(value) <= 0:
            return None
        return value

    @field_validator("discovery_attempts")
    @classmethod
    def _at_least_one_attempt(cls, value: int) -> int:
        if value < 1:
            raise ValueError("discovery_attempts must be at least 1")
        return value

    @field_validator("poll_interval", "discovery_delay", "request_timeout")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("intervals must not be negative")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    def poll_policy(self) -> PollPolicy:
        """Build the discovery and polling policy from these settings."""
        return PollPolicy(
            discovery_attempts=self.discovery_attempts,
            discovery_delay=self.discovery_delay,
            poll_interval=self.poll_interval,
            max_wait=self.max_wait,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
