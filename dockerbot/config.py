"""Configuration loaded from the environment."""

__version__ = "0.1.0"

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(Exception):
    """Raised when a required setting is missing or malformed."""


@dataclass
class AppConfig:
    """Typed configuration for the bot process."""

    token: str = ""
    user_id: int = 0
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Create AppConfig from environment variables.

        TOKEN and USER_ID are required; USER_ID must be an integer.
        """
        env = os.environ if environ is None else environ

        token = env.get("TOKEN", "").strip()
        if not token:
            raise ConfigError("TOKEN environment variable is required")

        raw_user_id = env.get("USER_ID", "").strip()
        if not raw_user_id:
            raise ConfigError("USER_ID environment variable is required")
        try:
            user_id = int(raw_user_id)
        except ValueError:
            raise ConfigError(f"Invalid USER_ID: {raw_user_id!r}") from None

        log_level = env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}")

        return cls(token=token, user_id=user_id, log_level=log_level)
