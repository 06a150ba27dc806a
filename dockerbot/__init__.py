"""dockerbot: manage Docker containers from a Discord chat."""

from dockerbot.config import __version__, AppConfig, ConfigError

__all__ = [
    "__version__",
    "AppConfig",
    "ConfigError",
]
