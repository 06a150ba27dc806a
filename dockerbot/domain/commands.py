"""Slash command parsing and fixed reply texts.

Pure Python, no framework dependencies.
"""

import re
from typing import Optional

from dockerbot.domain.models import Command

DEFAULT_LOG_LINES = 10
MAX_LOG_LINES = 1000

_INT_RE = re.compile(r"[+-]?[0-9]+\Z")

UNAUTHORIZED_TEXT = "❌ Unauthorized access"
UNKNOWN_COMMAND_TEXT = "❌ Unknown command. Use /help to see available commands."
RESTART_USAGE_TEXT = "❌ Usage: /restart <container_name_or_id>"

HELP_TEXT = """🤖 *Available Commands:*

• */list* - List all containers
• */detailed* - List all containers with extra details
• */start* <name> - Start a container
• */stop* <name> - Stop a container
• */restart* <name> - Restart a container
• */logs* <name> [lines] - Show container logs (default: 10 lines, max: 1000)
• */help* - Show this help message
"""


def parse_command(text: str) -> Optional[Command]:
    """Split text on runs of whitespace; None when there are no tokens."""
    tokens = text.split()
    if not tokens:
        return None
    return Command(name=tokens[0], args=tuple(tokens[1:]))


def parse_line_count(raw: str) -> int:
    """Parse the optional /logs line count.

    Values that are not integers in 1..MAX_LOG_LINES fall back to
    DEFAULT_LOG_LINES without telling the user.
    """
    if not _INT_RE.match(raw):
        return DEFAULT_LOG_LINES
    lines = int(raw)
    if 0 < lines <= MAX_LOG_LINES:
        return lines
    return DEFAULT_LOG_LINES
