"""CommandRouter: authorizes, parses and dispatches chat commands.

No chat-platform import; testable with mock ports.
"""

import asyncio
import logging

from dockerbot.domain.commands import (
    DEFAULT_LOG_LINES,
    HELP_TEXT,
    RESTART_USAGE_TEXT,
    UNAUTHORIZED_TEXT,
    UNKNOWN_COMMAND_TEXT,
    parse_command,
    parse_line_count,
)
from dockerbot.domain.gateway import EngineGateway
from dockerbot.domain.models import Command
from dockerbot.ports.inbound import IncomingMessage
from dockerbot.ports.outbound import NotificationPort, OutgoingReply

logger = logging.getLogger(__name__)


class CommandRouter:
    """Routes one operator's slash commands to the EngineGateway.

    Handles:
    - Authorization against a single allowed user id
    - Command dispatch (/list, /status, /detailed, /start, /stop, /restart, /logs, /help)
    - Exactly one reply per handled command
    """

    def __init__(
        self,
        gateway: EngineGateway,
        notification: NotificationPort,
        allowed_user_id: int,
    ):
        self.gateway = gateway
        self.notification = notification
        self.allowed_user_id = allowed_user_id
        self._lock = asyncio.Lock()

    def is_authorized(self, msg: IncomingMessage) -> bool:
        return msg.author_id == self.allowed_user_id

    async def handle(self, msg: IncomingMessage) -> None:
        """Process one message to completion; messages are handled one at a time."""
        async with self._lock:
            if not self.is_authorized(msg):
                logger.warning(
                    "Unauthorized access attempt (user_id=%s, username=%s)",
                    msg.author_id, msg.author_name,
                )
                await self._reply(msg.chat_id, UNAUTHORIZED_TEXT)
                return

            logger.info("Processing command (user_id=%s, command=%r)", msg.author_id, msg.content)

            command = parse_command(msg.content)
            if command is None:
                return

            await self._reply(msg.chat_id, await self.dispatch(command))

    async def dispatch(self, command: Command) -> str:
        """Run the handler for command and return its reply text."""
        name = command.name

        if name in ("/status", "/list"):
            return await self.gateway.list_containers(detailed=False)

        if name == "/detailed":
            return await self.gateway.list_containers(detailed=True)

        if name == "/start":
            if not command.args:
                return await self.gateway.list_containers(detailed=False)
            return await self.gateway.start(command.args[0])

        if name == "/stop":
            if not command.args:
                return await self.gateway.list_containers(detailed=False)
            return await self.gateway.stop(command.args[0])

        if name == "/restart":
            if not command.args:
                return RESTART_USAGE_TEXT
            return await self.gateway.restart(command.args[0])

        if name == "/logs":
            if not command.args:
                return await self.gateway.list_containers(detailed=False)
            lines = parse_line_count(command.args[1]) if len(command.args) > 1 else DEFAULT_LOG_LINES
            return await self.gateway.logs(command.args[0], lines)

        if name == "/help":
            return HELP_TEXT

        return UNKNOWN_COMMAND_TEXT

    async def _reply(self, chat_id: int, text: str) -> None:
        reply = OutgoingReply(chat_id=chat_id, text=text, markdown=True, disable_preview=True)
        try:
            await self.notification.send(reply)
        except Exception as e:
            logger.error("Failed to send message: %s (chat_id=%s)", e, chat_id)
