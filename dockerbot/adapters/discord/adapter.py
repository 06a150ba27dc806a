"""Discord adapter: bridges discord.Client to the CommandRouter.

DockerBotClient converts Discord messages to IncomingMessage and hands
them to the router; DiscordNotificationAdapter delivers the router's
replies back to the originating channel.
"""

import logging
import re
from typing import List, Optional

import discord

from dockerbot.domain.gateway import EngineGateway
from dockerbot.domain.router import CommandRouter
from dockerbot.ports.inbound import IncomingMessage
from dockerbot.ports.outbound import OutgoingReply

logger = logging.getLogger(__name__)

# Discord rejects messages longer than this.
DISCORD_MESSAGE_LIMIT = 2000

_HANDLED_MESSAGE_TYPES = (discord.MessageType.default, discord.MessageType.reply)

CODE_FENCE = "```"


class DiscordNotificationAdapter:
    """NotificationPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def send(self, reply: OutgoingReply) -> None:
        channel = self._client.get_channel(reply.chat_id)
        if channel is None:
            channel = await self._client.fetch_channel(reply.chat_id)

        text = reply.text if reply.markdown else discord.utils.escape_markdown(reply.text)
        for chunk in split_message(text):
            await channel.send(chunk, suppress_embeds=reply.disable_preview)


def split_message(text: str, limit: int = DISCORD_MESSAGE_LIMIT) -> List[str]:
    """Split a message into chunks that fit Discord's character limit.

    Cuts prefer line boundaries. A chunk that ends inside a ``` block is
    closed there and the next chunk reopens it, so each one renders alone.
    """
    if len(text) <= limit:
        return [text]

    # Room for a reopening "```\n" and a closing "\n```".
    budget = limit - 2 * (len(CODE_FENCE) + 1)
    chunks = []
    in_fence = False
    while text:
        prefix = CODE_FENCE + "\n" if in_fence else ""
        if len(prefix) + len(text) <= limit:
            chunks.append(prefix + text)
            break

        cut = text.rfind("\n", 0, budget) + 1
        if cut == 0:
            cut = budget
        piece, text = text[:cut], text[cut:]
        if piece.count(CODE_FENCE) % 2:
            in_fence = not in_fence

        chunk = prefix + piece
        if in_fence:
            if not chunk.endswith("\n"):
                chunk += "\n"
            chunk += CODE_FENCE
        chunks.append(chunk)
    return chunks


class DockerBotClient(discord.Client):
    """Discord client for the single-operator Docker bot.

    Direct messages are always handled. In guild channels only messages
    that mention the bot or start with '/' are handled.
    """

    def __init__(self, gateway: EngineGateway, allowed_user_id: int, **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self.router = CommandRouter(
            gateway=gateway,
            notification=DiscordNotificationAdapter(self),
            allowed_user_id=allowed_user_id,
        )

    def _strip_mention(self, content: str) -> str:
        """Drop a leading '<@id>' mention of the bot so '@Bot /list' parses."""
        return re.sub(rf"^<@!?{self.user.id}>\s*", "", content)

    def to_incoming(self, message: discord.Message) -> Optional[IncomingMessage]:
        """Convert a Discord message; None for messages the bot should skip."""
        if not self.user or message.author.id == self.user.id:
            return None
        if message.type not in _HANDLED_MESSAGE_TYPES:
            return None

        content = message.content.strip()
        is_direct = message.guild is None
        is_mention = any(user.id == self.user.id for user in message.mentions)
        content = self._strip_mention(content)
        if not is_direct and not is_mention and not content.startswith("/"):
            return None

        return IncomingMessage(
            content=content,
            chat_id=message.channel.id,
            author_id=message.author.id,
            author_name=str(message.author),
        )

    async def on_ready(self):
        logger.info(
            "Docker bot started (bot_username=%s, allowed_user=%s)",
            self.user, self.router.allowed_user_id,
        )

    async def on_message(self, message: discord.Message):
        incoming = self.to_incoming(message)
        if incoming is None:
            return
        await self.router.handle(incoming)
