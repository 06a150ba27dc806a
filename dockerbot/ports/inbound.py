"""Inbound port: transport-agnostic message representation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomingMessage:
    """A chat message delivered to the bot, independent of the chat platform."""

    content: str
    chat_id: int
    author_id: int
    author_name: str = ""
