"""Discord adapter: chat transport for the bot."""

from dockerbot.adapters.discord.adapter import DiscordNotificationAdapter, DockerBotClient

__all__ = ["DiscordNotificationAdapter", "DockerBotClient"]
