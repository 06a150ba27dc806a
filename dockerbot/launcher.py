"""Launcher for the Docker control bot."""

import asyncio
import logging
import sys

import discord
import docker
from docker.errors import DockerException

from dockerbot.adapters.discord.adapter import DockerBotClient
from dockerbot.adapters.docker.engine import DockerEngine, create_docker_client
from dockerbot.config import DEFAULT_LOG_LEVEL, AppConfig, ConfigError
from dockerbot.domain.gateway import EngineGateway

logger = logging.getLogger("dockerbot")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send every record, discord.py's included, to stderr."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def build_client(config: AppConfig, docker_client: docker.DockerClient) -> DockerBotClient:
    """Wire the engine, gateway and Discord client for one bot instance."""
    gateway = EngineGateway(DockerEngine(docker_client))
    return DockerBotClient(gateway=gateway, allowed_user_id=config.user_id)


async def run_bot(config: AppConfig, docker_client: docker.DockerClient) -> None:
    """Log in and process messages until the connection is closed."""
    client = build_client(config, docker_client)
    async with client:
        await client.start(config.token)


def _fatal(msg: str, *args) -> None:
    logger.critical(msg, *args)
    sys.exit(1)


def main() -> None:
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        setup_logging()
        _fatal("%s", e)

    setup_logging(config.log_level)

    try:
        docker_client = create_docker_client()
    except DockerException as e:
        _fatal("Failed to create Docker client: %s", e)

    try:
        asyncio.run(run_bot(config, docker_client))
    except discord.LoginFailure as e:
        _fatal("Failed to create Discord bot: %s", e)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        docker_client.close()


if __name__ == "__main__":
    main()
