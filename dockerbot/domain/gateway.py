"""EngineGateway: container operations rendered as chat replies.

Every operation fetches a fresh container list, resolves the target by
name or id, calls the engine at most once, and returns a reply string.
Engine failures are logged here and reported to the chat only as short
fixed texts.
"""

import logging
from typing import Optional, Sequence, Tuple

from dockerbot.domain.formatting import collect_log_lines, format_container_list, format_logs
from dockerbot.domain.models import ContainerState, ContainerSummary
from dockerbot.ports.outbound import ContainerEnginePort, EngineError

logger = logging.getLogger(__name__)

STOP_GRACE_SECONDS = 10
RESTART_GRACE_SECONDS = 30

LIST_FAILED_TEXT = "❌ Failed to list containers"
CHECK_FAILED_TEXT = "❌ Failed to check container status"


def find_container(containers: Sequence[ContainerSummary], ref: str) -> Optional[ContainerSummary]:
    """First container whose display name, short id or full id equals ref."""
    for container in containers:
        if container.matches(ref):
            return container
    return None


def not_found_text(name: str) -> str:
    return f"❌ Container `{name}` not found"


class EngineGateway:
    """Adapter between command handlers and the ContainerEnginePort."""

    def __init__(self, engine: ContainerEnginePort):
        self.engine = engine

    async def _resolve(self, name: str) -> Tuple[Optional[ContainerSummary], str]:
        """Look up name in a fresh container list.

        Returns the container, or None and the reply to send instead.
        """
        try:
            containers = await self.engine.list_containers()
        except EngineError as e:
            logger.error("Failed to list containers: %s (container=%s)", e, name)
            return None, CHECK_FAILED_TEXT

        container = find_container(containers, name)
        if container is None:
            return None, not_found_text(name)
        return container, ""

    async def list_containers(self, detailed: bool = False) -> str:
        try:
            containers = await self.engine.list_containers()
        except EngineError as e:
            logger.error("Failed to list containers: %s", e)
            return LIST_FAILED_TEXT
        return format_container_list(containers, detailed=detailed)

    async def start(self, name: str) -> str:
        container, failure = await self._resolve(name)
        if container is None:
            return failure
        if container.state is ContainerState.RUNNING:
            return f"ℹ️ Container `{name}` is already running"

        try:
            await self.engine.start_container(container.id)
        except EngineError as e:
            logger.error("Failed to start container: %s (container=%s)", e, name)
            return f"❌ Failed to start container `{name}`"

        logger.info("Container started successfully (container=%s)", name)
        return f"✅ Container `{name}` started successfully"

    async def stop(self, name: str) -> str:
        container, failure = await self._resolve(name)
        if container is None:
            return failure
        if container.state is not ContainerState.RUNNING:
            return f"ℹ️ Container `{name}` is not running"

        try:
            await self.engine.stop_container(container.id, timeout=STOP_GRACE_SECONDS)
        except EngineError as e:
            logger.error("Failed to stop container: %s (container=%s)", e, name)
            return f"❌ Failed to stop container `{name}`"

        logger.info("Container stopped successfully (container=%s)", name)
        return f"✅ Container `{name}` stopped successfully"

    async def restart(self, name: str) -> str:
        container, failure = await self._resolve(name)
        if container is None:
            return failure

        try:
            await self.engine.restart_container(container.id, timeout=RESTART_GRACE_SECONDS)
        except EngineError as e:
            logger.error("Failed to restart container: %s (container=%s)", e, name)
            return f"❌ Failed to restart container `{name}`"

        logger.info("Container restarted successfully (container=%s)", name)
        return f"🔄 Container `{name}` restarted successfully"

    async def logs(self, name: str, lines: int) -> str:
        container, failure = await self._resolve(name)
        if container is None:
            return failure

        try:
            raw = await self.engine.container_logs(container.id, tail=lines)
        except EngineError as e:
            logger.error("Failed to get container logs: %s (container=%s)", e, name)
            return f"❌ Failed to get logs for container `{name}`"

        collected, count = collect_log_lines(raw, lines)
        return format_logs(name, collected, count)
