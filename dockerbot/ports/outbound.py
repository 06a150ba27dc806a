"""Outbound ports: interfaces for the chat transport and container engine."""

from dataclasses import dataclass
from typing import List, Protocol, runtime_checkable

from dockerbot.domain.models import ContainerSummary


class EngineError(Exception):
    """A container engine call failed or ran past its deadline."""


@dataclass(frozen=True)
class OutgoingReply:
    """A single reply to send back to a chat."""

    chat_id: int
    text: str
    markdown: bool = True
    disable_preview: bool = True


@runtime_checkable
class NotificationPort(Protocol):
    """Interface for delivering replies to the chat transport."""

    async def send(self, reply: OutgoingReply) -> None: ...


@runtime_checkable
class ContainerEnginePort(Protocol):
    """Interface for the container engine.

    Every method raises EngineError on failure.
    """

    async def list_containers(self) -> List[ContainerSummary]: ...

    async def start_container(self, container_id: str) -> None: ...

    async def stop_container(self, container_id: str, timeout: int) -> None: ...

    async def restart_container(self, container_id: str, timeout: int) -> None: ...

    async def container_logs(self, container_id: str, tail: int) -> bytes: ...
