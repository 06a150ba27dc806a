"""Port interfaces (Hexagonal Architecture)."""

from dockerbot.ports.inbound import IncomingMessage
from dockerbot.ports.outbound import ContainerEnginePort, EngineError, NotificationPort, OutgoingReply

__all__ = [
    "IncomingMessage",
    "ContainerEnginePort",
    "EngineError",
    "NotificationPort",
    "OutgoingReply",
]
