"""Domain layer: pure Python, no framework dependencies."""

from dockerbot.domain.models import Command, ContainerState, ContainerSummary

__all__ = [
    "Command",
    "ContainerState",
    "ContainerSummary",
]
