"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

SHORT_ID_LENGTH = 12


class ContainerState(str, Enum):
    """Lifecycle state reported by the container engine."""

    RUNNING = "running"
    EXITED = "exited"
    REMOVING = "removing"
    DEAD = "dead"
    CREATED = "created"
    RESTARTING = "restarting"
    PAUSED = "paused"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "ContainerState":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ContainerSummary:
    """One entry of the engine's container list."""

    id: str
    names: Tuple[str, ...] = ()
    state: ContainerState = ContainerState.UNKNOWN
    status: str = ""
    image: str = ""

    @property
    def short_id(self) -> str:
        return self.id[:SHORT_ID_LENGTH]

    @property
    def name(self) -> str:
        """Canonical display name: the first name without its leading '/'."""
        if not self.names:
            return self.short_id
        first = self.names[0]
        return first[1:] if first.startswith("/") else first

    def matches(self, ref: str) -> bool:
        """True if ref is this container's display name, short id or full id."""
        return ref == self.name or ref == self.short_id or ref == self.id

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ContainerSummary":
        """Build from one item of the engine's /containers/json payload."""
        return cls(
            id=data.get("Id", ""),
            names=tuple(data.get("Names") or ()),
            state=ContainerState.parse(data.get("State", "")),
            status=data.get("Status", ""),
            image=data.get("Image", ""),
        )


@dataclass(frozen=True)
class Command:
    """A slash command split into its name and argument tokens."""

    name: str
    args: Tuple[str, ...] = ()
