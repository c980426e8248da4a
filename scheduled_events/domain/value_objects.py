"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Unique identifier for a ScheduledEvent."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity. Zero means unlimited."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class LobbyStatus:
    """Opaque lobby state code, owned by the lobby collaborator."""

    code: str

    def __str__(self) -> str:
        return self.code
