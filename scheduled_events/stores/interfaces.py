"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every method is a
coroutine; implementations report backend failures as StoreFailure.
"""

from abc import ABC, abstractmethod
from typing import Any

from scheduled_events.domain import ConfirmRecord, EventId, LobbyStatus, ScheduledEvent


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    async def list_events(self) -> list[ScheduledEvent]:
        """Return all events, soonest first, instant events last."""
        ...

    @abstractmethod
    async def get_event(self, event_id: EventId) -> ScheduledEvent | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    async def get_summary_message_id(self, event_id: EventId) -> str | None:
        """Return the chat message id of the event summary, if one was posted."""
        ...

    @abstractmethod
    async def update_summary_message_id(self, event_id: EventId, message_id: str) -> None:
        ...

    @abstractmethod
    async def get_lobby_status(self, event: ScheduledEvent) -> LobbyStatus | None:
        ...

    @abstractmethod
    async def update_lobby_status(self, event: ScheduledEvent, status: LobbyStatus) -> None:
        ...

    @abstractmethod
    async def get_waiting_list(self, event: ScheduledEvent) -> set[str] | None:
        """Return ids of users who have not answered yet, or None if no list exists."""
        ...

    @abstractmethod
    async def get_inhouse_properties(self, event: ScheduledEvent) -> dict[str, Any] | None:
        ...

    @abstractmethod
    async def delete_event(self, event_id: EventId) -> None:
        """Delete the event record. Confirmations are not touched."""
        ...


class ConfirmStore(ABC):
    """Interface for attendance confirmation persistence."""

    @abstractmethod
    async def get_by_event(self, event: ScheduledEvent) -> list[ConfirmRecord] | None:
        """Return every confirmation recorded for the event."""
        ...

    @abstractmethod
    async def delete_by_event(self, event_id: EventId) -> None:
        """Delete every confirmation recorded for the event id."""
        ...
