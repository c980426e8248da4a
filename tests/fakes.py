"""In-memory store fakes for service tests."""

from typing import Any

from scheduled_events.domain import ConfirmRecord, EventId, LobbyStatus, ScheduledEvent
from scheduled_events.domain.errors import EventNotFoundError, StoreFailure
from scheduled_events.stores.interfaces import ConfirmStore, EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed EventStore. Operations named in ``failing`` raise StoreFailure."""

    def __init__(self) -> None:
        self.events: dict[EventId, ScheduledEvent] = {}
        self.message_ids: dict[EventId, str] = {}
        self.lobby: dict[EventId, LobbyStatus] = {}
        self.waiting: dict[EventId, set[str]] = {}
        self.inhouse: dict[EventId, dict[str, Any]] = {}
        self.failing: set[str] = set()

    def add(self, event: ScheduledEvent, waiting: set[str] | None = None) -> ScheduledEvent:
        self.events[event.id] = event
        if waiting is not None:
            self.waiting[event.id] = set(waiting)
        return event

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise StoreFailure(operation)

    def _require(self, event_id: EventId) -> None:
        if event_id not in self.events:
            raise EventNotFoundError(str(event_id))

    async def list_events(self) -> list[ScheduledEvent]:
        self._check("list_events")
        return list(self.events.values())

    async def get_event(self, event_id: EventId) -> ScheduledEvent | None:
        self._check("get_event")
        return self.events.get(event_id)

    async def get_summary_message_id(self, event_id: EventId) -> str | None:
        self._check("get_summary_message_id")
        self._require(event_id)
        return self.message_ids.get(event_id)

    async def update_summary_message_id(self, event_id: EventId, message_id: str) -> None:
        self._check("update_summary_message_id")
        self._require(event_id)
        self.message_ids[event_id] = message_id

    async def get_lobby_status(self, event: ScheduledEvent) -> LobbyStatus | None:
        self._check("get_lobby_status")
        self._require(event.id)
        return self.lobby.get(event.id)

    async def update_lobby_status(self, event: ScheduledEvent, status: LobbyStatus) -> None:
        self._check("update_lobby_status")
        self._require(event.id)
        self.lobby[event.id] = status

    async def get_waiting_list(self, event: ScheduledEvent) -> set[str] | None:
        self._check("get_waiting_list")
        return self.waiting.get(event.id)

    async def get_inhouse_properties(self, event: ScheduledEvent) -> dict[str, Any] | None:
        self._check("get_inhouse_properties")
        self._require(event.id)
        return self.inhouse.get(event.id)

    async def delete_event(self, event_id: EventId) -> None:
        self._check("delete_event")
        self.events.pop(event_id, None)
        self.message_ids.pop(event_id, None)
        self.lobby.pop(event_id, None)
        self.waiting.pop(event_id, None)
        self.inhouse.pop(event_id, None)


class InMemoryConfirmStore(ConfirmStore):
    """List-backed ConfirmStore. Operations named in ``failing`` raise StoreFailure."""

    def __init__(self) -> None:
        self.records: list[ConfirmRecord] = []
        self.failing: set[str] = set()

    def confirm(self, event_id: EventId, user_id: str, attends: bool) -> None:
        self.records.append(ConfirmRecord(event_id=event_id, user_id=user_id, attends=attends))

    def _check(self, operation: str) -> None:
        if operation in self.failing:
            raise StoreFailure(operation)

    async def get_by_event(self, event: ScheduledEvent) -> list[ConfirmRecord] | None:
        self._check("get_by_event")
        records = [record for record in self.records if record.event_id == event.id]
        return records or None

    async def delete_by_event(self, event_id: EventId) -> None:
        self._check("delete_by_event")
        self.records = [record for record in self.records if record.event_id != event_id]
