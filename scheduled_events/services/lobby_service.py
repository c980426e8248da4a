"""Lobby status pass-through. Lobby codes are opaque to this service."""

from scheduled_events.domain import LobbyStatus, ScheduledEvent
from scheduled_events.stores.interfaces import EventStore


class LobbyService:
    """Reads and writes the lobby state associated with an event."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    async def get_lobby_status(self, event: ScheduledEvent) -> LobbyStatus | None:
        return await self._store.get_lobby_status(event)

    async def set_lobby_status(self, event: ScheduledEvent, status: LobbyStatus) -> None:
        await self._store.update_lobby_status(event, status)
