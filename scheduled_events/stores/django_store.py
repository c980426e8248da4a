"""Django ORM implementation of the EventStore and ConfirmStore.

Uses the async queryset API. Backend errors are logged and re-raised as
StoreFailure with the original exception chained.
"""

import functools
import logging
from typing import Any

from django.db import DatabaseError
from django.db.models import F

from scheduled_events import models
from scheduled_events.conf import EventsConfig
from scheduled_events.domain import (
    Capacity,
    ConfirmRecord,
    EventId,
    LobbyStatus,
    ScheduledEvent,
)
from scheduled_events.domain.errors import EventNotFoundError, StoreFailure
from scheduled_events.stores.interfaces import ConfirmStore, EventStore

logger = logging.getLogger(__name__)


def store_operation(func):
    """Translate DatabaseError raised by ``func`` into StoreFailure."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except DatabaseError as exc:
            logger.exception("Store operation %s failed", func.__qualname__)
            raise StoreFailure(func.__name__) from exc

    return wrapper


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def __init__(self, config: EventsConfig) -> None:
        self._config = config

    def _to_domain(self, row: models.ScheduledEvent) -> ScheduledEvent:
        scheduled_time = None
        if row.scheduled_time is not None:
            scheduled_time = row.scheduled_time.astimezone(self._config.default_timezone)
        return ScheduledEvent(
            id=EventId(row.pk),
            name=row.name,
            scheduled_time=scheduled_time,
            attendance_limit=Capacity(row.attendance_limit),
            is_instant=row.is_instant,
        )

    def _rows(self, event_id: EventId):
        return models.ScheduledEvent.objects.filter(pk=event_id.value)

    async def _get_row(self, event_id: EventId) -> models.ScheduledEvent:
        row = await self._rows(event_id).afirst()
        if row is None:
            raise EventNotFoundError(str(event_id))
        return row

    async def _update(self, event_id: EventId, **fields: Any) -> None:
        updated = await self._rows(event_id).aupdate(**fields)
        if not updated:
            raise EventNotFoundError(str(event_id))

    @store_operation
    async def list_events(self) -> list[ScheduledEvent]:
        queryset = models.ScheduledEvent.objects.order_by(
            F("scheduled_time").asc(nulls_last=True), "pk"
        )
        return [self._to_domain(row) async for row in queryset]

    @store_operation
    async def get_event(self, event_id: EventId) -> ScheduledEvent | None:
        row = await self._rows(event_id).afirst()
        return self._to_domain(row) if row is not None else None

    @store_operation
    async def get_summary_message_id(self, event_id: EventId) -> str | None:
        row = await self._get_row(event_id)
        return row.summary_message_id

    @store_operation
    async def update_summary_message_id(self, event_id: EventId, message_id: str) -> None:
        await self._update(event_id, summary_message_id=message_id)

    @store_operation
    async def get_lobby_status(self, event: ScheduledEvent) -> LobbyStatus | None:
        row = await self._get_row(event.id)
        return LobbyStatus(row.lobby_status) if row.lobby_status is not None else None

    @store_operation
    async def update_lobby_status(self, event: ScheduledEvent, status: LobbyStatus) -> None:
        await self._update(event.id, lobby_status=status.code)

    @store_operation
    async def get_waiting_list(self, event: ScheduledEvent) -> set[str] | None:
        queryset = models.WaitingEntry.objects.filter(event_id=event.id.value).values_list(
            "user_id", flat=True
        )
        return {user_id async for user_id in queryset}

    @store_operation
    async def get_inhouse_properties(self, event: ScheduledEvent) -> dict[str, Any] | None:
        row = await self._get_row(event.id)
        return row.inhouse_properties

    @store_operation
    async def delete_event(self, event_id: EventId) -> None:
        deleted, _ = await self._rows(event_id).adelete()
        logger.debug("Deleted %d rows for event %s", deleted, event_id)


class DjangoConfirmStore(ConfirmStore):
    """Relational confirmation store using Django ORM."""

    @store_operation
    async def get_by_event(self, event: ScheduledEvent) -> list[ConfirmRecord] | None:
        queryset = models.Confirm.objects.filter(event_id=event.id.value).order_by("created_at")
        return [
            ConfirmRecord(event_id=event.id, user_id=row.user_id, attends=row.attends)
            async for row in queryset
        ]

    @store_operation
    async def delete_by_event(self, event_id: EventId) -> None:
        deleted, _ = await models.Confirm.objects.filter(event_id=event_id.value).adelete()
        logger.debug("Deleted %d confirms for event %s", deleted, event_id)
