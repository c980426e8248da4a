"""Event service - lifecycle and pass-through operations.

Services:
- Depend only on interfaces (stores), configuration and a clock
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import asyncio
import logging
from typing import Any

from scheduled_events.clock import Clock, SystemClock
from scheduled_events.conf import EventsConfig
from scheduled_events.domain import EventId, EventStatus, ScheduledEvent, derive_status
from scheduled_events.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    PartialDeletionFailure,
)
from scheduled_events.stores.interfaces import ConfirmStore, EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event lookups, status and deletion."""

    def __init__(
        self,
        event_store: EventStore,
        confirm_store: ConfirmStore,
        config: EventsConfig,
        clock: Clock | None = None,
    ) -> None:
        self._events = event_store
        self._confirms = confirm_store
        self._config = config
        self._clock = clock or SystemClock()

    async def list_events(self) -> list[ScheduledEvent]:
        """Return all events."""
        return await self._events.list_events()

    async def get_event(self, event_id: str) -> ScheduledEvent:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed = self._parse_event_id(event_id)
        event = await self._events.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_status(self, event: ScheduledEvent) -> EventStatus:
        """Return the status of the event at the current instant."""
        return derive_status(event, self._clock.now(), self._config.happening_margin)

    async def get_message_id(self, event: ScheduledEvent) -> str | None:
        return await self._events.get_summary_message_id(event.id)

    async def set_message_id(self, event: ScheduledEvent, message_id: str) -> None:
        await self._events.update_summary_message_id(event.id, message_id)

    async def get_inhouse_properties(self, event: ScheduledEvent) -> dict[str, Any] | None:
        return await self._events.get_inhouse_properties(event)

    async def delete_event(self, event_id: EventId) -> None:
        """Delete the event record and every confirmation for it.

        Both deletions run concurrently and nothing is rolled back.

        Raises:
            PartialDeletionFailure: If exactly one of the deletions failed.
            Exception: The event deletion error, unchanged, if both failed.
        """
        event_result, confirms_result = await asyncio.gather(
            self._events.delete_event(event_id),
            self._confirms.delete_by_event(event_id),
            return_exceptions=True,
        )
        for result in (event_result, confirms_result):
            if isinstance(result, BaseException) and not isinstance(result, Exception):
                raise result

        event_failed = isinstance(event_result, Exception)
        confirms_failed = isinstance(confirms_result, Exception)

        if event_failed and confirms_failed:
            raise event_result
        if event_failed or confirms_failed:
            completed = "confirms" if event_failed else "event"
            cause = event_result if event_failed else confirms_result
            logger.warning(
                "Partial deletion of event %s: only %s removed (%r)", event_id, completed, cause
            )
            raise PartialDeletionFailure(str(event_id), completed, cause) from cause

        logger.info("Deleted event %s and its confirms", event_id)

    @staticmethod
    def _parse_event_id(event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except (TypeError, ValueError) as exc:
            raise InvalidEventIdError() from exc
