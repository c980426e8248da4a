"""Confirm service - aggregates attendance answers for an event."""

import asyncio

from scheduled_events.domain import ConfirmationView, ScheduledEvent
from scheduled_events.stores.interfaces import ConfirmStore, EventStore


class ConfirmService:
    """Service combining confirmations and the waiting list of an event."""

    def __init__(self, event_store: EventStore, confirm_store: ConfirmStore) -> None:
        self._events = event_store
        self._confirms = confirm_store

    async def get_confirmation_view(self, event: ScheduledEvent) -> ConfirmationView:
        """Return who confirmed, declined, or has yet to answer the event.

        Both reads run concurrently. The first failure propagates and no
        partial view is returned.
        """
        records, waiting = await asyncio.gather(
            self._confirms.get_by_event(event),
            self._events.get_waiting_list(event),
        )
        return ConfirmationView.from_records(records, waiting)
