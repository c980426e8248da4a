from scheduled_events.domain.models import ConfirmationView, ConfirmRecord, ScheduledEvent
from scheduled_events.domain.status import EventStatus, derive_status
from scheduled_events.domain.value_objects import Capacity, EventId, LobbyStatus

__all__ = [
    "ScheduledEvent",
    "ConfirmRecord",
    "ConfirmationView",
    "EventStatus",
    "derive_status",
    "EventId",
    "Capacity",
    "LobbyStatus",
]
