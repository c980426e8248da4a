"""Lifecycle status of a scheduled event, derived from wall-clock time."""

from datetime import datetime, timedelta, timezone
from enum import Enum

from scheduled_events.domain.models import ScheduledEvent


class EventStatus(Enum):
    """Lifecycle status of an event."""

    PENDING = "pending"
    HAPPENING = "happening"
    EXPIRED = "expired"


def derive_status(event: ScheduledEvent, now: datetime, margin: timedelta) -> EventStatus:
    """Return the status of ``event`` at instant ``now``.

    Pending while the scheduled time is in the future. Happening from the
    scheduled time up to and including ``scheduled_time + margin``. Expired
    afterwards. Instant events are always expired.
    """
    if event.is_instant:
        return EventStatus.EXPIRED

    if now.utcoffset() is None:
        raise ValueError("now must be timezone-aware")

    # Datetimes sharing a tzinfo compare by wall clock; UTC makes it instant-to-instant.
    scheduled_time = event.scheduled_time.astimezone(timezone.utc)
    now = now.astimezone(timezone.utc)
    if scheduled_time - now > timedelta(0):
        return EventStatus.PENDING
    if now <= scheduled_time + margin:
        return EventStatus.HAPPENING
    return EventStatus.EXPIRED
