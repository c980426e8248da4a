"""Domain models representing persisted state.

These are pure domain objects with no storage concerns.
Django ORM models are in scheduled_events/models.py (persistence layer).
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Self

from scheduled_events.domain.errors import InvalidEventError
from scheduled_events.domain.value_objects import Capacity, EventId


@dataclass(frozen=True)
class ScheduledEvent:
    """Domain representation of a scheduled (or instant) event."""

    id: EventId
    name: str
    scheduled_time: datetime | None
    attendance_limit: Capacity
    is_instant: bool = False

    def __post_init__(self) -> None:
        if self.is_instant and self.scheduled_time is not None:
            raise InvalidEventError("Instant events cannot have a scheduled time")
        if not self.is_instant and self.scheduled_time is None:
            raise InvalidEventError("Scheduled events require a scheduled time")
        if self.scheduled_time is not None and self.scheduled_time.utcoffset() is None:
            raise InvalidEventError("Scheduled time must be timezone-aware")

    @classmethod
    def from_timestamp(
        cls,
        id: EventId,
        name: str,
        timestamp: float | None,
        limit: int,
        *,
        tz: tzinfo,
        instant: bool = False,
    ) -> Self:
        """Build an event from a UNIX timestamp, anchored to ``tz``,
        normally EventsConfig.default_timezone.

        The timestamp is ignored for instant events.
        """
        scheduled_time = None
        if not instant:
            if timestamp is None:
                raise InvalidEventError("Scheduled events require a scheduled time")
            scheduled_time = datetime.fromtimestamp(timestamp, tz=tz)
        return cls(
            id=id,
            name=name,
            scheduled_time=scheduled_time,
            attendance_limit=Capacity(limit),
            is_instant=instant,
        )


@dataclass(frozen=True)
class ConfirmRecord:
    """A user's attend / decline decision for an event."""

    event_id: EventId
    user_id: str
    attends: bool


@dataclass(frozen=True)
class ConfirmationView:
    """Participants of an event partitioned by their response."""

    confirmed: frozenset[str] = field(default_factory=frozenset)
    rejected: frozenset[str] = field(default_factory=frozenset)
    waiting: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def from_records(
        cls,
        records: Iterable[ConfirmRecord] | None,
        waiting: Iterable[str] | None,
    ) -> Self:
        # Latest record wins per user; a recorded answer takes the user off waiting.
        answers = {record.user_id: record.attends for record in records or ()}
        confirmed = frozenset(user for user, attends in answers.items() if attends)
        rejected = frozenset(user for user, attends in answers.items() if not attends)
        return cls(
            confirmed=confirmed,
            rejected=rejected,
            waiting=frozenset(waiting or ()).difference(answers),
        )
