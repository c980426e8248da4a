"""App configuration, resolved from Django settings.

Settings:
- SCHEDULED_EVENTS_DEFAULT_TIMEZONE: IANA name used to anchor event times.
  Falls back to TIME_ZONE, then UTC.
- SCHEDULED_EVENTS_HAPPENING_MARGIN: timedelta or number of seconds an event
  stays "happening" after its scheduled time.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_HAPPENING_MARGIN = timedelta(minutes=30)


@dataclass(frozen=True)
class EventsConfig:
    """Explicit configuration injected into services and stores."""

    default_timezone: ZoneInfo
    happening_margin: timedelta = DEFAULT_HAPPENING_MARGIN

    def __post_init__(self) -> None:
        if self.happening_margin < timedelta(0):
            raise ValueError("Happening margin cannot be negative")

    @classmethod
    def from_settings(cls) -> Self:
        tz_name = getattr(
            settings,
            "SCHEDULED_EVENTS_DEFAULT_TIMEZONE",
            getattr(settings, "TIME_ZONE", None) or "UTC",
        )
        try:
            default_timezone = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
            raise ImproperlyConfigured(
                f"SCHEDULED_EVENTS_DEFAULT_TIMEZONE is not a known timezone: {tz_name!r}"
            ) from exc

        margin = getattr(settings, "SCHEDULED_EVENTS_HAPPENING_MARGIN", DEFAULT_HAPPENING_MARGIN)
        if isinstance(margin, (int, float)) and not isinstance(margin, bool):
            margin = timedelta(seconds=margin)
        if not isinstance(margin, timedelta) or margin < timedelta(0):
            raise ImproperlyConfigured(
                "SCHEDULED_EVENTS_HAPPENING_MARGIN must be a non-negative timedelta or number of seconds"
            )

        return cls(default_timezone=default_timezone, happening_margin=margin)
