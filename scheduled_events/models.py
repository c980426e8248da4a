"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class ScheduledEvent(models.Model):
    """Persistence model for scheduled events."""

    name = models.CharField(max_length=255)
    scheduled_time = models.DateTimeField(blank=True, null=True)
    attendance_limit = models.PositiveIntegerField(default=0)
    is_instant = models.BooleanField(default=False)
    summary_message_id = models.CharField(max_length=64, blank=True, null=True)
    lobby_status = models.CharField(max_length=32, blank=True, null=True)
    inhouse_properties = models.JSONField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["scheduled_time"]
        indexes = [
            models.Index(fields=["scheduled_time"], name="event_scheduled_time_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(is_instant=True, scheduled_time__isnull=True)
                    | models.Q(is_instant=False, scheduled_time__isnull=False)
                ),
                name="scheduled_time_iff_not_instant",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class WaitingEntry(models.Model):
    """A user who has not yet answered an event."""

    event = models.ForeignKey(
        ScheduledEvent, on_delete=models.CASCADE, related_name="waiting_entries"
    )
    user_id = models.CharField(max_length=32)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["event", "user_id"], name="unique_waiting_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} waiting on {self.event_id}"


class Confirm(models.Model):
    """Persistence model for attendance confirmations.

    event_id is a plain column: confirmations are removed by their own delete,
    independently from the event row.
    """

    event_id = models.PositiveBigIntegerField()
    user_id = models.CharField(max_length=32)
    attends = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["event_id"], name="confirm_event_id_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["event_id", "user_id"], name="unique_confirm_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} {'attends' if self.attends else 'declines'} {self.event_id}"
