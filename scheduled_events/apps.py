from django.apps import AppConfig


class ScheduledEventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "scheduled_events"
    verbose_name = "Scheduled Events"
