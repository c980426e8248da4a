import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Confirm",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("event_id", models.PositiveBigIntegerField()),
                ("user_id", models.CharField(max_length=32)),
                ("attends", models.BooleanField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "indexes": [models.Index(fields=["event_id"], name="confirm_event_id_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("event_id", "user_id"), name="unique_confirm_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ScheduledEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("scheduled_time", models.DateTimeField(blank=True, null=True)),
                ("attendance_limit", models.PositiveIntegerField(default=0)),
                ("is_instant", models.BooleanField(default=False)),
                ("summary_message_id", models.CharField(blank=True, max_length=64, null=True)),
                ("lobby_status", models.CharField(blank=True, max_length=32, null=True)),
                ("inhouse_properties", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["scheduled_time"],
                "indexes": [models.Index(fields=["scheduled_time"], name="event_scheduled_time_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            models.Q(("is_instant", True), ("scheduled_time__isnull", True))
                            | models.Q(("is_instant", False), ("scheduled_time__isnull", False))
                        ),
                        name="scheduled_time_iff_not_instant",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="WaitingEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=32)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="waiting_entries",
                        to="scheduled_events.scheduledevent",
                    ),
                ),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("event", "user_id"), name="unique_waiting_user"),
                ],
            },
        ),
    ]
