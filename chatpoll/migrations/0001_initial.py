from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import simple_history.models
import uuid


HISTORY_TYPE_CHOICES = [("+", "Created"), ("~", "Changed"), ("-", "Deleted")]


def history_fields():
    return [
        ("history_id", models.AutoField(primary_key=True, serialize=False)),
        ("history_date", models.DateTimeField(db_index=True)),
        ("history_change_reason", models.CharField(max_length=100, null=True)),
        ("history_type", models.CharField(choices=HISTORY_TYPE_CHOICES, max_length=1)),
        (
            "history_user",
            models.ForeignKey(
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


def history_options(name):
    return {
        "verbose_name": f"historical {name}",
        "verbose_name_plural": f"historical {name}s",
        "ordering": ("-history_date", "-history_id"),
        "get_latest_by": ("history_date", "history_id"),
    }


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Answer",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, editable=False),
                ),
                (
                    "answer_id",
                    models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False),
                ),
                ("timestamp", models.DateTimeField()),
                ("poll_post_id", models.CharField(db_index=True, max_length=255)),
                ("user_id", models.CharField(blank=True, default="", max_length=255)),
                ("answer_value", models.CharField(choices=[("OK", "OK"), ("NG", "NG")], max_length=50)),
            ],
            options={
                "ordering": ["-timestamp"],
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, editable=False),
                ),
                ("post_id", models.CharField(max_length=255, primary_key=True, serialize=False)),
                ("timestamp", models.DateTimeField()),
                ("user_id", models.CharField(blank=True, default="", max_length=255)),
                ("room_id", models.CharField(blank=True, default="", max_length=255)),
                ("message_text", models.TextField(blank=True, default="")),
                ("has_poll", models.BooleanField(default=False)),
            ],
            options={
                "ordering": ["-timestamp"],
            },
        ),
        migrations.CreateModel(
            name="Room",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, editable=False),
                ),
                ("room_id", models.CharField(max_length=255, primary_key=True, serialize=False)),
                ("room_name", models.CharField(blank=True, default="", max_length=255)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="User",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, editable=False),
                ),
                ("user_id", models.CharField(max_length=255, primary_key=True, serialize=False)),
                ("display_name", models.CharField(blank=True, default="", max_length=255)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="HistoricalAnswer",
            fields=[
                ("answer_id", models.UUIDField(db_index=True, default=uuid.uuid4, editable=False)),
                ("timestamp", models.DateTimeField()),
                ("poll_post_id", models.CharField(db_index=True, max_length=255)),
                ("user_id", models.CharField(blank=True, default="", max_length=255)),
                ("answer_value", models.CharField(choices=[("OK", "OK"), ("NG", "NG")], max_length=50)),
                *history_fields(),
            ],
            options=history_options("answer"),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="HistoricalPost",
            fields=[
                ("post_id", models.CharField(db_index=True, max_length=255)),
                ("timestamp", models.DateTimeField()),
                ("user_id", models.CharField(blank=True, default="", max_length=255)),
                ("room_id", models.CharField(blank=True, default="", max_length=255)),
                ("message_text", models.TextField(blank=True, default="")),
                ("has_poll", models.BooleanField(default=False)),
                *history_fields(),
            ],
            options=history_options("post"),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="HistoricalRoom",
            fields=[
                ("room_id", models.CharField(db_index=True, max_length=255)),
                ("room_name", models.CharField(blank=True, default="", max_length=255)),
                *history_fields(),
            ],
            options=history_options("room"),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="HistoricalUser",
            fields=[
                ("user_id", models.CharField(db_index=True, max_length=255)),
                ("display_name", models.CharField(blank=True, default="", max_length=255)),
                *history_fields(),
            ],
            options=history_options("user"),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
