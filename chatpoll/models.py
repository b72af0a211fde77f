import logging
import uuid
from django.db import models
from django.utils import timezone
from simple_history.models import HistoricalRecords


logger = logging.getLogger(__name__)


class AnswerValue(models.TextChoices):
    OK = "OK", "OK"
    NG = "NG", "NG"


class ModelBase(models.Model):
    history = HistoricalRecords(inherit=True, excluded_fields=["created_at"])

    # created_at is the time we received the row, as opposed to the platform timestamp
    # carried on posts and answers. Useful for sorting; the HistoricalModel is only an audit log.
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        abstract = True


class User(ModelBase):
    user_id = models.CharField(primary_key=True, max_length=255)
    # blank at creation, filled in by an operator through the admin
    display_name = models.CharField(max_length=255, blank=True, default="")

    def __str__(self):
        return self.display_name or self.user_id

    class Meta:
        ordering = ["-created_at"]


class Room(ModelBase):
    room_id = models.CharField(primary_key=True, max_length=255)
    room_name = models.CharField(max_length=255, blank=True, default="")

    def __str__(self):
        return self.room_name or self.room_id

    class Meta:
        ordering = ["-created_at"]


class Post(ModelBase):
    post_id = models.CharField(primary_key=True, max_length=255)
    timestamp = models.DateTimeField()
    user_id = models.CharField(max_length=255, blank=True, default="")
    # empty for 1:1 chats
    room_id = models.CharField(max_length=255, blank=True, default="")
    message_text = models.TextField(blank=True, default="")
    has_poll = models.BooleanField(default=False)

    def __str__(self):
        return f"Post {self.post_id} ({self.user_id})"

    class Meta:
        ordering = ["-timestamp"]


class Answer(ModelBase):
    answer_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    timestamp = models.DateTimeField()
    # not a foreign key: postback data is recorded as-is, even when it names an unknown post
    poll_post_id = models.CharField(max_length=255, db_index=True)
    user_id = models.CharField(max_length=255, blank=True, default="")
    answer_value = models.CharField(max_length=50, choices=AnswerValue.choices)

    def __str__(self):
        return f"{self.user_id} - {self.answer_value} (post {self.poll_post_id})"

    class Meta:
        ordering = ["-timestamp"]
