import datetime
import sys
from unittest.mock import patch
from django.test import override_settings
import pytest
import factory
from pytest_factoryboy import register

from chatpoll.models import Answer, AnswerValue, Post, Room, User


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config):
    if "xdist" not in sys.modules:
        return
    if config.option.file_or_dir and len(config.option.file_or_dir) == 1 and "::" in config.option.file_or_dir[0]:
        # if just running one test then disable xdist as generally this will be faster
        config.option.dist = "no"
        config.option.numprocesses = 0


@pytest.fixture(autouse=True)
def enable_db_access(db):
    pass


@pytest.fixture(autouse=True)
def overwrite_secrets():
    # overwrite secrets to prevent hitting real services while unit testing, just in case
    with override_settings(
        LINE_CHANNEL_ACCESS_TOKEN="fake-line-channel-access-token",
        LINE_API_DOMAIN="https://line.example.invalid",
        RESULTS_PAGE_URL="https://bot.example.com/results/",
    ):
        yield


@pytest.fixture
def celery_task_always_eager(settings):
    settings.CELERY_TASK_ALWAYS_EAGER = True
    yield
    settings.CELERY_TASK_ALWAYS_EAGER = False


@pytest.fixture
def mock_send_reply():
    # the router enqueues replies on the celery task; tests assert on the enqueued payload
    with patch("chatpoll.services.router.send_reply") as mock_send_reply:
        yield mock_send_reply


# 2025-01-01 00:00:00 UTC
EVENT_TIMESTAMP_MS = 1735689600000
EVENT_DATETIME = datetime.datetime(2025, 1, 1, tzinfo=datetime.timezone.utc)


@pytest.fixture
def make_message_event():
    def _make(text, message_id="m1", user_id="U1", room_id="", group_id="", message_type="text", reply_token="rt-1"):
        source = {"type": "user", "userId": user_id}
        if room_id:
            source = {"type": "room", "userId": user_id, "roomId": room_id}
        elif group_id:
            source = {"type": "group", "userId": user_id, "groupId": group_id}
        message = {"id": message_id, "type": message_type}
        if message_type == "text":
            message["text"] = text
        return {
            "type": "message",
            "timestamp": EVENT_TIMESTAMP_MS,
            "source": source,
            "replyToken": reply_token,
            "message": message,
        }

    return _make


@pytest.fixture
def make_postback_event():
    def _make(data, user_id="U2", room_id="R1", reply_token="rt-2"):
        return {
            "type": "postback",
            "timestamp": EVENT_TIMESTAMP_MS,
            "source": {"type": "room", "userId": user_id, "roomId": room_id},
            "replyToken": reply_token,
            "postback": {"data": data},
        }

    return _make


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User

    user_id = factory.Faker("uuid4")
    display_name = factory.Faker("first_name")


class RoomFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Room

    room_id = factory.Faker("uuid4")
    room_name = factory.Faker("word")


class PostFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Post

    post_id = factory.Sequence(lambda n: f"post-{n}")
    timestamp = factory.Faker("date_time", tzinfo=datetime.timezone.utc)
    user_id = factory.Faker("uuid4")
    room_id = ""
    message_text = factory.Faker("sentence")
    has_poll = False


class AnswerFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Answer

    timestamp = factory.Faker("date_time", tzinfo=datetime.timezone.utc)
    poll_post_id = factory.Sequence(lambda n: f"post-{n}")
    user_id = factory.Faker("uuid4")
    answer_value = AnswerValue.OK


# register factories as fixtures
register(UserFactory)
register(RoomFactory)
register(PostFactory)
register(AnswerFactory)
