import datetime
from dataclasses import dataclass
from typing import Optional
from rest_framework import serializers
from rest_framework_dataclasses.serializers import DataclassSerializer


# Field names mirror the LINE webhook JSON so payloads validate without renaming.


@dataclass
class WebhookSource:
    type: str = "user"
    userId: str = ""
    groupId: str = ""
    roomId: str = ""


@dataclass
class WebhookMessage:
    id: str
    type: str
    text: str = ""


@dataclass
class WebhookPostback:
    data: str = ""


@dataclass
class WebhookEvent:
    type: str
    timestamp: int
    source: Optional[WebhookSource] = None
    replyToken: str = ""
    message: Optional[WebhookMessage] = None
    postback: Optional[WebhookPostback] = None


class WebhookSourceSerializer(DataclassSerializer):
    class Meta:
        dataclass = WebhookSource
        extra_kwargs = {
            "type": {"allow_blank": True},
            "userId": {"allow_blank": True},
            "groupId": {"allow_blank": True},
            "roomId": {"allow_blank": True},
        }


class WebhookMessageSerializer(DataclassSerializer):
    class Meta:
        dataclass = WebhookMessage
        extra_kwargs = {
            "text": {"allow_blank": True, "trim_whitespace": False},
        }


class WebhookPostbackSerializer(DataclassSerializer):
    class Meta:
        dataclass = WebhookPostback
        extra_kwargs = {
            "data": {"allow_blank": True, "trim_whitespace": False},
        }


class WebhookEventSerializer(DataclassSerializer):
    source = WebhookSourceSerializer(required=False, allow_null=True)
    message = WebhookMessageSerializer(required=False, allow_null=True)
    postback = WebhookPostbackSerializer(required=False, allow_null=True)

    class Meta:
        dataclass = WebhookEvent
        extra_kwargs = {
            "replyToken": {"allow_blank": True},
        }

    def validate_timestamp(self, value):
        # epoch milliseconds; must be representable as a datetime
        try:
            datetime.datetime.fromtimestamp(value / 1000, tz=datetime.timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise serializers.ValidationError(f"Timestamp {value} is out of range.")
        return value
