"""
Domain view of inbound webhook events.

The wire payload (see chatpoll.serializers) carries optional fields whose presence depends on the
event type. ``classify_event`` turns it into exactly one of the event classes below so the router
can match on the class instead of probing optional attributes.
"""

import datetime
from dataclasses import dataclass

from chatpoll.serializers import WebhookEvent


@dataclass(frozen=True)
class MessageEvent:
    message_id: str
    user_id: str
    room_id: str
    timestamp: datetime.datetime
    reply_token: str
    text: str


@dataclass(frozen=True)
class PostbackEvent:
    user_id: str
    room_id: str
    timestamp: datetime.datetime
    reply_token: str
    data: str


@dataclass(frozen=True)
class IgnoredEvent:
    event_type: str
    reason: str


Event = MessageEvent | PostbackEvent | IgnoredEvent


def to_datetime(timestamp_ms: int) -> datetime.datetime:
    return datetime.datetime.fromtimestamp(timestamp_ms / 1000, tz=datetime.timezone.utc)


def classify_event(event: WebhookEvent) -> Event:
    source = event.source
    user_id = source.userId if source else ""
    # group chats and multi-person rooms are both recorded as rooms
    room_id = (source.roomId or source.groupId) if source else ""

    if event.type == "message":
        if event.message is None:
            return IgnoredEvent(event.type, "message event without a message")
        if event.message.type != "text":
            return IgnoredEvent(event.type, f"unsupported message type '{event.message.type}'")
        return MessageEvent(
            message_id=event.message.id,
            user_id=user_id,
            room_id=room_id,
            timestamp=to_datetime(event.timestamp),
            reply_token=event.replyToken,
            text=event.message.text,
        )

    if event.type == "postback":
        if event.postback is None:
            return IgnoredEvent(event.type, "postback event without postback data")
        return PostbackEvent(
            user_id=user_id,
            room_id=room_id,
            timestamp=to_datetime(event.timestamp),
            reply_token=event.replyToken,
            data=event.postback.data,
        )

    return IgnoredEvent(event.type, "unsupported event type")
