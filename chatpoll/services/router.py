import logging

from django.db import DatabaseError, transaction
from kombu.exceptions import OperationalError

from chatpoll.serializers import WebhookEventSerializer
from chatpoll.services.constant import ANSWER_ACTION
from chatpoll.services.events import Event, IgnoredEvent, MessageEvent, PostbackEvent, classify_event
from chatpoll.services.messages import build_answer_confirmation, build_poll_flex_message
from chatpoll.services.postback import parse_postback_data
from chatpoll.services.recorders import has_poll_trigger, record_answer, record_post
from chatpoll.services.registry import ensure_room, ensure_user
from chatpoll.tasks import send_reply

logger = logging.getLogger(__name__)


def dispatch_events(raw_events: list) -> None:
    """
    Handle one webhook delivery.

    Events are processed one at a time in delivery order. An event that fails validation is logged
    and skipped so the rest of the batch still runs, and so is any other error raised while handling
    one event. Database errors are not caught: they fail the whole delivery.
    """
    for index, raw_event in enumerate(raw_events):
        serializer = WebhookEventSerializer(data=raw_event)
        if not serializer.is_valid():
            logger.warning(f"Skipping malformed webhook event #{index}: {serializer.errors}")
            continue
        try:
            dispatch_event(classify_event(serializer.validated_data))
        except DatabaseError:
            raise
        except Exception:
            logger.exception(f"Failed to handle webhook event #{index}, continuing with the rest of the batch")


def dispatch_event(event: Event) -> None:
    if isinstance(event, MessageEvent):
        handle_message_event(event)
    elif isinstance(event, PostbackEvent):
        handle_postback_event(event)
    elif isinstance(event, IgnoredEvent):
        logger.info(f"Ignoring '{event.event_type}' event: {event.reason}")
    else:
        raise TypeError(f"Unhandled event {event!r}")


def handle_message_event(event: MessageEvent) -> None:
    has_poll = has_poll_trigger(event.text)
    with transaction.atomic():
        ensure_user(event.user_id)
        ensure_room(event.room_id)
        _, created = record_post(
            post_id=event.message_id,
            timestamp=event.timestamp,
            user_id=event.user_id,
            room_id=event.room_id,
            message_text=event.text,
            has_poll=has_poll,
        )

    if has_poll and created:
        _reply(event.reply_token, [build_poll_flex_message(event.message_id)])


def handle_postback_event(event: PostbackEvent) -> None:
    params = parse_postback_data(event.data)
    if params.get("action") != ANSWER_ACTION:
        logger.debug(f"Ignoring postback with action '{params.get('action')}' from user {event.user_id}")
        return

    answer_value = params.get("value")
    poll_post_id = params.get("postId")
    if not answer_value or not poll_post_id:
        logger.debug(f"Ignoring answer postback without value or postId from user {event.user_id}: {event.data}")
        return

    record_answer(
        poll_post_id=poll_post_id,
        timestamp=event.timestamp,
        user_id=event.user_id,
        answer_value=answer_value,
    )
    _reply(event.reply_token, [build_answer_confirmation(answer_value)])


def _reply(reply_token: str, messages: list[dict]) -> None:
    if not reply_token:
        logger.warning("Event has no reply token, skipping reply")
        return
    try:
        send_reply.delay(reply_token, messages)
    except OperationalError:
        # the post or answer stays committed when the broker is unreachable
        logger.exception(f"Could not enqueue reply for token {reply_token}")
