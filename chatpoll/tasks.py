import logging

from celery import shared_task
import httpx

from chatpoll.services.send import reply_messages

logger = logging.getLogger(__name__)


@shared_task()
def send_reply(reply_token: str, messages: list[dict]):
    # Replies are fire-and-forget: the triggering post or answer is already committed, and a reply
    # token can only be used once, so failures are logged and never retried.
    try:
        reply_messages(reply_token, messages)
    except httpx.HTTPError as exc:
        logger.error(f"Reply for token {reply_token} was not delivered: {exc!r}")
