import datetime
import logging

from django.conf import settings

from ..models import Answer, Post

logger = logging.getLogger(__name__)


def has_poll_trigger(text: str) -> bool:
    folded = text.casefold()
    return any(trigger.casefold() in folded for trigger in settings.POLL_TRIGGERS)


def record_post(
    post_id: str,
    timestamp: datetime.datetime,
    user_id: str,
    room_id: str,
    message_text: str,
    has_poll: bool,
) -> tuple[Post, bool]:
    """
    Persist an inbound text message.

    Returns the post and whether it was created. The platform message id is the primary key, so a
    redelivered webhook finds the existing row instead of appending a duplicate.
    """
    post, created = Post.objects.get_or_create(
        post_id=post_id,
        defaults={
            "timestamp": timestamp,
            "user_id": user_id,
            "room_id": room_id,
            "message_text": message_text,
            "has_poll": has_poll,
        },
    )
    if created:
        logger.info(f"Recorded post {post_id} from user {user_id} (room '{room_id}', has_poll={has_poll})")
    else:
        logger.warning(f"Post {post_id} already recorded, ignoring redelivery")
    return post, created


def record_answer(poll_post_id: str, timestamp: datetime.datetime, user_id: str, answer_value: str) -> Answer:
    # Every answer is a new row; repeated answers from the same user are all kept.
    answer = Answer.objects.create(
        timestamp=timestamp,
        poll_post_id=poll_post_id,
        user_id=user_id,
        answer_value=answer_value,
    )
    logger.info(f"Recorded answer {answer.answer_id}: {answer_value} from user {user_id} for post {poll_post_id}")
    return answer
