from urllib.parse import urlencode

from django.conf import settings

from chatpoll.models import AnswerValue
from chatpoll.services.constant import (
    ANSWER_CONFIRMATION_PREFIX,
    POLL_ALT_TEXT,
    POLL_PROMPT,
    POLL_RESULTS_LABEL,
    POLL_TITLE,
)
from chatpoll.services.postback import build_answer_data


def build_results_url(post_id: str) -> str:
    return f"{settings.RESULTS_PAGE_URL}?{urlencode({'postId': post_id})}"


def _answer_button(value: str, style: str, post_id: str) -> dict:
    return {
        "type": "button",
        "style": style,
        "height": "sm",
        "action": {
            "type": "postback",
            "label": value,
            "data": build_answer_data(value, post_id),
            "displayText": value,
        },
    }


def build_poll_flex_message(post_id: str) -> dict:
    """
    Flex message inviting the room to answer the poll started by ``post_id``.

    The OK / NG buttons send postback data that the router parses back into an answer; the link
    button opens the result page for this post.
    """
    return {
        "type": "flex",
        "altText": POLL_ALT_TEXT,
        "contents": {
            "type": "bubble",
            "body": {
                "type": "box",
                "layout": "vertical",
                "contents": [
                    {"type": "text", "text": POLL_TITLE, "weight": "bold", "size": "xl"},
                    {"type": "text", "text": POLL_PROMPT, "margin": "md", "wrap": True},
                ],
            },
            "footer": {
                "type": "box",
                "layout": "vertical",
                "spacing": "sm",
                "contents": [
                    {
                        "type": "box",
                        "layout": "horizontal",
                        "spacing": "sm",
                        "contents": [
                            _answer_button(AnswerValue.OK.value, "primary", post_id),
                            _answer_button(AnswerValue.NG.value, "secondary", post_id),
                        ],
                    },
                    {"type": "separator", "margin": "sm"},
                    {
                        "type": "button",
                        "style": "link",
                        "height": "sm",
                        "action": {"type": "uri", "label": POLL_RESULTS_LABEL, "uri": build_results_url(post_id)},
                    },
                ],
                "flex": 0,
            },
        },
    }


def build_answer_confirmation(answer_value: str) -> dict:
    return {"type": "text", "text": f"{ANSWER_CONFIRMATION_PREFIX}{answer_value}"}
