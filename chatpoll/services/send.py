import logging
from django.conf import settings
import httpx

logger = logging.getLogger(__name__)


def reply_messages(reply_token: str, messages: list[dict]):
    """
    Replies to a webhook event via the LINE Messaging API.

    Endpoint:
      POST /v2/bot/message/reply
    Body:
      { "replyToken": "...", "messages": [ {...}, ... ] }
    """
    url = f"{settings.LINE_API_DOMAIN}/v2/bot/message/reply"
    payload = {"replyToken": reply_token, "messages": messages}
    headers = {"Authorization": f"Bearer {settings.LINE_CHANNEL_ACCESS_TOKEN}"}
    try:
        with httpx.Client() as client:
            response = client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code if exc.response else None
        # 400 = reply token expired or already used; 401 = bad channel access token
        msg = (
            f"Invalid or expired reply token {reply_token} (400)" if status == 400 else
            "Channel access token rejected (401)" if status == 401 else
            f"HTTP error {status}"
        )
        logger.error(f"Failed to reply with {len(messages)} message(s): {msg}")
        raise
