from urllib.parse import quote, unquote

from chatpoll.services.constant import ANSWER_ACTION


def parse_postback_data(data: str) -> dict[str, str]:
    """
    Parse a postback data string of ``key=value`` pairs joined by ``&``.

    Keys and values are percent-decoded (``+`` is kept literally). A pair without ``=`` maps its key
    to an empty string, and a later duplicate key replaces an earlier one. Never raises.
    """
    if data.startswith("?"):
        data = data[1:]
    params = {}
    for pair in data.split("&"):
        key, _, value = pair.partition("=")
        params[unquote(key)] = unquote(value)
    return params


def build_answer_data(value: str, post_id: str) -> str:
    fields = {"action": ANSWER_ACTION, "value": value, "postId": post_id}
    return "&".join(f"{quote(key, safe='')}={quote(val, safe='')}" for key, val in fields.items())
