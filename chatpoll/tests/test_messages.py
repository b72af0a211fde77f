from chatpoll.services.messages import (
    build_answer_confirmation,
    build_poll_flex_message,
    build_results_url,
)
from chatpoll.services.postback import parse_postback_data


def _footer_buttons(flex):
    footer = flex["contents"]["footer"]["contents"]
    answer_buttons = footer[0]["contents"]
    results_button = footer[-1]
    return answer_buttons, results_button


def test_build_results_url():
    assert build_results_url("m1") == "https://bot.example.com/results/?postId=m1"
    assert build_results_url("a b&c") == "https://bot.example.com/results/?postId=a+b%26c"


def test_poll_flex_message_structure():
    flex = build_poll_flex_message("m1")

    assert flex["type"] == "flex"
    assert flex["altText"] == "アンケート: OKですか？NGですか？"
    assert flex["contents"]["type"] == "bubble"
    title = flex["contents"]["body"]["contents"][0]
    assert title["text"] == "アンケート"


def test_poll_flex_message_answer_buttons_round_trip():
    answer_buttons, _ = _footer_buttons(build_poll_flex_message("m1"))

    assert [b["action"]["label"] for b in answer_buttons] == ["OK", "NG"]
    assert [b["style"] for b in answer_buttons] == ["primary", "secondary"]
    for button in answer_buttons:
        action = button["action"]
        assert action["type"] == "postback"
        assert action["displayText"] == action["label"]
        assert parse_postback_data(action["data"]) == {"action": "answer", "value": action["label"], "postId": "m1"}


def test_poll_flex_message_links_to_results():
    _, results_button = _footer_buttons(build_poll_flex_message("m1"))

    assert results_button["action"]["type"] == "uri"
    assert results_button["action"]["label"] == "現在の結果を見る"
    assert results_button["action"]["uri"] == "https://bot.example.com/results/?postId=m1"


def test_answer_confirmation():
    assert build_answer_confirmation("NG") == {"type": "text", "text": "回答を受け付けました: NG"}
