import pytest

from chatpoll.services.postback import build_answer_data, parse_postback_data


def test_parse_answer_data():
    assert parse_postback_data("action=answer&value=OK&postId=m1") == {
        "action": "answer",
        "value": "OK",
        "postId": "m1",
    }


def test_parse_is_order_independent_and_keeps_unknown_fields():
    params = parse_postback_data("postId=m1&extra=1&value=NG&action=answer")

    assert params["action"] == "answer"
    assert params["value"] == "NG"
    assert params["postId"] == "m1"
    assert params["extra"] == "1"


@pytest.mark.parametrize(
    "data, expected",
    [
        ("action", {"action": ""}),
        ("action=", {"action": ""}),
        ("", {"": ""}),
        ("?action=answer", {"action": "answer"}),
        ("a=1&a=2", {"a": "2"}),
        ("a=b=c", {"a": "b=c"}),
        ("post%20Id=%E3%81%82%26b", {"post Id": "あ&b"}),
        ("value=a+b", {"value": "a+b"}),
        ("value=%ZZ", {"value": "%ZZ"}),
    ],
)
def test_parse_edge_cases(data, expected):
    assert parse_postback_data(data) == expected


@pytest.mark.parametrize("value", ["OK", "NG"])
@pytest.mark.parametrize("post_id", ["m1", "468789577898262530", "id with spaces&symbols=?", "投稿"])
def test_build_answer_data_round_trip(value, post_id):
    params = parse_postback_data(build_answer_data(value, post_id))

    assert params == {"action": "answer", "value": value, "postId": post_id}


def test_build_answer_data_wire_format():
    assert build_answer_data("OK", "m1") == "action=answer&value=OK&postId=m1"
