from chatpoll.models import Answer, AnswerValue, Room, User


def test_user_str_falls_back_to_id():
    assert str(User(user_id="U1")) == "U1"
    assert str(User(user_id="U1", display_name="Alice")) == "Alice"


def test_room_str_falls_back_to_id():
    assert str(Room(room_id="R1")) == "R1"
    assert str(Room(room_id="R1", room_name="Team")) == "Team"


def test_answers_get_distinct_generated_ids(answer_factory):
    answers = answer_factory.create_batch(5, poll_post_id="m1")

    assert len({a.answer_id for a in answers}) == 5
    assert Answer.objects.filter(poll_post_id="m1").count() == 5


def test_posts_and_answers_keep_audit_history(post_factory, answer_factory):
    post = post_factory(post_id="m1", has_poll=True)
    answer = answer_factory(poll_post_id="m1", answer_value=AnswerValue.NG)

    assert post.history.count() == 1
    assert answer.history.first().answer_value == AnswerValue.NG
