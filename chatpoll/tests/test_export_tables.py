from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
import pytest


def _export(*args):
    out = StringIO()
    call_command("export_tables", *args, stdout=out)
    return out.getvalue()


@pytest.mark.parametrize(
    "table, header",
    [
        ("posts", "post_id,timestamp,user_id,room_id,message_text,has_poll"),
        ("answers", "answer_id,timestamp,poll_post_id,user_id,answer_value"),
        ("users", "user_id,display_name"),
        ("rooms", "room_id,room_name"),
    ],
)
def test_export_header_rows(table, header):
    assert _export("--table", table).splitlines()[0] == header


def test_export_rows(user_factory, post_factory):
    user_factory(user_id="U1", display_name="Alice")
    post_factory(post_id="m1", user_id="U1", message_text="hello")

    users = _export("--table", "users").splitlines()
    posts = _export("--table", "posts").splitlines()

    assert users[1] == "U1,Alice"
    assert len(posts) == 2
    assert posts[1].startswith("m1,")


def test_export_all_tables_to_directory(tmp_path, answer_factory):
    answer_factory.create_batch(3)

    output = _export("--output-dir", str(tmp_path))

    assert sorted(p.name for p in tmp_path.iterdir()) == ["answers.csv", "posts.csv", "rooms.csv", "users.csv"]
    assert len((tmp_path / "answers.csv").read_text(encoding="utf-8").splitlines()) == 4
    assert "Exported 3 row(s) from answers" in output


def test_export_all_tables_requires_output_dir():
    with pytest.raises(CommandError):
        _export()
