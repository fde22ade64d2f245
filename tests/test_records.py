import shlex
import uuid

from myteams.records import (
    Message,
    Team,
    TeamLink,
    User,
    create_uuid,
    stringify_message,
    stringify_user,
)


def test_create_uuid_is_valid_text_form():
    value = create_uuid()
    assert len(value) == 36
    assert str(uuid.UUID(value)) == value


def test_create_uuid_is_unique():
    values = {create_uuid() for _ in range(50)}
    assert len(values) == 50


def test_stringify_user_format():
    user = User(name="alice", uuid="u-1", status="1")
    assert stringify_user(user) == '"u-1" "alice" "1"'


def test_stringify_user_splits_back_into_fields():
    user = User(name="alice smith", uuid=create_uuid(), status="0")
    assert shlex.split(stringify_user(user)) == [user.uuid, user.name, user.status]


def test_user_default_status():
    assert User(name="bob", uuid="u-2").status == "0"


def test_stringify_message_field_order():
    message = Message(
        body="hello world",
        uuid="m-1",
        timestamp="Wed May  1 12:30:00 2024",
        sender_uuid="s-1",
        receiver_uuid="r-1",
    )
    assert shlex.split(stringify_message(message)) == [
        "m-1", "hello world", "Wed May  1 12:30:00 2024", "s-1", "r-1",
    ]


def test_stringify_message_exact():
    message = Message("b", "m", "t", "s", "r")
    assert stringify_message(message) == '"m" "b" "t" "s" "r"'


def test_records_compare_by_value():
    assert Team("t", "id") == Team("t", "id")
    assert TeamLink("team", "user") != TeamLink("user", "team")


def test_user_status_is_mutable():
    user = User("carol", "u-3", "0")
    user.status = "1"
    assert stringify_user(user).endswith('"1"')