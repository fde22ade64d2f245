from datetime import datetime

import pytest

from myteams import client_events


def test_logged_in_written_to_stdout(capsys):
    line = client_events.client_event_logged_in("uuid-1", "alice")
    out = capsys.readouterr().out
    assert out == line + "\n"
    assert "uuid-1" in line and "alice" in line


def test_logged_in_and_out_differ(capsys):
    first = client_events.client_event_logged_in("uuid-1", "alice")
    second = client_events.client_event_logged_out("uuid-1", "alice")
    capsys.readouterr()
    assert first != second
    assert "alice" in second


def test_private_message_contains_sender_and_body(capsys):
    line = client_events.client_event_private_message_received("u9", "hi there")
    assert capsys.readouterr().out.strip() == line
    assert "u9" in line and "hi there" in line


@pytest.mark.parametrize(
    "printer",
    [client_events.client_print_users, client_events.client_print_user],
)
def test_status_changes_output(printer, capsys):
    online = printer("u1", "bob", 1)
    offline = printer("u1", "bob", 0)
    capsys.readouterr()
    assert online != offline
    assert "bob" in online and "bob" in offline


def test_status_given_as_text(capsys):
    assert client_events.client_print_user("u1", "bob", "1") == \
        client_events.client_print_user("u1", "bob", 1)
    capsys.readouterr()


def test_unknown_user_names_uuid(capsys):
    line = client_events.client_error_unknown_user("missing-uuid")
    assert capsys.readouterr().out == line + "\n"
    assert "missing-uuid" in line