"""Events and prints the client reports on its standard output."""

import sys
import time
from datetime import datetime

__all__ = [
    "client_event_logged_in",
    "client_event_logged_out",
    "client_event_private_message_received",
    "client_print_users",
    "client_print_user",
    "client_error_unknown_user",
    "client_private_message_print_messages",
]


def _emit(line):
    sys.stdout.write(line + "\n")
    sys.stdout.flush()
    return line


def _status_text(user_status):
    return "connected" if int(user_status) == 1 else "not connected"


def _time_text(timestamp):
    if isinstance(timestamp, datetime):
        return timestamp.strftime("%a %b %d %H:%M:%S %Y")
    if isinstance(timestamp, (int, float)):
        return time.ctime(timestamp)
    return str(timestamp)


def client_event_logged_in(user_uuid, user_name):
    """Report that a user logged in."""
    return _emit(f'User "{user_name}" ({user_uuid}) logged in')


def client_event_logged_out(user_uuid, user_name):
    """Report that a user logged out."""
    return _emit(f'User "{user_name}" ({user_uuid}) logged out')


def client_event_private_message_received(user_uuid, message_body):
    """Report a private message received from a user."""
    return _emit(f'New message from {user_uuid}: "{message_body}"')


def client_print_users(user_uuid, user_name, user_status):
    """Print one entry of a user list."""
    return _emit(
        f'- "{user_name}" ({user_uuid}): {_status_text(user_status)}'
    )


def client_print_user(user_uuid, user_name, user_status):
    """Print the details of one user."""
    return _emit(
        f'User "{user_name}" ({user_uuid}): {_status_text(user_status)}'
    )


def client_error_unknown_user(user_uuid):
    """Report that a user uuid does not exist."""
    return _emit(f"Error: unknown user {user_uuid}")


def client_private_message_print_messages(sender_uuid, message_timestamp,
                                          message_body):
    """Print one private message of a conversation."""
    return _emit(
        f'[{_time_text(message_timestamp)}] {sender_uuid}: "{message_body}"'
    )