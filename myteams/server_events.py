"""Events the server reports on its standard output."""

import sys

__all__ = [
    "server_event_team_created",
    "server_event_channel_created",
    "server_event_thread_created",
    "server_event_reply_created",
    "server_event_user_subscribed",
    "server_event_user_unsubscribed",
    "server_event_user_created",
    "server_event_user_loaded",
    "server_event_user_logged_in",
    "server_event_user_logged_out",
    "server_event_private_message_sended",
]


def _emit(line):
    sys.stdout.write(line + "\n")
    sys.stdout.flush()
    return line


def server_event_team_created(team_uuid, team_name, user_uuid):
    """Report that a user created a team."""
    return _emit(f'Team "{team_name}" ({team_uuid}) created by {user_uuid}')


def server_event_channel_created(team_uuid, channel_uuid, channel_name):
    """Report that a channel was created inside a team."""
    return _emit(
        f'Channel "{channel_name}" ({channel_uuid}) created in team {team_uuid}'
    )


def server_event_thread_created(channel_uuid, thread_uuid, user_uuid,
                                thread_title, thread_body):
    """Report that a user created a thread inside a channel."""
    return _emit(
        f'Thread "{thread_title}" ({thread_uuid}) created by {user_uuid} '
        f'in channel {channel_uuid}: "{thread_body}"'
    )


def server_event_reply_created(thread_uuid, user_uuid, reply_body):
    """Report that a user replied in a thread."""
    return _emit(
        f'Reply by {user_uuid} in thread {thread_uuid}: "{reply_body}"'
    )


def server_event_user_subscribed(team_uuid, user_uuid):
    """Report that a user subscribed to a team."""
    return _emit(f"User {user_uuid} subscribed to team {team_uuid}")


def server_event_user_unsubscribed(team_uuid, user_uuid):
    """Report that a user unsubscribed from a team."""
    return _emit(f"User {user_uuid} unsubscribed from team {team_uuid}")


def server_event_user_created(user_uuid, user_name):
    """Report that a new user was created."""
    return _emit(f'User "{user_name}" ({user_uuid}) created')


def server_event_user_loaded(user_uuid, user_name):
    """Report that a user was loaded from the save file."""
    return _emit(f'User "{user_name}" ({user_uuid}) loaded')


def server_event_user_logged_in(user_uuid):
    """Report that a user logged in."""
    return _emit(f"User {user_uuid} logged in")


def server_event_user_logged_out(user_uuid):
    """Report that a user logged out or lost the connection."""
    return _emit(f"User {user_uuid} logged out")


def server_event_private_message_sended(sender_uuid, receiver_uuid,
                                        message_body):
    """Report a private message sent from one user to another."""
    return _emit(
        f'Message from {sender_uuid} to {receiver_uuid}: "{message_body}"'
    )