"""Records held by the server database, and their wire forms."""

import uuid
from dataclasses import dataclass

__all__ = [
    "Team",
    "Channel",
    "Thread",
    "ThreadReply",
    "User",
    "Message",
    "TeamLink",
    "create_uuid",
    "stringify_user",
    "stringify_message",
]


@dataclass
class Team:
    name: str
    uuid: str


@dataclass
class Channel:
    name: str
    uuid: str
    team_uuid: str


@dataclass
class Thread:
    name: str
    uuid: str
    channel_uuid: str


@dataclass
class ThreadReply:
    body: str
    uuid: str
    timestamp: str
    sender_uuid: str
    thread_uuid: str


@dataclass
class User:
    name: str
    uuid: str
    status: str = "0"


@dataclass
class Message:
    body: str
    uuid: str
    timestamp: str
    sender_uuid: str
    receiver_uuid: str


@dataclass
class TeamLink:
    team_uuid: str
    user_uuid: str


def create_uuid():
    """Return a new random uuid in its 36-character text form."""
    return str(uuid.uuid4())


def _quoted(*fields):
    return " ".join(f'"{field}"' for field in fields)


def stringify_user(user):
    """Return '"uuid" "name" "status"' for a user."""
    return _quoted(user.uuid, user.name, user.status)


def stringify_message(message):
    """Return '"uuid" "body" "timestamp" "sender" "receiver"' for a message."""
    return _quoted(
        message.uuid,
        message.body,
        message.timestamp,
        message.sender_uuid,
        message.receiver_uuid,
    )