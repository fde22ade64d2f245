"""In-memory tables of the server and lookups over them."""

from dataclasses import dataclass, field

from .records import Channel, Message, Team, TeamLink, Thread, ThreadReply, User

__all__ = ["Database"]


def _first(items, predicate):
    return next((item for item in items if predicate(item)), None)


@dataclass
class Database:
    """All tables of the server; lookups return None when nothing matches."""

    teams: list = field(default_factory=list)
    channels: list = field(default_factory=list)
    threads: list = field(default_factory=list)
    thread_replies: list = field(default_factory=list)
    users: list = field(default_factory=list)
    messages: list = field(default_factory=list)
    team_links: list = field(default_factory=list)

    def get_channel_by_uuid(self, uuid) -> Channel | None:
        """Return the channel with this uuid."""
        return _first(self.channels, lambda c: c.uuid == uuid)

    def get_message_by_uuid(self, uuid) -> Message | None:
        """Return the message with this uuid."""
        return _first(self.messages, lambda m: m.uuid == uuid)

    def get_message_by_sender_uuid(self, uuid) -> Message | None:
        """Return the first message sent by this user."""
        return _first(self.messages, lambda m: m.sender_uuid == uuid)

    def get_message_by_receiver_uuid(self, uuid) -> Message | None:
        """Return the first message received by this user."""
        return _first(self.messages, lambda m: m.receiver_uuid == uuid)

    def get_subscribed_teams_uuids(self, uuid):
        """Return the uuids of the teams a user is subscribed to, in order."""
        return [link.team_uuid for link in self.team_links
                if link.user_uuid == uuid]

    def get_team_subscribers_uuids(self, uuid):
        """Return the uuids of the users subscribed to a team, in order."""
        return [link.user_uuid for link in self.team_links
                if link.team_uuid == uuid]

    def get_team_by_uuid(self, uuid) -> Team | None:
        """Return the team with this uuid."""
        return _first(self.teams, lambda t: t.uuid == uuid)

    def get_thread_by_uuid(self, uuid) -> Thread | None:
        """Return the thread with this uuid."""
        return _first(self.threads, lambda t: t.uuid == uuid)

    def get_thread_reply_by_uuid(self, uuid) -> ThreadReply | None:
        """Return the thread reply with this uuid."""
        return _first(self.thread_replies, lambda r: r.uuid == uuid)

    def get_thread_replies(self, thread_uuid):
        """Return the uuids of the replies posted in a thread, in order."""
        return [reply.uuid for reply in self.thread_replies
                if reply.thread_uuid == thread_uuid]

    def get_user_by_name(self, username) -> User | None:
        """Return the user with this name."""
        return _first(self.users, lambda u: u.name == username)

    def get_user_by_uuid(self, uuid) -> User | None:
        """Return the user with this uuid."""
        return _first(self.users, lambda u: u.uuid == uuid)

    def add_channel(self, channel):
        """Append a channel."""
        self.channels.append(channel)

    def add_message(self, message):
        """Append a message."""
        self.messages.append(message)

    def add_team_link(self, team_link: TeamLink):
        """Append a subscription of a user to a team."""
        self.team_links.append(team_link)

    def add_team(self, team):
        """Append a team."""
        self.teams.append(team)

    def add_thread_reply(self, thread_reply):
        """Append a thread reply."""
        self.thread_replies.append(thread_reply)

    def add_thread(self, thread):
        """Append a thread."""
        self.threads.append(thread)

    def add_user(self, user):
        """Append a user."""
        self.users.append(user)

    def set_user_status(self, uuid, status):
        """Set the status of the first user with this uuid; others are untouched."""
        found = self.get_user_by_uuid(uuid)
        if found is not None:
            found.status = str(status)