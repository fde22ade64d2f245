"""Reading and writing the server database as a sectioned text file."""

import dataclasses
from dataclasses import dataclass

from .records import Channel, Message, Team, TeamLink, Thread, ThreadReply, User
from .server_events import server_event_user_loaded

__all__ = [
    "DEFAULT_PATH",
    "get_data",
    "dump_database",
    "load_database_from",
    "open_database",
    "save_database_to_file",
    "describe_database",
]

DEFAULT_PATH = "./storage/TeamsDatabase.db"


@dataclass(frozen=True)
class _Table:
    header: str
    title: str
    attr: str
    record: type
    labels: tuple


# Sections in the order they are written to the file.
_TABLES = (
    _Table("TEAMS", "Teams", "teams", Team, ("TEAM_NAME", "TEAM_UUID")),
    _Table("CHANNELS", "Channels", "channels", Channel,
           ("CHANNEL_NAME", "CHANNEL_UUID", "TEAM_UUID")),
    _Table("THREADS", "Threads", "threads", Thread,
           ("THREAD_NAME", "THREAD_UUID", "CHANNEL_UUID")),
    _Table("THREADS_REPLY", "Threads Replies", "thread_replies", ThreadReply,
           ("REPLY_BODY", "REPLY_UUID", "TIMESTAMP", "SENDER_UUID",
            "THREADS_UUID")),
    _Table("USERS", "Users", "users", User,
           ("USER_NAME", "USER_UUID", "USER_STATUS")),
    _Table("MESSAGES", "Messages", "messages", Message,
           ("MESSAGE_BODY", "MESSAGE_UUID", "TIMESTAMP", "SENDER_UUID",
            "RECEIVER_UUID")),
    _Table("TEAMS_LINK", "Teams Links", "team_links", TeamLink,
           ("TEAM_UUID", "USER_UUID")),
)

# Describe output lists the tables in this order.
_DESCRIBE_ORDER = ("teams", "channels", "threads", "thread_replies", "users",
                   "messages", "team_links")

_BY_HEADER = {f"[{table.header}]": table for table in _TABLES}


def get_data(line, data_id):
    """Return the quoted field number data_id of a '{"a","b",...}' row.

    Commas inside quotes do not separate fields. Raises ValueError when the
    row has no such field.
    """
    if data_id < 0:
        raise ValueError("field number must not be negative")
    start = 0
    if data_id:
        in_data = False
        seen = 0
        for index, char in enumerate(line):
            if char == '"':
                in_data = not in_data
            elif char == "," and not in_data:
                seen += 1
                if seen == data_id:
                    start = index + 1
                    break
        else:
            raise ValueError(f"row has no field {data_id}: {line!r}")
    opening = line.find('"', start)
    if opening == -1:
        raise ValueError(f"row has no field {data_id}: {line!r}")
    closing = line.find('"', opening + 1)
    if closing == -1:
        raise ValueError(f"unterminated field {data_id}: {line!r}")
    return line[opening + 1:closing]


def _format_row(record):
    values = dataclasses.astuple(record)
    return "{" + ",".join(f'"{value}"' for value in values) + "}\n"


def dump_database(database, stream):
    """Write every table of the database to a text stream."""
    for table in _TABLES:
        rows = getattr(database, table.attr)
        stream.write(f"[{table.header}]\n")
        stream.write(f"{len(rows)}\n")
        stream.writelines(_format_row(row) for row in rows)
        stream.write("\n")


def _parse_row(table, line):
    count = len(dataclasses.fields(table.record))
    return table.record(*(get_data(line, index) for index in range(count)))


def _read_section(table, lines):
    # The count line only sized the table; the rows themselves decide it.
    next(lines, None)
    rows = []
    for line in lines:
        if line == "\n":
            break
        if line.startswith("{"):
            rows.append(_parse_row(table, line))
    return rows


def load_database_from(database, stream):
    """Fill the database from a text stream, replacing the tables it holds.

    Tables absent from the stream are left as they are. Each loaded user
    is reported as a server event. Raises ValueError on a malformed row.
    """
    lines = iter(stream)
    for line in lines:
        table = _BY_HEADER.get(line.rstrip("\n")) if line.endswith("\n") else None
        if table is None:
            continue
        rows = _read_section(table, lines)
        setattr(database, table.attr, rows)
        if table.record is User:
            for user in rows:
                server_event_user_loaded(user.uuid, user.name)
    return database


def open_database(database, path=DEFAULT_PATH):
    """Load the database from a file; return False if it cannot be opened."""
    try:
        stream = open(path, "r", encoding="utf-8")
    except OSError:
        return False
    with stream:
        load_database_from(database, stream)
    return True


def save_database_to_file(database, path=DEFAULT_PATH):
    """Write the database to a file; return False if it cannot be opened."""
    try:
        stream = open(path, "w", encoding="utf-8")
    except OSError:
        return False
    with stream:
        dump_database(database, stream)
    return True


def describe_database(database):
    """Return a readable listing of every table and record."""
    by_attr = {table.attr: table for table in _TABLES}
    parts = []
    for position, attr in enumerate(_DESCRIBE_ORDER):
        table = by_attr[attr]
        prefix = "" if position == 0 else "\n"
        parts.append(f"{prefix}---------- [{table.title}] ----------\n")
        for record in getattr(database, attr):
            parts.append("-\n")
            for label, value in zip(table.labels, dataclasses.astuple(record)):
                parts.append(f"{label}:\t{value}\n")
    return "".join(parts)