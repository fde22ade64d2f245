# myteams

Building blocks for a small team chat system: the records it stores (teams,
channels, threads, replies, users, private messages and team subscriptions),
an in-memory database over them, a plain-text file format to load and save
that database, a splitter for quoted command lines, and the event lines that
the server and the client report on standard output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `myteams.records`

Dataclasses `Team`, `Channel`, `Thread`, `ThreadReply`, `User`, `Message`
and `TeamLink`. A `User` has a `status` field that defaults to `"0"`.

- `create_uuid()` returns a new random uuid as a 36-character string.
- `stringify_user(user)` returns `"uuid" "name" "status"`.
- `stringify_message(message)` returns
  `"uuid" "body" "timestamp" "sender_uuid" "receiver_uuid"`.

### `myteams.database`

`Database` is a dataclass holding one list per table: `teams`, `channels`,
`threads`, `thread_replies`, `users`, `messages` and `team_links`.

- `add_team`, `add_channel`, `add_thread`, `add_thread_reply`, `add_user`,
  `add_message` and `add_team_link` append a record.
- `get_team_by_uuid`, `get_channel_by_uuid`, `get_thread_by_uuid`,
  `get_thread_reply_by_uuid`, `get_user_by_uuid`, `get_user_by_name`,
  `get_message_by_uuid`, `get_message_by_sender_uuid` and
  `get_message_by_receiver_uuid` return the first matching record, or `None`.
- `get_subscribed_teams_uuids(user_uuid)`,
  `get_team_subscribers_uuids(team_uuid)` and
  `get_thread_replies(thread_uuid)` return lists of uuids in table order.
- `set_user_status(uuid, status)` changes the status of the first user with
  that uuid.

```python
from myteams.database import Database
from myteams.records import User, create_uuid

db = Database()
db.add_user(User("alice", create_uuid(), "1"))
print(db.get_user_by_name("alice"))
```

### `myteams.storage`

The database file is a list of sections, each a header line such as
`[USERS]`, a line with the row count, one `{"field","field",...}` line per
record, and a blank line. Sections are written in the order `TEAMS`,
`CHANNELS`, `THREADS`, `THREADS_REPLY`, `USERS`, `MESSAGES`, `TEAMS_LINK`.

- `dump_database(database, stream)` writes every table to a text stream.
- `load_database_from(database, stream)` replaces the tables found in the
  stream, leaves the others alone, and reports each loaded user with
  `server_event_user_loaded`. A malformed row raises `ValueError`.
- `open_database(database, path)` and `save_database_to_file(database, path)`
  do the same with a file; `path` defaults to `DEFAULT_PATH`,
  `./storage/TeamsDatabase.db`. Both return `False` if the file cannot be
  opened, `True` otherwise.
- `get_data(line, data_id)` returns one quoted field of a row.
- `describe_database(database)` returns a readable listing of every record.

### `myteams.parsing`

- `parse_command(text)` splits a command line into words. Words are separated
  by spaces; a word in double quotes may hold spaces. An unterminated quote,
  or more than five words, raises `ParseError` (a `ValueError`).
- `parse_response(text)` splits a reply line the same way, with no limit on
  the number of words.
- `split_str(text, separator)` splits on a one-character separator, keeping
  empty fields.

```python
from myteams.parsing import parse_command

parse_command('/send "1234" "hello there"')
# ['/send', '1234', 'hello there']
```

### `myteams.server_events` and `myteams.client_events`

Functions such as `server_event_user_created`, `server_event_user_logged_in`,
`server_event_private_message_sended`, `client_event_logged_in`,
`client_print_users` and `client_error_unknown_user` each write one line to
standard output and return that line.

## What this package does not do

The package has no network code and installs no commands: there is no chat
server to listen on a port, no terminal client to connect to one, no handling
of `/login`, `/send` and the other chat commands, and no table of reply
status codes. It provides the storage, data model, parsing and event output
that such programs would be built on.