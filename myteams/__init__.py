"""Records, in-memory database, text storage, line parsing and event output for team chat."""

__version__ = "0.1.0"

__all__ = [
    "client_events",
    "database",
    "parsing",
    "records",
    "server_events",
    "storage",
]