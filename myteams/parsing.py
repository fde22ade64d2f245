"""Splitting of command and reply lines into words."""

__all__ = ["ParseError", "parse_command", "parse_response", "split_str"]

# The server keeps room for at most this many words in one command.
_SERVER_MAX_WORDS = 5


class ParseError(ValueError):
    """Raised when a line cannot be split into words."""


def _tokens(text):
    """Yield the words of a line.

    Words are separated by single spaces; a word opening with a double quote
    runs up to the next double quote and may hold spaces. Text after a NUL
    character is ignored.
    """
    text = text.split("\0", 1)[0]
    length = len(text)
    pos = 0
    while pos < length:
        while pos < length and text[pos] == " ":
            pos += 1
        if pos < length and text[pos] == '"':
            pos += 1
            end = text.find('"', pos)
            if end == -1:
                raise ParseError("missing closing quote")
        else:
            end = text.find(" ", pos)
            if end == -1:
                end = length
        yield text[pos:end]
        pos = end + 1


def parse_command(text):
    """Split a command received by the server into its words.

    Raises ParseError on an unterminated quote or when the command holds
    more words than the server accepts.
    """
    words = []
    for word in _tokens(text):
        words.append(word)
        if len(words) > _SERVER_MAX_WORDS:
            raise ParseError(
                f"too many arguments: at most {_SERVER_MAX_WORDS} words"
            )
    return words


def parse_response(text):
    """Split a reply received by the client into its words.

    Raises ParseError on an unterminated quote.
    """
    try:
        return list(_tokens(text))
    except ParseError as exc:
        raise ParseError(f"Error: {exc}") from None


def split_str(text, separator):
    """Split text on every occurrence of a one-character separator.

    Empty fields between adjacent separators are kept.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return text.split(separator)