import pytest

from myteams.parsing import ParseError, parse_command, parse_response, split_str


def test_plain_words():
    assert parse_command("/users") == ["/users"]
    assert parse_command("/user abc") == ["/user", "abc"]


def test_quoted_words_keep_spaces():
    assert parse_command('/send "u-1" "hello there"') == [
        "/send",
        "u-1",
        "hello there",
    ]


def test_empty_line_has_no_words():
    assert parse_command("") == []
    assert parse_response("") == []


def test_leading_spaces_are_skipped():
    assert parse_command('   /login "bob"') == ["/login", "bob"]


def test_double_trailing_space_gives_empty_word():
    assert parse_command("/users  ") == ["/users", ""]


def test_single_trailing_space_is_dropped():
    assert parse_command("/users ") == ["/users"]


def test_unterminated_quote_is_an_error():
    with pytest.raises(ParseError):
        parse_command('/login "bob')
    with pytest.raises(ParseError):
        parse_response('300 "uuid')


def test_server_rejects_too_many_words():
    assert len(parse_command("a b c d e")) == 5
    with pytest.raises(ParseError):
        parse_command("a b c d e f")


def test_response_has_no_word_limit():
    words = parse_response(" ".join(f'"{n}"' for n in range(30)))
    assert words == [str(n) for n in range(30)]


def test_response_keeps_trailing_newline_word():
    words = parse_response('300 "u-1" "alice"\n')
    assert words[:3] == ["300", "u-1", "alice"]
    assert words[3] == "\n"


def test_text_after_nul_is_ignored():
    assert parse_command("/help\0/users") == ["/help"]


def test_split_str_keeps_empty_fields():
    assert split_str("a,,b", ",") == ["a", "", "b"]
    assert split_str("", ",") == [""]


@pytest.mark.parametrize("text", ["a b c", " lead", "trail ", "x  y", "none"])
def test_split_str_round_trip(text):
    parts = split_str(text, " ")
    assert " ".join(parts) == text
    assert len(parts) == text.count(" ") + 1


def test_split_str_rejects_long_separator():
    with pytest.raises(ValueError):
        split_str("a,b", ",,")