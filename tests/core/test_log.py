from __future__ import annotations

import pytest

from mcp_logline_server.core.logline import MAX_ATTRIBUTES, Borrowed, Log, Owned, UnclosedString, parse


def test_message_with_attributes() -> None:
    log = parse('this is foo=bar duration=10 a value="with spaces" message')
    assert log.message() == "this is a message"
    assert log.attributes() == (
        ("foo", "bar"),
        ("duration", "10"),
        ("value", '"with spaces"'),
    )
    assert isinstance(log.text, Owned)


def test_message_with_override() -> None:
    log = parse('this is foo=bar a duration=10 message message="I am a message"')
    assert log.message() == '"I am a message"'
    assert log.attributes() == (("foo", "bar"), ("duration", "10"))
    assert log.message_overridden


def test_attributes_only_reuses_input() -> None:
    line = "foo=bar duration=100"
    log = parse(line)
    assert log.message() == line
    assert log.attributes() == (("foo", "bar"), ("duration", "100"))
    assert log.borrowed
    assert log.text == Borrowed(line)


@pytest.mark.parametrize(
    ("request_line", "attributes"),
    [
        (
            'baseUrl="/" hostname=localhost protocol=http',
            (("baseUrl", '"/"'), ("hostname", "localhost"), ("protocol", "http")),
        ),
        (
            'baseUrl="/" hostname=localhost protocol=http name=matthew',
            (
                ("baseUrl", '"/"'),
                ("hostname", "localhost"),
                ("protocol", "http"),
                ("name", "matthew"),
            ),
        ),
    ],
)
def test_web_requests(request_line: str, attributes: tuple[tuple[str, str], ...]) -> None:
    log = parse(request_line)
    assert log.message() == request_line
    assert log.attributes() == attributes


def test_words_collapse_whitespace() -> None:
    assert parse("  hello   world\tagain  ").message() == "hello world again"


@pytest.mark.parametrize("line", ["", "   "])
def test_blank_input_passes_through(line: str) -> None:
    log = parse(line)
    assert log.message() == line
    assert log.attributes() == ()


def test_duplicate_key_updates_in_place() -> None:
    log = parse("a=1 b=2 a=3")
    assert log.attributes() == (("a", "3"), ("b", "2"))
    assert log.message() == "a=1 b=2 a=3"


def test_override_last_wins() -> None:
    assert parse("msg=first message=second").message() == "second"


def test_override_discards_later_words() -> None:
    log = parse("before msg=hello after words")
    assert log.message() == "hello"
    assert log.attributes() == ()


def test_quoted_message_key() -> None:
    log = parse('level=info "msg"="hello world"')
    assert log.message() == '"hello world"'
    assert log.attributes() == (("level", "info"),)


def test_message_keys_are_exact_match() -> None:
    log = parse("MSG=hi Message=there")
    assert log.attributes() == (("MSG", "hi"), ("Message", "there"))
    assert not log.message_overridden


def test_malformed_attribute_joins_message() -> None:
    log = parse("oops ke/y=1 ok=2")
    assert log.message() == "oops ke/y=1"
    assert log.attributes() == (("ok", "2"),)


def test_capacity_cap(many_attributes) -> None:
    log = parse(many_attributes(MAX_ATTRIBUTES + 1))
    assert len(log.attributes()) == MAX_ATTRIBUTES
    assert log.attributes()[-1] == ("k24", "v24")
    assert log.message() == "k25=v25"


def test_capacity_cap_diverts_existing_key(many_attributes) -> None:
    log = parse(many_attributes(MAX_ATTRIBUTES) + " k0=changed")
    assert dict(log.attributes())["k0"] == "v0"
    assert log.message() == "k0=changed"


def test_capacity_overflow_dropped_after_override(many_attributes) -> None:
    log = parse("msg=done " + many_attributes(MAX_ATTRIBUTES + 2))
    assert log.message() == "done"
    assert len(log.attributes()) == MAX_ATTRIBUTES


def test_message_key_ignored_at_capacity(many_attributes) -> None:
    log = parse(many_attributes(MAX_ATTRIBUTES) + " msg=late")
    assert log.message() == "msg=late"
    assert not log.message_overridden


def test_unclosed_string_fails_whole_parse() -> None:
    with pytest.raises(UnclosedString) as exc_info:
        parse('foo=bar words value="never closed')
    assert exc_info.value.offset == 14


def test_quotes_balanced_across_tokens_parse() -> None:
    log = parse('say "hello there" now')
    assert log.message() == 'say "hello there" now'


def test_parse_is_deterministic() -> None:
    line = 'a b=1 c "d e" msg=x f=2'
    assert parse(line) == parse(line)


def test_log_parse_classmethod() -> None:
    line = "x=1 hello"
    assert Log.parse(line) == parse(line)


def test_information_separator_stays_in_word() -> None:
    assert parse("a\x1fb").message() == "a\x1fb"


def test_empty_override_falls_back_to_input() -> None:
    line = "hello msg="
    log = parse(line)
    assert log.message() == line
    assert log.borrowed
    assert log.message_overridden
    assert log.attributes() == ()


def test_empty_key_is_attribute() -> None:
    log = parse("=v")
    assert log.attributes() == (("", "v"),)
    assert log.message() == "=v"
