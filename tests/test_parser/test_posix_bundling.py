import pytest

from argscan.exceptions import MissingArgumentError, UnknownOptionError
from argscan.parser import Option, OptionType, ParseResult, parse_args
from argscan.parser.bundling import expand_short_group
from argscan.parser.tokens import Token, TokenKind


def test_group_of_booleans():
    """Test the bundling of boolean short options."""
    options = {"r": {"type": "boolean"}, "f": {"type": "boolean"}}
    result = parse_args(["-rf", "p"], options)
    assert result == ParseResult(values={"r": True, "f": True}, positionals=["p"])


def test_group_of_booleans_by_alias():
    options = {
        "recursive": {"type": "boolean", "short": "r"},
        "force": {"type": "boolean", "short": "f"},
    }
    result = parse_args(["-rf"], options)
    assert result.values == {"recursive": True, "force": True}
    assert result.positionals == []


def test_group_with_string_option_last_takes_next_argument():
    """Test the bundling of short options with the last option taking a value."""
    options = {"r": {"type": "boolean"}, "f": {"type": "string"}}
    result = parse_args(["-rf", "p"], options)
    assert result == ParseResult(values={"r": True, "f": "p"}, positionals=[])


def test_group_with_string_option_in_middle_lenient():
    options = {"f": {"type": "string"}}
    result = parse_args(["-afb", "p"], options, strict=False)
    assert result == ParseResult(values={"a": True, "f": "b"}, positionals=["p"])


def test_group_with_string_option_in_middle_strict():
    options = {"a": {"type": "boolean"}, "f": {"type": "string"}}
    with pytest.raises(MissingArgumentError) as excinfo:
        parse_args(["-afb", "p"], options)
    assert "--f <value>" in str(excinfo.value)


def test_string_option_first_in_group_takes_rest_as_value():
    options = {
        "file": {"type": "string", "short": "f"},
        "all": {"type": "boolean", "short": "a"},
    }
    result = parse_args(["-fab"], options)
    assert result.values == {"file": "ab"}


def test_group_unknown_option_strict():
    options = {"r": {"type": "boolean"}}
    with pytest.raises(UnknownOptionError) as excinfo:
        parse_args(["-rx"], options)
    assert excinfo.value.option == "-x"


def test_group_dash_inside_strict():
    with pytest.raises(UnknownOptionError) as excinfo:
        parse_args(["-a-b"], {"a": {"type": "boolean"}})
    assert excinfo.value.option == "-a-b"


def test_group_with_digit_lenient():
    result = parse_args(["-a5", "x"], strict=False)
    assert result == ParseResult(values={"a": True, "5": True}, positionals=["x"])


def test_group_with_dash_lenient_is_not_a_terminator():
    result = parse_args(["-a-b", "x", "-c"], strict=False)
    assert result == ParseResult(
        values={"a": True, "-": True, "b": True, "c": True}, positionals=["x"]
    )


def test_group_ending_in_string_option_without_value_lenient():
    options = {"f": {"type": "string"}}
    result = parse_args(["-af"], options, strict=False)
    assert result.values == {"a": True, "f": True}


def test_zero_config_group_lenient():
    result = parse_args(["-abc"], strict=False)
    assert result.values == {"a": True, "b": True, "c": True}


def test_repeated_group_is_idempotent_for_booleans():
    options = {"verbose": {"type": "boolean", "short": "v"}}
    assert parse_args(["-vv"], options).values == {"verbose": True}


def test_expand_short_group():
    options = {"f": Option(OptionType.STRING), "a": Option(OptionType.BOOLEAN)}
    expanded = expand_short_group("abc", {}, strict=False)
    assert [token.raw for token in expanded] == ["-a", "-b", "-c"]
    assert {token.kind for token in expanded} == {TokenKind.LONE_SHORT_OPTION}

    expanded = expand_short_group("af", options, strict=True)
    assert [token.raw for token in expanded] == ["-a", "-f"]

    assert expand_short_group("afbc", options, strict=False) == [
        Token(TokenKind.LONE_SHORT_OPTION, "-a", "a"),
        Token(TokenKind.SHORT_OPTION_AND_VALUE, "-fbc", "f", "bc"),
    ]


def test_expand_short_group_keeps_digits_and_dashes_as_options():
    assert expand_short_group("a5-", {}, strict=False) == [
        Token(TokenKind.LONE_SHORT_OPTION, "-a", "a"),
        Token(TokenKind.LONE_SHORT_OPTION, "-5", "5"),
        Token(TokenKind.LONE_SHORT_OPTION, "--", "-"),
    ]


def test_expand_short_group_strict_errors():
    options = {"f": Option(OptionType.STRING), "a": Option(OptionType.BOOLEAN)}
    with pytest.raises(UnknownOptionError):
        expand_short_group("ab", options, strict=True)
    with pytest.raises(MissingArgumentError):
        expand_short_group("afb", options, strict=True)
