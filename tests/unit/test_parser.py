"""Unit tests for single-pass argument parsing against the flag schema."""

import dataclasses

import pytest

from mock_server.options.errors import MalformedArguments
from mock_server.options.flags import FLAGS, FLAGS_BY_NAME
from mock_server.options.parser import (
    FlagState,
    ParsedOptionSet,
    format_usage,
    parse_arguments,
)


def test_empty_arguments_leave_every_flag_absent() -> None:
    """Nothing supplied means nothing present."""
    parsed = parse_arguments([])

    for flag in FLAGS:
        assert parsed.flag(flag.name).state is FlagState.ABSENT
        assert not parsed.has(flag.name)


def test_switch_is_present_without_value() -> None:
    """Value-less flags record presence only."""
    parsed = parse_arguments(["--verbose", "--record-mappings"])

    assert parsed.flag("verbose").state is FlagState.PRESENT_NO_VALUE
    assert parsed.has("record-mappings")
    assert not parsed.has_argument("verbose")
    assert parsed.values_of("verbose") == ()


def test_required_value_accepts_separate_and_inline_forms() -> None:
    """Both ``--flag value`` and ``--flag=value`` are understood."""
    separate = parse_arguments(["--port", "9999"])
    inline = parse_arguments(["--port=9999"])

    assert separate.flag("port").state is FlagState.PRESENT_WITH_VALUE
    assert separate.value_of("port") == "9999"
    assert inline.value_of("port") == "9999"


def test_repeated_flag_keeps_every_value_in_order() -> None:
    """Repeated flags expose all values; single-value reads take the last."""
    parsed = parse_arguments(["--port", "1000", "--port", "2000"])

    assert parsed.values_of("port") == ("1000", "2000")
    assert parsed.value_of("port") == "2000"


def test_optional_value_flag_given_bare_falls_back_to_default() -> None:
    """A bare optional-value flag is present but reads its schema default."""
    parsed = parse_arguments(["--https-keystore-pass", "--verbose"])

    assert parsed.flag("https-keystore-pass").state is FlagState.PRESENT_NO_VALUE
    assert parsed.value_of("https-keystore-pass") == "password"
    assert parsed.has("verbose")


def test_optional_value_flag_with_value() -> None:
    """An optional-value flag followed by a value captures it."""
    parsed = parse_arguments(["--https-need-client-auth", "true"])

    assert parsed.flag("https-need-client-auth").has_value
    assert parsed.value_of("https-need-client-auth") == "true"


def test_absent_flags_read_schema_defaults() -> None:
    """Defaults apply on read, not at parse time."""
    parsed = parse_arguments([])

    assert parsed.value_of("root-dir") == "."
    assert parsed.value_of("https-truststore-pass") == "password"
    assert parsed.value_of("https-need-client-auth") == "false"
    assert parsed.value_of("port") is None
    assert not parsed.has("root-dir")


@pytest.mark.parametrize(
    "argv",
    [
        ["--unknown"],
        ["positional"],
        ["--port"],
        ["--port", "--verbose"],
        ["--verbose=yes"],
        ["--verb"],
        ["-p", "80"],
        ["--", "--port", "80"],
    ],
)
def test_malformed_arguments_are_rejected(argv: list[str]) -> None:
    """Unknown flags, stray tokens and missing or extra values fail fast."""
    with pytest.raises(MalformedArguments):
        parse_arguments(argv)


def test_unknown_flag_message_names_the_token() -> None:
    """The error message points at the offending argument."""
    with pytest.raises(MalformedArguments, match="--bogus"):
        parse_arguments(["--port", "80", "--bogus"])


def test_undeclared_flag_lookup_raises_key_error() -> None:
    """Only declared flag names can be queried."""
    parsed = parse_arguments([])

    with pytest.raises(KeyError):
        parsed.has("not-a-flag")


def test_parsed_option_set_is_immutable() -> None:
    """Neither the set nor its mapping can be changed after parsing."""
    parsed = parse_arguments(["--verbose"])

    with pytest.raises(dataclasses.FrozenInstanceError):
        parsed.flags = {}  # type: ignore[misc]
    with pytest.raises(TypeError):
        parsed.flags["verbose"] = None  # type: ignore[index]


def test_partial_mapping_is_completed_with_absent_flags() -> None:
    """Hand-built option sets still answer for every declared flag."""
    parsed = ParsedOptionSet({})

    assert set(parsed.flags) == set(FLAGS_BY_NAME)
    assert not parsed.has("help")


def test_usage_lists_every_flag_with_description() -> None:
    """Usage text is generated from the schema."""
    usage = format_usage()

    for flag in FLAGS:
        assert flag.option_string in usage
    assert "Enable verbose logging to stdout" in usage
    assert format_usage() == usage
