"""Tests for immediate subcommand extraction."""

import pytest

from helena_argparser.subcommand import subcommand


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["prog", "build"], "build"),
        (["prog", "-h"], None),
        (["prog", "-o", "out.txt", "build"], "build"),
        (["prog"], None),
        ([], None),
    ],
)
def test_basic_cases(argv, expected):
    assert subcommand(argv) == expected


def test_first_positional_wins():
    assert subcommand(["prog", "build", "lex"]) == "build"


def test_option_consumes_following_token():
    """Every option is assumed to take the next token as its argument."""
    assert subcommand(["prog", "-v", "build"]) is None


def test_option_consumes_following_token_then_subcommand():
    assert subcommand(["prog", "-v", "build", "lex"]) == "lex"


def test_consecutive_options():
    assert subcommand(["prog", "-v", "-o", "out.txt", "build"]) == "build"


def test_long_option_with_inline_value_still_consumes_next():
    assert subcommand(["prog", "--output=out.txt", "x", "build"]) == "build"


def test_leading_whitespace_is_trimmed():
    assert subcommand(["prog", "   build"]) == "build"
    assert subcommand(["prog", "\t-o", "out.txt", " build"]) == "build"


def test_blank_tokens_are_skipped():
    assert subcommand(["prog", "", "   ", "build"]) == "build"


def test_blank_token_still_occupies_a_position():
    """A skipped blank between an option and a token breaks the adjacency."""
    assert subcommand(["prog", "-o", "", "build"]) == "build"


def test_none_tokens_are_skipped():
    assert subcommand(["prog", None, "build"]) == "build"


def test_double_dash_is_an_option():
    assert subcommand(["prog", "--", "build", "lex"]) == "lex"


def test_argv_is_not_modified():
    argv = ["prog", "  build"]

    subcommand(argv)

    assert argv == ["prog", "  build"]
