"""Tests for splitting path expressions into keys and rendering them back."""

import pytest

from pathwalk import GrammarError, format_path, parse


def test_parse_splits_dotted_names() -> None:
    assert parse("a.b.c") == ["a", "b", "c"]
    assert parse("abc123") == ["abc123"]


def test_parse_splits_index_brackets() -> None:
    assert parse("a[0].b") == ["a", "0", "b"]
    assert parse("a[0][12]") == ["a", "0", "12"]


def test_parse_strips_quotes_from_bracket_keys() -> None:
    assert parse('a["x-y"]') == ["a", "x-y"]
    assert parse("a['x-y']") == ["a", "x-y"]
    assert parse('user.addresses[0]["zip code"].line_1') == [
        "user",
        "addresses",
        "0",
        "zip code",
        "line_1",
    ]


def test_parse_empty_path_is_self_reference() -> None:
    assert parse("") == [""]


def test_parse_leading_bracket_starts_with_self_reference() -> None:
    assert parse("[0]") == ["", "0"]


@pytest.mark.parametrize("path", [".a", "a.1", "a[abc]", 'a["1b"]', "a]"])
def test_parse_rejects_invalid_paths(path: str) -> None:
    with pytest.raises(GrammarError):
        parse(path)


def test_parse_rejects_leading_dot_at_position_zero() -> None:
    with pytest.raises(GrammarError) as excinfo:
        parse(".a")
    assert excinfo.value.index == 0


def test_format_path_renders_each_key_kind() -> None:
    assert format_path(["a", "0", "x-y", "b"]) == 'a[0]["x-y"].b'
    assert format_path(["config", "seed"]) == "config.seed"


def test_format_path_self_reference() -> None:
    assert format_path([""]) == ""
    assert format_path([]) == ""


def test_format_path_leaves_digit_leading_first_key_bare() -> None:
    assert parse("123") == ["123"]
    assert format_path(["123"]) == "123"
    assert format_path(["1b", "c", "0"]) == "1b.c[0]"


@pytest.mark.parametrize(
    "keys",
    [
        ["x-y"],
        ["a", ""],
        ["a", "b.c"],
        ["a", "1b"],
        ["a", "it's"],
        ["a", 'say "hi"'],
    ],
)
def test_format_path_rejects_inexpressible_keys(keys: list[str]) -> None:
    with pytest.raises(ValueError):
        format_path(keys)


def test_format_path_rejects_plain_string() -> None:
    with pytest.raises(TypeError):
        format_path("a.b")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "keys",
    [
        ["a"],
        ["a", "b", "c"],
        ["_x", "y_1", "Z"],
        ["deps", "3", "name"],
        ["a", "x-y", "0", "b c"],
        ["123"],
        ["1b", "c"],
    ],
)
def test_parse_inverts_format_path(keys: list[str]) -> None:
    assert parse(format_path(keys)) == keys


def test_parse_is_idempotent_on_dot_joined_keys() -> None:
    keys = parse("alpha.beta.gamma")
    assert parse(".".join(keys)) == keys
