"""Single-pass validator for path expressions such as ``a.b[0]["c-d"]``."""

from __future__ import annotations

import enum
import string

from .errors import GrammarError
from .runtime.logging import get_logger

QUOTE = '"'

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
IDENTIFIER_START = LETTERS | {"_"}
ALLOWED_CHARACTERS = LETTERS | DIGITS | frozenset('_.[]"')

# characters that may never appear inside a quoted key
_QUOTED_FORBIDDEN = frozenset('.[]"')


class _Mode(enum.Enum):
    BARE = "bare"
    QUOTED = "quoted"
    NUMERIC = "numeric"


def normalize_quotes(path: str) -> str:
    """Rewrite single quotes as double quotes."""

    return path.replace("'", QUOTE)


def validate_path(path: str) -> None:
    """Validate ``path`` against the path grammar.

    Raises ``GrammarError`` carrying the 0-based index of the first offending
    character. Single and double quotes are treated as the same character.
    """

    try:
        _scan(normalize_quotes(path), path)
    except GrammarError as exc:
        get_logger().debug("grammar: rejected %r at %d", path, exc.index)
        raise


def _scan(path: str, original: str) -> None:
    mode = _Mode.BARE
    length = len(path)
    index = 0

    def peek(offset: int) -> str | None:
        position = index + offset
        return path[position] if position < length else None

    def fail(offset: int, expected: str) -> GrammarError:
        # report the character as the caller wrote it
        position = index + offset
        char = original[position] if position < length else None
        return GrammarError(original, position, char, expected)

    while index < length:
        char = path[index]

        if mode is _Mode.QUOTED:
            if char == QUOTE:
                if peek(1) != "]":
                    raise fail(1, 'expected ] to follow "')
                index += 2
                mode = _Mode.BARE
                _check_after_close(path, original, index)
                continue
            if char in _QUOTED_FORBIDDEN:
                raise fail(0, "expected letter, number or underscore inside of string")
            index += 1
            continue

        if char not in ALLOWED_CHARACTERS:
            raise fail(0, f"character {char} is not a valid character")

        if mode is _Mode.NUMERIC:
            if char == "]":
                index += 1
                mode = _Mode.BARE
                _check_after_close(path, original, index)
                continue
            if char not in DIGITS:
                raise fail(0, "number expected inside of brackets")
            index += 1
            continue

        if char == ".":
            if index == 0:
                raise fail(0, "path may not start with a dot")
            if peek(1) not in IDENTIFIER_START:
                raise fail(1, "expected a letter or underscore to follow a dot")
        elif char == "[":
            following = peek(1)
            if following is not None and following in DIGITS:
                index += 1
                mode = _Mode.NUMERIC
                continue
            if following == QUOTE:
                if peek(2) not in IDENTIFIER_START:
                    raise fail(2, 'expected a letter or underscore to follow a "')
                index += 2
                mode = _Mode.QUOTED
                continue
            raise fail(1, 'expected number or " to follow a [')
        elif char == "]":
            raise fail(0, "expected [ to precede")
        elif char == QUOTE:
            raise fail(0, '" is only allowed inside of brackets')
        index += 1

    if mode is not _Mode.BARE:
        raise GrammarError(original, length, None, "unterminated bracket")


def _check_after_close(path: str, original: str, index: int) -> None:
    if index < len(path) and path[index] not in ".[":
        raise GrammarError(
            original, index, original[index], "expected . or [ to follow ]"
        )


__all__ = [
    "ALLOWED_CHARACTERS",
    "DIGITS",
    "IDENTIFIER_START",
    "LETTERS",
    "QUOTE",
    "normalize_quotes",
    "validate_path",
]
