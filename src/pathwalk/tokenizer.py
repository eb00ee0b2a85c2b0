"""Split validated path expressions into access keys."""

from __future__ import annotations

from collections.abc import Sequence

from .grammar import DIGITS, IDENTIFIER_START, QUOTE, normalize_quotes, validate_path
from .runtime.logging import get_logger

_IDENTIFIER_CHARS = IDENTIFIER_START | DIGITS
_UNQUOTABLE = frozenset('.[]"')


def parse(path: str) -> list[str]:
    """Parse ``path`` into an ordered list of access keys.

    Dotted names and bracket contents become one key each, with bracket
    quotes removed. The empty path parses to ``[""]``, the self reference.

    Raises ``GrammarError`` for malformed paths.
    """

    validate_path(path)
    path = normalize_quotes(path)

    keys: list[str] = []
    for segment in path.split("."):
        for piece in segment.split("["):
            keys.append(_strip_piece(piece))

    get_logger().debug("parse: %r -> %r", path, keys)
    return keys


def _strip_piece(piece: str) -> str:
    if piece.endswith("]"):
        piece = piece[:-1]
    if len(piece) >= 2 and piece.startswith(QUOTE) and piece.endswith(QUOTE):
        piece = piece[1:-1]
    return piece


def format_path(keys: Sequence[str]) -> str:
    """Render ``keys`` back into a path expression accepted by ``parse``.

    Identifiers are joined with dots, digit keys become ``[n]`` and any other
    key is quoted in brackets.
    """

    if isinstance(keys, str):
        raise TypeError("format_path expects a sequence of keys, not a string")
    if len(keys) == 0 or list(keys) == [""]:
        return ""

    parts: list[str] = []
    for position, key in enumerate(keys):
        if not isinstance(key, str):
            raise TypeError(f"path keys must be strings; got {type(key).__name__}")
        if _is_identifier(key):
            parts.append(key if position == 0 else f".{key}")
        elif position == 0:
            # a leading bracket parses to a self reference followed by the key
            if not key or not set(key) <= _IDENTIFIER_CHARS:
                raise ValueError(f"first key {key!r} must be made of identifier characters")
            parts.append(key)
        elif key and set(key) <= DIGITS:
            parts.append(f"[{key}]")
        elif key and key[0] in IDENTIFIER_START and not set(key) & _UNQUOTABLE:
            if "'" in key:
                raise ValueError(f"key {key!r} can not be expressed as a path")
            parts.append(f'["{key}"]')
        else:
            raise ValueError(f"key {key!r} can not be expressed as a path")
    return "".join(parts)


def _is_identifier(key: str) -> bool:
    return bool(key) and key[0] in IDENTIFIER_START and set(key) <= _IDENTIFIER_CHARS


__all__ = ["format_path", "parse"]
