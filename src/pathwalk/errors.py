from __future__ import annotations


class PathwalkError(Exception):
    """Base error for pathwalk."""


class GrammarError(PathwalkError, ValueError):
    """Raised when a path expression violates the path grammar.

    ``char`` is ``None`` when the path ended where a character was expected.
    """

    def __init__(self, path: str, index: int, char: str | None, expected: str) -> None:
        self.path = path
        self.index = index
        self.char = char
        self.expected = expected
        if char is None:
            found = "Unexpected end of path"
        else:
            found = f'Invalid character "{char}"'
        super().__init__(f'{found} at position {index} in "{path}", {expected}')

    def __reduce__(self) -> tuple[type[GrammarError], tuple[str, int, str | None, str]]:
        return (type(self), (self.path, self.index, self.char, self.expected))


class TraversalError(PathwalkError):
    """Raised when a traversal is requested that can not be performed."""


__all__ = ["GrammarError", "PathwalkError", "TraversalError"]
