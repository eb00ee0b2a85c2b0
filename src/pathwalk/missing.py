from __future__ import annotations

from typing import Final


class _PathMissing:
    """Sentinel for missing document paths."""

    _instance: _PathMissing | None = None

    def __new__(cls) -> _PathMissing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "PATH_MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _PathMissing:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> _PathMissing:
        return self

    def __reduce__(self) -> str:
        return "PATH_MISSING"


PATH_MISSING: Final[_PathMissing] = _PathMissing()


__all__ = ["PATH_MISSING"]
