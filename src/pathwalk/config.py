"""Process-wide configuration, initialised from ``PATHWALK_*`` environment variables."""

from __future__ import annotations

import logging
import os

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (1/0/true/false/yes/no/on/off); got {raw!r}")


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"{name} must be a logging level name; got {raw!r}")
    return raw


class PathwalkConfig:
    """Mutable settings consulted by traversal and logging helpers."""

    def __init__(self) -> None:
        self.log_level: str = _env_log_level("PATHWALK_LOG_LEVEL", "WARNING")
        self.attribute_access: bool = _env_bool("PATHWALK_ATTRIBUTE_ACCESS", True)

    def __repr__(self) -> str:
        return (
            f"PathwalkConfig(log_level={self.log_level!r}, "
            f"attribute_access={self.attribute_access!r})"
        )


PATHWALK_CONFIG = PathwalkConfig()


__all__ = ["PATHWALK_CONFIG", "PathwalkConfig"]
