from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import PATHWALK_CONFIG


@dataclass(frozen=True)
class _PathwalkConfigSnapshot:
    log_level: str
    attribute_access: bool

    @classmethod
    def capture(cls) -> "_PathwalkConfigSnapshot":
        return cls(
            log_level=PATHWALK_CONFIG.log_level,
            attribute_access=PATHWALK_CONFIG.attribute_access,
        )

    def restore(self) -> None:
        PATHWALK_CONFIG.log_level = self.log_level
        PATHWALK_CONFIG.attribute_access = self.attribute_access


@contextmanager
def pathwalk_test_env(
    *,
    log_level: str | None = None,
    attribute_access: bool | None = None,
) -> Generator[None, None, None]:
    """Apply config overrides for the duration of the context."""
    snapshot = _PathwalkConfigSnapshot.capture()
    if log_level is not None:
        PATHWALK_CONFIG.log_level = log_level.upper()
    if attribute_access is not None:
        PATHWALK_CONFIG.attribute_access = attribute_access
    try:
        yield
    finally:
        snapshot.restore()


@pytest.fixture()
def pathwalk_config() -> Generator[None, None, None]:
    """Restore pathwalk config after the test."""
    with pathwalk_test_env():
        yield
