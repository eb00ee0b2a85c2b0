"""Generic key/value carrier used to report traversal results."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

K = TypeVar("K")
V = TypeVar("V")


class KeyValuePair(BaseModel, Generic[K, V]):
    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    key: K
    value: V


__all__ = ["KeyValuePair"]
