"""Single-key lookups over the containers a path can descend into.

Each adapter answers whether it understands a container and, if so, resolves
one access key against it. Lookups never raise for missing keys; they return
``PATH_MISSING`` instead.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from typing import Protocol, cast

from .config import PATHWALK_CONFIG
from .grammar import DIGITS
from .missing import PATH_MISSING
from .runtime.logging import get_logger


class KeyAdapter(Protocol):
    def supports(self, container: object) -> bool: ...

    def lookup(self, container: object, key: str) -> object: ...


_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)


def _is_index(key: str) -> bool:
    return bool(key) and set(key) <= DIGITS


def _is_indexable_sequence(value: object) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


class MappingAdapter:
    """Look keys up in mappings, falling back to integer keys for digit keys."""

    def supports(self, container: object) -> bool:
        return isinstance(container, Mapping)

    def lookup(self, container: object, key: str) -> object:
        mapping = cast(Mapping[object, object], container)
        if key in mapping:
            return mapping[key]
        if _is_index(key):
            index = int(key)
            if index in mapping:
                return mapping[index]
        return PATH_MISSING


class SequenceAdapter:
    """Index lists, tuples and other non-string sequences with digit keys."""

    def supports(self, container: object) -> bool:
        return _is_indexable_sequence(container)

    def lookup(self, container: object, key: str) -> object:
        if not _is_index(key):
            return PATH_MISSING
        sequence = cast(Sequence[object], container)
        index = int(key)
        if index >= len(sequence):
            return PATH_MISSING
        return sequence[index]


class AttributeAdapter:
    """Read public data attributes of arbitrary objects.

    Scalar leaves are not containers, and methods are not data: both resolve
    to ``PATH_MISSING``. So does an attribute whose getter raises.
    """

    def supports(self, container: object) -> bool:
        if container is None or container is PATH_MISSING:
            return False
        return not isinstance(container, _SCALAR_TYPES)

    def lookup(self, container: object, key: str) -> object:
        if not key or key.startswith("_"):
            return PATH_MISSING
        try:
            value = getattr(container, key, PATH_MISSING)
        except Exception as exc:
            get_logger().debug(
                "adapter: attribute %r of %s raised %r",
                key,
                type(container).__name__,
                exc,
            )
            return PATH_MISSING
        if inspect.isroutine(value):
            return PATH_MISSING
        return value


_CONTAINER_ADAPTERS: tuple[KeyAdapter, ...] = (MappingAdapter(), SequenceAdapter())
_ATTRIBUTE_ADAPTER = AttributeAdapter()


def default_adapters() -> tuple[KeyAdapter, ...]:
    """Return the adapters used when a caller does not supply its own."""

    if PATHWALK_CONFIG.attribute_access:
        return (*_CONTAINER_ADAPTERS, _ATTRIBUTE_ADAPTER)
    return _CONTAINER_ADAPTERS


def lookup_key(
    container: object,
    key: str,
    adapters: Sequence[KeyAdapter] | None = None,
) -> object:
    """Resolve ``key`` against ``container`` with the first supporting adapter.

    Returns ``PATH_MISSING`` when no adapter supports the container or the key
    is absent.
    """

    if container is PATH_MISSING:
        return PATH_MISSING
    for adapter in adapters if adapters is not None else default_adapters():
        if adapter.supports(container):
            return adapter.lookup(container, key)
    return PATH_MISSING


__all__ = [
    "AttributeAdapter",
    "KeyAdapter",
    "MappingAdapter",
    "SequenceAdapter",
    "default_adapters",
    "lookup_key",
]
