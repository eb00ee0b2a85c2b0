"""Walk nested structures along parsed path expressions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from .adapters import KeyAdapter, lookup_key
from .errors import TraversalError
from .missing import PATH_MISSING
from .pairs import KeyValuePair
from .runtime.logging import get_logger
from .tokenizer import parse


class ParentTraversal(BaseModel):
    """Parent container of a path together with the addressed child."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    parent: KeyValuePair[list[str], Any]
    child: KeyValuePair[str, Any]

    @property
    def parent_keys(self) -> list[str]:
        return self.parent.key

    @property
    def parent_value(self) -> Any:
        return self.parent.value

    @property
    def child_key(self) -> str:
        return self.child.key

    @property
    def child_value(self) -> Any:
        return self.child.value


def traverse(
    path: str,
    target: object,
    *,
    adapters: Sequence[KeyAdapter] | None = None,
) -> Any:
    """Return the value at ``path`` inside ``target``.

    Missing keys anywhere along the way yield ``PATH_MISSING``. Only a
    malformed ``path`` raises (``GrammarError``).
    """

    return traverse_by_keys(parse(path), target, adapters=adapters)


def traverse_by_keys(
    keys: Sequence[str],
    target: object,
    *,
    adapters: Sequence[KeyAdapter] | None = None,
) -> Any:
    """Follow already parsed ``keys`` through ``target``.

    The keys are not validated. An empty key returns the current value as is.
    """

    current: object = target
    for key in keys:
        if key == "":
            return current
        if current is PATH_MISSING:
            get_logger().debug("traverse: missing before key %r", key)
            return PATH_MISSING
        current = lookup_key(current, key, adapters)
    return current


def traverse_to_parent(
    path: str,
    target: object,
    *,
    adapters: Sequence[KeyAdapter] | None = None,
) -> ParentTraversal:
    """Resolve the container holding the last key of ``path``.

    Raises ``TraversalError`` for the self reference, which has no parent.
    """

    keys = parse(path)
    if keys[0] == "":
        raise TraversalError("can not traverse to parent on self reference")

    parent_keys = keys[:-1]
    child_key = keys[-1]
    parent_value = traverse_by_keys(parent_keys, target, adapters=adapters)

    return ParentTraversal(
        parent=KeyValuePair[list[str], Any](key=parent_keys, value=parent_value),
        child=KeyValuePair[str, Any](
            key=child_key,
            value=lookup_key(parent_value, child_key, adapters),
        ),
    )


__all__ = ["ParentTraversal", "traverse", "traverse_by_keys", "traverse_to_parent"]
