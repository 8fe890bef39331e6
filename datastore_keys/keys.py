"""Immutable entity keys.

A key names an entity by dataset, optional namespace, the ordered chain of
ancestor path elements and the kind of the entity itself. ``PartialKey`` stops
at the kind and waits for the store to allocate an identifier; ``Key`` also
carries the entity's id or name.

Keys are created by the builders in :mod:`datastore_keys.builder` and are
never mutated afterwards.
"""

from __future__ import annotations

import base64
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, override

from .errors import InvalidArgumentError, InvalidStateError
from .path_element import PathElement


@dataclass(frozen=True)
class BaseKey(ABC):
    """Fields and wire encoding shared by partial and complete keys.

    Equality and hashing are structural over every field, ancestor order
    included. Keys of different variants never compare equal.

    Build keys with ``PartialKeyBuilder`` or ``KeyBuilder``; constructing a key
    directly skips the validation of dataset, namespace, kinds and names.
    """

    dataset: str
    namespace: str | None
    ancestors: tuple[PathElement, ...]
    kind: str

    def __post_init__(self) -> None:
        # hashing needs an immutable path whatever sequence the caller passed
        object.__setattr__(self, "ancestors", tuple(self.ancestors))

    @property
    def parent(self) -> Key | None:
        """Return the complete key of the immediate parent, or None at the root."""
        if not self.ancestors:
            return None
        *grandparents, last = self.ancestors
        return Key(self.dataset, self.namespace, tuple(grandparents), last.kind, id=last.id, name=last.name)

    def to_wire(self) -> dict[str, Any]:
        """Return the ``KeyMessage`` representation of this key."""
        message: dict[str, Any] = {}
        partition_id: dict[str, str] = {}
        if self.dataset is not None:
            partition_id["datasetId"] = self.dataset
        if self.namespace is not None:
            partition_id["namespace"] = self.namespace
        if partition_id:
            message["partitionId"] = partition_id
        path = [element.to_wire() for element in self.ancestors]
        self._append_leaf(path)
        message["pathElement"] = path
        return message

    def to_url_safe(self) -> str:
        """Return the wire message as unpadded URL-safe base64 text."""
        payload = json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)
        return base64.urlsafe_b64encode(payload.encode()).decode().rstrip("=")

    @abstractmethod
    def _append_leaf(self, path: list[dict[str, Any]]) -> None:
        """Append the wire record of the key's own entity to ``path``."""


@dataclass(frozen=True)
class PartialKey(BaseKey):
    """Key whose leaf has a kind but no identifier yet."""

    @override
    def _append_leaf(self, path: list[dict[str, Any]]) -> None:
        path.append(PathElement(self.kind).to_wire())


@dataclass(frozen=True)
class Key(BaseKey):
    """Key whose leaf is identified by exactly one of ``id`` or ``name``."""

    id: int | None = None
    name: str | None = None

    @override
    def __post_init__(self) -> None:
        super().__post_init__()
        if self.id is not None and self.name is not None:
            msg = "key must not have both an id and a name"
            raise InvalidArgumentError(msg)
        if self.id is None and self.name is None:
            msg = "complete key requires an id or a name"
            raise InvalidStateError(msg)

    @property
    def has_id(self) -> bool:
        return self.id is not None

    @property
    def has_name(self) -> bool:
        return self.name is not None

    @property
    def name_or_id(self) -> str | int:
        return self.id if self.id is not None else self.name  # type: ignore[return-value]

    @property
    def leaf(self) -> PathElement:
        """Return the key's own path element."""
        return PathElement(self.kind, id=self.id, name=self.name)

    @override
    def _append_leaf(self, path: list[dict[str, Any]]) -> None:
        path.append(self.leaf.to_wire())
