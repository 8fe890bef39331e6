"""Single segment of a key path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class PathElement:
    """A kind plus an optional numeric id or string name.

    An element with neither identifier is incomplete; it only ever appears as
    the leaf of a partial key. Value checks on kind, id and name belong to the
    builder that creates the element.
    """

    kind: str
    id: int | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.id is not None and self.name is not None:
            msg = "path element must not have both an id and a name"
            raise InvalidArgumentError(msg)

    @property
    def is_complete(self) -> bool:
        """Return True when the element carries an id or a name."""
        return self.id is not None or self.name is not None

    @property
    def name_or_id(self) -> str | int | None:
        return self.id if self.id is not None else self.name

    def to_wire(self) -> dict[str, Any]:
        """Return the wire record for this element."""
        message: dict[str, Any] = {"kind": self.kind}
        if self.id is not None:
            message["id"] = self.id
        elif self.name is not None:
            message["name"] = self.name
        return message

    @classmethod
    def from_wire(cls, message: Any) -> PathElement:
        """Parse a wire record produced by ``to_wire``."""
        if not isinstance(message, dict):
            msg = f"path element must be a mapping, got {type(message).__name__}"
            raise InvalidArgumentError(msg)
        kind = message.get("kind")
        if not isinstance(kind, str) or not kind:
            msg = "path element kind must be a non-empty string"
            raise InvalidArgumentError(msg)
        id_ = message.get("id")
        name = message.get("name")
        if id_ is not None and (isinstance(id_, bool) or not isinstance(id_, int)):
            msg = f"path element id must be an integer, got {type(id_).__name__}"
            raise InvalidArgumentError(msg)
        if name is not None and not isinstance(name, str):
            msg = f"path element name must be a string, got {type(name).__name__}"
            raise InvalidArgumentError(msg)
        return cls(kind, id=id_, name=name)
