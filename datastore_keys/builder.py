"""Validating builders for entity keys.

A builder is a short-lived, single-threaded accumulator. Every mutator either
succeeds and returns the builder for chaining, or raises before touching any
state. ``build`` snapshots the accumulated fields into an immutable key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar, overload, override

from .config import DEFAULT_LIMITS, KeyLimits
from .errors import InvalidArgumentError, InvalidStateError
from .keys import BaseKey, Key, PartialKey
from .logging_config import get_logger
from .path_element import PathElement
from .validation import validate_dataset, validate_id, validate_kind, validate_name, validate_namespace


if TYPE_CHECKING:
    from collections.abc import Iterable


_K = TypeVar("_K", bound=BaseKey)

_logger = get_logger(__name__)


class BaseKeyBuilder(ABC, Generic[_K]):
    """Accumulates dataset, namespace, ancestors and kind for a key of type ``_K``."""

    def __init__(self, dataset: str, kind: str, *, limits: KeyLimits = DEFAULT_LIMITS) -> None:
        super().__init__()
        self._limits = limits
        self._dataset = validate_dataset(dataset)
        self._namespace: str | None = None
        self._kind = validate_kind(kind, limits)
        self._ancestors: list[PathElement] = []

    @classmethod
    def from_key(cls, key: BaseKey, *, limits: KeyLimits = DEFAULT_LIMITS) -> Self:
        """Return a builder seeded with the fields of an existing key.

        The ancestor path is copied, so mutating the builder never affects
        ``key``. Every field is checked against ``limits``, the path length
        included.
        """
        builder = cls(key.dataset, key.kind, limits=limits)
        builder._namespace = validate_namespace(key.namespace)
        return builder.add_ancestors(key.ancestors)

    @property
    def ancestors(self) -> tuple[PathElement, ...]:
        """Return the current ancestor path."""
        return tuple(self._ancestors)

    @overload
    def add_ancestor(self, kind: str, id_or_name: int | str, /) -> Self: ...

    @overload
    def add_ancestor(self, *elements: PathElement) -> Self: ...

    def add_ancestor(self, *args: Any) -> Self:
        """Append one ancestor given as ``(kind, id_or_name)``, or path elements.

        An ``int`` identifier is an id and must be non-zero; a ``str``
        identifier is a name.
        """
        if args and isinstance(args[0], str):
            if len(args) != 2:  # noqa: PLR2004
                msg = "add_ancestor expects (kind, id_or_name) or path elements"
                raise TypeError(msg)
            kind, id_or_name = args
            return self.add_ancestors([self._new_element(kind, id_or_name)])
        return self.add_ancestors(args)

    def add_ancestors(self, elements: Iterable[PathElement]) -> Self:
        """Append path elements in order.

        The whole batch is checked before anything is appended: a batch that
        would push the path past ``limits.max_path_elements`` raises
        ``InvalidStateError`` and leaves the path unchanged.
        """
        batch = tuple(elements)
        max_path = self._limits.max_path_elements
        if len(self._ancestors) + len(batch) > max_path:
            msg = f"path can have at most {max_path} elements"
            raise InvalidStateError(msg)
        for element in batch:
            self._check_ancestor(element)
        self._ancestors.extend(batch)
        return self

    def kind(self, kind: str) -> Self:
        self._kind = validate_kind(kind, self._limits)
        return self

    def clear_path(self) -> Self:
        self._ancestors.clear()
        return self

    def dataset(self, dataset: str) -> Self:
        self._dataset = validate_dataset(dataset)
        return self

    def namespace(self, namespace: str | None) -> Self:
        """Set the namespace; ``None`` restores the default namespace."""
        self._namespace = validate_namespace(namespace)
        return self

    def build(self) -> _K:
        key = self._build(self._dataset, self._namespace, tuple(self._ancestors), self._kind)
        _logger.debug(
            "key_built",
            key_type=type(key).__name__,
            dataset=key.dataset,
            namespace=key.namespace,
            kind=key.kind,
            depth=len(key.ancestors),
        )
        return key

    @abstractmethod
    def _build(
        self,
        dataset: str,
        namespace: str | None,
        ancestors: tuple[PathElement, ...],
        kind: str,
    ) -> _K:
        """Create the concrete key, supplying its leaf identifier if any."""

    def _new_element(self, kind: Any, id_or_name: Any) -> PathElement:
        kind = validate_kind(kind, self._limits)
        if isinstance(id_or_name, str):
            return PathElement(kind, name=validate_name(id_or_name, self._limits))
        return PathElement(kind, id=validate_id(id_or_name))

    def _check_ancestor(self, element: Any) -> None:
        if not isinstance(element, PathElement):
            msg = f"ancestors must be PathElement instances, got {type(element).__name__}"
            raise InvalidArgumentError(msg)
        _ = validate_kind(element.kind, self._limits)
        if element.id is not None:
            _ = validate_id(element.id)
        elif element.name is not None:
            _ = validate_name(element.name, self._limits)
        else:
            msg = f"ancestor of kind '{element.kind}' must have an id or a name"
            raise InvalidArgumentError(msg)


class PartialKeyBuilder(BaseKeyBuilder[PartialKey]):
    """Builder for keys whose identifier is assigned later by the store."""

    @override
    def _build(
        self,
        dataset: str,
        namespace: str | None,
        ancestors: tuple[PathElement, ...],
        kind: str,
    ) -> PartialKey:
        return PartialKey(dataset, namespace, ancestors, kind)


class KeyBuilder(BaseKeyBuilder[Key]):
    """Builder for complete keys.

    The leaf identifier may be given at construction or later through
    ``id``/``name``; setting one clears the other. ``build`` raises
    ``InvalidStateError`` when neither has been set.
    """

    def __init__(
        self,
        dataset: str,
        kind: str,
        *,
        id: int | None = None,  # noqa: A002
        name: str | None = None,
        limits: KeyLimits = DEFAULT_LIMITS,
    ) -> None:
        super().__init__(dataset, kind, limits=limits)
        self._id: int | None = None
        self._name: str | None = None
        if id is not None and name is not None:
            msg = "key must not have both an id and a name"
            raise InvalidArgumentError(msg)
        if id is not None:
            _ = self.id(id)
        if name is not None:
            _ = self.name(name)

    @override
    @classmethod
    def from_key(cls, key: BaseKey, *, limits: KeyLimits = DEFAULT_LIMITS) -> Self:
        builder = super().from_key(key, limits=limits)
        if isinstance(key, Key):
            builder._id = key.id
            builder._name = key.name
        return builder

    @classmethod
    def from_partial(
        cls,
        key: PartialKey,
        *,
        id: int | None = None,  # noqa: A002
        name: str | None = None,
        limits: KeyLimits = DEFAULT_LIMITS,
    ) -> Self:
        """Return a builder that completes ``key`` with an id or a name."""
        if id is not None and name is not None:
            msg = "key must not have both an id and a name"
            raise InvalidArgumentError(msg)
        builder = cls.from_key(key, limits=limits)
        if id is not None:
            _ = builder.id(id)
        if name is not None:
            _ = builder.name(name)
        return builder

    def id(self, id: int) -> Self:  # noqa: A002
        self._id = validate_id(id)
        self._name = None
        return self

    def name(self, name: str) -> Self:
        self._name = validate_name(name, self._limits)
        self._id = None
        return self

    @override
    def _build(
        self,
        dataset: str,
        namespace: str | None,
        ancestors: tuple[PathElement, ...],
        kind: str,
    ) -> Key:
        if self._id is None and self._name is None:
            msg = "id or name must be set before building a complete key"
            raise InvalidStateError(msg)
        return Key(dataset, namespace, ancestors, kind, id=self._id, name=self._name)
