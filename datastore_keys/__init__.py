"""datastore-keys - entity keys for a hierarchical, partitioned key-value store."""

import importlib.metadata

from .builder import BaseKeyBuilder, KeyBuilder, PartialKeyBuilder
from .config import DEFAULT_LIMITS, KeyLimits
from .errors import DatastoreKeyError, InvalidArgumentError, InvalidStateError, KeyConfigError
from .keys import BaseKey, Key, PartialKey
from .path_element import PathElement
from .validation import validate_dataset, validate_namespace
from .wire import key_from_url_safe, key_from_wire


try:
    __version__ = importlib.metadata.version("datastore-keys")
except importlib.metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


__all__ = [
    "DEFAULT_LIMITS",
    "BaseKey",
    "BaseKeyBuilder",
    "DatastoreKeyError",
    "InvalidArgumentError",
    "InvalidStateError",
    "Key",
    "KeyBuilder",
    "KeyConfigError",
    "KeyLimits",
    "PartialKey",
    "PartialKeyBuilder",
    "PathElement",
    "__version__",
    "key_from_url_safe",
    "key_from_wire",
    "validate_dataset",
    "validate_namespace",
]
