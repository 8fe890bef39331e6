"""Exception hierarchy for key construction and decoding."""

from __future__ import annotations


class DatastoreKeyError(Exception):
    """Base exception for all datastore-keys failures."""


class InvalidArgumentError(DatastoreKeyError, ValueError):
    """Raised when a single argument is malformed."""


class InvalidStateError(DatastoreKeyError, RuntimeError):
    """Raised when an operation would break a structural key invariant."""


class KeyConfigError(DatastoreKeyError):
    """Raised for invalid runtime configuration."""
