"""Validators for dataset, namespace, kind, name and id values."""

from __future__ import annotations

from typing import Any

from .config import DEFAULT_LIMITS, KeyLimits
from .constants import DATASET_PATTERN, INT64_MAX, INT64_MIN, MAX_NAMESPACE_LENGTH, NAMESPACE_PATTERN
from .errors import InvalidArgumentError


def validate_dataset(dataset: Any) -> str:
    """Return ``dataset`` unchanged when it is a well-formed dataset id."""
    if not isinstance(dataset, str) or not dataset:
        msg = "dataset must not be empty or null"
        raise InvalidArgumentError(msg)
    if DATASET_PATTERN.fullmatch(dataset) is None:
        msg = f"dataset must match the following pattern: {DATASET_PATTERN.pattern}"
        raise InvalidArgumentError(msg)
    return dataset


def validate_namespace(namespace: Any) -> str | None:
    """Return ``namespace`` unchanged; ``None`` selects the default namespace."""
    if namespace is None:
        return None
    if not isinstance(namespace, str) or not namespace:
        msg = "namespace must not be an empty string"
        raise InvalidArgumentError(msg)
    if len(namespace) > MAX_NAMESPACE_LENGTH:
        msg = f"namespace must not contain more than {MAX_NAMESPACE_LENGTH} characters"
        raise InvalidArgumentError(msg)
    if NAMESPACE_PATTERN.fullmatch(namespace) is None:
        msg = f"namespace must match the following pattern: {NAMESPACE_PATTERN.pattern}"
        raise InvalidArgumentError(msg)
    return namespace


def validate_kind(kind: Any, limits: KeyLimits = DEFAULT_LIMITS) -> str:
    if not isinstance(kind, str) or not kind:
        msg = "kind must not be empty or null"
        raise InvalidArgumentError(msg)
    if len(kind) > limits.max_string_length:
        msg = f"kind must not contain more than {limits.max_string_length} characters"
        raise InvalidArgumentError(msg)
    _check_utf8("kind", kind)
    return kind


def validate_name(name: Any, limits: KeyLimits = DEFAULT_LIMITS) -> str:
    if not isinstance(name, str) or not name:
        msg = "name must not be empty or null"
        raise InvalidArgumentError(msg)
    if len(name) > limits.max_string_length:
        msg = f"name must not exceed {limits.max_string_length} characters"
        raise InvalidArgumentError(msg)
    _check_utf8("name", name)
    return name


def validate_id(id_: Any) -> int:
    # bool is an int subclass but never a valid identifier
    if isinstance(id_, bool) or not isinstance(id_, int):
        msg = f"id must be an integer, got {type(id_).__name__}"
        raise InvalidArgumentError(msg)
    if id_ == 0:
        msg = "id must not be equal to zero"
        raise InvalidArgumentError(msg)
    if not INT64_MIN <= id_ <= INT64_MAX:
        msg = "id must fit in a signed 64-bit integer"
        raise InvalidArgumentError(msg)
    return id_


def _check_utf8(field: str, value: str) -> None:
    # lone surrogates are valid str contents but cannot be put on the wire
    try:
        _ = value.encode("utf-8")
    except UnicodeEncodeError as error:
        msg = f"{field} must be encodable as UTF-8"
        raise InvalidArgumentError(msg) from error
