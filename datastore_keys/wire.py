"""Decoding of ``KeyMessage`` records back into keys.

Encoding lives on the keys themselves (``BaseKey.to_wire``); this module
handles the reverse direction and the URL-safe text form.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from .builder import KeyBuilder, PartialKeyBuilder
from .config import DEFAULT_LIMITS, KeyLimits
from .errors import InvalidArgumentError
from .keys import Key, PartialKey
from .logging_config import get_logger
from .path_element import PathElement


_logger = get_logger(__name__)


def key_from_wire(message: Any, *, limits: KeyLimits = DEFAULT_LIMITS) -> Key | PartialKey:
    """Rebuild a key from its wire message.

    The result is a ``PartialKey`` when the last path element carries no
    identifier and a ``Key`` otherwise. All values go through the same
    validation as the builders.
    """
    if not isinstance(message, dict):
        msg = f"key message must be a mapping, got {type(message).__name__}"
        raise InvalidArgumentError(msg)

    partition_id = message.get("partitionId") or {}
    if not isinstance(partition_id, dict):
        msg = "partitionId must be a mapping"
        raise InvalidArgumentError(msg)
    dataset = partition_id.get("datasetId")
    if dataset is None:
        msg = "key message has no partitionId.datasetId"
        raise InvalidArgumentError(msg)

    raw_path = message.get("pathElement")
    if not isinstance(raw_path, list) or not raw_path:
        msg = "key message must have at least one path element"
        raise InvalidArgumentError(msg)
    *ancestors, leaf = [PathElement.from_wire(record) for record in raw_path]

    builder: KeyBuilder | PartialKeyBuilder
    if leaf.is_complete:
        builder = KeyBuilder(dataset, leaf.kind, id=leaf.id, name=leaf.name, limits=limits)
    else:
        builder = PartialKeyBuilder(dataset, leaf.kind, limits=limits)
    key = builder.namespace(partition_id.get("namespace")).add_ancestors(ancestors).build()
    _logger.debug("key_decoded", key_type=type(key).__name__, kind=key.kind, depth=len(key.ancestors))
    return key


def key_from_url_safe(text: str, *, limits: KeyLimits = DEFAULT_LIMITS) -> Key | PartialKey:
    """Decode a key produced by ``BaseKey.to_url_safe``."""
    padded = text + "=" * (-len(text) % 4)
    try:
        payload = base64.urlsafe_b64decode(padded.encode())
        message = json.loads(payload)
    except (binascii.Error, ValueError) as error:
        msg = f"malformed url-safe key: {text!r}"
        raise InvalidArgumentError(msg) from error
    return key_from_wire(message, limits=limits)
