"""Limits and patterns shared by validation and the builders."""

from __future__ import annotations

import re


DEFAULT_MAX_PATH_ELEMENTS = 100
DEFAULT_MAX_STRING_LENGTH = 500
MAX_NAMESPACE_LENGTH = 100

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DATASET_PATTERN = re.compile(r"([a-z\d\-]{1,100}~)?([a-z\d][a-z\d\-\.]{0,99}:)?([a-z\d][a-z\d\-]{0,99})")
NAMESPACE_PATTERN = re.compile(r"[0-9A-Za-z\._\-]{0,100}")

MAX_PATH_ELEMENTS_ENV = "DATASTORE_KEYS_MAX_PATH_ELEMENTS"
MAX_STRING_LENGTH_ENV = "DATASTORE_KEYS_MAX_STRING_LENGTH"
