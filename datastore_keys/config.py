"""Configurable key limits.

Path length and string length bounds are kept in a typed object so callers
can tighten or relax them without touching the builders.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_MAX_PATH_ELEMENTS,
    DEFAULT_MAX_STRING_LENGTH,
    MAX_PATH_ELEMENTS_ENV,
    MAX_STRING_LENGTH_ENV,
)
from .errors import KeyConfigError


@dataclass(frozen=True)
class KeyLimits:
    """Bounds applied while building keys.

    Attributes:
        max_path_elements: Maximum number of ancestors a key may carry.
        max_string_length: Maximum length of kinds and names.
    """

    max_path_elements: int = DEFAULT_MAX_PATH_ELEMENTS
    max_string_length: int = DEFAULT_MAX_STRING_LENGTH

    def __post_init__(self) -> None:
        if self.max_path_elements <= 0:
            msg = f"max_path_elements must be positive, got {self.max_path_elements}"
            raise KeyConfigError(msg)
        if self.max_string_length <= 0:
            msg = f"max_string_length must be positive, got {self.max_string_length}"
            raise KeyConfigError(msg)

    @classmethod
    def from_env(cls) -> KeyLimits:
        """Build limits from process environment variables.

        Returns:
            Limits with defaults for every unset variable.

        Raises:
            KeyConfigError: If a variable is not a positive integer.
        """
        return cls(
            max_path_elements=_parse_positive_int(MAX_PATH_ELEMENTS_ENV, DEFAULT_MAX_PATH_ELEMENTS),
            max_string_length=_parse_positive_int(MAX_STRING_LENGTH_ENV, DEFAULT_MAX_STRING_LENGTH),
        )


def _parse_positive_int(variable: str, default: int) -> int:
    raw_value = os.getenv(variable)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError as error:
        msg = f"Invalid {variable} value: expected integer, got '{raw_value}'"
        raise KeyConfigError(msg) from error
    if value <= 0:
        msg = f"Invalid {variable} value: expected a positive integer, got {value}"
        raise KeyConfigError(msg)
    return value


DEFAULT_LIMITS = KeyLimits()
