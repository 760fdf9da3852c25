"""Lenient numeric casts for stored sampling parameters.

Unset or non-numeric values cast to zero instead of raising, and numeric
strings are read up to their first non-numeric character.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def to_float(value: Any) -> float:
    """Cast a stored value to float; anything unreadable becomes 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (str, bytes)):
        text = value.decode("utf-8", "replace") if isinstance(value, bytes) else value
        match = _NUMERIC_PREFIX.match(text)
        if match is None:
            return 0.0
        return float(match.group())
    return 0.0


def to_int(value: Any) -> int:
    """Cast a stored value to int, truncating toward zero."""
    if isinstance(value, int):
        return int(value)
    number = to_float(value)
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number)


def to_bool(value: Any) -> bool:
    """Read a stored flag; ``"0"`` and empty strings are off."""
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)
