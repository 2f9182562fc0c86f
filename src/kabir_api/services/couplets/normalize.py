from __future__ import annotations

import math
import re

from kabir_api.services.couplets.errors import ConversionError

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_bool(value: object) -> bool:
    """Convert a bool, ``0``/``1`` number or ``"true"``/``"false"``/``"1"``/``"0"`` string.

    Raises ``ConversionError`` for any other value.
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"true", "1"}:
            return True
        if normalized in {"false", "0"}:
            return False

    if isinstance(value, (int, float)):
        if value == 1:
            return True
        if value == 0:
            return False

    raise ConversionError(f'Cannot convert value of type "{type(value).__name__}" to boolean.')


def to_bool_lenient(value: object, *, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"true", "1"}


def to_int(value: object) -> int | None:
    """Leading-integer parse, ``None`` when there is no number to read."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)

    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))
