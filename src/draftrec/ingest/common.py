"""Shared coercion helpers for tolerant record parsing."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Optional, Sequence, Union


def ensure_list(value: Any, name: str) -> Sequence[Any]:
    """Reject top-level inputs that are not a list of records."""

    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, (list, tuple)):
        raise TypeError(f"{name} must be a list, got {type(value).__name__}")
    return value


def first_present(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def as_id(value: Union[str, int, None]) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def coerce_number(value: Union[int, float, str, None]) -> Optional[Union[int, float]]:
    """Return a finite number for numeric values or numeric-looking strings."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    return value
