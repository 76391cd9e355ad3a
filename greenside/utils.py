from __future__ import annotations

import math
from typing import Any


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike ``round``."""
    return int(math.floor(value + 0.5))


def coerce_non_negative_int(value: Any) -> int:
    """Best-effort int conversion for user-typed numbers; junk becomes 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return 0
    else:
        return 0
    if number != number or number in (math.inf, -math.inf):
        return 0
    number = int(number)
    return number if number >= 0 else 0


__all__ = ["coerce_non_negative_int", "round_half_up"]
