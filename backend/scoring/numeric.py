"""Clamping, rounding and name-matching helpers shared by the scorers."""

import math
from typing import Iterable, Optional

SCORE_MIN = 0.0
SCORE_MAX = 10.0


def clamp_score(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return max(low, min(high, value))


def round_half_up(value: float, places: int) -> float:
    """Round like JavaScript's Math.round(x * 10**places) / 10**places.

    Python's round() uses banker's rounding, which would shift persisted
    scores sitting exactly on a .x5 boundary.
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def round_restaurant(value: float) -> float:
    return round_half_up(value, 1)


def round_category(value: float) -> float:
    return round_half_up(value, 2)


def clamp_category(value: float) -> float:
    return round_category(clamp_score(value))


def matches_any(names: Iterable[Optional[str]], keywords: Iterable[str]) -> bool:
    """Case-insensitive substring check of any keyword against any name."""
    lowered = [name.lower() for name in names if name]
    for keyword in keywords:
        needle = keyword.lower()
        if any(needle in name for name in lowered):
            return True
    return False
