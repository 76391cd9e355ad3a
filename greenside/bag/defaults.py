from __future__ import annotations

from typing import List

from .models import Club

# Carry distances in yards, in the order the bag is shown and searched.
DEFAULT_DISTANCE_TABLE_YD: tuple[tuple[str, float], ...] = (
    ("Driver", 240.0),
    ("3W", 220.0),
    ("5W", 200.0),
    ("4I", 190.0),
    ("6I", 180.0),
    ("7I", 165.0),
    ("8I", 155.0),
    ("9I", 145.0),
    ("PW", 130.0),
    ("GW", 120.0),
    ("SW", 110.0),
    ("Putter", 5.0),
)


def default_clubs() -> List[Club]:
    return [Club(name=name, distance=distance) for name, distance in DEFAULT_DISTANCE_TABLE_YD]


__all__ = ["DEFAULT_DISTANCE_TABLE_YD", "default_clubs"]
