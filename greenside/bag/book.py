"""Club-to-distance mapping and nearest-distance club lookup."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from pydantic import BaseModel, ConfigDict

from greenside.club_distance.aggregate import club_key
from greenside.errors import InvalidInput
from greenside.utils import round_half_up

from .defaults import default_clubs
from .models import Club

NO_CLUBS = "No clubs available."


class ClubBook(BaseModel):
    clubs: List[Club]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def build(
        cls, defaults: Sequence[Club], learned: Mapping[str, float]
    ) -> "ClubBook":
        """Overlay learned per-key averages on the default bag.

        Each default club takes the learned average for its club key when one
        exists. Default order is kept, and an empty default list falls back to
        the built-in bag so the book is never empty.
        """
        base = list(defaults) or default_clubs()
        clubs: List[Club] = []
        for club in base:
            key = club_key(club.name)
            average = learned.get(key)
            if average is not None and average > 0:
                club = Club(name=club.name, distance=float(round_half_up(average)))
            clubs.append(club)
        return cls(clubs=clubs)

    def suggest(self, distance: float) -> str:
        """Name of the club whose distance is closest; earlier clubs win ties."""
        best: Club | None = None
        best_diff = 0.0
        for club in self.clubs:
            if club.distance <= 0:
                continue
            diff = abs(club.distance - distance)
            if best is None or diff < best_diff:
                best = club
                best_diff = diff
        if best is None:
            return NO_CLUBS
        return best.name

    def get(self, name: str) -> Club | None:
        return next((club for club in self.clubs if club.name == name), None)

    def update_distance(self, name: str, new_distance: float) -> "ClubBook":
        if new_distance <= 0:
            raise InvalidInput(f"distance for {name!r} must be positive")
        if self.get(name) is None:
            raise InvalidInput(f"unknown club {name!r}")
        return ClubBook(
            clubs=[
                Club(name=club.name, distance=new_distance) if club.name == name else club
                for club in self.clubs
            ]
        )

    def apply_overrides(self, overrides: Mapping[str, float]) -> "ClubBook":
        book = self
        for name, distance in overrides.items():
            if distance > 0 and book.get(name) is not None:
                book = book.update_distance(name, distance)
        return book

    def as_mapping(self) -> dict[str, float]:
        return {club.name: club.distance for club in self.clubs}


__all__ = ["ClubBook", "NO_CLUBS"]
