"""Live state of one round on the map screen."""

from __future__ import annotations

import threading
import time
from typing import Dict, Sequence

from greenside.bag.book import ClubBook
from greenside.caddie.playslike import plays_like_distance, wind_summary
from greenside.courses.models import Hole
from greenside.errors import Notice
from greenside.geometry import GeoPoint, distance_yards, meters_to_feet
from greenside.providers.wind import WindReading

from .models import ElevationRequest, ElevationSample, PointKind, Readout

LAST_HOLE = "You have reached the last hole."
FIRST_HOLE = "You are on the first hole."
NO_HOLES = "No hole data available."


class RoundSession:
    """Hole navigation plus the inputs behind the distance readout.

    Every mutation takes ``_lock`` so transitions from concurrent request
    threads apply one at a time. Lookups against external services happen
    outside the session; their results come back through ``apply_elevation``
    and ``apply_wind``, which drop anything that arrives after the session was
    closed or after a newer point replaced the one that was looked up.
    """

    def __init__(
        self,
        session_id: str,
        *,
        user_id: str,
        holes: Sequence[Hole] = (),
        club_book: ClubBook,
        elevation_factor: float = 1.0,
        tee_name: str | None = None,
        course_name: str | None = None,
    ) -> None:
        self.id = session_id
        self.user_id = user_id
        self.holes: tuple[Hole, ...] = tuple(holes)
        self.club_book = club_book
        self.elevation_factor = elevation_factor
        self.tee_name = tee_name
        self.course_name = course_name

        self.current_hole_index = 0
        self.current_location: GeoPoint | None = None
        self.selected_target: GeoPoint | None = None
        self.player_elevation: ElevationSample | None = None
        self.target_elevation: ElevationSample | None = None
        self.wind: WindReading | None = None
        self.active = True
        self.last_touched = time.monotonic()

        self._generations: Dict[PointKind, int] = {"player": 0, "target": 0}
        self._lock = threading.Lock()

    @property
    def current_hole(self) -> Hole | None:
        if not self.holes:
            return None
        return self.holes[self.current_hole_index]

    # Hole navigation
    def advance_hole(self) -> Notice | None:
        with self._lock:
            if not self.holes:
                return Notice("out_of_range", NO_HOLES)
            if self.current_hole_index >= len(self.holes) - 1:
                return Notice("out_of_range", LAST_HOLE)
            self.current_hole_index += 1
            return None

    def retreat_hole(self) -> Notice | None:
        with self._lock:
            if not self.holes:
                return Notice("out_of_range", NO_HOLES)
            if self.current_hole_index <= 0:
                return Notice("out_of_range", FIRST_HOLE)
            self.current_hole_index -= 1
            return None

    # Points
    def set_target(self, point: GeoPoint) -> ElevationRequest:
        with self._lock:
            self.selected_target = point
            self.target_elevation = None
            return self._next_request("target", point)

    def update_location(self, point: GeoPoint) -> ElevationRequest:
        with self._lock:
            self.current_location = point
            self.player_elevation = None
            return self._next_request("player", point)

    def _next_request(self, kind: PointKind, point: GeoPoint) -> ElevationRequest:
        self._generations[kind] += 1
        return ElevationRequest(
            session_id=self.id,
            kind=kind,
            point=point,
            generation=self._generations[kind],
        )

    # Async results
    def apply_elevation(self, request: ElevationRequest, meters: float | None) -> bool:
        """Store a lookup result; returns False when it was stale and dropped."""
        with self._lock:
            if not self.active or request.session_id != self.id:
                return False
            if request.generation != self._generations[request.kind]:
                return False
            sample = (
                ElevationSample(point=request.point, elevation_meters=meters)
                if meters is not None
                else None
            )
            if request.kind == "player":
                self.player_elevation = sample
            else:
                self.target_elevation = sample
            return True

    def apply_wind(self, reading: WindReading) -> bool:
        with self._lock:
            if not self.active:
                return False
            self.wind = reading
            return True

    def replace_club_book(self, book: ClubBook) -> None:
        with self._lock:
            self.club_book = book

    def touch(self) -> None:
        with self._lock:
            self.last_touched = time.monotonic()

    def close(self) -> None:
        with self._lock:
            self.active = False

    # Derived view
    def current_readout(self) -> Readout:
        with self._lock:
            readout = Readout(hole=self.current_hole)
            if self.wind is not None:
                readout.wind_summary = wind_summary(
                    self.wind.speed_mph, self.wind.direction_degrees
                )
            else:
                readout.wind_summary = wind_summary(None, None)

            delta_ft: float | None = None
            if self.player_elevation is not None and self.target_elevation is not None:
                delta_ft = meters_to_feet(
                    self.target_elevation.elevation_meters
                    - self.player_elevation.elevation_meters
                )
                readout.elevation_delta_feet = round(delta_ft, 1)

            if self.current_location is None or self.selected_target is None:
                return readout

            raw = distance_yards(self.current_location, self.selected_target)
            readout.distance_yards = round(raw, 2)
            effective = raw
            if delta_ft is not None:
                effective = plays_like_distance(raw, delta_ft, self.elevation_factor)
                readout.plays_like_yards = round(effective, 2)
            readout.suggested_club = self.club_book.suggest(effective)
            return readout


__all__ = ["FIRST_HOLE", "LAST_HOLE", "NO_HOLES", "RoundSession"]
