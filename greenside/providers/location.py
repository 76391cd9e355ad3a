from __future__ import annotations

from typing import AsyncIterator, Protocol

from greenside.geometry import GeoPoint


class LocationStream(Protocol):
    """Push source of position fixes, e.g. a device GPS bridge.

    The hints are advisory; providers may deliver fixes more or less often.
    """

    def subscribe(
        self, *, min_distance_m: float, min_interval_s: float
    ) -> AsyncIterator[GeoPoint]: ...


__all__ = ["LocationStream"]
