from __future__ import annotations

import logging
import threading
import time
import uuid
from functools import lru_cache
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.bag.service import PlayerClubService, get_player_club_service
from greenside.config import get_settings
from greenside.courses.models import Hole
from greenside.errors import ExternalServiceFailure, Notice, SessionNotFound
from greenside.geometry import GeoPoint
from greenside.providers.elevation import get_elevation
from greenside.providers.wind import WindReading, get_wind
from greenside.storage import require_user

from .models import ElevationRequest, Readout
from .session import RoundSession

if TYPE_CHECKING:
    from .location import LocationSubscription

logger = logging.getLogger(__name__)

ElevationLookup = Callable[[float, float], Optional[float]]
WeatherLookup = Callable[[float, float], WindReading]


class SessionView(BaseModel):
    id: str
    course_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("course_name", "courseName"),
        serialization_alias="courseName",
    )
    tee_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("tee_name", "teeName"),
        serialization_alias="teeName",
    )
    hole_index: int = Field(
        validation_alias=AliasChoices("hole_index", "holeIndex"),
        serialization_alias="holeIndex",
    )
    hole_count: int = Field(
        validation_alias=AliasChoices("hole_count", "holeCount"),
        serialization_alias="holeCount",
    )
    readout: Readout
    notices: List[Notice] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class RoundSessionService:
    """Registry of live round sessions and the glue to their collaborators.

    Provider calls run without holding any session lock. A failed lookup is
    logged and reported as a notice; the session keeps whatever it had.
    """

    def __init__(
        self,
        clubs: PlayerClubService | None = None,
        elevation: ElevationLookup | None = None,
        weather: WeatherLookup | None = None,
    ) -> None:
        self._clubs = clubs or get_player_club_service()
        self._elevation = elevation or get_elevation
        self._weather = weather or get_wind
        self._sessions: Dict[str, RoundSession] = {}
        self._subscriptions: Dict[str, "LocationSubscription"] = {}
        self._lock = threading.Lock()

    # Lifecycle
    def start(
        self,
        user_id: str | None,
        *,
        holes: Sequence[Hole] = (),
        tee_name: str | None = None,
        course_name: str | None = None,
    ) -> RoundSession:
        user = require_user(user_id)
        self.evict_idle()
        session = RoundSession(
            str(uuid.uuid4()),
            user_id=user,
            holes=holes,
            club_book=self._clubs.load_book(user),
            elevation_factor=get_settings().elevation_factor,
            tee_name=tee_name,
            course_name=course_name,
        )
        with self._lock:
            self._sessions[session.id] = session
        logger.info(
            "round_session_started",
            extra={"session_id": session.id, "hole_count": len(session.holes)},
        )
        return session

    def get(self, session_id: str, user_id: str | None) -> RoundSession:
        user = require_user(user_id)
        self.evict_idle()
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None or session.user_id != user:
            raise SessionNotFound(f"Round session {session_id} not found")
        session.touch()
        return session

    def end(self, session_id: str, user_id: str | None) -> None:
        session = self.get(session_id, user_id)
        with self._lock:
            self._sessions.pop(session_id, None)
            subscription = self._subscriptions.pop(session_id, None)
        session.close()
        if subscription is not None:
            subscription.close()
        logger.info("round_session_ended", extra={"session_id": session_id})

    def evict_idle(self) -> int:
        """End sessions nobody has touched within the idle TTL; returns how many."""
        ttl = get_settings().session_idle_ttl_s
        if ttl <= 0:
            return 0
        cutoff = time.monotonic() - ttl
        with self._lock:
            expired = [s for s in self._sessions.values() if s.last_touched < cutoff]
            evicted = [
                (session, self._subscriptions.pop(session.id, None))
                for session in expired
                if self._sessions.pop(session.id, None) is not None
            ]
        for session, subscription in evicted:
            session.close()
            if subscription is not None:
                subscription.close()
            logger.info("round_session_expired", extra={"session_id": session.id})
        return len(evicted)

    def attach_subscription(
        self, session_id: str, user_id: str | None, subscription: "LocationSubscription"
    ) -> None:
        self.get(session_id, user_id)
        with self._lock:
            previous = self._subscriptions.pop(session_id, None)
            self._subscriptions[session_id] = subscription
        if previous is not None:
            previous.close()

    def detach_subscription(
        self, session_id: str, subscription: "LocationSubscription"
    ) -> None:
        with self._lock:
            if self._subscriptions.get(session_id) is subscription:
                del self._subscriptions[session_id]

    # Events
    def advance(self, session_id: str, user_id: str | None) -> SessionView:
        session = self.get(session_id, user_id)
        notice = session.advance_hole()
        return self._view(session, [notice] if notice else [])

    def retreat(self, session_id: str, user_id: str | None) -> SessionView:
        session = self.get(session_id, user_id)
        notice = session.retreat_hole()
        return self._view(session, [notice] if notice else [])

    def set_target(
        self, session_id: str, user_id: str | None, point: GeoPoint
    ) -> SessionView:
        session = self.get(session_id, user_id)
        request = session.set_target(point)
        notices = self._lookup_elevation(session, request)
        return self._view(session, notices)

    def update_location(
        self, session_id: str, user_id: str | None, point: GeoPoint
    ) -> SessionView:
        session = self.get(session_id, user_id)
        request = session.update_location(point)
        notices = self._lookup_elevation(session, request)
        if session.wind is None:
            notices.extend(self._lookup_wind(session, point))
        return self._view(session, notices)

    def refresh_wind(self, session_id: str, user_id: str | None) -> SessionView:
        session = self.get(session_id, user_id)
        if session.current_location is None:
            return self._view(
                session,
                [Notice("invalid_input", "Waiting for a location fix.")],
            )
        return self._view(session, self._lookup_wind(session, session.current_location))

    def reload_clubs(self, session_id: str, user_id: str | None) -> SessionView:
        session = self.get(session_id, user_id)
        session.replace_club_book(self._clubs.load_book(session.user_id))
        return self._view(session, [])

    def view(self, session_id: str, user_id: str | None) -> SessionView:
        return self._view(self.get(session_id, user_id), [])

    def readout(self, session_id: str, user_id: str | None) -> Readout:
        return self.get(session_id, user_id).current_readout()

    # Collaborators
    def _lookup_elevation(
        self, session: RoundSession, request: ElevationRequest
    ) -> List[Notice]:
        try:
            meters = self._elevation(request.point.latitude, request.point.longitude)
        except ExternalServiceFailure as exc:
            logger.warning(
                "elevation lookup failed",
                extra={"session_id": session.id, "point_kind": request.kind},
            )
            return [Notice(exc.kind, "Elevation is unavailable right now.")]
        if not session.apply_elevation(request, meters):
            logger.debug(
                "stale elevation ignored",
                extra={"session_id": session.id, "point_kind": request.kind},
            )
        return []

    def _lookup_wind(self, session: RoundSession, point: GeoPoint) -> List[Notice]:
        try:
            reading = self._weather(point.latitude, point.longitude)
        except ExternalServiceFailure as exc:
            logger.warning("wind lookup failed", extra={"session_id": session.id})
            return [Notice(exc.kind, "Failed to fetch wind data.")]
        session.apply_wind(reading)
        return []

    @staticmethod
    def _view(session: RoundSession, notices: List[Notice]) -> SessionView:
        return SessionView(
            id=session.id,
            course_name=session.course_name,
            tee_name=session.tee_name,
            hole_index=session.current_hole_index,
            hole_count=len(session.holes),
            readout=session.current_readout(),
            notices=notices,
        )


@lru_cache(maxsize=1)
def get_round_session_service() -> RoundSessionService:
    return RoundSessionService()


__all__ = [
    "ElevationLookup",
    "RoundSessionService",
    "SessionView",
    "WeatherLookup",
    "get_round_session_service",
]
