from .location import LocationSubscription
from .models import ElevationRequest, ElevationSample, Readout
from .service import RoundSessionService, SessionView, get_round_session_service
from .session import RoundSession

__all__ = [
    "ElevationRequest",
    "ElevationSample",
    "LocationSubscription",
    "Readout",
    "RoundSession",
    "RoundSessionService",
    "SessionView",
    "get_round_session_service",
]
