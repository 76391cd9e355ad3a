from .book import NO_CLUBS, ClubBook
from .defaults import DEFAULT_DISTANCE_TABLE_YD, default_clubs
from .models import Club, ClubEdit
from .service import PlayerClubService, get_player_club_service

__all__ = [
    "DEFAULT_DISTANCE_TABLE_YD",
    "NO_CLUBS",
    "Club",
    "ClubBook",
    "ClubEdit",
    "PlayerClubService",
    "default_clubs",
    "get_player_club_service",
]
