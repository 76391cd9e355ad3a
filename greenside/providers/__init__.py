from .course_search import CourseSummary, TeeBox, TeeHole, search_courses
from .elevation import get_elevation
from .errors import ProviderError
from .location import LocationStream
from .wind import WindReading, get_wind

__all__ = [
    "CourseSummary",
    "LocationStream",
    "ProviderError",
    "TeeBox",
    "TeeHole",
    "WindReading",
    "get_elevation",
    "get_wind",
    "search_courses",
]
