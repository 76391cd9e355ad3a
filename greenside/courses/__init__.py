from .models import Hole, TeeOption
from .service import CourseService, get_course_service

__all__ = ["CourseService", "Hole", "TeeOption", "get_course_service"]
