from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, List

from greenside.errors import InvalidInput
from greenside.providers.course_search import CourseSummary, search_courses

from .models import Hole, TeeOption

logger = logging.getLogger(__name__)

CourseSearch = Callable[[str], List[CourseSummary]]


class CourseService:
    def __init__(self, search: CourseSearch | None = None) -> None:
        self._search = search or search_courses

    def search(self, query: str) -> List[CourseSummary]:
        text = (query or "").strip()
        if not text:
            raise InvalidInput("Please enter a course to search for.")
        courses = self._search(text)
        logger.info("course_search", extra={"query": text, "results": len(courses)})
        return courses

    @staticmethod
    def tees_for(course: CourseSummary) -> List[TeeOption]:
        return [
            TeeOption(category=category, tee_name=tee.tee_name, hole_count=len(tee.holes))
            for category, tees in course.tees.items()
            for tee in tees
        ]

    @staticmethod
    def holes_for_tee(
        course: CourseSummary, category: str, tee_name: str
    ) -> List[Hole]:
        """Holes for one tee, numbered 1..N in the order the provider lists them."""
        tees = course.tees.get(category)
        if not tees:
            raise InvalidInput(f"Unknown tee category {category!r}")
        tee = next((t for t in tees if t.tee_name == tee_name), None)
        if tee is None:
            raise InvalidInput(f"Unknown tee {tee_name!r} in category {category!r}")
        return [
            Hole(
                number=index,
                distance_yards=hole.yardage or 0.0,
                par=hole.par,
                handicap_rank=hole.handicap or 0,
            )
            for index, hole in enumerate(tee.holes, start=1)
        ]


@lru_cache(maxsize=1)
def get_course_service() -> CourseService:
    return CourseService()


__all__ = ["CourseSearch", "CourseService", "get_course_service"]
