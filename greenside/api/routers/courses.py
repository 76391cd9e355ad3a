from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greenside.api.deps import get_user_id
from greenside.courses import CourseService, Hole, TeeOption, get_course_service
from greenside.providers.course_search import CourseSummary

router = APIRouter(
    prefix="/api/courses", tags=["courses"], dependencies=[Depends(get_user_id)]
)


class HolesRequest(BaseModel):
    course: CourseSummary
    category: str
    tee_name: str = Field(
        validation_alias=AliasChoices("tee_name", "teeName"),
        serialization_alias="teeName",
    )

    model_config = ConfigDict(populate_by_name=True)


@router.get("/search", response_model=List[CourseSummary])
def search_courses(
    q: str = Query(default=""),
    service: CourseService = Depends(get_course_service),
) -> List[CourseSummary]:
    return service.search(q)


@router.post("/tees", response_model=List[TeeOption])
def list_tees(course: CourseSummary) -> List[TeeOption]:
    return CourseService.tees_for(course)


@router.post("/holes", response_model=List[Hole])
def holes_for_tee(payload: HolesRequest) -> List[Hole]:
    return CourseService.holes_for_tee(payload.course, payload.category, payload.tee_name)


__all__ = ["router"]
