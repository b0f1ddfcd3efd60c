# src/ranker/core/models/professors.py
"""Response models for the professor endpoints (camelCase on the wire)."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UniversityRef(ApiModel):
    id: int
    name: str
    acronym: str


class FacultyRef(ApiModel):
    id: int
    name: str


class CourseRef(ApiModel):
    id: int
    name: str


class TagRef(ApiModel):
    id: int
    name: str
    type: str


class ReviewOut(ApiModel):
    id: int
    overall_rating: float
    teaching_quality: float
    difficulty_level: float
    mandatory_attendance: bool
    class_interest: float
    detailed_comment: Optional[str] = None
    grade_obtained: Optional[str] = None
    created_at: datetime
    course: CourseRef


class ProfessorSummary(ApiModel):
    """List view of a professor."""

    id: int
    full_name: str
    average_rating: float
    review_count: int
    universities: List[UniversityRef] = Field(default_factory=list)
    faculties: List[FacultyRef] = Field(default_factory=list)


class ProfessorDetail(ProfessorSummary):
    """Single-record view with courses, tags and visible reviews."""

    courses: List[CourseRef] = Field(default_factory=list)
    tags: List[TagRef] = Field(default_factory=list)
    reviews: List[ReviewOut] = Field(default_factory=list)


class PageMeta(ApiModel):
    total: int
    page: int
    last_page: int
    limit: int


class PaginatedProfessors(ApiModel):
    data: List[ProfessorSummary]
    meta: PageMeta
