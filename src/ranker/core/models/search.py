# src/ranker/core/models/search.py
"""Search criteria accepted by the professor query layer."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..query.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT


class ProfessorFilter(BaseModel):
    """Optional filters; every supplied one narrows the result (AND)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    name: Optional[str] = Field(default=None, description="Professor name to search for")
    university_id: Optional[int] = Field(default=None, description="University id")
    faculty_id: Optional[int] = Field(default=None, description="Faculty id")
    department: Optional[str] = Field(default=None, description="University department")
    min_rating: Optional[float] = Field(default=None, ge=0, le=5, description="Minimum rating (0-5)")
    max_rating: Optional[float] = Field(default=None, ge=0, le=5, description="Maximum rating (0-5)")
    min_reviews: Optional[int] = Field(default=None, ge=0, description="Minimum number of reviews")

    @model_validator(mode="after")
    def check_rating_range(self) -> "ProfessorFilter":
        if (
            self.min_rating is not None
            and self.max_rating is not None
            and self.min_rating > self.max_rating
        ):
            raise ValueError("minRating must be less than or equal to maxRating")
        return self


class ProfessorSearchParams(ProfessorFilter):
    """Filters plus the requested page window."""

    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Page number")
    limit: int = Field(
        default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Items per page (max. 100)"
    )
