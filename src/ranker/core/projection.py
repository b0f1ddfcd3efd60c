# src/ranker/core/projection.py
"""Flatten loaded professor rows into response models.

Every call builds new response objects; ORM rows are only read.
"""

from typing import Any, Dict, List

from ..db.models import Professor, Review
from .models.professors import (
    CourseRef,
    FacultyRef,
    ProfessorDetail,
    ProfessorSummary,
    ReviewOut,
    TagRef,
    UniversityRef,
)


def _universities(professor: Professor) -> List[UniversityRef]:
    return [
        UniversityRef(id=rel.university.id, name=rel.university.name, acronym=rel.university.acronym)
        for rel in professor.universities or []
    ]


def _faculties(professor: Professor) -> List[FacultyRef]:
    return [
        FacultyRef(id=rel.faculty.id, name=rel.faculty.name)
        for rel in professor.faculties or []
    ]


def _base_fields(professor: Professor) -> Dict[str, Any]:
    return {
        "id": professor.id,
        "full_name": professor.full_name,
        "average_rating": professor.average_rating,
        "review_count": professor.review_count,
        "universities": _universities(professor),
        "faculties": _faculties(professor),
    }


def review_to_out(review: Review) -> ReviewOut:
    return ReviewOut(
        id=review.id,
        overall_rating=review.overall_rating,
        teaching_quality=review.teaching_quality,
        difficulty_level=review.difficulty_level,
        mandatory_attendance=review.mandatory_attendance,
        class_interest=review.class_interest,
        detailed_comment=review.detailed_comment,
        grade_obtained=review.grade_obtained,
        created_at=review.created_at,
        course=CourseRef(id=review.course.id, name=review.course.name),
    )


def to_summary(professor: Professor) -> ProfessorSummary:
    """Project a professor for list responses (no courses, tags or reviews)."""
    return ProfessorSummary(**_base_fields(professor))


def to_detail(professor: Professor) -> ProfessorDetail:
    """
    Project a professor for the detail response.

    Reviews keep the order they were loaded in; filtering them down to the
    visible ones is the loader's job.
    """
    return ProfessorDetail(
        **_base_fields(professor),
        courses=[
            CourseRef(id=rel.course.id, name=rel.course.name)
            for rel in professor.courses or []
        ],
        tags=[
            TagRef(id=rel.tag.id, name=rel.tag.name, type=rel.tag.type)
            for rel in professor.tags or []
        ],
        reviews=[review_to_out(review) for review in professor.reviews or []],
    )
