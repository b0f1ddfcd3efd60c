# src/ranker/core/query/executor.py
from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.sql.elements import ColumnElement

from ...db.models import (
    Professor,
    ProfessorCourse,
    ProfessorFaculty,
    ProfessorTag,
    ProfessorUniversity,
    Review,
    ReviewVisibility,
)
from ..exceptions import NotFoundError
from .pagination import Pagination


class ProfessorQueryExecutor:
    """Runs professor predicates against the store."""

    def __init__(self, session: Session):
        self.session = session

    def count(self, predicate: ColumnElement[bool]) -> int:
        """Count every professor matching the predicate, ignoring any window."""
        return self.session.query(func.count(Professor.id)).filter(predicate).scalar() or 0

    def fetch_page(
        self, predicate: ColumnElement[bool], pagination: Pagination
    ) -> List[Professor]:
        """
        Fetch one page of matching professors, best rated first.

        Ties on `average_rating` fall back to ascending id so consecutive pages
        never overlap.
        """
        return (
            self.session.query(Professor)
            .options(
                selectinload(Professor.universities).joinedload(ProfessorUniversity.university),
                selectinload(Professor.faculties).joinedload(ProfessorFaculty.faculty),
            )
            .filter(predicate)
            .order_by(Professor.average_rating.desc(), Professor.id.asc())
            .offset(pagination.offset)
            .limit(pagination.limit)
            .all()
        )

    def search_page(
        self, predicate: ColumnElement[bool], pagination: Pagination
    ) -> Tuple[int, List[Professor]]:
        """
        Count and fetch with the same predicate object.

        Both reads run in the session's current transaction.
        """
        total = self.count(predicate)
        return total, self.fetch_page(predicate, pagination)

    def find_one(self, professor_id: int) -> Professor:
        """
        Load a professor with every relation.

        Only visible reviews are loaded, newest first (the relationship is
        ordered by `created_at` descending).
        """
        visible_reviews = Professor.reviews.and_(
            Review.visibility_status == ReviewVisibility.VISIBLE
        )
        professor = (
            self.session.query(Professor)
            .options(
                selectinload(Professor.universities).joinedload(ProfessorUniversity.university),
                selectinload(Professor.faculties).joinedload(ProfessorFaculty.faculty),
                selectinload(Professor.courses).joinedload(ProfessorCourse.course),
                selectinload(Professor.tags).joinedload(ProfessorTag.tag),
                selectinload(visible_reviews).joinedload(Review.course),
            )
            .populate_existing()
            .filter(Professor.id == professor_id)
            .one_or_none()
        )
        if professor is None:
            raise NotFoundError(f"Professor with id {professor_id} not found")
        return professor
