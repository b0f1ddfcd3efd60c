# src/ranker/core/query/builder.py
from typing import Any, Dict, List, Tuple

from sqlalchemy import and_, true
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql.elements import ColumnElement

from ...db.models import Professor, ProfessorFaculty, ProfessorUniversity, University
from ..models.search import ProfessorFilter
from .operators import apply_operator


class FilterBuilder:
    """
    Builds a single boolean predicate over `Professor` from search criteria.

    Column criteria are ANDed together. Criteria that reach through the same
    relationship are grouped and emitted as ONE `EXISTS` whose joined row must
    satisfy all of them, so `universityId` and `department` have to match on
    the same university link rather than on two different ones.
    """

    def __init__(self, criteria: ProfessorFilter):
        self.criteria = criteria

    def build(self) -> ColumnElement[bool]:
        conditions: List[ColumnElement[bool]] = []
        related: Dict[str, Tuple[InstrumentedAttribute, List[ColumnElement[bool]]]] = {}

        def where(column: Any, operator: str, value: Any) -> None:
            conditions.append(apply_operator(column, operator, value))

        def where_related(relation: InstrumentedAttribute, condition: ColumnElement[bool]) -> None:
            related.setdefault(relation.key, (relation, []))[1].append(condition)

        c = self.criteria

        if c.name:
            where(Professor.full_name, "icontains", c.name)
        if c.min_rating is not None:
            where(Professor.average_rating, "gte", c.min_rating)
        if c.max_rating is not None:
            where(Professor.average_rating, "lte", c.max_rating)
        if c.min_reviews is not None:
            where(Professor.review_count, "gte", c.min_reviews)

        if c.university_id is not None:
            where_related(
                Professor.universities,
                apply_operator(ProfessorUniversity.university_id, "eq", c.university_id),
            )
        if c.department:
            where_related(
                Professor.universities,
                ProfessorUniversity.university.has(
                    apply_operator(University.department, "icontains", c.department)
                ),
            )
        if c.faculty_id is not None:
            where_related(
                Professor.faculties,
                apply_operator(ProfessorFaculty.faculty_id, "eq", c.faculty_id),
            )

        for relation, relation_conditions in related.values():
            conditions.append(relation.any(and_(*relation_conditions)))

        return and_(true(), *conditions)
