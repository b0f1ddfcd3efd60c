# src/ranker/services/professors.py
"""Professor search and lookup: the two read operations the API exposes."""

from rich.markup import escape
from sqlalchemy.orm import Session

from ..core.logging import color_palette, log
from ..core.models.professors import PageMeta, PaginatedProfessors, ProfessorDetail
from ..core.models.search import ProfessorSearchParams
from ..core.projection import to_detail, to_summary
from ..core.query.builder import FilterBuilder
from ..core.query.executor import ProfessorQueryExecutor
from ..core.query.pagination import Pagination


class ProfessorService:
    """Wires filter building, pagination, execution and projection together."""

    def __init__(self, session: Session):
        self.executor = ProfessorQueryExecutor(session)

    def search(self, params: ProfessorSearchParams) -> PaginatedProfessors:
        """
        Search professors and return one page plus its metadata.

        The total in `meta` is counted with the same predicate that selected
        the page.
        """
        predicate = FilterBuilder(params).build()
        pagination = Pagination(page=params.page, limit=params.limit)

        with log.timed("Professor search"):
            total, professors = self.executor.search_page(predicate, pagination)

        criteria = params.model_dump(exclude={"page", "limit"}, exclude_none=True)
        log.debug(
            f"Search {escape(str(criteria))} matched {color_palette['count'](total)} "
            f"professors (page {pagination.page}, limit {pagination.limit})"
        )

        return PaginatedProfessors(
            data=[to_summary(professor) for professor in professors],
            meta=PageMeta(
                total=total,
                page=pagination.page,
                last_page=pagination.last_page(total),
                limit=pagination.limit,
            ),
        )

    def get(self, professor_id: int) -> ProfessorDetail:
        """Return the detail view of one professor or raise `NotFoundError`."""
        return to_detail(self.executor.find_one(professor_id))
