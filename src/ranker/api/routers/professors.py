# src/ranker/api/routers/professors.py
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ...core.logging import color_palette, log
from ...core.models.professors import PaginatedProfessors, ProfessorDetail
from ...core.models.search import ProfessorSearchParams
from ...core.query.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from ...services.professors import ProfessorService


def search_params(
    request: Request,
    name: Optional[str] = Query(None, description="Professor name to search for"),
    university_id: Optional[int] = Query(None, alias="universityId", description="University id"),
    faculty_id: Optional[int] = Query(None, alias="facultyId", description="Faculty id"),
    department: Optional[str] = Query(None, description="University department"),
    min_rating: Optional[float] = Query(None, alias="minRating", ge=0, le=5, description="Minimum rating (0-5)"),
    max_rating: Optional[float] = Query(None, alias="maxRating", ge=0, le=5, description="Maximum rating (0-5)"),
    min_reviews: Optional[int] = Query(None, alias="minReviews", ge=0, description="Minimum number of reviews"),
    page: int = Query(DEFAULT_PAGE, ge=1, description="Page number"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Items per page (max. 100)"),
) -> ProfessorSearchParams:
    """Collect the query string into `ProfessorSearchParams`, rejecting unknown keys."""
    raw = dict(request.query_params)
    try:
        # Validating the raw query string keeps extra="forbid" in force
        return ProfessorSearchParams.model_validate(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False)) from e


class ProfessorRouter:
    """Generates the professor search and detail routes."""

    def __init__(self, db_dependency: Callable[..., Session], router: APIRouter):
        self.db_dependency = db_dependency
        self.router = router

    def generate_routes(self) -> None:
        self._add_search_route()
        self._add_detail_route()
        log.success(f"Generated professor routes on {color_palette['route'](self.router.prefix or '/')}")

    def _add_search_route(self) -> None:
        @self.router.get(
            "/professors",
            response_model=PaginatedProfessors,
            summary="Search professors",
            description="Search professors by name and narrow the result with filters",
        )
        def search_professors(
            params: ProfessorSearchParams = Depends(search_params),
            db: Session = Depends(self.db_dependency),
        ) -> PaginatedProfessors:
            return ProfessorService(db).search(params)

    def _add_detail_route(self) -> None:
        @self.router.get(
            "/professors/{professor_id}",
            response_model=ProfessorDetail,
            summary="Get professor details",
            description="Return the full detail view of one professor",
            responses={404: {"description": "Professor not found"}},
        )
        def get_professor(
            professor_id: int = Path(..., description="Professor id"),
            db: Session = Depends(self.db_dependency),
        ) -> ProfessorDetail:
            return ProfessorService(db).get(professor_id)
