# src/ranker/core/query/pagination.py
from dataclasses import dataclass

from ..exceptions import InvalidCriteriaError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


@dataclass(frozen=True)
class Pagination:
    """A page window. Requesting a page past the last one is allowed and yields no rows."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self):
        if self.page < 1:
            raise InvalidCriteriaError(f"page must be >= 1, got {self.page}")
        if not 1 <= self.limit <= MAX_LIMIT:
            raise InvalidCriteriaError(
                f"limit must be between 1 and {MAX_LIMIT}, got {self.limit}"
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def last_page(self, total: int) -> int:
        """ceil(total / limit), or 0 when nothing matched."""
        if total <= 0:
            return 0
        return -(-total // self.limit)
