from __future__ import annotations

import math
from dataclasses import dataclass

from hospital_directory.domain.errors import PagingValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _positive_int(raw: str | int | None, default: int) -> int:
    """Coerce ``raw`` to a positive int; anything else falls back to ``default``."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


@dataclass(frozen=True, slots=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_raw(
        cls,
        page: str | int | None = None,
        limit: str | int | None = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> PageRequest:
        """
        Build a page request from loosely-typed query values.

        Non-numeric or non-positive values fall back to the defaults instead
        of producing a negative offset. Limits above MAX_LIMIT are clamped.
        """
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=min(_positive_int(limit, default_limit), MAX_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.limit < 1:
            raise PagingValidationError("limit must be >= 1")
        if self.limit > MAX_LIMIT:
            raise PagingValidationError(f"limit must be <= {MAX_LIMIT}")


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Pagination envelope for a page of results."""

    current_page: int
    total_pages: int
    total_count: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, request: PageRequest, total_count: int) -> PageInfo:
        """
        Compute the envelope from the request and an independently counted total.

        The count and the page fetch are separate reads, so a concurrently
        changing collection may make them disagree briefly.
        """
        total_pages = math.ceil(total_count / request.limit)
        return cls(
            current_page=request.page,
            total_pages=total_pages,
            total_count=total_count,
            has_next=request.page < total_pages,
            has_prev=request.page > 1,
        )
