from __future__ import annotations

from hospital_directory.domain.paging import PageInfo
from hospital_directory.entrypoints.http.dtos.common import PaginationDTO


def to_pagination(page_info: PageInfo) -> PaginationDTO:
    return PaginationDTO(
        currentPage=page_info.current_page,
        totalPages=page_info.total_pages,
        totalCount=page_info.total_count,
        hasNext=page_info.has_next,
        hasPrev=page_info.has_prev,
    )
