from __future__ import annotations

from dataclasses import dataclass

from hospital_directory.domain.filters import HospitalFilters
from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.paging import PageInfo, PageRequest
from hospital_directory.ports.hospital_repository import HospitalRepository


@dataclass(frozen=True, slots=True)
class SearchHospitalsRequest:
    filters: HospitalFilters
    paging: PageRequest


@dataclass(frozen=True, slots=True)
class SearchHospitalsResponse:
    hospitals: list[Hospital]
    page_info: PageInfo


class SearchHospitals:
    """
    Hospital directory listing with filters and pagination.

    Filtering happens in the repository adapter; this use case validates
    paging and builds the pagination envelope from the total count.
    """

    def __init__(self, hospital_repository: HospitalRepository) -> None:
        self._repository = hospital_repository

    def execute(self, request: SearchHospitalsRequest) -> SearchHospitalsResponse:
        """
        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        request.paging.validate()

        result = self._repository.search(filters=request.filters, paging=request.paging)

        return SearchHospitalsResponse(
            hospitals=result.hospitals,
            page_info=PageInfo.build(request.paging, result.total_count),
        )
