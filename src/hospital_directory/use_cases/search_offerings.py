from __future__ import annotations

from dataclasses import dataclass

from hospital_directory.domain.filters import OfferingFilters
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.paging import PageInfo, PageRequest
from hospital_directory.ports.offering_repository import OfferingRepository


@dataclass(frozen=True, slots=True)
class SearchOfferingsRequest:
    filters: OfferingFilters
    paging: PageRequest


@dataclass(frozen=True, slots=True)
class SearchOfferingsResponse:
    offerings: list[HospitalTestOffering]
    page_info: PageInfo


class SearchOfferings:
    """Offerings matching the filters, cheapest first."""

    def __init__(self, offering_repository: OfferingRepository) -> None:
        self._repository = offering_repository

    def execute(self, request: SearchOfferingsRequest) -> SearchOfferingsResponse:
        """
        Raises:
            FilterValidationError: If the price range is inverted
            PagingValidationError: If paging parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        result = self._repository.search(filters=request.filters, paging=request.paging)

        return SearchOfferingsResponse(
            offerings=result.offerings,
            page_info=PageInfo.build(request.paging, result.total_count),
        )
