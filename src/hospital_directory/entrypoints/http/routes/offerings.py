from fastapi import APIRouter, Depends, Query, status

from hospital_directory.domain.filters import FilterBuilder
from hospital_directory.entrypoints.http.dependencies import (
    get_booking_summary_use_case,
    get_create_offering_use_case,
    get_delete_offering_use_case,
    get_offering_by_id_use_case,
    get_quote_offering_total_use_case,
    get_search_offerings_use_case,
)
from hospital_directory.entrypoints.http.dtos.common import MessageResponseDTO
from hospital_directory.entrypoints.http.dtos.offering import (
    BookingSummaryDTO,
    OfferingCreateDTO,
    OfferingListQueryDTO,
    OfferingListResponseDTO,
    OfferingResponseDTO,
    OfferingTotalCostDTO,
)
from hospital_directory.entrypoints.http.error_responses import CONFLICT_RESPONSE, ERROR_RESPONSES
from hospital_directory.entrypoints.http.mappers.offering_mapper import OfferingMapper
from hospital_directory.use_cases.manage_offerings import (
    CreateOffering,
    DeleteOffering,
    DeleteOfferingRequest,
)
from hospital_directory.use_cases.price_offering import (
    GetBookingSummary,
    GetBookingSummaryRequest,
    GetOfferingById,
    GetOfferingByIdRequest,
    QuoteOfferingTotal,
    QuoteOfferingTotalRequest,
)
from hospital_directory.use_cases.search_offerings import SearchOfferings

router = APIRouter(tags=["Offerings"])


@router.get(
    "/offerings",
    response_model=OfferingListResponseDTO,
    summary="List hospital test offerings",
    description="""
    Paginated offerings ordered by price ascending.

    Only active offerings are listed unless `is_active` is given.
    Prices are decimal strings; `price_min`/`price_max` are inclusive.
    """,
    responses=ERROR_RESPONSES,
)
def list_offerings(
    query: OfferingListQueryDTO = Depends(),
    use_case: SearchOfferings = Depends(get_search_offerings_use_case),
) -> OfferingListResponseDTO:
    result = use_case.execute(OfferingMapper.to_domain_request(query))
    return OfferingMapper.to_response(result)


@router.post(
    "/offerings",
    response_model=OfferingResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a hospital's price for a test",
    responses={**ERROR_RESPONSES, **CONFLICT_RESPONSE},
)
def create_offering(
    payload: OfferingCreateDTO,
    use_case: CreateOffering = Depends(get_create_offering_use_case),
) -> OfferingResponseDTO:
    offering = use_case.execute(OfferingMapper.to_domain(payload))
    return OfferingMapper.to_offering_response(offering)


@router.get(
    "/offerings/{offering_id}",
    response_model=OfferingResponseDTO,
    summary="Get an offering",
    responses=ERROR_RESPONSES,
)
def get_offering(
    offering_id: str,
    use_case: GetOfferingById = Depends(get_offering_by_id_use_case),
) -> OfferingResponseDTO:
    offering = use_case.execute(GetOfferingByIdRequest(offering_id=offering_id))
    return OfferingMapper.to_offering_response(offering)


@router.get(
    "/offerings/{offering_id}/total-cost",
    response_model=OfferingTotalCostDTO,
    summary="Total payable for a booking",
    description="""
    (price + home collection fee when requested and available), then the
    active discount, rounded half-up to 2 decimal places.
    """,
    responses=ERROR_RESPONSES,
)
def offering_total_cost(
    offering_id: str,
    include_home_collection: str | None = Query(default=None, examples=["true"]),
    use_case: QuoteOfferingTotal = Depends(get_quote_offering_total_use_case),
) -> OfferingTotalCostDTO:
    quote = use_case.execute(
        QuoteOfferingTotalRequest(
            offering_id=offering_id,
            include_home_collection=bool(FilterBuilder.flag(include_home_collection)),
        )
    )
    return OfferingMapper.to_total_cost(quote)


@router.get(
    "/offerings/{offering_id}/booking-summary",
    response_model=BookingSummaryDTO,
    summary="Booking details for an offering",
    responses=ERROR_RESPONSES,
)
def offering_booking_summary(
    offering_id: str,
    use_case: GetBookingSummary = Depends(get_booking_summary_use_case),
) -> BookingSummaryDTO:
    return OfferingMapper.to_booking_summary(
        use_case.execute(GetBookingSummaryRequest(offering_id=offering_id))
    )


@router.delete(
    "/offerings/{offering_id}",
    response_model=MessageResponseDTO,
    summary="Delete an offering",
    responses=ERROR_RESPONSES,
)
def delete_offering(
    offering_id: str,
    use_case: DeleteOffering = Depends(get_delete_offering_use_case),
) -> MessageResponseDTO:
    use_case.execute(DeleteOfferingRequest(offering_id=offering_id))
    return MessageResponseDTO(message="Offering deleted successfully")
