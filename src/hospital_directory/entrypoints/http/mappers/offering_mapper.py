from __future__ import annotations

from decimal import Decimal

from hospital_directory.domain import pricing
from hospital_directory.domain.filters import FilterBuilder
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.paging import PageRequest
from hospital_directory.entrypoints.http.dtos.offering import (
    BookingSummaryDTO,
    OfferingCreateDTO,
    OfferingListQueryDTO,
    OfferingListResponseDTO,
    OfferingResponseDTO,
    OfferingTotalCostDTO,
)
from hospital_directory.entrypoints.http.mappers.common import to_pagination
from hospital_directory.use_cases.price_offering import BookingSummary, OfferingQuote
from hospital_directory.use_cases.search_offerings import (
    SearchOfferingsRequest,
    SearchOfferingsResponse,
)


def _money(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


class OfferingMapper:
    """Maps between REST DTOs and offerings. Decimal <-> str happens only here."""

    @staticmethod
    def to_domain_request(dto: OfferingListQueryDTO) -> SearchOfferingsRequest:
        params = dto.model_dump()
        # Inactive offerings are hidden unless explicitly requested.
        if params["is_active"] is None:
            params["is_active"] = "true"
        return SearchOfferingsRequest(
            filters=FilterBuilder.offerings(params),
            paging=PageRequest.from_raw(dto.page, dto.limit),
        )

    @staticmethod
    def to_domain(dto: OfferingCreateDTO) -> HospitalTestOffering:
        data = dto.model_dump()
        data["price"] = Decimal(dto.price)
        data["discount_percentage"] = (
            Decimal(dto.discount_percentage) if dto.discount_percentage else None
        )
        data["home_collection_fee"] = (
            Decimal(dto.home_collection_fee) if dto.home_collection_fee else None
        )
        data["insurance_coverage"] = tuple(dto.insurance_coverage)
        return HospitalTestOffering(**data)

    @staticmethod
    def to_offering_response(offering: HospitalTestOffering) -> OfferingResponseDTO:
        return OfferingResponseDTO(
            id=offering.id,
            hospital_id=offering.hospital_id,
            test_id=offering.test_id,
            price=str(offering.price),
            discounted_price=str(pricing.discounted_price(offering)),
            currency=offering.currency,
            unit=offering.unit,
            availability_hours=offering.availability_hours,
            priority_available=offering.priority_available,
            discount_available=offering.discount_available,
            discount_percentage=_money(offering.discount_percentage),
            insurance_coverage=list(offering.insurance_coverage),
            turnaround_time=offering.turnaround_time,
            report_format=offering.report_format,
            home_collection_available=offering.home_collection_available,
            home_collection_fee=_money(offering.home_collection_fee),
            booking_contact=offering.booking_contact,
            online_booking_url=offering.online_booking_url,
            sample_collection_points=offering.sample_collection_points,
            is_active=offering.is_active,
            featured=offering.featured,
            hospital_notes=offering.hospital_notes,
            preparation_notes_override=offering.preparation_notes_override,
            appointment_required=offering.appointment_required,
            min_advance_booking_hours=offering.min_advance_booking_hours,
            max_advance_booking_days=offering.max_advance_booking_days,
        )

    @staticmethod
    def to_response(result: SearchOfferingsResponse) -> OfferingListResponseDTO:
        return OfferingListResponseDTO(
            data=[OfferingMapper.to_offering_response(item) for item in result.offerings],
            pagination=to_pagination(result.page_info),
        )

    @staticmethod
    def to_total_cost(quote: OfferingQuote) -> OfferingTotalCostDTO:
        return OfferingTotalCostDTO(
            offering_id=quote.offering_id,
            currency=quote.currency,
            include_home_collection=quote.include_home_collection,
            total_cost=str(quote.total_cost),
        )

    @staticmethod
    def to_booking_summary(summary: BookingSummary) -> BookingSummaryDTO:
        offering = summary.offering
        return BookingSummaryDTO(
            hospital_test_id=offering.id,
            hospital_name=summary.hospital_name,
            test_name=summary.test_name,
            price=str(pricing.discounted_price(offering)),
            currency=offering.currency,
            turnaround_time=offering.turnaround_time,
            home_collection_available=offering.home_collection_available,
            appointment_required=offering.appointment_required,
            booking_contact=offering.booking_contact,
            online_booking_url=offering.online_booking_url,
        )
