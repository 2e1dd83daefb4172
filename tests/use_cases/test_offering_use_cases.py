from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import pytest

from hospital_directory.adapters.in_memory_hospital_repository import InMemoryHospitalRepository
from hospital_directory.adapters.in_memory_medical_test_repository import (
    InMemoryMedicalTestRepository,
)
from hospital_directory.adapters.in_memory_offering_repository import InMemoryOfferingRepository
from hospital_directory.domain.errors import (
    ConflictError,
    FilterValidationError,
    NotFoundError,
    ValidationError,
)
from hospital_directory.domain.filters import OfferingFilters
from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.paging import PageRequest
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
from hospital_directory.use_cases.search_offerings import SearchOfferings, SearchOfferingsRequest


@pytest.fixture()
def hospitals(make_hospital: Callable[..., Hospital]) -> InMemoryHospitalRepository:
    return InMemoryHospitalRepository([make_hospital(id="h-1")])


@pytest.fixture()
def tests(make_medical_test: Callable[..., MedicalTest]) -> InMemoryMedicalTestRepository:
    return InMemoryMedicalTestRepository(
        [make_medical_test(id="t-1"), make_medical_test(id="t-2", name="Lipid Profile")]
    )


@pytest.fixture()
def offerings(make_offering: Callable[..., HospitalTestOffering]) -> InMemoryOfferingRepository:
    return InMemoryOfferingRepository(
        [
            make_offering(
                id="o-1",
                price=Decimal("1000"),
                discount_available=True,
                discount_percentage=Decimal("10"),
                home_collection_available=True,
                home_collection_fee=Decimal("50"),
                online_booking_url="https://example.com/book",
            ),
            make_offering(id="o-2", test_id="t-2", price=Decimal("500")),
            make_offering(id="o-3", hospital_id="h-2", price=Decimal("200"), is_active=False),
        ]
    )


# ==============================================================================
# CreateOffering
# ==============================================================================


def test_create_offering(
    hospitals: InMemoryHospitalRepository,
    tests: InMemoryMedicalTestRepository,
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    use_case = CreateOffering(InMemoryOfferingRepository(), hospitals, tests)

    created = use_case.execute(make_offering(currency="usd", report_format="Both"))

    assert created.id is not None
    assert created.currency == "USD"
    assert created.report_format == "both"


def test_create_offering_unknown_hospital(
    hospitals: InMemoryHospitalRepository,
    tests: InMemoryMedicalTestRepository,
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    use_case = CreateOffering(InMemoryOfferingRepository(), hospitals, tests)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(make_offering(hospital_id="missing"))

    assert exc_info.value.context["resource"] == "Hospital"


def test_create_offering_unknown_test(
    hospitals: InMemoryHospitalRepository,
    tests: InMemoryMedicalTestRepository,
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    use_case = CreateOffering(InMemoryOfferingRepository(), hospitals, tests)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(make_offering(test_id="missing"))

    assert exc_info.value.context["resource"] == "MedicalTest"


def test_create_offering_duplicate_pair(
    hospitals: InMemoryHospitalRepository,
    tests: InMemoryMedicalTestRepository,
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    use_case = CreateOffering(InMemoryOfferingRepository(), hospitals, tests)
    use_case.execute(make_offering())

    with pytest.raises(ConflictError):
        use_case.execute(make_offering(price=Decimal("1200")))


def test_create_offering_requires_discount_percentage(
    hospitals: InMemoryHospitalRepository,
    tests: InMemoryMedicalTestRepository,
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    use_case = CreateOffering(InMemoryOfferingRepository(), hospitals, tests)

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(make_offering(discount_available=True))

    assert exc_info.value.errors == [
        {
            "field": "discount_percentage",
            "message": "Discount percentage is required when discount is available",
            "code": "REQUIRED",
        }
    ]


# ==============================================================================
# SearchOfferings
# ==============================================================================


def test_search_orders_by_price(offerings: InMemoryOfferingRepository) -> None:
    response = SearchOfferings(offerings).execute(
        SearchOfferingsRequest(filters=OfferingFilters(), paging=PageRequest())
    )

    assert [o.id for o in response.offerings] == ["o-3", "o-2", "o-1"]
    assert response.page_info.total_count == 3


def test_search_active_only(offerings: InMemoryOfferingRepository) -> None:
    response = SearchOfferings(offerings).execute(
        SearchOfferingsRequest(filters=OfferingFilters(is_active=True), paging=PageRequest())
    )

    assert [o.id for o in response.offerings] == ["o-2", "o-1"]


def test_search_by_price_range(offerings: InMemoryOfferingRepository) -> None:
    response = SearchOfferings(offerings).execute(
        SearchOfferingsRequest(
            filters=OfferingFilters(price_min=Decimal("300"), price_max=Decimal("1000")),
            paging=PageRequest(),
        )
    )

    assert [o.id for o in response.offerings] == ["o-2", "o-1"]


def test_search_rejects_inverted_price_range(offerings: InMemoryOfferingRepository) -> None:
    with pytest.raises(FilterValidationError):
        SearchOfferings(offerings).execute(
            SearchOfferingsRequest(
                filters=OfferingFilters(price_min=Decimal("10"), price_max=Decimal("5")),
                paging=PageRequest(),
            )
        )


# ==============================================================================
# Pricing and booking
# ==============================================================================


def test_get_offering_not_found(offerings: InMemoryOfferingRepository) -> None:
    with pytest.raises(NotFoundError):
        GetOfferingById(offerings).execute(GetOfferingByIdRequest(offering_id="missing"))


def test_quote_without_home_collection(offerings: InMemoryOfferingRepository) -> None:
    quote = QuoteOfferingTotal(offerings).execute(QuoteOfferingTotalRequest(offering_id="o-1"))

    assert quote.total_cost == Decimal("900.00")
    assert quote.include_home_collection is False
    assert quote.currency == "BDT"


def test_quote_discount_applies_to_home_collection_fee(
    offerings: InMemoryOfferingRepository,
) -> None:
    quote = QuoteOfferingTotal(offerings).execute(
        QuoteOfferingTotalRequest(offering_id="o-1", include_home_collection=True)
    )

    assert quote.total_cost == Decimal("945.00")


def test_quote_ignores_fee_when_home_collection_unavailable(
    offerings: InMemoryOfferingRepository,
) -> None:
    quote = QuoteOfferingTotal(offerings).execute(
        QuoteOfferingTotalRequest(offering_id="o-2", include_home_collection=True)
    )

    assert quote.total_cost == Decimal("500.00")


def test_booking_summary_resolves_names(
    offerings: InMemoryOfferingRepository,
    hospitals: InMemoryHospitalRepository,
    tests: InMemoryMedicalTestRepository,
) -> None:
    summary = GetBookingSummary(offerings, hospitals, tests).execute(
        GetBookingSummaryRequest(offering_id="o-1")
    )

    assert summary.hospital_name == "Square Hospitals Ltd."
    assert summary.test_name == "Fasting Blood Sugar"
    assert summary.offering.online_booking_url == "https://example.com/book"


def test_booking_summary_tolerates_missing_hospital(
    offerings: InMemoryOfferingRepository,
    hospitals: InMemoryHospitalRepository,
    tests: InMemoryMedicalTestRepository,
) -> None:
    summary = GetBookingSummary(offerings, hospitals, tests).execute(
        GetBookingSummaryRequest(offering_id="o-3")
    )

    assert summary.hospital_name is None
    assert summary.test_name == "Fasting Blood Sugar"


# ==============================================================================
# DeleteOffering
# ==============================================================================


def test_delete_offering(offerings: InMemoryOfferingRepository) -> None:
    DeleteOffering(offerings).execute(DeleteOfferingRequest(offering_id="o-2"))

    assert offerings.get_by_id("o-2") is None


def test_delete_offering_not_found(offerings: InMemoryOfferingRepository) -> None:
    with pytest.raises(NotFoundError):
        DeleteOffering(offerings).execute(DeleteOfferingRequest(offering_id="missing"))
