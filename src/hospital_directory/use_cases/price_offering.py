"""Offering lookups that attach derived pricing and booking details."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from hospital_directory.domain import pricing
from hospital_directory.domain.errors import NotFoundError
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.ports.hospital_repository import HospitalRepository
from hospital_directory.ports.medical_test_repository import MedicalTestRepository
from hospital_directory.ports.offering_repository import OfferingRepository


@dataclass(frozen=True, slots=True)
class GetOfferingByIdRequest:
    offering_id: str


class GetOfferingById:
    def __init__(self, offering_repository: OfferingRepository) -> None:
        self._offerings = offering_repository

    def execute(self, request: GetOfferingByIdRequest) -> HospitalTestOffering:
        offering = self._offerings.get_by_id(request.offering_id)
        if offering is None:
            raise NotFoundError(resource="Offering", identifier=request.offering_id)
        return offering


@dataclass(frozen=True, slots=True)
class OfferingQuote:
    offering_id: str
    currency: str
    include_home_collection: bool
    total_cost: Decimal


@dataclass(frozen=True, slots=True)
class QuoteOfferingTotalRequest:
    offering_id: str
    include_home_collection: bool = False


class QuoteOfferingTotal:
    def __init__(self, offering_repository: OfferingRepository) -> None:
        self._offerings = offering_repository

    def execute(self, request: QuoteOfferingTotalRequest) -> OfferingQuote:
        offering = GetOfferingById(self._offerings).execute(
            GetOfferingByIdRequest(offering_id=request.offering_id)
        )
        return OfferingQuote(
            offering_id=request.offering_id,
            currency=offering.currency,
            include_home_collection=request.include_home_collection,
            total_cost=pricing.total_cost(offering, request.include_home_collection),
        )


@dataclass(frozen=True, slots=True)
class BookingSummary:
    offering: HospitalTestOffering
    hospital_name: str | None
    test_name: str | None


@dataclass(frozen=True, slots=True)
class GetBookingSummaryRequest:
    offering_id: str


class GetBookingSummary:
    """Booking details for an offering, with hospital and test names resolved."""

    def __init__(
        self,
        offering_repository: OfferingRepository,
        hospital_repository: HospitalRepository,
        medical_test_repository: MedicalTestRepository,
    ) -> None:
        self._offerings = offering_repository
        self._hospitals = hospital_repository
        self._tests = medical_test_repository

    def execute(self, request: GetBookingSummaryRequest) -> BookingSummary:
        offering = GetOfferingById(self._offerings).execute(
            GetOfferingByIdRequest(offering_id=request.offering_id)
        )
        hospital = self._hospitals.get_by_id(offering.hospital_id)
        test = self._tests.get_by_id(offering.test_id)
        return BookingSummary(
            offering=offering,
            hospital_name=hospital.name if hospital else None,
            test_name=test.name if test else None,
        )
