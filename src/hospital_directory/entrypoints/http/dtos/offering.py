from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hospital_directory.domain.enums import Currency, ReportFormat
from hospital_directory.entrypoints.http.dtos.common import PaginationDTO, vocabulary_pattern

DECIMAL_PATTERN = r"^\d+(\.\d{1,2})?$"


class OfferingCreateDTO(BaseModel):
    """Request payload for registering a hospital's price for a test."""

    model_config = ConfigDict(extra="forbid")

    hospital_id: str
    test_id: str
    price: str = Field(
        description="Decimal as string", examples=["1000.00"], pattern=DECIMAL_PATTERN
    )
    currency: str = Field(default="BDT", examples=["BDT"])
    unit: str = Field(default="per test", examples=["per test"])
    availability_hours: str = Field(examples=["24/7"])
    priority_available: bool = False
    discount_available: bool = False
    discount_percentage: str | None = Field(
        default=None, examples=["10"], pattern=DECIMAL_PATTERN
    )
    insurance_coverage: list[str] = Field(default_factory=list)
    turnaround_time: str = Field(examples=["24 hours"])
    report_format: str = Field(examples=["digital"])
    home_collection_available: bool = False
    home_collection_fee: str | None = Field(
        default=None, examples=["50.00"], pattern=DECIMAL_PATTERN
    )
    booking_contact: str = Field(examples=["01712345678"])
    online_booking_url: str | None = None
    sample_collection_points: str = Field(examples=["Ground floor lab, Gate 2"])
    is_active: bool = True
    featured: bool = False
    hospital_notes: str | None = None
    preparation_notes_override: str | None = None
    appointment_required: bool = True
    min_advance_booking_hours: int = 0
    max_advance_booking_days: int = 30


class OfferingResponseDTO(BaseModel):
    id: str
    hospital_id: str
    test_id: str
    price: str
    discounted_price: str
    currency: str
    unit: str
    availability_hours: str
    priority_available: bool
    discount_available: bool
    discount_percentage: str | None
    insurance_coverage: list[str]
    turnaround_time: str
    report_format: str
    home_collection_available: bool
    home_collection_fee: str | None
    booking_contact: str
    online_booking_url: str | None
    sample_collection_points: str
    is_active: bool
    featured: bool
    hospital_notes: str | None
    preparation_notes_override: str | None
    appointment_required: bool
    min_advance_booking_hours: int
    max_advance_booking_days: int


class OfferingListQueryDTO(BaseModel):
    hospital_id: str | None = None
    test_id: str | None = None
    is_active: str | None = Field(
        default=None, description='Defaults to active offerings only; "false" lists inactive'
    )
    featured: str | None = None
    home_collection_available: str | None = None
    currency: str | None = Field(default=None, pattern=vocabulary_pattern(Currency))
    report_format: str | None = Field(default=None, pattern=vocabulary_pattern(ReportFormat))
    price_min: str | None = Field(default=None, examples=["500.00"], pattern=DECIMAL_PATTERN)
    price_max: str | None = Field(default=None, examples=["2000.00"], pattern=DECIMAL_PATTERN)
    page: str | None = None
    limit: str | None = None


class OfferingListResponseDTO(BaseModel):
    success: bool = True
    data: list[OfferingResponseDTO]
    pagination: PaginationDTO


class OfferingTotalCostDTO(BaseModel):
    offering_id: str
    currency: str
    include_home_collection: bool
    total_cost: str = Field(examples=["945.00"])


class BookingSummaryDTO(BaseModel):
    hospital_test_id: str
    hospital_name: str | None
    test_name: str | None
    price: str
    currency: str
    turnaround_time: str
    home_collection_available: bool
    appointment_required: bool
    booking_contact: str
    online_booking_url: str | None
