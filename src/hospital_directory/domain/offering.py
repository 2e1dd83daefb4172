from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from decimal import Decimal

from hospital_directory.domain.enums import Currency, ReportFormat, Unit
from hospital_directory.domain.validation import (
    BANGLADESHI_PHONE,
    HTTP_URL,
    FieldErrors,
    clean_list,
)

AVAILABILITY_HOURS = re.compile(r"^(24/7|[\w\s\-:,]+)$", re.IGNORECASE)
OFFERING_TURNAROUND = re.compile(r"^(\d+(-\d+)?\s+(hours?|days?|weeks?))$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class HospitalTestOffering:
    """A hospital-specific, priced instance of a catalog test."""

    hospital_id: str
    test_id: str
    price: Decimal
    availability_hours: str
    turnaround_time: str
    report_format: str
    booking_contact: str
    sample_collection_points: str
    currency: str = Currency.BDT.value
    unit: str = Unit.PER_TEST.value
    priority_available: bool = False
    discount_available: bool = False
    discount_percentage: Decimal | None = None
    insurance_coverage: tuple[str, ...] = ()
    home_collection_available: bool = False
    home_collection_fee: Decimal | None = None
    online_booking_url: str | None = None
    is_active: bool = True
    featured: bool = False
    hospital_notes: str | None = None
    preparation_notes_override: str | None = None
    appointment_required: bool = True
    min_advance_booking_hours: int = 0
    max_advance_booking_days: int = 30
    id: str | None = None

    def normalized(self) -> HospitalTestOffering:
        currency = Currency.parse(self.currency)
        unit = Unit.parse(self.unit)
        return dataclasses.replace(
            self,
            currency=currency.value if currency else self.currency.strip().upper(),
            unit=unit.value if unit else self.unit.strip(),
            availability_hours=self.availability_hours.strip(),
            turnaround_time=self.turnaround_time.strip(),
            report_format=self.report_format.strip().lower(),
            booking_contact=self.booking_contact.strip(),
            sample_collection_points=self.sample_collection_points.strip(),
            insurance_coverage=clean_list(self.insurance_coverage),
            online_booking_url=self.online_booking_url.strip() if self.online_booking_url else None,
        )

    def validate(self) -> None:
        """
        Validate write-time rules.

        Raises:
            ValidationError: With one entry per failing field
        """
        errors = FieldErrors()

        errors.required("hospital_id", self.hospital_id, "Hospital ID is required")
        errors.required("test_id", self.test_id, "Test ID is required")
        errors.in_range("price", self.price, Decimal("0"), None, "Price cannot be negative")
        errors.member_of("currency", self.currency, Currency)
        errors.member_of("unit", self.unit, Unit)

        if errors.required(
            "availability_hours", self.availability_hours, "Availability hours are required"
        ):
            errors.pattern(
                "availability_hours",
                self.availability_hours,
                AVAILABILITY_HOURS,
                "Invalid availability hours format",
            )
            errors.max_length(
                "availability_hours",
                self.availability_hours,
                100,
                "Availability hours cannot exceed 100 characters",
            )

        if errors.required("turnaround_time", self.turnaround_time, "Turnaround time is required"):
            errors.pattern(
                "turnaround_time",
                self.turnaround_time,
                OFFERING_TURNAROUND,
                'Turnaround time must be in format like "24 hours", "2-3 days", "1 week"',
            )
            errors.max_length(
                "turnaround_time",
                self.turnaround_time,
                50,
                "Turnaround time cannot exceed 50 characters",
            )

        if errors.required("report_format", self.report_format, "Report format is required"):
            errors.member_of("report_format", self.report_format, ReportFormat)

        if errors.required("booking_contact", self.booking_contact, "Booking contact is required"):
            errors.pattern(
                "booking_contact",
                self.booking_contact,
                BANGLADESHI_PHONE,
                "Please provide a valid Bangladeshi phone number",
            )

        errors.pattern(
            "online_booking_url", self.online_booking_url, HTTP_URL, "Please provide a valid URL"
        )

        if errors.required(
            "sample_collection_points",
            self.sample_collection_points,
            "Sample collection points are required",
        ):
            errors.max_length(
                "sample_collection_points",
                self.sample_collection_points,
                500,
                "Sample collection points cannot exceed 500 characters",
            )

        if self.discount_available and self.discount_percentage is None:
            errors.add(
                "discount_percentage",
                "Discount percentage is required when discount is available",
                "REQUIRED",
            )
        errors.in_range(
            "discount_percentage",
            self.discount_percentage,
            Decimal("0"),
            Decimal("100"),
            "Discount percentage must be between 0 and 100",
        )

        if self.home_collection_available and self.home_collection_fee is None:
            errors.add(
                "home_collection_fee",
                "Home collection fee is required when home collection is available",
                "REQUIRED",
            )
        errors.in_range(
            "home_collection_fee",
            self.home_collection_fee,
            Decimal("0"),
            None,
            "Home collection fee cannot be negative",
        )

        errors.each_max_length(
            "insurance_coverage",
            self.insurance_coverage,
            100,
            "Insurance name cannot exceed 100 characters",
        )
        errors.max_length(
            "hospital_notes", self.hospital_notes, 1000, "Hospital notes cannot exceed 1000 characters"
        )
        errors.max_length(
            "preparation_notes_override",
            self.preparation_notes_override,
            1000,
            "Preparation notes override cannot exceed 1000 characters",
        )
        errors.in_range(
            "min_advance_booking_hours",
            self.min_advance_booking_hours,
            0,
            None,
            "Minimum advance booking hours cannot be negative",
        )
        errors.in_range(
            "max_advance_booking_days",
            self.max_advance_booking_days,
            1,
            None,
            "Maximum advance booking days must be at least 1",
        )

        errors.raise_if_any()
