"""Explicit filter objects and the builder that fills them from raw params.

Each filter object is both an in-memory predicate (``matches``) and the
input the PostgreSQL adapters translate into WHERE clauses. All criteria
are ANDed; an empty filter matches everything.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from hospital_directory.domain.enums import Department, Facility, HospitalType, Vocabulary
from hospital_directory.domain.errors import FilterValidationError
from hospital_directory.domain.geo import BoundingBox
from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.search import TextSearch


def _contains(haystack: str | None, needle: str | None) -> bool:
    if not needle:
        return True
    return haystack is not None and needle.casefold() in haystack.casefold()


def _intersects(record_values: tuple[str, ...], wanted: tuple[str, ...]) -> bool:
    if not wanted:
        return True
    return bool(set(record_values) & set(wanted))


@dataclass(frozen=True, slots=True)
class HospitalFilters:
    city: str | None = None
    division: str | None = None
    hospital_type: str | None = None
    verified: bool | None = None
    featured: bool | None = None
    departments: tuple[str, ...] = ()
    facilities: tuple[str, ...] = ()
    search: TextSearch | None = None
    bounding_box: BoundingBox | None = None

    def matches(self, hospital: Hospital) -> bool:
        if not _contains(hospital.city, self.city):
            return False
        if not _contains(hospital.division, self.division):
            return False
        if self.hospital_type is not None and hospital.hospital_type != self.hospital_type:
            return False
        if self.verified is not None and hospital.verified != self.verified:
            return False
        if self.featured is not None and hospital.featured != self.featured:
            return False
        if not _intersects(hospital.departments, self.departments):
            return False
        if not _intersects(hospital.facilities, self.facilities):
            return False
        if self.search is not None and not self.search.matches(
            substring_fields=(hospital.name, hospital.description),
            element_fields=(hospital.departments, hospital.facilities),
        ):
            return False
        if self.bounding_box is not None and not self.bounding_box.contains(
            hospital.latitude, hospital.longitude
        ):
            return False
        return True


@dataclass(frozen=True, slots=True)
class MedicalTestFilters:
    test_category: str | None = None
    fasting_required: bool | None = None
    genders: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    common_symptoms: tuple[str, ...] = ()
    search: TextSearch | None = None

    def matches(self, test: MedicalTest) -> bool:
        if self.test_category is not None and test.test_category != self.test_category:
            return False
        if self.fasting_required is not None and test.fasting_required != self.fasting_required:
            return False
        if self.genders and test.gender_specific not in self.genders:
            return False
        if not _intersects(test.keywords, self.keywords):
            return False
        if not _intersects(test.aliases, self.aliases):
            return False
        if not _intersects(test.common_symptoms, self.common_symptoms):
            return False
        if self.search is not None and not self.search.matches(
            substring_fields=(test.name, test.description),
            element_fields=(test.keywords, test.aliases),
        ):
            return False
        return True


@dataclass(frozen=True, slots=True)
class OfferingFilters:
    hospital_id: str | None = None
    test_id: str | None = None
    is_active: bool | None = None
    featured: bool | None = None
    home_collection_available: bool | None = None
    currency: str | None = None
    report_format: str | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None

    def validate(self) -> None:
        """
        Raises:
            FilterValidationError: If the price range is inverted
        """
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")

    def matches(self, offering: HospitalTestOffering) -> bool:
        if self.hospital_id is not None and offering.hospital_id != self.hospital_id:
            return False
        if self.test_id is not None and offering.test_id != self.test_id:
            return False
        if self.is_active is not None and offering.is_active != self.is_active:
            return False
        if self.featured is not None and offering.featured != self.featured:
            return False
        if (
            self.home_collection_available is not None
            and offering.home_collection_available != self.home_collection_available
        ):
            return False
        if self.currency is not None and offering.currency != self.currency:
            return False
        if self.report_format is not None and offering.report_format != self.report_format:
            return False
        if self.price_min is not None and offering.price < self.price_min:
            return False
        if self.price_max is not None and offering.price > self.price_max:
            return False
        return True


class FilterBuilder:
    """
    Turns optional raw request values into filter objects.

    Rules:
    - Booleans: the literal string "true" is True, any other present value
      is False, absent (None) means "do not filter".
    - Lists: comma-separated, trimmed, empties dropped, then case-normalized
      per field convention.
    - Enums: normalized to the stored spelling. Unknown values are rejected
      by the HTTP validation layer before reaching this point.
    """

    @staticmethod
    def flag(raw: Any) -> bool | None:
        if raw is None:
            return None
        if isinstance(raw, bool):
            return raw
        return str(raw) == "true"

    @staticmethod
    def csv(raw: str | None, lowercase: bool = False) -> tuple[str, ...]:
        if not raw:
            return ()
        parts = (part.strip() for part in raw.split(","))
        if lowercase:
            return tuple(part.lower() for part in parts if part)
        return tuple(part for part in parts if part)

    @staticmethod
    def text(raw: str | None) -> str | None:
        if raw is None or not raw.strip():
            return None
        return raw.strip()

    @staticmethod
    def canonical(raw: str | None, vocabulary: type[Vocabulary]) -> str | None:
        value = FilterBuilder.text(raw)
        if value is None:
            return None
        member = vocabulary.parse(value)
        return member.value if member is not None else value

    @staticmethod
    def canonical_csv(raw: str | None, vocabulary: type[Vocabulary]) -> tuple[str, ...]:
        values = []
        for part in FilterBuilder.csv(raw):
            member = vocabulary.parse(part)
            values.append(member.value if member is not None else part)
        return tuple(values)

    @staticmethod
    def decimal(raw: Any, field: str) -> Decimal | None:
        if raw is None or str(raw).strip() == "":
            return None
        try:
            return Decimal(str(raw).strip())
        except InvalidOperation:
            raise FilterValidationError(
                errors=[
                    {
                        "field": field,
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            )

    @classmethod
    def hospitals(cls, params: Mapping[str, Any]) -> HospitalFilters:
        search = cls.text(params.get("search"))
        return HospitalFilters(
            city=cls.text(params.get("city")),
            division=cls.text(params.get("division")),
            hospital_type=cls.canonical(params.get("hospital_type"), HospitalType),
            verified=cls.flag(params.get("verified")),
            featured=cls.flag(params.get("featured")),
            departments=cls.canonical_csv(params.get("departments"), Department),
            facilities=cls.canonical_csv(params.get("facilities"), Facility),
            search=TextSearch(search) if search else None,
        )

    @classmethod
    def medical_tests(cls, params: Mapping[str, Any]) -> MedicalTestFilters:
        category = cls.text(params.get("test_category"))
        gender = cls.text(params.get("gender_specific"))
        return MedicalTestFilters(
            test_category=category.lower() if category else None,
            fasting_required=cls.flag(params.get("fasting_required")),
            genders=(gender.lower(),) if gender else (),
            keywords=cls.csv(params.get("keywords"), lowercase=True),
            aliases=cls.csv(params.get("aliases")),
            common_symptoms=cls.csv(params.get("symptoms")),
        )

    @classmethod
    def offerings(cls, params: Mapping[str, Any]) -> OfferingFilters:
        currency = cls.text(params.get("currency"))
        report_format = cls.text(params.get("report_format"))
        return OfferingFilters(
            hospital_id=cls.text(params.get("hospital_id")),
            test_id=cls.text(params.get("test_id")),
            is_active=cls.flag(params.get("is_active")),
            featured=cls.flag(params.get("featured")),
            home_collection_available=cls.flag(params.get("home_collection_available")),
            currency=currency.upper() if currency else None,
            report_format=report_format.lower() if report_format else None,
            price_min=cls.decimal(params.get("price_min"), "price_min"),
            price_max=cls.decimal(params.get("price_max"), "price_max"),
        )
