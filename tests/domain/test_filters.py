from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import pytest

from hospital_directory.domain.errors import FilterValidationError
from hospital_directory.domain.filters import (
    FilterBuilder,
    HospitalFilters,
    MedicalTestFilters,
    OfferingFilters,
)
from hospital_directory.domain.geo import BoundingBox
from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.search import TextSearch


# ==============================================================================
# FilterBuilder primitives
# ==============================================================================


@pytest.mark.parametrize(
    "raw, expected",
    [(None, None), ("true", True), ("false", False), ("yes", False), ("TRUE", False), (True, True)],
)
def test_flag_only_literal_true_is_true(raw: object, expected: bool | None) -> None:
    assert FilterBuilder.flag(raw) is expected


def test_csv_trims_and_drops_empties() -> None:
    assert FilterBuilder.csv(" sugar, ,Glucose ,") == ("sugar", "Glucose")
    assert FilterBuilder.csv("Sugar,GLUCOSE", lowercase=True) == ("sugar", "glucose")
    assert FilterBuilder.csv(None) == ()


def test_decimal_rejects_garbage() -> None:
    with pytest.raises(FilterValidationError) as exc_info:
        FilterBuilder.decimal("abc", "price_min")

    assert exc_info.value.errors[0]["field"] == "price_min"
    assert exc_info.value.errors[0]["code"] == "INVALID_DECIMAL"


# ==============================================================================
# Hospital filters
# ==============================================================================


def test_hospital_params_are_normalized() -> None:
    filters = FilterBuilder.hospitals(
        {
            "city": " dhaka ",
            "hospital_type": "private",
            "verified": "true",
            "featured": "nope",
            "departments": "cardiology, neurology",
            "search": "  ",
        }
    )

    assert filters == HospitalFilters(
        city="dhaka",
        hospital_type="Private",
        verified=True,
        featured=False,
        departments=("Cardiology", "Neurology"),
    )


def test_empty_hospital_filters_match_everything(make_hospital: Callable[..., Hospital]) -> None:
    assert HospitalFilters().matches(make_hospital())


def test_city_is_case_insensitive_partial(make_hospital: Callable[..., Hospital]) -> None:
    filters = HospitalFilters(city="dhaka")

    assert filters.matches(make_hospital(city="Dhaka City"))
    assert not filters.matches(make_hospital(city="Rajshahi"))


def test_department_lists_match_any(make_hospital: Callable[..., Hospital]) -> None:
    filters = HospitalFilters(departments=("Oncology", "Cardiology"))

    assert filters.matches(make_hospital(departments=("Cardiology",)))
    assert not filters.matches(make_hospital(departments=("ENT",)))


def test_hospital_filters_are_anded(make_hospital: Callable[..., Hospital]) -> None:
    filters = HospitalFilters(city="Dhaka", verified=True)

    assert filters.matches(make_hospital(verified=True))
    assert not filters.matches(make_hospital(verified=False))


def test_hospital_search_covers_text_and_lists(make_hospital: Callable[..., Hospital]) -> None:
    hospital = make_hospital(description="Leading cardiac care centre")

    assert HospitalFilters(search=TextSearch("CARDIAC")).matches(hospital)
    assert HospitalFilters(search=TextSearch("icu")).matches(hospital)
    # list fields need a whole-element match
    assert not HospitalFilters(search=TextSearch("Neuro")).matches(hospital)


def test_bounding_box_filter(make_hospital: Callable[..., Hospital]) -> None:
    box = BoundingBox(min_latitude=23.7, max_latitude=23.8, min_longitude=90.3, max_longitude=90.4)
    filters = HospitalFilters(bounding_box=box)

    assert filters.matches(make_hospital())
    assert not filters.matches(make_hospital(latitude=24.37, longitude=88.60))


# ==============================================================================
# Medical test filters
# ==============================================================================


def test_medical_test_params_are_normalized() -> None:
    filters = FilterBuilder.medical_tests(
        {
            "test_category": "Pathology",
            "fasting_required": "true",
            "gender_specific": "Both",
            "keywords": "Sugar, GLUCOSE",
            "aliases": "FBS",
            "symptoms": "Thirst",
        }
    )

    assert filters == MedicalTestFilters(
        test_category="pathology",
        fasting_required=True,
        genders=("both",),
        keywords=("sugar", "glucose"),
        aliases=("FBS",),
        common_symptoms=("Thirst",),
    )


def test_keyword_filter_matches_any_listed(
    make_medical_test: Callable[..., MedicalTest],
) -> None:
    test = make_medical_test()

    assert MedicalTestFilters(keywords=("cholesterol", "glucose")).matches(test)
    assert not MedicalTestFilters(keywords=("cholesterol",)).matches(test)


def test_fasting_false_filters_non_fasting(make_medical_test: Callable[..., MedicalTest]) -> None:
    filters = MedicalTestFilters(fasting_required=False)

    assert not filters.matches(make_medical_test(fasting_required=True))
    assert filters.matches(make_medical_test(fasting_required=False))


# ==============================================================================
# Offering filters
# ==============================================================================


def test_offering_params_are_normalized() -> None:
    filters = FilterBuilder.offerings(
        {"currency": "bdt", "report_format": "Digital", "price_min": "100", "is_active": "true"}
    )

    assert filters.currency == "BDT"
    assert filters.report_format == "digital"
    assert filters.price_min == Decimal("100")
    assert filters.is_active is True


def test_offering_price_range_is_inclusive(
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    filters = OfferingFilters(price_min=Decimal("1000.00"), price_max=Decimal("1000.00"))

    assert filters.matches(make_offering(price=Decimal("1000.00")))
    assert not filters.matches(make_offering(price=Decimal("1000.01")))


def test_inverted_price_range_is_rejected() -> None:
    with pytest.raises(FilterValidationError):
        OfferingFilters(price_min=Decimal("10"), price_max=Decimal("5")).validate()
