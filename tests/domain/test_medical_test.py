from __future__ import annotations

from collections.abc import Callable

import pytest

from hospital_directory.domain.errors import ValidationError
from hospital_directory.domain.medical_test import MedicalTest


def test_valid_test_passes(make_medical_test: Callable[..., MedicalTest]) -> None:
    make_medical_test().normalized().validate()


def test_normalized_lowercases_category_gender_and_keywords(
    make_medical_test: Callable[..., MedicalTest],
) -> None:
    test = make_medical_test(
        test_category=" Pathology ",
        gender_specific="BOTH",
        keywords=(" Sugar ", "GLUCOSE", " "),
        aliases=(" FBS ",),
    ).normalized()

    assert test.test_category == "pathology"
    assert test.gender_specific == "both"
    assert test.keywords == ("sugar", "glucose")
    assert test.aliases == ("FBS",)


def test_missing_name_is_reported() -> None:
    with pytest.raises(ValidationError) as exc_info:
        MedicalTest(
            test_category="pathology",
            description="d",
            preparation_instructions="p",
            turnaround_time="1 day",
            age_restrictions="None",
            gender_specific="both",
            purpose="x",
        ).validate()

    assert exc_info.value.errors == [
        {"field": "name", "message": "Test name is required", "code": "REQUIRED"}
    ]


def test_unknown_gender_is_rejected(make_medical_test: Callable[..., MedicalTest]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_medical_test(gender_specific="other").validate()

    assert exc_info.value.errors[0]["message"] == (
        "Gender specific must be either male, female, or both"
    )


def test_category_must_be_a_department(make_medical_test: Callable[..., MedicalTest]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_medical_test(test_category="astrology").validate()

    assert exc_info.value.errors[0]["field"] == "test_category"


def test_summary(make_medical_test: Callable[..., MedicalTest]) -> None:
    assert make_medical_test(id="t-1").summary() == {
        "id": "t-1",
        "name": "Fasting Blood Sugar",
        "category": "pathology",
        "turnaround_time": "6 hours",
        "fasting_required": True,
    }


def test_turnaround_time_fits_its_column(make_medical_test: Callable[..., MedicalTest]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_medical_test(turnaround_time="x" * 101).validate()

    assert exc_info.value.errors == [
        {
            "field": "turnaround_time",
            "message": "Turnaround time cannot exceed 100 characters",
            "code": "TOO_LONG",
        }
    ]
