"""Shared factories for valid domain entities.

Each factory returns a callable taking keyword overrides, so a test only
spells out the fields it cares about.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.offering import HospitalTestOffering


@pytest.fixture()
def make_hospital() -> Callable[..., Hospital]:
    def factory(**overrides: Any) -> Hospital:
        fields: dict[str, Any] = {
            "hospital_rank": 1,
            "name": "Square Hospitals Ltd.",
            "city": "Dhaka",
            "division": "Dhaka",
            "area": "Panthapath",
            "road": "West Panthapath",
            "house_number": "18/F",
            "full_address": "18/F Bir Uttam Qazi Nuruzzaman Sarak, Dhaka 1205",
            "phone": "01713141414",
            "email": "info@squarehospital.com",
            "latitude": 23.7531,
            "longitude": 90.3814,
            "hospital_type": "Private",
            "departments": ("Cardiology", "Neurology"),
            "facilities": ("ICU", "Pharmacy"),
        }
        fields.update(overrides)
        return Hospital(**fields)

    return factory


@pytest.fixture()
def make_medical_test() -> Callable[..., MedicalTest]:
    def factory(**overrides: Any) -> MedicalTest:
        fields: dict[str, Any] = {
            "name": "Fasting Blood Sugar",
            "test_category": "pathology",
            "description": "Measures blood glucose after an overnight fast.",
            "preparation_instructions": "Fast for 8-12 hours before the test.",
            "fasting_required": True,
            "turnaround_time": "6 hours",
            "age_restrictions": "All ages",
            "gender_specific": "both",
            "purpose": "Diabetes screening",
            "aliases": ("FBS",),
            "keywords": ("sugar", "glucose"),
            "common_symptoms": ("Thirst",),
        }
        fields.update(overrides)
        return MedicalTest(**fields)

    return factory


@pytest.fixture()
def make_offering() -> Callable[..., HospitalTestOffering]:
    def factory(**overrides: Any) -> HospitalTestOffering:
        fields: dict[str, Any] = {
            "hospital_id": "h-1",
            "test_id": "t-1",
            "price": Decimal("1000.00"),
            "availability_hours": "24/7",
            "turnaround_time": "24 hours",
            "report_format": "digital",
            "booking_contact": "01712345678",
            "sample_collection_points": "Ground floor laboratory",
        }
        fields.update(overrides)
        return HospitalTestOffering(**fields)

    return factory
