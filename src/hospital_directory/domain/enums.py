"""Closed vocabularies shared by hospitals, tests and offerings.

Values are checked at the boundary (entity ``validate()`` and HTTP DTOs),
so query logic only ever sees canonical spellings.
"""

from __future__ import annotations

from enum import Enum


class Vocabulary(str, Enum):
    """String enum with case-insensitive lookup."""

    @classmethod
    def parse(cls, raw: str | None):
        """Return the member whose value matches ``raw`` ignoring case, or None."""
        if raw is None:
            return None
        needle = raw.strip().casefold()
        for member in cls:
            if member.value.casefold() == needle:
                return member
        return None

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Department(Vocabulary):
    MEDICINE = "Medicine"
    SURGERY = "Surgery"
    CARDIOLOGY = "Cardiology"
    NEUROLOGY = "Neurology"
    ORTHOPEDICS = "Orthopedics"
    PEDIATRICS = "Pediatrics"
    GYNECOLOGY = "Gynecology"
    ONCOLOGY = "Oncology"
    DERMATOLOGY = "Dermatology"
    PSYCHIATRY = "Psychiatry"
    OPHTHALMOLOGY = "Ophthalmology"
    ENT = "ENT"
    UROLOGY = "Urology"
    NEPHROLOGY = "Nephrology"
    GASTROENTEROLOGY = "Gastroenterology"
    ENDOCRINOLOGY = "Endocrinology"
    PULMONOLOGY = "Pulmonology"
    RHEUMATOLOGY = "Rheumatology"
    HEMATOLOGY = "Hematology"
    RADIOLOGY = "Radiology"
    PATHOLOGY = "Pathology"
    ANESTHESIOLOGY = "Anesthesiology"
    EMERGENCY_MEDICINE = "Emergency Medicine"


class Facility(Vocabulary):
    ICU = "ICU"
    EMERGENCY = "Emergency"
    DIAGNOSTIC_CENTER = "Diagnostic Center"
    PHARMACY = "Pharmacy"
    BLOOD_BANK = "Blood Bank"
    OPERATION_THEATER = "Operation Theater"
    X_RAY = "X-Ray"
    MRI = "MRI"
    CT_SCAN = "CT Scan"
    LABORATORY = "Laboratory"
    PHYSIOTHERAPY = "Physiotherapy"
    DIALYSIS = "Dialysis"
    MATERNITY_WARD = "Maternity Ward"
    BURN_UNIT = "Burn Unit"
    CARDIAC_CARE_UNIT = "Cardiac Care Unit"
    INTENSIVE_CARE_UNIT = "Intensive Care Unit"
    GENERAL_WARD = "General Ward"


class HospitalType(Vocabulary):
    GOVERNMENT = "Government"
    PRIVATE = "Private"
    NGO = "NGO"


class Language(Vocabulary):
    BENGALI = "Bengali"
    ENGLISH = "English"
    HINDI = "Hindi"


class Gender(Vocabulary):
    MALE = "male"
    FEMALE = "female"
    BOTH = "both"


class Currency(Vocabulary):
    BDT = "BDT"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class Unit(Vocabulary):
    PER_TEST = "per test"
    PER_SAMPLE = "per sample"
    PER_PANEL = "per panel"
    PER_CONSULTATION = "per consultation"


class ReportFormat(Vocabulary):
    DIGITAL = "digital"
    PHYSICAL = "physical"
    BOTH = "both"
