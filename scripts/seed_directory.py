#!/usr/bin/env python3
"""
Seed hospitals, medical tests and offerings with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: hospitals around real Bangladeshi city centers, prices
  banded per test category

Usage:
    python scripts/seed_directory.py
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hospital_directory.domain.enums import Department, Facility, HospitalType
from hospital_directory.infra.db.models import HospitalRow, MedicalTestRow, OfferingRow
from hospital_directory.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_HOSPITALS = 30
OFFERINGS_PER_HOSPITAL = (3, 8)


# ==============================================================================
# Reference data
# ==============================================================================

# (city, division, latitude, longitude)
CITIES = [
    ("Dhaka", "Dhaka", 23.8103, 90.4125),
    ("Chattogram", "Chattogram", 22.3569, 91.7832),
    ("Rajshahi", "Rajshahi", 24.3745, 88.6042),
    ("Khulna", "Khulna", 22.8456, 89.5403),
    ("Sylhet", "Sylhet", 24.8949, 91.8687),
    ("Barishal", "Barishal", 22.7010, 90.3535),
    ("Rangpur", "Rangpur", 25.7439, 89.2752),
    ("Mymensingh", "Mymensingh", 24.7471, 90.4203),
]

AREAS = ["Dhanmondi", "Mirpur", "Uttara", "Gulshan", "Banani", "Mohammadpur", "Sadar"]
NAME_PREFIXES = ["Popular", "Square", "City", "Central", "Green Life", "Lab Aid", "Ibn Sina"]
NAME_SUFFIXES = ["Hospital", "Medical College Hospital", "Diagnostic Center", "General Hospital"]

TESTS = [
    {
        "name": "Complete Blood Count",
        "test_category": "hematology",
        "fasting_required": False,
        "turnaround_time": "24 hours",
        "gender_specific": "both",
        "aliases": ["CBC"],
        "keywords": ["blood", "anemia", "infection"],
        "common_symptoms": ["Fatigue", "Fever"],
        "price_band": (300, 600),
    },
    {
        "name": "Fasting Blood Sugar",
        "test_category": "pathology",
        "fasting_required": True,
        "turnaround_time": "6 hours",
        "gender_specific": "both",
        "aliases": ["FBS"],
        "keywords": ["sugar", "glucose", "diabetes"],
        "common_symptoms": ["Thirst", "Frequent urination"],
        "price_band": (150, 300),
    },
    {
        "name": "Lipid Profile",
        "test_category": "pathology",
        "fasting_required": True,
        "turnaround_time": "24 hours",
        "gender_specific": "both",
        "aliases": ["Cholesterol Test"],
        "keywords": ["cholesterol", "heart", "triglycerides"],
        "common_symptoms": ["Chest pain"],
        "price_band": (800, 1500),
    },
    {
        "name": "Electrocardiogram",
        "test_category": "cardiology",
        "fasting_required": False,
        "turnaround_time": "1 hour",
        "gender_specific": "both",
        "aliases": ["ECG", "EKG"],
        "keywords": ["heart", "rhythm"],
        "common_symptoms": ["Palpitations", "Chest pain"],
        "price_band": (400, 800),
    },
    {
        "name": "Prostate Specific Antigen",
        "test_category": "urology",
        "fasting_required": False,
        "turnaround_time": "2 days",
        "gender_specific": "male",
        "aliases": ["PSA"],
        "keywords": ["prostate", "cancer screening"],
        "common_symptoms": ["Difficulty urinating"],
        "price_band": (1200, 2500),
    },
    {
        "name": "Pap Smear",
        "test_category": "gynecology",
        "fasting_required": False,
        "turnaround_time": "3 days",
        "gender_specific": "female",
        "aliases": ["Pap Test"],
        "keywords": ["cervical", "cancer screening"],
        "common_symptoms": [],
        "price_band": (1000, 2000),
    },
    {
        "name": "Chest X-Ray",
        "test_category": "radiology",
        "fasting_required": False,
        "turnaround_time": "2 hours",
        "gender_specific": "both",
        "aliases": ["CXR"],
        "keywords": ["lungs", "xray", "pneumonia"],
        "common_symptoms": ["Cough", "Shortness of breath"],
        "price_band": (500, 1000),
    },
    {
        "name": "Thyroid Stimulating Hormone",
        "test_category": "endocrinology",
        "fasting_required": False,
        "turnaround_time": "24 hours",
        "gender_specific": "both",
        "aliases": ["TSH"],
        "keywords": ["thyroid", "hormone"],
        "common_symptoms": ["Weight change", "Fatigue"],
        "price_band": (600, 1200),
    },
]


# ==============================================================================
# Row generation
# ==============================================================================


def generate_hospital(rank: int) -> HospitalRow:
    city, division, lat, lng = random.choice(CITIES)
    area = random.choice(AREAS)
    name = f"{random.choice(NAME_PREFIXES)} {random.choice(NAME_SUFFIXES)} {area} {rank}"
    departments = random.sample([d.value for d in Department], k=random.randint(2, 6))
    facilities = random.sample([f.value for f in Facility], k=random.randint(2, 5))

    return HospitalRow(
        hospital_rank=rank,
        name=name,
        city=city,
        division=division,
        area=area,
        road=f"Road {random.randint(1, 30)}",
        house_number=str(random.randint(1, 200)),
        full_address=f"House {rank}, {area}, {city}",
        # unique per rank: 017 + 8 digits
        phone=f"017{rank:08d}",
        email=f"info{rank}@example-hospital.com.bd",
        website=None,
        hospital_type=random.choice([t.value for t in HospitalType]),
        facilities=facilities,
        departments=departments,
        languages_spoken=["Bengali", "English"],
        insurance_accepted=[],
        accreditations=[],
        branches=[],
        operating_hours={"sunday": "9:00 AM - 9:00 PM", "friday": "Closed"},
        social_media={},
        emergency_service="Emergency" in facilities,
        home_collection=random.random() < 0.5,
        parking_available=random.random() < 0.7,
        wheelchair_accessible=random.random() < 0.6,
        verified=random.random() < 0.6,
        featured=random.random() < 0.2,
        # jitter within roughly 10 km of the city center
        latitude=round(lat + random.uniform(-0.09, 0.09), 6),
        longitude=round(lng + random.uniform(-0.09, 0.09), 6),
        description=f"Multi-specialty care in {area}, {city}.",
        established_year=random.randint(1960, 2020),
        total_beds=random.randint(20, 800),
    )


def generate_test(entry: dict) -> MedicalTestRow:
    return MedicalTestRow(
        name=entry["name"],
        test_category=entry["test_category"],
        description=f"{entry['name']} laboratory investigation.",
        preparation_instructions=(
            "Fast for 8-12 hours before the test." if entry["fasting_required"] else "None."
        ),
        fasting_required=entry["fasting_required"],
        turnaround_time=entry["turnaround_time"],
        age_restrictions="All ages",
        gender_specific=entry["gender_specific"],
        purpose=f"Screening and diagnosis using {entry['name']}.",
        common_symptoms=entry["common_symptoms"],
        aliases=entry["aliases"],
        keywords=entry["keywords"],
        risks=[],
        contraindications=[],
    )


def generate_offering(hospital: HospitalRow, test: MedicalTestRow, band: tuple) -> OfferingRow:
    price = Decimal(random.randint(*band) // 10 * 10)
    discount = random.random() < 0.3
    home_collection = hospital.home_collection and random.random() < 0.7

    return OfferingRow(
        hospital_id=hospital.id,
        test_id=test.id,
        price=price,
        currency="BDT",
        unit="per test",
        availability_hours=random.choice(["24/7", "8:00 AM - 8:00 PM"]),
        discount_available=discount,
        discount_percentage=Decimal(random.choice([5, 10, 15, 20])) if discount else None,
        insurance_coverage=[],
        turnaround_time=test.turnaround_time,
        report_format=random.choice(["digital", "physical", "both"]),
        home_collection_available=home_collection,
        home_collection_fee=Decimal(random.choice([100, 150, 200])) if home_collection else None,
        booking_contact=hospital.phone,
        sample_collection_points="Ground floor laboratory",
        is_active=random.random() < 0.9,
        featured=random.random() < 0.1,
    )


def seed_directory(num_hospitals: int = NUM_HOSPITALS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with hospitals, the test catalog and offerings.

    Args:
        num_hospitals: Number of hospitals to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_hospitals} hospitals (seed={seed})...")

    with get_session() as session:
        # Offerings first: foreign keys RESTRICT deleting their parents
        print("🗑️  Clearing existing data...")
        for row_type in (OfferingRow, MedicalTestRow, HospitalRow):
            deleted_count = session.query(row_type).delete()
            print(f"   Deleted {deleted_count} rows from {row_type.__tablename__}")

        hospitals = [generate_hospital(rank) for rank in range(1, num_hospitals + 1)]
        tests = [generate_test(entry) for entry in TESTS]
        session.add_all(hospitals + tests)
        session.flush()  # assigns ids

        offerings = []
        for hospital in hospitals:
            count = random.randint(*OFFERINGS_PER_HOSPITAL)
            for index in random.sample(range(len(tests)), k=min(count, len(tests))):
                band = TESTS[index]["price_band"]
                offerings.append(generate_offering(hospital, tests[index], band))
        session.add_all(offerings)
        session.flush()

        print(
            f"✅ Seeded {len(hospitals)} hospitals, {len(tests)} tests, "
            f"{len(offerings)} offerings"
        )


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_directory()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
