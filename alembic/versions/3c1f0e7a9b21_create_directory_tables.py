"""Create hospitals, medical_tests and hospital_test_offerings

Revision ID: 3c1f0e7a9b21
Revises:
Create Date: 2026-10-19 10:02:11.418203

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e7a9b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "hospitals",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("hospital_rank", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("division", sa.String(100), nullable=False),
        sa.Column("area", sa.String(100), nullable=False),
        sa.Column("road", sa.String(200), nullable=False),
        sa.Column("house_number", sa.String(20), nullable=False),
        sa.Column("full_address", sa.String(500), nullable=False),
        sa.Column("phone", sa.String(20), nullable=False, unique=True),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("website", sa.Text(), nullable=True),
        sa.Column("hospital_type", sa.String(20), nullable=True),
        sa.Column("facilities", postgresql.ARRAY(sa.String(50)), nullable=False),
        sa.Column("departments", postgresql.ARRAY(sa.String(50)), nullable=False),
        sa.Column("languages_spoken", postgresql.ARRAY(sa.String(20)), nullable=False),
        sa.Column("insurance_accepted", postgresql.ARRAY(sa.String(100)), nullable=False),
        sa.Column("accreditations", postgresql.ARRAY(sa.String(100)), nullable=False),
        sa.Column("branches", postgresql.ARRAY(sa.String(200)), nullable=False),
        sa.Column("operating_hours", postgresql.JSONB(), nullable=False),
        sa.Column("social_media", postgresql.JSONB(), nullable=False),
        sa.Column("emergency_service", sa.Boolean(), nullable=False),
        sa.Column("home_collection", sa.Boolean(), nullable=False),
        sa.Column("parking_available", sa.Boolean(), nullable=False),
        sa.Column("wheelchair_accessible", sa.Boolean(), nullable=False),
        sa.Column("verified", sa.Boolean(), nullable=False),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("established_year", sa.Integer(), nullable=True),
        sa.Column("total_beds", sa.Integer(), nullable=True),
        sa.Column("google_map", sa.Text(), nullable=True),
        sa.Column("ambulance_contact", sa.String(20), nullable=True),
        sa.Column("consultation_fee_range", sa.String(100), nullable=True),
        *_timestamps(),
    )
    for column in ("name", "city", "division", "latitude", "longitude"):
        op.create_index(f"ix_hospitals_{column}", "hospitals", [column])
    # array containment/overlap lookups on departments and facilities
    op.create_index(
        "ix_hospitals_departments_gin", "hospitals", ["departments"], postgresql_using="gin"
    )
    op.create_index(
        "ix_hospitals_facilities_gin", "hospitals", ["facilities"], postgresql_using="gin"
    )

    op.create_table(
        "medical_tests",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("test_category", sa.String(50), nullable=False),
        sa.Column("name", sa.String(400), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("preparation_instructions", sa.Text(), nullable=False),
        sa.Column("fasting_required", sa.Boolean(), nullable=False),
        sa.Column("turnaround_time", sa.String(100), nullable=False),
        sa.Column("age_restrictions", sa.String(100), nullable=False),
        sa.Column("gender_specific", sa.String(10), nullable=False),
        sa.Column("purpose", sa.Text(), nullable=False),
        sa.Column("common_symptoms", postgresql.ARRAY(sa.String(100)), nullable=False),
        sa.Column("aliases", postgresql.ARRAY(sa.String(100)), nullable=False),
        sa.Column("keywords", postgresql.ARRAY(sa.String(100)), nullable=False),
        sa.Column("risks", postgresql.ARRAY(sa.String(200)), nullable=False),
        sa.Column("contraindications", postgresql.ARRAY(sa.String(200)), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_medical_tests_test_category", "medical_tests", ["test_category"])
    op.create_index("ix_medical_tests_name", "medical_tests", ["name"])
    op.create_index(
        "ix_medical_tests_keywords_gin", "medical_tests", ["keywords"], postgresql_using="gin"
    )

    op.create_table(
        "hospital_test_offerings",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "hospital_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("hospitals.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column(
            "test_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("medical_tests.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("unit", sa.String(20), nullable=False),
        sa.Column("availability_hours", sa.String(100), nullable=False),
        sa.Column("priority_available", sa.Boolean(), nullable=False),
        sa.Column("discount_available", sa.Boolean(), nullable=False),
        sa.Column("discount_percentage", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("insurance_coverage", postgresql.ARRAY(sa.String(100)), nullable=False),
        sa.Column("turnaround_time", sa.String(50), nullable=False),
        sa.Column("report_format", sa.String(10), nullable=False),
        sa.Column("home_collection_available", sa.Boolean(), nullable=False),
        sa.Column("home_collection_fee", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("booking_contact", sa.String(20), nullable=False),
        sa.Column("online_booking_url", sa.Text(), nullable=True),
        sa.Column("sample_collection_points", sa.String(500), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("hospital_notes", sa.Text(), nullable=True),
        sa.Column("preparation_notes_override", sa.Text(), nullable=True),
        sa.Column("appointment_required", sa.Boolean(), nullable=False),
        sa.Column("min_advance_booking_hours", sa.Integer(), nullable=False),
        sa.Column("max_advance_booking_days", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("hospital_id", "test_id", name="uq_offering_hospital_test"),
    )
    op.create_index("ix_hospital_test_offerings_price", "hospital_test_offerings", ["price"])
    op.create_index(
        "ix_hospital_test_offerings_is_active", "hospital_test_offerings", ["is_active"]
    )
    op.create_index("ix_hospital_test_offerings_featured", "hospital_test_offerings", ["featured"])
    op.create_index(
        "ix_offering_hospital_active", "hospital_test_offerings", ["hospital_id", "is_active"]
    )
    op.create_index("ix_offering_test_active", "hospital_test_offerings", ["test_id", "is_active"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("hospital_test_offerings")
    op.drop_table("medical_tests")
    op.drop_table("hospitals")
