from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from hospital_directory.infra.db.models.base import Base


class OfferingRow(Base):
    __tablename__ = "hospital_test_offerings"
    __table_args__ = (
        UniqueConstraint("hospital_id", "test_id", name="uq_offering_hospital_test"),
        Index("ix_offering_hospital_active", "hospital_id", "is_active"),
        Index("ix_offering_test_active", "test_id", "is_active"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    # RESTRICT: offerings must be removed before their hospital or test
    hospital_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("hospitals.id", ondelete="RESTRICT"),
        nullable=False,
    )
    test_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("medical_tests.id", ondelete="RESTRICT"),
        nullable=False,
    )

    price: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, index=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="BDT")
    unit: Mapped[str] = mapped_column(String(20), nullable=False, default="per test")
    availability_hours: Mapped[str] = mapped_column(String(100), nullable=False)
    priority_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    discount_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    discount_percentage: Mapped[Decimal | None] = mapped_column(
        Numeric(precision=5, scale=2), nullable=True
    )

    insurance_coverage: Mapped[list[str]] = mapped_column(
        ARRAY(String(100)), nullable=False, default=list
    )
    turnaround_time: Mapped[str] = mapped_column(String(50), nullable=False)
    report_format: Mapped[str] = mapped_column(String(10), nullable=False)

    home_collection_available: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    home_collection_fee: Mapped[Decimal | None] = mapped_column(
        Numeric(precision=12, scale=2), nullable=True
    )

    booking_contact: Mapped[str] = mapped_column(String(20), nullable=False)
    online_booking_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    sample_collection_points: Mapped[str] = mapped_column(String(500), nullable=False)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    hospital_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    preparation_notes_override: Mapped[str | None] = mapped_column(Text, nullable=True)
    appointment_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    min_advance_booking_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max_advance_booking_days: Mapped[int] = mapped_column(Integer, nullable=False, default=30)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
