from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from hospital_directory.infra.db.models.base import Base


class HospitalRow(Base):
    __tablename__ = "hospitals"
    __table_args__ = (
        Index("ix_hospitals_departments_gin", "departments", postgresql_using="gin"),
        Index("ix_hospitals_facilities_gin", "facilities", postgresql_using="gin"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    hospital_rank: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    division: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    area: Mapped[str] = mapped_column(String(100), nullable=False)
    road: Mapped[str] = mapped_column(String(200), nullable=False)
    house_number: Mapped[str] = mapped_column(String(20), nullable=False)
    full_address: Mapped[str] = mapped_column(String(500), nullable=False)

    phone: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)

    hospital_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    facilities: Mapped[list[str]] = mapped_column(ARRAY(String(50)), nullable=False, default=list)
    departments: Mapped[list[str]] = mapped_column(ARRAY(String(50)), nullable=False, default=list)
    languages_spoken: Mapped[list[str]] = mapped_column(
        ARRAY(String(20)), nullable=False, default=list
    )
    insurance_accepted: Mapped[list[str]] = mapped_column(
        ARRAY(String(100)), nullable=False, default=list
    )
    accreditations: Mapped[list[str]] = mapped_column(
        ARRAY(String(100)), nullable=False, default=list
    )
    branches: Mapped[list[str]] = mapped_column(ARRAY(String(200)), nullable=False, default=list)

    operating_hours: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    social_media: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)

    emergency_service: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    home_collection: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    parking_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    wheelchair_accessible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    latitude: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    longitude: Mapped[float] = mapped_column(Float, nullable=False, index=True)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    established_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_beds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    google_map: Mapped[str | None] = mapped_column(Text, nullable=True)
    ambulance_contact: Mapped[str | None] = mapped_column(String(20), nullable=True)
    consultation_fee_range: Mapped[str | None] = mapped_column(String(100), nullable=True)

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
