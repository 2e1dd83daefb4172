from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hospital_directory.domain.enums import HospitalType
from hospital_directory.entrypoints.http.dtos.common import vocabulary_pattern


class OperatingHoursDTO(BaseModel):
    sunday: str = "Closed"
    monday: str = "Closed"
    tuesday: str = "Closed"
    wednesday: str = "Closed"
    thursday: str = "Closed"
    friday: str = "Closed"
    saturday: str = "Closed"


class SocialMediaDTO(BaseModel):
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None


class HospitalPatchDTO(BaseModel):
    """Partial hospital payload (PATCH/PUT). Only sent fields are applied."""

    model_config = ConfigDict(extra="forbid")

    hospital_rank: int | None = None
    name: str | None = None
    city: str | None = None
    division: str | None = None
    area: str | None = None
    road: str | None = None
    house_number: str | None = None
    full_address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    facilities: list[str] | None = None
    hospital_type: str | None = None
    insurance_accepted: list[str] | None = None
    operating_hours: OperatingHoursDTO | None = None
    emergency_service: bool | None = None
    home_collection: bool | None = None
    parking_available: bool | None = None
    wheelchair_accessible: bool | None = None
    latitude: float | None = None
    longitude: float | None = None
    verified: bool | None = None
    featured: bool | None = None
    description: str | None = None
    established_year: int | None = None
    total_beds: int | None = None
    departments: list[str] | None = None
    google_map: str | None = None
    ambulance_contact: str | None = None
    accreditations: list[str] | None = None
    consultation_fee_range: str | None = None
    languages_spoken: list[str] | None = None
    social_media: SocialMediaDTO | None = None
    branches: list[str] | None = None


class HospitalCreateDTO(HospitalPatchDTO):
    """Full hospital payload for creation."""

    hospital_rank: int = Field(ge=1, examples=[1])
    name: str = Field(examples=["Square Hospitals Ltd."])
    city: str = Field(examples=["Dhaka"])
    division: str = Field(examples=["Dhaka"])
    area: str = Field(examples=["Panthapath"])
    road: str = Field(examples=["West Panthapath"])
    house_number: str = Field(examples=["18/F"])
    full_address: str = Field(examples=["18/F, Bir Uttam Qazi Nuruzzaman Sarak, Dhaka 1205"])
    phone: str = Field(examples=["01713141414"])
    email: str = Field(examples=["info@squarehospital.com"])
    latitude: float = Field(examples=[23.753])
    longitude: float = Field(examples=[90.381])


class HospitalResponseDTO(BaseModel):
    id: str
    hospital_rank: int
    name: str
    city: str
    division: str
    area: str
    road: str
    house_number: str
    full_address: str
    phone: str
    email: str
    website: str | None
    facilities: list[str]
    hospital_type: str | None
    insurance_accepted: list[str]
    operating_hours: OperatingHoursDTO
    emergency_service: bool
    home_collection: bool
    parking_available: bool
    wheelchair_accessible: bool
    latitude: float
    longitude: float
    verified: bool
    featured: bool
    description: str | None
    established_year: int | None
    total_beds: int | None
    departments: list[str]
    google_map: str | None
    ambulance_contact: str | None
    accreditations: list[str]
    consultation_fee_range: str | None
    languages_spoken: list[str]
    social_media: SocialMediaDTO
    branches: list[str]


class HospitalListQueryDTO(BaseModel):
    """Query parameters for listing hospitals."""

    city: str | None = Field(
        default=None,
        description="Case-insensitive partial match on city",
        examples=["Dhaka"],
    )
    division: str | None = Field(
        default=None,
        description="Case-insensitive partial match on division",
        examples=["Dhaka"],
    )
    hospital_type: str | None = Field(
        default=None,
        description="Exact match (case-insensitive): Government, Private or NGO",
        pattern=vocabulary_pattern(HospitalType),
        examples=["Private"],
    )
    verified: str | None = Field(
        default=None,
        description='"true" filters verified hospitals; any other value filters unverified',
        examples=["true"],
    )
    featured: str | None = Field(
        default=None,
        description='"true" filters featured hospitals; any other value filters non-featured',
        examples=["false"],
    )
    departments: str | None = Field(
        default=None,
        description="Comma-separated departments; any may match",
        examples=["Cardiology,Neurology"],
    )
    facilities: str | None = Field(
        default=None,
        description="Comma-separated facilities; any may match",
        examples=["ICU"],
    )
    search: str | None = Field(
        default=None,
        description="Keyword matched against name, description, departments and facilities",
        examples=["cardiac"],
    )
    page: str | None = Field(default=None, description="Page number (default 1)", examples=["1"])
    limit: str | None = Field(
        default=None, description="Page size (default 10, max 100)", examples=["10"]
    )


class HospitalListResponseDTO(BaseModel):
    hospitals: list[HospitalResponseDTO]
    totalPages: int
    currentPage: int
