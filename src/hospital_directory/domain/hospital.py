from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from datetime import date

from hospital_directory.domain.enums import Department, Facility, HospitalType, Language
from hospital_directory.domain.validation import (
    BANGLADESHI_PHONE,
    EMAIL,
    HTTP_URL,
    FieldErrors,
    canonical_list,
    clean_list,
)

SOCIAL_MEDIA_PATTERNS = {
    "facebook": re.compile(r"^https?://(www\.)?facebook\.com/.+"),
    "twitter": re.compile(r"^https?://(www\.)?twitter\.com/.+"),
    "instagram": re.compile(r"^https?://(www\.)?instagram\.com/.+"),
    "linkedin": re.compile(r"^https?://(www\.)?linkedin\.com/.+"),
}

WEEKDAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")


@dataclass(frozen=True, slots=True)
class OperatingHours:
    sunday: str = "Closed"
    monday: str = "Closed"
    tuesday: str = "Closed"
    wednesday: str = "Closed"
    thursday: str = "Closed"
    friday: str = "Closed"
    saturday: str = "Closed"

    def to_dict(self) -> dict[str, str]:
        return {day: getattr(self, day) for day in WEEKDAYS}


@dataclass(frozen=True, slots=True)
class SocialMedia:
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {name: getattr(self, name) for name in SOCIAL_MEDIA_PATTERNS}


@dataclass(frozen=True, slots=True)
class Hospital:
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
    latitude: float
    longitude: float
    website: str | None = None
    hospital_type: str | None = None
    facilities: tuple[str, ...] = ()
    insurance_accepted: tuple[str, ...] = ()
    operating_hours: OperatingHours = field(default_factory=OperatingHours)
    emergency_service: bool = False
    home_collection: bool = False
    parking_available: bool = False
    wheelchair_accessible: bool = False
    verified: bool = False
    featured: bool = False
    description: str | None = None
    established_year: int | None = None
    total_beds: int | None = None
    departments: tuple[str, ...] = ()
    google_map: str | None = None
    ambulance_contact: str | None = None
    accreditations: tuple[str, ...] = ()
    consultation_fee_range: str | None = None
    languages_spoken: tuple[str, ...] = ()
    social_media: SocialMedia = field(default_factory=SocialMedia)
    branches: tuple[str, ...] = ()
    id: str | None = None

    def normalized(self) -> Hospital:
        """
        Return a copy with write-time normalization applied.

        Strings are trimmed, the email is lowercased and vocabulary values
        are replaced by their canonical spelling.
        """
        hospital_type = HospitalType.parse(self.hospital_type)
        return dataclasses.replace(
            self,
            name=self.name.strip(),
            city=self.city.strip(),
            division=self.division.strip(),
            area=self.area.strip(),
            road=self.road.strip(),
            house_number=self.house_number.strip(),
            full_address=self.full_address.strip(),
            phone=self.phone.strip(),
            email=self.email.strip().lower(),
            website=self.website.strip() if self.website else None,
            hospital_type=hospital_type.value if hospital_type else self.hospital_type,
            facilities=canonical_list(clean_list(self.facilities), Facility),
            departments=canonical_list(clean_list(self.departments), Department),
            languages_spoken=canonical_list(clean_list(self.languages_spoken), Language),
            insurance_accepted=clean_list(self.insurance_accepted),
            accreditations=clean_list(self.accreditations),
            branches=clean_list(self.branches),
            description=self.description.strip() if self.description else None,
        )

    def validate(self) -> None:
        """
        Validate write-time rules.

        Raises:
            ValidationError: With one entry per failing field
        """
        errors = FieldErrors()

        errors.in_range("hospital_rank", self.hospital_rank, 1, None, "Hospital rank must be >= 1")

        required_text = {
            "name": 200,
            "city": 100,
            "division": 100,
            "area": 100,
            "road": 200,
            "house_number": 20,
            "full_address": 500,
        }
        for name, limit in required_text.items():
            value = getattr(self, name)
            if errors.required(name, value, f"{name} is required"):
                errors.max_length(name, value, limit, f"{name} cannot exceed {limit} characters")

        if errors.required("phone", self.phone, "phone is required"):
            errors.pattern(
                "phone", self.phone, BANGLADESHI_PHONE, "Please fill a valid bangladeshi phone number"
            )
        if errors.required("email", self.email, "email is required"):
            errors.pattern("email", self.email, EMAIL, "Please fill a valid email address.")
            errors.max_length("email", self.email, 254, "email cannot exceed 254 characters")

        errors.pattern("website", self.website, HTTP_URL, "Please provide a valid URL")
        errors.pattern("google_map", self.google_map, HTTP_URL, "Please provide a valid URL")
        errors.pattern(
            "ambulance_contact",
            self.ambulance_contact,
            BANGLADESHI_PHONE,
            "Please fill a valid bangladeshi phone number",
        )

        errors.in_range("latitude", self.latitude, -90, 90, "Latitude must be between -90 and 90")
        errors.in_range(
            "longitude", self.longitude, -180, 180, "Longitude must be between -180 and 180"
        )

        errors.member_of("hospital_type", self.hospital_type, HospitalType)
        errors.each_member_of("facilities", self.facilities, Facility)
        errors.each_member_of("departments", self.departments, Department)
        errors.each_member_of("languages_spoken", self.languages_spoken, Language)

        errors.max_length(
            "description", self.description, 2000, "Description cannot exceed 2000 characters"
        )
        errors.in_range(
            "established_year",
            self.established_year,
            1800,
            date.today().year,
            "Established year must be between 1800 and the current year",
        )
        errors.in_range("total_beds", self.total_beds, 1, None, "Total beds must be >= 1")
        errors.max_length(
            "consultation_fee_range",
            self.consultation_fee_range,
            100,
            "Consultation fee range cannot exceed 100 characters",
        )
        errors.each_max_length(
            "insurance_accepted",
            self.insurance_accepted,
            100,
            "Insurance name cannot exceed 100 characters",
        )
        errors.each_max_length(
            "accreditations", self.accreditations, 100, "Accreditation cannot exceed 100 characters"
        )
        errors.each_max_length(
            "branches", self.branches, 200, "Branch cannot exceed 200 characters"
        )

        for network, regex in SOCIAL_MEDIA_PATTERNS.items():
            errors.pattern(
                f"social_media.{network}",
                getattr(self.social_media, network),
                regex,
                f"Please provide a valid {network} URL",
            )

        errors.raise_if_any()
