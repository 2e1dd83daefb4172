from __future__ import annotations

from typing import Any

from hospital_directory.domain.filters import FilterBuilder
from hospital_directory.domain.hospital import Hospital, OperatingHours, SocialMedia
from hospital_directory.domain.paging import PageRequest
from hospital_directory.entrypoints.http.dtos.hospital import (
    HospitalCreateDTO,
    HospitalListQueryDTO,
    HospitalListResponseDTO,
    HospitalPatchDTO,
    HospitalResponseDTO,
    OperatingHoursDTO,
    SocialMediaDTO,
)
from hospital_directory.use_cases.search_hospitals import (
    SearchHospitalsRequest,
    SearchHospitalsResponse,
)


def _to_domain_value(name: str, value: Any) -> Any:
    if name == "operating_hours":
        return OperatingHours(**value)
    if name == "social_media":
        return SocialMedia(**value)
    if isinstance(value, list):
        return tuple(value)
    return value


class HospitalMapper:
    """Maps between REST DTOs and the Hospital entity."""

    @staticmethod
    def to_domain_request(dto: HospitalListQueryDTO) -> SearchHospitalsRequest:
        return SearchHospitalsRequest(
            filters=FilterBuilder.hospitals(dto.model_dump()),
            paging=PageRequest.from_raw(dto.page, dto.limit),
        )

    @staticmethod
    def to_domain(dto: HospitalCreateDTO) -> Hospital:
        """
        Converts a creation payload to an unsaved Hospital.

        Lists become tuples; nested objects become value objects.
        """
        data = dto.model_dump(exclude_none=True)
        return Hospital(**{name: _to_domain_value(name, value) for name, value in data.items()})

    @staticmethod
    def to_changes(dto: HospitalPatchDTO) -> dict[str, Any]:
        """
        Converts a partial payload to domain field changes.

        Only fields present in the request body are included; explicit nulls
        are ignored.
        """
        data = dto.model_dump(exclude_unset=True, exclude_none=True)
        return {name: _to_domain_value(name, value) for name, value in data.items()}

    @staticmethod
    def to_hospital_response(hospital: Hospital) -> HospitalResponseDTO:
        return HospitalResponseDTO(
            id=hospital.id,
            hospital_rank=hospital.hospital_rank,
            name=hospital.name,
            city=hospital.city,
            division=hospital.division,
            area=hospital.area,
            road=hospital.road,
            house_number=hospital.house_number,
            full_address=hospital.full_address,
            phone=hospital.phone,
            email=hospital.email,
            website=hospital.website,
            facilities=list(hospital.facilities),
            hospital_type=hospital.hospital_type,
            insurance_accepted=list(hospital.insurance_accepted),
            operating_hours=OperatingHoursDTO(**hospital.operating_hours.to_dict()),
            emergency_service=hospital.emergency_service,
            home_collection=hospital.home_collection,
            parking_available=hospital.parking_available,
            wheelchair_accessible=hospital.wheelchair_accessible,
            latitude=hospital.latitude,
            longitude=hospital.longitude,
            verified=hospital.verified,
            featured=hospital.featured,
            description=hospital.description,
            established_year=hospital.established_year,
            total_beds=hospital.total_beds,
            departments=list(hospital.departments),
            google_map=hospital.google_map,
            ambulance_contact=hospital.ambulance_contact,
            accreditations=list(hospital.accreditations),
            consultation_fee_range=hospital.consultation_fee_range,
            languages_spoken=list(hospital.languages_spoken),
            social_media=SocialMediaDTO(**hospital.social_media.to_dict()),
            branches=list(hospital.branches),
        )

    @staticmethod
    def to_list(hospitals: list[Hospital]) -> list[HospitalResponseDTO]:
        return [HospitalMapper.to_hospital_response(hospital) for hospital in hospitals]

    @staticmethod
    def to_response(result: SearchHospitalsResponse) -> HospitalListResponseDTO:
        return HospitalListResponseDTO(
            hospitals=HospitalMapper.to_list(result.hospitals),
            totalPages=result.page_info.total_pages,
            currentPage=result.page_info.current_page,
        )
