"""Unpaginated hospital lookups: by location, by department, nearby."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hospital_directory.domain.enums import Department
from hospital_directory.domain.errors import FilterValidationError
from hospital_directory.domain.filters import HospitalFilters
from hospital_directory.domain.geo import (
    BoundingBoxCalculator,
    GeoPoint,
    RectangularBoundingBoxCalculator,
)
from hospital_directory.domain.hospital import Hospital
from hospital_directory.ports.hospital_repository import HospitalRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FindHospitalsByLocationRequest:
    city: str | None
    division: str | None = None


class FindHospitalsByLocation:
    def __init__(self, hospital_repository: HospitalRepository) -> None:
        self._repository = hospital_repository

    def execute(self, request: FindHospitalsByLocationRequest) -> list[Hospital]:
        """
        Raises:
            FilterValidationError: If city is missing
        """
        if not request.city or not request.city.strip():
            raise FilterValidationError("City is a required query parameter.", field="city")

        division = request.division.strip() if request.division else None
        filters = HospitalFilters(city=request.city.strip(), division=division or None)
        return self._repository.find_all(filters)


@dataclass(frozen=True, slots=True)
class FindHospitalsByDepartmentRequest:
    department: str | None


class FindHospitalsByDepartment:
    def __init__(self, hospital_repository: HospitalRepository) -> None:
        self._repository = hospital_repository

    def execute(self, request: FindHospitalsByDepartmentRequest) -> list[Hospital]:
        """
        Raises:
            FilterValidationError: If department is missing or not a known department
        """
        if not request.department or not request.department.strip():
            raise FilterValidationError(
                "Department is a required query parameter.", field="department"
            )

        department = Department.parse(request.department)
        if department is None:
            raise FilterValidationError(
                errors=[
                    {
                        "field": "department",
                        "message": f"{request.department.strip()} is not supported",
                        "code": "INVALID_CHOICE",
                    }
                ]
            )

        return self._repository.find_all(HospitalFilters(departments=(department.value,)))


@dataclass(frozen=True, slots=True)
class FindNearbyHospitalsRequest:
    center: GeoPoint
    radius_meters: float


class FindNearbyHospitals:
    """
    Hospitals inside the bounding box around a center point.

    Results may include points slightly beyond the radius (box corners);
    no distance is computed or used for ordering.
    """

    def __init__(
        self,
        hospital_repository: HospitalRepository,
        calculator: BoundingBoxCalculator | None = None,
    ) -> None:
        self._repository = hospital_repository
        self._calculator = calculator or RectangularBoundingBoxCalculator()

    def execute(self, request: FindNearbyHospitalsRequest) -> list[Hospital]:
        """
        Raises:
            GeoValidationError: If the radius is not a positive number
        """
        box = self._calculator.calculate(request.center, request.radius_meters)

        logger.debug(
            "Nearby search",
            extra={
                "lat": request.center.latitude,
                "lng": request.center.longitude,
                "radius_m": request.radius_meters,
            },
        )

        return self._repository.find_all(HospitalFilters(bounding_box=box))
