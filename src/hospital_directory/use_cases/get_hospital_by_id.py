"""Get hospital by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from hospital_directory.domain.errors import NotFoundError
from hospital_directory.domain.hospital import Hospital
from hospital_directory.ports.hospital_repository import HospitalRepository


@dataclass(frozen=True, slots=True)
class GetHospitalByIdRequest:
    hospital_id: str


@dataclass(frozen=True, slots=True)
class GetHospitalByIdResponse:
    hospital: Hospital


class GetHospitalById:
    def __init__(self, hospital_repository: HospitalRepository) -> None:
        self._repository = hospital_repository

    def execute(self, request: GetHospitalByIdRequest) -> GetHospitalByIdResponse:
        """
        Raises:
            NotFoundError: If no hospital has the given id
        """
        hospital = self._repository.get_by_id(request.hospital_id)

        if hospital is None:
            raise NotFoundError(resource="Hospital", identifier=request.hospital_id)

        return GetHospitalByIdResponse(hospital=hospital)
