from __future__ import annotations

import logging
from dataclasses import dataclass

from hospital_directory.domain.hospital import Hospital
from hospital_directory.ports.hospital_repository import HospitalRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateHospitalRequest:
    hospital: Hospital


@dataclass(frozen=True, slots=True)
class CreateHospitalResponse:
    hospital: Hospital


class CreateHospital:
    def __init__(self, hospital_repository: HospitalRepository) -> None:
        self._repository = hospital_repository

    def execute(self, request: CreateHospitalRequest) -> CreateHospitalResponse:
        """
        Normalize, validate and persist a new hospital.

        Raises:
            ValidationError: If any field is invalid
            ConflictError: If the phone number is already registered
        """
        hospital = request.hospital.normalized()
        hospital.validate()

        created = self._repository.add(hospital)

        logger.info(
            "Hospital created",
            extra={"hospital_id": created.id, "hospital_name": created.name},
        )
        return CreateHospitalResponse(hospital=created)
