from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hospital_directory.domain.errors import NotFoundError
from hospital_directory.domain.hospital import Hospital
from hospital_directory.ports.hospital_repository import HospitalRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateHospitalRequest:
    hospital_id: str
    changes: Mapping[str, Any]  # domain field name -> new value


@dataclass(frozen=True, slots=True)
class UpdateHospitalResponse:
    hospital: Hospital


class UpdateHospital:
    """
    Apply a full or partial update.

    The stored hospital is merged with ``changes`` and the merged result is
    validated as a whole, so a partial update cannot leave the record
    inconsistent.
    """

    def __init__(self, hospital_repository: HospitalRepository) -> None:
        self._repository = hospital_repository

    def execute(self, request: UpdateHospitalRequest) -> UpdateHospitalResponse:
        """
        Raises:
            NotFoundError: If no hospital has the given id
            ValidationError: If the merged hospital is invalid
            ConflictError: If the new phone number belongs to another hospital
        """
        existing = self._repository.get_by_id(request.hospital_id)
        if existing is None:
            raise NotFoundError(resource="Hospital", identifier=request.hospital_id)

        changes = {key: value for key, value in request.changes.items() if key != "id"}
        merged = dataclasses.replace(existing, **changes).normalized()
        merged.validate()

        updated = self._repository.update(merged)

        logger.info(
            "Hospital updated",
            extra={"hospital_id": updated.id, "fields": sorted(changes)},
        )
        return UpdateHospitalResponse(hospital=updated)
