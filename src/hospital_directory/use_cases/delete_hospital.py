from __future__ import annotations

import logging
from dataclasses import dataclass

from hospital_directory.domain.errors import ConflictError, NotFoundError
from hospital_directory.ports.hospital_repository import HospitalRepository
from hospital_directory.ports.offering_repository import OfferingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteHospitalRequest:
    hospital_id: str


class DeleteHospital:
    """
    Delete a hospital that no offering references.

    Hospitals with offerings must have them removed first; deleting would
    otherwise leave orphaned offerings pointing at nothing.
    """

    def __init__(
        self,
        hospital_repository: HospitalRepository,
        offering_repository: OfferingRepository,
    ) -> None:
        self._hospitals = hospital_repository
        self._offerings = offering_repository

    def execute(self, request: DeleteHospitalRequest) -> None:
        """
        Raises:
            NotFoundError: If no hospital has the given id
            ConflictError: If offerings still reference the hospital
        """
        if self._hospitals.get_by_id(request.hospital_id) is None:
            raise NotFoundError(resource="Hospital", identifier=request.hospital_id)

        references = self._offerings.count_references(hospital_id=request.hospital_id)
        if references:
            raise ConflictError(
                "Hospital still has test offerings; delete them first",
                hospital_id=request.hospital_id,
                offering_count=references,
            )

        self._hospitals.delete(request.hospital_id)
        logger.info("Hospital deleted", extra={"hospital_id": request.hospital_id})
