"""Writes on hospital test offerings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hospital_directory.domain.errors import NotFoundError
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.ports.hospital_repository import HospitalRepository
from hospital_directory.ports.medical_test_repository import MedicalTestRepository
from hospital_directory.ports.offering_repository import OfferingRepository

logger = logging.getLogger(__name__)


class CreateOffering:
    """
    Register a hospital's commercial terms for a catalog test.

    The (hospital, test) pair must be new; duplicates are rejected by the
    repository as ConflictError rather than overwriting the existing offer.
    """

    def __init__(
        self,
        offering_repository: OfferingRepository,
        hospital_repository: HospitalRepository,
        medical_test_repository: MedicalTestRepository,
    ) -> None:
        self._offerings = offering_repository
        self._hospitals = hospital_repository
        self._tests = medical_test_repository

    def execute(self, offering: HospitalTestOffering) -> HospitalTestOffering:
        """
        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the hospital or test does not exist
            ConflictError: If the hospital already offers the test
        """
        normalized = offering.normalized()
        normalized.validate()

        if self._hospitals.get_by_id(normalized.hospital_id) is None:
            raise NotFoundError(resource="Hospital", identifier=normalized.hospital_id)
        if self._tests.get_by_id(normalized.test_id) is None:
            raise NotFoundError(resource="MedicalTest", identifier=normalized.test_id)

        created = self._offerings.add(normalized)
        logger.info(
            "Offering created",
            extra={
                "offering_id": created.id,
                "hospital_id": created.hospital_id,
                "test_id": created.test_id,
            },
        )
        return created


@dataclass(frozen=True, slots=True)
class DeleteOfferingRequest:
    offering_id: str


class DeleteOffering:
    def __init__(self, offering_repository: OfferingRepository) -> None:
        self._offerings = offering_repository

    def execute(self, request: DeleteOfferingRequest) -> None:
        if not self._offerings.delete(request.offering_id):
            raise NotFoundError(resource="Offering", identifier=request.offering_id)
        logger.info("Offering deleted", extra={"offering_id": request.offering_id})
