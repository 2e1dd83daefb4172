from __future__ import annotations

from dataclasses import dataclass

from hospital_directory.domain.errors import NotFoundError
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.ports.medical_test_repository import MedicalTestRepository


@dataclass(frozen=True, slots=True)
class GetMedicalTestByIdRequest:
    test_id: str


@dataclass(frozen=True, slots=True)
class GetMedicalTestByIdResponse:
    test: MedicalTest


class GetMedicalTestById:
    def __init__(self, medical_test_repository: MedicalTestRepository) -> None:
        self._repository = medical_test_repository

    def execute(self, request: GetMedicalTestByIdRequest) -> GetMedicalTestByIdResponse:
        test = self._repository.get_by_id(request.test_id)
        if test is None:
            raise NotFoundError(resource="MedicalTest", identifier=request.test_id)
        return GetMedicalTestByIdResponse(test=test)
