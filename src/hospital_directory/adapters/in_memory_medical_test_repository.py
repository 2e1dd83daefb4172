from __future__ import annotations

import dataclasses
import uuid

from hospital_directory.domain.errors import NotFoundError
from hospital_directory.domain.filters import MedicalTestFilters
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.paging import PageRequest
from hospital_directory.domain.search import SortSpec
from hospital_directory.ports.medical_test_repository import (
    MedicalTestRepository,
    MedicalTestSearchResult,
)


class InMemoryMedicalTestRepository(MedicalTestRepository):
    """
    Canonical contract implementation for tests.

    - Stores tests in insertion order
    - Filters with MedicalTestFilters.matches, sorts with SortSpec
    - Applies paging AFTER filtering and sorting
    """

    def __init__(self, tests: list[MedicalTest] | None = None) -> None:
        self._tests: dict[str, MedicalTest] = {}
        for test in tests or []:
            self.add(test)

    def search(
        self, filters: MedicalTestFilters, sort: SortSpec, paging: PageRequest
    ) -> MedicalTestSearchResult:
        matches = [test for test in self._tests.values() if filters.matches(test)]
        ordered = sort.apply(matches, key=getattr)

        start = paging.offset
        end = paging.offset + paging.limit

        return MedicalTestSearchResult(tests=ordered[start:end], total_count=len(matches))

    def list_all(self) -> list[MedicalTest]:
        return list(self._tests.values())

    def get_by_id(self, test_id: str) -> MedicalTest | None:
        return self._tests.get(test_id)

    def add(self, test: MedicalTest) -> MedicalTest:
        stored = dataclasses.replace(test, id=test.id or str(uuid.uuid4()))
        self._tests[stored.id] = stored
        return stored

    def update(self, test: MedicalTest) -> MedicalTest:
        if test.id is None or test.id not in self._tests:
            raise NotFoundError(resource="MedicalTest", identifier=test.id)
        self._tests[test.id] = test
        return test

    def delete(self, test_id: str) -> bool:
        return self._tests.pop(test_id, None) is not None
