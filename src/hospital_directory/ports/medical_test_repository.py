from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from hospital_directory.domain.filters import MedicalTestFilters
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.paging import PageRequest
from hospital_directory.domain.search import SortSpec


@dataclass(frozen=True)
class MedicalTestSearchResult:
    tests: list[MedicalTest]
    total_count: int


class MedicalTestRepository(ABC):
    """
    Port for the medical test catalog.

    Contract (Preconditions):
        - filters, sort and paging are pre-validated by the caller (UseCase)
    """

    @abstractmethod
    def search(
        self, filters: MedicalTestFilters, sort: SortSpec, paging: PageRequest
    ) -> MedicalTestSearchResult:
        """
        Return one page of matching tests ordered by ``sort``.

        Ties are always broken by name ascending.
        """
        ...

    @abstractmethod
    def list_all(self) -> list[MedicalTest]:
        """Every test in the catalog, for aggregations."""
        ...

    @abstractmethod
    def get_by_id(self, test_id: str) -> MedicalTest | None: ...

    @abstractmethod
    def add(self, test: MedicalTest) -> MedicalTest:
        """Persist a new test and return it with its assigned id."""
        ...

    @abstractmethod
    def update(self, test: MedicalTest) -> MedicalTest:
        """
        Raises:
            NotFoundError: If no test has that id
        """
        ...

    @abstractmethod
    def delete(self, test_id: str) -> bool: ...
