from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from hospital_directory.domain.filters import OfferingFilters
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.paging import PageRequest


@dataclass(frozen=True)
class OfferingSearchResult:
    offerings: list[HospitalTestOffering]
    total_count: int


class OfferingRepository(ABC):
    """
    Port for hospital test offerings.

    Results are ordered by price ascending.

    The (hospital_id, test_id) pair is unique. Implementations enforce it at
    write time and report violations as ConflictError.
    """

    @abstractmethod
    def search(self, filters: OfferingFilters, paging: PageRequest) -> OfferingSearchResult: ...

    @abstractmethod
    def get_by_id(self, offering_id: str) -> HospitalTestOffering | None: ...

    @abstractmethod
    def add(self, offering: HospitalTestOffering) -> HospitalTestOffering:
        """
        Raises:
            ConflictError: If the hospital already offers this test
        """
        ...

    @abstractmethod
    def delete(self, offering_id: str) -> bool: ...

    @abstractmethod
    def count_references(
        self, hospital_id: str | None = None, test_id: str | None = None
    ) -> int:
        """Number of offerings pointing at the given hospital and/or test."""
        ...
