from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from hospital_directory.domain.filters import HospitalFilters
from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.paging import PageRequest


@dataclass(frozen=True)
class HospitalSearchResult:
    """A page of hospitals plus the total matching the same filters."""

    hospitals: list[Hospital]
    total_count: int


class HospitalRepository(ABC):
    """
    Port for hospital data access.

    Results are ordered by (hospital_rank asc, name asc).

    Contract (Preconditions):
        - filters and paging are pre-validated by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(self, filters: HospitalFilters, paging: PageRequest) -> HospitalSearchResult:
        """
        Return one page of matching hospitals.

        The total count is computed with the same filters but is a separate
        read from the page fetch.
        """
        ...

    @abstractmethod
    def find_all(self, filters: HospitalFilters) -> list[Hospital]:
        """Return every matching hospital, unpaginated."""
        ...

    @abstractmethod
    def get_by_id(self, hospital_id: str) -> Hospital | None: ...

    @abstractmethod
    def add(self, hospital: Hospital) -> Hospital:
        """
        Persist a new hospital and return it with its assigned id.

        Raises:
            ConflictError: If the phone number is already registered
        """
        ...

    @abstractmethod
    def update(self, hospital: Hospital) -> Hospital:
        """
        Replace the stored hospital with the same id.

        Raises:
            NotFoundError: If no hospital has that id
            ConflictError: If the new phone number belongs to another hospital
        """
        ...

    @abstractmethod
    def delete(self, hospital_id: str) -> bool:
        """Delete by id; False when nothing was deleted."""
        ...
