from __future__ import annotations

import dataclasses
import uuid

from hospital_directory.domain.errors import ConflictError
from hospital_directory.domain.filters import OfferingFilters
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.paging import PageRequest
from hospital_directory.ports.offering_repository import (
    OfferingRepository,
    OfferingSearchResult,
)


class InMemoryOfferingRepository(OfferingRepository):
    """
    Canonical contract implementation for tests.

    - Orders by price ascending
    - Rejects a second offering for the same (hospital_id, test_id)
    """

    def __init__(self, offerings: list[HospitalTestOffering] | None = None) -> None:
        self._offerings: dict[str, HospitalTestOffering] = {}
        for offering in offerings or []:
            self.add(offering)

    def search(self, filters: OfferingFilters, paging: PageRequest) -> OfferingSearchResult:
        matches = sorted(
            (o for o in self._offerings.values() if filters.matches(o)),
            key=lambda o: o.price,
        )

        start = paging.offset
        end = paging.offset + paging.limit

        return OfferingSearchResult(offerings=matches[start:end], total_count=len(matches))

    def get_by_id(self, offering_id: str) -> HospitalTestOffering | None:
        return self._offerings.get(offering_id)

    def add(self, offering: HospitalTestOffering) -> HospitalTestOffering:
        for existing in self._offerings.values():
            if (existing.hospital_id, existing.test_id) == (offering.hospital_id, offering.test_id):
                raise ConflictError(
                    "This hospital already offers this test",
                    hospital_id=offering.hospital_id,
                    test_id=offering.test_id,
                )
        stored = dataclasses.replace(offering, id=offering.id or str(uuid.uuid4()))
        self._offerings[stored.id] = stored
        return stored

    def delete(self, offering_id: str) -> bool:
        return self._offerings.pop(offering_id, None) is not None

    def count_references(
        self, hospital_id: str | None = None, test_id: str | None = None
    ) -> int:
        return sum(
            1
            for o in self._offerings.values()
            if (hospital_id is None or o.hospital_id == hospital_id)
            and (test_id is None or o.test_id == test_id)
        )
