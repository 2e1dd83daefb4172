from __future__ import annotations

import dataclasses
import uuid

from hospital_directory.domain.errors import ConflictError, NotFoundError
from hospital_directory.domain.filters import HospitalFilters
from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.paging import PageRequest
from hospital_directory.ports.hospital_repository import HospitalRepository, HospitalSearchResult


class InMemoryHospitalRepository(HospitalRepository):
    """
    Canonical contract implementation for tests.

    - Applies AND-semantics filtering via HospitalFilters.matches
    - Orders by (hospital_rank, name)
    - Applies paging AFTER filtering
    - Enforces phone uniqueness like the database constraint does
    """

    def __init__(self, hospitals: list[Hospital] | None = None) -> None:
        self._hospitals: dict[str, Hospital] = {}
        for hospital in hospitals or []:
            self.add(hospital)

    def search(self, filters: HospitalFilters, paging: PageRequest) -> HospitalSearchResult:
        matches = self.find_all(filters)
        total_count = len(matches)  # Count BEFORE paging

        start = paging.offset
        end = paging.offset + paging.limit

        return HospitalSearchResult(hospitals=matches[start:end], total_count=total_count)

    def find_all(self, filters: HospitalFilters) -> list[Hospital]:
        matches = [h for h in self._hospitals.values() if filters.matches(h)]
        return sorted(matches, key=lambda h: (h.hospital_rank, h.name))

    def get_by_id(self, hospital_id: str) -> Hospital | None:
        return self._hospitals.get(hospital_id)

    def add(self, hospital: Hospital) -> Hospital:
        self._ensure_phone_free(hospital.phone, exclude_id=None)
        stored = dataclasses.replace(hospital, id=hospital.id or str(uuid.uuid4()))
        self._hospitals[stored.id] = stored
        return stored

    def update(self, hospital: Hospital) -> Hospital:
        if hospital.id is None or hospital.id not in self._hospitals:
            raise NotFoundError(resource="Hospital", identifier=hospital.id)
        self._ensure_phone_free(hospital.phone, exclude_id=hospital.id)
        self._hospitals[hospital.id] = hospital
        return hospital

    def delete(self, hospital_id: str) -> bool:
        return self._hospitals.pop(hospital_id, None) is not None

    def _ensure_phone_free(self, phone: str, exclude_id: str | None) -> None:
        for existing in self._hospitals.values():
            if existing.phone == phone and existing.id != exclude_id:
                raise ConflictError(
                    "A hospital with this phone number already exists", field="phone"
                )
