"""PostgreSQL implementation of HospitalRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hospital_directory.adapters.postgres_predicates import (
    array_has_ci,
    array_overlaps,
    contains_ci,
)
from hospital_directory.domain.errors import ConflictError, NotFoundError
from hospital_directory.domain.filters import HospitalFilters
from hospital_directory.domain.hospital import Hospital, OperatingHours, SocialMedia
from hospital_directory.domain.paging import PageRequest
from hospital_directory.infra.db.models.hospital import HospitalRow
from hospital_directory.ports.hospital_repository import HospitalRepository, HospitalSearchResult

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

# Columns copied 1:1 between HospitalRow and Hospital
_SCALAR_FIELDS = (
    "hospital_rank",
    "name",
    "city",
    "division",
    "area",
    "road",
    "house_number",
    "full_address",
    "phone",
    "email",
    "website",
    "hospital_type",
    "emergency_service",
    "home_collection",
    "parking_available",
    "wheelchair_accessible",
    "verified",
    "featured",
    "latitude",
    "longitude",
    "description",
    "established_year",
    "total_beds",
    "google_map",
    "ambulance_contact",
    "consultation_fee_range",
)
_LIST_FIELDS = (
    "facilities",
    "departments",
    "languages_spoken",
    "insurance_accepted",
    "accreditations",
    "branches",
)


def _parse_uuid(value: str | None) -> UUID | None:
    if value is None:
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


class PostgresHospitalRepository(HospitalRepository):
    """
    PostgreSQL implementation of HospitalRepository.

    - City/division: ILIKE substring
    - Departments/facilities: array overlap (&&)
    - Search: name/description ILIKE OR exact (case-insensitive) array element
    - Bounding box: BETWEEN on latitude/longitude
    - Phone uniqueness violations surface as ConflictError
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, filters: HospitalFilters, paging: PageRequest) -> HospitalSearchResult:
        """
        Executes two queries:
        1. COUNT(*) over the filtered set (before paging)
        2. SELECT with OFFSET/LIMIT for the page
        """
        query = self._build_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = self._ordered(query).offset(paging.offset).limit(paging.limit)
        rows = self._session.execute(query).scalars().all()

        return HospitalSearchResult(
            hospitals=[self._to_domain(row) for row in rows],
            total_count=total_count,
        )

    def find_all(self, filters: HospitalFilters) -> list[Hospital]:
        query = self._ordered(self._build_query(filters))
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, hospital_id: str) -> Hospital | None:
        row = self._get_row(hospital_id)
        return self._to_domain(row) if row else None

    def add(self, hospital: Hospital) -> Hospital:
        row = HospitalRow()
        self._save(row, hospital)
        return self._to_domain(row)

    def update(self, hospital: Hospital) -> Hospital:
        row = self._get_row(hospital.id)
        if row is None:
            raise NotFoundError(resource="Hospital", identifier=hospital.id)
        self._save(row, hospital)
        return self._to_domain(row)

    def delete(self, hospital_id: str) -> bool:
        row = self._get_row(hospital_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def _get_row(self, hospital_id: str | None) -> HospitalRow | None:
        key = _parse_uuid(hospital_id)
        if key is None:
            return None
        query = select(HospitalRow).where(HospitalRow.id == key)
        return self._session.execute(query).scalar_one_or_none()

    def _save(self, row: HospitalRow, hospital: Hospital) -> None:
        # Staged inside the SAVEPOINT: a duplicate phone on insert or update
        # rolls back only this write, not the request transaction.
        try:
            with self._session.begin_nested():
                self._apply(row, hospital)
                self._session.add(row)
        except IntegrityError as exc:
            raise ConflictError(
                "A hospital with this phone number already exists", field="phone"
            ) from exc

    @staticmethod
    def _ordered(query: Select[tuple[HospitalRow]]) -> Select[tuple[HospitalRow]]:
        return query.order_by(HospitalRow.hospital_rank.asc(), HospitalRow.name.asc())

    def _build_query(self, filters: HospitalFilters) -> Select[tuple[HospitalRow]]:
        query = select(HospitalRow)

        if filters.city:
            query = query.where(contains_ci(HospitalRow.city, filters.city))
        if filters.division:
            query = query.where(contains_ci(HospitalRow.division, filters.division))

        if filters.hospital_type is not None:
            query = query.where(HospitalRow.hospital_type == filters.hospital_type)

        if filters.verified is not None:
            query = query.where(HospitalRow.verified.is_(filters.verified))
        if filters.featured is not None:
            query = query.where(HospitalRow.featured.is_(filters.featured))

        if filters.departments:
            query = query.where(array_overlaps(HospitalRow.departments, filters.departments))
        if filters.facilities:
            query = query.where(array_overlaps(HospitalRow.facilities, filters.facilities))

        if filters.search is not None:
            term = filters.search.term
            query = query.where(
                or_(
                    contains_ci(HospitalRow.name, term),
                    contains_ci(HospitalRow.description, term),
                    array_has_ci(HospitalRow.departments, term),
                    array_has_ci(HospitalRow.facilities, term),
                )
            )

        box = filters.bounding_box
        if box is not None:
            query = query.where(HospitalRow.latitude.between(box.min_latitude, box.max_latitude))
            if not box.spans_all_longitudes:
                query = query.where(
                    HospitalRow.longitude.between(box.min_longitude, box.max_longitude)
                )

        return query

    @staticmethod
    def _apply(row: HospitalRow, hospital: Hospital) -> None:
        """Copy domain values onto the ORM row (id is assigned by the database default)."""
        for name in _SCALAR_FIELDS:
            setattr(row, name, getattr(hospital, name))
        for name in _LIST_FIELDS:
            setattr(row, name, list(getattr(hospital, name)))
        row.operating_hours = hospital.operating_hours.to_dict()
        row.social_media = hospital.social_media.to_dict()

    @staticmethod
    def _to_domain(row: HospitalRow) -> Hospital:
        values = {name: getattr(row, name) for name in _SCALAR_FIELDS}
        values.update({name: tuple(getattr(row, name) or ()) for name in _LIST_FIELDS})
        return Hospital(
            id=str(row.id),
            operating_hours=OperatingHours(**(row.operating_hours or {})),
            social_media=SocialMedia(**(row.social_media or {})),
            **values,
        )
