"""PostgreSQL implementation of OfferingRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hospital_directory.domain.errors import ConflictError
from hospital_directory.domain.filters import OfferingFilters
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.domain.paging import PageRequest
from hospital_directory.infra.db.models.offering import OfferingRow
from hospital_directory.ports.offering_repository import (
    OfferingRepository,
    OfferingSearchResult,
)

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

_SCALAR_FIELDS = (
    "price",
    "currency",
    "unit",
    "availability_hours",
    "priority_available",
    "discount_available",
    "discount_percentage",
    "turnaround_time",
    "report_format",
    "home_collection_available",
    "home_collection_fee",
    "booking_contact",
    "online_booking_url",
    "sample_collection_points",
    "is_active",
    "featured",
    "hospital_notes",
    "preparation_notes_override",
    "appointment_required",
    "min_advance_booking_hours",
    "max_advance_booking_days",
)


def _parse_uuid(value: str | None) -> UUID | None:
    if value is None:
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


class PostgresOfferingRepository(OfferingRepository):
    """
    PostgreSQL implementation of OfferingRepository.

    The unique constraint on (hospital_id, test_id) is the only guard
    against duplicates; no read-then-write check is made.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, filters: OfferingFilters, paging: PageRequest) -> OfferingSearchResult:
        query = self._build_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = (
            query.order_by(OfferingRow.price.asc(), OfferingRow.id.asc())
            .offset(paging.offset)
            .limit(paging.limit)
        )
        rows = self._session.execute(query).scalars().all()

        return OfferingSearchResult(
            offerings=[self._to_domain(row) for row in rows],
            total_count=total_count,
        )

    def get_by_id(self, offering_id: str) -> HospitalTestOffering | None:
        row = self._get_row(offering_id)
        return self._to_domain(row) if row else None

    def add(self, offering: HospitalTestOffering) -> HospitalTestOffering:
        row = OfferingRow(
            hospital_id=UUID(offering.hospital_id),
            test_id=UUID(offering.test_id),
        )
        for name in _SCALAR_FIELDS:
            setattr(row, name, getattr(offering, name))
        row.insurance_coverage = list(offering.insurance_coverage)

        try:
            with self._session.begin_nested():
                self._session.add(row)
        except IntegrityError as exc:
            raise ConflictError(
                "This hospital already offers this test",
                hospital_id=offering.hospital_id,
                test_id=offering.test_id,
            ) from exc

        return self._to_domain(row)

    def delete(self, offering_id: str) -> bool:
        row = self._get_row(offering_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def count_references(
        self, hospital_id: str | None = None, test_id: str | None = None
    ) -> int:
        query = select(func.count()).select_from(OfferingRow)
        if hospital_id is not None:
            key = _parse_uuid(hospital_id)
            if key is None:
                return 0
            query = query.where(OfferingRow.hospital_id == key)
        if test_id is not None:
            key = _parse_uuid(test_id)
            if key is None:
                return 0
            query = query.where(OfferingRow.test_id == key)
        return self._session.execute(query).scalar() or 0

    def _get_row(self, offering_id: str) -> OfferingRow | None:
        key = _parse_uuid(offering_id)
        if key is None:
            return None
        query = select(OfferingRow).where(OfferingRow.id == key)
        return self._session.execute(query).scalar_one_or_none()

    def _build_query(self, filters: OfferingFilters) -> Select[tuple[OfferingRow]]:
        query = select(OfferingRow)

        for name in ("hospital_id", "test_id"):
            value = getattr(filters, name)
            if value is not None:
                key = _parse_uuid(value)
                # An unparseable id can match nothing
                query = query.where(
                    getattr(OfferingRow, name) == key if key else OfferingRow.id.is_(None)
                )

        for name in ("is_active", "featured", "home_collection_available"):
            value = getattr(filters, name)
            if value is not None:
                query = query.where(getattr(OfferingRow, name).is_(value))

        if filters.currency is not None:
            query = query.where(OfferingRow.currency == filters.currency)
        if filters.report_format is not None:
            query = query.where(OfferingRow.report_format == filters.report_format)

        # Price range filters (inclusive)
        if filters.price_min is not None:
            query = query.where(OfferingRow.price >= filters.price_min)
        if filters.price_max is not None:
            query = query.where(OfferingRow.price <= filters.price_max)

        return query

    @staticmethod
    def _to_domain(row: OfferingRow) -> HospitalTestOffering:
        values = {name: getattr(row, name) for name in _SCALAR_FIELDS}
        return HospitalTestOffering(
            id=str(row.id),
            hospital_id=str(row.hospital_id),
            test_id=str(row.test_id),
            insurance_coverage=tuple(row.insurance_coverage or ()),
            **values,
        )
