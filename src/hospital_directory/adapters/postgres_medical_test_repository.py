"""PostgreSQL implementation of MedicalTestRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from hospital_directory.adapters.postgres_predicates import (
    array_has_ci,
    array_overlaps,
    contains_ci,
)
from hospital_directory.domain.errors import NotFoundError
from hospital_directory.domain.filters import MedicalTestFilters
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.paging import PageRequest
from hospital_directory.domain.search import SortSpec
from hospital_directory.infra.db.models.medical_test import MedicalTestRow
from hospital_directory.ports.medical_test_repository import (
    MedicalTestRepository,
    MedicalTestSearchResult,
)

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

_SCALAR_FIELDS = (
    "name",
    "test_category",
    "description",
    "preparation_instructions",
    "fasting_required",
    "turnaround_time",
    "age_restrictions",
    "gender_specific",
    "purpose",
)
_LIST_FIELDS = ("common_symptoms", "aliases", "keywords", "risks", "contraindications")


class PostgresMedicalTestRepository(MedicalTestRepository):
    """
    PostgreSQL implementation of MedicalTestRepository.

    - Enum-like columns are stored normalized (lowercase), so equality is exact
    - List filters use array overlap (&&)
    - Keyword search: ILIKE on name/description OR case-insensitive element
      match on keywords/aliases
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(
        self, filters: MedicalTestFilters, sort: SortSpec, paging: PageRequest
    ) -> MedicalTestSearchResult:
        query = self._build_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = self._ordered(query, sort).offset(paging.offset).limit(paging.limit)
        rows = self._session.execute(query).scalars().all()

        return MedicalTestSearchResult(
            tests=[self._to_domain(row) for row in rows],
            total_count=total_count,
        )

    def list_all(self) -> list[MedicalTest]:
        rows = self._session.execute(select(MedicalTestRow)).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, test_id: str) -> MedicalTest | None:
        row = self._get_row(test_id)
        return self._to_domain(row) if row else None

    def add(self, test: MedicalTest) -> MedicalTest:
        row = MedicalTestRow()
        self._apply(row, test)
        with self._session.begin_nested():
            self._session.add(row)
        return self._to_domain(row)

    def update(self, test: MedicalTest) -> MedicalTest:
        row = self._get_row(test.id)
        if row is None:
            raise NotFoundError(resource="MedicalTest", identifier=test.id)
        self._apply(row, test)
        self._session.flush()
        return self._to_domain(row)

    def delete(self, test_id: str) -> bool:
        row = self._get_row(test_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def _get_row(self, test_id: str | None) -> MedicalTestRow | None:
        try:
            key = UUID(test_id) if test_id else None
        except ValueError:  # Invalid UUID format
            return None
        if key is None:
            return None
        query = select(MedicalTestRow).where(MedicalTestRow.id == key)
        return self._session.execute(query).scalar_one_or_none()

    @staticmethod
    def _ordered(
        query: Select[tuple[MedicalTestRow]], sort: SortSpec
    ) -> Select[tuple[MedicalTestRow]]:
        column = getattr(MedicalTestRow, sort.field)
        primary = column.desc() if sort.descending else column.asc()
        if sort.field == "name":
            return query.order_by(primary)
        return query.order_by(primary, MedicalTestRow.name.asc())

    def _build_query(self, filters: MedicalTestFilters) -> Select[tuple[MedicalTestRow]]:
        query = select(MedicalTestRow)

        if filters.test_category is not None:
            query = query.where(MedicalTestRow.test_category == filters.test_category)

        if filters.fasting_required is not None:
            query = query.where(MedicalTestRow.fasting_required.is_(filters.fasting_required))

        if filters.genders:
            query = query.where(MedicalTestRow.gender_specific.in_(filters.genders))

        if filters.keywords:
            query = query.where(array_overlaps(MedicalTestRow.keywords, filters.keywords))
        if filters.aliases:
            query = query.where(array_overlaps(MedicalTestRow.aliases, filters.aliases))
        if filters.common_symptoms:
            query = query.where(
                array_overlaps(MedicalTestRow.common_symptoms, filters.common_symptoms)
            )

        if filters.search is not None:
            term = filters.search.term
            query = query.where(
                or_(
                    contains_ci(MedicalTestRow.name, term),
                    array_has_ci(MedicalTestRow.keywords, term),
                    array_has_ci(MedicalTestRow.aliases, term),
                    contains_ci(MedicalTestRow.description, term),
                )
            )

        return query

    @staticmethod
    def _apply(row: MedicalTestRow, test: MedicalTest) -> None:
        for name in _SCALAR_FIELDS:
            setattr(row, name, getattr(test, name))
        for name in _LIST_FIELDS:
            setattr(row, name, list(getattr(test, name)))

    @staticmethod
    def _to_domain(row: MedicalTestRow) -> MedicalTest:
        values = {name: getattr(row, name) for name in _SCALAR_FIELDS}
        values.update({name: tuple(getattr(row, name) or ()) for name in _LIST_FIELDS})
        return MedicalTest(id=str(row.id), **values)
