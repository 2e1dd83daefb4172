"""Read-only catalog summaries computed over the whole test collection."""

from __future__ import annotations

from hospital_directory.domain import aggregation
from hospital_directory.domain.aggregation import CatalogStats, CategoryGroup, PopularTest
from hospital_directory.ports.medical_test_repository import MedicalTestRepository


class GetCategoryBreakdown:
    def __init__(self, medical_test_repository: MedicalTestRepository) -> None:
        self._repository = medical_test_repository

    def execute(self) -> list[CategoryGroup]:
        return aggregation.category_breakdown(self._repository.list_all())


class GetCatalogStats:
    def __init__(self, medical_test_repository: MedicalTestRepository) -> None:
        self._repository = medical_test_repository

    def execute(self) -> CatalogStats:
        return aggregation.catalog_stats(self._repository.list_all())


class GetPopularTests:
    def __init__(self, medical_test_repository: MedicalTestRepository) -> None:
        self._repository = medical_test_repository

    def execute(self, limit: int = aggregation.DEFAULT_POPULAR_LIMIT) -> list[PopularTest]:
        return aggregation.popular_tests(self._repository.list_all(), limit=limit)
