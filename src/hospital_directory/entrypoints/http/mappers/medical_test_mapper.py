from __future__ import annotations

from typing import Any

from hospital_directory.domain.aggregation import CatalogStats, CategoryGroup, PopularTest
from hospital_directory.domain.enums import Gender
from hospital_directory.domain.filters import FilterBuilder, MedicalTestFilters
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.paging import PageRequest
from hospital_directory.domain.search import SortSpec, TextSearch
from hospital_directory.entrypoints.http.dtos.medical_test import (
    BulkCreateResponseDTO,
    BulkItemErrorDTO,
    CatalogStatsDTO,
    CategoryCountDTO,
    CategoryGroupDTO,
    CategoryTestDTO,
    MedicalTestListQueryDTO,
    MedicalTestListResponseDTO,
    MedicalTestPayloadDTO,
    MedicalTestResponseDTO,
    MedicalTestSearchQueryDTO,
    MedicalTestSummaryDTO,
    OverviewDTO,
    PageQueryDTO,
    PopularTestDTO,
    TurnaroundCountDTO,
)
from hospital_directory.entrypoints.http.mappers.common import to_pagination
from hospital_directory.use_cases.bulk_create_medical_tests import (
    OUTCOME_FAILED,
    OUTCOME_PARTIAL,
    BulkCreateResult,
)
from hospital_directory.use_cases.search_medical_tests import (
    SearchMedicalTestsRequest,
    SearchMedicalTestsResponse,
)


class MedicalTestMapper:
    """Maps between REST DTOs and the MedicalTest entity and its summaries."""

    @staticmethod
    def to_domain_request(dto: MedicalTestListQueryDTO) -> SearchMedicalTestsRequest:
        return SearchMedicalTestsRequest(
            filters=FilterBuilder.medical_tests(dto.model_dump()),
            paging=PageRequest.from_raw(dto.page, dto.limit),
            sort=SortSpec.from_raw(dto.sort, dto.order),
        )

    @staticmethod
    def to_search_request(dto: MedicalTestSearchQueryDTO) -> SearchMedicalTestsRequest:
        return SearchMedicalTestsRequest(
            filters=MedicalTestFilters(search=TextSearch.from_raw(dto.q)),
            paging=PageRequest.from_raw(dto.page, dto.limit),
            sort=SortSpec.from_raw(dto.sort, dto.order),
        )

    @staticmethod
    def to_gender_request(gender: Gender, dto: PageQueryDTO) -> SearchMedicalTestsRequest:
        """Gender-specific tests also include those valid for both genders."""
        if gender is Gender.BOTH:
            genders: tuple[str, ...] = (Gender.BOTH.value,)
        else:
            genders = (gender.value, Gender.BOTH.value)
        return SearchMedicalTestsRequest(
            filters=MedicalTestFilters(genders=genders),
            paging=PageRequest.from_raw(dto.page, dto.limit),
        )

    @staticmethod
    def to_domain(dto: MedicalTestPayloadDTO) -> MedicalTest:
        return MedicalTest(**MedicalTestMapper.to_changes(dto))

    @staticmethod
    def to_changes(dto: MedicalTestPayloadDTO) -> dict[str, Any]:
        data = dto.model_dump(exclude_unset=True, exclude_none=True)
        return {
            name: tuple(value) if isinstance(value, list) else value
            for name, value in data.items()
        }

    @staticmethod
    def to_test_response(test: MedicalTest) -> MedicalTestResponseDTO:
        return MedicalTestResponseDTO(
            id=test.id,
            test_category=test.test_category,
            name=test.name,
            description=test.description,
            preparation_instructions=test.preparation_instructions,
            fasting_required=test.fasting_required,
            turnaround_time=test.turnaround_time,
            common_symptoms=list(test.common_symptoms),
            age_restrictions=test.age_restrictions,
            gender_specific=test.gender_specific,
            aliases=list(test.aliases),
            keywords=list(test.keywords),
            purpose=test.purpose,
            risks=list(test.risks),
            contraindications=list(test.contraindications),
        )

    @staticmethod
    def to_response(result: SearchMedicalTestsResponse) -> MedicalTestListResponseDTO:
        return MedicalTestListResponseDTO(
            data=[MedicalTestMapper.to_test_response(test) for test in result.tests],
            pagination=to_pagination(result.page_info),
        )

    @staticmethod
    def to_summary(test: MedicalTest) -> MedicalTestSummaryDTO:
        return MedicalTestSummaryDTO(**test.summary())

    @staticmethod
    def to_category_groups(groups: list[CategoryGroup]) -> list[CategoryGroupDTO]:
        return [
            CategoryGroupDTO(
                category=group.category,
                count=group.count,
                tests=[CategoryTestDTO(name=name, id=test_id) for name, test_id in group.tests],
            )
            for group in groups
        ]

    @staticmethod
    def to_stats(stats: CatalogStats) -> CatalogStatsDTO:
        overview = stats.overview
        return CatalogStatsDTO(
            overview=OverviewDTO(
                totalTests=overview.total_tests,
                fastingRequired=overview.fasting_required,
                maleSpecific=overview.male_specific,
                femaleSpecific=overview.female_specific,
                bothGenders=overview.both_genders,
            ),
            byCategory=[
                CategoryCountDTO(category=bucket.key, count=bucket.count)
                for bucket in stats.by_category
            ],
            byTurnaroundTime=[
                TurnaroundCountDTO(turnaround_time=bucket.key, count=bucket.count)
                for bucket in stats.by_turnaround_time
            ],
        )

    @staticmethod
    def to_popular(items: list[PopularTest]) -> list[PopularTestDTO]:
        return [
            PopularTestDTO(
                id=item.test.id,
                name=item.test.name,
                test_category=item.test.test_category,
                description=item.test.description,
                turnaround_time=item.test.turnaround_time,
                fasting_required=item.test.fasting_required,
                keywordCount=item.keyword_count,
                aliasCount=item.alias_count,
            )
            for item in items
        ]

    @staticmethod
    def to_bulk_response(result: BulkCreateResult) -> BulkCreateResponseDTO:
        """
        Builds the bulk import envelope.

        ``success`` is True when every item was created, "partial" when some
        were, and False when none were.
        """
        created = len(result.created)
        failed = len(result.errors)
        if result.outcome == OUTCOME_PARTIAL:
            success: bool | str = "partial"
            message = f"{created} tests created, {failed} failed"
        elif result.outcome == OUTCOME_FAILED:
            success = False
            message = f"0 tests created, {failed} failed"
        else:
            success = True
            message = f"{created} medical tests created successfully"

        return BulkCreateResponseDTO(
            success=success,
            message=message,
            data=[MedicalTestMapper.to_test_response(test) for test in result.created],
            errors=[
                BulkItemErrorDTO(
                    index=error.index, code=error.code, message=error.message, errors=error.errors
                )
                for error in result.errors
            ],
        )
