from __future__ import annotations

from collections.abc import Callable

import pytest

from hospital_directory.domain import aggregation
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.search import SortSpec


@pytest.fixture()
def catalog(make_medical_test: Callable[..., MedicalTest]) -> list[MedicalTest]:
    return [
        make_medical_test(
            id="1", name="FBS", test_category="pathology", keywords=("a", "b"), aliases=("x",)
        ),
        make_medical_test(
            id="2",
            name="PSA",
            test_category="urology",
            gender_specific="male",
            fasting_required=False,
            keywords=("a", "b"),
            aliases=("x", "y"),
        ),
        make_medical_test(
            id="3",
            name="Pap Smear",
            test_category="gynecology",
            gender_specific="female",
            fasting_required=False,
            turnaround_time="3 days",
            keywords=(),
            aliases=(),
        ),
        make_medical_test(
            id="4", name="Lipid Profile", test_category="pathology", keywords=("a",), aliases=()
        ),
    ]


def test_category_breakdown_groups_members(catalog: list[MedicalTest]) -> None:
    groups = aggregation.category_breakdown(catalog)

    assert [g.category for g in groups] == ["gynecology", "pathology", "urology"]
    pathology = groups[1]
    assert pathology.count == 2
    assert pathology.tests == [("FBS", "1"), ("Lipid Profile", "4")]


def test_overview_counts(catalog: list[MedicalTest]) -> None:
    overview = aggregation.overview(catalog)

    assert overview == aggregation.CatalogOverview(
        total_tests=4,
        fasting_required=2,
        male_specific=1,
        female_specific=1,
        both_genders=2,
    )


def test_catalog_stats_orders_buckets_by_count(catalog: list[MedicalTest]) -> None:
    stats = aggregation.catalog_stats(catalog)

    assert stats.by_category[0] == aggregation.CountBucket(key="pathology", count=2)
    assert [b.key for b in stats.by_category[1:]] == ["gynecology", "urology"]
    assert stats.by_turnaround_time == [
        aggregation.CountBucket(key="6 hours", count=3),
        aggregation.CountBucket(key="3 days", count=1),
    ]


def test_popular_tests_rank_by_keywords_then_aliases(catalog: list[MedicalTest]) -> None:
    ranked = aggregation.popular_tests(catalog, limit=3)

    assert [item.test.name for item in ranked] == ["PSA", "FBS", "Lipid Profile"]
    assert ranked[0].keyword_count == 2
    assert ranked[0].alias_count == 2


def test_popular_tests_name_tiebreak_ignores_case(
    make_medical_test: Callable[..., MedicalTest],
) -> None:
    tests = [
        make_medical_test(name="Banana", keywords=(), aliases=()),
        make_medical_test(name="apple", keywords=(), aliases=()),
    ]

    ranked = aggregation.popular_tests(tests)

    assert [item.test.name for item in ranked] == ["apple", "Banana"]
    assert [item.test.name for item in ranked] == [
        test.name for test in SortSpec().apply(tests, lambda test, field: getattr(test, field))
    ]

def test_empty_catalog() -> None:
    assert aggregation.category_breakdown([]) == []
    assert aggregation.overview([]).total_tests == 0
    assert aggregation.popular_tests([]) == []
