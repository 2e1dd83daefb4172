"""Catalog-wide summaries over the full (unpaginated) medical test collection.

All functions are pure reductions; none mutate the records they read.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from hospital_directory.domain.enums import Gender
from hospital_directory.domain.medical_test import MedicalTest

DEFAULT_POPULAR_LIMIT = 10


@dataclass(frozen=True, slots=True)
class CategoryGroup:
    category: str
    count: int
    tests: list[tuple[str, str | None]]  # (name, id)


@dataclass(frozen=True, slots=True)
class CountBucket:
    key: str
    count: int


@dataclass(frozen=True, slots=True)
class CatalogOverview:
    total_tests: int = 0
    fasting_required: int = 0
    male_specific: int = 0
    female_specific: int = 0
    both_genders: int = 0


@dataclass(frozen=True, slots=True)
class CatalogStats:
    overview: CatalogOverview
    by_category: list[CountBucket]
    by_turnaround_time: list[CountBucket]


@dataclass(frozen=True, slots=True)
class PopularTest:
    test: MedicalTest
    keyword_count: int
    alias_count: int


def category_breakdown(tests: Iterable[MedicalTest]) -> list[CategoryGroup]:
    """Group by category with member (name, id) pairs, categories ascending."""
    groups: dict[str, list[tuple[str, str | None]]] = defaultdict(list)
    for test in tests:
        groups[test.test_category].append((test.name, test.id))
    return [
        CategoryGroup(category=category, count=len(members), tests=members)
        for category, members in sorted(groups.items())
    ]


def overview(tests: Iterable[MedicalTest]) -> CatalogOverview:
    """Totals, fasting count and per-gender counts in a single pass."""
    total = fasting = 0
    genders: Counter[str] = Counter()
    for test in tests:
        total += 1
        if test.fasting_required:
            fasting += 1
        genders[test.gender_specific] += 1
    return CatalogOverview(
        total_tests=total,
        fasting_required=fasting,
        male_specific=genders[Gender.MALE.value],
        female_specific=genders[Gender.FEMALE.value],
        both_genders=genders[Gender.BOTH.value],
    )


def _count_by(values: Iterable[str]) -> list[CountBucket]:
    counts = Counter(values)
    # count desc, then key asc for a deterministic order among ties
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [CountBucket(key=key, count=count) for key, count in ordered]


def category_counts(tests: Iterable[MedicalTest]) -> list[CountBucket]:
    return _count_by(test.test_category for test in tests)


def turnaround_breakdown(tests: Iterable[MedicalTest]) -> list[CountBucket]:
    return _count_by(test.turnaround_time for test in tests)


def catalog_stats(tests: Sequence[MedicalTest]) -> CatalogStats:
    return CatalogStats(
        overview=overview(tests),
        by_category=category_counts(tests),
        by_turnaround_time=turnaround_breakdown(tests),
    )


def popular_tests(
    tests: Iterable[MedicalTest], limit: int = DEFAULT_POPULAR_LIMIT
) -> list[PopularTest]:
    """
    Rank by (keyword count desc, alias count desc, name asc ignoring case), keep the top ``limit``.

    This is a proxy for popularity derived from catalog richness, not from
    any usage data.
    """
    ranked = sorted(
        (
            PopularTest(test=test, keyword_count=len(test.keywords), alias_count=len(test.aliases))
            for test in tests
        ),
        key=lambda item: (-item.keyword_count, -item.alias_count, item.test.name.casefold()),
    )
    return ranked[:limit]
