"""
Route tests for /api/tests.

Covers listing, keyword search, gender lookup, aggregations, bulk import
status codes and single-test CRUD.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from fastapi.testclient import TestClient

from hospital_directory.adapters.in_memory_medical_test_repository import (
    InMemoryMedicalTestRepository,
)
from hospital_directory.adapters.in_memory_offering_repository import InMemoryOfferingRepository
from hospital_directory.domain.medical_test import MedicalTest
from hospital_directory.domain.offering import HospitalTestOffering


@pytest.fixture(autouse=True)
def seeded(
    medical_test_repository: InMemoryMedicalTestRepository,
    make_medical_test: Callable[..., MedicalTest],
) -> None:
    medical_test_repository.add(make_medical_test(id="fbs"))
    medical_test_repository.add(
        make_medical_test(
            id="psa",
            name="Prostate Specific Antigen",
            test_category="urology",
            description="Prostate screening.",
            fasting_required=False,
            gender_specific="male",
            turnaround_time="24 hours",
            aliases=("PSA",),
            keywords=("prostate",),
        )
    )
    medical_test_repository.add(
        make_medical_test(
            id="pap",
            name="Pap Smear",
            test_category="gynecology",
            description="Cervical cancer screening.",
            fasting_required=False,
            gender_specific="female",
            aliases=(),
            keywords=("cervix", "hpv", "cancer"),
        )
    )


def _payload(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "test_category": "Hematology",
        "name": "Complete Blood Count",
        "description": "Counts red cells, white cells and platelets.",
        "preparation_instructions": "No special preparation.",
        "fasting_required": False,
        "turnaround_time": "24 hours",
        "age_restrictions": "All ages",
        "gender_specific": "both",
        "purpose": "General health check",
        "aliases": ["CBC"],
        "keywords": ["Blood", " anemia "],
    }
    body.update(overrides)
    return body


def _ids(response: Any) -> list[str]:
    return [item["id"] for item in response.json()["data"]]


# ==============================================================================
# Listing and search
# ==============================================================================


def test_list_tests(client: TestClient) -> None:
    response = client.get("/api/tests")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert _ids(response) == ["fbs", "pap", "psa"]
    assert body["pagination"] == {
        "currentPage": 1,
        "totalPages": 1,
        "totalCount": 3,
        "hasNext": False,
        "hasPrev": False,
    }


def test_list_tests_filters_and_sort(client: TestClient) -> None:
    response = client.get(
        "/api/tests", params={"fasting_required": "false", "sort": "name", "order": "DESC"}
    )

    assert _ids(response) == ["psa", "pap"]


def test_list_tests_keyword_filter(client: TestClient) -> None:
    response = client.get("/api/tests", params={"keywords": "HPV, thyroid"})

    assert _ids(response) == ["pap"]


def test_list_tests_rejects_unknown_sort_field(client: TestClient) -> None:
    response = client.get("/api/tests", params={"sort": "price"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "sort"


def test_list_tests_rejects_unknown_category(client: TestClient) -> None:
    response = client.get("/api/tests", params={"test_category": "astrology"})

    assert response.status_code == 400


def test_search_tests(client: TestClient) -> None:
    response = client.get("/api/tests/search", params={"q": "screening"})

    assert response.status_code == 200
    assert _ids(response) == ["pap", "psa"]


def test_search_tests_by_alias(client: TestClient) -> None:
    assert _ids(client.get("/api/tests/search", params={"q": "psa"})) == ["psa"]


def test_search_tests_requires_term(client: TestClient) -> None:
    response = client.get("/api/tests/search", params={"q": "  "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Search term is required"


@pytest.mark.parametrize(
    ("gender", "expected"),
    [("male", ["fbs", "psa"]), ("FEMALE", ["fbs", "pap"]), ("both", ["fbs"])],
)
def test_tests_by_gender(client: TestClient, gender: str, expected: list[str]) -> None:
    response = client.get(f"/api/tests/gender/{gender}")

    assert response.status_code == 200
    assert _ids(response) == expected


def test_tests_by_gender_rejects_unknown(client: TestClient) -> None:
    assert client.get("/api/tests/gender/other").status_code == 400


# ==============================================================================
# Aggregations
# ==============================================================================


def test_categories(client: TestClient) -> None:
    body = client.get("/api/tests/categories").json()

    assert [group["category"] for group in body["data"]] == ["gynecology", "pathology", "urology"]
    assert body["data"][0]["tests"] == [{"name": "Pap Smear", "id": "pap"}]


def test_stats(client: TestClient) -> None:
    data = client.get("/api/tests/stats").json()["data"]

    assert data["overview"] == {
        "totalTests": 3,
        "fastingRequired": 1,
        "maleSpecific": 1,
        "femaleSpecific": 1,
        "bothGenders": 1,
    }
    assert data["byTurnaroundTime"][0] == {"turnaround_time": "6 hours", "count": 2}


def test_popular(client: TestClient) -> None:
    body = client.get("/api/tests/popular", params={"limit": "2"}).json()

    assert [item["id"] for item in body["data"]] == ["pap", "fbs"]
    assert body["count"] == 2
    assert body["data"][0]["keywordCount"] == 3


# ==============================================================================
# Bulk import
# ==============================================================================


def test_bulk_all_created(client: TestClient) -> None:
    response = client.post(
        "/api/tests/bulk",
        json={"tests": [_payload(), _payload(name="Lipid Profile")]},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "2 medical tests created successfully"
    assert body["errors"] == []


def test_bulk_partial(client: TestClient) -> None:
    response = client.post(
        "/api/tests/bulk",
        json={"tests": [_payload(), _payload(name=""), _payload(name="Lipid Profile")]},
    )

    assert response.status_code == 207
    body = response.json()
    assert body["success"] == "partial"
    assert body["message"] == "2 tests created, 1 failed"
    assert body["errors"][0]["index"] == 1
    assert body["errors"][0]["errors"][0]["field"] == "name"


def test_bulk_over_long_turnaround_is_partial(client: TestClient) -> None:
    response = client.post(
        "/api/tests/bulk",
        json={"tests": [_payload(), _payload(name="Lipid Profile", turnaround_time="x" * 150)]},
    )

    assert response.status_code == 207
    body = response.json()
    assert [item["name"] for item in body["data"]] == ["Complete Blood Count"]
    assert body["errors"][0]["index"] == 1
    assert body["errors"][0]["errors"][0]["field"] == "turnaround_time"


def test_bulk_all_failed(client: TestClient) -> None:
    response = client.post("/api/tests/bulk", json={"tests": [{"name": "Only a name"}]})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "0 tests created, 1 failed"
    assert body["data"] == []


def test_bulk_empty(client: TestClient) -> None:
    assert client.post("/api/tests/bulk", json={"tests": []}).status_code == 400


# ==============================================================================
# Single test CRUD
# ==============================================================================


def test_create_test(client: TestClient) -> None:
    response = client.post("/api/tests", json=_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Medical test created successfully"
    assert body["data"]["test_category"] == "hematology"
    assert body["data"]["keywords"] == ["blood", "anemia"]


def test_create_test_invalid(client: TestClient) -> None:
    response = client.post("/api/tests", json=_payload(gender_specific="any"))

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {
            "field": "gender_specific",
            "message": "Gender specific must be either male, female, or both",
            "code": "INVALID_CHOICE",
        }
    ]


def test_get_test(client: TestClient) -> None:
    response = client.get("/api/tests/psa")

    assert response.status_code == 200
    body = response.json()
    assert "message" not in body
    assert body["data"]["name"] == "Prostate Specific Antigen"


def test_get_test_not_found(client: TestClient) -> None:
    assert client.get("/api/tests/missing").status_code == 404


def test_get_test_summary(client: TestClient) -> None:
    response = client.get("/api/tests/fbs/summary")

    assert response.json()["data"] == {
        "id": "fbs",
        "name": "Fasting Blood Sugar",
        "category": "pathology",
        "turnaround_time": "6 hours",
        "fasting_required": True,
    }


@pytest.mark.parametrize("method", ["patch", "put"])
def test_update_test(client: TestClient, method: str) -> None:
    response = client.request(method, "/api/tests/fbs", json={"turnaround_time": "2 hours"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Medical test updated successfully"
    assert body["data"]["turnaround_time"] == "2 hours"


def test_delete_test(
    client: TestClient, medical_test_repository: InMemoryMedicalTestRepository
) -> None:
    response = client.delete("/api/tests/pap")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Medical test deleted successfully"}
    assert medical_test_repository.get_by_id("pap") is None


def test_delete_test_still_offered(
    client: TestClient,
    offering_repository: InMemoryOfferingRepository,
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    offering_repository.add(make_offering(test_id="fbs"))

    assert client.delete("/api/tests/fbs").status_code == 409
