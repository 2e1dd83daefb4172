"""
Route tests for /api/hospitals.

Requests go through the real routes, mappers and use cases; only the
repositories are swapped for in-memory ones.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hospital_directory.adapters.in_memory_hospital_repository import InMemoryHospitalRepository
from hospital_directory.adapters.in_memory_offering_repository import InMemoryOfferingRepository
from hospital_directory.domain.errors import InternalError
from hospital_directory.domain.hospital import Hospital
from hospital_directory.domain.offering import HospitalTestOffering
from hospital_directory.entrypoints.http.dependencies import get_search_hospitals_use_case


@pytest.fixture(autouse=True)
def seeded(
    hospital_repository: InMemoryHospitalRepository, make_hospital: Callable[..., Hospital]
) -> None:
    hospital_repository.add(make_hospital(id="h-1", verified=True))
    hospital_repository.add(
        make_hospital(
            id="h-2",
            hospital_rank=2,
            name="Chittagong Medical College Hospital",
            phone="01713141415",
            city="Chattogram",
            division="Chattogram",
            hospital_type="Government",
            latitude=22.3597,
            longitude=91.8306,
            departments=("Oncology",),
        )
    )


def _payload(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "hospital_rank": 3,
        "name": "Evercare Hospital Dhaka",
        "city": "Dhaka",
        "division": "Dhaka",
        "area": "Bashundhara",
        "road": "Plot 81",
        "house_number": "81",
        "full_address": "Plot 81, Block E, Bashundhara R/A, Dhaka 1229",
        "phone": "01713141416",
        "email": "info@evercarebd.com",
        "latitude": 23.8103,
        "longitude": 90.4320,
        "departments": ["cardiology", "Neurology"],
        "operating_hours": {"sunday": "24 hours"},
    }
    body.update(overrides)
    return body


# ==============================================================================
# Listing
# ==============================================================================


def test_list_hospitals(client: TestClient) -> None:
    response = client.get("/api/hospitals")

    assert response.status_code == 200
    body = response.json()
    assert [h["id"] for h in body["hospitals"]] == ["h-1", "h-2"]
    assert body["totalPages"] == 1
    assert body["currentPage"] == 1


def test_list_hospitals_with_filters(client: TestClient) -> None:
    response = client.get(
        "/api/hospitals", params={"city": "chatto", "hospital_type": "government"}
    )

    assert response.status_code == 200
    assert [h["id"] for h in response.json()["hospitals"]] == ["h-2"]


def test_list_hospitals_verified_flag(client: TestClient) -> None:
    verified = client.get("/api/hospitals", params={"verified": "true"}).json()
    unverified = client.get("/api/hospitals", params={"verified": "no"}).json()

    assert [h["id"] for h in verified["hospitals"]] == ["h-1"]
    assert [h["id"] for h in unverified["hospitals"]] == ["h-2"]


def test_list_hospitals_paging(client: TestClient) -> None:
    body = client.get("/api/hospitals", params={"page": "2", "limit": "1"}).json()

    assert [h["id"] for h in body["hospitals"]] == ["h-2"]
    assert body["totalPages"] == 2
    assert body["currentPage"] == 2


def test_list_hospitals_bad_paging_falls_back_to_defaults(client: TestClient) -> None:
    body = client.get("/api/hospitals", params={"page": "-3", "limit": "abc"}).json()

    assert body["currentPage"] == 1
    assert len(body["hospitals"]) == 2


def test_list_hospitals_rejects_unknown_type(client: TestClient) -> None:
    response = client.get("/api/hospitals", params={"hospital_type": "Clinic"})

    assert response.status_code == 400


def test_list_hospitals_unexpected_failure_is_500(app: FastAPI, client: TestClient) -> None:
    use_case = Mock()
    use_case.execute.side_effect = InternalError("connection reset")
    app.dependency_overrides[get_search_hospitals_use_case] = lambda: use_case

    response = client.get("/api/hospitals")

    assert response.status_code == 500
    assert response.json()["detail"] == "An unexpected error occurred"


# ==============================================================================
# Location, department and proximity
# ==============================================================================


def test_hospitals_by_location(client: TestClient) -> None:
    response = client.get("/api/hospitals/location", params={"city": "dhaka"})

    assert response.status_code == 200
    assert [h["id"] for h in response.json()] == ["h-1"]


def test_hospitals_by_location_requires_city(client: TestClient) -> None:
    response = client.get("/api/hospitals/location")

    assert response.status_code == 400
    assert response.json()["detail"] == "City is a required query parameter."


def test_hospitals_by_department(client: TestClient) -> None:
    response = client.get("/api/hospitals/department", params={"department": "oncology"})

    assert response.status_code == 200
    assert [h["id"] for h in response.json()] == ["h-2"]


def test_hospitals_by_department_rejects_unknown(client: TestClient) -> None:
    response = client.get("/api/hospitals/department", params={"department": "Astrology"})

    assert response.status_code == 400


def test_nearby_hospitals(client: TestClient) -> None:
    response = client.get(
        "/api/hospitals/nearby",
        params={"lat": "23.7577", "lng": "90.3897", "maxDistance": "5000"},
    )

    assert response.status_code == 200
    assert [h["id"] for h in response.json()] == ["h-1"]


def test_nearby_hospitals_requires_coordinates(client: TestClient) -> None:
    response = client.get("/api/hospitals/nearby", params={"lat": "23.7"})

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Latitude (lat) and longitude (lng) are required query parameters.",
        "code": "VALIDATION_ERROR",
    }


def test_nearby_hospitals_rejects_non_numeric(client: TestClient) -> None:
    response = client.get("/api/hospitals/nearby", params={"lat": "north", "lng": "90"})

    assert response.status_code == 400


# ==============================================================================
# Single hospital CRUD
# ==============================================================================


def test_get_hospital(client: TestClient) -> None:
    response = client.get("/api/hospitals/h-1")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Square Hospitals Ltd."
    assert body["operating_hours"]["monday"] == "Closed"
    assert body["departments"] == ["Cardiology", "Neurology"]


def test_get_hospital_not_found(client: TestClient) -> None:
    response = client.get("/api/hospitals/missing")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_create_hospital(
    client: TestClient, hospital_repository: InMemoryHospitalRepository
) -> None:
    response = client.post("/api/hospitals", json=_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["departments"] == ["Cardiology", "Neurology"]
    assert body["operating_hours"]["sunday"] == "24 hours"
    assert hospital_repository.get_by_id(body["id"]) is not None


def test_create_hospital_missing_field(client: TestClient) -> None:
    payload = _payload()
    del payload["name"]

    response = client.post("/api/hospitals", json=payload)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "name"


def test_create_hospital_domain_validation(client: TestClient) -> None:
    response = client.post("/api/hospitals", json=_payload(phone="12345"))

    assert response.status_code == 400
    fields = [error["field"] for error in response.json()["errors"]]
    assert fields == ["phone"]


def test_create_hospital_duplicate_phone(client: TestClient) -> None:
    response = client.post("/api/hospitals", json=_payload(phone="01713141414"))

    assert response.status_code == 409


def test_create_hospital_rejects_unknown_fields(client: TestClient) -> None:
    response = client.post("/api/hospitals", json=_payload(rating=5))

    assert response.status_code == 400


@pytest.mark.parametrize("method", ["patch", "put"])
def test_update_hospital(client: TestClient, method: str) -> None:
    response = client.request(method, "/api/hospitals/h-1", json={"featured": True, "name": None})

    assert response.status_code == 200
    body = response.json()
    assert body["featured"] is True
    assert body["name"] == "Square Hospitals Ltd."


def test_update_hospital_not_found(client: TestClient) -> None:
    response = client.patch("/api/hospitals/missing", json={"featured": True})

    assert response.status_code == 404


def test_update_hospital_invalid_value(client: TestClient) -> None:
    response = client.patch("/api/hospitals/h-1", json={"latitude": 100})

    assert response.status_code == 400


def test_delete_hospital(
    client: TestClient, hospital_repository: InMemoryHospitalRepository
) -> None:
    response = client.delete("/api/hospitals/h-2")

    assert response.status_code == 200
    assert response.json() == {"message": "Hospital deleted successfully"}
    assert hospital_repository.get_by_id("h-2") is None


def test_delete_hospital_with_offerings(
    client: TestClient,
    offering_repository: InMemoryOfferingRepository,
    make_offering: Callable[..., HospitalTestOffering],
) -> None:
    offering_repository.add(make_offering(hospital_id="h-1"))

    response = client.delete("/api/hospitals/h-1")

    assert response.status_code == 409
