"""Route test wiring: the real app with in-memory repositories injected."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hospital_directory.adapters.in_memory_hospital_repository import InMemoryHospitalRepository
from hospital_directory.adapters.in_memory_medical_test_repository import (
    InMemoryMedicalTestRepository,
)
from hospital_directory.adapters.in_memory_offering_repository import InMemoryOfferingRepository
from hospital_directory.entrypoints.http.app import build_app
from hospital_directory.entrypoints.http.dependencies import (
    get_hospital_repository,
    get_medical_test_repository,
    get_offering_repository,
)


@pytest.fixture()
def hospital_repository() -> InMemoryHospitalRepository:
    return InMemoryHospitalRepository()


@pytest.fixture()
def medical_test_repository() -> InMemoryMedicalTestRepository:
    return InMemoryMedicalTestRepository()


@pytest.fixture()
def offering_repository() -> InMemoryOfferingRepository:
    return InMemoryOfferingRepository()


@pytest.fixture()
def app(
    hospital_repository: InMemoryHospitalRepository,
    medical_test_repository: InMemoryMedicalTestRepository,
    offering_repository: InMemoryOfferingRepository,
) -> FastAPI:
    test_app = build_app()
    test_app.dependency_overrides[get_hospital_repository] = lambda: hospital_repository
    test_app.dependency_overrides[get_medical_test_repository] = lambda: medical_test_repository
    test_app.dependency_overrides[get_offering_repository] = lambda: offering_repository
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
