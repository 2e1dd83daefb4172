"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Repositories and use cases are cheap and are built fresh for each request;
FastAPI caches each dependency within a request, so every repository in a
request shares the same session (and transaction).
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from hospital_directory.adapters.postgres_hospital_repository import PostgresHospitalRepository
from hospital_directory.adapters.postgres_medical_test_repository import (
    PostgresMedicalTestRepository,
)
from hospital_directory.adapters.postgres_offering_repository import PostgresOfferingRepository
from hospital_directory.infra.db.session import get_session
from hospital_directory.ports.hospital_repository import HospitalRepository
from hospital_directory.ports.medical_test_repository import MedicalTestRepository
from hospital_directory.ports.offering_repository import OfferingRepository
from hospital_directory.use_cases.bulk_create_medical_tests import BulkCreateMedicalTests
from hospital_directory.use_cases.catalog_statistics import (
    GetCatalogStats,
    GetCategoryBreakdown,
    GetPopularTests,
)
from hospital_directory.use_cases.create_hospital import CreateHospital
from hospital_directory.use_cases.delete_hospital import DeleteHospital
from hospital_directory.use_cases.get_hospital_by_id import GetHospitalById
from hospital_directory.use_cases.get_medical_test_by_id import GetMedicalTestById
from hospital_directory.use_cases.locate_hospitals import (
    FindHospitalsByDepartment,
    FindHospitalsByLocation,
    FindNearbyHospitals,
)
from hospital_directory.use_cases.manage_medical_tests import (
    CreateMedicalTest,
    DeleteMedicalTest,
    UpdateMedicalTest,
)
from hospital_directory.use_cases.manage_offerings import CreateOffering, DeleteOffering
from hospital_directory.use_cases.price_offering import (
    GetBookingSummary,
    GetOfferingById,
    QuoteOfferingTotal,
)
from hospital_directory.use_cases.search_hospitals import SearchHospitals
from hospital_directory.use_cases.search_medical_tests import SearchMedicalTests
from hospital_directory.use_cases.search_offerings import SearchOfferings
from hospital_directory.use_cases.update_hospital import UpdateHospital


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that commits on
    success, rolls back on exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


# Repositories


def get_hospital_repository(db: Session = Depends(get_db)) -> HospitalRepository:
    return PostgresHospitalRepository(session=db)


def get_medical_test_repository(db: Session = Depends(get_db)) -> MedicalTestRepository:
    return PostgresMedicalTestRepository(session=db)


def get_offering_repository(db: Session = Depends(get_db)) -> OfferingRepository:
    return PostgresOfferingRepository(session=db)


# Hospitals


def get_search_hospitals_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
) -> SearchHospitals:
    return SearchHospitals(hospital_repository=hospitals)


def get_hospital_by_id_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
) -> GetHospitalById:
    return GetHospitalById(hospital_repository=hospitals)


def get_create_hospital_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
) -> CreateHospital:
    return CreateHospital(hospital_repository=hospitals)


def get_update_hospital_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
) -> UpdateHospital:
    return UpdateHospital(hospital_repository=hospitals)


def get_delete_hospital_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
    offerings: OfferingRepository = Depends(get_offering_repository),
) -> DeleteHospital:
    return DeleteHospital(hospital_repository=hospitals, offering_repository=offerings)


def get_hospitals_by_location_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
) -> FindHospitalsByLocation:
    return FindHospitalsByLocation(hospital_repository=hospitals)


def get_hospitals_by_department_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
) -> FindHospitalsByDepartment:
    return FindHospitalsByDepartment(hospital_repository=hospitals)


def get_nearby_hospitals_use_case(
    hospitals: HospitalRepository = Depends(get_hospital_repository),
) -> FindNearbyHospitals:
    return FindNearbyHospitals(hospital_repository=hospitals)


# Medical tests


def get_search_medical_tests_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> SearchMedicalTests:
    return SearchMedicalTests(medical_test_repository=tests)


def get_medical_test_by_id_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> GetMedicalTestById:
    return GetMedicalTestById(medical_test_repository=tests)


def get_create_medical_test_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> CreateMedicalTest:
    return CreateMedicalTest(medical_test_repository=tests)


def get_update_medical_test_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> UpdateMedicalTest:
    return UpdateMedicalTest(medical_test_repository=tests)


def get_delete_medical_test_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
    offerings: OfferingRepository = Depends(get_offering_repository),
) -> DeleteMedicalTest:
    return DeleteMedicalTest(medical_test_repository=tests, offering_repository=offerings)


def get_bulk_create_medical_tests_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> BulkCreateMedicalTests:
    return BulkCreateMedicalTests(medical_test_repository=tests)


def get_category_breakdown_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> GetCategoryBreakdown:
    return GetCategoryBreakdown(medical_test_repository=tests)


def get_catalog_stats_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> GetCatalogStats:
    return GetCatalogStats(medical_test_repository=tests)


def get_popular_tests_use_case(
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> GetPopularTests:
    return GetPopularTests(medical_test_repository=tests)


# Offerings


def get_search_offerings_use_case(
    offerings: OfferingRepository = Depends(get_offering_repository),
) -> SearchOfferings:
    return SearchOfferings(offering_repository=offerings)


def get_offering_by_id_use_case(
    offerings: OfferingRepository = Depends(get_offering_repository),
) -> GetOfferingById:
    return GetOfferingById(offering_repository=offerings)


def get_create_offering_use_case(
    offerings: OfferingRepository = Depends(get_offering_repository),
    hospitals: HospitalRepository = Depends(get_hospital_repository),
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> CreateOffering:
    return CreateOffering(
        offering_repository=offerings,
        hospital_repository=hospitals,
        medical_test_repository=tests,
    )


def get_delete_offering_use_case(
    offerings: OfferingRepository = Depends(get_offering_repository),
) -> DeleteOffering:
    return DeleteOffering(offering_repository=offerings)


def get_quote_offering_total_use_case(
    offerings: OfferingRepository = Depends(get_offering_repository),
) -> QuoteOfferingTotal:
    return QuoteOfferingTotal(offering_repository=offerings)


def get_booking_summary_use_case(
    offerings: OfferingRepository = Depends(get_offering_repository),
    hospitals: HospitalRepository = Depends(get_hospital_repository),
    tests: MedicalTestRepository = Depends(get_medical_test_repository),
) -> GetBookingSummary:
    return GetBookingSummary(
        offering_repository=offerings,
        hospital_repository=hospitals,
        medical_test_repository=tests,
    )
