from fastapi import APIRouter, Depends, Query, status

from hospital_directory.domain.geo import GeoPoint, parse_radius
from hospital_directory.entrypoints.http.dependencies import (
    get_create_hospital_use_case,
    get_delete_hospital_use_case,
    get_hospital_by_id_use_case,
    get_hospitals_by_department_use_case,
    get_hospitals_by_location_use_case,
    get_nearby_hospitals_use_case,
    get_search_hospitals_use_case,
    get_update_hospital_use_case,
)
from hospital_directory.entrypoints.http.dtos.common import MessageResponseDTO
from hospital_directory.entrypoints.http.dtos.hospital import (
    HospitalCreateDTO,
    HospitalListQueryDTO,
    HospitalListResponseDTO,
    HospitalPatchDTO,
    HospitalResponseDTO,
)
from hospital_directory.entrypoints.http.error_responses import CONFLICT_RESPONSE, ERROR_RESPONSES
from hospital_directory.entrypoints.http.mappers.hospital_mapper import HospitalMapper
from hospital_directory.use_cases.create_hospital import CreateHospital, CreateHospitalRequest
from hospital_directory.use_cases.delete_hospital import DeleteHospital, DeleteHospitalRequest
from hospital_directory.use_cases.get_hospital_by_id import (
    GetHospitalById,
    GetHospitalByIdRequest,
)
from hospital_directory.use_cases.locate_hospitals import (
    FindHospitalsByDepartment,
    FindHospitalsByDepartmentRequest,
    FindHospitalsByLocation,
    FindHospitalsByLocationRequest,
    FindNearbyHospitals,
    FindNearbyHospitalsRequest,
)
from hospital_directory.use_cases.search_hospitals import SearchHospitals
from hospital_directory.use_cases.update_hospital import UpdateHospital, UpdateHospitalRequest

router = APIRouter(tags=["Hospitals"])


@router.get(
    "/hospitals",
    response_model=HospitalListResponseDTO,
    summary="List hospitals",
    description="""
    Paginated hospital listing with optional filters.

    ## Filters
    - All filters use AND semantics
    - city/division: case-insensitive partial match
    - hospital_type: exact (Government, Private, NGO)
    - verified/featured: "true" or any other value for false
    - search: keyword in name/description, or an exact department/facility

    ## Pagination
    - Default limit: 10, max 100
    - Ordered by hospital_rank, then name

    ## Example
    ```
    GET /api/hospitals?city=dhaka&verified=true&page=2
    ```
    """,
    responses=ERROR_RESPONSES,
)
def list_hospitals(
    query: HospitalListQueryDTO = Depends(),
    use_case: SearchHospitals = Depends(get_search_hospitals_use_case),
) -> HospitalListResponseDTO:
    """parse → execute → map → return"""
    request = HospitalMapper.to_domain_request(query)
    result = use_case.execute(request)
    return HospitalMapper.to_response(result)


@router.get(
    "/hospitals/location",
    response_model=list[HospitalResponseDTO],
    summary="Hospitals in a city",
    responses=ERROR_RESPONSES,
)
def hospitals_by_location(
    city: str | None = Query(default=None, description="Required; case-insensitive partial"),
    division: str | None = Query(default=None),
    use_case: FindHospitalsByLocation = Depends(get_hospitals_by_location_use_case),
) -> list[HospitalResponseDTO]:
    hospitals = use_case.execute(FindHospitalsByLocationRequest(city=city, division=division))
    return HospitalMapper.to_list(hospitals)


@router.get(
    "/hospitals/department",
    response_model=list[HospitalResponseDTO],
    summary="Hospitals with a department",
    responses=ERROR_RESPONSES,
)
def hospitals_by_department(
    department: str | None = Query(default=None, examples=["Cardiology"]),
    use_case: FindHospitalsByDepartment = Depends(get_hospitals_by_department_use_case),
) -> list[HospitalResponseDTO]:
    hospitals = use_case.execute(FindHospitalsByDepartmentRequest(department=department))
    return HospitalMapper.to_list(hospitals)


@router.get(
    "/hospitals/nearby",
    response_model=list[HospitalResponseDTO],
    summary="Hospitals near a point",
    description="""
    Hospitals inside a latitude/longitude box around (lat, lng).

    The box approximates a circle of radius maxDistance meters (default
    5000), so hospitals near the box corners may lie slightly farther away.
    Results are not ordered by distance.
    """,
    responses=ERROR_RESPONSES,
)
def nearby_hospitals(
    lat: str | None = Query(default=None, examples=["23.777176"]),
    lng: str | None = Query(default=None, examples=["90.399452"]),
    maxDistance: str | None = Query(default=None, description="Radius in meters"),
    use_case: FindNearbyHospitals = Depends(get_nearby_hospitals_use_case),
) -> list[HospitalResponseDTO]:
    request = FindNearbyHospitalsRequest(
        center=GeoPoint.from_raw(lat, lng),
        radius_meters=parse_radius(maxDistance),
    )
    return HospitalMapper.to_list(use_case.execute(request))


@router.get(
    "/hospitals/{hospital_id}",
    response_model=HospitalResponseDTO,
    summary="Get a hospital",
    responses=ERROR_RESPONSES,
)
def get_hospital(
    hospital_id: str,
    use_case: GetHospitalById = Depends(get_hospital_by_id_use_case),
) -> HospitalResponseDTO:
    result = use_case.execute(GetHospitalByIdRequest(hospital_id=hospital_id))
    return HospitalMapper.to_hospital_response(result.hospital)


@router.post(
    "/hospitals",
    response_model=HospitalResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a hospital",
    responses={**ERROR_RESPONSES, **CONFLICT_RESPONSE},
)
def create_hospital(
    payload: HospitalCreateDTO,
    use_case: CreateHospital = Depends(get_create_hospital_use_case),
) -> HospitalResponseDTO:
    result = use_case.execute(CreateHospitalRequest(hospital=HospitalMapper.to_domain(payload)))
    return HospitalMapper.to_hospital_response(result.hospital)


@router.put(
    "/hospitals/{hospital_id}",
    response_model=HospitalResponseDTO,
    summary="Update a hospital",
    responses={**ERROR_RESPONSES, **CONFLICT_RESPONSE},
)
@router.patch(
    "/hospitals/{hospital_id}",
    response_model=HospitalResponseDTO,
    summary="Partially update a hospital",
    responses={**ERROR_RESPONSES, **CONFLICT_RESPONSE},
)
def update_hospital(
    hospital_id: str,
    payload: HospitalPatchDTO,
    use_case: UpdateHospital = Depends(get_update_hospital_use_case),
) -> HospitalResponseDTO:
    request = UpdateHospitalRequest(
        hospital_id=hospital_id, changes=HospitalMapper.to_changes(payload)
    )
    return HospitalMapper.to_hospital_response(use_case.execute(request).hospital)


@router.delete(
    "/hospitals/{hospital_id}",
    response_model=MessageResponseDTO,
    summary="Delete a hospital",
    responses={**ERROR_RESPONSES, **CONFLICT_RESPONSE},
)
def delete_hospital(
    hospital_id: str,
    use_case: DeleteHospital = Depends(get_delete_hospital_use_case),
) -> MessageResponseDTO:
    use_case.execute(DeleteHospitalRequest(hospital_id=hospital_id))
    return MessageResponseDTO(message="Hospital deleted successfully")
