"""
Doctor profile endpoints.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Query, Request, status

from ...application.dto.doctor_dto import RegisterDoctorRequest
from ...application.use_cases.register_doctor import RegisterDoctorUseCase
from ...application.use_cases.update_doctor_profile import UpdateDoctorProfileUseCase
from ...domain.entities.doctor import Doctor
from ...domain.errors import DoctorNotFoundError
from ..deps import (
    DoctorRepositoryDep,
    get_register_doctor_use_case,
    get_update_doctor_profile_use_case,
)
from ..schemas.common import ApiResponse
from ..schemas.doctor import CreateDoctorRequest, DoctorResponse, UpdateDoctorRequest
from ..utils.responses import ok

router = APIRouter(prefix="/doctors", tags=["Doctors"])


def _to_response(doctor: Doctor) -> DoctorResponse:
    return DoctorResponse(**doctor.to_dict())


@router.post(
    "",
    response_model=ApiResponse[DoctorResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a doctor",
)
async def register_doctor(
    request: Request,
    payload: CreateDoctorRequest,
    use_case: Annotated[RegisterDoctorUseCase, Depends(get_register_doctor_use_case)],
):
    """Validate and store a new doctor profile; the ID is assigned by storage."""
    doctor = await use_case.execute(RegisterDoctorRequest(**payload.model_dump()))
    return ok(request, data=_to_response(doctor), message="Doctor registered")


@router.get(
    "",
    response_model=ApiResponse[List[DoctorResponse]],
    summary="List doctors",
)
async def list_doctors(
    request: Request,
    repository: DoctorRepositoryDep,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    doctors = await repository.find_all(limit=limit, offset=offset)
    return ok(request, data=[_to_response(d) for d in doctors], message="Doctors loaded")


@router.get(
    "/{doctor_id}",
    response_model=ApiResponse[DoctorResponse],
    summary="Get a doctor profile",
)
async def get_doctor(request: Request, doctor_id: int, repository: DoctorRepositoryDep):
    doctor = await repository.find_by_id(doctor_id)
    if not doctor:
        raise DoctorNotFoundError(doctor_id)
    return ok(request, data=_to_response(doctor), message="Doctor loaded")


@router.patch(
    "/{doctor_id}",
    response_model=ApiResponse[DoctorResponse],
    summary="Update a doctor profile",
)
async def update_doctor(
    request: Request,
    doctor_id: int,
    payload: UpdateDoctorRequest,
    use_case: Annotated[UpdateDoctorProfileUseCase, Depends(get_update_doctor_profile_use_case)],
):
    """Change only the fields present in the body. Invalid values reject the whole update."""
    changes = payload.model_dump(exclude_unset=True)
    doctor = await use_case.execute(doctor_id, changes)
    return ok(request, data=_to_response(doctor), message="Doctor updated")


@router.delete(
    "/{doctor_id}",
    response_model=ApiResponse[dict],
    summary="Delete a doctor",
)
async def delete_doctor(request: Request, doctor_id: int, repository: DoctorRepositoryDep):
    deleted = await repository.delete(doctor_id)
    if not deleted:
        raise DoctorNotFoundError(doctor_id)
    return ok(request, data={"id": doctor_id}, message="Doctor deleted")
