"""FastAPI dependency providers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..adapters.db.memory.doctor_repository import InMemoryDoctorRepository
from ..application.ports.repositories.doctor_repo import DoctorRepository
from ..application.use_cases.register_doctor import RegisterDoctorUseCase
from ..application.use_cases.update_doctor_profile import UpdateDoctorProfileUseCase
from ..core.config import MONGO_BACKEND, get_settings


@lru_cache()
def get_doctor_repository() -> DoctorRepository:
    """Get the doctor repository for the configured backend."""
    settings = get_settings()
    if settings.database.backend == MONGO_BACKEND:
        # Imported lazily so the memory backend never loads the Mongo stack
        from ..adapters.db.mongo.repositories.doctor_repository import MongoDoctorRepository

        return MongoDoctorRepository()
    return InMemoryDoctorRepository()


DoctorRepositoryDep = Annotated[DoctorRepository, Depends(get_doctor_repository)]


def get_register_doctor_use_case(repository: DoctorRepositoryDep) -> RegisterDoctorUseCase:
    return RegisterDoctorUseCase(repository)


def get_update_doctor_profile_use_case(
    repository: DoctorRepositoryDep,
) -> UpdateDoctorProfileUseCase:
    return UpdateDoctorProfileUseCase(repository)
