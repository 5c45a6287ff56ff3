"""Register Doctor use case."""

from dataclasses import asdict

from ...core.structured_logger import get_logger
from ...domain.entities.doctor import Doctor
from ...domain.errors import DuplicateDoctorError
from ..dto.doctor_dto import RegisterDoctorRequest
from ..ports.repositories.doctor_repo import DoctorRepository

logger = get_logger(__name__)


class RegisterDoctorUseCase:
    """Use case for registering a new doctor profile."""

    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, request: RegisterDoctorRequest) -> Doctor:
        """Validate, check email uniqueness and persist a new doctor."""
        # Entity construction runs every field rule
        doctor = Doctor(**asdict(request))

        existing = await self._doctor_repository.find_by_email(doctor.email)
        if existing:
            logger.warning("Doctor registration rejected: email in use", doctor_id=existing.id)
            raise DuplicateDoctorError(doctor.email)

        saved = await self._doctor_repository.save(doctor)
        logger.info("Doctor registered", doctor_id=saved.id, specialty=saved.specialty)
        return saved
