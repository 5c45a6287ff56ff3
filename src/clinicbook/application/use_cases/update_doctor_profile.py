"""Update Doctor Profile use case."""

from typing import Any, Mapping

from ...core.structured_logger import get_logger
from ...domain.entities.doctor import Doctor
from ...domain.errors import DoctorNotFoundError, DuplicateDoctorError
from ..ports.repositories.doctor_repo import DoctorRepository

logger = get_logger(__name__)


class UpdateDoctorProfileUseCase:
    """Use case for partial updates of a stored doctor profile."""

    def __init__(self, doctor_repository: DoctorRepository):
        self._doctor_repository = doctor_repository

    async def execute(self, doctor_id: int, changes: Mapping[str, Any]) -> Doctor:
        """Apply ``changes`` to the doctor with ``doctor_id`` and persist it.

        Only the supplied keys are touched. Either all changes are stored or
        none: validation happens before anything is written.
        """
        doctor = await self._doctor_repository.find_by_id(doctor_id)
        if not doctor:
            raise DoctorNotFoundError(doctor_id)

        new_email = changes.get("email")
        if isinstance(new_email, str) and new_email.lower() != doctor.email.lower():
            owner = await self._doctor_repository.find_by_email(new_email)
            if owner and owner.id != doctor_id:
                raise DuplicateDoctorError(new_email)

        doctor.apply_updates(changes)
        saved = await self._doctor_repository.save(doctor)
        # Field names only; values may be sensitive
        logger.info("Doctor profile updated", doctor_id=doctor_id, fields=sorted(changes))
        return saved
