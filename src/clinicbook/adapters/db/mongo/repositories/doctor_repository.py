"""
MongoDB implementation of DoctorRepository.
"""

from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from clinicbook.application.ports.repositories.doctor_repo import DoctorRepository
from clinicbook.core.exceptions import DatabaseError
from clinicbook.core.structured_logger import get_logger
from clinicbook.domain.entities.doctor import Doctor
from clinicbook.domain.errors import DoctorNotFoundError, DuplicateDoctorError

from ..models.doctor_m import CounterMongo, DoctorAvailableTimeMongo, DoctorMongo

DOCTOR_SEQUENCE = "doctors"
FIRST_SLOTS_REVISION = 1

logger = get_logger(__name__)


@contextmanager
def _database_errors(action: str, **context):
    """Re-raise driver failures as ``DatabaseError``."""
    try:
        yield
    except PyMongoError as e:
        logger.error(f"Doctor {action} failed", error=str(e), error_type=type(e).__name__, **context)
        raise DatabaseError(f"Failed to {action} doctor", context) from e


class MongoDoctorRepository(DoctorRepository):
    """MongoDB implementation of DoctorRepository.

    Scalar fields are stored in ``doctors``; the ordered time slot tokens
    are stored one row each in ``doctor_available_times`` keyed by
    ``doctor_id`` and tagged with a revision. A save writes the new slot
    rows first and then points the doctor document at their revision in a
    single document write, so a failure at any step leaves the previously
    stored profile readable.
    """

    async def save(self, doctor: Doctor) -> Doctor:
        """Insert or replace a doctor and its time slots."""
        stored = doctor.copy()
        with _database_errors("save", doctor_id=stored.id):
            if stored.id is None:
                await self._insert(stored)
            else:
                await self._update(stored)

        doctor.assign_id(stored.id)
        return stored

    async def _insert(self, stored: Doctor) -> None:
        doctor_id = await self._next_id()
        await self._write_available_times(doctor_id, FIRST_SLOTS_REVISION, stored.available_times)

        doctor_mongo = self._domain_to_mongo(stored, doctor_id)
        try:
            await doctor_mongo.insert()
        except PyMongoError as e:
            await self._delete_available_times(doctor_id, revision=FIRST_SLOTS_REVISION)
            if isinstance(e, DuplicateKeyError):
                logger.warning("Doctor insert rejected: email in use", doctor_id=doctor_id)
                raise DuplicateDoctorError(stored.email) from e
            raise

        stored.assign_id(doctor_id)
        logger.info("Doctor inserted", doctor_id=doctor_id)

    async def _update(self, stored: Doctor) -> None:
        doctor_mongo = await DoctorMongo.find_one(DoctorMongo.doctor_id == stored.id)
        if not doctor_mongo:
            raise DoctorNotFoundError(stored.id)

        previous_revision = doctor_mongo.slots_revision
        revision = previous_revision + 1
        await self._write_available_times(stored.id, revision, stored.available_times)

        self._copy_fields(stored, doctor_mongo)
        doctor_mongo.slots_revision = revision
        doctor_mongo.updated_at = datetime.utcnow()
        try:
            await doctor_mongo.save()
        except PyMongoError as e:
            await self._delete_available_times(stored.id, revision=revision)
            if isinstance(e, DuplicateKeyError):
                logger.warning("Doctor update rejected: email in use", doctor_id=stored.id)
                raise DuplicateDoctorError(stored.email) from e
            raise

        await self._delete_available_times(stored.id, revision=previous_revision)
        logger.info("Doctor updated", doctor_id=stored.id, slots_revision=revision)

    async def find_by_id(self, doctor_id: int) -> Optional[Doctor]:
        """Find a doctor by ID."""
        with _database_errors("lookup", doctor_id=doctor_id):
            doctor_mongo = await DoctorMongo.find_one(DoctorMongo.doctor_id == doctor_id)
            if not doctor_mongo:
                return None
            return await self._mongo_to_domain(doctor_mongo)

    async def find_by_email(self, email: str) -> Optional[Doctor]:
        """Find a doctor by email address (case-insensitive)."""
        with _database_errors("lookup"):
            doctor_mongo = await DoctorMongo.find_one(DoctorMongo.email_normalized == email.lower())
            if not doctor_mongo:
                return None
            return await self._mongo_to_domain(doctor_mongo)

    async def exists_by_id(self, doctor_id: int) -> bool:
        """Check if a doctor exists by ID."""
        with _database_errors("lookup", doctor_id=doctor_id):
            count = await DoctorMongo.find(DoctorMongo.doctor_id == doctor_id).count()
        return count > 0

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Doctor]:
        """Find all doctors ordered by ID, with pagination."""
        with _database_errors("list"):
            doctors_mongo = (
                await DoctorMongo.find().sort("+doctor_id").skip(offset).limit(limit).to_list()
            )
            return [await self._mongo_to_domain(doctor_mongo) for doctor_mongo in doctors_mongo]

    async def delete(self, doctor_id: int) -> bool:
        """Delete a doctor and its time slots."""
        with _database_errors("delete", doctor_id=doctor_id):
            doctor_mongo = await DoctorMongo.find_one(DoctorMongo.doctor_id == doctor_id)
            if not doctor_mongo:
                return False

            await doctor_mongo.delete()
            await self._delete_available_times(doctor_id)
        logger.info("Doctor deleted", doctor_id=doctor_id)
        return True

    async def _next_id(self) -> int:
        """Atomically increment and return the doctor ID sequence."""
        counter = await CounterMongo.get_motor_collection().find_one_and_update(
            {"name": DOCTOR_SEQUENCE},
            {"$inc": {"value": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["value"]

    async def _write_available_times(self, doctor_id: int, revision: int, slots: List[str]) -> None:
        if slots:
            await DoctorAvailableTimeMongo.insert_many(
                [
                    DoctorAvailableTimeMongo(
                        doctor_id=doctor_id, revision=revision, position=position, slot=slot
                    )
                    for position, slot in enumerate(slots)
                ]
            )

    async def _delete_available_times(self, doctor_id: int, revision: Optional[int] = None) -> None:
        conditions = [DoctorAvailableTimeMongo.doctor_id == doctor_id]
        if revision is not None:
            conditions.append(DoctorAvailableTimeMongo.revision == revision)
        await DoctorAvailableTimeMongo.find(*conditions).delete()

    async def _load_available_times(self, doctor_mongo: DoctorMongo) -> List[str]:
        rows = (
            await DoctorAvailableTimeMongo.find(
                DoctorAvailableTimeMongo.doctor_id == doctor_mongo.doctor_id,
                DoctorAvailableTimeMongo.revision == doctor_mongo.slots_revision,
            )
            .sort("+position")
            .to_list()
        )
        return [row.slot for row in rows]

    def _domain_to_mongo(self, doctor: Doctor, doctor_id: int) -> DoctorMongo:
        """Convert domain entity to MongoDB model."""
        return DoctorMongo(
            doctor_id=doctor_id,
            name=doctor.name,
            specialty=doctor.specialty,
            email=doctor.email,
            email_normalized=doctor.email.lower(),
            password=doctor.password,
            phone=doctor.phone,
            years_of_experience=doctor.years_of_experience,
            clinic_address=doctor.clinic_address,
            rating=doctor.rating,
            slots_revision=FIRST_SLOTS_REVISION,
        )

    def _copy_fields(self, doctor: Doctor, doctor_mongo: DoctorMongo) -> None:
        doctor_mongo.name = doctor.name
        doctor_mongo.specialty = doctor.specialty
        doctor_mongo.email = doctor.email
        doctor_mongo.email_normalized = doctor.email.lower()
        doctor_mongo.password = doctor.password
        doctor_mongo.phone = doctor.phone
        doctor_mongo.years_of_experience = doctor.years_of_experience
        doctor_mongo.clinic_address = doctor.clinic_address
        doctor_mongo.rating = doctor.rating

    async def _mongo_to_domain(self, doctor_mongo: DoctorMongo) -> Doctor:
        """Convert MongoDB model to domain entity."""
        return Doctor(
            id=doctor_mongo.doctor_id,
            name=doctor_mongo.name,
            specialty=doctor_mongo.specialty,
            email=doctor_mongo.email,
            password=doctor_mongo.password,
            phone=doctor_mongo.phone,
            available_times=await self._load_available_times(doctor_mongo),
            years_of_experience=doctor_mongo.years_of_experience,
            clinic_address=doctor_mongo.clinic_address,
            rating=doctor_mongo.rating,
        )
