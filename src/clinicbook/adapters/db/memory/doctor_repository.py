"""
In-memory implementation of DoctorRepository.

Used for local development and tests; data lives only as long as the
process.
"""

import asyncio
import itertools
from typing import Dict, List, Optional

from clinicbook.application.ports.repositories.doctor_repo import DoctorRepository
from clinicbook.domain.entities.doctor import Doctor
from clinicbook.domain.errors import DoctorNotFoundError, DuplicateDoctorError


class InMemoryDoctorRepository(DoctorRepository):
    """Dict-backed repository with sequential integer IDs (never reused)."""

    def __init__(self) -> None:
        self._doctors: Dict[int, Doctor] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def save(self, doctor: Doctor) -> Doctor:
        """Store a copy of the doctor, assigning an ID on first save.

        The copy is built and checked before anything changes, so a failed
        save leaves both storage and ``doctor.id`` untouched.
        """
        async with self._lock:
            stored = doctor.copy()
            if stored.id is not None and stored.id not in self._doctors:
                raise DoctorNotFoundError(stored.id)
            self._ensure_email_free(stored)

            if stored.id is None:
                stored.assign_id(next(self._ids))
            self._doctors[stored.id] = stored
            doctor.assign_id(stored.id)
            return stored.copy()

    def _ensure_email_free(self, doctor: Doctor) -> None:
        wanted = doctor.email.lower()
        for other in self._doctors.values():
            if other.id != doctor.id and other.email.lower() == wanted:
                raise DuplicateDoctorError(doctor.email)

    async def find_by_id(self, doctor_id: int) -> Optional[Doctor]:
        doctor = self._doctors.get(doctor_id)
        return doctor.copy() if doctor else None

    async def find_by_email(self, email: str) -> Optional[Doctor]:
        wanted = email.lower()
        for doctor in self._doctors.values():
            if doctor.email.lower() == wanted:
                return doctor.copy()
        return None

    async def exists_by_id(self, doctor_id: int) -> bool:
        return doctor_id in self._doctors

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Doctor]:
        ordered = sorted(self._doctors)[offset:offset + limit]
        return [self._doctors[doctor_id].copy() for doctor_id in ordered]

    async def delete(self, doctor_id: int) -> bool:
        async with self._lock:
            return self._doctors.pop(doctor_id, None) is not None
