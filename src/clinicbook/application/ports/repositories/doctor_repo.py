"""
Doctor repository interface for data access abstraction.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.doctor import Doctor


class DoctorRepository(ABC):
    """Abstract repository for doctor data access.

    Implementations assign ``Doctor.id`` on the first save and hand out
    independent copies, so changes to a returned record only reach storage
    through another ``save``.
    """

    @abstractmethod
    async def save(self, doctor: Doctor) -> Doctor:
        """Insert a new doctor or replace a stored one.

        ``doctor.id`` is assigned only once the write has succeeded.

        Raises:
            DoctorNotFoundError: if ``doctor.id`` is set but unknown.
            DuplicateDoctorError: if another stored doctor has the same
                email address (compared case-insensitively).
        """
        pass

    @abstractmethod
    async def find_by_id(self, doctor_id: int) -> Optional[Doctor]:
        """Find a doctor by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Doctor]:
        """Find a doctor by email address."""
        pass

    @abstractmethod
    async def exists_by_id(self, doctor_id: int) -> bool:
        """Check if a doctor exists by ID."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Doctor]:
        """Find all doctors ordered by ID, with pagination."""
        pass

    @abstractmethod
    async def delete(self, doctor_id: int) -> bool:
        """Delete a doctor by ID. Returns False if it did not exist."""
        pass
