"""MongoDB Beanie models for Doctor documents."""

from datetime import datetime
from typing import Optional

import pymongo
from beanie import Document, Indexed
from pydantic import Field


class DoctorMongo(Document):
    """MongoDB model for Doctor entity.

    Time slots live in their own collection; only the rows tagged with
    ``slots_revision`` belong to the current profile.
    """

    doctor_id: Indexed(int, unique=True) = Field(..., description="Doctor ID")
    name: str = Field(..., description="Doctor display name")
    specialty: str = Field(..., description="Medical specialty")
    email: str = Field(..., description="Doctor email address")
    email_normalized: Indexed(str, unique=True) = Field(..., description="Lowercased email, unique per doctor")
    password: str = Field(..., description="Login password")
    phone: str = Field(..., description="Contact phone number")
    years_of_experience: Optional[int] = Field(None, description="Years in practice")
    clinic_address: Optional[str] = Field(None, description="Clinic address")
    rating: Optional[int] = Field(None, description="Rating from 1 to 5")
    slots_revision: int = Field(default=1, description="Revision of the time slot rows currently in use")
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "doctors"


class DoctorAvailableTimeMongo(Document):
    """One available time slot token of a doctor, keyed by doctor ID."""

    doctor_id: int = Field(..., description="Owning doctor ID")
    revision: int = Field(..., description="Slot list revision the row belongs to")
    position: int = Field(..., description="Position of the slot in the doctor's list")
    slot: str = Field(..., description="Time window token, e.g. 09:00-10:00")

    class Settings:
        name = "doctor_available_times"
        indexes = [
            pymongo.IndexModel(
                [
                    ("doctor_id", pymongo.ASCENDING),
                    ("revision", pymongo.ASCENDING),
                    ("position", pymongo.ASCENDING),
                ],
                unique=True,
            ),
        ]


class CounterMongo(Document):
    """Named sequence used to generate integer IDs."""

    name: Indexed(str, unique=True) = Field(..., description="Sequence name")
    value: int = Field(default=0, description="Last issued value")

    class Settings:
        name = "counters"
