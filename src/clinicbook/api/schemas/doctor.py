"""
Doctor request/response schemas.

Field rules (lengths, ranges, email shape) are enforced by the domain entity;
these models only describe the wire shape. ``DoctorResponse`` has no password
field, so it can never be serialized to a client.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateDoctorRequest(BaseModel):
    """Payload for registering a doctor."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Full name (3-100 characters)", examples=["Dr. Ana Silva"])
    specialty: str = Field(..., description="Medical specialty (3-50 characters)", examples=["Cardiology"])
    email: str = Field(..., description="Email address", examples=["ana.silva@healthclinic.org"])
    password: str = Field(..., description="Password (at least 6 characters)")
    phone: str = Field(..., description="Phone number (10-15 characters)", examples=["5551234567"])
    available_times: List[str] = Field(
        default_factory=list,
        description="Ordered time slot tokens",
        examples=[["09:00-10:00", "10:00-11:00"]],
    )
    years_of_experience: Optional[int] = Field(None, description="Years in practice (0-50)")
    clinic_address: Optional[str] = Field(None, description="Clinic address")
    rating: Optional[int] = Field(None, description="Rating (1-5)")


class UpdateDoctorRequest(BaseModel):
    """Partial update; only fields present in the body are changed."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    specialty: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    available_times: Optional[List[str]] = None
    years_of_experience: Optional[int] = None
    clinic_address: Optional[str] = None
    rating: Optional[int] = None


class DoctorResponse(BaseModel):
    """Read-facing doctor profile (never includes the password)."""

    id: int = Field(..., description="Doctor ID")
    name: str
    specialty: str
    email: str
    phone: str
    available_times: List[str] = Field(default_factory=list)
    years_of_experience: Optional[int] = None
    clinic_address: Optional[str] = None
    rating: Optional[int] = None
