"""Doctor DTOs passed from the API layer to use cases."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class RegisterDoctorRequest:
    """Request DTO for doctor registration."""

    name: str
    specialty: str
    email: str
    password: str
    phone: str
    available_times: List[str] = field(default_factory=list)
    years_of_experience: Optional[int] = None
    clinic_address: Optional[str] = None
    rating: Optional[int] = None
