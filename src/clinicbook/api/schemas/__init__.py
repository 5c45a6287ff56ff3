"""
API schemas package.
"""

from .common import ApiResponse, ErrorResponse
from .doctor import CreateDoctorRequest, DoctorResponse, UpdateDoctorRequest

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "CreateDoctorRequest",
    "UpdateDoctorRequest",
    "DoctorResponse",
]
