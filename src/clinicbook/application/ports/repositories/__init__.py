from .doctor_repo import DoctorRepository

__all__ = ["DoctorRepository"]
