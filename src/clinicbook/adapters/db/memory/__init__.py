from .doctor_repository import InMemoryDoctorRepository

__all__ = ["InMemoryDoctorRepository"]
