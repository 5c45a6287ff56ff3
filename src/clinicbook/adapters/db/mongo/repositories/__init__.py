from .doctor_repository import MongoDoctorRepository

__all__ = ["MongoDoctorRepository"]
