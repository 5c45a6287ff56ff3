from .register_doctor import RegisterDoctorUseCase
from .update_doctor_profile import UpdateDoctorProfileUseCase

__all__ = ["RegisterDoctorUseCase", "UpdateDoctorProfileUseCase"]
