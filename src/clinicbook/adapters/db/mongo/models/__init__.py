from .doctor_m import CounterMongo, DoctorAvailableTimeMongo, DoctorMongo

DOCUMENT_MODELS = [DoctorMongo, DoctorAvailableTimeMongo, CounterMongo]

__all__ = ["CounterMongo", "DoctorAvailableTimeMongo", "DoctorMongo", "DOCUMENT_MODELS"]
