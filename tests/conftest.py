"""
Shared fixtures for clinicbook tests.
"""

import pytest
from fastapi.testclient import TestClient

from clinicbook.adapters.db.memory.doctor_repository import InMemoryDoctorRepository
from clinicbook.api.deps import get_doctor_repository
from clinicbook.app import create_app
from clinicbook.domain.entities.doctor import Doctor


def doctor_fields(**overrides):
    """Valid keyword arguments for Doctor, with optional overrides."""
    fields = {
        "name": "Dr. Ana Silva",
        "specialty": "Cardiology",
        "email": "ana.silva@healthclinic.org",
        "password": "secret123",
        "phone": "5551234567",
        "available_times": ["09:00-10:00", "10:00-11:00"],
        "years_of_experience": 12,
        "clinic_address": "12 Harbor Street, Porto",
        "rating": 4,
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def make_doctor():
    """Factory for valid Doctor entities."""

    def _make(**overrides) -> Doctor:
        return Doctor(**doctor_fields(**overrides))

    return _make


@pytest.fixture
def repository():
    return InMemoryDoctorRepository()


@pytest.fixture
def client(repository):
    """Test client backed by a fresh in-memory repository."""
    app = create_app()
    app.dependency_overrides[get_doctor_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fields():
    """Factory for valid Doctor field dicts (also a valid API payload)."""
    return doctor_fields
