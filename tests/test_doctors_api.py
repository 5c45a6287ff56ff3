"""
Doctor endpoint tests.
"""

import asyncio

import pytest

from clinicbook.core.exceptions import DatabaseError


@pytest.fixture
def created(client, fields):
    """A doctor registered through the API."""
    response = client.post("/doctors", json=fields())
    assert response.status_code == 201
    return response.json()["data"]


def test_register_returns_profile_without_password(client, fields):
    response = client.post("/doctors", json=fields())

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["id"] == 1
    assert body["data"]["name"] == "Dr. Ana Silva"
    assert body["data"]["available_times"] == ["09:00-10:00", "10:00-11:00"]
    assert "password" not in body["data"]
    assert "secret123" not in response.text


def test_register_invalid_field_returns_422_naming_field(client, fields):
    response = client.post("/doctors", json=fields(name="Jo"))

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "INVALID_INPUT"
    assert body["details"]["field"] == "name"


def test_register_short_password_is_not_echoed(client, fields):
    response = client.post("/doctors", json=fields(password="abc12"))

    assert response.status_code == 422
    assert response.json()["details"]["field"] == "password"
    assert "abc12" not in response.text


def test_register_missing_field_returns_422(client, fields):
    payload = fields()
    del payload["email"]

    response = client.post("/doctors", json=payload)

    assert response.status_code == 422
    assert response.json()["error"] == "INVALID_INPUT"


def test_register_unknown_field_returns_422(client, fields):
    response = client.post("/doctors", json=fields(id=5))

    assert response.status_code == 422


def test_register_duplicate_email_returns_409(client, fields, created):
    response = client.post("/doctors", json=fields(name="Dr. Someone Else"))

    assert response.status_code == 409
    assert response.json()["error"] == "CONFLICT"


def test_get_doctor(client, created):
    response = client.get(f"/doctors/{created['id']}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data == created
    assert "password" not in data


def test_get_unknown_doctor_returns_404(client):
    response = client.get("/doctors/999")

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


def test_list_doctors_paginates(client, fields):
    for index in range(3):
        client.post("/doctors", json=fields(email=f"doc{index}@healthclinic.org"))

    response = client.get("/doctors", params={"limit": 2, "offset": 1})

    assert response.status_code == 200
    assert [d["id"] for d in response.json()["data"]] == [2, 3]
    assert all("password" not in d for d in response.json()["data"])


def test_list_rejects_bad_limit(client):
    assert client.get("/doctors", params={"limit": 0}).status_code == 422


def test_patch_updates_only_supplied_fields(client, created):
    response = client.patch(
        f"/doctors/{created['id']}",
        json={"rating": 5, "available_times": ["08:00-09:00", "13:00-14:00"]},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["rating"] == 5
    assert data["available_times"] == ["08:00-09:00", "13:00-14:00"]
    assert data["name"] == created["name"]
    assert data["email"] == created["email"]


def test_patch_can_clear_optional_fields(client, created):
    response = client.patch(f"/doctors/{created['id']}", json={"clinic_address": None})

    assert response.status_code == 200
    assert response.json()["data"]["clinic_address"] is None


def test_patch_cannot_clear_required_fields(client, created):
    response = client.patch(f"/doctors/{created['id']}", json={"phone": None})

    assert response.status_code == 422
    assert response.json()["details"]["field"] == "phone"


def test_patch_invalid_value_leaves_record_unchanged(client, created):
    response = client.patch(
        f"/doctors/{created['id']}",
        json={"specialty": "Neurology", "years_of_experience": 75},
    )

    assert response.status_code == 422
    assert response.json()["details"]["field"] == "years_of_experience"
    assert client.get(f"/doctors/{created['id']}").json()["data"] == created


def test_patch_rejects_id_change(client, created):
    response = client.patch(f"/doctors/{created['id']}", json={"id": 77})

    assert response.status_code == 422
    assert client.get(f"/doctors/{created['id']}").status_code == 200


def test_patch_password_is_stored_but_not_returned(client, created, repository):
    response = client.patch(f"/doctors/{created['id']}", json={"password": "n3w-passw0rd"})

    assert response.status_code == 200
    assert "n3w-passw0rd" not in response.text
    stored = asyncio.run(repository.find_by_id(created["id"]))
    assert stored.password == "n3w-passw0rd"


def test_patch_unknown_doctor_returns_404(client):
    assert client.patch("/doctors/999", json={"rating": 3}).status_code == 404


def test_delete_doctor(client, created):
    response = client.delete(f"/doctors/{created['id']}")

    assert response.status_code == 200
    assert response.json()["data"] == {"id": created["id"]}
    assert client.get(f"/doctors/{created['id']}").status_code == 404
    assert client.delete(f"/doctors/{created['id']}").status_code == 404


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.json()["request_id"] == "req-123"


def test_request_id_is_generated(client):
    response = client.get("/doctors")

    assert response.headers["X-Request-ID"]
    assert response.json()["request_id"] == response.headers["X-Request-ID"]


def test_storage_failure_returns_503(client, repository, monkeypatch):
    async def broken_find_by_id(doctor_id):
        raise DatabaseError("Failed to load doctor", {"doctor_id": doctor_id})

    monkeypatch.setattr(repository, "find_by_id", broken_find_by_id)

    response = client.get("/doctors/1")

    assert response.status_code == 503
    assert response.json()["error"] == "DATABASE_ERROR"
