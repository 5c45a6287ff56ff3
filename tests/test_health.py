"""
Health endpoint tests.
"""

from clinicbook.core.exceptions import DatabaseError


def test_health_endpoint(client):
    """Test that the /health endpoint returns 200 OK."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["data"]["status"] == "healthy"
    assert "timestamp" in data["data"]
    assert "version" in data["data"]
    assert "service" in data["data"]


def test_health_ready_endpoint(client):
    """Test that /health/ready reports the in-memory backend as ready."""
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["ready"] is True
    assert data["checks"] == {"database": "ok"}


def test_health_ready_returns_503_when_storage_fails(client, repository, monkeypatch):
    """Test that /health/ready answers 503 when the repository read fails."""
    async def broken_find_all(limit=100, offset=0):
        raise DatabaseError("Failed to list doctor")

    monkeypatch.setattr(repository, "find_all", broken_find_all)

    response = client.get("/health/ready")
    assert response.status_code == 503
    data = response.json()["data"]
    assert data["ready"] is False
    assert data["checks"]["database"].startswith("error:")


def test_root_endpoint(client):
    """Test that the root endpoint returns API information."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "service" in data
    assert "version" in data
    assert data["status"] == "running"
