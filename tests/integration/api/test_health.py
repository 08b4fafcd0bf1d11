"""Integration tests for the health endpoint."""


def test_health_check_success(client):
    """GET /health returns status, app name and version."""
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "app" in data
    assert data["version"] == "1.0.0"


def test_health_check_does_not_require_authentication(anonymous_client):
    response = anonymous_client.get("/health")

    assert response.status_code == 200
