"""
Test suite for the health endpoint.

System role: Liveness probe verification
"""


def test_health_returns_healthy(client) -> None:
    """Test the liveness probe answers without touching any service."""
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_correlation_id_is_echoed(client) -> None:
    """Test the request correlation id comes back on the response."""
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc123"})

    assert response.headers["X-Correlation-ID"] == "abc123"
