"""
Tests for health check endpoints
"""


def test_health_check(client):
    """Test basic health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["service"] == "tenant-portal"
    assert data["status"] == "healthy"
    assert data["store"] == "healthy"
    assert "timestamp" in data
    assert "version" in data


def test_detailed_health_check(client):
    """Test detailed health check reports store backend"""
    response = client.get("/health/detailed")
    assert response.status_code == 200

    store = response.json()["components"]["store"]
    assert store["backend"] == "memory"
    assert store["tenant_count"] == 1


def test_health_check_store_down(failing_client):
    response = failing_client.get("/health")
    assert response.status_code == 503


def test_detailed_health_check_store_down(failing_client):
    response = failing_client.get("/health/detailed")
    assert response.status_code == 200
    assert response.json()["status"] == "degraded"


def test_openapi_spec(client):
    """Test that OpenAPI spec is accessible"""
    response = client.get("/openapi.json")
    assert response.status_code == 200

    spec = response.json()
    assert spec["info"]["title"] == "Tenant Portal"
    assert spec["info"]["version"] == "1.0.0"
