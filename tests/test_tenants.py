"""
Tests for tenant API routes
"""


class TestTenantRoutes:
    """Test /api/tenants routes"""

    def test_list_tenants(self, client):
        response = client.get("/api/tenants")
        assert response.status_code == 200
        assert response.json() == {"tenants": [{"id": "acme", "name": "Acme Corp"}]}

    def test_create_then_list(self, client):
        response = client.post("/api/tenants", json={"id": "globex", "name": "Globex"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Tenant created"}

        tenants = client.get("/api/tenants").json()["tenants"]
        assert {"id": "globex", "name": "Globex"} in tenants

    def test_create_missing_field(self, client):
        response = client.post("/api/tenants", json={"id": "globex"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request body"

    def test_create_malformed_body(self, client):
        response = client.post(
            "/api/tenants",
            content="not json",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

    def test_create_duplicate_overwrites_in_memory(self, client):
        response = client.post("/api/tenants", json={"id": "acme", "name": "Acme Renamed"})
        assert response.status_code == 200
        assert response.json()["success"] is True

        tenants = client.get("/api/tenants").json()["tenants"]
        assert tenants == [{"id": "acme", "name": "Acme Renamed"}]

    def test_get_tenant(self, client):
        response = client.get("/api/tenants/acme")
        assert response.status_code == 200
        assert response.json() == {"id": "acme", "name": "Acme Corp"}

    def test_get_missing_tenant(self, client):
        response = client.get("/api/tenants/ghost")
        assert response.status_code == 404


class TestTenantRoutesStoreFailure:
    """Store failures surface as generic 500s"""

    def test_list_failure(self, failing_client):
        response = failing_client.get("/api/tenants")
        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching tenants"

    def test_create_failure(self, failing_client):
        response = failing_client.post("/api/tenants", json={"id": "acme", "name": "Acme"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Error creating tenant"

    def test_get_failure(self, failing_client):
        response = failing_client.get("/api/tenants/acme")
        assert response.status_code == 500
