"""API tests for service endpoints and the uniform error body."""

from conftest import API


class TestServiceEndpoints:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_check(self, client):
        assert client.get("/health-check").json()["status"] == "healthy"

    def test_info(self, client):
        body = client.get("/info").json()
        assert "version" in body
        assert "project name" in body


class TestErrorBody:
    def test_unknown_route(self, client):
        response = client.get(f"{API}/nowhere")
        assert response.status_code == 404
        assert response.json() == {"error": {"code": "NOT_FOUND", "message": "Not Found"}}

    def test_method_not_allowed(self, client):
        response = client.patch(f"{API}/auth/login")
        assert response.status_code == 405
        assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"

    def test_validation_error_shape(self, client):
        response = client.post(f"{API}/auth/login", json={"email": "not-an-email", "password": "x"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"][0]["field"] == "email"
        assert error["details"][0]["message"]
