"""API tests for the stubbed wearable integrations."""

from conftest import API, auth_headers


class TestIntegrations:
    def test_status_lists_every_provider(self, client, athlete):
        response = client.get(f"{API}/integrations/status", headers=auth_headers(athlete["access_token"]))
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"garmin", "google_fit", "apple_health"}
        assert all(status["connected"] is False for status in body.values())

    def test_connect_marks_provider(self, client, athlete):
        headers = auth_headers(athlete["access_token"])
        response = client.post(f"{API}/integrations/google-fit", headers=headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Google Fit account connected successfully"
        assert response.json()["status"]["connected"] is True

        status = client.get(f"{API}/integrations/status", headers=headers).json()
        assert status["google_fit"]["connected"] is True
        assert status["google_fit"]["last_sync"] is not None
        assert status["garmin"]["connected"] is False

    def test_reconnect_updates_same_row(self, client, professional):
        headers = auth_headers(professional["access_token"])
        first = client.post(f"{API}/integrations/garmin", headers=headers).json()
        second = client.post(f"{API}/integrations/garmin", headers=headers).json()
        assert second["status"]["last_sync"] >= first["status"]["last_sync"]

    def test_connections_are_per_user(self, client, athlete, professional):
        client.post(f"{API}/integrations/apple-health", headers=auth_headers(athlete["access_token"]))
        status = client.get(f"{API}/integrations/status", headers=auth_headers(professional["access_token"])).json()
        assert status["apple_health"]["connected"] is False

    def test_requires_authentication(self, client):
        assert client.post(f"{API}/integrations/garmin").status_code == 401
