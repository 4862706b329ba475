"""API tests for the own profile and patient management."""

from sqlmodel import select

from conftest import API, auth_headers
from healthtrack.models.anthropometric import AnthropometricMeasurement
from healthtrack.models.health import HealthMetric
from healthtrack.models.performance import PerformanceMetric
from healthtrack.models.report import Report
from healthtrack.models.user import AthleteProfile, User

PATIENT = {
    "name": "Jordan Keeper",
    "email": "keeper@example.com",
    "password": "secret1",
    "gender": "male",
    "age": 27,
    "country": "BR",
    "sport": "Football",
    "position": "Goalkeeper",
}


def _create_patient(client, token: str, **overrides) -> dict:
    response = client.post(f"{API}/users/patients", headers=auth_headers(token), json={**PATIENT, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


# ======================================================================
# Profile
# ======================================================================


class TestProfile:
    def test_get_profile(self, client, athlete):
        response = client.get(f"{API}/users/profile", headers=auth_headers(athlete["access_token"]))
        assert response.status_code == 200
        assert response.json()["country"] == "ES"

    def test_athlete_partial_update(self, client, athlete):
        headers = auth_headers(athlete["access_token"])
        response = client.put(f"{API}/users/profile", headers=headers, json={
            "age": 25, "settings": {"theme": "dark", "notifications": {"push": False}},
        })
        assert response.status_code == 200
        body = response.json()
        assert body["age"] == 25
        assert body["name"] == "Alex Runner"
        assert body["settings"] == {"language": "en", "theme": "dark",
                                    "notifications": {"email": True, "push": False}}

    def test_professional_cannot_set_athlete_fields(self, client, professional):
        response = client.put(f"{API}/users/profile", headers=auth_headers(professional["access_token"]),
                              json={"name": "New Name", "gender": "male"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_UPDATE"

        profile = client.get(f"{API}/users/profile", headers=auth_headers(professional["access_token"])).json()
        assert profile["name"] == "Coach Carter"

    def test_professional_updates_name(self, client, professional):
        response = client.put(f"{API}/users/profile", headers=auth_headers(professional["access_token"]),
                              json={"name": "Coach K"})
        assert response.status_code == 200
        assert response.json()["name"] == "Coach K"

    def test_unknown_field_rejects_whole_update(self, client, athlete):
        response = client.put(f"{API}/users/profile", headers=auth_headers(athlete["access_token"]),
                              json={"name": "Hacker", "role": "professional"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_UPDATE"

        profile = client.get(f"{API}/users/profile", headers=auth_headers(athlete["access_token"])).json()
        assert profile["name"] == "Alex Runner"
        assert profile["role"] == "athlete"


# ======================================================================
# Patients
# ======================================================================


class TestPatients:
    def test_create_and_list(self, client, professional):
        token = professional["access_token"]
        created = _create_patient(client, token)
        assert created["professional_id"] == professional["user"]["id"]

        response = client.get(f"{API}/users/patients", headers=auth_headers(token))
        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"total": 1, "page": 1, "limit": 10, "pages": 1}
        assert [p["id"] for p in body["data"]] == [created["id"]]

    def test_created_patient_can_log_in(self, client, professional):
        _create_patient(client, professional["access_token"])
        response = client.post(f"{API}/auth/login", json={"email": PATIENT["email"], "password": "secret1"})
        assert response.status_code == 200
        assert response.json()["user"]["role"] == "athlete"

    def test_password_min_length(self, client, professional):
        response = client.post(f"{API}/users/patients", headers=auth_headers(professional["access_token"]),
                               json={**PATIENT, "password": "12345"})
        assert response.status_code == 400

    def test_duplicate_email(self, client, professional, athlete):
        response = client.post(f"{API}/users/patients", headers=auth_headers(professional["access_token"]),
                               json={**PATIENT, "email": "runner@example.com"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "EMAIL_IN_USE"

    def test_filters_and_pagination(self, client, professional):
        token = professional["access_token"]
        _create_patient(client, token, name="Ana Swimmer", email="ana@example.com", gender="female", sport="Swimming")
        _create_patient(client, token, name="Bea Swimmer", email="bea@example.com", gender="female", sport="Swimming")
        _create_patient(client, token, name="Carl Rower", email="carl@example.com", sport="Rowing")

        by_name = client.get(f"{API}/users/patients", params={"name": "swim"}, headers=auth_headers(token)).json()
        assert [p["name"] for p in by_name["data"]] == ["Ana Swimmer", "Bea Swimmer"]

        by_sport = client.get(f"{API}/users/patients", params={"sport": "Rowing"}, headers=auth_headers(token)).json()
        assert [p["name"] for p in by_sport["data"]] == ["Carl Rower"]

        page = client.get(f"{API}/users/patients", params={"page": 2, "limit": 2}, headers=auth_headers(token)).json()
        assert page["pagination"] == {"total": 3, "page": 2, "limit": 2, "pages": 2}
        assert len(page["data"]) == 1

    def test_limit_capped(self, client, professional):
        response = client.get(f"{API}/users/patients", params={"limit": 101},
                              headers=auth_headers(professional["access_token"]))
        assert response.status_code == 400

    def test_update_patient(self, client, professional):
        token = professional["access_token"]
        patient = _create_patient(client, token)
        response = client.put(f"{API}/users/patients/{patient['id']}", headers=auth_headers(token),
                              json={"position": "Defender", "email": "Keeper2@Example.com"})
        assert response.status_code == 200
        assert response.json()["position"] == "Defender"
        assert response.json()["email"] == "keeper2@example.com"
        assert response.json()["sport"] == "Football"

    def test_update_patient_unknown_field(self, client, professional):
        token = professional["access_token"]
        patient = _create_patient(client, token)
        response = client.put(f"{API}/users/patients/{patient['id']}", headers=auth_headers(token),
                              json={"professional_id": 99})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_UPDATE"

    def test_update_patient_to_taken_email(self, client, professional, athlete):
        token = professional["access_token"]
        patient = _create_patient(client, token)
        response = client.put(f"{API}/users/patients/{patient['id']}", headers=auth_headers(token),
                              json={"email": "runner@example.com"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "EMAIL_IN_USE"


# ======================================================================
# Cross-professional isolation
# ======================================================================


class TestIsolation:
    def test_other_professional_gets_not_found(self, client, athlete, other_professional):
        headers = auth_headers(other_professional["access_token"])
        patient_id = athlete["user"]["id"]

        for response in (
            client.get(f"{API}/users/patients/{patient_id}", headers=headers),
            client.put(f"{API}/users/patients/{patient_id}", headers=headers, json={"name": "Stolen"}),
            client.delete(f"{API}/users/patients/{patient_id}", headers=headers),
        ):
            assert response.status_code == 404
            assert response.json()["error"]["code"] == "NOT_FOUND"

        listed = client.get(f"{API}/users/patients", headers=headers).json()
        assert listed["data"] == []

    def test_missing_and_foreign_patients_look_the_same(self, client, athlete, other_professional):
        headers = auth_headers(other_professional["access_token"])
        foreign = client.get(f"{API}/users/patients/{athlete['user']['id']}", headers=headers).json()
        missing = client.get(f"{API}/users/patients/9999", headers=headers).json()
        assert foreign == missing

    def test_professional_is_not_a_patient(self, client, professional, other_professional):
        response = client.get(f"{API}/users/patients/{other_professional['user']['id']}",
                              headers=auth_headers(professional["access_token"]))
        assert response.status_code == 404


# ======================================================================
# Cascade delete
# ======================================================================


class TestDeletePatient:
    def test_cascade_keeps_reports(self, client, session, professional, athlete):
        pro_headers = auth_headers(professional["access_token"])
        patient_id = athlete["user"]["id"]

        assert client.post(f"{API}/health", headers=auth_headers(athlete["access_token"]),
                           json={"source": "garmin", "steps": 9000}).status_code == 201
        assert client.post(f"{API}/performance", headers=pro_headers,
                           json={"user_id": patient_id, "vo2max": 55}).status_code == 201
        assert client.post(f"{API}/measurements/anthropometric", headers=pro_headers,
                           json={"user_id": patient_id, "weight": 60, "height": 168}).status_code == 201
        assert client.post(f"{API}/integrations/garmin",
                           headers=auth_headers(athlete["access_token"])).status_code == 200
        report = client.post(f"{API}/reports", headers=pro_headers,
                             json={"user_id": patient_id, "type": "individual", "format": "pdf"}).json()

        response = client.delete(f"{API}/users/patients/{patient_id}", headers=pro_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Patient deleted successfully"}

        assert session.get(User, patient_id) is None
        assert session.get(AthleteProfile, patient_id) is None
        for model in (HealthMetric, PerformanceMetric, AnthropometricMeasurement):
            assert session.exec(select(model).where(model.user_id == patient_id)).all() == []

        kept = session.get(Report, report["id"])
        assert kept is not None
        assert kept.content["user"]["name"] == "Alex Runner"
        assert client.get(f"{API}/reports/{report['id']}", headers=pro_headers).status_code == 200

    def test_deleted_patients_token_no_longer_works(self, client, professional, athlete):
        client.delete(f"{API}/users/patients/{athlete['user']['id']}",
                      headers=auth_headers(professional["access_token"]))
        response = client.get(f"{API}/auth/me", headers=auth_headers(athlete["access_token"]))
        assert response.status_code == 401
