"""API tests for health, performance and anthropometric records."""

import pytest

from conftest import API, auth_headers, register_athlete, register_professional


@pytest.fixture
def pro_headers(professional):
    return auth_headers(professional["access_token"])


@pytest.fixture
def athlete_headers(athlete):
    return auth_headers(athlete["access_token"])


# ======================================================================
# Health metrics
# ======================================================================


class TestHealthMetrics:
    def test_create_with_nested_sleep(self, client, athlete, athlete_headers):
        response = client.post(f"{API}/health", headers=athlete_headers, json={
            "date": "2026-03-01T07:00:00Z",
            "source": "google_fit",
            "sleep": {"duration": 450, "quality": 82, "rem_sleep": 90},
            "resting_heart_rate": 48,
        })
        assert response.status_code == 201
        body = response.json()
        assert body["user_id"] == athlete["user"]["id"]
        assert body["sleep"]["duration"] == 450
        assert body["sleep"]["deep_sleep"] is None
        assert body["source"] == "google_fit"
        assert "professional_id" not in body

    def test_source_required(self, client, athlete_headers):
        response = client.post(f"{API}/health", headers=athlete_headers, json={"steps": 100})
        assert response.status_code == 400
        assert response.json()["error"]["details"][0]["field"] == "source"

    def test_unknown_source_rejected(self, client, athlete_headers):
        response = client.post(f"{API}/health", headers=athlete_headers, json={"source": "fitbit"})
        assert response.status_code == 400

    def test_list_filters_and_order(self, client, athlete_headers):
        for day, source in ((1, "garmin"), (2, "apple_health"), (3, "garmin")):
            client.post(f"{API}/health", headers=athlete_headers,
                        json={"date": f"2026-03-0{day}T08:00:00", "source": source, "steps": day * 1000})

        everything = client.get(f"{API}/health", headers=athlete_headers).json()
        assert [e["steps"] for e in everything["data"]] == [3000, 2000, 1000]

        garmin = client.get(f"{API}/health", params={"source": "garmin"}, headers=athlete_headers).json()
        assert garmin["pagination"]["total"] == 2

        ranged = client.get(f"{API}/health", headers=athlete_headers,
                            params={"start_date": "2026-03-02T00:00:00", "end_date": "2026-03-02T23:59:59"}).json()
        assert [e["steps"] for e in ranged["data"]] == [2000]

    def test_professional_sees_only_own_health_entries(self, client, athlete_headers, pro_headers):
        client.post(f"{API}/health", headers=athlete_headers, json={"source": "garmin", "steps": 1})
        listed = client.get(f"{API}/health", headers=pro_headers).json()
        assert listed["data"] == []

    def test_partial_update_merges_sleep(self, client, athlete_headers):
        entry = client.post(f"{API}/health", headers=athlete_headers,
                            json={"source": "garmin", "sleep": {"duration": 400, "quality": 70}}).json()
        response = client.put(f"{API}/health/{entry['id']}", headers=athlete_headers,
                              json={"sleep": {"quality": 90}, "stress": 30})
        assert response.status_code == 200
        body = response.json()
        assert body["sleep"]["duration"] == 400
        assert body["sleep"]["quality"] == 90
        assert body["stress"] == 30

    def test_other_user_cannot_touch_entry(self, client, professional, athlete_headers):
        other = register_athlete(client, professional["user"]["id"], email="other@example.com")
        entry = client.post(f"{API}/health", headers=athlete_headers, json={"source": "garmin"}).json()
        other_headers = auth_headers(other["access_token"])

        assert client.get(f"{API}/health/{entry['id']}", headers=other_headers).status_code == 404
        assert client.delete(f"{API}/health/{entry['id']}", headers=other_headers).status_code == 404

    def test_delete(self, client, athlete_headers):
        entry = client.post(f"{API}/health", headers=athlete_headers, json={"source": "garmin"}).json()
        assert client.delete(f"{API}/health/{entry['id']}", headers=athlete_headers).status_code == 204
        assert client.get(f"{API}/health/{entry['id']}", headers=athlete_headers).status_code == 404


# ======================================================================
# Performance metrics
# ======================================================================


class TestPerformanceMetrics:
    def test_scenario_stamping_and_scoping(self, client, professional, athlete, pro_headers, athlete_headers):
        rival = register_professional(client, email="q@example.com", name="Q")
        athlete_id = athlete["user"]["id"]

        created = client.post(f"{API}/performance", headers=pro_headers,
                              json={"user_id": athlete_id, "vo2max": 58.5, "sport": "Athletics"})
        assert created.status_code == 201
        record = created.json()
        assert record["professional_id"] == professional["user"]["id"]
        assert record["user_id"] == athlete_id

        mine = client.get(f"{API}/performance", headers=athlete_headers).json()
        assert [r["id"] for r in mine["data"]] == [record["id"]]

        theirs = client.get(f"{API}/performance", params={"user_id": athlete_id},
                            headers=auth_headers(rival["access_token"])).json()
        assert theirs["data"] == []
        assert theirs["pagination"]["total"] == 0

    def test_create_for_foreign_athlete(self, client, athlete, other_professional):
        response = client.post(f"{API}/performance", headers=auth_headers(other_professional["access_token"]),
                               json={"user_id": athlete["user"]["id"], "power": 300})
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "User not found or not assigned to you"

    def test_athlete_cannot_write(self, client, athlete, athlete_headers):
        response = client.post(f"{API}/performance", headers=athlete_headers,
                               json={"user_id": athlete["user"]["id"], "power": 300})
        assert response.status_code == 403

    def test_sport_filter_is_case_insensitive_substring(self, client, athlete, pro_headers):
        athlete_id = athlete["user"]["id"]
        for sport in ("Trail Running", "Cycling"):
            client.post(f"{API}/performance", headers=pro_headers, json={"user_id": athlete_id, "sport": sport})

        listed = client.get(f"{API}/performance", params={"sport": "running"}, headers=pro_headers).json()
        assert [r["sport"] for r in listed["data"]] == ["Trail Running"]

    def test_user_id_filter_narrows_professional_scope(self, client, professional, athlete, pro_headers):
        second = register_athlete(client, professional["user"]["id"], email="second@example.com")
        client.post(f"{API}/performance", headers=pro_headers, json={"user_id": athlete["user"]["id"], "speed": 20})
        client.post(f"{API}/performance", headers=pro_headers, json={"user_id": second["user"]["id"], "speed": 30})

        everything = client.get(f"{API}/performance", headers=pro_headers).json()
        assert everything["pagination"]["total"] == 2

        one = client.get(f"{API}/performance", params={"user_id": second["user"]["id"]}, headers=pro_headers).json()
        assert [r["speed"] for r in one["data"]] == [30]

    def test_update_and_delete_by_owner_only(self, client, athlete, pro_headers, other_professional):
        record = client.post(f"{API}/performance", headers=pro_headers,
                             json={"user_id": athlete["user"]["id"], "training_load": 400}).json()
        rival_headers = auth_headers(other_professional["access_token"])

        assert client.put(f"{API}/performance/{record['id']}", headers=rival_headers,
                          json={"training_load": 1}).status_code == 404
        assert client.get(f"{API}/performance/{record['id']}", headers=rival_headers).status_code == 404

        updated = client.put(f"{API}/performance/{record['id']}", headers=pro_headers, json={"notes": "easy week"})
        assert updated.status_code == 200
        assert updated.json()["training_load"] == 400
        assert updated.json()["notes"] == "easy week"

        assert client.delete(f"{API}/performance/{record['id']}", headers=rival_headers).status_code == 404
        assert client.delete(f"{API}/performance/{record['id']}", headers=pro_headers).status_code == 204

    def test_athlete_reads_single_record(self, client, athlete, pro_headers, athlete_headers):
        record = client.post(f"{API}/performance", headers=pro_headers,
                             json={"user_id": athlete["user"]["id"], "vo2max": 50}).json()
        response = client.get(f"{API}/performance/{record['id']}", headers=athlete_headers)
        assert response.status_code == 200
        assert response.json()["vo2max"] == 50


# ======================================================================
# Anthropometric measurements
# ======================================================================


class TestAnthropometric:
    def test_lean_mass_derived_on_create(self, client, athlete, pro_headers):
        response = client.post(f"{API}/measurements/anthropometric", headers=pro_headers, json={
            "user_id": athlete["user"]["id"], "weight": 80, "height": 182, "body_fat_percentage": 15,
            "skinfolds": {"triceps": 9.5}, "perimeters": {"waist": 81},
        })
        assert response.status_code == 201
        body = response.json()
        assert body["lean_mass"] == pytest.approx(68.0)
        assert body["skinfolds"]["triceps"] == 9.5
        assert body["perimeters"]["waist"] == 81

    def test_no_lean_mass_without_body_fat(self, client, athlete, pro_headers):
        body = client.post(f"{API}/measurements/anthropometric", headers=pro_headers,
                           json={"user_id": athlete["user"]["id"], "weight": 80, "height": 182}).json()
        assert body["lean_mass"] is None

    def test_weight_and_height_required(self, client, athlete, pro_headers):
        response = client.post(f"{API}/measurements/anthropometric", headers=pro_headers,
                               json={"user_id": athlete["user"]["id"], "weight": 80})
        assert response.status_code == 400

    def test_update_recomputes_lean_mass_and_merges_sites(self, client, athlete, pro_headers):
        entry = client.post(f"{API}/measurements/anthropometric", headers=pro_headers, json={
            "user_id": athlete["user"]["id"], "weight": 80, "height": 182, "body_fat_percentage": 20,
            "skinfolds": {"triceps": 10, "calf": 8},
        }).json()

        response = client.put(f"{API}/measurements/anthropometric/{entry['id']}", headers=pro_headers,
                              json={"weight": 90, "skinfolds": {"calf": 6}})
        assert response.status_code == 200
        body = response.json()
        assert body["lean_mass"] == pytest.approx(72.0)
        assert body["skinfolds"]["triceps"] == 10
        assert body["skinfolds"]["calf"] == 6

    def test_athlete_reads_own_measurements(self, client, athlete, pro_headers, athlete_headers):
        client.post(f"{API}/measurements/anthropometric", headers=pro_headers,
                    json={"user_id": athlete["user"]["id"], "weight": 70, "height": 170})
        listed = client.get(f"{API}/measurements/anthropometric", headers=athlete_headers).json()
        assert listed["pagination"]["total"] == 1

    def test_foreign_professional_cannot_read(self, client, athlete, pro_headers, other_professional):
        entry = client.post(f"{API}/measurements/anthropometric", headers=pro_headers,
                            json={"user_id": athlete["user"]["id"], "weight": 70, "height": 170}).json()
        rival_headers = auth_headers(other_professional["access_token"])
        assert client.get(f"{API}/measurements/anthropometric/{entry['id']}",
                          headers=rival_headers).status_code == 404
        listed = client.get(f"{API}/measurements/anthropometric", params={"user_id": athlete["user"]["id"]},
                            headers=rival_headers).json()
        assert listed["data"] == []

    def test_delete(self, client, athlete, pro_headers):
        entry = client.post(f"{API}/measurements/anthropometric", headers=pro_headers,
                            json={"user_id": athlete["user"]["id"], "weight": 70, "height": 170}).json()
        assert client.delete(f"{API}/measurements/anthropometric/{entry['id']}",
                             headers=pro_headers).status_code == 204
        assert client.get(f"{API}/measurements/anthropometric/{entry['id']}",
                          headers=pro_headers).status_code == 404
