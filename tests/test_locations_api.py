"""Tests del router de ubicaciones (sobre {success, data, message})."""

import pytest

BASE = "/api/v1/locations"


class TestListLocations:
    def test_list_all(self, client):
        resp = client.get(BASE)
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Locations retrieved successfully"
        assert [loc["id"] for loc in body["data"]] == [1, 2, 3]

    def test_filter_by_species_query(self, client):
        body = client.get(BASE, params={"speciesId": 1}).json()
        assert [loc["id"] for loc in body["data"]] == [1, 3]

    def test_filter_without_matches_is_empty(self, client):
        body = client.get(BASE, params={"speciesId": 77}).json()
        assert body["success"] is True
        assert body["data"] == []

    def test_all_and_by_species_paths(self, client):
        assert len(client.get(f"{BASE}/all").json()["data"]) == 3
        assert [loc["id"] for loc in client.get(f"{BASE}/2").json()["data"]] == [2]

    def test_unexpected_error_maps_to_500(self, client, store, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("db exploded")

        monkeypatch.setattr(store, "list", boom)
        resp = client.get(BASE)
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "data": [], "message": "Failed to fetch locations"}


class TestCreateLocation:
    def test_create_scenario(self, client, valid_payload):
        resp = client.post(BASE, json=valid_payload)
        assert resp.status_code == 201
        body = resp.json()
        assert body["success"] is True
        assert body["message"] == "Location created successfully"
        assert body["data"]["id"] == 4
        assert body["data"]["locationName"] == "Test Garden"
        assert body["data"]["bloomingPeriod"] == valid_payload["bloomingPeriod"]

    def test_reversed_dates_rejected(self, client, store, valid_payload):
        valid_payload["bloomingPeriod"] = {"start": "2024-03-15", "peak": "2024-03-01", "end": "2024-04-01"}
        resp = client.post(BASE, json=valid_payload)
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["message"] == (
            "Invalid date order: start date must be before peak date, "
            "and peak date must be before end date"
        )
        assert len(store) == 3

    @pytest.mark.parametrize(
        "override, message",
        [
            ({"locationName": ""}, "Missing required fields: speciesId, locationName, coordinates, bloomingPeriod"),
            ({"coordinates": [1]}, "Coordinates must be an array of [longitude, latitude]"),
            ({"bloomingPeriod": {"start": "2024-01-01"}}, "Blooming period must include start, peak, and end dates"),
        ],
    )
    def test_validation_messages(self, client, valid_payload, override, message):
        valid_payload.update(override)
        resp = client.post(BASE, json=valid_payload)
        assert resp.status_code == 400
        assert resp.json()["message"] == message

    def test_malformed_body(self, client, store):
        resp = client.post(BASE, content=b"{not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "data": None, "message": "Invalid request body"}
        assert len(store) == 3


class TestUpdateLocation:
    def test_update_merges_fields(self, client):
        resp = client.put(BASE, json={"id": 1, "locationName": "Nguyễn Huệ Street"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Location updated successfully"
        assert body["data"]["id"] == 1
        assert body["data"]["locationName"] == "Nguyễn Huệ Street"
        assert body["data"]["coordinates"] == [106.7008, 10.7769]

    def test_update_requires_id(self, client):
        resp = client.put(BASE, json={"locationName": "x"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Location ID is required"

    def test_update_not_found(self, client):
        resp = client.put(BASE, json={"id": 99, "locationName": "x"})
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "data": None, "message": "Location not found"}

    def test_update_revalidates(self, client, store):
        resp = client.put(
            BASE,
            json={"id": 2, "bloomingPeriod": {"start": "2024-03-01", "peak": "2024-02-01", "end": "2024-04-01"}},
        )
        assert resp.status_code == 400
        assert resp.json()["message"].startswith("Invalid date order")
        assert store.get(2).bloomingPeriod.peak == "2024-02-01"

    def test_update_body_not_an_object(self, client, store):
        resp = client.put(BASE, json=[1, 2])
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "data": None, "message": "Invalid request body"}
        assert store.get(1).locationName == "Vườn hoa Nguyễn Huệ"

    def test_unexpected_error_maps_to_500(self, client, store, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("db exploded")

        monkeypatch.setattr(store, "update", boom)
        resp = client.put(BASE, json={"id": 1, "locationName": "x"})
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "data": None, "message": "Failed to update location"}


class TestDeleteLocation:
    def test_delete(self, client, store):
        resp = client.delete(BASE, params={"id": 3})
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Location deleted successfully"
        assert body["data"]["id"] == 3
        assert len(store) == 2

    def test_delete_requires_id(self, client):
        resp = client.delete(BASE)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Location ID is required"

    def test_delete_not_found(self, client, store):
        resp = client.delete(BASE, params={"id": 42})
        assert resp.status_code == 404
        assert resp.json()["message"] == "Location not found"
        assert len(store) == 3

    def test_id_not_reused_after_delete(self, client, valid_payload):
        assert client.post(BASE, json=valid_payload).json()["data"]["id"] == 4
        client.delete(BASE, params={"id": 4})
        assert client.post(BASE, json=valid_payload).json()["data"]["id"] == 5

    def test_unexpected_error_maps_to_500(self, client, store, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("db exploded")

        monkeypatch.setattr(store, "delete", boom)
        resp = client.delete(BASE, params={"id": 1})
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "data": None, "message": "Failed to delete location"}
        assert len(store) == 3
