"""Tests de los routers de especies y overlays."""

from fastapi.testclient import TestClient

from bloommap.main import create_app
from bloommap.services.location_store import LocationStore
from bloommap.utils.mock_data import MOCK_LOCATIONS


class TestSpeciesRouter:
    def test_list_species(self, client):
        body = client.get("/api/v1/species/all").json()
        assert body["success"] is True
        assert len(body["data"]) == 14

    def test_read_species(self, client):
        body = client.get("/api/v1/species/48225").json()
        assert body["data"]["name"] == "California poppy"

    def test_read_species_not_found(self, client):
        resp = client.get("/api/v1/species/1")
        assert resp.status_code == 404
        assert resp.json()["success"] is False

    def test_species_with_locations(self):
        client = TestClient(create_app(store=LocationStore(MOCK_LOCATIONS)))
        body = client.get("/api/v1/species/50164/locations").json()
        assert body["data"]["species"]["scientificName"] == "Abronia villosa"
        assert [loc["id"] for loc in body["data"]["locations"]] == [1]


class TestOverlaysRouter:
    def test_list_overlays(self, client):
        body = client.get("/api/v1/overlays").json()
        assert [o["id"] for o in body["data"]] == [1, 2, 3, 4, 5, 6]

    def test_stats_recomputed_after_create(self, client):
        stats = client.get("/api/v1/overlays/stats").json()["data"]
        assert stats[0]["locationCount"] == 0

        client.post("/api/v1/locations", json={
            "speciesId": 3,
            "locationName": "Corner",
            "coordinates": [-118.44, 34.764],
            "bloomingPeriod": {"start": "2025-03-01", "peak": "2025-03-02", "end": "2025-03-03"},
        })
        stats = client.get("/api/v1/overlays/stats").json()["data"]
        assert stats[0]["locationCount"] == 1
        assert stats[0]["locations"][0]["locationName"] == "Corner"

    def test_geojson(self, client):
        body = client.get("/api/v1/overlays/geojson").json()
        assert body["type"] == "FeatureCollection"
        assert len(body["features"]) == 6

    def test_selection_summary(self):
        client = TestClient(create_app(store=LocationStore(MOCK_LOCATIONS)))
        resp = client.get("/api/v1/overlays/summary", params={"selected": [1, 3], "q": "anza"})
        data = resp.json()["data"]
        assert data["selectedIds"] == [1, 3]
        assert data["selectedCount"] == 2
        assert data["totalLocationsInSelected"] == 1
        assert [o["id"] for o in data["results"]] == [1, 4]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
