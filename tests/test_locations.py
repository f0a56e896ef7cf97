"""
Tests for location endpoints, including the full create/read/update flow.
"""

from app.models.location import Location


class TestLocationEndToEnd:

    def test_create_read_update_flow(self, client):
        response = client.post("/api/v1/locations", json={"title": "HQ"})
        assert response.status_code == 201
        location_id = response.json()["id"]
        assert location_id is not None

        response = client.get(f"/api/v1/locations/{location_id}")
        assert response.status_code == 200
        assert response.json()["title"] == "HQ"

        response = client.put(
            f"/api/v1/locations/{location_id}",
            json={"id": location_id + 1, "title": "Head Office"}
        )
        assert response.status_code == 400

        response = client.put(
            f"/api/v1/locations/{location_id}",
            json={"id": location_id, "title": "Head Office"}
        )
        assert response.status_code == 204

        response = client.get(f"/api/v1/locations/{location_id}")
        assert response.json()["title"] == "Head Office"


class TestLocationValidation:

    def test_create_location_missing_title(self, client, db_session):
        response = client.post("/api/v1/locations", json={"city": "Paris", "country": "France"})

        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert data["errors"]["title"] == ["Title is required"]
        assert db_session.query(Location).count() == 0

    def test_create_location_with_address(self, client):
        payload = {
            "title": "Warehouse",
            "city": "Austin",
            "state": "TX",
            "country": "USA",
            "zip": "78701"
        }
        response = client.post("/api/v1/locations", json=payload)

        assert response.status_code == 201
        data = response.json()
        for key, value in payload.items():
            assert data[key] == value
        assert response.headers["location"].endswith(f"/api/v1/locations/{data['id']}")


class TestLocationRetrieval:

    def test_get_nonexistent_location(self, client):
        response = client.get("/api/v1/locations/12345")

        assert response.status_code == 404
        assert response.json()["detail"] == "Location not found"

    def test_list_locations(self, client, location):
        client.post("/api/v1/locations", json={"title": "Branch"})

        response = client.get("/api/v1/locations")

        assert response.status_code == 200
        assert [l["title"] for l in response.json()] == ["HQ", "Branch"]


class TestLocationUpdate:

    def test_update_replaces_all_fields(self, client, location):
        """Fields left out of a PUT body are cleared"""
        response = client.put(
            f"/api/v1/locations/{location['id']}",
            json={"id": location["id"], "title": "HQ", "country": "Germany"}
        )
        assert response.status_code == 204

        data = client.get(f"/api/v1/locations/{location['id']}").json()
        assert data["country"] == "Germany"
        assert data["city"] is None

    def test_update_nonexistent_location(self, client):
        response = client.put("/api/v1/locations/77", json={"id": 77, "title": "Nowhere"})

        assert response.status_code == 404
