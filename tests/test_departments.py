"""
Tests for department endpoints.

Tests cover:
- Creation and required-title validation
- Listing and retrieval
- Full replacement and id mismatch handling
"""

from app.models.department import Department


class TestDepartmentCreation:

    def test_create_department_success(self, client):
        response = client.post("/api/v1/departments", json={"title": "Engineering"})

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Engineering"
        assert isinstance(data["id"], int)
        assert response.headers["location"].endswith(f"/api/v1/departments/{data['id']}")

    def test_create_department_missing_title(self, client, db_session):
        """Missing title is rejected with a field error and nothing is stored"""
        response = client.post("/api/v1/departments", json={})

        assert response.status_code == 400
        assert response.json()["errors"]["title"] == ["Title is required"]
        assert db_session.query(Department).count() == 0

    def test_create_department_blank_title(self, client, db_session):
        response = client.post("/api/v1/departments", json={"title": "   "})

        assert response.status_code == 400
        assert "title" in response.json()["errors"]
        assert db_session.query(Department).count() == 0

    def test_long_title_accepted(self, client):
        title = "Regional Operations and Field Services " * 10

        response = client.post("/api/v1/departments", json={"title": title})

        assert response.status_code == 201
        assert response.json()["title"] == title

    def test_client_supplied_id_is_ignored(self, client):
        response = client.post("/api/v1/departments", json={"id": 42, "title": "Sales"})

        assert response.status_code == 201
        assert response.json()["id"] == 1


class TestDepartmentRetrieval:

    def test_list_departments(self, client):
        for title in ("Engineering", "Sales", "Support"):
            client.post("/api/v1/departments", json={"title": title})

        response = client.get("/api/v1/departments")

        assert response.status_code == 200
        assert [d["title"] for d in response.json()] == ["Engineering", "Sales", "Support"]

    def test_list_departments_empty(self, client):
        response = client.get("/api/v1/departments")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_department_by_id(self, client, department):
        response = client.get(f"/api/v1/departments/{department['id']}")

        assert response.status_code == 200
        assert response.json() == department

    def test_get_nonexistent_department(self, client):
        response = client.get("/api/v1/departments/99999")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()


class TestDepartmentUpdate:

    def test_update_department(self, client, department):
        response = client.put(
            f"/api/v1/departments/{department['id']}",
            json={"id": department["id"], "title": "Platform Engineering"}
        )

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/v1/departments/{department['id']}").json()["title"] == "Platform Engineering"

    def test_update_id_mismatch(self, client, department, db_session):
        """Path id and body id must agree; storage is left alone otherwise"""
        response = client.put(
            f"/api/v1/departments/{department['id']}",
            json={"id": department["id"] + 1, "title": "Renamed"}
        )

        assert response.status_code == 400
        db_session.expire_all()
        assert db_session.get(Department, department["id"]).title == "Engineering"

    def test_update_nonexistent_department(self, client):
        response = client.put("/api/v1/departments/500", json={"id": 500, "title": "Ghost"})

        assert response.status_code == 404

    def test_update_missing_title(self, client, department):
        response = client.put(
            f"/api/v1/departments/{department['id']}",
            json={"id": department["id"]}
        )

        assert response.status_code == 400
        assert response.json()["errors"]["title"] == ["Title is required"]
