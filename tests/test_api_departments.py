"""
Tests for the departments API endpoints.

Runs the full stack (router, service, SQL repository) against an
in-memory SQLite database. Validates request validation, response
schemas, status codes and error mapping.
"""

from fastapi.testclient import TestClient

from app.domain.departments.validation import (
    DESCRIPTION_TOO_LONG_MESSAGE,
    NAME_BLANK_MESSAGE,
    NAME_TOO_LONG_MESSAGE,
)
from app.main import create_app

BASE = "/api/v1/departments"


def _create(client: TestClient, name: str, description: str | None = None):
    return client.post(BASE, json={"name": name, "description": description})


class TestCreateDepartment:
    """Tests for POST /api/v1/departments."""

    def test_created_department_returned_with_id(self, client) -> None:
        response = _create(client, "Finance", "Money")
        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        assert body["name"] == "Finance"
        assert body["description"] == "Money"
        assert response.headers["Location"].endswith(f"{BASE}/{body['id']}")

    def test_missing_description_returned_empty(self, client) -> None:
        response = client.post(BASE, json={"name": "Finance"})
        assert response.status_code == 201
        assert response.json()["description"] == ""

    def test_duplicate_name_returns_409(self, client) -> None:
        _create(client, "Finance")
        response = _create(client, "finance")
        assert response.status_code == 409
        assert response.json()["error"] == "Department already exists"
        assert len(client.get(BASE).json()) == 1

    def test_whitespace_name_returns_400(self, client) -> None:
        response = _create(client, "   ")
        assert response.status_code == 400
        assert response.json()["detail"] == "Department name cannot be null or empty."

    def test_oversized_name_returns_400(self, client) -> None:
        response = _create(client, "A" * 101)
        assert response.status_code == 400
        assert response.json()["detail"] == NAME_TOO_LONG_MESSAGE

    def test_oversized_description_returns_400(self, client) -> None:
        response = _create(client, "Finance", "x" * 501)
        assert response.status_code == 400
        assert response.json()["detail"] == DESCRIPTION_TOO_LONG_MESSAGE

    def test_fail_fast_reports_only_first_violation(self, client) -> None:
        response = _create(client, " ", "x" * 501)
        assert response.status_code == 400
        assert response.json()["detail"] == NAME_BLANK_MESSAGE
        assert "violations" not in response.json()

    def test_empty_name_rejected_by_schema(self, client) -> None:
        assert _create(client, "").status_code == 422


class TestReadDepartments:
    """Tests for the GET endpoints."""

    def test_list_is_ordered_by_name(self, client) -> None:
        for name in ("Sales", "Finance", "Legal"):
            _create(client, name)
        names = [d["name"] for d in client.get(BASE).json()]
        assert names == ["Finance", "Legal", "Sales"]

    def test_get_by_id(self, client) -> None:
        created = _create(client, "Finance").json()
        response = client.get(f"{BASE}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_id_returns_404(self, client) -> None:
        response = client.get(f"{BASE}/999")
        assert response.status_code == 404
        assert response.json()["error"] == "Department not found"

    def test_get_non_positive_id_returns_400(self, client) -> None:
        response = client.get(f"{BASE}/0")
        assert response.status_code == 400

    def test_get_by_name_ignores_case(self, client) -> None:
        created = _create(client, "Human Resources").json()
        response = client.get(f"{BASE}/by-name/human resources")
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_get_by_missing_name_returns_404(self, client) -> None:
        response = client.get(f"{BASE}/by-name/Nobody")
        assert response.status_code == 404
        assert response.json() == {
            "error": "Department not found",
            "detail": "Department with name 'Nobody' does not exist.",
        }

    def test_search(self, client) -> None:
        for name in ("Human Resources", "Human Capital", "Finance"):
            _create(client, name)
        response = client.get(f"{BASE}/search", params={"keyword": "Human"})
        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == [
            "Human Capital",
            "Human Resources",
        ]

    def test_search_requires_keyword(self, client) -> None:
        assert client.get(f"{BASE}/search").status_code == 422

    def test_search_blank_keyword_returns_400(self, client) -> None:
        response = client.get(f"{BASE}/search", params={"keyword": "  "})
        assert response.status_code == 400


class TestUpdateDepartment:
    """Tests for PUT /api/v1/departments/{id}."""

    def test_update(self, client) -> None:
        created = _create(client, "Finance").json()
        response = client.put(
            f"{BASE}/{created['id']}",
            json={"name": "Accounting", "description": "Books"},
        )
        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"],
            "name": "Accounting",
            "description": "Books",
        }

    def test_keep_own_name(self, client) -> None:
        created = _create(client, "Finance").json()
        response = client.put(
            f"{BASE}/{created['id']}", json={"name": "Finance", "description": "x"}
        )
        assert response.status_code == 200

    def test_take_other_name_returns_409(self, client) -> None:
        _create(client, "Finance")
        legal = _create(client, "Legal").json()
        response = client.put(f"{BASE}/{legal['id']}", json={"name": "FINANCE"})
        assert response.status_code == 409

    def test_missing_returns_404(self, client) -> None:
        response = client.put(f"{BASE}/42", json={"name": "Finance"})
        assert response.status_code == 404

    def test_non_positive_id_returns_400(self, client) -> None:
        response = client.put(f"{BASE}/-1", json={"name": "Finance"})
        assert response.status_code == 400


class TestDeleteDepartment:
    """Tests for DELETE /api/v1/departments/{id}."""

    def test_delete_then_get_returns_404(self, client) -> None:
        created = _create(client, "Finance").json()
        response = client.delete(f"{BASE}/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BASE}/{created['id']}").status_code == 404

    def test_delete_missing_returns_404(self, client) -> None:
        assert client.delete(f"{BASE}/42").status_code == 404

    def test_delete_non_positive_returns_400(self, client) -> None:
        assert client.delete(f"{BASE}/0").status_code == 400


class TestConfiguredBehaviour:
    """Tests for settings-driven wiring."""

    def test_memory_backend(self, make_settings) -> None:
        app = create_app(make_settings(storage_backend="memory"))
        with TestClient(app) as client:
            first = _create(client, "Finance").json()
            second = _create(client, "Legal").json()
            assert second["id"] == first["id"] + 1
            assert _create(client, "FINANCE").status_code == 409

    def test_seeded_sample_data(self, make_settings) -> None:
        app = create_app(make_settings(seed_sample_data=True))
        with TestClient(app) as client:
            names = [d["name"] for d in client.get(BASE).json()]
        assert names == ["Finance", "Human Resources", "Information Technology"]

    def test_collect_mode_reports_every_violation(self, make_settings) -> None:
        app = create_app(make_settings(validation_mode="collect"))
        with TestClient(app) as client:
            response = _create(client, " ", "x" * 501)
            assert client.get(BASE).json() == []

        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == NAME_BLANK_MESSAGE
        assert body["violations"] == [
            {"field": "name", "message": NAME_BLANK_MESSAGE},
            {"field": "description", "message": DESCRIPTION_TOO_LONG_MESSAGE},
        ]

    def test_collect_mode_on_update(self, make_settings) -> None:
        app = create_app(make_settings(validation_mode="collect"))
        with TestClient(app) as client:
            created = _create(client, "Finance").json()
            response = client.put(
                f"{BASE}/{created['id']}",
                json={"name": "A" * 101, "description": "x" * 501},
            )

        assert response.status_code == 400
        assert [v["field"] for v in response.json()["violations"]] == [
            "name",
            "description",
        ]
