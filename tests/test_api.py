"""
Tests for the REST endpoints.

The application runs against the per-test database session and the
in-memory search indices from conftest.
"""
import inspect
from datetime import datetime, timezone

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from hrapp.core.dependencies import get_database, get_search_provider
from hrapp.main import app
from hrapp.schemas import JobHistoryDTO


@pytest.fixture
def client(session, search_provider):
    app.dependency_overrides[get_database] = lambda: session
    app.dependency_overrides[get_search_provider] = lambda: search_provider
    yield TestClient(app)
    app.dependency_overrides.clear()


def create(client, path, **payload):
    response = client.post(f"/api/{path}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreate:

    def test_create_returns_location(self, client):
        response = client.post("/api/departments", json={"department_name": "IT"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "department_name": "IT", "location_id": None}
        assert response.headers["Location"] == "/api/departments/1"

    def test_create_with_id_is_rejected(self, client):
        response = client.post("/api/departments", json={"id": 5, "department_name": "IT"})
        assert response.status_code == 400
        assert response.json()["error"] == "BAD_REQUEST"
        assert client.get("/api/departments").json() == []

    def test_constraint_violation_is_a_client_error(self, client):
        response = client.post("/api/departments", json={"location_id": None})
        assert response.status_code == 400
        assert response.json()["error"] == "CONSTRAINT_VIOLATION"

    def test_unknown_task_reference(self, client):
        response = client.post("/api/jobs", json={"job_title": "Developer", "task_ids": [12]})
        assert response.status_code == 400
        assert response.json()["error"] == "UNKNOWN_REFERENCE"

    def test_invalid_email(self, client):
        response = client.post("/api/employees", json={"first_name": "Ann", "email": "not-an-email"})
        assert response.status_code == 422


class TestUpdate:

    def test_put(self, client):
        department = create(client, "departments", department_name="IT")
        response = client.put(
            f"/api/departments/{department['id']}",
            json={"id": department["id"], "department_name": "Engineering"},
        )
        assert response.status_code == 200
        assert response.json()["department_name"] == "Engineering"

    def test_put_without_id(self, client):
        create(client, "departments", department_name="IT")
        response = client.put("/api/departments/1", json={"department_name": "Engineering"})
        assert response.status_code == 400

    def test_put_with_mismatched_id(self, client):
        create(client, "departments", department_name="IT")
        response = client.put("/api/departments/1", json={"id": 2, "department_name": "Engineering"})
        assert response.status_code == 400

    def test_put_unknown_id(self, client):
        response = client.put("/api/departments/9", json={"id": 9, "department_name": "Engineering"})
        assert response.status_code == 404
        assert client.get("/api/departments/9").status_code == 404

    def test_patch_keeps_unset_fields(self, client):
        location = create(client, "locations", city="Paris")
        department = create(client, "departments", department_name="IT", location_id=location["id"])

        response = client.patch(
            f"/api/departments/{department['id']}",
            json={"id": department["id"], "department_name": "Ops"},
        )

        assert response.status_code == 200
        assert response.json() == {"id": department["id"], "department_name": "Ops", "location_id": location["id"]}

    def test_patch_unknown_id(self, client):
        response = client.patch("/api/departments/9", json={"id": 9, "department_name": "Ops"})
        assert response.status_code == 404


class TestReadAndDelete:

    def test_get_one(self, client):
        region = create(client, "regions", region_name="Europe")
        response = client.get(f"/api/regions/{region['id']}")
        assert response.status_code == 200
        assert response.json() == region

    def test_get_missing(self, client):
        assert client.get("/api/regions/1").status_code == 404

    def test_delete(self, client):
        region = create(client, "regions", region_name="Europe")
        response = client.delete(f"/api/regions/{region['id']}")
        assert response.status_code == 204
        assert client.get(f"/api/regions/{region['id']}").status_code == 404
        assert client.get("/api/_search/regions", params={"query": "europe"}).json() == []

    def test_list_with_filter(self, client):
        europe = create(client, "regions", region_name="Europe")
        asia = create(client, "regions", region_name="Asia")
        create(client, "countries", country_name="France", region_id=europe["id"])

        response = client.get("/api/regions", params={"filter": "country-is-null"})

        assert [region["id"] for region in response.json()] == [asia["id"]]

    def test_unknown_filter_lists_everything(self, client):
        create(client, "regions", region_name="Europe")
        response = client.get("/api/regions", params={"filter": "no-such-filter"})
        assert len(response.json()) == 1


class TestPagedEndpoints:

    @pytest.fixture
    def employees(self, client):
        return [
            create(client, "employees", first_name=name, last_name="Doe", salary=salary)
            for name, salary in (("Ann", 3000), ("Bob", 1000), ("Cid", 2000))
        ]

    def test_page_and_total_count(self, client, employees):
        response = client.get("/api/employees", params={"page": 0, "size": 2})
        assert response.status_code == 200
        assert response.headers["X-Total-Count"] == "3"
        assert [employee["first_name"] for employee in response.json()] == ["Ann", "Bob"]

    def test_sorted_page(self, client, employees):
        response = client.get("/api/employees", params={"sort": "salary,desc"})
        assert [employee["first_name"] for employee in response.json()] == ["Ann", "Cid", "Bob"]

    def test_unknown_sort_field(self, client, employees):
        response = client.get("/api/employees", params={"sort": "shoe_size,asc"})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_PAGE_REQUEST"

    def test_paged_search(self, client, employees):
        response = client.get("/api/_search/employees", params={"query": "doe", "size": 1, "page": 2})
        assert response.headers["X-Total-Count"] == "3"
        assert [employee["first_name"] for employee in response.json()] == ["Cid"]

    def test_jobs_eagerload(self, client):
        task = create(client, "tasks", title="Deploy")
        create(client, "jobs", job_title="Operator", task_ids=[task["id"]])

        response = client.get("/api/jobs", params={"eagerload": "true"})

        assert response.headers["X-Total-Count"] == "1"
        assert response.json()[0]["task_ids"] == [task["id"]]


class TestSearch:

    def test_search_mirrors_writes(self, client):
        department = create(client, "departments", department_name="Research Lab")
        assert client.get("/api/_search/departments", params={"query": "lab"}).json() == [department]

        client.put(
            f"/api/departments/{department['id']}",
            json={"id": department["id"], "department_name": "Sales"},
        )
        assert client.get("/api/_search/departments", params={"query": "lab"}).json() == []

    def test_search_requires_query(self, client):
        assert client.get("/api/_search/departments").status_code == 422


class TestInstants:

    def test_offset_is_stored_as_utc(self, client, session):
        created = create(client, "job-histories", start_date="2020-06-01T09:00:00+02:00")
        session.expire_all()

        response = client.get(f"/api/job-histories/{created['id']}")

        found = JobHistoryDTO.model_validate(response.json())
        assert found.start_date == datetime(2020, 6, 1, 7, tzinfo=timezone.utc)
        assert found == JobHistoryDTO.model_validate(created)


def test_entity_handlers_run_in_threadpool():
    endpoints = [
        route.endpoint for route in app.routes
        if isinstance(route, APIRoute) and route.path.startswith("/api/")
    ]
    assert endpoints
    assert not any(inspect.iscoroutinefunction(endpoint) for endpoint in endpoints)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
