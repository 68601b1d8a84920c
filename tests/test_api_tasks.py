"""
End-to-end tests through the HTTP routes, backed by the fake MongoDB server.
"""

from datetime import datetime, timedelta, timezone

from bson import ObjectId


def test_empty_store_lists_no_tasks(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"tasks": []}


def test_add_task_redirects_and_lists_it(client):
    response = client.post(
        "/", data={"title": "Buy milk", "description": ""}, follow_redirects=False
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/"

    tasks = client.get("/").json()["tasks"]
    assert len(tasks) == 1
    assert tasks[0]["title"] == "Buy milk"
    assert tasks[0]["description"] == ""
    assert ObjectId.is_valid(tasks[0]["id"])
    assert tasks[0]["createdAt"].endswith("Z")


def test_redirect_is_followed_to_the_list(client):
    response = client.post("/", data={"title": "  Walk dog ", "description": " at 6 "})

    assert response.status_code == 200
    assert response.json()["tasks"][0]["title"] == "Walk dog"
    assert response.json()["tasks"][0]["description"] == "at 6"


def test_whitespace_title_is_rejected(client, server):
    response = client.post("/", data={"title": "  "}, follow_redirects=False)

    assert response.status_code == 400
    assert response.json() == {"errors": {"title": "Title is required."}}
    assert client.get("/").json() == {"tasks": []}


def test_missing_title_is_rejected(client, server):
    response = client.post("/", data={"description": "no title"}, follow_redirects=False)

    assert response.status_code == 400
    assert response.json() == {"errors": {"title": "Title is required."}}
    assert server.collections["tasks"] == []


def test_later_task_is_listed_first(client):
    client.post("/", data={"title": "A"}, follow_redirects=False)
    client.post("/", data={"title": "B"}, follow_redirects=False)

    titles = [task["title"] for task in client.get("/").json()["tasks"]]

    assert titles == ["B", "A"]


def test_task_created_a_second_later_is_listed_first(client, monkeypatch):
    start = datetime(2024, 11, 2, 16, 0, tzinfo=timezone.utc)
    ticks = iter(range(10))
    monkeypatch.setattr(
        "repositories.models.utc_now",
        lambda: start + timedelta(seconds=next(ticks)),
    )

    client.post("/", data={"title": "A"}, follow_redirects=False)
    client.post("/", data={"title": "B"}, follow_redirects=False)

    tasks = client.get("/").json()["tasks"]

    assert [task["title"] for task in tasks] == ["B", "A"]
    assert [task["createdAt"] for task in tasks] == [
        "2024-11-02T16:00:01.000Z",
        "2024-11-02T16:00:00.000Z",
    ]


def test_list_failure_returns_500(client, server):
    server.fail_queries = True

    response = client.get("/")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to load tasks."}


def test_add_failure_returns_500(client, server):
    server.fail_queries = True

    response = client.post("/", data={"title": "Buy milk"}, follow_redirects=False)

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to add task. Please try again."}


def test_unreachable_database_then_recovery(client, server):
    server.refuse_connections = 1

    assert client.get("/").status_code == 500

    response = client.get("/")
    assert response.status_code == 200
    assert server.connect_attempts == 2


def test_requests_share_one_connection(client, server):
    client.get("/")
    client.post("/", data={"title": "Buy milk"}, follow_redirects=False)
    client.get("/")

    assert server.connect_attempts == 1


def test_health_reports_database_state(client, server):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": "Task Tracker Test",
        "version": "1.0.0",
        "database": "connected",
    }

    server.refuse_connections = 1
    assert client.get("/health").json()["database"] == "disconnected"


def test_shutdown_closes_connection(settings, database, server):
    from fastapi.testclient import TestClient

    from .helpers import load_main_module

    app = load_main_module().create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        test_client.get("/")

    assert server.clients[0].closed
    assert not database.is_connected
