# tests/test_task_router.py

from __future__ import annotations

from fastapi.testclient import TestClient

from tasktracker.presentation.app import create_app


def test_task_lifecycle(client: TestClient) -> None:
    resp = client.post("/tasks", json={"title": "Buy milk", "status": "pending"})
    assert resp.status_code == 201
    created = {"id": 1, "title": "Buy milk", "description": "", "status": "pending"}
    assert resp.json() == created

    resp = client.get("/tasks/1")
    assert resp.status_code == 200
    assert resp.json() == created

    resp = client.put("/tasks/1", json={"title": "Buy milk", "status": "completed"})
    assert resp.status_code == 200
    assert resp.json() == {
        "id": 1,
        "title": "Buy milk",
        "description": "",
        "status": "completed",
    }

    resp = client.delete("/tasks/1")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get("/tasks/1")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Task not found"}


def test_list_empty_is_array(client: TestClient) -> None:
    resp = client.get("/tasks")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_returns_all_tasks(client: TestClient) -> None:
    client.post("/tasks", json={"title": "a"})
    client.post("/tasks", json={"title": "b", "description": "bee"})

    resp = client.get("/tasks")
    assert resp.status_code == 200
    by_id = {t["id"]: t for t in resp.json()}
    assert by_id == {
        1: {"id": 1, "title": "a", "description": "", "status": ""},
        2: {"id": 2, "title": "b", "description": "bee", "status": ""},
    }


def test_create_ignores_client_id(client: TestClient) -> None:
    resp = client.post("/tasks", json={"id": 99, "title": "x"})
    assert resp.status_code == 201
    assert resp.json()["id"] == 1

    assert client.get("/tasks/99").status_code == 404


def test_update_ignores_body_id(client: TestClient) -> None:
    client.post("/tasks", json={"title": "x"})

    resp = client.put("/tasks/1", json={"id": 7, "title": "y", "status": "completed"})
    assert resp.status_code == 200
    assert resp.json()["id"] == 1
    assert client.get("/tasks/1").json()["title"] == "y"
    assert client.get("/tasks/7").status_code == 404


def test_null_fields_become_empty(client: TestClient) -> None:
    resp = client.post("/tasks", json={"title": None, "description": None})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "title": "", "description": "", "status": ""}


def test_empty_object_creates_blank_task(client: TestClient) -> None:
    resp = client.post("/tasks", json={})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "title": "", "description": "", "status": ""}


BAD_IDS = (
    "abc",
    "0",
    "-3",
    "1.5",
    "1.0",
    "1_0",
    "%201",
    "1%20",
    "0x1",
    "1e1",
    "%D9%A3",
    "99999999999999999999999",
    "9223372036854775808",
)


def test_bad_ids_are_rejected(client: TestClient) -> None:
    for _ in range(10):
        client.post("/tasks", json={"title": "x"})

    for raw in BAD_IDS:
        path = f"/tasks/{raw}"
        for resp in (
            client.get(path),
            client.put(path, json={"title": "changed"}),
            client.delete(path),
        ):
            assert resp.status_code == 400, (resp.request.method, path)
            assert resp.json() == {"detail": "Invalid task ID"}

    # none of the requests above touched the store
    tasks = client.get("/tasks").json()
    assert len(tasks) == 10
    assert all(t["title"] == "x" for t in tasks)


def test_signed_and_max_ids_are_accepted(client: TestClient) -> None:
    client.post("/tasks", json={"title": "x"})

    assert client.get("/tasks/+1").json()["id"] == 1
    assert client.get("/tasks/0001").json()["id"] == 1
    assert client.get("/tasks/9223372036854775807").status_code == 404


def test_trailing_slash_is_an_empty_id(client: TestClient) -> None:
    for method in ("GET", "PUT", "DELETE"):
        resp = client.request(method, "/tasks/", json={"title": "x"}, follow_redirects=False)
        assert resp.status_code == 400, method
        assert resp.json() == {"detail": "Invalid task ID"}

    resp = client.post("/tasks/", json={"title": "x"}, follow_redirects=False)
    assert resp.status_code == 405
    assert client.get("/tasks").json() == []


def test_bad_id_checked_before_body(client: TestClient) -> None:
    resp = client.put(
        "/tasks/abc",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid task ID"}


def test_malformed_body_is_rejected(client: TestClient) -> None:
    bodies = [
        b"{not json",
        b"[1, 2]",
        b'"just a string"',
        b'{"title": 5}',
        b"",
    ]
    for body in bodies:
        resp = client.post(
            "/tasks",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400, body
        assert resp.json() == {"detail": "Invalid request body"}

    # nothing reached the store, so the first real create still gets id 1
    assert client.post("/tasks", json={"title": "ok"}).json()["id"] == 1


def test_malformed_update_body_does_not_touch_task(client: TestClient) -> None:
    client.post("/tasks", json={"title": "keep"})

    resp = client.put(
        "/tasks/1",
        content=b"{oops",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert client.get("/tasks/1").json()["title"] == "keep"


def test_missing_task_is_not_found(client: TestClient) -> None:
    assert client.get("/tasks/5").status_code == 404
    assert client.put("/tasks/5", json={"title": "x"}).status_code == 404
    assert client.delete("/tasks/5").status_code == 404


def test_second_delete_is_not_found(client: TestClient) -> None:
    client.post("/tasks", json={"title": "x"})

    assert client.delete("/tasks/1").status_code == 204
    assert client.delete("/tasks/1").status_code == 404
    assert client.put("/tasks/1", json={"title": "y"}).status_code == 404


def test_unsupported_methods(client: TestClient) -> None:
    assert client.patch("/tasks", json={}).status_code == 405
    assert client.delete("/tasks").status_code == 405
    assert client.put("/tasks", json={}).status_code == 405
    assert client.post("/tasks/1", json={}).status_code == 405
    assert client.patch("/tasks/1", json={}).status_code == 405


def test_apps_do_not_share_state() -> None:
    with TestClient(create_app()) as first, TestClient(create_app()) as second:
        first.post("/tasks", json={"title": "only here"})

        assert len(first.get("/tasks").json()) == 1
        assert second.get("/tasks").json() == []


def test_lone_surrogate_is_replaced(client: TestClient) -> None:
    resp = client.post(
        "/tasks",
        content=b'{"title": "\\ud800", "description": "a\\udfffb", "status": "ok \\ud83d\\ude00"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 201
    assert resp.json() == {
        "id": 1,
        "title": "\ufffd",
        "description": "a\ufffdb",
        "status": "ok \U0001F600",
    }

    assert client.get("/tasks").status_code == 200
    assert client.get("/tasks/1").json()["title"] == "\ufffd"

    resp = client.put(
        "/tasks/1",
        content=b'{"title": "x\\udc00"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 200
    assert resp.json()["title"] == "x\ufffd"
    assert client.get("/tasks").status_code == 200
