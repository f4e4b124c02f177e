from unittest.mock import patch

BASE = "/api/tasks"


def _create(client, **body):
    response = client.post(BASE, json=body)
    assert response.status_code == 201
    return response.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_list_starts_empty(client):
    response = client.get(BASE)
    assert response.status_code == 200
    assert response.json() == []


def test_create_returns_wire_shape(client):
    task = _create(client, name="Buy milk", description="2%")

    assert set(task) == {"id", "name", "description", "isCompleted"}
    assert task["name"] == "Buy milk"
    assert task["description"] == "2%"
    assert task["isCompleted"] is False


def test_create_honours_completion_flag(client):
    task = _create(client, name="Already done", isCompleted=True)
    assert task["isCompleted"] is True


def test_create_without_name_is_a_generic_failure(client):
    response = client.post(BASE, json={"description": "no name"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to create task"}
    assert client.get(BASE).json() == []


def test_create_with_empty_name_fails(client):
    assert client.post(BASE, json={"name": ""}).status_code == 500


def test_buy_milk_lifecycle(client):
    created = _create(client, name="Buy milk", description="2%")
    assert created["isCompleted"] is False

    toggled = client.patch(f"{BASE}/{created['id']}", json={"isCompleted": True})
    assert toggled.status_code == 200
    assert toggled.json() == {
        "id": created["id"],
        "name": "Buy milk",
        "description": "2%",
        "isCompleted": True,
    }

    deleted = client.delete(f"{BASE}/{created['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Task deleted"}

    assert all(t["id"] != created["id"] for t in client.get(BASE).json())
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_get_one(client):
    created = _create(client, name="Buy milk")

    response = client.get(f"{BASE}/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_put_updates_name_and_description(client):
    created = _create(client, name="Buy milk", description="2%")

    response = client.put(f"{BASE}/{created['id']}", json={"name": "Buy bread", "description": "rye"})

    assert response.status_code == 200
    assert response.json()["name"] == "Buy bread"
    assert response.json()["description"] == "rye"
    assert response.json()["isCompleted"] is False


def test_update_blanking_name_fails(client):
    created = _create(client, name="Buy milk")

    response = client.patch(f"{BASE}/{created['id']}", json={"name": None})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to update task"}
    assert client.get(f"{BASE}/{created['id']}").json()["name"] == "Buy milk"


def test_update_unknown_id(client):
    _create(client, name="Buy milk")

    response = client.patch(f"{BASE}/missing", json={"isCompleted": True})

    assert response.status_code == 404
    assert response.json() == {"detail": "Task not found"}
    assert [t["isCompleted"] for t in client.get(BASE).json()] == [False]


def test_delete_unknown_id(client):
    _create(client, name="Buy milk")

    response = client.delete(f"{BASE}/missing")

    assert response.status_code == 404
    assert len(client.get(BASE).json()) == 1


def test_list_keeps_insertion_order(client):
    for name in ("first task", "second task", "third task"):
        _create(client, name=name)

    assert [t["name"] for t in client.get(BASE).json()] == ["first task", "second task", "third task"]


def test_store_outage_is_a_generic_failure(client):
    with patch("todo_tracker.store.find_all", side_effect=RuntimeError("store unreachable")):
        response = client.get(BASE)

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch tasks"}


def test_delete_outage_is_a_generic_failure(client):
    created = _create(client, name="Buy milk")

    with patch("todo_tracker.store.delete_by_id", side_effect=RuntimeError("store unreachable")):
        response = client.delete(f"{BASE}/{created['id']}")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to delete task"}


def test_collection_routes_accept_trailing_slash(client):
    created = client.post(f"{BASE}/", json={"name": "Buy milk"}, follow_redirects=False)
    assert created.status_code == 201

    listed = client.get(f"{BASE}/", follow_redirects=False)
    assert listed.status_code == 200
    assert [t["id"] for t in listed.json()] == [created.json()["id"]]


def test_create_outage_is_a_generic_failure(client):
    with patch("todo_tracker.store.create_task", side_effect=RuntimeError("store unreachable")):
        response = client.post(BASE, json={"name": "Buy milk"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to create task"}
