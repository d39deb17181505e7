"""HTTP tests for the tasks endpoints."""

from taskboard.crud import TaskStorage


def create_task(client, **overrides):
    payload = {"id": "t001", "title": "Title", "description": "Some description"}
    payload.update(overrides)
    return client.post("/tasks", json=payload)


def test_create_task(client):
    response = create_task(client)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Task created successfully"
    task = body["task"]
    assert task["id"] == "t001"
    assert task["title"] == "Title"
    assert task["description"] == "Some description"
    assert task["status"] == 0
    assert task["created_at"]


def test_create_task_ignores_created_at_and_status(client):
    response = create_task(client, created_at="1999-01-01 00:00:00", status=1)

    task = response.json()["task"]
    assert task["status"] == 0
    assert task["created_at"] != "1999-01-01 00:00:00"


def test_create_task_validation_order(client):
    response = client.post("/tasks", json={"id": "t1", "title": 1})

    assert response.status_code == 400
    assert response.text == "'id' must have at least 4 characters"


def test_create_task_missing_description(client):
    response = client.post("/tasks", json={"id": "t001", "title": "Title"})

    assert response.status_code == 400
    assert response.text == "'description' must be a string"


def test_create_task_duplicate_id(client):
    assert create_task(client).status_code == 201

    response = create_task(client, title="Other")
    assert response.status_code == 400
    assert response.text == "'id' already exists"


def test_search_tasks(client):
    create_task(client, id="t001", title="Write docs", description="")
    create_task(client, id="t002", title="Review", description="Long Description here")
    create_task(client, id="t003", title="Describe API", description="")
    create_task(client, id="t004", title="Deploy", description="ship it")

    found = {t["id"] for t in client.get("/tasks", params={"q": "desc"}).json()}
    assert found == {"t002", "t003"}
    assert len(client.get("/tasks").json()) == 4


def test_partial_update_keeps_omitted_fields(client, app_session):
    TaskStorage(app_session).add_task("t001", "Aa", "d")

    response = client.put("/tasks/t001", json={"title": "Bb"})

    assert response.status_code == 200
    assert response.json()["message"] == "Task updated successfully"
    task = response.json()["task"]
    assert (task["id"], task["title"], task["description"], task["status"]) == ("t001", "Bb", "d", 0)


def test_partial_update_zero_status_is_ignored(client):
    create_task(client)
    assert client.put("/tasks/t001", json={"status": 1}).json()["task"]["status"] == 1

    response = client.put("/tasks/t001", json={"status": 0})

    assert response.status_code == 200
    assert response.json()["task"]["status"] == 1


def test_partial_update_empty_string_is_ignored(client):
    create_task(client)

    task = client.put("/tasks/t001", json={"description": ""}).json()["task"]
    assert task["description"] == "Some description"


def test_partial_update_created_at(client):
    create_task(client)

    task = client.put("/tasks/t001", json={"createdAt": "2024-02-29 12:00:00"}).json()["task"]
    assert task["created_at"] == "2024-02-29 12:00:00"


def test_partial_update_changes_id(client):
    create_task(client)

    response = client.put("/tasks/t001", json={"id": "t999"})
    assert response.status_code == 200
    assert [t["id"] for t in client.get("/tasks").json()] == ["t999"]


def test_update_unknown_task(client):
    response = client.put("/tasks/t404", json={"title": "Bb"})

    assert response.status_code == 404
    assert response.text == "'id' not found"


def test_update_invalid_field_checked_before_lookup(client):
    response = client.put("/tasks/t404", json={"title": "B"})

    assert response.status_code == 400
    assert response.text == "'title' must have at least 2 characters"


def test_update_invalid_status(client):
    create_task(client)

    response = client.put("/tasks/t001", json={"status": "done"})
    assert response.status_code == 400


def test_update_rename_to_taken_id(client):
    create_task(client)
    create_task(client, id="t002")

    response = client.put("/tasks/t001", json={"id": "t002"})
    assert response.status_code == 400
    assert response.text == "'id' already exists"


def test_delete_task(client):
    create_task(client)

    response = client.delete("/tasks/t001")
    assert response.status_code == 200
    assert response.json() == {"message": "Task deleted successfully"}
    assert client.get("/tasks").json() == []


def test_delete_unknown_task(client):
    assert client.delete("/tasks/t404").status_code == 404


def assign_fixture(client):
    client.post("/users", json={"id": "f001", "name": "Fulano", "email": "f@email.com", "password": "Fulano@123"})
    create_task(client)


def test_assign_user_to_task(client):
    assign_fixture(client)

    response = client.post("/tasks/t001/users/f001")
    assert response.status_code == 201
    assert response.json() == {"message": "User assigned to task successfully"}

    tasks = client.get("/tasks/users").json()
    assert tasks[0]["responsibles"] == [{"id": "f001", "name": "Fulano", "email": "f@email.com"}]


def test_assign_user_twice(client):
    assign_fixture(client)
    client.post("/tasks/t001/users/f001")

    response = client.post("/tasks/t001/users/f001")
    assert response.status_code == 400


def test_assign_unknown_user_or_task(client):
    assign_fixture(client)

    assert client.post("/tasks/t404/users/f001").text == "'taskId' not found"
    assert client.post("/tasks/t001/users/f404").status_code == 404


def test_remove_user_from_task(client):
    assign_fixture(client)
    client.post("/tasks/t001/users/f001")

    response = client.delete("/tasks/t001/users/f001")
    assert response.status_code == 200
    assert client.get("/tasks/users").json()[0]["responsibles"] == []

    assert client.delete("/tasks/t001/users/f001").status_code == 404
