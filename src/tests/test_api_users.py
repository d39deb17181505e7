"""HTTP tests for the users endpoints."""

import pytest

VALID_USER = {"id": "f001", "name": "Fulano", "email": "fulano@email.com", "password": "Fulano@123"}


def create_user(client, **overrides):
    payload = dict(VALID_USER)
    payload.update(overrides)
    return client.post("/users", json=payload)


def test_create_user(client):
    response = create_user(client)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    assert body["user"] == {"id": "f001", "name": "Fulano", "email": "fulano@email.com"}

    users = client.get("/users").json()
    assert [u["id"] for u in users] == ["f001"]


def test_password_never_returned(client):
    create_user(client)

    assert "password" not in create_user(client, id="f002", email="other@email.com").json()["user"]
    assert all("password" not in u for u in client.get("/users").json())


@pytest.mark.parametrize("password", ["fulano@123", "FULANO@123", "Fulano@abc", "Fulano1234", "Fu@1", "Fulano@123456"])
def test_create_user_weak_password(client, password):
    response = create_user(client, password=password)

    assert response.status_code == 400
    assert response.text.startswith("'password' must have between 8 and 12 characters")
    assert response.headers["content-type"].startswith("text/plain")


def test_create_user_invalid_field(client):
    response = create_user(client, name=42)

    assert response.status_code == 400
    assert response.text == "'name' must be a string"


def test_create_user_duplicate_id(client):
    assert create_user(client).status_code == 201

    response = create_user(client, email="another@email.com")
    assert response.status_code == 400
    assert response.text == "'id' already exists"


def test_create_user_duplicate_email(client):
    assert create_user(client).status_code == 201

    response = create_user(client, id="f002")
    assert response.status_code == 400
    assert response.text == "'email' already exists"


def test_create_user_body_not_an_object(client):
    response = client.post("/users", json=["f001", "Fulano"])

    assert response.status_code == 400


def test_create_user_malformed_json(client):
    response = client.post("/users", content=b"{not json", headers={"content-type": "application/json"})

    assert response.status_code == 400


def test_search_users(client):
    create_user(client)
    create_user(client, id="f002", name="Beltrana", email="b@email.com")

    assert [u["id"] for u in client.get("/users", params={"q": "belt"}).json()] == ["f002"]
    assert len(client.get("/users").json()) == 2


def test_delete_user(client):
    create_user(client)

    response = client.delete("/users/f001")
    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    assert client.get("/users").json() == []


def test_delete_user_id_must_start_with_f(client):
    response = client.delete("/users/u001")

    assert response.status_code == 400
    assert response.text == "'id' must start with the letter 'f'"


def test_delete_unknown_user(client):
    response = client.delete("/users/f404")

    assert response.status_code == 404
    assert response.text == "'id' not found"


def test_delete_user_removes_task_assignments(client):
    create_user(client)
    client.post("/tasks", json={"id": "t001", "title": "Title", "description": ""})
    assert client.post("/tasks/t001/users/f001").status_code == 201

    assert client.delete("/users/f001").status_code == 200

    tasks = client.get("/tasks/users").json()
    assert tasks[0]["id"] == "t001"
    assert tasks[0]["responsibles"] == []
