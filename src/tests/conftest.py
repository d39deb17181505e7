"""Shared fixtures: an app and a storage session on in-memory SQLite."""

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.crud import TaskStorage, UserStorage
from taskboard.db.session import Database
from taskboard.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", cors_origins=["*"])


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def database():
    database = Database("sqlite://")
    database.create_tables()
    yield database
    database.close()


@pytest.fixture
def session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def user_storage(session):
    return UserStorage(session)


@pytest.fixture
def task_storage(session):
    return TaskStorage(session)


@pytest.fixture
def app_session(client, app):
    """A session on the database the running app uses, for seeding rows."""
    with app.state.database.session() as session:
        yield session
