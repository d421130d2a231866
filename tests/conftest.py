"""
Shared pytest fixtures for the task API tests.

Every test gets a fresh app with its own in-memory stores, so state never
leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from database import create_db_and_tables, create_engine_lock, create_memory_engine
from main import create_app
from stores.tasks import TaskStore
from stores.users import UserStore

TEST_SECRET = "test-secret"
SEED_PASSWORD = "password123"


@pytest.fixture
def settings():
    # Lowest bcrypt cost keeps the suite fast
    return Settings(jwt_secret=TEST_SECRET, bcrypt_rounds=4, seed_password=SEED_PASSWORD)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan, which seeds default accounts
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def engine():
    engine = create_memory_engine()
    create_db_and_tables(engine)
    return engine


@pytest.fixture
def engine_lock():
    return create_engine_lock()


@pytest.fixture
def user_store(engine, engine_lock):
    return UserStore(engine, bcrypt_rounds=4, lock=engine_lock)


@pytest.fixture
def task_store(engine, engine_lock):
    return TaskStore(engine, lock=engine_lock)


def register(client, email, password, first_name="Test", role=None):
    body = {"email": email, "password": password, "firstName": first_name}
    if role is not None:
        body["role"] = role
    return client.post("/register", json=body)


def login(client, email, password):
    """
    Log in and return a Cookie header for later requests.

    The client's own cookie jar is cleared so each request carries exactly
    the session it was given.
    """
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    token = response.cookies.get("token")
    assert token
    client.cookies.clear()
    return {"Cookie": f"token={token}"}


@pytest.fixture
def admin_headers(client):
    return login(client, "admin@test.com", SEED_PASSWORD)


@pytest.fixture
def user_headers(client):
    return login(client, "user@test.com", SEED_PASSWORD)
