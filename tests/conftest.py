import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from config import Settings
from main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret="test-secret", access_token_expire_minutes=5)


@pytest.fixture
def db():
    return AsyncMongoMockClient()["quiz_maker_test"]


@pytest.fixture
def client(settings, db):
    with TestClient(create_app(settings, db=db)) as test_client:
        yield test_client


@pytest.fixture
def sample_quiz() -> dict:
    return {
        "title": "Arithmetic",
        "questions": [
            {"question": "2+2?", "options": ["3", "4"], "correctAnswer": "4"},
            {"question": "3*3?", "options": ["6", "9", "12"], "correctAnswer": "9"},
        ],
    }


@pytest.fixture
def auth_headers(client) -> dict:
    client.post(
        "/api/users/register",
        json={"username": "alice", "email": "alice@example.com", "password": "Secret123!"},
    )
    response = client.post(
        "/api/users/login",
        json={"email": "alice@example.com", "password": "Secret123!"},
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}
