"""Shared fixtures.

The application reads its settings at import time, so the environment is
prepared before anything from ``healthtrack`` is imported.  Every test gets a
fresh in-memory SQLite database.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-access-secret"
os.environ["REFRESH_TOKEN_SECRET"] = "test-refresh-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from healthtrack.db.init_db import init_db
from healthtrack.db.session import get_db
from healthtrack.main import app

API = "/api/v1"
PASSWORD = "s3cret-pass"


# ======================================================================
# Database / client
# ======================================================================


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ======================================================================
# Helpers
# ======================================================================


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register_professional(client: TestClient, email: str = "coach@example.com", name: str = "Coach Carter") -> dict:
    response = client.post(f"{API}/auth/register", json={
        "role": "professional",
        "name": name,
        "email": email,
        "password": PASSWORD,
        "specialization": "Sports physiology",
        "license_number": "LIC-001",
        "years_of_experience": 8,
    })
    assert response.status_code == 201, response.text
    return response.json()


def register_athlete(client: TestClient, professional_id: int, email: str = "runner@example.com",
                     name: str = "Alex Runner", **overrides) -> dict:
    payload = {
        "role": "athlete",
        "name": name,
        "email": email,
        "password": PASSWORD,
        "gender": "female",
        "age": 24,
        "country": "ES",
        "sport": "Athletics",
        "position": "Sprinter",
        "professional_id": professional_id,
    }
    payload.update(overrides)
    response = client.post(f"{API}/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def professional(client):
    """Registered professional: ``{"user": ..., "access_token": ..., "refresh_token": ...}``."""
    return register_professional(client)


@pytest.fixture
def athlete(client, professional):
    """Athlete assigned to ``professional``."""
    return register_athlete(client, professional["user"]["id"])


@pytest.fixture
def other_professional(client):
    return register_professional(client, email="rival@example.com", name="Rival Coach")
