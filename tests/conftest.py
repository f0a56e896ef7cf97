"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client with overridden settings
- Accounts and bearer tokens for the access policy
"""

import os

# Must be set before app modules build the engine and configure logging
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite:///:memory:")
os.environ.setdefault("JSON_LOGS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.core.config import Settings, get_settings
from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.crud import user_info as user_crud
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def test_settings():
    """Settings with a known signing key and a short token lifetime."""
    return Settings(
        JWT_ISSUER="test-issuer",
        JWT_AUDIENCE="test-audience",
        JWT_SUBJECT="test-subject",
        JWT_SECRET_KEY="test-secret-key-that-is-long-enough",
        ACCESS_TOKEN_EXPIRE_DAYS=7,
    )


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session, test_settings):
    """
    FastAPI test client with overridden database and settings dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session):
    return user_crud.create(db_session, "admin@example.com", "AdminPass123!", "Admin")


@pytest.fixture
def regular_user(db_session):
    return user_crud.create(db_session, "user@example.com", "UserPass123!", "User")


@pytest.fixture
def admin_headers(admin_user, test_settings):
    token = create_access_token(test_settings, admin_user.user_id, admin_user.email, admin_user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(regular_user, test_settings):
    token = create_access_token(test_settings, regular_user.user_id, regular_user.email, regular_user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def location(client):
    response = client.post("/api/v1/locations", json={"title": "HQ", "city": "Berlin"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def department(client):
    response = client.post("/api/v1/departments", json={"title": "Engineering"})
    assert response.status_code == 201
    return response.json()
