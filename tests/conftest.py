# File: tests/conftest.py

"""
Shared fixtures.

Every test gets its own in-memory database; the app's ``get_db``
dependency is overridden to hand out sessions bound to it.
"""

import os

# Must be set before storefront reads its settings.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.core.config import get_settings
from storefront.db.init_db import init_db
from storefront.db.session import build_engine, get_db
from storefront.main import app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fresh_settings():
    """Drop the cached settings before and after a test that edits the env."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest.fixture
def registered_user(client):
    payload = {"username": "alice", "email": "alice@example.com", "password": "s3cret"}
    resp = client.post("/register", json=payload)
    assert resp.status_code == 201
    return {**payload, "id": resp.json()["newUser"]["id"]}


@pytest.fixture
def created_product(client):
    payload = {"name": "Laptop", "price": 3500, "quantity": 10, "image": "https://img.example.com/laptop.png"}
    resp = client.post("/product", json=payload)
    assert resp.status_code == 201
    return {**payload, "id": resp.json()["newProduct"]["id"]}
