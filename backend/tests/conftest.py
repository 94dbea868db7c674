from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from inventory.core.db import Database  # noqa: E402
from inventory.main import create_app  # noqa: E402


@pytest.fixture()
def database():
    db = Database("sqlite+pysqlite:///:memory:", poolclass=StaticPool)
    db.create_all()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture()
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(database):
    app = create_app(database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_category(client):
    counter = {"n": 0}

    def _make(name: str | None = None, description: str | None = None) -> dict:
        counter["n"] += 1
        r = client.post("/api/categories", json={
            "name": name or f"Category {counter['n']}",
            "description": description,
        })
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make


@pytest.fixture()
def make_part(client, make_category):
    counter = {"n": 0}

    def _make(category_id: int | None = None, **overrides) -> dict:
        counter["n"] += 1
        if category_id is None:
            category_id = make_category()["id"]
        payload = {
            "name": f"Part {counter['n']}",
            "partNumber": f"PN-{counter['n']:04d}",
            "categoryId": category_id,
            "unitPrice": 2.5,
            "initialStock": 0,
            "minimumStock": 0,
        }
        payload.update(overrides)
        r = client.post("/api/parts", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]

    return _make
