from fastapi.testclient import TestClient
from inventory.main import app


def test_health_ok():
    with TestClient(app) as c:
        r = c.get("/health")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    data = r.json()
    assert data["success"] is True
    assert data["data"]["service"] == "Parts Inventory API"


def test_db_ping(client):
    r = client.get("/db-ping")
    assert r.status_code == 200
    assert r.json()["data"] == {"db": "ok", "select1": 1}
