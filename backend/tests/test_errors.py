import logging

from fastapi.testclient import TestClient

from inventory.main import create_app
from inventory.routers.parts import get_part_service


class BrokenPartService:
    def list_parts(self):
        raise RuntimeError("db password is hunter2")


def test_unhandled_error_is_500_with_generic_envelope(database, caplog):
    app = create_app(database=database)
    app.dependency_overrides[get_part_service] = lambda: BrokenPartService()

    with caplog.at_level(logging.ERROR, logger="inventory"):
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/api/parts")

    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Internal server error"}
    assert "hunter2" not in r.text
    assert any("GET /api/parts" in rec.getMessage() for rec in caplog.records)


def test_not_found_route_uses_envelope(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json()["success"] is False
