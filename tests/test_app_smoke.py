from __future__ import annotations

from fastapi.testclient import TestClient


def test_app_smoke_routes(app_client: TestClient):
    r = app_client.get("/api/preferences")
    assert r.status_code == 200
    assert r.json() == {"colorScheme": "system", "language": "en"}


def test_module_app_builds_without_touching_disk():
    import app as app_module

    service = app_module.app.state.preferences_service
    assert service.db_path.name == "preferences.json"
    assert service.is_initialized is False
