from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def config_base(tmp_path: Path) -> Path:
    """
    Temp base directory standing in for the home directory, so tests never touch real ~/.cui.
    """
    return tmp_path / "home"


@pytest.fixture
def preferences_service(config_base: Path):
    from persistence.preferences_service import create_preferences_service

    return create_preferences_service(config_base)


@pytest.fixture
def app_client(config_base: Path, monkeypatch: pytest.MonkeyPatch):
    """
    TestClient against an app whose service is bound to the temp base directory.
    Entering the client runs the lifespan (service initialization).
    """
    from fastapi.testclient import TestClient

    import app as app_module
    from persistence.preferences_service import create_preferences_service
    from settings import get_settings

    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    monkeypatch.setenv("CUI_CONFIG_BASE_DIR", str(config_base))
    application = app_module.create_app(
        settings=get_settings(),
        preferences_service=create_preferences_service(config_base),
    )
    with TestClient(application) as client:
        yield client
