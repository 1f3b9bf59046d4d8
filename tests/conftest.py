import importlib
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


TEST_API_VERSION = 3


@pytest.fixture()
def app_ctx(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict:
    db_path = tmp_path / "media_folder.db"

    monkeypatch.setenv("MEDIA_FOLDER_DB", str(db_path))
    monkeypatch.setenv("API_VERSION", str(TEST_API_VERSION))
    monkeypatch.setenv("APP_VERSION", "test")

    for name in list(sys.modules.keys()):
        if name == "mediafolder" or name.startswith("mediafolder."):
            del sys.modules[name]

    main = importlib.import_module("mediafolder.main")
    deps = importlib.import_module("mediafolder.dependencies")
    yield {"app": main.app, "deps": deps, "db_path": db_path}
    deps.close_store()


@pytest.fixture()
def client(app_ctx: dict):
    with TestClient(app_ctx["app"]) as c:
        yield c


@pytest.fixture()
def service(app_ctx: dict, client):
    return app_ctx["deps"].get_folder_service()


@pytest.fixture()
def store(service):
    return service.store


@pytest.fixture()
def api() -> str:
    return f"/api/v{TEST_API_VERSION}"


@pytest.fixture()
def make_folder(service):
    from mediafolder.models import CreateFolderPayload

    def _make(name: str = "test", **fields):
        fields.setdefault(
            "configuration",
            {"createThumbnails": True, "keepAspectRatio": True, "thumbnailQuality": 80},
        )
        return service.create_folder(CreateFolderPayload(name=name, **fields))

    return _make
