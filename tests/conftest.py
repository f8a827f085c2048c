from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from demo_server.config import Settings
from demo_server.main import create_app

INDEX_HTML = b"<!doctype html><title>root</title><p>hello</p>\n"
STYLE_CSS = b"body { color: #222; }\n"
DOCS_INDEX = b"<!doctype html><title>docs</title>\n"
LOGO_PNG = bytes(range(256))


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    """A served root with a sibling file that must never be reachable."""
    root = tmp_path / "public"
    (root / "docs").mkdir(parents=True)
    (root / "img").mkdir()
    (root / "empty").mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "style.css").write_bytes(STYLE_CSS)
    (root / "docs" / "index.html").write_bytes(DOCS_INDEX)
    (root / "img" / "logo.png").write_bytes(LOGO_PNG)
    (root / ".env").write_text("SECRET=1\n")
    (tmp_path / "secret.txt").write_text("outside the served root\n")
    return root


@pytest.fixture
def settings(static_root: Path) -> Settings:
    return Settings(static_root=static_root, port=8080)


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
