from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from demo_server.config import DEFAULT_STATIC_ROOT, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ("PORT", "HOST", "STATIC_ROOT", "LOG_LEVEL", "APP_VERSION"):
        monkeypatch.delenv(name, raising=False)
    # Keep a stray .env in the checkout from leaking in.
    monkeypatch.chdir(tmp_path)


def test_defaults():
    s = Settings()
    assert s.port == 8080
    assert s.host == "0.0.0.0"
    assert s.static_root == DEFAULT_STATIC_ROOT
    assert (DEFAULT_STATIC_ROOT / "index.html").is_file()


def test_env_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("STATIC_ROOT", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings()
    assert s.port == 9090
    assert s.static_root == tmp_path
    assert s.log_level == "debug"


def test_dotenv_file(tmp_path: Path):
    (tmp_path / ".env").write_text("PORT=8181\n")
    assert Settings().port == 8181


@pytest.mark.parametrize("port", ["0", "70000", "http"])
def test_invalid_port(monkeypatch, port):
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ValidationError):
        Settings()
