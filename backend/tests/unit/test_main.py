import pytest
from fastapi.testclient import TestClient

import app.main
from app.config import Config


@pytest.fixture
def startup_calls(monkeypatch):
    """起動時の init_db と既定プラットフォームの投入を記録する"""
    calls = []
    monkeypatch.setattr(app.main, "init_db", lambda: calls.append("init_db"))
    monkeypatch.setattr(app.main, "seed_default_platforms", lambda: calls.append("seed"))
    monkeypatch.delenv("SEED_DEFAULT_PLATFORMS", raising=False)
    return calls


def _use_config(monkeypatch, path):
    config = Config(str(path))
    config.clear_cache()
    monkeypatch.setattr(app.main, "config", config)
    return config


def test_config_file_disables_seeding(startup_calls, monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("platforms:\n  seed_defaults: false\n")
    config = _use_config(monkeypatch, config_file)

    try:
        with TestClient(app.main.app):
            pass
    finally:
        config.clear_cache()

    assert startup_calls == ["init_db"]

def test_config_file_enables_seeding(startup_calls, monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("platforms:\n  seed_defaults: true\n")
    config = _use_config(monkeypatch, config_file)

    try:
        with TestClient(app.main.app):
            pass
    finally:
        config.clear_cache()

    assert startup_calls == ["init_db", "seed"]

def test_env_overrides_config_file(startup_calls, monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("platforms:\n  seed_defaults: true\n")
    monkeypatch.setenv("SEED_DEFAULT_PLATFORMS", "false")
    config = _use_config(monkeypatch, config_file)

    try:
        with TestClient(app.main.app):
            pass
    finally:
        config.clear_cache()

    assert startup_calls == ["init_db"]
