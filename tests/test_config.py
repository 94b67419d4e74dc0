"""Settings are read from the environment first, then from an optional .env file."""

import pytest

from vendor_api.core.config import Settings

_VARS = ("MONGO_URI", "DB_NAME", "COLLECTION_NAME", "PORT", "INSERT_TIMEOUT_SECONDS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.mongo_uri is None
    assert settings.port == 8080
    assert settings.db_name == "techathon_db"
    assert settings.collection_name == "global_vectors"
    assert settings.mongo_connect_timeout_seconds == 10.0
    assert settings.insert_timeout_seconds == 5.0


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
    monkeypatch.setenv("DB_NAME", "vendors_db")
    monkeypatch.setenv("COLLECTION_NAME", "vendors")
    monkeypatch.setenv("PORT", "9090")

    settings = Settings(_env_file=None)

    assert settings.mongo_uri == "mongodb://db:27017"
    assert settings.db_name == "vendors_db"
    assert settings.collection_name == "vendors"
    assert settings.port == 9090


def test_env_file_fills_missing_values(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MONGO_URI=mongodb://from-file:27017\nCOLLECTION_NAME=file_col\n")

    settings = Settings(_env_file=env_file)

    assert settings.mongo_uri == "mongodb://from-file:27017"
    assert settings.collection_name == "file_col"


def test_process_environment_wins_over_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("MONGO_URI=mongodb://from-file:27017\n")
    monkeypatch.setenv("MONGO_URI", "mongodb://from-env:27017")

    settings = Settings(_env_file=env_file)

    assert settings.mongo_uri == "mongodb://from-env:27017"
