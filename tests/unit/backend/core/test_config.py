"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project YAML files.
Failure scenarios use tmp_path to create controlled filesystems.
"""

from unittest.mock import patch

import pytest

from notesapp.backend.core.config import (
    AppConfig,
    find_project_root,
    get_app_config,
    get_database_url,
    get_server_base_url,
    get_settings,
    load_yaml_config,
    validate_project_root,
)
from notesapp.backend.core.config_schema import DatabaseSchema, StoreSchema


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert (root / ".project_root").exists()
        assert (root / "config" / "settings").is_dir()

    def test_missing_marker(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(RuntimeError):
            find_project_root()

    def test_validate_exits_without_marker(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit):
            validate_project_root()


class TestLoadYamlConfig:
    """Tests for raw YAML loading."""

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_yaml_config("does-not-exist.yaml")

    def test_loads_application(self):
        assert load_yaml_config("application.yaml")["api_prefix"] == "/api"


class TestAppConfig:
    """Tests for the validated configuration."""

    def test_all_sections_load(self):
        config = AppConfig()

        assert config.application.api_prefix == "/api"
        assert config.database.store.backend in {"memory", "sql", "rest"}
        assert config.security.session.cookie_name == "session_token"
        assert config.security.session.redirect_path == "/"
        assert isinstance(config.features.auth_gate_enabled, bool)

    def test_cached(self):
        assert get_app_config() is get_app_config()

    def test_unknown_key_is_rejected(self, tmp_path, monkeypatch):
        """Should fail loudly on keys the schema does not know."""
        settings_dir = tmp_path / "config" / "settings"
        settings_dir.mkdir(parents=True)
        (tmp_path / ".project_root").touch()
        (settings_dir / "application.yaml").write_text("name: x\nsurprise: true\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ValueError, match="application.yaml"):
            AppConfig()

    def test_unknown_backend_is_rejected(self):
        with pytest.raises(ValueError):
            StoreSchema(
                backend="redis",
                rest={"url": "http://x", "table": "notes", "timeout": 1},
            )


class TestDerivedValues:
    """Tests for URLs built from configuration."""

    def test_server_base_url(self):
        base_url, timeout = get_server_base_url()
        server = get_app_config().application.server

        assert base_url == f"http://{server.host}:{server.port}"
        assert timeout > 0

    def test_explicit_database_url_wins(self):
        database = get_app_config().database.model_copy(
            update={"url": "sqlite+aiosqlite:///./notes.db"}
        )
        config = AppConfig()
        config._database = database

        with patch("notesapp.backend.core.config.get_app_config", return_value=config):
            assert get_database_url() == "sqlite+aiosqlite:///./notes.db"

    def test_postgres_url_from_parts(self):
        config = AppConfig()
        config._database = DatabaseSchema(
            **{**config.database.model_dump(), "url": None, "host": "db", "port": 5433,
               "name": "notes", "user": "app"}
        )

        with patch("notesapp.backend.core.config.get_app_config", return_value=config):
            url = get_database_url()

        assert url.startswith("postgresql+asyncpg://app:")
        assert url.endswith("@db:5433/notes")
