"""Unit tests for settings loading."""

from pathlib import Path

import pytest

from pos_catalog.adapters.osm_adapter import DEFAULT_OSM_BASE_URL
from pos_catalog.config import DEFAULT_DB_PATH, load_settings

_ENV_VARS = ("POS_CATALOG_DB_PATH", "POS_CATALOG_OSM_BASE_URL", "POS_CATALOG_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings.db_path == DEFAULT_DB_PATH
        assert settings.osm_base_url == DEFAULT_OSM_BASE_URL
        assert settings.log_level == "INFO"

    def test_yaml_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yml"
        config_file.write_text(
            "database:\n"
            "  path: data/catalog.db\n"
            "osm:\n"
            "  base_url: http://localhost:9000/api/0.6\n"
            "logging:\n"
            "  level: debug\n",
            encoding="utf-8",
        )

        settings = load_settings(config_file)

        assert settings.db_path == Path("data/catalog.db")
        assert settings.osm_base_url == "http://localhost:9000/api/0.6"
        assert settings.log_level == "DEBUG"

    def test_partial_yaml_keeps_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yml"
        config_file.write_text("database:\n  path: x.db\n", encoding="utf-8")

        settings = load_settings(config_file)

        assert settings.db_path == Path("x.db")
        assert settings.osm_base_url == DEFAULT_OSM_BASE_URL

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yml"
        config_file.write_text("", encoding="utf-8")

        assert load_settings(config_file).db_path == DEFAULT_DB_PATH

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "config.yml"
        config_file.write_text("database:\n  path: from_yaml.db\n", encoding="utf-8")
        monkeypatch.setenv("POS_CATALOG_DB_PATH", "from_env.db")
        monkeypatch.setenv("POS_CATALOG_LOG_LEVEL", "warning")

        settings = load_settings(config_file)

        assert settings.db_path == Path("from_env.db")
        assert settings.log_level == "WARNING"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_settings(tmp_path / "nonexistent.yml")

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(config_file)

    def test_non_mapping_section(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yml"
        config_file.write_text("osm: http://example.org\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Config section 'osm'"):
            load_settings(config_file)
