"""Unit tests for ConfigService composition."""

import os

import pytest

from bloglist.services.infrastructure.config_svc import ConfigService


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the host: no BLOGLIST_* variables, no ./config/config.yaml."""
    for key in list(os.environ):
        if key.startswith("BLOGLIST_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("bloglist.services.infrastructure.config_svc.SYSTEM_CONFIG_PATH", str(tmp_path / "none.yaml"))


@pytest.mark.unit
class TestDefaults:
    def test_defaults_present(self):
        cfg = ConfigService().get_config()

        assert cfg["port"] == 3003
        assert cfg["arango_db"] == "bloglist"
        assert cfg["token_ttl_seconds"] == 3600
        assert cfg["bcrypt_rounds"] == 12

    def test_missing_secret_is_generated(self):
        first = ConfigService().get("secret")
        second = ConfigService().get("secret")

        assert first
        assert first != second

    def test_config_is_cached(self):
        service = ConfigService()
        assert service.get_config() is service.get_config()


@pytest.mark.unit
class TestSources:
    def test_yaml_in_working_directory(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("port: 8080\nsecret: from-yaml\n")

        service = ConfigService()

        assert service.get("port") == 8080
        assert service.get("secret") == "from-yaml"

    def test_config_path_env(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("arango_db: blogs_custom\n")
        monkeypatch.setenv("BLOGLIST_CONFIG_PATH", str(path))

        cfg = ConfigService().get_config()

        assert cfg["arango_db"] == "blogs_custom"
        assert "config_path" not in cfg

    def test_overrides_beat_yaml(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("port: 8080\n")

        assert ConfigService(overrides={"port": 9000}).get("port") == 9000

    def test_env_beats_overrides_and_is_coerced(self, monkeypatch):
        monkeypatch.setenv("BLOGLIST_PORT", "4000")
        monkeypatch.setenv("BLOGLIST_DEBUG", "true")
        monkeypatch.setenv("BLOGLIST_SECRET", "from-env")

        service = ConfigService(overrides={"port": 9000})

        assert service.get("port") == 4000
        assert service.get("debug") is True
        assert service.get("secret") == "from-env"

    def test_unreadable_yaml_is_ignored(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("port: [unclosed\n")

        assert ConfigService().get("port") == 3003

    def test_non_mapping_yaml_is_ignored(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("- just\n- a list\n")

        assert ConfigService().get("port") == 3003


@pytest.mark.unit
class TestAccess:
    def test_dotted_path_and_default(self):
        service = ConfigService(overrides={"logging": {"level": "DEBUG"}})

        assert service.get("logging.level") == "DEBUG"
        assert service.get("logging.missing", "fallback") == "fallback"
        assert service.get("port.nested", "fallback") == "fallback"

    def test_nested_overrides_are_merged(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("logging:\n  level: INFO\n  format: short\n")

        cfg = ConfigService(overrides={"logging": {"level": "DEBUG"}}).get_config()

        assert cfg["logging"] == {"level": "DEBUG", "format": "short"}

    def test_reload_picks_up_changes(self, monkeypatch):
        service = ConfigService()
        assert service.get("port") == 3003

        monkeypatch.setenv("BLOGLIST_PORT", "5000")

        assert service.get("port") == 3003
        assert service.reload()["port"] == 5000
