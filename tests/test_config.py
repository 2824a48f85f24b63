"""Tests for gitwok.config module."""

import pytest
import yaml

from gitwok.commit import PRESET_COMMIT_TYPES
from gitwok.config import (
    CONFIG_FILE_NAME,
    CommitConfig,
    ConfigError,
    GitwokConfig,
    config_from_dict,
    default_config_dict,
    find_config_file,
    load_config,
    save_config,
)


class TestDefaults:
    """Tests for default configuration values."""

    def test_prompt_defaults(self):
        config = CommitConfig()

        assert config.prompt.scope is True
        assert config.prompt.breaking is True
        assert config.prompt.body is True
        assert config.prompt.footers is True

    def test_type_and_scope_defaults(self):
        config = CommitConfig()

        assert config.type == PRESET_COMMIT_TYPES
        assert config.scope == []

    def test_default_config_dict(self):
        data = default_config_dict()

        assert data["gitwok"]["commit"]["type"] == PRESET_COMMIT_TYPES
        assert data["gitwok"]["commit"]["prompt"]["footers"] is True


class TestConfigFromDict:
    """Tests for config_from_dict function."""

    def test_empty(self):
        assert config_from_dict({}) == GitwokConfig()

    def test_none(self):
        assert config_from_dict(None).commit == CommitConfig()

    def test_custom_values(self):
        config = config_from_dict({
            "gitwok": {
                "commit": {
                    "type": ["feat", "fix"],
                    "scope": ["api", "cli"],
                    "prompt": {"body": False},
                }
            }
        })

        assert config.commit.type == ["feat", "fix"]
        assert config.commit.scope == ["api", "cli"]
        assert config.commit.prompt.body is False
        assert config.commit.prompt.scope is True

    def test_empty_type_falls_back_to_preset(self):
        config = config_from_dict({"gitwok": {"commit": {"type": []}}})

        assert config.commit.type == PRESET_COMMIT_TYPES

    def test_invalid_value(self):
        with pytest.raises(ConfigError):
            config_from_dict({"gitwok": {"commit": {"prompt": {"body": "maybe"}}}})

    def test_invalid_layout(self):
        with pytest.raises(ConfigError):
            config_from_dict({"gitwok": {"commit": ["fix"]}})

    @pytest.mark.parametrize("prompt", ["yes", ["body"], 3])
    def test_prompt_not_a_mapping(self, prompt):
        with pytest.raises(ConfigError, match="gitwok.commit.prompt"):
            config_from_dict({"gitwok": {"commit": {"prompt": prompt}}})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            config_from_dict(["gitwok"])

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GITWOK_COMMIT_PROMPT_FOOTERS", "false")

        config = config_from_dict({})

        assert config.commit.prompt.footers is False

    def test_env_override_invalid(self, monkeypatch):
        monkeypatch.setenv("GITWOK_COMMIT_PROMPT_BODY", "sometimes")

        with pytest.raises(ConfigError):
            config_from_dict({})


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_prefers_cwd(self, temp_dir):
        cwd = temp_dir / "repo"
        home = temp_dir / "home"
        cwd.mkdir()
        home.mkdir()
        (cwd / CONFIG_FILE_NAME).write_text("{}")
        (home / CONFIG_FILE_NAME).write_text("{}")

        assert find_config_file(cwd, home) == cwd / CONFIG_FILE_NAME

    def test_falls_back_to_home(self, temp_dir):
        cwd = temp_dir / "repo"
        home = temp_dir / "home"
        cwd.mkdir()
        home.mkdir()
        (home / CONFIG_FILE_NAME).write_text("{}")

        assert find_config_file(cwd, home) == home / CONFIG_FILE_NAME

    def test_not_found(self, temp_dir):
        assert find_config_file(temp_dir, temp_dir) is None


class TestLoadConfig:
    """Tests for load_config and save_config functions."""

    def test_explicit_file(self, temp_dir):
        config_file = temp_dir / "custom.yaml"
        config_file.write_text(yaml.dump({"gitwok": {"commit": {"scope": ["core"]}}}))

        config = load_config(config_file)

        assert config.commit.scope == ["core"]
        assert config.path == config_file

    def test_missing_explicit_file(self, temp_dir):
        with pytest.raises(ConfigError) as exc_info:
            load_config(temp_dir / "missing.yaml")

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, temp_dir):
        config_file = temp_dir / "bad.yaml"
        config_file.write_text("gitwok: [unclosed")

        with pytest.raises(ConfigError):
            load_config(config_file)

    def test_defaults_without_file(self, mocker):
        mocker.patch("gitwok.config.find_config_file", return_value=None)

        assert load_config().commit == CommitConfig()

    def test_save_roundtrip(self, temp_dir):
        config_file = temp_dir / CONFIG_FILE_NAME

        save_config(config_file, default_config_dict())

        assert load_config(config_file).commit == CommitConfig()
