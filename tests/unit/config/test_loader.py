"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from switchboard.config.loader import (
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_flat_dicts(self) -> None:
        """Flat dictionaries are merged correctly."""
        result = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self) -> None:
        """Nested tables are merged key by key."""
        base = {"classifier": {"pattern_weight": 0.6, "route_weight": 0.25}, "debug": False}
        override = {"classifier": {"route_weight": 0.3}}
        result = deep_merge(base, override)
        assert result == {"classifier": {"pattern_weight": 0.6, "route_weight": 0.3}, "debug": False}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict values in override replace base values."""
        assert deep_merge({"a": {"x": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        """Original base dictionary is not modified."""
        base = {"a": {"x": 1}}
        deep_merge(base, {"a": {"y": 2}})
        assert base == {"a": {"x": 1}}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        """Valid TOML file is loaded correctly."""
        toml_file = tmp_path / "test.toml"
        toml_file.write_text("[coverage]\nmin_accuracy = 0.9")
        assert load_toml(toml_file) == {"coverage": {"min_accuracy": 0.9}}

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Invalid TOML syntax raises error."""
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns SWITCHBOARD_ENV value when set."""
        monkeypatch.setenv("SWITCHBOARD_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults to 'development' when SWITCHBOARD_ENV not set."""
        monkeypatch.delenv("SWITCHBOARD_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Uses SWITCHBOARD_CONFIG_DIR when set."""
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir() == test_config_dir

    def test_raises_for_missing_env_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Raises error when SWITCHBOARD_CONFIG_DIR doesn't exist."""
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            get_config_dir()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(self, test_config_dir: Path, mock_toml_files, monkeypatch) -> None:
        """Loads default.toml configuration."""
        mock_toml_files({"default.toml": "app_name = 'test'\ndebug = false"})
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("SWITCHBOARD_ENV", "nonexistent")

        assert load_config() == {"app_name": "test", "debug": False}

    def test_merges_environment_config(self, test_config_dir: Path, mock_toml_files, monkeypatch) -> None:
        """Environment config overrides default config."""
        mock_toml_files({
            "default.toml": "app_name = 'test'\n[prompts]\nmax_array_items = 50",
            "staging.toml": "[prompts]\nmax_array_items = 10",
        })
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("SWITCHBOARD_ENV", "staging")

        assert load_config() == {"app_name": "test", "prompts": {"max_array_items": 10}}

    def test_missing_default_raises(self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing default.toml raises error."""
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config()
