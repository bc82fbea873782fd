"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from switchboard.config import get_settings, reload_settings
from switchboard.config.models import ClassifierConfig, CoverageConfig, PromptConfig
from switchboard.config.settings import Settings, set_toml_config


@pytest.fixture
def empty_toml() -> None:
    set_toml_config({})


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self, empty_toml: None) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "switchboard"
        assert settings.debug is False

    def test_section_defaults(self, empty_toml: None) -> None:
        """Every section has defaults."""
        settings = Settings()
        assert settings.classifier.clarification_threshold == 0.5
        assert settings.classifier.keyword_strength == 0.4
        assert settings.extraction.default_country_code == "1"
        assert settings.prompts.max_array_items == 50
        assert settings.coverage.min_accuracy == 0.8
        assert settings.coverage.min_coverage == 0.8
        assert settings.coverage.max_pattern_overlaps == 0
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.metrics.enabled is True

    def test_nested_env_override(self, empty_toml: None, env_override) -> None:
        """SWITCHBOARD_<SECTION>__<KEY> overrides nested values."""
        with env_override({"SWITCHBOARD_COVERAGE__MIN_ACCURACY": "0.95"}):
            settings = Settings()
        assert settings.coverage.min_accuracy == 0.95

    def test_toml_source_below_env(self, env_override) -> None:
        """Environment variables win over TOML values."""
        set_toml_config({"debug": False, "prompts": {"max_array_items": 5}})
        with env_override({"SWITCHBOARD_DEBUG": "true"}):
            settings = Settings()
        assert settings.debug is True
        assert settings.prompts.max_array_items == 5


class TestSectionModels:
    """Validation rules on configuration sections."""

    def test_weights_must_keep_ranking_order(self) -> None:
        """Route weight may not exceed pattern weight."""
        with pytest.raises(ValidationError, match="pattern_weight > route_weight"):
            ClassifierConfig(pattern_weight=0.3, route_weight=0.4, entity_weight=0.1)

    def test_weights_must_not_exceed_one(self) -> None:
        """Weights sum to at most 1."""
        with pytest.raises(ValidationError, match="sum to at most 1.0"):
            ClassifierConfig(pattern_weight=0.7, route_weight=0.3, entity_weight=0.2)

    def test_keyword_strength_below_phrase_strength(self) -> None:
        """A keyword hit must be weaker than a phrase hit."""
        with pytest.raises(ValidationError):
            ClassifierConfig(keyword_strength=1.0)

    def test_thresholds_are_fractions(self) -> None:
        with pytest.raises(ValidationError):
            CoverageConfig(min_accuracy=1.5)

    def test_array_cap_is_positive(self) -> None:
        with pytest.raises(ValidationError):
            PromptConfig(max_array_items=0)


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_from_toml(self, test_config_dir: Path, mock_toml_files, monkeypatch) -> None:
        """get_settings loads the TOML files."""
        mock_toml_files({"default.toml": "app_name = 'test'\n[classifier]\nclarification_threshold = 0.7"})
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("SWITCHBOARD_ENV", "nonexistent")

        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.app_name == "test"
        assert settings.classifier.clarification_threshold == 0.7

    def test_settings_cached(self, test_config_dir: Path, mock_toml_files, monkeypatch) -> None:
        """get_settings returns the cached instance."""
        mock_toml_files({"default.toml": "app_name = 'test'"})
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("SWITCHBOARD_ENV", "nonexistent")

        assert get_settings() is get_settings()

    def test_reload_reads_files_again(self, test_config_dir: Path, mock_toml_files, monkeypatch) -> None:
        """reload_settings picks up changed files."""
        mock_toml_files({"default.toml": "app_name = 'first'"})
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("SWITCHBOARD_ENV", "nonexistent")
        assert get_settings().app_name == "first"

        mock_toml_files({"default.toml": "app_name = 'second'"})
        assert reload_settings().app_name == "second"

    def test_shipped_config_loads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The repository's config/ directory is valid."""
        config_dir = Path(__file__).resolve().parents[3] / "config"
        monkeypatch.setenv("SWITCHBOARD_CONFIG_DIR", str(config_dir))
        monkeypatch.setenv("SWITCHBOARD_ENV", "development")

        settings = get_settings()
        assert settings.debug is True
        assert settings.observability.logging.format == "console"
