"""Root settings model for switchboard configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from switchboard.config.models import (
    ClassifierConfig,
    CoverageConfig,
    ExtractionConfig,
    ObservabilityConfig,
    PromptConfig,
)

# TOML values handed to the settings source by get_settings()
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the merged TOML files."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        """Return the TOML config values."""
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Resolution order, lowest to highest precedence:
    1. Model defaults
    2. config/default.toml
    3. config/{SWITCHBOARD_ENV}.toml
    4. SWITCHBOARD_* environment variables
    """

    model_config = SettingsConfigDict(
        env_prefix="SWITCHBOARD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="switchboard", description="Name used in logs")
    debug: bool = Field(default=False, description="Enable debug mode")

    classifier: ClassifierConfig = Field(
        default_factory=ClassifierConfig,
        description="Intent classifier scoring",
    )
    extraction: ExtractionConfig = Field(
        default_factory=ExtractionConfig,
        description="Entity extraction",
    )
    prompts: PromptConfig = Field(
        default_factory=PromptConfig,
        description="Prompt builder",
    )
    coverage: CoverageConfig = Field(
        default_factory=CoverageConfig,
        description="Coverage gate thresholds",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Logging and metrics",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source below constructor arguments and env vars."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
