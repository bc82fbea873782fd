"""Configuration loading for switchboard.

Usage:
    from switchboard.config import get_settings

    settings = get_settings()
    threshold = settings.classifier.clarification_threshold
"""

from functools import lru_cache

from switchboard.config.loader import load_config
from switchboard.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance.

    Loaded once from the TOML files plus SWITCHBOARD_* overrides and cached.
    Call `get_settings.cache_clear()` to reload.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and load configuration again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
