"""TOML configuration loader with environment layering."""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "SWITCHBOARD_CONFIG_DIR"
ENVIRONMENT_ENV = "SWITCHBOARD_ENV"


def get_config_dir() -> Path:
    """Locate the configuration directory.

    SWITCHBOARD_CONFIG_DIR wins when set. Otherwise the first `config/`
    found in the working directory or one of its five nearest parents.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    current = Path.cwd()
    for _ in range(5):
        candidate = current / "config"
        if candidate.exists():
            return candidate
        current = current.parent

    return Path("config")


def get_environment() -> str:
    """Return the active environment name (SWITCHBOARD_ENV, default 'development')."""
    return os.environ.get(ENVIRONMENT_ENV, "development")


def load_toml(file_path: Path) -> dict[str, Any]:
    """Read one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge `override` into a copy of `base`.

    Nested tables merge key by key; any other value in `override`
    replaces the one in `base`. Neither input is modified.
    """
    merged = base.copy()

    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value

    return merged


def load_config() -> dict[str, Any]:
    """Load default.toml, then overlay {SWITCHBOARD_ENV}.toml if present."""
    config_dir = get_config_dir()
    default_path = config_dir / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/default.toml or set {CONFIG_DIR_ENV}."
        )

    config = load_toml(default_path)

    env_path = config_dir / f"{get_environment()}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config
