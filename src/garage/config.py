# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

from garage.constants import (
    BUILD_VARIANTS,
    DEFAULT_MAX_IMAGE_FILESIZE,
    DEFAULT_SETTINGS_FILE,
    LOG_LEVELS,
)
from garage.models.runtime_config import RuntimeConfig
from garage.utils.file_utils import read_json_file, write_json_file
from garage.utils.platform import get_platform


DEFAULT_CONFIG: dict[str, Any] = {
    "build": {"variant": "default"},
    "images": {"max_file_size": DEFAULT_MAX_IMAGE_FILESIZE},
    "platform": {"override": ""},
    "logging": {"level": "INFO", "session_log": False},
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.setdefault(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a JSON object, got {type(section).__name__}")
    return section


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_env_file(env_path: Path) -> dict[str, str]:
    """Load a simple .env file (KEY=VALUE)."""
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply .env overrides to runtime config."""
    merged = deepcopy(config)
    variant = env_values.get("GARAGE_BUILD_VARIANT", "").strip().lower()
    max_size = env_values.get("GARAGE_MAX_IMAGE_FILESIZE", "").strip()
    platform_override = env_values.get("GARAGE_PLATFORM", "").strip()

    if variant:
        _section(merged, "build")["variant"] = variant
    if max_size:
        try:
            _section(merged, "images")["max_file_size"] = int(max_size)
        except ValueError as exc:
            raise ConfigError(f"GARAGE_MAX_IMAGE_FILESIZE must be an int, got {max_size!r}") from exc
    if platform_override:
        _section(merged, "platform")["override"] = platform_override
    return merged


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the utilities read."""
    config = deepcopy(config)
    variant = _section(config, "build").get("variant")
    if variant not in BUILD_VARIANTS:
        raise ConfigError("build.variant must be 'default' or 'bz'")

    max_size = _section(config, "images").get("max_file_size")
    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
        raise ConfigError("images.max_file_size must be a positive int")

    override = _section(config, "platform").get("override", "")
    if not isinstance(override, str):
        raise ConfigError("platform.override must be a string")

    logging_section = _section(config, "logging")
    if logging_section.get("level") not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}")
    if not isinstance(logging_section.get("session_log", False), bool):
        raise ConfigError("logging.session_log must be true or false")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _load_env_file(config_path.parent / ".env")
    if not config_path.exists():
        merged = _apply_env_overrides(get_default_config(), env_values)
    else:
        loaded = read_json_file(config_path)
        merged = _apply_env_overrides(_deep_merge(get_default_config(), loaded), env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    write_json_file(config_path, config)
    return config_path


def build_runtime_config(config: dict[str, Any]) -> RuntimeConfig:
    """Freeze validated settings into the config the utilities consume."""
    validate_config(config)
    override = config["platform"].get("override", "")
    return RuntimeConfig(
        platform=override or get_platform(),
        is_bz=config["build"]["variant"] == "bz",
        max_image_filesize=config["images"]["max_file_size"],
    )
