from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .constants import DEFAULT_SETTINGS_PATH, ENV_PREFIX, SETTINGS_PATH_ENV
from .exceptions import ConfigError
from .labels.policy import PolicySettings


def _apply_env_overrides(data: Dict[str, Any], prefix: str) -> Dict[str, Any]:
    """Apply LABEL_POLICY_* overrides for known settings fields."""

    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        field = key[len(prefix) :].lower()
        if field not in PolicySettings.model_fields:
            continue
        data[field] = _coerce_value(field, value)
    return data


def _coerce_value(field: str, value: str) -> Any:
    if field == "values":
        return [item.strip() for item in value.split(",") if item.strip()]
    return value.strip()


def settings_from_dict(data: Dict[str, Any]) -> PolicySettings:
    try:
        return PolicySettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def load_settings(path: Optional[str | Path] = None, env_prefix: str = ENV_PREFIX) -> PolicySettings:
    settings_path = Path(path or os.getenv(SETTINGS_PATH_ENV) or DEFAULT_SETTINGS_PATH)
    if not settings_path.exists():
        raise ConfigError(f"Settings file not found: {settings_path}")

    try:
        text = settings_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read settings: {exc}") from exc

    try:
        raw_data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse settings: {exc}") from exc

    if not isinstance(raw_data, dict):
        raise ConfigError(f"{settings_path.name} must be a YAML mapping")

    data = _apply_env_overrides(raw_data, env_prefix)
    return settings_from_dict(data)
