"""Kubernetes label/annotation key validation for policy settings."""

from ._version import __version__
from .config import load_settings, settings_from_dict
from .exceptions import (
    ConfigError,
    EmptyValuesError,
    InvalidLabelKeysError,
    LabelPolicyError,
    SettingsError,
)
from .labels import LabelKeyValidator, PolicySettings, classify_key, split_key, validate_label_keys
from .models import Criteria, ValidationReport, Violation, ViolationReason
from .telemetry import PolicyLogger, init_logging

__all__ = [
    "__version__",
    "load_settings",
    "settings_from_dict",
    "ConfigError",
    "EmptyValuesError",
    "InvalidLabelKeysError",
    "LabelPolicyError",
    "SettingsError",
    "LabelKeyValidator",
    "PolicySettings",
    "classify_key",
    "split_key",
    "validate_label_keys",
    "Criteria",
    "ValidationReport",
    "Violation",
    "ViolationReason",
    "PolicyLogger",
    "init_logging",
]
