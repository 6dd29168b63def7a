from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ValidationReport


class LabelPolicyError(Exception):
    """Base class for all package exceptions."""


class ConfigError(LabelPolicyError):
    """Settings file loading/parsing errors."""


class TelemetryError(LabelPolicyError):
    """Structured logging errors."""


class SettingsError(LabelPolicyError):
    """Policy settings failed validation."""


class EmptyValuesError(SettingsError):
    """The configured value set is empty."""


class InvalidLabelKeysError(SettingsError):
    """One or more configured keys are not valid label/annotation keys."""

    def __init__(self, report: "ValidationReport") -> None:
        super().__init__(report.message())
        self.report = report
