from __future__ import annotations

from typing import Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import EmptyValuesError, InvalidLabelKeysError
from ..models import Criteria, ValidationReport
from .validator import LabelKeyValidator

_DEFAULT_VALIDATOR = LabelKeyValidator()


class PolicySettings(BaseModel):
    """Criteria plus the set of label keys a policy is configured with."""

    model_config = ConfigDict(extra="forbid")

    criteria: Criteria = Criteria.CONTAINS_ANY_OF
    values: Set[str] = Field(default_factory=set)

    @field_validator("values", mode="before")
    @classmethod
    def _default_values(cls, value):
        return set() if value is None else value

    def validate_settings(self, validator: LabelKeyValidator = _DEFAULT_VALIDATOR) -> ValidationReport:
        if not self.values:
            raise EmptyValuesError("values must contain at least one label key")
        return validator.validate(self.values)

    def ensure_valid(self, validator: LabelKeyValidator = _DEFAULT_VALIDATOR) -> None:
        report = self.validate_settings(validator)
        if not report.ok:
            raise InvalidLabelKeysError(report)
