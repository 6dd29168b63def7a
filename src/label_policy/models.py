"""Shared data models for label_policy."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import REPORT_HEADER


class ViolationReason(str, Enum):
    PREFIX_TOO_LONG = "prefix too long"
    NAME_TOO_LONG = "name too long"
    KEY_TOO_LONG = "key too long"
    PATTERN = "pattern"


class Criteria(str, Enum):
    CONTAINS_ANY_OF = "containsAnyOf"
    CONTAINS_ALL_OF = "containsAllOf"
    DOES_NOT_CONTAIN_ANY_OF = "doesNotContainAnyOf"
    DOES_NOT_CONTAIN_ALL_OF = "doesNotContainAllOf"
    CONTAINS_OTHER_THAN = "containsOtherThan"
    DOES_NOT_CONTAIN_OTHER_THAN = "doesNotContainOtherThan"


class EventType(str, Enum):
    SETTINGS_VALIDATION = "settings_validation"


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    reason: ViolationReason

    def describe(self) -> str:
        if self.reason == ViolationReason.PATTERN:
            return self.key
        return f"{self.key} ({self.reason.value})"


class ValidationReport(BaseModel):
    """Violations collected over one pass of a key set, in iteration order."""

    violations: List[Violation] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def invalid_keys(self) -> List[str]:
        return [violation.key for violation in self.violations]

    def message(self) -> Optional[str]:
        if self.ok:
            return None
        return f"{REPORT_HEADER}: " + ", ".join(v.describe() for v in self.violations)


class BaseEvent(BaseModel):
    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    attributes: Dict[str, Any] = Field(default_factory=dict)
