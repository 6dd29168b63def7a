from __future__ import annotations

from typing import Any, Dict

from ..models import BaseEvent, EventType, ValidationReport


def build_event(event_type: EventType, attributes: Dict[str, Any] | None = None) -> BaseEvent:
    return BaseEvent(event_type=event_type, attributes=attributes or {})


def build_validation_event(report: ValidationReport, key_count: int, source: str) -> BaseEvent:
    return build_event(
        EventType.SETTINGS_VALIDATION,
        {
            "source": source,
            "status": "valid" if report.ok else "invalid",
            "key_count": key_count,
            "violations": [violation.model_dump(mode="json") for violation in report.violations],
        },
    )
