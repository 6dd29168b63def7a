from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional

from ..exceptions import TelemetryError
from ..models import BaseEvent, ValidationReport
from .events import build_validation_event


class PolicyLogger:
    """Structured JSON logger for settings validation events."""

    def __init__(
        self,
        name: str = "label_policy",
        custom_fields: Optional[Dict[str, Any]] = None,
        log_level: str = "INFO",
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        self._logger.handlers = [handler]
        self._custom_fields = custom_fields or {}

    def emit_event(self, event: BaseEvent) -> None:
        try:
            payload = event.model_dump(mode="json")
            payload.setdefault("attributes", {})
            payload["attributes"].update(self._custom_fields)
            self._emit(payload)
        except Exception as exc:  # pragma: no cover - defensive
            raise TelemetryError(str(exc)) from exc

    def _emit(self, payload: Dict[str, Any]) -> None:
        self._logger.info(json.dumps(payload, separators=(",", ":")))

    def validation_event(self, report: ValidationReport, key_count: int, source: str = "settings") -> None:
        self.emit_event(build_validation_event(report, key_count, source))


def init_logging(config: Dict[str, Any]) -> PolicyLogger:
    return PolicyLogger(
        custom_fields=config.get("custom_fields", {}),
        log_level=config.get("log_level", "INFO"),
    )
