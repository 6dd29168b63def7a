from __future__ import annotations

import re
from re import Pattern
from typing import Iterable, Optional, Tuple

from ..constants import LABEL_KEY_REGEX, MAX_KEY_LENGTH, MAX_NAME_LENGTH, MAX_PREFIX_LENGTH
from ..exceptions import InvalidLabelKeysError
from ..models import ValidationReport, Violation, ViolationReason

LABEL_KEY_PATTERN: Pattern[str] = re.compile(LABEL_KEY_REGEX)


def _byte_len(value: str) -> int:
    return len(value.encode("utf-8", "surrogatepass"))


def split_key(key: str) -> Tuple[Optional[str], str]:
    """Split a key on its last '/' into ``(prefix, name)``.

    The prefix is ``None`` when the key has no '/' at all.
    """
    prefix, sep, name = key.rpartition("/")
    if not sep:
        return None, key
    return prefix, name


def classify_key(key: str, pattern: Pattern[str] = LABEL_KEY_PATTERN) -> Optional[Violation]:
    """Return the first defect found for ``key`` or ``None`` if it is a valid key.

    Length checks run in order prefix, name, full key; the character pattern is
    only consulted when every length check passes. Lengths are UTF-8 byte
    counts, and the pattern must match the whole key, so a trailing newline
    is rejected.
    """
    prefix, name = split_key(key)
    reason: Optional[ViolationReason] = None

    if prefix is not None:
        if _byte_len(prefix) > MAX_PREFIX_LENGTH:
            reason = ViolationReason.PREFIX_TOO_LONG
        elif _byte_len(name) > MAX_NAME_LENGTH:
            reason = ViolationReason.NAME_TOO_LONG
        elif _byte_len(key) > MAX_KEY_LENGTH:
            reason = ViolationReason.KEY_TOO_LONG
    elif _byte_len(key) > MAX_NAME_LENGTH:
        reason = ViolationReason.NAME_TOO_LONG

    if reason is None and pattern.fullmatch(key) is None:
        reason = ViolationReason.PATTERN

    if reason is None:
        return None
    return Violation(key=key, reason=reason)


def validate_label_keys(keys: Iterable[str], pattern: Pattern[str] = LABEL_KEY_PATTERN) -> ValidationReport:
    violations = []
    for key in keys:
        violation = classify_key(key, pattern)
        if violation is not None:
            violations.append(violation)
    return ValidationReport(violations=violations)


class LabelKeyValidator:
    """Checks candidate keys against the Kubernetes label/annotation key rules."""

    def __init__(self, pattern: Pattern[str] | str = LABEL_KEY_PATTERN) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def is_valid(self, key: str) -> bool:
        return classify_key(key, self.pattern) is None

    def validate(self, keys: Iterable[str]) -> ValidationReport:
        return validate_label_keys(keys, self.pattern)

    def ensure_valid(self, keys: Iterable[str]) -> None:
        report = self.validate(keys)
        if not report.ok:
            raise InvalidLabelKeysError(report)
