from .policy import PolicySettings
from .validator import LABEL_KEY_PATTERN, LabelKeyValidator, classify_key, split_key, validate_label_keys

__all__ = [
    "PolicySettings",
    "LABEL_KEY_PATTERN",
    "LabelKeyValidator",
    "classify_key",
    "split_key",
    "validate_label_keys",
]
