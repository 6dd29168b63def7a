from __future__ import annotations

DEFAULT_SETTINGS_PATH = "settings.yaml"
SETTINGS_PATH_ENV = "LABEL_SETTINGS_PATH"
ENV_PREFIX = "LABEL_POLICY_"

MAX_PREFIX_LENGTH = 253
MAX_NAME_LENGTH = 63
MAX_KEY_LENGTH = 253

# Optional DNS subdomain prefix (lowercase, digits, '-', '.') ending with '/',
# then a 1-63 char name that starts/ends alphanumeric and may contain '-', '_', '.'.
LABEL_KEY_REGEX = (
    r"^([a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*/)?"
    r"[a-zA-Z0-9]([a-zA-Z0-9_.-]{0,61}[a-zA-Z0-9])?$"
)

REPORT_HEADER = "Invalid annotation names"
