from __future__ import annotations

from ..paste_policy import DEFAULT_PASTE_POLICY

SETTINGS_SCHEMA_VERSION = 2
DEFAULT_ACCENT_COLOR = "#4a90e2"


def build_default_settings() -> dict:
    return {
        "insert_imports_on_paste": DEFAULT_PASTE_POLICY.code,
        "add_unambiguous_imports_on_the_fly": False,
        "optimize_imports_on_the_fly": False,
        "dark_mode": False,
        "accent_color": DEFAULT_ACCENT_COLOR,
        "language": "en",
        "log_level": "INFO",
        "settings_schema_version": SETTINGS_SCHEMA_VERSION,
    }
