"""Shared application settings helpers."""

from .coercion import coerce_bool, coerce_hex, coerce_paste_policy_code, migrate_settings
from .defaults import SETTINGS_SCHEMA_VERSION, build_default_settings
from .paths import get_settings_file_path
from .profile import AutoImportProfile
from .store import SettingsStore

__all__ = [
    "AutoImportProfile",
    "SETTINGS_SCHEMA_VERSION",
    "SettingsStore",
    "build_default_settings",
    "coerce_bool",
    "coerce_hex",
    "coerce_paste_policy_code",
    "get_settings_file_path",
    "migrate_settings",
]
