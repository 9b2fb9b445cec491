from __future__ import annotations

from ..i18n.messages import language_code_for
from ..logging_utils import get_logger, normalize_log_level_name
from ..paste_policy import DEFAULT_PASTE_POLICY, PastePolicy, UnknownPastePolicyError
from .defaults import DEFAULT_ACCENT_COLOR, SETTINGS_SCHEMA_VERSION, build_default_settings

LOGGER = get_logger(__name__)

# Schema 1 stored the selector text instead of the host code.
_LEGACY_PASTE_LABELS = {"all": PastePolicy.ALWAYS, "ask": PastePolicy.ASK, "none": PastePolicy.NEVER}
_LEGACY_KEYS = {
    "import_on_paste": "insert_imports_on_paste",
    "add_unambiguous_imports": "add_unambiguous_imports_on_the_fly",
    "optimize_imports": "optimize_imports_on_the_fly",
}


def coerce_bool(value, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off", ""}:
            return False
    return default


def coerce_paste_policy_code(value: object, default: int = DEFAULT_PASTE_POLICY.code) -> int:
    if isinstance(value, str):
        text = value.strip()
        legacy = _LEGACY_PASTE_LABELS.get(text.lower())
        if legacy is not None:
            return legacy.code
        if text.isdigit():
            value = int(text)
    elif isinstance(value, float) and value.is_integer():
        value = int(value)
    try:
        return PastePolicy.from_code(value).code
    except UnknownPastePolicyError:
        LOGGER.warning("Ignoring invalid insert_imports_on_paste value %r; using %s", value, default)
        return default


def _coerce_int_clamped(value: object, default: int, min_value: int, max_value: int) -> int:
    try:
        num = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        num = default
    return max(min_value, min(max_value, num))


def coerce_hex(value: object, default: str) -> str:
    text = str(value or "").strip()
    if not text:
        return default
    if not text.startswith("#"):
        text = f"#{text}"
    if len(text) not in (4, 7):
        return default
    if not all(ch in "0123456789abcdefABCDEF" for ch in text[1:]):
        return default
    return text


def migrate_settings(settings: dict) -> dict:
    current = dict(settings)
    defaults = build_default_settings()
    schema = _coerce_int_clamped(current.get("settings_schema_version", 1), 1, 1, 999)
    if schema < 2:
        for old_key, new_key in _LEGACY_KEYS.items():
            if old_key in current:
                value = current.pop(old_key)
                current.setdefault(new_key, value)

    for key, value in defaults.items():
        current.setdefault(key, value)

    current["insert_imports_on_paste"] = coerce_paste_policy_code(current.get("insert_imports_on_paste"))
    current["add_unambiguous_imports_on_the_fly"] = coerce_bool(
        current.get("add_unambiguous_imports_on_the_fly", False), False
    )
    current["optimize_imports_on_the_fly"] = coerce_bool(current.get("optimize_imports_on_the_fly", False), False)
    current["dark_mode"] = coerce_bool(current.get("dark_mode", False), False)
    current["accent_color"] = coerce_hex(current.get("accent_color"), DEFAULT_ACCENT_COLOR)
    current["language"] = language_code_for(str(current.get("language", "en") or "en"))
    current["log_level"] = normalize_log_level_name(current.get("log_level"))
    current["settings_schema_version"] = max(schema, SETTINGS_SCHEMA_VERSION)
    return current
