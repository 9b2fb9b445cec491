from __future__ import annotations

import json
from pathlib import Path

from ..logging_utils import get_logger
from .coercion import migrate_settings
from .defaults import build_default_settings
from .paths import get_settings_file_path

LOGGER = get_logger(__name__)


class SettingsStore:
    """JSON file holding the persisted settings dict."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else get_settings_file_path()

    def load(self) -> dict:
        defaults = build_default_settings()
        if not self.path.exists():
            LOGGER.debug("Settings file %s not found; using defaults", self.path)
            return defaults
        try:
            loaded = json.loads(self.path.read_bytes().decode("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            LOGGER.warning("Could not read settings file %s: %s", self.path, exc)
            return defaults
        if not isinstance(loaded, dict):
            LOGGER.warning("Settings file %s does not hold a JSON object; ignoring it", self.path)
            return defaults
        return migrate_settings(loaded)

    def save(self, settings: dict) -> None:
        payload = migrate_settings(dict(settings))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(json.dumps(payload, indent=2).encode("utf-8"))
        LOGGER.info("Saved settings to %s", self.path)
