from __future__ import annotations

from PySide6.QtWidgets import QWidget

from ..app_settings import AutoImportProfile, build_default_settings
from ..i18n import message
from ..logging_utils import get_logger
from .auto_import_panel import AutoImportOptionsPanel

LOGGER = get_logger(__name__)


class AutoImportOptionsProvider:
    """Binds an :class:`AutoImportOptionsPanel` to a settings dict."""

    def __init__(self, language_name: str = "Scala", language: str = "en") -> None:
        self.language_name = language_name
        self.language = language
        self.display_name = message("autoimport.display.name", language)
        self._panel: AutoImportOptionsPanel | None = None

    @property
    def panel(self) -> AutoImportOptionsPanel | None:
        return self._panel

    def create_component(self, parent: QWidget | None = None) -> QWidget:
        if self._panel is None:
            self._panel = AutoImportOptionsPanel(self.language_name, parent, self.language)
        return self._panel.get_root_view()

    def _require_panel(self) -> AutoImportOptionsPanel:
        if self._panel is None:
            raise RuntimeError("create_component() must be called before using the provider")
        return self._panel

    def reset(self, settings: dict) -> None:
        self._require_panel().load_profile(AutoImportProfile.from_settings(settings))

    def is_modified(self, settings: dict) -> bool:
        if self._panel is None:
            return False
        return self._panel.to_profile() != AutoImportProfile.from_settings(settings)

    def apply(self, settings: dict) -> dict:
        profile = self._require_panel().to_profile()
        profile.apply_to_settings(settings)
        LOGGER.debug("Applied auto-import options: %s", profile.to_json_dict())
        return settings

    def restore_defaults(self) -> None:
        self.reset(build_default_settings())

    def dispose_component(self) -> None:
        self._panel = None
