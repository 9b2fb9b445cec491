from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHBoxLayout,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..app_settings import migrate_settings
from ..i18n import message
from ..logging_utils import get_logger
from .dialog_theme import apply_dialog_theme
from .options_provider import AutoImportOptionsProvider

LOGGER = get_logger(__name__)


class SettingsDialog(QDialog):
    def __init__(self, parent: QWidget | None, settings: dict, language_name: str = "Scala") -> None:
        super().__init__(parent)
        self._settings = migrate_settings(dict(settings))
        self._language = str(self._settings.get("language", "en"))
        self.setWindowTitle(message("dialog.title", self._language))
        self.resize(520, 260)

        root = QVBoxLayout(self)
        self.provider = AutoImportOptionsProvider(language_name, self._language)
        root.addWidget(self.provider.create_component(self), 1)
        self.panel = self.provider.panel

        buttons_row = QHBoxLayout()
        self.restore_defaults_btn = QPushButton(message("dialog.restore.defaults", self._language), self)
        self.restore_defaults_btn.clicked.connect(self._reset_controls_to_defaults)
        buttons_row.addWidget(self.restore_defaults_btn)
        buttons_row.addStretch(1)

        self.apply_btn = QPushButton(message("dialog.apply", self._language), self)
        self.apply_btn.clicked.connect(self._apply_to_memory)
        buttons_row.addWidget(self.apply_btn)

        self.button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel, self
        )
        self.button_box.accepted.connect(self._accept_with_apply)
        self.button_box.rejected.connect(self.reject)
        buttons_row.addWidget(self.button_box)
        root.addLayout(buttons_row)

        self.provider.reset(self._settings)
        self.panel.import_on_paste_combo.currentIndexChanged.connect(lambda _idx: self._refresh_apply_enabled())
        self.panel.add_unambiguous_checkbox.toggled.connect(lambda _checked: self._refresh_apply_enabled())
        self.panel.optimize_imports_checkbox.toggled.connect(lambda _checked: self._refresh_apply_enabled())
        self._refresh_apply_enabled()
        apply_dialog_theme(self, self._settings)

    def _refresh_apply_enabled(self) -> None:
        self.apply_btn.setEnabled(self.is_modified())

    def is_modified(self) -> bool:
        return self.provider.is_modified(self._settings)

    def _apply_to_memory(self) -> None:
        self._settings = migrate_settings(self.provider.apply(dict(self._settings)))
        LOGGER.info("Preferences applied")
        self._refresh_apply_enabled()

    def _accept_with_apply(self) -> None:
        self._apply_to_memory()
        self.accept()

    def _reset_controls_to_defaults(self) -> None:
        confirm = QMessageBox.question(
            self,
            message("dialog.restore.defaults", self._language),
            message("dialog.restore.defaults.confirm", self._language),
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if confirm != QMessageBox.StandardButton.Yes:
            return
        self.provider.restore_defaults()

    def get_settings(self) -> dict:
        return dict(self._settings)
