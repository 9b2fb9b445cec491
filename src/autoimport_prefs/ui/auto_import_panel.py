from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from ..app_settings.profile import AutoImportProfile
from ..i18n import message
from ..logging_utils import get_logger
from ..paste_policy import PastePolicy

LOGGER = get_logger(__name__)


class AutoImportOptionsPanel:
    """Auto-import options form for one language.

    Maps the widgets to host values: the paste-policy selector to a
    :class:`PastePolicy` and the two check boxes to plain booleans.
    The widget tree is built once in the constructor and owned by the
    root group box.
    """

    def __init__(self, language_name: str = "Scala", parent: QWidget | None = None, language: str = "en") -> None:
        self._language = language
        # Selector rows follow this order; lookups go by row, never by label text.
        self._paste_policies: tuple[PastePolicy, ...] = tuple(PastePolicy)
        self._root = self._build_ui(language_name, parent)

    def _build_ui(self, language_name: str, parent: QWidget | None) -> QGroupBox:
        root = QGroupBox(language_name, parent)
        root.setObjectName("autoImportOptionsPanel")
        layout = QVBoxLayout(root)

        paste_row = QHBoxLayout()
        self.import_on_paste_label = QLabel(message("autoimport.paste.label", self._language), root)
        self.import_on_paste_combo = QComboBox(root)
        for policy in self._paste_policies:
            self.import_on_paste_combo.addItem(policy.display_label(self._language))
        self.import_on_paste_label.setBuddy(self.import_on_paste_combo)
        paste_row.addWidget(self.import_on_paste_label)
        paste_row.addWidget(self.import_on_paste_combo)
        paste_row.addStretch(1)
        layout.addLayout(paste_row)

        self.paste_hint_label = QLabel(message("autoimport.paste.hint", self._language), root)
        layout.addWidget(self.paste_hint_label)

        self.add_unambiguous_checkbox = QCheckBox(message("autoimport.add.unambiguous", self._language), root)
        layout.addWidget(self.add_unambiguous_checkbox)
        self.optimize_imports_checkbox = QCheckBox(message("autoimport.optimize.on.fly", self._language), root)
        layout.addWidget(self.optimize_imports_checkbox)
        layout.addStretch(1)
        return root

    def get_add_unambiguous(self) -> bool:
        return self.add_unambiguous_checkbox.isChecked()

    def set_add_unambiguous(self, value: bool) -> None:
        self.add_unambiguous_checkbox.setChecked(bool(value))

    def get_optimize_imports(self) -> bool:
        return self.optimize_imports_checkbox.isChecked()

    def set_optimize_imports(self, value: bool) -> None:
        self.optimize_imports_checkbox.setChecked(bool(value))

    def get_paste_policy(self) -> PastePolicy:
        idx = self.import_on_paste_combo.currentIndex()
        if 0 <= idx < len(self._paste_policies):
            return self._paste_policies[idx]
        return PastePolicy.NEVER

    def set_paste_policy(self, policy: PastePolicy | int) -> None:
        """Select ``policy``; ints are taken as host codes.

        Raises :class:`UnknownPastePolicyError` for anything else, leaving
        the current selection as it was.
        """
        resolved = PastePolicy.from_code(policy)
        self.import_on_paste_combo.setCurrentIndex(self._paste_policies.index(resolved))
        LOGGER.debug("Paste policy set to %s", resolved.name)

    def get_import_on_paste_option(self) -> int:
        return self.get_paste_policy().code

    def set_import_on_paste_option(self, code: int) -> None:
        self.set_paste_policy(code)

    def load_profile(self, profile: AutoImportProfile) -> None:
        clean = profile.sanitized()
        self.set_paste_policy(clean.paste_policy)
        self.set_add_unambiguous(clean.add_unambiguous)
        self.set_optimize_imports(clean.optimize_imports)

    def to_profile(self) -> AutoImportProfile:
        return AutoImportProfile(
            paste_policy=self.get_paste_policy(),
            add_unambiguous=self.get_add_unambiguous(),
            optimize_imports=self.get_optimize_imports(),
        )

    def get_root_view(self) -> QWidget:
        return self._root
