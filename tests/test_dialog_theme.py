import os
import sys
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from PySide6.QtWidgets import QApplication, QDialog

from autoimport_prefs.ui.dialog_theme import apply_dialog_theme, build_dialog_theme_qss


class DialogThemeQssTests(unittest.TestCase):
    def test_build_dialog_theme_qss_light_contains_accent(self) -> None:
        qss = build_dialog_theme_qss({"dark_mode": False, "accent_color": "#3366cc"})
        self.assertIn("QDialog", qss)
        self.assertIn("border-radius", qss)
        self.assertIn("#3366cc", qss)
        self.assertIn("#f5f7fb", qss)

    def test_build_dialog_theme_qss_dark_contains_panel_controls(self) -> None:
        qss = build_dialog_theme_qss({"dark_mode": True, "accent_color": "44aa88"})
        self.assertIn("#202124", qss)
        self.assertIn("#44aa88", qss)
        self.assertIn("QGroupBox::title", qss)
        self.assertIn("QComboBox QAbstractItemView", qss)
        self.assertIn("QCheckBox::indicator:checked", qss)
        self.assertIn("QDialogButtonBox > QPushButton", qss)

    def test_invalid_accent_falls_back(self) -> None:
        qss = build_dialog_theme_qss({"accent_color": "not-a-color"})
        self.assertIn("#4a90e2", qss)

    def test_apply_dialog_theme_sets_style_sheet(self) -> None:
        app = QApplication.instance() or QApplication([])
        self.assertIsNotNone(app)
        dlg = QDialog()
        apply_dialog_theme(dlg, None)
        self.assertIn("QDialog", dlg.styleSheet())


if __name__ == "__main__":
    unittest.main()
