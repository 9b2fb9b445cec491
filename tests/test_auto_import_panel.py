import os
import sys
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from PySide6.QtWidgets import QApplication, QCheckBox, QComboBox, QGroupBox, QLabel

from autoimport_prefs.app_settings import AutoImportProfile
from autoimport_prefs.paste_policy import PastePolicy, UnknownPastePolicyError
from autoimport_prefs.ui.auto_import_panel import AutoImportOptionsPanel


class AutoImportOptionsPanelTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QApplication.instance() or QApplication([])

    def test_paste_policy_round_trip(self) -> None:
        panel = AutoImportOptionsPanel()
        for policy in PastePolicy:
            panel.set_paste_policy(policy)
            self.assertIs(panel.get_paste_policy(), policy)

    def test_boolean_round_trip(self) -> None:
        panel = AutoImportOptionsPanel()
        for value in (True, False, True):
            panel.set_add_unambiguous(value)
            self.assertEqual(panel.get_add_unambiguous(), value)
            panel.set_optimize_imports(value)
            self.assertEqual(panel.get_optimize_imports(), value)

    def test_toggles_are_independent(self) -> None:
        panel = AutoImportOptionsPanel()
        panel.set_add_unambiguous(True)
        panel.set_optimize_imports(False)
        self.assertEqual((panel.get_add_unambiguous(), panel.get_optimize_imports()), (True, False))

    def test_set_always_then_get(self) -> None:
        panel = AutoImportOptionsPanel()
        panel.set_paste_policy(PastePolicy.ALWAYS)
        self.assertIs(panel.get_paste_policy(), PastePolicy.ALWAYS)

    def test_default_state_yields_known_variant(self) -> None:
        panel = AutoImportOptionsPanel()
        self.assertIn(panel.get_paste_policy(), list(PastePolicy))

    def test_empty_selection_falls_back_to_never(self) -> None:
        panel = AutoImportOptionsPanel()
        panel.import_on_paste_combo.setCurrentIndex(-1)
        self.assertIs(panel.get_paste_policy(), PastePolicy.NEVER)

    def test_host_codes(self) -> None:
        panel = AutoImportOptionsPanel()
        panel.set_import_on_paste_option(3)
        self.assertIs(panel.get_paste_policy(), PastePolicy.ASK)
        panel.set_paste_policy(2)
        self.assertEqual(panel.get_import_on_paste_option(), 2)

    def test_unknown_code_raises_and_keeps_selection(self) -> None:
        panel = AutoImportOptionsPanel()
        panel.set_paste_policy(PastePolicy.ASK)
        with self.assertRaises(UnknownPastePolicyError):
            panel.set_import_on_paste_option(42)
        with self.assertRaises(UnknownPastePolicyError):
            panel.set_paste_policy("Ask")  # type: ignore[arg-type]
        self.assertIs(panel.get_paste_policy(), PastePolicy.ASK)

    def test_root_view_is_built_once(self) -> None:
        panel = AutoImportOptionsPanel("Kotlin")
        first = panel.get_root_view()
        self.assertIs(panel.get_root_view(), first)
        self.assertIsInstance(first, QGroupBox)
        self.assertEqual(first.title(), "Kotlin")

    def test_root_view_contains_controls(self) -> None:
        root = AutoImportOptionsPanel().get_root_view()
        self.assertEqual(len(root.findChildren(QComboBox)), 1)
        self.assertEqual(len(root.findChildren(QCheckBox)), 2)
        texts = [label.text() for label in root.findChildren(QLabel)]
        self.assertIn("Insert imports on paste:", texts)
        self.assertIn("To disable import popup, use Java setting", texts)

    def test_selector_lists_labels_in_order(self) -> None:
        combo = AutoImportOptionsPanel().import_on_paste_combo
        self.assertEqual([combo.itemText(i) for i in range(combo.count())], ["All", "Ask", "None"])

    def test_localized_labels_do_not_change_mapping(self) -> None:
        panel = AutoImportOptionsPanel(language="de")
        self.assertEqual(panel.import_on_paste_combo.itemText(1), "Nachfragen")
        panel.set_paste_policy(PastePolicy.NEVER)
        self.assertIs(panel.get_paste_policy(), PastePolicy.NEVER)

    def test_profile_load_and_read(self) -> None:
        panel = AutoImportOptionsPanel()
        profile = AutoImportProfile(PastePolicy.NEVER, add_unambiguous=True, optimize_imports=True)
        panel.load_profile(profile)
        self.assertEqual(panel.to_profile(), profile)


if __name__ == "__main__":
    unittest.main()
