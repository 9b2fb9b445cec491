import argparse
import json
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QDialog, QMessageBox

from .app_settings import SettingsStore
from .i18n import message
from .logging_utils import LOG_LEVEL_OPTIONS, configure_app_logging, get_logger
from .ui.settings_dialog import SettingsDialog

LOGGER = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoimport-prefs",
        description="Edit the auto-import preferences for a language.",
    )
    parser.add_argument("--settings-file", default=None, help="Settings JSON file to read and write.")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVEL_OPTIONS,
        help="Override the log level stored in the settings file.",
    )
    parser.add_argument("--language-name", default="Scala", help="Language shown as the panel title.")
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print the stored settings as JSON and exit.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, existing_app: Optional[QApplication] = None) -> int:
    parsed_args, qt_args = build_arg_parser().parse_known_args(argv)
    configure_app_logging(parsed_args.log_level or "INFO")
    store = SettingsStore(parsed_args.settings_file)
    settings = store.load()
    if parsed_args.log_level is None:
        configure_app_logging(settings.get("log_level", "INFO"))
    LOGGER.debug("Parsed startup args: parsed=%s qt=%s", parsed_args, qt_args)

    if parsed_args.print_settings:
        print(json.dumps(settings, indent=2))
        return 0

    app = existing_app or QApplication.instance() or QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("Auto Import Preferences")
    LOGGER.info("Opening preferences for %s (settings=%s)", parsed_args.language_name, store.path)

    dialog = SettingsDialog(None, settings, language_name=parsed_args.language_name)
    accepted = dialog.exec() == QDialog.DialogCode.Accepted
    # Apply commits even when the dialog is later cancelled.
    if not accepted and dialog.get_settings() == settings:
        LOGGER.info("Preferences dialog cancelled; nothing saved")
        return 0
    try:
        store.save(dialog.get_settings())
    except OSError as exc:
        LOGGER.exception("Saving settings to %s failed", store.path)
        language = str(settings.get("language", "en"))
        QMessageBox.critical(
            None,
            message("dialog.save.failed.title", language),
            message("dialog.save.failed.body", language, error=exc),
        )
        return 1
    return 0
