from __future__ import annotations

from typing import Any

from PySide6.QtWidgets import QDialog

from ..app_settings.coercion import coerce_hex
from ..app_settings.defaults import DEFAULT_ACCENT_COLOR


def build_dialog_theme_qss(settings: dict[str, Any]) -> str:
    dark = bool(settings.get("dark_mode", False))
    accent = coerce_hex(settings.get("accent_color", DEFAULT_ACCENT_COLOR), DEFAULT_ACCENT_COLOR)
    window_bg = "#202124" if dark else "#f5f7fb"
    panel_bg = "#25272b" if dark else "#ffffff"
    text_fg = "#e8eaed" if dark else "#111111"
    muted = "#9aa0a6" if dark else "#5f6368"
    border = "#3c4043" if dark else "#c7ccd4"
    input_bg = "#1f2023" if dark else "#ffffff"
    button_bg = "#303134" if dark else "#eef2f8"
    return f"""
        QDialog {{
            background: {window_bg};
            color: {text_fg};
        }}
        QLabel, QCheckBox, QGroupBox {{
            color: {text_fg};
        }}
        QGroupBox {{
            border: 1px solid {border};
            border-radius: 6px;
            margin-top: 10px;
            padding-top: 6px;
        }}
        QGroupBox::title {{
            subcontrol-origin: margin;
            left: 8px;
            padding: 0 4px;
        }}
        QComboBox {{
            background: {input_bg};
            color: {text_fg};
            border: 1px solid {border};
            border-radius: 4px;
            selection-background-color: {accent};
            selection-color: #ffffff;
        }}
        QComboBox QAbstractItemView {{
            background: {panel_bg};
            color: {text_fg};
            selection-background-color: {accent};
        }}
        QCheckBox::indicator:checked {{
            background: {accent};
            border: 1px solid {accent};
        }}
        QPushButton, QDialogButtonBox > QPushButton {{
            background: {button_bg};
            color: {text_fg};
            border: 1px solid {border};
            border-radius: 4px;
            padding: 4px 10px;
        }}
        QPushButton:hover {{
            background: {accent};
            color: #ffffff;
            border: 1px solid {accent};
        }}
        QPushButton:disabled {{
            color: {muted};
        }}
    """


def apply_dialog_theme(dialog: QDialog, settings: dict[str, Any] | None) -> None:
    dialog.setStyleSheet(build_dialog_theme_qss(settings if isinstance(settings, dict) else {}))
