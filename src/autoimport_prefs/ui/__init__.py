from .auto_import_panel import AutoImportOptionsPanel
from .options_provider import AutoImportOptionsProvider
from .settings_dialog import SettingsDialog

__all__ = [
    "AutoImportOptionsPanel",
    "AutoImportOptionsProvider",
    "SettingsDialog",
]
