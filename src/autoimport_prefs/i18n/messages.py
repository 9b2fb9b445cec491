from __future__ import annotations

_LANGUAGE_OPTIONS: list[tuple[str, str]] = [
    ("English", "en"),
    ("Deutsch", "de"),
    ("Français", "fr"),
]

_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "combobox.insert.imports.all": "All",
        "combobox.insert.imports.ask": "Ask",
        "combobox.insert.imports.none": "None",
        "autoimport.paste.label": "Insert imports on paste:",
        "autoimport.paste.hint": "To disable import popup, use Java setting",
        "autoimport.add.unambiguous": "Add unambiguous imports on the fly",
        "autoimport.optimize.on.fly": "Optimize imports on the fly",
        "autoimport.display.name": "Auto Import",
        "dialog.title": "Preferences",
        "dialog.apply": "Apply",
        "dialog.restore.defaults": "Restore Defaults",
        "dialog.restore.defaults.confirm": "Reset settings in this dialog to default values?",
        "dialog.save.failed.title": "Save Settings Failed",
        "dialog.save.failed.body": "Could not save settings:\n{error}",
    },
    "de": {
        "combobox.insert.imports.all": "Alle",
        "combobox.insert.imports.ask": "Nachfragen",
        "combobox.insert.imports.none": "Keine",
        "autoimport.paste.label": "Imports beim Einfügen hinzufügen:",
        "autoimport.paste.hint": "Um das Import-Popup zu deaktivieren, die Java-Einstellung verwenden",
        "autoimport.add.unambiguous": "Eindeutige Imports sofort hinzufügen",
        "autoimport.optimize.on.fly": "Imports sofort optimieren",
        "autoimport.display.name": "Automatischer Import",
        "dialog.title": "Einstellungen",
        "dialog.apply": "Übernehmen",
        "dialog.restore.defaults": "Standardwerte",
    },
    "fr": {
        "combobox.insert.imports.all": "Tous",
        "combobox.insert.imports.ask": "Demander",
        "combobox.insert.imports.none": "Aucun",
        "autoimport.paste.label": "Insérer les imports au collage :",
        "autoimport.add.unambiguous": "Ajouter les imports non ambigus à la volée",
        "autoimport.optimize.on.fly": "Optimiser les imports à la volée",
        "autoimport.display.name": "Import automatique",
        "dialog.title": "Préférences",
        "dialog.apply": "Appliquer",
    },
}


def language_code_for(label: str) -> str:
    normalized = (label or "").strip()
    if not normalized:
        return "en"
    for display, code in _LANGUAGE_OPTIONS:
        if normalized.lower() in {display.lower(), code}:
            return code
    return "en"


def message(key: str, language: str = "en", **kwargs: object) -> str:
    """Look up ``key`` for ``language``, falling back to English and then the key."""
    lang = (language or "en").strip().lower()
    text = _MESSAGES.get(lang, {}).get(key) or _MESSAGES["en"].get(key) or key
    if kwargs:
        text = text.format(**kwargs)
    return text
