"""Auto-import preferences panel for an editor's language settings."""

from .paste_policy import PastePolicy, UnknownPastePolicyError

__all__ = [
    "PastePolicy",
    "UnknownPastePolicyError",
]
