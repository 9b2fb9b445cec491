"""Display text lookup for the preferences UI."""

from .messages import language_code_for, message

__all__ = [
    "language_code_for",
    "message",
]
