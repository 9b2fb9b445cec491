from __future__ import annotations

from enum import IntEnum

from .i18n import message

# Host code-insight convention for the "insert imports on paste" option.
CODE_YES = 1
CODE_NO = 2
CODE_ASK = 3


class UnknownPastePolicyError(ValueError):
    pass


class PastePolicy(IntEnum):
    """Whether missing imports are inserted when code is pasted.

    The integer value of each member is the code the host persists.
    Members are declared in the order the selector lists them.
    """

    ALWAYS = CODE_YES
    ASK = CODE_ASK
    NEVER = CODE_NO

    @property
    def code(self) -> int:
        return int(self.value)

    @property
    def message_key(self) -> str:
        return _MESSAGE_KEYS[self]

    def display_label(self, language: str = "en") -> str:
        return message(self.message_key, language)

    @classmethod
    def from_code(cls, code: object) -> "PastePolicy":
        if isinstance(code, cls):
            return code
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownPastePolicyError(f"Paste policy code must be an int, got {code!r}")
        try:
            return cls(code)
        except ValueError:
            raise UnknownPastePolicyError(f"Unknown paste policy code: {code}") from None


_MESSAGE_KEYS: dict[PastePolicy, str] = {
    PastePolicy.ALWAYS: "combobox.insert.imports.all",
    PastePolicy.ASK: "combobox.insert.imports.ask",
    PastePolicy.NEVER: "combobox.insert.imports.none",
}

DEFAULT_PASTE_POLICY = PastePolicy.ASK
