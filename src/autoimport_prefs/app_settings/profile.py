from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..paste_policy import DEFAULT_PASTE_POLICY, PastePolicy
from .coercion import coerce_bool, coerce_paste_policy_code


@dataclass(slots=True)
class AutoImportProfile:
    paste_policy: PastePolicy = DEFAULT_PASTE_POLICY
    add_unambiguous: bool = False
    optimize_imports: bool = False

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> "AutoImportProfile":
        s = settings if isinstance(settings, dict) else {}
        return cls(
            paste_policy=PastePolicy.from_code(coerce_paste_policy_code(s.get("insert_imports_on_paste", DEFAULT_PASTE_POLICY.code))),
            add_unambiguous=coerce_bool(s.get("add_unambiguous_imports_on_the_fly", False), False),
            optimize_imports=coerce_bool(s.get("optimize_imports_on_the_fly", False), False),
        )

    def sanitized(self) -> "AutoImportProfile":
        return AutoImportProfile(
            paste_policy=PastePolicy.from_code(coerce_paste_policy_code(self.paste_policy)),
            add_unambiguous=bool(self.add_unambiguous),
            optimize_imports=bool(self.optimize_imports),
        )

    def apply_to_settings(self, settings: dict[str, Any]) -> None:
        clean = self.sanitized()
        settings["insert_imports_on_paste"] = clean.paste_policy.code
        settings["add_unambiguous_imports_on_the_fly"] = clean.add_unambiguous
        settings["optimize_imports_on_the_fly"] = clean.optimize_imports

    def to_json_dict(self) -> dict[str, Any]:
        clean = self.sanitized()
        return {
            "paste_policy": clean.paste_policy.name.lower(),
            "add_unambiguous": clean.add_unambiguous,
            "optimize_imports": clean.optimize_imports,
        }
