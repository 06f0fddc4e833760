"""
model/enums.py

(Кратко RU: Перечисление поддерживаемых линейных символик.)

EN: Symbology enum for the label/ticket barcode encoder. Each member knows its
payload alphabet and the fallback value used when sanitized input is empty.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, FrozenSet, Literal

from posbarcode.barcodegen.tables import CODE39_ALPHABET, DIGITS

CODE39_FALLBACK: Final[str] = "0000"
CODE128C_FALLBACK: Final[str] = "0"


class Symbology(str, Enum):
    CODE39 = "code39"
    CODE128C = "code128c"

    @property
    def alphabet(self) -> FrozenSet[str]:
        if self is Symbology.CODE39:
            return CODE39_ALPHABET
        return frozenset(DIGITS)

    @property
    def fallback(self) -> str:
        return CODE39_FALLBACK if self is Symbology.CODE39 else CODE128C_FALLBACK

    @property
    def display_name(self) -> str:
        return "Code 39" if self is Symbology.CODE39 else "Code 128 Subset C"

    def localized_name(self, lang: Literal["ru", "en"] = "en") -> str:
        names_ru = {
            Symbology.CODE39: "Code 39 (буквенно-цифровой)",
            Symbology.CODE128C: "Code 128, набор C (числовой)",
        }
        return names_ru[self] if lang == "ru" else self.display_name

    @classmethod
    def parse(cls, value: "Symbology | str") -> "Symbology":
        """
        Accept a member or its string value ("code39", "Code128C", "code_128c").

        Raises:
            TypeError: value is neither a Symbology nor a str.
            ValueError: unknown symbology name.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"symbology must be Symbology or str, got {type(value)!r}")
        key = value.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown symbology: {value!r}")
