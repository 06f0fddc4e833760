from typing import Any

import pytest

from posbarcode.model.enums import CODE39_FALLBACK, CODE128C_FALLBACK, Symbology


def test_values() -> None:
    assert Symbology.CODE39.value == "code39"
    assert Symbology.CODE128C.value == "code128c"
    assert Symbology("code39") is Symbology.CODE39


def test_fallbacks() -> None:
    assert Symbology.CODE39.fallback == CODE39_FALLBACK == "0000"
    assert Symbology.CODE128C.fallback == CODE128C_FALLBACK == "0"


def test_alphabets() -> None:
    assert Symbology.CODE128C.alphabet == frozenset("0123456789")
    assert "*" not in Symbology.CODE39.alphabet
    assert {"A", "Z", "0", "-", ".", " ", "$", "/", "+", "%"} <= Symbology.CODE39.alphabet
    assert len(Symbology.CODE39.alphabet) == 43


def test_fallback_inside_alphabet() -> None:
    for symbology in Symbology:
        assert set(symbology.fallback) <= symbology.alphabet


@pytest.mark.parametrize(
    "raw,expected",
    [
        (Symbology.CODE39, Symbology.CODE39),
        ("code39", Symbology.CODE39),
        ("CODE39", Symbology.CODE39),
        ("Code 39", Symbology.CODE39),
        ("code_128c", Symbology.CODE128C),
        ("Code128-C", Symbology.CODE128C),
    ],
)
def test_parse(raw: Any, expected: Symbology) -> None:
    assert Symbology.parse(raw) is expected


def test_parse_unknown() -> None:
    with pytest.raises(ValueError):
        Symbology.parse("ean13")
    with pytest.raises(TypeError):
        Symbology.parse(39)  # type: ignore[arg-type]


def test_localized_name() -> None:
    assert Symbology.CODE39.localized_name("en") == "Code 39"
    assert Symbology.CODE128C.localized_name() == "Code 128 Subset C"
    assert "набор C" in Symbology.CODE128C.localized_name("ru")
