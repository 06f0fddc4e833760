from posbarcode.model.enums import Symbology
from posbarcode.model.options import (
    BarcodeOptionsDict,
    Code39Options,
    Code128Options,
    RenderOptions,
    resolve_options,
)
from posbarcode.model.symbol import EncodedSymbol, Segment

__all__ = [
    "Symbology",
    "BarcodeOptionsDict",
    "RenderOptions",
    "Code39Options",
    "Code128Options",
    "resolve_options",
    "EncodedSymbol",
    "Segment",
]
