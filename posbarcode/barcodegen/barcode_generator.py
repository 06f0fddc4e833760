from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Set

from PIL import Image

from posbarcode.barcodegen.code39 import encode_code39
from posbarcode.barcodegen.code128 import encode_code128c
from posbarcode.barcodegen.errors import BarcodeGenError
from posbarcode.barcodegen.renderer import (
    DEFAULT_SCALE,
    describe,
    render_image,
    render_png,
    render_svg,
)
from posbarcode.barcodegen.sanitizer import sanitize
from posbarcode.model.enums import Symbology
from posbarcode.model.options import (
    Code128Options,
    SymbolOptions,
    resolve_options,
)
from posbarcode.model.symbol import EncodedSymbol

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeGenerator",
    "BarcodeGenError",
    "generate",
    "generate_code39",
    "generate_code128c",
]


class BarcodeGenerator:
    """
    Universal API for the label/ticket linear barcodes.

    Args:
        symbology: Symbology member or its string value ("code39", "code128c").
        data: Raw value; sanitized, never rejected.
        options: Optional partial options mapping (defaults fill the rest).
        strict: Raise BarcodeGenError on invalid option values instead of
            falling back to defaults.
    """

    _symbology_names: Dict[Symbology, str] = {s: s.display_name for s in Symbology}

    def __init__(
        self,
        symbology: Symbology | str,
        data: Any,
        options: Optional[Mapping[str, Any]] = None,
        strict: bool = False,
    ) -> None:
        try:
            self.symbology = Symbology.parse(symbology)
        except ValueError as e:
            raise TypeError(
                f"symbology must be Symbology enum or its value, got {symbology!r}"
            ) from e
        self.data = data
        self.options: SymbolOptions = resolve_options(self.symbology, options, strict=strict)

    @property
    def sanitized(self) -> str:
        return sanitize(self.data, self.symbology)

    def encode(self) -> EncodedSymbol:
        """Sanitize and expand into bar/space segments."""
        value = self.sanitized
        opts = self.options
        if isinstance(opts, Code128Options):
            return encode_code128c(value, opts.module_width, opts.quiet_zone_modules)
        return encode_code39(value, opts.narrow_width, opts.wide_width)

    def render_svg(self) -> str:
        """
        Рендеринг SVG-разметки штрихкода.

        Returns:
            Self-contained SVG document; identical input gives identical output.
        """
        symbol = self.encode()
        logger.debug("Rendering SVG for %s", describe(symbol, self.options))
        return render_svg(symbol, self.options)

    def render_image(self, scale: float = DEFAULT_SCALE, strict: bool = True) -> Image.Image:
        return render_image(self.encode(), self.options, scale=scale, strict=strict)

    def render_bytes(self, scale: float = DEFAULT_SCALE, strict: bool = True) -> bytes:
        """PNG bytes of ``render_image``."""
        return render_png(self.encode(), self.options, scale=scale, strict=strict)

    @classmethod
    def supported_types(cls) -> Set[Symbology]:
        return set(cls._symbology_names)

    @classmethod
    def symbology_name_map(cls) -> Dict[Symbology, str]:
        return dict(cls._symbology_names)

    def __repr__(self) -> str:
        return f"BarcodeGenerator({self.symbology.value!r}, {self.data!r})"


def generate(
    value: Any,
    symbology: Symbology | str,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """SVG markup for ``value`` in the given symbology."""
    return BarcodeGenerator(symbology, value, options).render_svg()


def generate_code39(value: Any, options: Optional[Mapping[str, Any]] = None) -> str:
    """
    Code 39 SVG.

    Options: height (48), narrow_width (1.5), wide_width (3.5),
    include_text (True), include_text_font_size (5).
    """
    return generate(value, Symbology.CODE39, options)


def generate_code128c(value: Any, options: Optional[Mapping[str, Any]] = None) -> str:
    """
    Code 128 Subset C SVG.

    Options: height (48), module_width (2), include_text (True),
    include_text_font_size (12), quiet_zone_modules (10).
    """
    return generate(value, Symbology.CODE128C, options)
