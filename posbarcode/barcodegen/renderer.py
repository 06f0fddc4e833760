"""
barcodegen/renderer.py

Geometry and markup for encoded symbols.

- ``render_svg``: self-contained SVG document, byte-identical for identical input.
- ``render_image`` / ``render_png``: raster preview of the same geometry (Pillow).
"""

from __future__ import annotations

import html
import logging
import math
from io import BytesIO
from typing import List, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from posbarcode.barcodegen.errors import BarcodeGenError
from posbarcode.model.options import RenderOptions
from posbarcode.model.symbol import EncodedSymbol

logger = logging.getLogger(__name__)

__all__ = ["render_svg", "render", "render_image", "render_png", "describe", "DEFAULT_SCALE"]

SVG_NS = "http://www.w3.org/2000/svg"
DEFAULT_SCALE: float = 4.0


def _num(value: Union[int, float]) -> str:
    """48 -> "48", 48.0 -> "48", 5.5 -> "5.5"."""
    as_float = float(value)
    if as_float.is_integer():
        return str(int(as_float))
    return repr(as_float)


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def render_svg(symbol: EncodedSymbol, options: RenderOptions) -> str:
    """
    Render ``symbol`` as an SVG string.

    Bars are ``<rect>`` elements at y=0 with the configured height; spaces and
    quiet zones only move the x cursor. When ``include_text`` is set a 16-unit
    band below the bars holds the centred, monospace sanitized value.
    """
    cursor = symbol.leading_quiet
    rects: List[str] = []
    bar_height = _num(options.height)
    fill = _attr(options.foreground)
    for segment in symbol.segments:
        if segment.is_bar:
            rects.append(
                f'<rect x="{cursor:.2f}" y="0" width="{segment.width:.2f}" '
                f'height="{bar_height}" fill="{fill}" />'
            )
        cursor += segment.width

    width = cursor + symbol.trailing_quiet
    height = options.total_height

    background = ""
    if options.background:
        background = (
            f'<rect x="0" y="0" width="{width:.2f}" height="{height:.2f}" '
            f'fill="{_attr(options.background)}" />'
        )

    text_block = ""
    if options.include_text:
        text_y = options.height + options.include_text_font_size
        text_block = (
            f'<text x="50%" y="{text_y:.2f}" font-family="monospace" '
            f'font-size="{_num(options.include_text_font_size)}" text-anchor="middle" '
            f'fill="{_attr(options.text_color)}">{html.escape(symbol.text, quote=False)}</text>'
        )

    return (
        f'<svg xmlns="{SVG_NS}" width="{width:.2f}" height="{height:.2f}" '
        f'viewBox="0 0 {width:.2f} {height:.2f}">'
        f'{background}{"".join(rects)}{text_block}</svg>'
    )


render = render_svg


def _placeholder(width: int, height: int) -> Image.Image:
    return Image.new("RGB", (max(1, width), max(1, height)), "white")


def render_image(
    symbol: EncodedSymbol,
    options: RenderOptions,
    scale: float = DEFAULT_SCALE,
    strict: bool = True,
) -> Image.Image:
    """
    Растровый предпросмотр штрихкода (RGB).

    Args:
        symbol: Encoded symbol.
        options: Resolved render options.
        scale: Pixels per geometry unit.
        strict: If True, raise BarcodeGenError on failure. If False, return a
            white placeholder of the expected size and log a warning.

    Returns:
        PIL Image, ``ceil(width * scale)`` x ``ceil(total_height * scale)``.

    Raises:
        BarcodeGenError: rendering failed and ``strict`` is True.
    """
    valid_scale = math.isfinite(scale) and scale > 0
    # placeholder keeps the default-scale size when scale itself is unusable
    size_scale = scale if valid_scale else DEFAULT_SCALE
    width_px = max(1, math.ceil(symbol.width * size_scale))
    height_px = max(1, math.ceil(options.total_height * size_scale))
    bar_height_px = max(1, round(options.height * size_scale))
    try:
        if not valid_scale:
            raise ValueError(f"scale must be a finite number > 0, got {scale!r}")
        img = Image.new("RGB", (width_px, height_px), options.background or "white")
        draw = ImageDraw.Draw(img)
        for x, bar_width in symbol.bars():
            x0 = round(x * scale)
            x1 = max(x0 + 1, round((x + bar_width) * scale))
            draw.rectangle((x0, 0, x1 - 1, bar_height_px - 1), fill=options.foreground)
        if options.include_text:
            font = ImageFont.load_default()
            left, top, right, bottom = draw.textbbox((0, 0), symbol.text, font=font)
            text_x = (width_px - (right - left)) / 2
            text_y = bar_height_px + max(0, (height_px - bar_height_px - (bottom - top)) / 2)
            draw.text((text_x, text_y), symbol.text, fill=options.text_color, font=font)
    except Exception as e:
        msg = f"Raster rendering failed for {symbol.symbology.value} value {symbol.text!r}"
        if strict:
            raise BarcodeGenError(msg) from e
        logger.warning("%s: %s; returning placeholder", msg, e)
        return _placeholder(width_px, height_px)

    logger.debug("Rendered %s raster %dx%d", symbol.symbology.value, width_px, height_px)
    return img


def render_png(
    symbol: EncodedSymbol,
    options: RenderOptions,
    scale: float = DEFAULT_SCALE,
    strict: bool = True,
) -> bytes:
    img = render_image(symbol, options, scale=scale, strict=strict)
    buf = BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf.read()


def describe(symbol: EncodedSymbol, options: Optional[RenderOptions] = None) -> str:
    """One-line summary for logs: symbology, text, bar count and width."""
    bars = sum(1 for segment in symbol.segments if segment.is_bar)
    suffix = f" height={_num(options.total_height)}" if options is not None else ""
    return (
        f"{symbol.symbology.value} text={symbol.text!r} bars={bars} "
        f"width={symbol.width:.2f}{suffix}"
    )
