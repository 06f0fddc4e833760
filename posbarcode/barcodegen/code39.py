"""
barcodegen/code39.py

Code 39 encoder: sentinel framing and expansion to bar/space widths.
"""

from __future__ import annotations

import logging
from typing import List

from posbarcode.barcodegen.tables import (
    CODE39_PATTERNS,
    CODE39_SENTINEL,
    iter_code39_elements,
)
from posbarcode.model.enums import Symbology
from posbarcode.model.symbol import EncodedSymbol, Segment

logger = logging.getLogger(__name__)

__all__ = ["encode_code39", "transmitted_value"]

DEFAULT_NARROW_WIDTH: float = 1.5
DEFAULT_WIDE_WIDTH: float = 3.5


def transmitted_value(sanitized: str) -> str:
    return f"{CODE39_SENTINEL}{sanitized}{CODE39_SENTINEL}"


def encode_code39(
    sanitized: str,
    narrow_width: float = DEFAULT_NARROW_WIDTH,
    wide_width: float = DEFAULT_WIDE_WIDTH,
) -> EncodedSymbol:
    """
    Expand a sanitized value into Code 39 segments.

    Every character contributes 5 bars and 4 spaces followed by one narrow
    inter-character gap (a space segment, never drawn). Characters without a
    pattern are skipped.

    Args:
        sanitized: Output of ``sanitize(value, Symbology.CODE39)``.
        narrow_width: Width of a narrow element.
        wide_width: Width of a wide element.

    Returns:
        EncodedSymbol with no quiet zone.
    """
    framed = transmitted_value(sanitized)
    segments: List[Segment] = []
    for char in framed:
        pattern = CODE39_PATTERNS.get(char)
        if pattern is None:
            logger.debug("Skipping character %r without a Code 39 pattern", char)
            continue
        for is_bar, is_wide in iter_code39_elements(pattern):
            segments.append(Segment(is_bar, wide_width if is_wide else narrow_width))
        segments.append(Segment(False, narrow_width))

    return EncodedSymbol(
        symbology=Symbology.CODE39,
        text=sanitized,
        segments=tuple(segments),
        transmitted=framed,
    )
