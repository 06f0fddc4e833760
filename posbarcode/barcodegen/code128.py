"""
barcodegen/code128.py

Code 128 Subset C encoder.

Digits are packed two per codeword (00..99) between Start C (105) and Stop
(106), with the modulo-103 checksum placed right before Stop::

    checksum = (105 + sum(value_k * k for k = 1..n)) % 103

Symbols are contiguous; the quiet zone is blank margin on both sides.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from posbarcode.barcodegen.tables import (
    CODE128_CHECKSUM_MODULUS,
    CODE128_PATTERNS,
    CODE128_STOP,
    CODE128C_START,
    DIGITS,
    iter_code128_elements,
)
from posbarcode.model.enums import Symbology
from posbarcode.model.symbol import EncodedSymbol, Segment

logger = logging.getLogger(__name__)

__all__ = [
    "pad_digits",
    "pair_codewords",
    "checksum",
    "codeword_sequence",
    "encode_code128c",
]

DEFAULT_MODULE_WIDTH: float = 2
DEFAULT_QUIET_ZONE_MODULES: float = 10


def pad_digits(sanitized: str) -> str:
    """Digits only, left-padded with "0" to an even length."""
    digits = "".join(char for char in sanitized if char in DIGITS)
    return "0" + digits if len(digits) % 2 else digits


def pair_codewords(sanitized: str) -> List[int]:
    """Split into 2-digit groups: "012345" -> [1, 23, 45]."""
    digits = pad_digits(sanitized)
    return [int(digits[i : i + 2]) for i in range(0, len(digits), 2)]


def checksum(data_codewords: Sequence[int]) -> int:
    total = CODE128C_START
    for position, value in enumerate(data_codewords, start=1):
        total += value * position
    return total % CODE128_CHECKSUM_MODULUS


def codeword_sequence(sanitized: str) -> List[int]:
    """Start C, data pairs, checksum, Stop."""
    data = pair_codewords(sanitized)
    return [CODE128C_START, *data, checksum(data), CODE128_STOP]


def encode_code128c(
    sanitized: str,
    module_width: float = DEFAULT_MODULE_WIDTH,
    quiet_zone_modules: float = DEFAULT_QUIET_ZONE_MODULES,
) -> EncodedSymbol:
    """
    Expand a sanitized digit string into Code 128-C segments.

    Args:
        sanitized: Output of ``sanitize(value, Symbology.CODE128C)``.
        module_width: Width of one module.
        quiet_zone_modules: Blank margin on each side, in modules.

    Returns:
        EncodedSymbol with codewords and quiet zones filled in.
    """
    codewords = codeword_sequence(sanitized)
    segments: List[Segment] = []
    for codeword in codewords:
        for is_bar, modules in iter_code128_elements(CODE128_PATTERNS[codeword]):
            segments.append(Segment(is_bar, modules * module_width))

    quiet = quiet_zone_modules * module_width
    logger.debug("Code 128-C %r -> codewords %s", sanitized, codewords)
    return EncodedSymbol(
        symbology=Symbology.CODE128C,
        text=sanitized,
        segments=tuple(segments),
        codewords=tuple(codewords),
        transmitted=pad_digits(sanitized),
        leading_quiet=quiet,
        trailing_quiet=quiet,
    )
