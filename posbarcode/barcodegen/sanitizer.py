"""
barcodegen/sanitizer.py

Input normalisation for the supported symbologies.

Sanitisation never raises: a label or ticket must still print when the product
data is malformed, so characters outside the symbology alphabet are dropped
and an empty result is replaced by a fixed fallback value.
"""

from __future__ import annotations

import logging
from typing import Any

from posbarcode.barcodegen.tables import CODE39_ALPHABET, DIGITS
from posbarcode.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = ["sanitize", "sanitize_code39", "sanitize_code128c"]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def sanitize_code39(value: Any) -> str:
    """
    Uppercase, keep Code 39 characters only, trim outer spaces.

    Returns "0000" when nothing is left. Spaces count as encodable only
    between other characters, so a blank value (" ") also yields "0000".
    """
    raw = _as_text(value)
    kept = "".join(char for char in raw.upper() if char in CODE39_ALPHABET).strip(" ")
    if not kept:
        logger.warning(
            "Code 39 value %r has no encodable characters; using %r",
            raw,
            Symbology.CODE39.fallback,
        )
        return Symbology.CODE39.fallback
    return kept


def sanitize_code128c(value: Any) -> str:
    """
    Keep ASCII digits and left-pad to an even length.

    Returns "0" when no digit is left. The fallback is returned unpadded and
    is itself a fixed point; the encoder expands it to the pair "00".
    """
    raw = _as_text(value)
    digits = "".join(char for char in raw if char in DIGITS)
    fallback = Symbology.CODE128C.fallback
    if not digits:
        logger.warning("Code 128-C value %r has no digits; using %r", raw, fallback)
        return fallback
    if digits == fallback:
        return fallback
    if len(digits) % 2:
        digits = "0" + digits
    return digits


def sanitize(value: Any, symbology: Symbology) -> str:
    """Normalise ``value`` for ``symbology``; never raises for bad values."""
    if symbology is Symbology.CODE39:
        return sanitize_code39(value)
    return sanitize_code128c(value)
