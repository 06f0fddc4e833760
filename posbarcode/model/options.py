"""
model/options.py

Options for the two symbologies.

Callers pass a plain mapping (``BarcodeOptionsDict`` documents the accepted
keys); ``resolve_options`` turns it into a frozen ``Code39Options`` or
``Code128Options`` with every missing field defaulted. camelCase keys from the
web frontend (``narrowWidth``, ``includeTextFontSize`` ...) are accepted as
aliases. Invalid values fall back to the default and are logged, unless
``strict=True``.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, TypedDict, Union

from posbarcode.barcodegen.errors import BarcodeGenError

from .enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeOptionsDict",
    "RenderOptions",
    "Code39Options",
    "Code128Options",
    "SymbolOptions",
    "resolve_options",
    "options_class",
]

TEXT_BAND_HEIGHT: int = 16

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


class BarcodeOptionsDict(TypedDict, total=False):
    """
    Типобезопасные опции генерации (все поля необязательны).

    Example:
        >>> options: BarcodeOptionsDict = {"height": 30, "module_width": 2}
        >>> generate_code128c("12345", options)
    """

    height: float
    include_text: bool
    include_text_font_size: float
    foreground: str
    text_color: str
    background: Optional[str]
    # Code 39
    narrow_width: float
    wide_width: float
    # Code 128-C
    module_width: float
    quiet_zone_modules: float


@dataclass(frozen=True)
class RenderOptions:
    height: float = 48
    include_text: bool = True
    include_text_font_size: float = 5
    foreground: str = "#000"
    text_color: str = "#0f172a"
    background: Optional[str] = None

    @property
    def total_height(self) -> float:
        return self.height + (TEXT_BAND_HEIGHT if self.include_text else 0)


@dataclass(frozen=True)
class Code39Options(RenderOptions):
    narrow_width: float = 1.5
    wide_width: float = 3.5


@dataclass(frozen=True)
class Code128Options(RenderOptions):
    include_text_font_size: float = 12
    module_width: float = 2
    quiet_zone_modules: float = 10

    @property
    def quiet_zone_width(self) -> float:
        return self.quiet_zone_modules * self.module_width


SymbolOptions = Union[Code39Options, Code128Options]

_OPTIONS_CLASSES: Dict[Symbology, type] = {
    Symbology.CODE39: Code39Options,
    Symbology.CODE128C: Code128Options,
}

_POSITIVE = {"height", "include_text_font_size", "narrow_width", "wide_width", "module_width"}
_NON_NEGATIVE = {"quiet_zone_modules"}
_COLORS = {"foreground", "text_color"}


def options_class(symbology: Symbology) -> type:
    return _OPTIONS_CLASSES[symbology]


def _normalize_key(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _check_value(name: str, value: Any) -> Optional[str]:
    """Return a problem description, or None when the value is acceptable."""
    if name == "include_text":
        return None if isinstance(value, bool) else "must be bool"
    if name == "background":
        return None if value is None or isinstance(value, str) else "must be str or None"
    if name in _COLORS:
        return None if isinstance(value, str) and value.strip() else "must be non-empty str"
    # bool is an int subclass; reject it for numeric fields
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "must be a number"
    if not math.isfinite(value):
        return "must be finite"
    if name in _POSITIVE and value <= 0:
        return "must be > 0"
    if name in _NON_NEGATIVE and value < 0:
        return "must be >= 0"
    return None


def _reject(message: str, strict: bool) -> None:
    if strict:
        raise BarcodeGenError(message)
    logger.warning("%s; using default", message)


def resolve_options(
    symbology: Symbology,
    options: Optional[Mapping[str, Any]] = None,
    strict: bool = False,
) -> SymbolOptions:
    """
    Build the options record for ``symbology`` from a partial mapping.

    Args:
        symbology: Target symbology.
        options: Partial options; ``None`` means all defaults. An already
            resolved options record of the right class is returned unchanged.
        strict: Raise ``BarcodeGenError`` on invalid values instead of
            logging a warning and keeping the default.

    Returns:
        Frozen ``Code39Options`` or ``Code128Options``.
    """
    cls = _OPTIONS_CLASSES[symbology]
    if isinstance(options, cls):
        return options
    defaults: SymbolOptions = cls()
    if not options:
        return defaults
    if isinstance(options, RenderOptions):
        # Options of the other symbology: keep only the shared render fields
        options = {f.name: getattr(options, f.name) for f in fields(RenderOptions)}
    if not isinstance(options, Mapping):
        _reject(f"options must be a mapping, got {type(options).__name__}", strict)
        return defaults

    known = {f.name for f in fields(cls)}
    accepted: Dict[str, Any] = {}
    for raw_key, value in options.items():
        key = _normalize_key(str(raw_key))
        if key not in known:
            logger.debug("Ignoring option %r for %s", raw_key, symbology.value)
            continue
        problem = _check_value(key, value)
        if problem:
            _reject(f"Invalid option {raw_key}={value!r}: {problem}", strict)
            continue
        accepted[key] = value

    resolved = replace(defaults, **accepted)
    if isinstance(resolved, Code39Options) and resolved.wide_width < resolved.narrow_width:
        _reject(
            f"wide_width ({resolved.wide_width}) is narrower than "
            f"narrow_width ({resolved.narrow_width})",
            strict,
        )
        resolved = replace(
            resolved, narrow_width=defaults.narrow_width, wide_width=defaults.wide_width
        )
    return resolved
