"""Encoded symbol: the ordered bar/space segments produced by an encoder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

from .enums import Symbology

__all__ = ["Segment", "EncodedSymbol"]


class Segment(NamedTuple):
    is_bar: bool
    width: float


@dataclass(frozen=True)
class EncodedSymbol:
    """
    Immutable result of encoding one sanitized value.

    Attributes:
        symbology: Symbology that produced the segments.
        text: Sanitized value (human-readable line).
        segments: Bars and spaces in left-to-right order. Code 39
            inter-character gaps are included as space segments.
        codewords: Code 128 codeword sequence (start, data, checksum, stop);
            empty for Code 39.
        transmitted: Characters actually encoded, sentinels included
            (Code 39), or the padded digit string (Code 128).
        leading_quiet: Blank margin before the first bar.
        trailing_quiet: Blank margin after the last element.
    """

    symbology: Symbology
    text: str
    segments: Tuple[Segment, ...]
    codewords: Tuple[int, ...] = ()
    transmitted: str = ""
    leading_quiet: float = 0.0
    trailing_quiet: float = 0.0

    @property
    def symbol_width(self) -> float:
        return sum(segment.width for segment in self.segments)

    @property
    def width(self) -> float:
        return self.leading_quiet + self.symbol_width + self.trailing_quiet

    def bars(self) -> Iterator[Tuple[float, float]]:
        """Yield ``(x, width)`` for every bar, x measured from the left edge."""
        x = self.leading_quiet
        for segment in self.segments:
            if segment.is_bar:
                yield x, segment.width
            x += segment.width
