"""
barcodegen/tables.py

Static symbol tables for the supported linear symbologies.

- Code 39: character -> 9 elements over {n, w}, bar/space alternating, bar first.
  Canonical AIM (ANSI/AIM BC1) table: every symbol has exactly 3 wide elements.
- Code 128: codeword 0..106 -> module counts (1..4), bar/space alternating,
  bar first. Each codeword is 11 modules wide; the stop pattern (106) is 13
  modules and ends with the 2-module termination bar.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Final, Iterator, Mapping, Tuple

__all__ = [
    "CODE39_PATTERNS",
    "CODE39_ALPHABET",
    "CODE39_SENTINEL",
    "CODE128_PATTERNS",
    "CODE128C_START",
    "CODE128_STOP",
    "CODE128_CHECKSUM_MODULUS",
    "DIGITS",
    "iter_code39_elements",
    "iter_code128_elements",
]

DIGITS: Final[str] = string.digits

CODE39_SENTINEL: Final[str] = "*"

# fmt: off
CODE39_PATTERNS: Final[Mapping[str, str]] = MappingProxyType({
    "0": "nnnwwnwnn", "1": "wnnwnnnnw", "2": "nnwwnnnnw", "3": "wnwwnnnnn",
    "4": "nnnwwnnnw", "5": "wnnwwnnnn", "6": "nnwwwnnnn", "7": "nnnwnnwnw",
    "8": "wnnwnnwnn", "9": "nnwwnnwnn",
    "A": "wnnnnwnnw", "B": "nnwnnwnnw", "C": "wnwnnwnnn", "D": "nnnnwwnnw",
    "E": "wnnnwwnnn", "F": "nnwnwwnnn", "G": "nnnnnwwnw", "H": "wnnnnwwnn",
    "I": "nnwnnwwnn", "J": "nnnnwwwnn", "K": "wnnnnnnww", "L": "nnwnnnnww",
    "M": "wnwnnnnwn", "N": "nnnnwnnww", "O": "wnnnwnnwn", "P": "nnwnwnnwn",
    "Q": "nnnnnnwww", "R": "wnnnnnwwn", "S": "nnwnnnwwn", "T": "nnnnwnwwn",
    "U": "wwnnnnnnw", "V": "nwwnnnnnw", "W": "wwwnnnnnn", "X": "nwnnwnnnw",
    "Y": "wwnnwnnnn", "Z": "nwwnwnnnn",
    "-": "nwnnnnwnw", ".": "wwnnnnwnn", " ": "nwwnnnwnn", "$": "nwnwnwnnn",
    "/": "nwnwnnnwn", "+": "nwnnnwnwn", "%": "nnnwnwnwn",
    CODE39_SENTINEL: "nwnnwnwnn",
})
# fmt: on

# Payload alphabet; the sentinel is reserved for start/stop.
CODE39_ALPHABET: Final[frozenset[str]] = frozenset(CODE39_PATTERNS) - {CODE39_SENTINEL}

CODE128C_START: Final[int] = 105
CODE128_STOP: Final[int] = 106
CODE128_CHECKSUM_MODULUS: Final[int] = 103

# Index == codeword value.
# fmt: off
CODE128_PATTERNS: Final[Tuple[str, ...]] = (
    "212222", "222122", "222221", "121223", "121322",  # 0-4
    "131222", "122213", "122312", "132212", "221213",  # 5-9
    "221312", "231212", "112232", "122132", "122231",  # 10-14
    "113222", "123122", "123221", "223211", "221132",  # 15-19
    "221231", "213212", "223112", "312131", "311222",  # 20-24
    "321122", "321221", "312212", "322112", "322211",  # 25-29
    "212123", "212321", "232121", "111323", "131123",  # 30-34
    "131321", "112313", "132113", "132311", "211313",  # 35-39
    "231113", "231311", "112133", "112331", "132131",  # 40-44
    "113123", "113321", "133121", "313121", "211331",  # 45-49
    "231131", "213113", "213311", "213131", "311123",  # 50-54
    "311321", "331121", "312113", "312311", "332111",  # 55-59
    "314111", "221411", "431111", "111224", "111422",  # 60-64
    "121124", "121421", "141122", "141221", "112214",  # 65-69
    "112412", "122114", "122411", "142112", "142211",  # 70-74
    "241211", "221114", "413111", "241112", "134111",  # 75-79
    "111242", "121142", "121241", "114212", "124112",  # 80-84
    "124211", "411212", "421112", "421211", "212141",  # 85-89
    "214121", "412121", "111143", "111341", "131141",  # 90-94
    "114113", "114311", "411113", "411311", "113141",  # 95-99
    "114131", "311141", "411131", "211412", "211214",  # 100-104
    "211232",                                          # 105 Start C
    "2331112",                                         # 106 Stop
)
# fmt: on


def iter_code39_elements(pattern: str) -> Iterator[Tuple[bool, bool]]:
    """Yield ``(is_bar, is_wide)`` for every element of a Code 39 pattern."""
    for index, element in enumerate(pattern):
        yield index % 2 == 0, element == "w"


def iter_code128_elements(pattern: str) -> Iterator[Tuple[bool, int]]:
    """Yield ``(is_bar, module_count)`` for every element of a Code 128 pattern."""
    for index, element in enumerate(pattern):
        yield index % 2 == 0, int(element)
