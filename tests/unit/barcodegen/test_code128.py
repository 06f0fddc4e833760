from typing import List

import pytest

from posbarcode.barcodegen.code128 import (
    checksum,
    codeword_sequence,
    encode_code128c,
    pad_digits,
    pair_codewords,
)
from posbarcode.barcodegen.sanitizer import sanitize
from posbarcode.barcodegen.tables import CODE128_PATTERNS
from posbarcode.model.enums import Symbology


class TestCodewords:
    def test_reference_example(self) -> None:
        sanitized = sanitize("12345", Symbology.CODE128C)
        assert sanitized == "012345"
        assert pair_codewords(sanitized) == [1, 23, 45]
        assert checksum([1, 23, 45]) == 81
        assert codeword_sequence(sanitized) == [105, 1, 23, 45, 81, 106]

    @pytest.mark.parametrize(
        "data,expected",
        [
            ([], 105 % 103),
            ([0], 2),
            ([99], (105 + 99) % 103),
            ([12, 34, 56], (105 + 12 + 34 * 2 + 56 * 3) % 103),
            ([0, 0, 1, 23], (105 + 0 + 0 + 3 + 92) % 103),
        ],
    )
    def test_checksum(self, data: List[int], expected: int) -> None:
        assert checksum(data) == expected

    def test_checksum_in_range(self) -> None:
        for value in range(100):
            assert 0 <= checksum([value, 99 - value]) < 103

    @pytest.mark.parametrize(
        "raw,expected",
        [("0", "00"), ("5", "05"), ("123", "0123"), ("1234", "1234"), ("", "")],
    )
    def test_pad_digits(self, raw: str, expected: str) -> None:
        assert pad_digits(raw) == expected

    def test_fallback_encodes_as_double_zero(self) -> None:
        assert codeword_sequence("0") == [105, 0, checksum([0]), 106]

    def test_pairs_for_leading_zeros(self) -> None:
        assert pair_codewords("000123") == [0, 1, 23]

    def test_non_digits_ignored(self) -> None:
        assert pair_codewords("12-34") == [12, 34]


class TestEncodeCode128C:
    def test_segments_follow_codewords(self) -> None:
        symbol = encode_code128c("012345", module_width=1, quiet_zone_modules=0)
        expected = [int(d) for cw in [105, 1, 23, 45, 81, 106] for d in CODE128_PATTERNS[cw]]
        assert [s.width for s in symbol.segments] == expected
        assert [s.is_bar for s in symbol.segments] == [
            i % 2 == 0 for cw in [105, 1, 23, 45, 81, 106] for i in range(len(CODE128_PATTERNS[cw]))
        ]

    def test_contiguous_symbol_width(self) -> None:
        symbol = encode_code128c("012345", module_width=2, quiet_zone_modules=10)
        # 5 codewords x 11 modules + 13-module stop
        assert symbol.symbol_width == (5 * 11 + 13) * 2
        assert symbol.leading_quiet == 20
        assert symbol.trailing_quiet == 20
        assert symbol.width == 20 + 136 + 20

    def test_first_bar_after_quiet_zone(self) -> None:
        symbol = encode_code128c("00", module_width=3, quiet_zone_modules=10)
        x, width = next(symbol.bars())
        assert x == 30
        assert width == 2 * 3

    def test_ends_with_stop_bar(self) -> None:
        symbol = encode_code128c("1234")
        assert symbol.segments[-1].is_bar
        assert symbol.codewords[-1] == 106

    def test_metadata(self) -> None:
        symbol = encode_code128c("012345")
        assert symbol.symbology is Symbology.CODE128C
        assert symbol.text == "012345"
        assert symbol.transmitted == "012345"
        assert symbol.codewords == (105, 1, 23, 45, 81, 106)
        assert symbol.codewords[1:-2] == (1, 23, 45)

    def test_fallback_value(self) -> None:
        symbol = encode_code128c("0")
        assert symbol.text == "0"
        assert symbol.transmitted == "00"
        assert symbol.codewords[1:-2] == (0,)

    def test_deterministic(self) -> None:
        assert encode_code128c("987654") == encode_code128c("987654")

    def test_width_non_decreasing(self) -> None:
        widths = [
            encode_code128c(sanitize("9" * n, Symbology.CODE128C)).width for n in range(1, 12)
        ]
        assert widths == sorted(widths)
