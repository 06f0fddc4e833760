import logging
from typing import Any

import pytest

from posbarcode.barcodegen.errors import BarcodeGenError
from posbarcode.model.enums import Symbology
from posbarcode.model.options import (
    Code39Options,
    Code128Options,
    options_class,
    resolve_options,
)


class TestDefaults:
    def test_code39_defaults(self) -> None:
        opts = Code39Options()
        assert (opts.height, opts.narrow_width, opts.wide_width) == (48, 1.5, 3.5)
        assert opts.include_text is True
        assert opts.include_text_font_size == 5
        assert opts.total_height == 64

    def test_code128_defaults(self) -> None:
        opts = Code128Options()
        assert (opts.height, opts.module_width, opts.quiet_zone_modules) == (48, 2, 10)
        assert opts.include_text_font_size == 12
        assert opts.quiet_zone_width == 20

    def test_total_height_without_text(self) -> None:
        assert Code39Options(height=30, include_text=False).total_height == 30

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            Code39Options().height = 10  # type: ignore[misc]

    def test_options_class(self) -> None:
        assert options_class(Symbology.CODE39) is Code39Options
        assert options_class(Symbology.CODE128C) is Code128Options


class TestResolveOptions:
    @pytest.mark.parametrize("symbology", list(Symbology))
    def test_none_and_empty(self, symbology: Symbology) -> None:
        assert resolve_options(symbology, None) == options_class(symbology)()
        assert resolve_options(symbology, {}) == options_class(symbology)()

    def test_partial_override(self) -> None:
        opts = resolve_options(Symbology.CODE39, {"height": 20})
        assert opts == Code39Options(height=20)

    def test_camel_case_aliases(self) -> None:
        opts = resolve_options(
            Symbology.CODE39,
            {"narrowWidth": 1, "wideWidth": 3, "includeText": False, "includeTextFontSize": 8},
        )
        assert opts == Code39Options(
            narrow_width=1, wide_width=3, include_text=False, include_text_font_size=8
        )

    def test_unknown_keys_ignored(self) -> None:
        # module_width belongs to Code 128 only
        assert resolve_options(Symbology.CODE39, {"module_width": 5}) == Code39Options()

    def test_resolved_instance_passthrough(self) -> None:
        opts = Code128Options(height=10)
        assert resolve_options(Symbology.CODE128C, opts) is opts

    def test_other_symbology_instance_keeps_render_fields(self) -> None:
        opts = resolve_options(Symbology.CODE128C, Code39Options(height=10, include_text=False))
        assert isinstance(opts, Code128Options)
        assert opts.height == 10 and opts.include_text is False
        assert opts.module_width == 2

    @pytest.mark.parametrize(
        "key,value",
        [
            ("height", 0),
            ("height", -5),
            ("height", "tall"),
            ("height", float("nan")),
            ("narrow_width", True),
            ("include_text", "yes"),
            ("include_text_font_size", None),
            ("foreground", ""),
            ("background", 3),
        ],
    )
    def test_invalid_values_fall_back(
        self, key: str, value: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="posbarcode"):
            opts = resolve_options(Symbology.CODE39, {key: value})
        assert opts == Code39Options()
        assert "Invalid option" in caplog.text

    @pytest.mark.parametrize("key,value", [("module_width", -1), ("quiet_zone_modules", -1)])
    def test_invalid_values_strict(self, key: str, value: Any) -> None:
        with pytest.raises(BarcodeGenError, match=key):
            resolve_options(Symbology.CODE128C, {key: value}, strict=True)

    def test_zero_quiet_zone_allowed(self) -> None:
        assert resolve_options(Symbology.CODE128C, {"quiet_zone_modules": 0}).quiet_zone_width == 0

    def test_background_none_allowed(self) -> None:
        assert resolve_options(Symbology.CODE39, {"background": None}).background is None

    def test_wide_narrower_than_narrow(self) -> None:
        opts = resolve_options(Symbology.CODE39, {"narrow_width": 4, "wide_width": 2})
        assert (opts.narrow_width, opts.wide_width) == (1.5, 3.5)
        with pytest.raises(BarcodeGenError, match="narrower"):
            resolve_options(Symbology.CODE39, {"narrow_width": 4, "wide_width": 2}, strict=True)

    def test_non_mapping(self) -> None:
        assert resolve_options(Symbology.CODE39, ["height", 3]) == Code39Options()  # type: ignore[arg-type]
        with pytest.raises(BarcodeGenError, match="mapping"):
            resolve_options(Symbology.CODE39, 42, strict=True)  # type: ignore[arg-type]
