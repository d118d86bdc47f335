"""Tests for the palette data model."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from hilite.config import (
    DEFAULT_PALETTE,
    RGB,
    RGB_COMPONENT_MAX,
    Palette,
    TokenCategory,
)
from hilite.core.ansi import rgb


class TestRGB:
    """Tests for RGB validation."""

    def test_ansi_property(self):
        assert RGB(r=0, g=136, b=255).ansi == rgb(0, 136, 255)

    @pytest.mark.parametrize("bad", [-1, 256, 1000])
    def test_out_of_range_rejected(self, bad):
        with pytest.raises(ValidationError):
            RGB(r=bad, g=0, b=0)

    def test_frozen(self):
        color = RGB(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 4

    @given(
        r=st.integers(0, RGB_COMPONENT_MAX),
        g=st.integers(0, RGB_COMPONENT_MAX),
        b=st.integers(0, RGB_COMPONENT_MAX),
    )
    def test_any_byte_accepted(self, r, g, b):
        assert RGB(r=r, g=g, b=b).ansi == f"\033[38;2;{r};{g};{b}m"


class TestPalette:
    """Tests for the Palette model."""

    @pytest.mark.parametrize(
        "category,expected",
        [
            (TokenCategory.KEYWORD, rgb(0, 136, 255)),
            (TokenCategory.STRING, rgb(255, 136, 0)),
            (TokenCategory.COMMENT, rgb(136, 136, 136)),
            (TokenCategory.NUMBER, rgb(255, 0, 255)),
        ],
    )
    def test_default_colors(self, category, expected):
        assert DEFAULT_PALETTE.color_for(category) == expected

    def test_partial_palette_keeps_defaults(self):
        palette = Palette(keyword=RGB(r=1, g=2, b=3))

        assert palette.keyword == RGB(r=1, g=2, b=3)
        assert palette.number == DEFAULT_PALETTE.number

    def test_nested_dict_is_validated(self):
        with pytest.raises(ValidationError) as exc_info:
            Palette(comment={"r": 999, "g": 0, "b": 0})

        assert "comment" in str(exc_info.value)
