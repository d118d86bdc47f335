"""Configuration module for hilite."""

from hilite.config.settings import (
    DEFAULT_PALETTE,
    RGB_COMPONENT_MAX,
    RGB_COMPONENT_MIN,
    RGB,
    Palette,
    TokenCategory,
)

__all__ = [
    "DEFAULT_PALETTE",
    "RGB_COMPONENT_MAX",
    "RGB_COMPONENT_MIN",
    "RGB",
    "Palette",
    "TokenCategory",
]
