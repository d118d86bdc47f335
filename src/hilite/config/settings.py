from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from hilite.core.ansi import rgb

# Bounds for a single color channel
RGB_COMPONENT_MIN = 0
RGB_COMPONENT_MAX = 255


class TokenCategory(str, Enum):
    """Lexical categories that receive a color."""

    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"


class RGB(BaseModel):
    """A true-color foreground color.

    Attributes:
        r: Red component (0-255).
        g: Green component (0-255).
        b: Blue component (0-255).
    """

    model_config = ConfigDict(frozen=True)

    r: int
    g: int
    b: int

    @field_validator("r", "g", "b")
    @classmethod
    def validate_component(cls, v: int) -> int:
        """Validate that a channel fits in one byte."""
        if not RGB_COMPONENT_MIN <= v <= RGB_COMPONENT_MAX:
            raise ValueError(
                f"color component must be between {RGB_COMPONENT_MIN} and {RGB_COMPONENT_MAX}, got {v}"
            )
        return v

    @property
    def ansi(self) -> str:
        """SGR sequence selecting this color as foreground."""
        return rgb(self.r, self.g, self.b)


class Palette(BaseModel):
    """Color assignment per token category, shared by every language.

    Attributes:
        keyword: Color for reserved words.
        string: Color for single and double quoted literals.
        comment: Color for single-line comments.
        number: Color for integer and decimal literals.
    """

    model_config = ConfigDict(frozen=True)

    keyword: RGB = RGB(r=0x00, g=0x88, b=0xFF)
    string: RGB = RGB(r=0xFF, g=0x88, b=0x00)
    comment: RGB = RGB(r=0x88, g=0x88, b=0x88)
    number: RGB = RGB(r=0xFF, g=0x00, b=0xFF)

    def color_for(self, category: TokenCategory) -> str:
        """Return the SGR sequence for a token category."""
        color: RGB = getattr(self, category.value)
        return color.ansi


DEFAULT_PALETTE = Palette()
