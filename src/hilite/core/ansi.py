"""ANSI SGR escape helpers.

Only foreground true-color sequences are produced: ``ESC[38;2;R;G;Bm`` to
set the color and ``ESC[0m`` to reset it.
"""

import re

from rich.color import Color

ESC = "\033"

RESET = f"{ESC}[0m"

# Matches any SGR sequence (parameters separated by ';', terminated by 'm')
SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def rgb(r: int, g: int, b: int) -> str:
    """Return the SGR sequence that sets a true-color foreground.

    Args:
        r: Red component (0-255).
        g: Green component (0-255).
        b: Blue component (0-255).

    Returns:
        Escape sequence such as ``"\\033[38;2;0;136;255m"``.
    """
    codes = Color.from_rgb(r, g, b).get_ansi_codes(foreground=True)
    return f"{ESC}[{';'.join(codes)}m"


def colorize(text: str, color_code: str) -> str:
    """Wrap text in a color code and a reset."""
    return f"{color_code}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove all SGR sequences from text."""
    return SGR_PATTERN.sub("", text)


__all__ = ["ESC", "RESET", "SGR_PATTERN", "colorize", "rgb", "strip_ansi"]
