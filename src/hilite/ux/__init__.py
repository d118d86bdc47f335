"""User-facing text for hilite."""

from hilite.ux.messages import ERROR_MESSAGES, format_error_message

__all__ = ["ERROR_MESSAGES", "format_error_message"]
