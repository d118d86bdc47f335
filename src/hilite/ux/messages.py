"""Error messages shown on the error stream.

The wording is fixed; scripts that wrap hilite match on it.
"""

from __future__ import annotations

# Error message templates with placeholders
ERROR_MESSAGES: dict[str, str] = {
    "usage": "Usage: {program} filename",
    "cannot_open": "Cannot open file {filename}",
}


def format_error_message(error_code: str, **kwargs: str) -> str:
    """Format an error message with context values.

    Args:
        error_code: The error code (key in ERROR_MESSAGES).
        **kwargs: Values to substitute into the message template.

    Returns:
        The formatted message.

    Raises:
        KeyError: If the code is unknown or a placeholder value is missing.

    Example:
        >>> format_error_message("usage", program="hilite")
        'Usage: hilite filename'
    """
    return ERROR_MESSAGES[error_code].format(**kwargs)
