"""Tests for UX error messages module."""

from __future__ import annotations

import pytest

from hilite.ux.messages import ERROR_MESSAGES, format_error_message


class TestErrorMessagesConstant:
    """Tests for ERROR_MESSAGES constant."""

    def test_error_messages_structure(self) -> None:
        """ERROR_MESSAGES should map codes to non-empty templates."""
        assert set(ERROR_MESSAGES) == {"usage", "cannot_open"}
        for value in ERROR_MESSAGES.values():
            assert isinstance(value, str) and value.strip()


class TestFormatErrorMessage:
    """Tests for format_error_message function."""

    @pytest.mark.parametrize(
        "code,kwargs,expected",
        [
            ("usage", {"program": "./hilite"}, "Usage: ./hilite filename"),
            ("cannot_open", {"filename": "a b.cpp"}, "Cannot open file a b.cpp"),
        ],
    )
    def test_formats_template(self, code: str, kwargs: dict[str, str], expected: str) -> None:
        assert format_error_message(code, **kwargs) == expected

    def test_unknown_code_raises(self) -> None:
        with pytest.raises(KeyError):
            format_error_message("bogus")

    def test_missing_placeholder_raises(self) -> None:
        with pytest.raises(KeyError):
            format_error_message("usage")
