"""Rule tables mapping file extensions to highlighting rules.

Each language has an ordered tuple of ``HighlightRule`` objects. Order only
matters as a tie-break when two rules match at the same offset, so it is
spelled out explicitly per language rather than left to construction order:

    1. keywords   2. double-quoted strings   3. single-quoted strings
    4. comments   5. numbers

Tables are built once at import time and shared read-only.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from loguru import logger

from hilite.config.settings import DEFAULT_PALETTE, Palette, TokenCategory

C_KEYWORDS: tuple[str, ...] = (
    "alignas", "alignof", "and", "and_eq", "asm", "auto", "bool", "break",
    "case", "catch", "char", "class", "const", "constexpr", "const_cast",
    "continue", "decltype", "default", "delete", "do", "double",
    "dynamic_cast", "else", "enum", "explicit", "export", "extern", "false",
    "float", "for", "friend", "goto", "if", "inline", "int", "long",
    "mutable", "namespace", "new", "noexcept", "nullptr", "operator",
    "private", "protected", "public", "register", "reinterpret_cast",
    "return", "short", "signed", "sizeof", "static", "static_assert",
    "static_cast", "struct", "switch", "template", "this", "thread_local",
    "throw", "true", "try", "typedef", "typeid", "typename", "union",
    "unsigned", "using", "virtual", "void", "volatile", "wchar_t", "while",
    "xor", "xor_eq",
)  # fmt: skip

PYTHON_KEYWORDS: tuple[str, ...] = (
    "False", "None", "True", "and", "as", "assert", "async", "await",
    "break", "class", "continue", "def", "del", "elif", "else", "except",
    "finally", "for", "from", "global", "if", "import", "in", "is", "lambda",
    "nonlocal", "not", "or", "pass", "raise", "return", "try", "while",
    "with", "yield",
)  # fmt: skip

# ECMAScript-style wildcard: any character except a line terminator. Unlike
# Python's '.', it stops at '\r', so a comment on a CRLF line never matches.
ANY_CHAR = r"[^\n\r\u2028\u2029]"

# Pattern sources. The two string styles differ between languages but accept
# the same inputs: any run of non-quote characters and backslash escapes.
C_DOUBLE_QUOTED = rf'"[^"\\]*(\\{ANY_CHAR}[^"\\]*)*"'
C_SINGLE_QUOTED = rf"'[^'\\]*(\\{ANY_CHAR}[^'\\]*)*'"
C_LINE_COMMENT = rf"//{ANY_CHAR}*\Z"

PY_DOUBLE_QUOTED = rf'"([^"\\]|\\{ANY_CHAR})*"'
PY_SINGLE_QUOTED = rf"'([^'\\]|\\{ANY_CHAR})*'"
PY_LINE_COMMENT = rf"#{ANY_CHAR}*\Z"

NUMBER = r"\b\d+(\.\d+)?\b"

# \b and \d follow ASCII word/digit classes, as in a byte-oriented matcher.
PATTERN_FLAGS = re.ASCII


@dataclass(frozen=True)
class HighlightRule:
    """A compiled pattern and the color code applied to its matches.

    Attributes:
        pattern: Regular expression searched within a single line.
        color_code: SGR sequence emitted before the matched span.
    """

    pattern: re.Pattern[str]
    color_code: str

    @classmethod
    def compile(cls, source: str, color_code: str, flags: int = PATTERN_FLAGS) -> "HighlightRule":
        """Build a rule from an uncompiled pattern source."""
        return cls(pattern=re.compile(source, flags), color_code=color_code)


def keyword_pattern(keywords: tuple[str, ...]) -> str:
    """Return a word-bounded alternation of the given reserved words."""
    return r"\b(" + "|".join(keywords) + r")\b"


def _c_family_rules(palette: Palette) -> tuple[HighlightRule, ...]:
    string = palette.color_for(TokenCategory.STRING)
    return (
        HighlightRule.compile(keyword_pattern(C_KEYWORDS), palette.color_for(TokenCategory.KEYWORD)),
        HighlightRule.compile(C_DOUBLE_QUOTED, string),
        HighlightRule.compile(C_SINGLE_QUOTED, string),
        HighlightRule.compile(C_LINE_COMMENT, palette.color_for(TokenCategory.COMMENT)),
        HighlightRule.compile(NUMBER, palette.color_for(TokenCategory.NUMBER)),
    )


def _python_rules(palette: Palette) -> tuple[HighlightRule, ...]:
    string = palette.color_for(TokenCategory.STRING)
    return (
        HighlightRule.compile(keyword_pattern(PYTHON_KEYWORDS), palette.color_for(TokenCategory.KEYWORD)),
        HighlightRule.compile(PY_DOUBLE_QUOTED, string),
        HighlightRule.compile(PY_SINGLE_QUOTED, string),
        HighlightRule.compile(PY_LINE_COMMENT, palette.color_for(TokenCategory.COMMENT)),
        HighlightRule.compile(NUMBER, palette.color_for(TokenCategory.NUMBER)),
    )


# Extension lookup is exact and case-sensitive.
EXTENSION_LANGUAGES: Mapping[str, str] = MappingProxyType(
    {
        "cpp": "cpp",
        "hpp": "cpp",
        "c": "cpp",
        "h": "cpp",
        "py": "python",
    }
)


def build_rule_tables(palette: Palette = DEFAULT_PALETTE) -> Mapping[str, tuple[HighlightRule, ...]]:
    """Build the language identifier to rule table mapping for a palette.

    Args:
        palette: Colors to assign to each token category.

    Returns:
        Read-only mapping of language identifier to its ordered rules.
    """
    return MappingProxyType(
        {
            "cpp": _c_family_rules(palette),
            "python": _python_rules(palette),
        }
    )


RULE_TABLES = build_rule_tables()


def supported_extensions() -> frozenset[str]:
    """Return the set of extensions that have a rule table."""
    return frozenset(EXTENSION_LANGUAGES)


def language_for_extension(extension: str) -> str | None:
    """Resolve a file extension to a language identifier, if any."""
    return EXTENSION_LANGUAGES.get(extension)


def rules_for(
    extension: str,
    tables: Mapping[str, tuple[HighlightRule, ...]] = RULE_TABLES,
) -> tuple[HighlightRule, ...]:
    """Return the ordered rules for a file extension.

    Unknown extensions yield an empty tuple, which leaves every line as is.

    Args:
        extension: Extension without the leading dot (e.g. "cpp", "py").
        tables: Rule tables to look up; defaults to the shared tables.

    Returns:
        Ordered tuple of HighlightRule.
    """
    language = language_for_extension(extension)
    if language is None:
        logger.debug(f"No rule table for extension {extension!r}")
        return ()
    rules = tables.get(language, ())
    logger.debug(f"Extension {extension!r} resolved to {language} ({len(rules)} rules)")
    return rules


__all__ = [
    "ANY_CHAR",
    "C_KEYWORDS",
    "EXTENSION_LANGUAGES",
    "PYTHON_KEYWORDS",
    "RULE_TABLES",
    "HighlightRule",
    "build_rule_tables",
    "keyword_pattern",
    "language_for_extension",
    "rules_for",
    "supported_extensions",
]
