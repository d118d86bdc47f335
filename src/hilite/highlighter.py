"""Leftmost-earliest line highlighting.

A line is scanned by repeatedly searching the unprocessed suffix with every
rule. The match that starts earliest wins; on a tie the rule listed first
wins, since a later rule only displaces the current pick with a strictly
smaller offset. Text before the winning match is emitted plain, the match is
wrapped in its color code, and scanning resumes after it.

Every pass re-runs all patterns from scratch on a fresh suffix string, which
is O(rules x remaining length) per span. This is fine for interactive,
line-oriented use and keeps offsets relative to the current suffix: ``\\b``
and ``$`` see the start of the suffix as if it were the start of a line.
"""

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from hilite.core.ansi import colorize
from hilite.rules import HighlightRule


@dataclass(frozen=True)
class Segment:
    """A contiguous piece of a line.

    Attributes:
        text: The exact source text of the piece.
        color_code: SGR sequence for a matched span, or None for plain text.
    """

    text: str
    color_code: str | None = None

    def render(self) -> str:
        if self.color_code is None:
            return self.text
        return colorize(self.text, self.color_code)


def _first_nonempty_match(pattern: re.Pattern[str], text: str) -> re.Match[str] | None:
    # An empty match can never advance the cursor, so look past it.
    for match in pattern.finditer(text):
        if match.end() > match.start():
            return match
    return None


def _earliest_match(remaining: str, rules: Sequence[HighlightRule]) -> tuple[re.Match[str], HighlightRule] | None:
    best: tuple[re.Match[str], HighlightRule] | None = None
    for rule in rules:
        match = _first_nonempty_match(rule.pattern, remaining)
        if match is None:
            continue
        if best is None or match.start() < best[0].start():
            best = (match, rule)
    return best


def tokenize_line(line: str, rules: Sequence[HighlightRule]) -> list[Segment]:
    """Split a line into plain and colored segments.

    Concatenating the ``text`` of the returned segments always reproduces
    ``line`` exactly. Empty plain segments are not emitted.

    Args:
        line: A single line without its terminator.
        rules: Ordered rule table.

    Returns:
        Segments in line order.
    """
    segments: list[Segment] = []
    remaining = line

    while remaining:
        found = _earliest_match(remaining, rules)
        if found is None:
            segments.append(Segment(remaining))
            break

        match, rule = found
        if match.start() > 0:
            segments.append(Segment(remaining[: match.start()]))
        segments.append(Segment(match.group(0), rule.color_code))
        remaining = remaining[match.end() :]

    return segments


def render_segments(segments: Iterable[Segment]) -> str:
    """Join segments into a string with color codes and resets applied."""
    return "".join(segment.render() for segment in segments)


def highlight_line(line: str, rules: Sequence[HighlightRule]) -> str:
    """Highlight one line and terminate it with a single newline.

    With an empty rule table the result is ``line + "\\n"``.
    """
    return render_segments(tokenize_line(line, rules)) + "\n"


class LineHighlighter:
    """Highlights lines against one rule table.

    Args:
        rules: Ordered rule table, usually from ``rules_for``.
    """

    def __init__(self, rules: Sequence[HighlightRule]) -> None:
        self.rules = tuple(rules)

    def highlight(self, line: str) -> str:
        return highlight_line(line, self.rules)

    def highlight_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield each highlighted line before pulling the next input line."""
        for line in lines:
            yield highlight_line(line, self.rules)


__all__ = [
    "LineHighlighter",
    "Segment",
    "highlight_line",
    "render_segments",
    "tokenize_line",
]
