"""Drive the highlighter over a whole file.

The rule table is resolved once from the filename, then each line is read,
highlighted and written before the next one is read.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from loguru import logger

from hilite.errors import SourceOpenError
from hilite.highlighter import LineHighlighter
from hilite.rules import rules_for

# Decode with surrogateescape so bytes that are not valid UTF-8 survive the
# round trip through str and are written back unchanged.
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "surrogateescape"


def file_extension(filename: str) -> str:
    """Return the text after the last '.' in filename, or "" if there is none.

    The whole name is searched, so "archive.tar.gz" yields "gz".
    """
    _, dot, extension = filename.rpartition(".")
    return extension if dot else ""


def read_lines(source: TextIO) -> Iterator[str]:
    """Yield lines with exactly one trailing "\\n" removed.

    The stream should be opened with ``newline="\\n"`` so carriage returns are
    kept as part of the line.
    """
    for line in source:
        yield line[:-1] if line.endswith("\n") else line


def encode_output(text: str) -> bytes:
    """Encode highlighted text the same way the source was decoded."""
    return text.encode(SOURCE_ENCODING, SOURCE_ERRORS)


def highlight_lines(filename: str, lines: Iterable[str]) -> Iterator[str]:
    """Highlight already-read lines using the table for filename's extension."""
    highlighter = LineHighlighter(rules_for(file_extension(filename)))
    return highlighter.highlight_lines(lines)


def highlight_file(filename: str, write: Callable[[str], object]) -> int:
    """Highlight a file line by line.

    Args:
        filename: Path of the source file, as given by the user.
        write: Called once per highlighted line (newline included).

    Returns:
        Number of lines written.

    Raises:
        SourceOpenError: If the file cannot be opened for reading.
    """
    try:
        source = open(filename, encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS, newline="\n")
    except OSError as e:
        logger.debug(f"Failed to open {filename}: {e}")
        raise SourceOpenError(filename) from e

    count = 0
    with source:
        logger.debug(f"Highlighting {filename}")
        for rendered in highlight_lines(filename, read_lines(source)):
            write(rendered)
            count += 1

    logger.debug(f"Wrote {count} lines for {filename}")
    return count


__all__ = [
    "SOURCE_ENCODING",
    "SOURCE_ERRORS",
    "encode_output",
    "file_extension",
    "highlight_file",
    "highlight_lines",
    "read_lines",
]
