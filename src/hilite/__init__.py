"""hilite - regex-driven ANSI syntax highlighting for the terminal."""

from loguru import logger

__version__ = "0.1.0"

# Library convention for loguru: stay silent until a caller opts in.
logger.disable("hilite")
