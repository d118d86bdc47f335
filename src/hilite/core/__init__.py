"""Core helpers for hilite."""
