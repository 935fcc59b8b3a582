"""Normalizer: comments stripping and continuation joining into logical lines."""

from .lines import LogicalLine
from .normalizer import (
    normalize_source_lines,
    normalize_source_text,
    strip_comments_from_line,
)

__all__ = [
    "LogicalLine",
    "normalize_source_lines",
    "normalize_source_text",
    "strip_comments_from_line",
]
