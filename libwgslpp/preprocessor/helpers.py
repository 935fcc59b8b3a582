from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def find_word_start(text: str, start: int) -> int:
    """Find start column index of an word."""
    return _find_column(text, start, lambda s: not s.isspace())


def find_word_end(text: str, start: int) -> int:
    """Find end column index of an word."""
    return _find_column(text, start, lambda s: s.isspace())


def find_identifier_end(text: str, start: int) -> int:
    """Find end column index of an run of identifier characters."""
    return _find_column(text, start, lambda s: not (s.isalnum() or s == "_"))


def _find_column(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Find index of an column by predicate. E.g `.index()` but with predicate."""
    end = len(text)
    while start < end and not predicate(text[start]):
        start += 1
    return start
