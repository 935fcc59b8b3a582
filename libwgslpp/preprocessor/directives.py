from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .helpers import find_word_end, find_word_start
from .keywords import DIRECTIVE_MARK, WORD_TO_PREPROCESSOR_KEYWORD, PreprocessorKeyword

if TYPE_CHECKING:
    from libwgslpp.location import SourceLocation
    from libwgslpp.normalizer import LogicalLine


@dataclass(frozen=True)
class Directive:
    """Preprocessor directive line (e.g `#define NAME body`)."""

    keyword: PreprocessorKeyword

    # Real text of directive keyword within source (e.g `#define`)
    text: str

    # Rest of an logical line after keyword, with surrounding whitespace stripped
    arguments: str

    # Location of directive mark
    location: SourceLocation


def parse_directive_from_line(line: LogicalLine) -> Directive | None:
    """Classify logical line as an directive, or return None if line is ordinary text.

    Directive is an line that begins (ignoring leading whitespace) with mark immediately followed by known keyword,
    keyword itself must be followed by whitespace or end of line.
    """
    starts_at = find_word_start(line.text, 0)
    if not line.text.startswith(DIRECTIVE_MARK, starts_at):
        return None

    word_ends_at = find_word_end(line.text, starts_at)
    word = line.text[starts_at:word_ends_at]
    if (keyword := WORD_TO_PREPROCESSOR_KEYWORD.get(word)) is None:
        return None

    return Directive(
        keyword=keyword,
        text=word,
        arguments=line.text[word_ends_at:].strip(),
        location=line.location.shift_col_number(starts_at),
    )


def is_unknown_directive_line(line: LogicalLine) -> bool:
    """Is given line looks like an directive but it has unsupported keyword (e.g `#ifdef`)."""
    return line.text.lstrip().startswith(DIRECTIVE_MARK) and parse_directive_from_line(line) is None
