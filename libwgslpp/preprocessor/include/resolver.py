from __future__ import annotations

from typing import TYPE_CHECKING

from libwgslpp.normalizer.io import read_source_file_lines
from libwgslpp.preprocessor.exceptions import PreprocessorIncludeMalformedPathError
from libwgslpp.preprocessor.keywords import PreprocessorKeyword

from .exceptions import PreprocessorIncludeNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from libwgslpp.location import SourceLocation
    from libwgslpp.preprocessor.directives import Directive

# Quoted paths are searched near includer first, angle-bracketed only within search paths
INCLUDE_QUOTES = {'"': '"', "<": ">"}


def parse_include_path_from_directive(directive: Directive) -> tuple[str, bool]:
    """Consume include path from `#include` directive.

    :returns: Raw path (without quotes) and is that path should be searched only within search paths (`<path>` form)
    """
    assert directive.keyword == PreprocessorKeyword.INCLUDE

    raw = directive.arguments
    if len(raw) < 2 or raw[0] not in INCLUDE_QUOTES:  # noqa: PLR2004
        raise PreprocessorIncludeMalformedPathError(directive.location, raw)

    open_quote, close_quote = raw[0], INCLUDE_QUOTES[raw[0]]
    path = raw[1:-1]
    if raw[-1] != close_quote or not path.strip() or close_quote in path:
        raise PreprocessorIncludeMalformedPathError(directive.location, raw)

    return path, open_quote != '"'


def get_include_search_directories(
    includer: Path,
    search_paths: Iterable[Path],
    *,
    search_paths_only: bool,
) -> list[Path]:
    """Get directories where to search included file, in order of priority."""
    directories = [] if search_paths_only else [includer.parent]
    directories.extend(search_paths)
    return directories


def resolve_include_path(raw_path: str, directories: Iterable[Path]) -> Path | None:
    """Resolve raw include path to an absolute file path, or None if it is not found anywhere."""
    for directory in directories:
        candidate = directory / raw_path
        if candidate.is_file():
            return candidate.resolve()
    return None


def read_included_source_lines(
    path: Path,
    *,
    location: SourceLocation,
    raw_path: str,
) -> list[str]:
    """Read included file physical lines, failure to read is treated as an file that cannot be included."""
    try:
        return read_source_file_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        raise PreprocessorIncludeNotFoundError(
            location=location,
            raw_path=raw_path,
            searched_paths=[path],
            reason=str(e),
        ) from e
