"""Include resolution (`#include` directive)."""

from .exceptions import PreprocessorIncludeCycleError, PreprocessorIncludeNotFoundError
from .resolver import (
    get_include_search_directories,
    parse_include_path_from_directive,
    read_included_source_lines,
    resolve_include_path,
)
from .stack import IncludeStack

__all__ = [
    "IncludeStack",
    "PreprocessorIncludeCycleError",
    "PreprocessorIncludeNotFoundError",
    "get_include_search_directories",
    "parse_include_path_from_directive",
    "read_included_source_lines",
    "resolve_include_path",
]
