from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libwgslpp.preprocessor.macros.expander import DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_INCLUDE_DEPTH_LIMIT = 64


@dataclass
class PreprocessorConfig:
    """Configuration for preprocessor.

    Limits are here to fail fatally instead of overflowing call stack on malicious or buggy input
    """

    # Additional directories to search for included files
    # Quoted includes are searched relative to includer first, then in these (in order)
    include_search_paths: list[Path] = field(default_factory=list)

    # How much nested macro expansions are allowed within single line
    macro_expansion_depth_limit: int = field(default=DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT)

    # How much files may be nested by includes (top-level file counts as one)
    include_depth_limit: int = field(default=DEFAULT_INCLUDE_DEPTH_LIMIT)
