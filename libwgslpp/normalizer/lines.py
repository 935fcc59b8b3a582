from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libwgslpp.location import SourceLocation


@dataclass(frozen=True)
class LogicalLine:
    """Single logical line obtained by normalizer.

    Logical line is one or more physical lines joined by continuation marker,
    with all comments already stripped.
    """

    # Normalized text without line terminator
    text: str

    # Location of first physical line that logical line is built from
    location: SourceLocation

    # How much physical lines was joined into that logical line
    physical_lines_count: int = 1
