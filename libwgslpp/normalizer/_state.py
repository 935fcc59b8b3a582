from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from libwgslpp.location import SourceLocation

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=False)
class NormalizerState:
    """State for normalization which only required for internal usages."""

    path: Path | Literal["cli", "toolchain"]

    # Row of first physical line of an logical line that is currently normalized
    row: int = 0

    # Set when block comment is opened but not yet closed, persists across logical lines
    in_block_comment: bool = False

    def current_location(self) -> SourceLocation:
        if self.path == "cli":
            return SourceLocation.cli()
        if self.path == "toolchain":
            return SourceLocation.toolchain()

        return SourceLocation(
            filepath=self.path,
            line_number=self.row,
            col_number=0,
        )
