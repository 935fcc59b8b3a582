from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of any text within shader source file (line and column are zero-based)."""

    line_number: int
    col_number: int

    filepath: Path | None = None
    source: Literal["file", "cli", "toolchain"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "cli":
            return "'(command-line-interface)'"
        if self.source == "toolchain":
            return "'(wgslpp-toolchain-internals)'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}:{self.col_number + 1}'"

    def shift_col_number(self, by: int) -> SourceLocation:
        return SourceLocation(
            line_number=self.line_number,
            col_number=self.col_number + by,
            filepath=self.filepath,
            source=self.source,
        )

    @classmethod
    def cli(cls) -> SourceLocation:
        """Create a location for command-line originated text (e.g `-D` definitions)."""
        return cls(
            line_number=0,
            col_number=0,
            source="cli",
        )

    @classmethod
    def toolchain(cls) -> SourceLocation:
        """Create a location for toolchain originated text (e.g in-memory sources)."""
        return cls(
            line_number=0,
            col_number=0,
            source="toolchain",
        )
