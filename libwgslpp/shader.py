from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libwgslpp.location import SourceLocation
    from libwgslpp.normalizer import LogicalLine


@dataclass(frozen=True)
class PreprocessedShader:
    """Fully preprocessed shader text that is ready to be passed into validator/compiler.

    Text is not meant to be human-readable, formatting of an source is not preserved.
    """

    text: str

    # Origin of each line of preprocessed text (by index), so diagnostics may be mapped back to sources
    origins: tuple[SourceLocation, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[LogicalLine]) -> PreprocessedShader:
        lines = list(lines)
        return cls(
            text="".join(f"{line.text}\n" for line in lines),
            origins=tuple(line.location for line in lines),
        )

    def origin_of(self, line_number: int) -> SourceLocation | None:
        """Get original source location of an zero-based line within preprocessed text, if known."""
        if 0 <= line_number < len(self.origins):
            return self.origins[line_number]
        return None
