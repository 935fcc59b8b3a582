from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from libwgslpp.normalizer._state import NormalizerState
from libwgslpp.normalizer.lines import LogicalLine

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Iterator
    from pathlib import Path

CONTINUATION_MARKER = "\\"

LINE_COMMENT = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"

LINE_TERMINATORS = "\r\n"


def normalize_source_lines(
    source: Path | Literal["cli", "toolchain"],
    lines: Iterable[str],
) -> Generator[LogicalLine]:
    """Stream logical lines via generator (join continuations and strip comments).

    Every physical line ending with continuation marker is folded with the next one,
    after that comments are removed from the folded (logical) line.
    Block comments may span several logical lines, so comment state is carried between them.

    :returns normalizer: Generator of logical lines, in order from top to bottom of an file
    """
    state = NormalizerState(path=source)
    physical_lines = enumerate(lines, start=0)

    for row, line in physical_lines:
        state.row = row
        logical_line, physical_lines_count = _join_continued_lines(line, physical_lines)
        yield LogicalLine(
            text=strip_comments_from_line(logical_line, state),
            location=state.current_location(),
            physical_lines_count=physical_lines_count,
        )


def normalize_source_text(
    source: Path | Literal["cli", "toolchain"],
    text: str,
) -> Generator[LogicalLine]:
    """Same as `normalize_source_lines` but for whole source text."""
    return normalize_source_lines(source, text.splitlines())


def strip_comments_from_line(line: str, state: NormalizerState) -> str:
    """Remove all comments from given logical line, comment is replaced with nothing.

    Modifies `in_block_comment` of state when block comment is left unclosed (or closed).
    """
    kept: list[str] = []

    col, col_ends_at = 0, len(line)
    while col < col_ends_at:
        if state.in_block_comment:
            closes_at = line.find(BLOCK_COMMENT_CLOSE, col)
            if closes_at == -1:
                # Whole rest of an line is inside comment
                break

            state.in_block_comment = False
            col = closes_at + len(BLOCK_COMMENT_CLOSE)
            continue

        comment_at = _find_comment_start(line, col)
        if comment_at == -1:
            kept.append(line[col:])
            break

        kept.append(line[col:comment_at])
        if line.startswith(LINE_COMMENT, comment_at):
            break

        state.in_block_comment = True
        col = comment_at + len(BLOCK_COMMENT_OPEN)

    return "".join(kept)


def _find_comment_start(line: str, start: int) -> int:
    """Find index of nearest comment mark (line or block one) or -1 if there is none."""
    marks = (
        line.find(LINE_COMMENT, start),
        line.find(BLOCK_COMMENT_OPEN, start),
    )
    return min((idx for idx in marks if idx != -1), default=-1)


def _join_continued_lines(
    line: str,
    physical_lines: Iterator[tuple[int, str]],
) -> tuple[str, int]:
    """Fold line with following ones while it ends with continuation marker.

    :returns: Joined line and count of physical lines consumed
    """
    line = line.rstrip(LINE_TERMINATORS)
    physical_lines_count = 1

    while _is_continued_line(line):
        line = line.rstrip().removesuffix(CONTINUATION_MARKER)
        if (next_line := next(physical_lines, None)) is None:
            # Continuation at the end of an file is just dropped
            break

        _, continuation = next_line
        line += continuation.rstrip(LINE_TERMINATORS)
        physical_lines_count += 1

    return line, physical_lines_count


def _is_continued_line(line: str) -> bool:
    return line.rstrip().endswith(CONTINUATION_MARKER)
