from __future__ import annotations

from typing import TYPE_CHECKING

from libwgslpp.location import SourceLocation
from libwgslpp.normalizer import LogicalLine, normalize_source_lines
from libwgslpp.shader import PreprocessedShader

from ._state import PreprocessorState
from .config import PreprocessorConfig
from .directives import is_unknown_directive_line, parse_directive_from_line
from .include import (
    PreprocessorIncludeNotFoundError,
    get_include_search_directories,
    parse_include_path_from_directive,
    read_included_source_lines,
    resolve_include_path,
)
from .keywords import PreprocessorKeyword
from .macros import (
    MacrosRegistry,
    consume_macro_definition_from_directive,
    consume_macro_undefine_from_directive,
    expand_macros_in_text,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Iterable
    from pathlib import Path

    from .directives import Directive

IN_MEMORY_SOURCE_FILENAME = "<source>"


def preprocess_shader_file(
    path: Path,
    *,
    macros: MacrosRegistry | None = None,
    config: PreprocessorConfig | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> PreprocessedShader:
    """Preprocess shader file by resolving includes, macros and stripping comments.

    :param macros: Initial definitions (e.g from CLI), registry itself is not modified
    :param on_warning: Callback for non-fatal diagnostics
    """
    location = SourceLocation.toolchain()
    lines = read_included_source_lines(path, location=location, raw_path=str(path))
    return _preprocess_top_level(path, lines, macros, config, on_warning)


def preprocess_source(  # noqa: PLR0913
    source: str,
    base_path: Path,
    *,
    filename: str = IN_MEMORY_SOURCE_FILENAME,
    macros: MacrosRegistry | None = None,
    config: PreprocessorConfig | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> PreprocessedShader:
    """Preprocess in-memory shader source, includes are resolved relative to given base path.

    :param filename: Name of an source that is used within diagnostics (as it was located inside base path)
    """
    path = base_path / filename
    return _preprocess_top_level(path, source.splitlines(), macros, config, on_warning)


def preprocess_lines(
    path: Path,
    lines: Iterable[str],
    state: PreprocessorState,
    *,
    included_from: SourceLocation,
) -> Generator[LogicalLine]:
    """Preprocess given physical lines of an file into expanded logical lines on the fly.

    Simply, wraps an normalizer and process each logical line:
    directives mutates macros or splice included files, other lines are expanded.
    File is kept on include stack while it is processed.
    """
    with state.include_stack.entered(path.resolve(), included_from):
        yield from _preprocess_entered_lines(path, lines, state)


def _preprocess_entered_lines(
    path: Path,
    lines: Iterable[str],
    state: PreprocessorState,
) -> Generator[LogicalLine]:
    for line in normalize_source_lines(path, lines):
        directive = parse_directive_from_line(line)
        if directive is None:
            yield _expand_macros_in_line(line, state)
            continue

        match directive.keyword:
            case PreprocessorKeyword.INCLUDE:
                yield from _preprocess_included_file(directive, path, state)
            case PreprocessorKeyword.DEFINE:
                consume_macro_definition_from_directive(directive, state.macros)
            case PreprocessorKeyword.UNDEFINE:
                consume_macro_undefine_from_directive(directive, state.macros)


def _preprocess_top_level(
    path: Path,
    lines: Iterable[str],
    macros: MacrosRegistry | None,
    config: PreprocessorConfig | None,
    on_warning: Callable[[str], None] | None,
) -> PreprocessedShader:
    # Registry is always fresh for each invocation, so invocations never interfere
    state = PreprocessorState(
        macros=macros.copy() if macros else MacrosRegistry(),
        config=config or PreprocessorConfig(),
        on_warning=on_warning,
    )
    preprocessor = preprocess_lines(
        path,
        lines,
        state,
        included_from=SourceLocation.toolchain(),
    )
    return PreprocessedShader.from_lines(preprocessor)


def _preprocess_included_file(
    directive: Directive,
    includer: Path,
    state: PreprocessorState,
) -> Generator[LogicalLine]:
    """Resolve `#include` directive and preprocess included file within same state."""
    raw_path, search_paths_only = parse_include_path_from_directive(directive)
    directories = get_include_search_directories(
        includer,
        state.config.include_search_paths,
        search_paths_only=search_paths_only,
    )

    path = resolve_include_path(raw_path, directories)
    if path is None:
        raise PreprocessorIncludeNotFoundError(
            location=directive.location,
            raw_path=raw_path,
            searched_paths=[directory / raw_path for directory in directories],
        )

    # Cycle is checked before included file is even opened
    with state.include_stack.entered(path, directive.location):
        lines = read_included_source_lines(
            path,
            location=directive.location,
            raw_path=raw_path,
        )
        yield from _preprocess_entered_lines(path, lines, state)


def _expand_macros_in_line(line: LogicalLine, state: PreprocessorState) -> LogicalLine:
    if is_unknown_directive_line(line):
        state.warn(
            f"Unsupported preprocessor directive at {line.location} is left as-is: `{line.text.strip()}`",
        )

    text = expand_macros_in_text(
        line.text,
        state.macros,
        line.location,
        depth_limit=state.config.macro_expansion_depth_limit,
    )
    return LogicalLine(
        text=text,
        location=line.location,
        physical_lines_count=line.physical_lines_count,
    )
