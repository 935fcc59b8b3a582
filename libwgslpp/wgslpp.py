"""wgslpp core entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libwgslpp.preprocessor import PreprocessorConfig, preprocess_shader_file
from libwgslpp.validator import validate_preprocessed_shader

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from libwgslpp.preprocessor.macros import MacrosRegistry
    from libwgslpp.shader import PreprocessedShader
    from libwgslpp.validator import ValidatorDriverProtocol


def process_input_file(  # noqa: PLR0913
    filepath: Path,
    include_paths: Iterable[Path],
    *,
    macros: MacrosRegistry,
    validator: ValidatorDriverProtocol | None = None,
    macro_expansion_depth_limit: int | None = None,
    include_depth_limit: int | None = None,
    on_warning: Callable[[str], None] | None = None,
) -> PreprocessedShader:
    """Core entry for wgslpp API.

    Preprocess given filepath down to final shader text,
    and pass it through validator if one is given (validator errors are raised as-is).
    """
    config = PreprocessorConfig(include_search_paths=list(include_paths))
    if macro_expansion_depth_limit is not None:
        config.macro_expansion_depth_limit = macro_expansion_depth_limit
    if include_depth_limit is not None:
        config.include_depth_limit = include_depth_limit

    shader = preprocess_shader_file(
        filepath,
        macros=macros,
        config=config,
        on_warning=on_warning,
    )

    if validator is not None:
        validate_preprocessed_shader(shader, validator)
    return shader
