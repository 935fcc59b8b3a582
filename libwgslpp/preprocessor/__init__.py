"""Preprocessor: directives (`#include`, `#define`, `#undef`) and macro expansion."""

from .config import PreprocessorConfig
from .preprocessor import preprocess_lines, preprocess_shader_file, preprocess_source

__all__ = [
    "PreprocessorConfig",
    "preprocess_lines",
    "preprocess_shader_file",
    "preprocess_source",
]
