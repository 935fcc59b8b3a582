"""wgslpp: preprocessor for WGSL shaders.

Provides includes, C-style macros and comments stripping before shader is passed into validator/compiler.
"""

from .preprocessor import PreprocessorConfig, preprocess_shader_file, preprocess_source
from .shader import PreprocessedShader
from .wgslpp import process_input_file

__all__ = [
    "PreprocessedShader",
    "PreprocessorConfig",
    "preprocess_shader_file",
    "preprocess_source",
    "process_input_file",
]
