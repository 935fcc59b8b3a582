from __future__ import annotations

from typing import TYPE_CHECKING

from .diagnostic import parse_validator_diagnostic
from .exceptions import ShaderValidationError

if TYPE_CHECKING:
    from libwgslpp.shader import PreprocessedShader

    from .drivers import ValidatorDriverProtocol


def validate_preprocessed_shader(
    shader: PreprocessedShader,
    driver: ValidatorDriverProtocol,
) -> None:
    """Pass preprocessed shader into validator, raise an error with mapped diagnostic if it is rejected."""
    process = driver.validate(shader.text)
    if process.returncode == 0:
        return

    output = "\n".join(stream for stream in (process.stderr, process.stdout) if stream)
    diagnostic = parse_validator_diagnostic(output).mapped_to(shader)
    raise ShaderValidationError(validator=driver.name, diagnostic=diagnostic)
