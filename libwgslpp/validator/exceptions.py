from libwgslpp.exceptions import WgslppError
from libwgslpp.validator.diagnostic import ValidationDiagnostic


class ShaderValidationError(WgslppError):
    """Preprocessed shader was rejected by an validator."""

    def __init__(self, validator: str, diagnostic: ValidationDiagnostic) -> None:
        self.validator = validator
        self.diagnostic = diagnostic

    def __repr__(self) -> str:
        where = ""
        if self.diagnostic.line_number is not None:
            where = f" at line {self.diagnostic.line_number + 1} of preprocessed shader"
        origin = (
            f"\nLine originates from {self.diagnostic.origin}\n"
            if self.diagnostic.origin
            else ""
        )
        return f"""Shader validation failed ({self.validator}){where}!

{self.diagnostic.message}
{origin}
{self.generic_error_name}"""


class ValidatorNotInstalledError(WgslppError):
    def __init__(self, validator: str) -> None:
        self.validator = validator

    def __repr__(self) -> str:
        return f"""Shader validator `{self.validator}` is not installed or not found!

Install it (e.g `cargo install naga-cli`) or skip validation step.

{self.generic_error_name}"""
