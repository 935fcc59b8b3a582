"""Validator adapter: passes preprocessed shader into an external validator."""

from .diagnostic import ValidationDiagnostic, parse_validator_diagnostic
from .drivers import ValidatorDriverProtocol, get_validator_driver
from .exceptions import ShaderValidationError, ValidatorNotInstalledError
from .validator import validate_preprocessed_shader

__all__ = [
    "ShaderValidationError",
    "ValidationDiagnostic",
    "ValidatorDriverProtocol",
    "ValidatorNotInstalledError",
    "get_validator_driver",
    "parse_validator_diagnostic",
    "validate_preprocessed_shader",
]
