"""Validator drivers (e.g external shader validators)."""

from ._driver_protocol import ValidatorDriverProtocol
from ._get_validator_driver import get_all_drivers, get_validator_driver
from .naga import NagaValidatorDriver

__all__ = [
    "NagaValidatorDriver",
    "ValidatorDriverProtocol",
    "get_all_drivers",
    "get_validator_driver",
]
