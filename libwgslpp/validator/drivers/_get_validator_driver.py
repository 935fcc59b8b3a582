from __future__ import annotations

from typing import TYPE_CHECKING

from ._driver_protocol import ValidatorDriverProtocol
from .naga import NagaValidatorDriver

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

_drivers = [NagaValidatorDriver]


def get_validator_driver(executable: Path | None = None) -> ValidatorDriverProtocol | None:
    """Get installed validator (driver).

    Returns None if no suitable validator is installed
    """
    if executable is not None:
        if not NagaValidatorDriver.is_installed(executable=executable):
            return None
        return NagaValidatorDriver(executable=executable)

    for driver in _drivers:
        if driver.is_installed():
            return driver()
    return None


def get_all_drivers() -> Iterable[type[ValidatorDriverProtocol]]:
    """Acquire list of all drivers that is used."""
    return _drivers
