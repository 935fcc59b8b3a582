from __future__ import annotations

import sys
from pathlib import Path

from wgslpp.cli.output import cli_message


def cli_get_executable_program() -> str:
    """Name shown as `prog` in usage and messages (`wgslpp` when installed)."""
    return Path(sys.argv[0]).name


def warn_on_improper_installation(executable: str) -> None:
    """Running a script file (e.g `python wgslpp/__main__.py`) bypasses the installed console script."""
    if executable.endswith(".py"):
        cli_message(
            level="WARNING",
            text=f"Invoked as '{executable}', install package to get `wgslpp` executable",
            verbose=True,
        )
