from __future__ import annotations

import sys
from typing import Literal, NoReturn

CLIMessageLevel = Literal["INFO", "WARNING", "ERROR", "SUCCESS"]


def cli_message(level: CLIMessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit an message to the user of an CLI.

    Messages are written into stderr, as stdout is reserved for the toolchain output (preprocessed shader).
    INFO messages are only shown within verbose mode.
    """
    if level == "INFO" and not verbose:
        return
    print(f"[{level}] {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error message and exit with failure exit code."""
    cli_message(level="ERROR", text=text)
    sys.exit(1)
