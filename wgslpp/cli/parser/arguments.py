from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole wgslpp toolchain process."""

    source_filepath: Path | None

    include_paths: list[Path]
    definitions: dict[str, str]

    version: bool

    validate: bool
    validator_executable: Path | None

    macro_expansion_depth_limit: int
    include_depth_limit: int

    verbose: bool

    cli_debug_user_friendly_errors: bool
