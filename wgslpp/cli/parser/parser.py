from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast

from wgslpp.cli.output import cli_fatal_abort
from wgslpp.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

DEFINITION_VALUE_SEPARATOR = "="
DEFAULT_DEFINITION_VALUE = "1"


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    return CLIArguments(
        # Goals.
        version=bool(args.version),
        # Rest of these are mostly goal-specific
        source_filepath=_process_source_filepath(args),
        include_paths=_process_include_paths(args),
        definitions=_process_definitions(args),
        validate=bool(args.validate),
        validator_executable=_process_validator_executable(args),
        macro_expansion_depth_limit=_process_depth_limit(
            args.macro_expansion_depth_limit,
            option="--max-macro-depth",
        ),
        include_depth_limit=_process_depth_limit(
            args.include_depth_limit,
            option="--max-include-depth",
        ),
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_definitions(args: Namespace) -> dict[str, str]:
    """Process CLI propagated definitions as raw macro bodies."""
    user_definitions: dict[str, str] = {}

    raw_definitions = cast("list[str]", args.definitions)
    for cli_definition in raw_definitions:
        if DEFINITION_VALUE_SEPARATOR in cli_definition:
            name, value = cli_definition.split(DEFINITION_VALUE_SEPARATOR, maxsplit=1)
            user_definitions[name] = value

            continue
        user_definitions[cli_definition] = DEFAULT_DEFINITION_VALUE

    if any(not name.isidentifier() for name in user_definitions):
        return cli_fatal_abort(
            text="One of command-line definitions has name that is not an identifier, aborting as safe mechanism.",
        )

    return user_definitions


def _process_source_filepath(args: Namespace) -> Path | None:
    """Process input source file as path and validate it."""
    goal_requires_source = not args.version
    if args.source_file is None:
        if goal_requires_source:
            return cli_fatal_abort("Expected source file to preprocess!")
        return None

    path = Path(args.source_file)
    if goal_requires_source and not path.is_file():
        return cli_fatal_abort(
            text=f"Input source file `{path}` is not exists or is not an file, aborting as safe mechanism.",
        )

    return path


def _process_include_paths(args: Namespace) -> list[Path]:
    """Process user propagated include paths."""
    include_paths = [Path(include) for include in args.include]

    if any(not p.exists(follow_symlinks=True) or not p.is_dir() for p in include_paths):
        return cli_fatal_abort(
            text="One of user include path is not exists or is not an directory, aborting as safe mechanism.",
        )

    return include_paths


def _process_validator_executable(args: Namespace) -> Path | None:
    if not args.validator_executable:
        return None

    if not args.validate:
        return cli_fatal_abort(
            text="Validator executable has no effect without validation (`--validate`), aborting as safe mechanism.",
        )
    return Path(args.validator_executable)


def _process_depth_limit(limit: int, *, option: str) -> int:
    if limit <= 0:
        return cli_fatal_abort(text=f"Limit `{option}` must be an positive number, but got {limit}.")
    return limit
