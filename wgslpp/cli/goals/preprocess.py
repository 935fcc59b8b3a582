from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libwgslpp.location import SourceLocation
from libwgslpp.preprocessor.macros import registry_from_raw_definitions
from libwgslpp.validator import ValidatorNotInstalledError, get_validator_driver
from libwgslpp.wgslpp import process_input_file
from wgslpp.cli.output import cli_message

if TYPE_CHECKING:
    from libwgslpp.validator import ValidatorDriverProtocol
    from wgslpp.cli.parser.arguments import CLIArguments


def cli_perform_preprocess_goal(args: CLIArguments) -> NoReturn:
    """Perform preprocess goal that emits preprocessed shader into stdout (optionally validated)."""
    assert args.source_filepath is not None, (
        "Cannot perform preprocess goal with no source file given!"
    )

    macros_registry = registry_from_raw_definitions(
        location=SourceLocation.cli(),
        definitions=args.definitions,
    )

    cli_message(
        level="INFO",
        text=f"Preprocessing `{args.source_filepath}`...",
        verbose=args.verbose,
    )
    shader = process_input_file(
        args.source_filepath,
        args.include_paths,
        macros=macros_registry,
        validator=_cli_get_validator_driver(args),
        macro_expansion_depth_limit=args.macro_expansion_depth_limit,
        include_depth_limit=args.include_depth_limit,
        on_warning=lambda text: cli_message(level="WARNING", text=text),
    )

    sys.stdout.write(shader.text)
    if args.validate:
        cli_message(
            level="SUCCESS",
            text="Preprocessed shader passed validation!",
            verbose=args.verbose,
        )
    return sys.exit(0)


def _cli_get_validator_driver(args: CLIArguments) -> ValidatorDriverProtocol | None:
    """Get validator driver if validation is requested, it is an error when it is not installed."""
    if not args.validate:
        return None

    driver = get_validator_driver(executable=args.validator_executable)
    if driver is None:
        raise ValidatorNotInstalledError(
            validator=str(args.validator_executable or "naga"),
        )

    cli_message(
        level="INFO",
        text=f"Validating preprocessed shader with `{driver.name}`...",
        verbose=args.verbose,
    )
    return driver
