import argparse
from argparse import ArgumentParser

from libwgslpp.preprocessor.config import DEFAULT_INCLUDE_DEPTH_LIMIT
from libwgslpp.preprocessor.macros.expander import DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT


def add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging", "Toolchain messages (emitted into stderr)")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from preprocessor.",
    )


def add_preprocessor_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with preprocessor options into given parser."""
    group = parser.add_argument_group(
        title="Preprocessor",
        description="Flags for the preprocessor.",
    )
    group.add_argument(
        "--include",
        "-i",
        required=False,
        help="Additional directories to search for include files.",
        action="append",
        default=[],
    )
    group.add_argument(
        "--define",
        "-D",
        required=False,
        help="Define an macro (default value is '1') before preprocessing an source file",
        action="append",
        dest="definitions",
        default=[],
    )
    group.add_argument(
        "--max-macro-depth",
        type=int,
        dest="macro_expansion_depth_limit",
        default=DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT,
        required=False,
        help=f"How deep nested macro expansions may go before failing (defaults to {DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT})",
    )
    group.add_argument(
        "--max-include-depth",
        type=int,
        dest="include_depth_limit",
        default=DEFAULT_INCLUDE_DEPTH_LIMIT,
        required=False,
        help=f"How deep nested includes may go before failing (defaults to {DEFAULT_INCLUDE_DEPTH_LIMIT})",
    )


def add_validator_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with validator options into given parser."""
    group = parser.add_argument_group(
        title="Validator",
        description="Validate preprocessed shader with an external validator (naga).",
    )
    group.add_argument(
        "--validate",
        default=False,
        action="store_true",
        help="If passed will pass preprocessed shader into validator and fail if it is rejected",
    )
    group.add_argument(
        "--validator-executable",
        type=str,
        default=None,
        required=False,
        help="Path to validator executable, by default it is searched within PATH",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal toolchain debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
