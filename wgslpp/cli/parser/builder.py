from argparse import ArgumentParser

from wgslpp.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="wgslpp - preprocessor for WGSL shaders (includes, macros, comments stripping)",
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_file",
        help="Input shader source file to preprocess (`.wgsl` file), result is emitted into stdout",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_logging_group(parser)
    groups.add_preprocessor_group(parser)
    groups.add_validator_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
