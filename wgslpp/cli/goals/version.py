import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libwgslpp.preprocessor.config import DEFAULT_INCLUDE_DEPTH_LIMIT
from libwgslpp.preprocessor.macros.expander import DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT
from libwgslpp.validator.drivers import get_all_drivers
from wgslpp.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[wgslpp toolchain]")
    print("Preprocessor limits:")
    print(f"\tMacro expansion depth: {args.macro_expansion_depth_limit} (default {DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT})")
    print(f"\tInclude depth: {args.include_depth_limit} (default {DEFAULT_INCLUDE_DEPTH_LIMIT})")
    print("Validators:")
    for driver in get_all_drivers():
        status = "installed" if driver.is_installed() else "not installed"
        print(f"\t{driver.__qualname__.removesuffix('ValidatorDriver').lower()}: {status}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)
