from __future__ import annotations

from wgslpp.cli.errors.error_handler import cli_wgslpp_error_handler
from wgslpp.cli.goals import perform_desired_toolchain_goal
from wgslpp.cli.parser.builder import build_cli_parser
from wgslpp.cli.parser.parser import parse_cli_arguments
from wgslpp.executable import cli_get_executable_program, warn_on_improper_installation


def cli_entry_point() -> None:
    """Parse command line and run the requested goal (goals always exit the process)."""
    prog = cli_get_executable_program()
    warn_on_improper_installation(prog)

    args = parse_cli_arguments(build_cli_parser(prog).parse_args())
    with cli_wgslpp_error_handler(debug_user_friendly_errors=args.cli_debug_user_friendly_errors):
        perform_desired_toolchain_goal(args)


if __name__ == "__main__":
    cli_entry_point()
