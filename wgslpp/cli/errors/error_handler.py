import sys
from collections.abc import Generator
from contextlib import contextmanager

from libwgslpp.exceptions import WgslppError
from wgslpp.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_wgslpp_error_handler(*, debug_user_friendly_errors: bool = True) -> Generator[None]:
    """Report preprocessor and validator errors as fatal CLI messages.

    With `debug_user_friendly_errors` unset errors are re-raised with traceback instead.
    """
    try:
        yield
    except WgslppError as error:
        if not debug_user_friendly_errors:
            raise
        cli_fatal_abort(repr(error))
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        sys.exit(0)
