"""Allows `python -m wgslpp`, prefer installed `wgslpp` executable."""

from wgslpp.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
