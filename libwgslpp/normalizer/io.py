from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

SOURCE_FILE_ENCODING = "utf-8"


def read_source_file_lines(path: Path) -> list[str]:
    """Read whole shader source file as physical lines without line terminators.

    File is read eagerly, so no descriptors are held open while includes are processed.

    :raises OSError: If file cannot be opened
    :raises UnicodeDecodeError: If file is not valid encoded text
    """
    with path.open(encoding=SOURCE_FILE_ENCODING, newline="") as fd:
        return fd.read().splitlines()
