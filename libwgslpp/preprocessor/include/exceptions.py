from __future__ import annotations

from typing import TYPE_CHECKING

from libwgslpp.preprocessor.exceptions import PreprocessorError

if TYPE_CHECKING:
    from pathlib import Path

    from libwgslpp.location import SourceLocation


class PreprocessorIncludeNotFoundError(PreprocessorError):
    def __init__(
        self,
        location: SourceLocation,
        raw_path: str,
        searched_paths: list[Path],
        reason: str | None = None,
    ) -> None:
        self.location = location
        self.raw_path = raw_path
        self.searched_paths = searched_paths
        self.reason = reason

    def __repr__(self) -> str:
        searched = "\n".join(f"\t{path}" for path in self.searched_paths) or "\t(nothing)"
        reason = f"\nReason: {self.reason}\n" if self.reason else ""
        return f"""Unable to include file `{self.raw_path}` at {self.location}!
{reason}
Searched at:
{searched}

{self.generic_error_name}"""


class PreprocessorIncludeCycleError(PreprocessorError):
    def __init__(self, location: SourceLocation, chain: list[Path]) -> None:
        self.location = location
        self.chain = chain

    def __repr__(self) -> str:
        chain = " -> ".join(path.name for path in self.chain)
        return f"""Include cycle detected at {self.location}!

Include chain: {chain}
File `{self.chain[-1]}` is already being processed, including it again would never end.

{self.generic_error_name}"""
