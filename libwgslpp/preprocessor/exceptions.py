from typing import Literal

from libwgslpp.exceptions import WgslppError
from libwgslpp.location import SourceLocation


class PreprocessorError(WgslppError):
    """Parent for all errors that preprocessor may raise."""


class PreprocessorSyntaxError(PreprocessorError):
    """Malformed preprocessor syntax (directive or macro invocation)."""

    def __init__(self, location: SourceLocation, directive: str, reason: str) -> None:
        self.location = location
        self.directive = directive
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Malformed `{self.directive}` at {self.location}!

{self.reason}

{self.generic_error_name}"""


class PreprocessorIncludeMalformedPathError(PreprocessorSyntaxError):
    def __init__(self, location: SourceLocation, raw_path: str) -> None:
        super().__init__(
            location=location,
            directive="#include",
            reason=f"Expected single path enclosed in quotes (`\"path\"` or `<path>`) but got `{raw_path}`",
        )
        self.raw_path = raw_path


class PreprocessorRecursionLimitExceededError(PreprocessorError):
    def __init__(
        self,
        location: SourceLocation,
        kind: Literal["macro", "include"],
        limit: int,
    ) -> None:
        self.location = location
        self.kind = kind
        self.limit = limit

    def __repr__(self) -> str:
        what = "Macro expansion" if self.kind == "macro" else "Include"
        return f"""{what} depth limit ({self.limit}) exceeded at {self.location}!

Preprocessing was stopped to prevent infinite recursion.
Consider flattening {self.kind}s or raising limit if that nesting is intended.

{self.generic_error_name}"""
