"""Macro expansion (substitution of macro references within plain text).

Expansion is pure text substitution, nothing is evaluated:
- Object-like macro reference is replaced with its body.
- Function-like macro invocation `NAME(a, b)` is replaced with its body where parameters are substituted with
  arguments text (arguments are fully expanded before substitution).

Result of any expansion is re-scanned together with the rest of the text, so expansion that ends with function-like
macro name may be invoked by parenthesis that follows it (e.g `#define F G` makes `F(1)` an `G(1)` invocation).
Macro which is already being expanded on current substitution path is left as-is (so recursive macros stop),
and such reference is 'painted', it is never expanded by any later re-scan.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from libwgslpp.preprocessor.exceptions import PreprocessorRecursionLimitExceededError

from .exceptions import (
    PreprocessorMacroArgumentCountMismatchError,
    PreprocessorMacroUnclosedInvocationError,
)

if TYPE_CHECKING:
    from collections.abc import Generator

    from libwgslpp.location import SourceLocation

    from .macro import Macro
    from .registry import MacrosRegistry

# Maximal run of identifier characters, so an identifier never matches as part of longer one
# (runs starting with digit is a numeric literals or their suffixes, and are skipped)
IDENTIFIER_RUN: Final = re.compile(r"\w+")

INVOCATION_OPEN = "("
ARGUMENTS_SEPARATOR = ","

# Commas nested inside any of these does not split invocation arguments
NESTING_OPEN_DELIMITERS = "([{"
NESTING_CLOSE_DELIMITERS = ")]}"

DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT = 256


class ExpansionGuard:
    """Names of macros that are currently mid-expansion on the active substitution path."""

    def __init__(self, depth_limit: int = DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT) -> None:
        self.depth_limit = depth_limit
        self._expanding: list[str] = []

    def __contains__(self, name: object) -> bool:
        return name in self._expanding

    def __len__(self) -> int:
        return len(self._expanding)

    @contextmanager
    def expanding(self, macro: Macro, location: SourceLocation) -> Generator[None]:
        """Mark macro as being expanded until context exits (on any exit path)."""
        if len(self._expanding) >= self.depth_limit:
            raise PreprocessorRecursionLimitExceededError(
                location=location,
                kind="macro",
                limit=self.depth_limit,
            )

        self._expanding.append(macro.name)
        try:
            yield
        finally:
            self._expanding.pop()


@dataclass(frozen=True)
class _PaintedText:
    """Text with start offsets of identifiers that must be left as-is by any further expansion."""

    text: str
    painted: frozenset[int] = field(default_factory=frozenset)

    def slice(self, start: int, end: int | None = None) -> _PaintedText:
        end = len(self.text) if end is None else end
        return _PaintedText(
            text=self.text[start:end],
            painted=frozenset(at - start for at in self.painted if start <= at < end),
        )

    def concat(self, other: _PaintedText) -> _PaintedText:
        shift = len(self.text)
        return _PaintedText(
            text=self.text + other.text,
            painted=self.painted | {at + shift for at in other.painted},
        )


class _PaintedTextBuilder:
    def __init__(self) -> None:
        self._parts: list[str] = []
        self._painted: set[int] = set()
        self._length = 0

    def append(self, text: _PaintedText) -> None:
        self._painted.update(self._length + at for at in text.painted)
        self._parts.append(text.text)
        self._length += len(text.text)

    def append_plain(self, text: str, *, painted: bool = False) -> None:
        if painted:
            self._painted.add(self._length)
        self._parts.append(text)
        self._length += len(text)

    def build(self) -> _PaintedText:
        return _PaintedText(text="".join(self._parts), painted=frozenset(self._painted))


def expand_macros_in_text(
    text: str,
    macros: MacrosRegistry,
    location: SourceLocation,
    *,
    depth_limit: int = DEFAULT_MACRO_EXPANSION_DEPTH_LIMIT,
) -> str:
    """Substitute all macro references within given text, recursively.

    :param location: Where text is located, used only for error reporting
    :param depth_limit: How deep nested expansions may go before failing
    """
    guard = ExpansionGuard(depth_limit=depth_limit)
    return _expand_text(_PaintedText(text), macros, guard, location).text


def substitute_macro_parameters(macro: Macro, arguments: list[str]) -> str:
    """Substitute every parameter occurrence within macro body with corresponding argument text.

    Substitution is performed in single pass, so argument text is never substituted again.
    Surrounding whitespace of an argument is dropped where body already has whitespace around parameter.
    """
    return _substitute_macro_parameters(
        macro,
        [_PaintedText(argument) for argument in arguments],
    ).text


def split_invocation_arguments(text: str, open_at: int) -> tuple[list[str], int]:
    """Split invocation arguments that starts with open parenthesis at given index.

    Only top-level commas split arguments, arguments are kept as raw (untrimmed) text.

    :returns: Arguments and index of closing parenthesis, or -1 if invocation is not closed
    """
    assert text[open_at] == INVOCATION_OPEN

    arguments: list[str] = []
    argument_starts_at = open_at + 1
    depth = 0

    for idx in range(open_at, len(text)):
        symbol = text[idx]
        if symbol in NESTING_OPEN_DELIMITERS:
            depth += 1
        elif symbol in NESTING_CLOSE_DELIMITERS:
            depth -= 1
            if depth == 0:
                arguments.append(text[argument_starts_at:idx])
                return arguments, idx
        elif symbol == ARGUMENTS_SEPARATOR and depth == 1:
            arguments.append(text[argument_starts_at:idx])
            argument_starts_at = idx + 1

    return arguments, -1


def _expand_text(
    text: _PaintedText,
    macros: MacrosRegistry,
    guard: ExpansionGuard,
    location: SourceLocation,
) -> _PaintedText:
    expanded = _PaintedTextBuilder()

    col = 0
    while match := IDENTIFIER_RUN.search(text.text, col):
        expanded.append_plain(text.text[col : match.start()])
        col = match.end()

        name = match.group()
        macro = macros.get(name)
        if macro is None or not name.isidentifier():
            expanded.append_plain(name)
            continue

        if match.start() in text.painted or name in guard:
            # Reference to macro from within its own expansion, left as plain text forever
            expanded.append_plain(name, painted=True)
            continue

        if not macro.is_function_like:
            with guard.expanding(macro, location):
                expansion = _expand_text(_PaintedText(macro.body), macros, guard, location)
        else:
            open_at = _skip_whitespace(text.text, col)
            if not text.text.startswith(INVOCATION_OPEN, open_at):
                # Function-like macro name without invocation is an ordinary identifier
                expanded.append_plain(name)
                continue

            expansion, col = _expand_function_like_macro(
                macro,
                text,
                open_at,
                macros,
                guard,
                location,
            )

        # Expansion is re-scanned with the rest of the text (it may end with function-like macro name)
        text = expansion.concat(text.slice(col))
        col = 0

    expanded.append(text.slice(col))
    return expanded.build()


def _expand_function_like_macro(  # noqa: PLR0913
    macro: Macro,
    text: _PaintedText,
    open_at: int,
    macros: MacrosRegistry,
    guard: ExpansionGuard,
    location: SourceLocation,
) -> tuple[_PaintedText, int]:
    """Expand invocation of function-like macro which arguments starts at given open parenthesis.

    :returns: Expansion and index right after the invocation closing parenthesis
    """
    raw_arguments, closes_at = split_invocation_arguments(text.text, open_at)
    if closes_at == -1:
        raise PreprocessorMacroUnclosedInvocationError(location=location, macro=macro)

    if not macro.parameters and len(raw_arguments) == 1 and not raw_arguments[0].strip():
        # `NAME()` invokes macro without parameters
        raw_arguments = []

    if len(raw_arguments) != len(macro.parameters):
        raise PreprocessorMacroArgumentCountMismatchError(
            location=location,
            macro=macro,
            arguments=raw_arguments,
        )

    # Arguments are caller text, so they are expanded outside of that macro expansion
    arguments: list[_PaintedText] = []
    argument_starts_at = open_at + len(INVOCATION_OPEN)
    for raw_argument in raw_arguments:
        argument_ends_at = argument_starts_at + len(raw_argument)
        argument = text.slice(argument_starts_at, argument_ends_at)
        arguments.append(_expand_text(argument, macros, guard, location))
        argument_starts_at = argument_ends_at + len(ARGUMENTS_SEPARATOR)

    substituted = _substitute_macro_parameters(macro, arguments)
    with guard.expanding(macro, location):
        expansion = _expand_text(substituted, macros, guard, location)
    return expansion, closes_at + 1


def _substitute_macro_parameters(
    macro: Macro,
    arguments: list[_PaintedText],
) -> _PaintedText:
    assert len(arguments) == len(macro.parameters)
    replacements = dict(zip(macro.parameters, arguments, strict=True))

    substituted = _PaintedTextBuilder()
    col = 0
    for match in IDENTIFIER_RUN.finditer(macro.body):
        argument = replacements.get(match.group())
        if argument is None:
            continue

        substituted.append_plain(macro.body[col : match.start()])
        substituted.append(
            _fit_argument_whitespace(argument, macro.body, match.start(), match.end()),
        )
        col = match.end()

    substituted.append_plain(macro.body[col:])
    return substituted.build()


def _fit_argument_whitespace(
    argument: _PaintedText,
    body: str,
    starts_at: int,
    ends_at: int,
) -> _PaintedText:
    """Drop argument leading (trailing) whitespace if parameter within body is already preceded (followed) by one."""
    start, end = 0, len(argument.text)
    if starts_at > 0 and body[starts_at - 1].isspace():
        start = end - len(argument.text.lstrip())
    if ends_at < len(body) and body[ends_at].isspace():
        end = len(argument.text.rstrip())
    return argument.slice(start, max(start, end))


def _skip_whitespace(text: str, start: int) -> int:
    end = len(text)
    while start < end and text[start].isspace():
        start += 1
    return start
