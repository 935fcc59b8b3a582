from __future__ import annotations

from typing import TYPE_CHECKING

from libwgslpp.preprocessor.helpers import find_identifier_end, find_word_end
from libwgslpp.preprocessor.keywords import PreprocessorKeyword

from .exceptions import (
    PreprocessorMacroExcessiveTokensError,
    PreprocessorMacroInvalidParameterError,
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorMacroUnclosedParametersError,
    PreprocessorNoMacroNameError,
)

if TYPE_CHECKING:
    from libwgslpp.preprocessor.directives import Directive

    from .macro import Macro
    from .registry import MacrosRegistry

PARAMETERS_OPEN = "("
PARAMETERS_CLOSE = ")"
PARAMETERS_SEPARATOR = ","


def consume_macro_definition_from_directive(
    directive: Directive,
    macros: MacrosRegistry,
) -> Macro:
    """Consume `#define` directive into macro definition within registry with validation.

    Redefinition silently overwrites previous definition.
    """
    assert directive.keyword == PreprocessorKeyword.DEFINE
    name, rest = _consume_macro_name(directive)

    if not rest.startswith(PARAMETERS_OPEN):
        # Object-like macro, everything after name is an body
        return macros.define(directive.location, name, rest.strip())

    # Function-like macro requires parameters list to be tight with name (e.g `NAME(a, b)`)
    closes_at = rest.find(PARAMETERS_CLOSE)
    if closes_at == -1:
        raise PreprocessorMacroUnclosedParametersError(
            location=directive.location,
            name=name,
        )

    parameters = _consume_macro_parameters(
        directive,
        name,
        rest[len(PARAMETERS_OPEN) : closes_at],
    )
    body = rest[closes_at + len(PARAMETERS_CLOSE) :].strip()
    return macros.define(directive.location, name, body, parameters=parameters)


def consume_macro_undefine_from_directive(
    directive: Directive,
    macros: MacrosRegistry,
) -> Macro | None:
    """Consume `#undef` directive by removing macro from registry, if it is defined."""
    assert directive.keyword == PreprocessorKeyword.UNDEFINE
    name, rest = _consume_macro_name(directive)

    if rest.strip():
        raise PreprocessorMacroExcessiveTokensError(
            location=directive.location,
            directive=directive.text,
            excess=rest.strip(),
        )

    return macros.undefine(name)


def _consume_macro_name(directive: Directive) -> tuple[str, str]:
    """Consume and validate macro name from beginning of an directive arguments.

    :returns: Macro name and rest of an directive right after that name
    """
    text = directive.arguments
    if not text:
        raise PreprocessorNoMacroNameError(
            location=directive.location,
            directive=directive.text,
        )

    name_ends_at = find_identifier_end(text, 0)
    name = text[:name_ends_at]
    if not name.isidentifier():
        raise PreprocessorMacroNonIdentifierNameError(
            location=directive.location,
            directive=directive.text,
            name=text[: find_word_end(text, 0)],
        )

    return name, text[name_ends_at:]


def _consume_macro_parameters(
    directive: Directive,
    name: str,
    raw_parameters: str,
) -> list[str]:
    """Consume comma separated parameters, each must be an unique identifier."""
    if not raw_parameters.strip():
        return []

    parameters: list[str] = []
    for raw_parameter in raw_parameters.split(PARAMETERS_SEPARATOR):
        parameter = raw_parameter.strip()
        if not parameter.isidentifier() or parameter in parameters:
            raise PreprocessorMacroInvalidParameterError(
                location=directive.location,
                name=name,
                parameter=parameter,
            )
        parameters.append(parameter)
    return parameters
