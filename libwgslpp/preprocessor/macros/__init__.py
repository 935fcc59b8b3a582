"""Preprocessor macros parser/resolver."""

from .expander import ExpansionGuard, expand_macros_in_text
from .macro import Macro, MacroKind
from .preprocessor import (
    consume_macro_definition_from_directive,
    consume_macro_undefine_from_directive,
)
from .registry import MacrosRegistry, registry_from_raw_definitions

__all__ = (
    "ExpansionGuard",
    "Macro",
    "MacroKind",
    "MacrosRegistry",
    "consume_macro_definition_from_directive",
    "consume_macro_undefine_from_directive",
    "expand_macros_in_text",
    "registry_from_raw_definitions",
)
