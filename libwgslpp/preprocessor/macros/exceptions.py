from libwgslpp.location import SourceLocation
from libwgslpp.preprocessor.exceptions import (
    PreprocessorError,
    PreprocessorSyntaxError,
)
from libwgslpp.preprocessor.macros.macro import Macro


class PreprocessorNoMacroNameError(PreprocessorSyntaxError):
    def __init__(self, location: SourceLocation, directive: str) -> None:
        super().__init__(
            location=location,
            directive=directive,
            reason="No macro name specified!\nDo you have unfinished macro definition?",
        )


class PreprocessorMacroNonIdentifierNameError(PreprocessorSyntaxError):
    def __init__(self, location: SourceLocation, directive: str, name: str) -> None:
        super().__init__(
            location=location,
            directive=directive,
            reason=f"Macros should have name as 'identifier' but got `{name}`!",
        )
        self.name = name


class PreprocessorMacroUnclosedParametersError(PreprocessorSyntaxError):
    def __init__(self, location: SourceLocation, name: str) -> None:
        super().__init__(
            location=location,
            directive="#define",
            reason=f"Parameter list of function-like macro '{name}' has no closing parenthesis `)`!",
        )
        self.name = name


class PreprocessorMacroInvalidParameterError(PreprocessorSyntaxError):
    def __init__(self, location: SourceLocation, name: str, parameter: str) -> None:
        super().__init__(
            location=location,
            directive="#define",
            reason=f"Function-like macro '{name}' has invalid parameter `{parameter}`!\n"
            "Parameters must be unique identifiers separated by commas.",
        )
        self.name = name
        self.parameter = parameter


class PreprocessorMacroExcessiveTokensError(PreprocessorSyntaxError):
    def __init__(self, location: SourceLocation, directive: str, excess: str) -> None:
        super().__init__(
            location=location,
            directive=directive,
            reason=f"Unexpected text `{excess}` after macro name!",
        )
        self.excess = excess


class PreprocessorMacroUnclosedInvocationError(PreprocessorSyntaxError):
    def __init__(self, location: SourceLocation, macro: Macro) -> None:
        super().__init__(
            location=location,
            directive=macro.name,
            reason=f"Invocation of function-like macro '{macro.name}' has no closing parenthesis `)`!\n"
            "Macro invocation arguments must be closed within same (logical) line.\n"
            f"Macro defined at {macro.location}",
        )
        self.macro = macro


class PreprocessorMacroArgumentCountMismatchError(PreprocessorError):
    def __init__(
        self,
        location: SourceLocation,
        macro: Macro,
        arguments: list[str],
    ) -> None:
        self.location = location
        self.macro = macro
        self.arguments = arguments

    def __repr__(self) -> str:
        expected = len(self.macro.parameters)
        got = len(self.arguments)
        parameters = ", ".join(self.macro.parameters)
        return f"""Function-like macro '{self.macro.name}' expected {expected} argument(s), but got {got} at {self.location}!

Macro is defined at {self.macro.location} as `{self.macro.name}({parameters})`

{self.generic_error_name}"""
