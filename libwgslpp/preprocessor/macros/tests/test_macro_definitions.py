from pathlib import Path

import pytest

from libwgslpp.location import SourceLocation
from libwgslpp.normalizer import LogicalLine
from libwgslpp.preprocessor.directives import Directive, parse_directive_from_line
from libwgslpp.preprocessor.exceptions import PreprocessorSyntaxError
from libwgslpp.preprocessor.macros import (
    MacroKind,
    MacrosRegistry,
    consume_macro_definition_from_directive,
    consume_macro_undefine_from_directive,
    registry_from_raw_definitions,
)
from libwgslpp.preprocessor.macros.exceptions import (
    PreprocessorMacroExcessiveTokensError,
    PreprocessorMacroInvalidParameterError,
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorMacroUnclosedParametersError,
    PreprocessorNoMacroNameError,
)


def test_macro_definition_object_like() -> None:
    macros = MacrosRegistry()
    macro = consume_macro_definition_from_directive(
        _directive("#define PI   3.1415  "),
        macros,
    )
    assert macro.kind == MacroKind.OBJECT
    assert macro.body == "3.1415"
    assert macros["PI"] is macro


def test_macro_definition_empty_body() -> None:
    macros = MacrosRegistry()
    macro = consume_macro_definition_from_directive(_directive("#define EMPTY"), macros)
    assert macro.body == ""


def test_macro_definition_function_like() -> None:
    macros = MacrosRegistry()
    macro = consume_macro_definition_from_directive(
        _directive("#define TO_VEC(r,g, b) vec3f(r,g,b)"),
        macros,
    )
    assert macro.kind == MacroKind.FUNCTION
    assert macro.parameters == ("r", "g", "b")
    assert macro.body == "vec3f(r,g,b)"


def test_macro_definition_space_before_parenthesis_is_object_like() -> None:
    macros = MacrosRegistry()
    macro = consume_macro_definition_from_directive(
        _directive("#define GROUP (1, 2)"),
        macros,
    )
    assert macro.kind == MacroKind.OBJECT
    assert macro.body == "(1, 2)"


def test_macro_definition_redefinition_overwrites() -> None:
    macros = MacrosRegistry()
    consume_macro_definition_from_directive(_directive("#define A 1"), macros)
    consume_macro_definition_from_directive(_directive("#define A(x) x"), macros)
    assert macros["A"].kind == MacroKind.FUNCTION


def test_macro_definition_without_name() -> None:
    with pytest.raises(PreprocessorNoMacroNameError):
        consume_macro_definition_from_directive(_directive("#define"), MacrosRegistry())


def test_macro_definition_non_identifier_name() -> None:
    with pytest.raises(PreprocessorMacroNonIdentifierNameError):
        consume_macro_definition_from_directive(
            _directive("#define 1ABC 1"),
            MacrosRegistry(),
        )


def test_macro_definition_unclosed_parameters() -> None:
    with pytest.raises(PreprocessorMacroUnclosedParametersError) as error:
        consume_macro_definition_from_directive(
            _directive("#define F(a, b body"),
            MacrosRegistry(),
        )
    assert isinstance(error.value, PreprocessorSyntaxError)
    assert "F" in repr(error.value)


@pytest.mark.parametrize(
    "header",
    [
        "#define F(a, a) a",
        "#define F(a, 1) a",
        "#define F(a,) a",
        "#define F((a)) a",
    ],
)
def test_macro_definition_invalid_parameters(header: str) -> None:
    with pytest.raises(PreprocessorMacroInvalidParameterError):
        consume_macro_definition_from_directive(_directive(header), MacrosRegistry())


def test_macro_undefine() -> None:
    macros = MacrosRegistry()
    consume_macro_definition_from_directive(_directive("#define A 1"), macros)
    removed = consume_macro_undefine_from_directive(_directive("#undef A"), macros)
    assert removed is not None
    assert "A" not in macros


def test_macro_undefine_unknown_is_noop() -> None:
    macros = MacrosRegistry()
    assert consume_macro_undefine_from_directive(_directive("#undef A"), macros) is None


def test_macro_undefine_excessive_tokens() -> None:
    with pytest.raises(PreprocessorMacroExcessiveTokensError):
        consume_macro_undefine_from_directive(_directive("#undef A B"), MacrosRegistry())


def test_registry_from_raw_definitions() -> None:
    macros = registry_from_raw_definitions(
        location=SourceLocation.cli(),
        definitions={"DEBUG": "1", "SCALE": " 2.0 "},
    )
    assert macros["DEBUG"].body == "1"
    assert macros["SCALE"].body == "2.0"
    assert macros["SCALE"].location.source == "cli"


def test_registry_from_raw_definitions_file_location() -> None:
    location = SourceLocation(line_number=0, col_number=0, filepath=Path("shader.wgsl"))
    with pytest.raises(ValueError, match="raw definitions"):
        registry_from_raw_definitions(location=location, definitions={"A": "1"})


def test_registry_from_raw_definitions_non_identifier() -> None:
    with pytest.raises(ValueError, match="identifier"):
        registry_from_raw_definitions(
            location=SourceLocation.cli(),
            definitions={"1A": "1"},
        )


def test_registry_copy_is_independent() -> None:
    macros = registry_from_raw_definitions(SourceLocation.cli(), {"A": "1"})
    copied = macros.copy()
    copied.undefine("A")
    assert isinstance(copied, MacrosRegistry)
    assert "A" in macros


def _directive(text: str) -> Directive:
    directive = parse_directive_from_line(
        LogicalLine(text=text, location=SourceLocation.toolchain()),
    )
    assert directive is not None
    return directive

