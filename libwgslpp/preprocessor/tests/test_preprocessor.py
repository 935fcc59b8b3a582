from pathlib import Path

import pytest

from libwgslpp.location import SourceLocation
from libwgslpp.preprocessor import preprocess_source
from libwgslpp.preprocessor.include import PreprocessorIncludeNotFoundError
from libwgslpp.preprocessor.macros import registry_from_raw_definitions
from libwgslpp.preprocessor.macros.exceptions import (
    PreprocessorMacroArgumentCountMismatchError,
    PreprocessorMacroUnclosedParametersError,
)


def test_preprocessor_idempotent_on_plain_text(tmp_path: Path) -> None:
    source = "fn main() -> vec4f {\n    return vec4f(1.0, 0.0, 0.0, 1.0);\n}\n"
    assert preprocess_source(source, tmp_path).text == source


def test_preprocessor_strips_comments(tmp_path: Path) -> None:
    source = "// header\nlet a = 1; /* one */\n/* multi\nline */let b = 2;"
    shader = preprocess_source(source, tmp_path)
    assert shader.text.splitlines() == ["", "let a = 1; ", "", "let b = 2;"]


def test_preprocessor_identifier_boundary(tmp_path: Path) -> None:
    source = "#define PI 3.1415\nfn times_PI_bad() -> f32 { return PI; }"
    shader = preprocess_source(source, tmp_path)
    assert shader.text == "fn times_PI_bad() -> f32 { return 3.1415; }\n"


def test_preprocessor_undef(tmp_path: Path) -> None:
    source = "#define N 4\nlet a = N;\n#undef N\nlet b = N;"
    shader = preprocess_source(source, tmp_path)
    assert shader.text.splitlines() == ["let a = 4;", "let b = N;"]


def test_preprocessor_undef_unknown_is_noop(tmp_path: Path) -> None:
    shader = preprocess_source("#undef NEVER_DEFINED\nlet a = 1;", tmp_path)
    assert shader.text == "let a = 1;\n"


def test_preprocessor_nested_function_macro_composition(tmp_path: Path) -> None:
    source = (
        "#define TO_VEC(r,g,b) vec3f(r,g,b)\n"
        "#define TO_VEC4(vec3) vec4f(vec3, 1.0f)\n"
        "let v = TO_VEC4(TO_VEC(f32(x), /* green */f32(x), f32(x)));"
    )
    shader = preprocess_source(source, tmp_path)
    assert shader.text == "let v = vec4f(vec3f(f32(x), f32(x), f32(x)), 1.0f);\n"


def test_preprocessor_function_macro_nested_in_own_arguments(tmp_path: Path) -> None:
    source = "#define MAX(a, b) max(a, b)\nlet m = MAX(MAX(x, y), z);\n"
    assert preprocess_source(source, tmp_path).text == "let m = max(max(x, y), z);\n"


def test_preprocessor_object_macro_expands_to_function_macro_name(tmp_path: Path) -> None:
    source = "#define G(x) g(x)\n#define F G\nlet v = F(1);\n"
    assert preprocess_source(source, tmp_path).text == "let v = g(1);\n"


def test_preprocessor_multi_line_macro(tmp_path: Path) -> None:
    source = (
        "#define PACK(a, b) \\\n"
        "    ((a & 0xFFu) << 8u) | \\\n"
        "    (b & 0xFFu)\n"
        "let packed = PACK(hi, lo);"
    )
    shader = preprocess_source(source, tmp_path)
    assert shader.text == "let packed = ((hi & 0xFFu) << 8u) |     ( lo & 0xFFu);\n"


def test_preprocessor_argument_count_mismatch(tmp_path: Path) -> None:
    source = "#define ADD(a, b) a + b\n\nlet c = ADD(1, 2, 3);"
    with pytest.raises(PreprocessorMacroArgumentCountMismatchError) as error:
        preprocess_source(source, tmp_path)

    assert error.value.location.line_number == 2
    assert error.value.macro.name == "ADD"


def test_preprocessor_origins(tmp_path: Path) -> None:
    (tmp_path / "inc.wgsl").write_text("let inc = 1;\n", encoding="utf-8")
    source = '#define A 1\n\n#include "inc.wgsl"\nlet a = A;'
    shader = preprocess_source(source, tmp_path, filename="main.wgsl")

    assert shader.text.splitlines() == ["", "let inc = 1;", "let a = 1;"]
    assert [origin.line_number for origin in shader.origins] == [1, 0, 3]

    origin = shader.origin_of(1)
    assert origin is not None
    assert origin.filepath is not None
    assert origin.filepath.name == "inc.wgsl"
    assert shader.origin_of(3) is None


def test_preprocessor_error_location_within_included_file(tmp_path: Path) -> None:
    (tmp_path / "broken.wgsl").write_text("\n#define F(a body\n", encoding="utf-8")
    with pytest.raises(PreprocessorMacroUnclosedParametersError) as error:
        preprocess_source('#include "broken.wgsl"', tmp_path)

    assert error.value.location.filepath is not None
    assert error.value.location.filepath.name == "broken.wgsl"
    assert error.value.location.line_number == 1
    assert "broken.wgsl:2:1" in repr(error.value)


def test_preprocessor_unknown_directive_forwarded_with_warning(tmp_path: Path) -> None:
    warnings: list[str] = []
    source = "#ifdef DEBUG\nlet a = 1;\n#endif"
    shader = preprocess_source(source, tmp_path, on_warning=warnings.append)

    assert shader.text.splitlines() == ["#ifdef DEBUG", "let a = 1;", "#endif"]
    assert len(warnings) == 2
    assert "#ifdef DEBUG" in warnings[0]


def test_preprocessor_initial_macros_are_not_modified(tmp_path: Path) -> None:
    macros = registry_from_raw_definitions(SourceLocation.cli(), {"A": "1"})
    source = "let x = A;\n#undef A\n#define B 2\nlet y = A + B;"
    shader = preprocess_source(source, tmp_path, macros=macros)

    assert shader.text.splitlines() == ["let x = 1;", "let y = A + 2;"]
    assert "A" in macros
    assert "B" not in macros


def test_preprocessor_invocations_are_independent(tmp_path: Path) -> None:
    preprocess_source("#define LEAK 1", tmp_path)
    assert preprocess_source("let x = LEAK;", tmp_path).text == "let x = LEAK;\n"


def test_preprocessor_empty_source(tmp_path: Path) -> None:
    shader = preprocess_source("", tmp_path)
    assert shader.text == ""
    assert shader.origins == ()


def test_preprocessor_include_directive_inside_comment_ignored(tmp_path: Path) -> None:
    source = '// #include "missing.wgsl"\n/*\n#include "missing.wgsl"\n*/'
    assert preprocess_source(source, tmp_path).text == "\n\n\n\n"

    with pytest.raises(PreprocessorIncludeNotFoundError):
        preprocess_source('#include "missing.wgsl"', tmp_path)
