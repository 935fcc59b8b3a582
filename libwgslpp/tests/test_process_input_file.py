from pathlib import Path
from subprocess import CompletedProcess

import pytest

from libwgslpp import process_input_file
from libwgslpp.location import SourceLocation
from libwgslpp.preprocessor.exceptions import PreprocessorRecursionLimitExceededError
from libwgslpp.preprocessor.macros import MacrosRegistry, registry_from_raw_definitions
from libwgslpp.validator import ShaderValidationError, ValidatorDriverProtocol


class RejectingValidatorDriver(ValidatorDriverProtocol):
    @property
    def name(self) -> str:
        return "rejecting"

    def validate(self, shader_text: str) -> CompletedProcess[str]:
        return CompletedProcess(
            args=[],
            returncode=1,
            stdout="",
            stderr=f"error: rejected {len(shader_text)} characters\n  ┌─ shader.wgsl:1:1\n",
        )

    @classmethod
    def is_installed(cls) -> bool:
        return True


def test_process_input_file(tmp_path: Path) -> None:
    (tmp_path / "include").mkdir()
    (tmp_path / "include" / "lib.wgsl").write_text("#define ONE 1.0\n", encoding="utf-8")
    (tmp_path / "main.wgsl").write_text(
        "#include <lib.wgsl>\nlet x = ONE * SCALE;\n",
        encoding="utf-8",
    )

    shader = process_input_file(
        tmp_path / "main.wgsl",
        [tmp_path / "include"],
        macros=registry_from_raw_definitions(SourceLocation.cli(), {"SCALE": "2.0"}),
    )
    assert shader.text == "let x = 1.0 * 2.0;\n"


def test_process_input_file_limits(tmp_path: Path) -> None:
    (tmp_path / "main.wgsl").write_text(
        "#define A B\n#define B C\n#define C 1\nlet x = A;\n",
        encoding="utf-8",
    )
    with pytest.raises(PreprocessorRecursionLimitExceededError):
        process_input_file(
            tmp_path / "main.wgsl",
            [],
            macros=MacrosRegistry(),
            macro_expansion_depth_limit=2,
        )

    with pytest.raises(PreprocessorRecursionLimitExceededError):
        process_input_file(
            tmp_path / "main.wgsl",
            [],
            macros=MacrosRegistry(),
            include_depth_limit=0,
        )


def test_process_input_file_validation(tmp_path: Path) -> None:
    (tmp_path / "main.wgsl").write_text("// comment\nlet x = ;\n", encoding="utf-8")
    with pytest.raises(ShaderValidationError) as error:
        process_input_file(
            tmp_path / "main.wgsl",
            [],
            macros=MacrosRegistry(),
            validator=RejectingValidatorDriver(),
        )

    origin = error.value.diagnostic.origin
    assert origin is not None
    assert origin.line_number == 0
