from pathlib import Path
from subprocess import CompletedProcess
from typing import Any

import pytest

from libwgslpp.location import SourceLocation
from libwgslpp.shader import PreprocessedShader
from libwgslpp.validator import (
    ShaderValidationError,
    ValidatorDriverProtocol,
    get_validator_driver,
    parse_validator_diagnostic,
    validate_preprocessed_shader,
)
from libwgslpp.validator.drivers import NagaValidatorDriver

NAGA_ERROR_OUTPUT = """error: expected expression, found ';'
  ┌─ shader.wgsl:2:9
  │
2 │ let b = ;
  │         ^ expected expression
"""


class FakeValidatorDriver(ValidatorDriverProtocol):
    def __init__(self, returncode: int, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.received: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    def validate(self, shader_text: str) -> CompletedProcess[str]:
        self.received.append(shader_text)
        return CompletedProcess(
            args=["fake"],
            returncode=self.returncode,
            stdout="",
            stderr=self.stderr,
        )

    @classmethod
    def is_installed(cls) -> bool:
        return True


def test_parse_validator_diagnostic() -> None:
    diagnostic = parse_validator_diagnostic(NAGA_ERROR_OUTPUT)
    assert diagnostic.message == "expected expression, found ';'"
    assert diagnostic.line_number == 1
    assert diagnostic.col_number == 8


def test_parse_validator_diagnostic_without_location() -> None:
    diagnostic = parse_validator_diagnostic("Error: something went wrong\n")
    assert diagnostic.message == "something went wrong"
    assert diagnostic.line_number is None
    assert diagnostic.mapped_to(_shader()).origin is None


def test_parse_validator_diagnostic_empty_output() -> None:
    assert parse_validator_diagnostic("").message


def test_validate_preprocessed_shader_accepted() -> None:
    driver = FakeValidatorDriver(returncode=0)
    shader = _shader()
    validate_preprocessed_shader(shader, driver)
    assert driver.received == [shader.text]


def test_validate_preprocessed_shader_rejected() -> None:
    driver = FakeValidatorDriver(returncode=1, stderr=NAGA_ERROR_OUTPUT)
    with pytest.raises(ShaderValidationError) as error:
        validate_preprocessed_shader(_shader(), driver)

    diagnostic = error.value.diagnostic
    assert error.value.validator == "fake"
    assert diagnostic.origin is not None
    assert diagnostic.origin.line_number == 5
    assert "main.wgsl:6:1" in repr(error.value)


def test_get_validator_driver_not_installed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("libwgslpp.validator.drivers.naga.which", lambda _: None)
    assert get_validator_driver() is None
    assert get_validator_driver(executable=Path("/opt/naga")) is None


def test_get_validator_driver_naga(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "libwgslpp.validator.drivers.naga.which",
        lambda executable: f"/usr/bin/{executable}",
    )
    driver = get_validator_driver()
    assert driver
    assert driver.name == "naga"


def test_naga_driver_passes_shader_via_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[list[str], dict[str, Any]]] = []

    def fake_run(command: list[str], **kwargs: Any) -> CompletedProcess[str]:  # noqa: ANN401
        calls.append((command, kwargs))
        return CompletedProcess(args=command, returncode=0, stdout="", stderr="")

    monkeypatch.setattr("libwgslpp.validator.drivers.naga.run", fake_run)
    driver = NagaValidatorDriver(executable=Path("/opt/naga"))
    assert driver.validate("let a = 1;\n").returncode == 0

    command, kwargs = calls[0]
    assert command == ["/opt/naga", "--stdin-file-path", "shader.wgsl"]
    assert kwargs["input"] == "let a = 1;\n"
    assert kwargs["text"]


def _shader() -> PreprocessedShader:
    path = Path("main.wgsl")
    return PreprocessedShader(
        text="let a = 1;\nlet b = ;\n",
        origins=(
            SourceLocation(line_number=0, col_number=0, filepath=path),
            SourceLocation(line_number=5, col_number=0, filepath=path),
        ),
    )
