from __future__ import annotations

from pathlib import Path
from shutil import which
from subprocess import CompletedProcess, run
from typing import Final

from libwgslpp.validator.drivers._driver_protocol import ValidatorDriverProtocol


class NagaValidatorDriver(ValidatorDriverProtocol):
    """Driver for naga (WGSL frontend and validator from wgpu project) command line tool."""

    # This is used as default executable of naga (searched within PATH)
    NAGA_DEFAULT_EXECUTABLE: Final[str] = "naga"

    # Naga infers input language from file extension, source itself is passed via stdin
    STDIN_FILE_PATH: Final[str] = "shader.wgsl"

    def __init__(self, executable: Path | None = None) -> None:
        self.executable = executable

    @property
    def name(self) -> str:
        return "naga"

    @classmethod
    def is_installed(cls, *, executable: Path | str = NAGA_DEFAULT_EXECUTABLE) -> bool:
        return which(str(executable)) is not None

    def validate(self, shader_text: str) -> CompletedProcess[str]:
        return run(
            self._compose_validator_command(),
            input=shader_text,
            check=False,
            capture_output=True,
            text=True,
            timeout=None,
        )

    def _compose_validator_command(self) -> list[str]:
        """Construct naga command to validate WGSL source passed into stdin."""
        executable = self.executable or self.find_naga_tool_path()
        assert executable is not None, "Naga must be installed to validate"
        return [str(executable), "--stdin-file-path", self.STDIN_FILE_PATH]

    @classmethod
    def find_naga_tool_path(cls) -> Path | None:
        path = which(cls.NAGA_DEFAULT_EXECUTABLE)
        return Path(path) if path else None
