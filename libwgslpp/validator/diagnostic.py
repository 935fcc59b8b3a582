from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from libwgslpp.location import SourceLocation
    from libwgslpp.shader import PreprocessedShader

# Validators (naga) reports location as `path:line:column` (one-based)
DIAGNOSTIC_LOCATION: Final = re.compile(r":(\d+):(\d+)\b")
DIAGNOSTIC_SEVERITY_PREFIX: Final = re.compile(r"^(error|warning)\s*:\s*", re.IGNORECASE)


@dataclass(frozen=True)
class ValidationDiagnostic:
    """Diagnostic emitted by an shader validator against preprocessed text."""

    message: str

    # Zero-based location within preprocessed text, if validator reported it
    line_number: int | None = None
    col_number: int | None = None

    # Location within original sources, if it may be inferred
    origin: SourceLocation | None = None

    def mapped_to(self, shader: PreprocessedShader) -> ValidationDiagnostic:
        """Map diagnostic back to original source location (column is not preserved by preprocessing)."""
        if self.line_number is None:
            return self
        return replace(self, origin=shader.origin_of(self.line_number))


def parse_validator_diagnostic(output: str) -> ValidationDiagnostic:
    """Parse validator textual output into diagnostic, only first reported issue is considered."""
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if not lines:
        return ValidationDiagnostic(message="Validator failed without any output")

    message = DIAGNOSTIC_SEVERITY_PREFIX.sub("", lines[0])
    if not (location := DIAGNOSTIC_LOCATION.search(output)):
        return ValidationDiagnostic(message=message)

    line, col = map(int, location.groups())
    return ValidationDiagnostic(
        message=message,
        line_number=line - 1,
        col_number=col - 1,
    )
