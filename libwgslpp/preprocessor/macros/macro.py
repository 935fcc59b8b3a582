from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libwgslpp.location import SourceLocation


class MacroKind(Enum):
    # `#define NAME body`
    OBJECT = auto()

    # `#define NAME(a, b) body`
    FUNCTION = auto()


@dataclass(frozen=True)
class Macro:
    """Preprocessor macro definition for text substitution.

    Macros are named replacement texts to be expanded when the macro name
    is encountered as an whole identifier in the shader source during preprocessing.

    Language workflow:
        Preprocessor encounter macro definition like:
        `#define PI 3.1415`

        It consumes that whole logical line (macro definitions are line-dependant,
        but may be continued with trailing backslash).
        Next time when preprocessor encounter an identifier with name of that macro, e.g:
        `let x = PI * 2.0;`
        It will substitute that identifier with macro body, e.g:
        `let x = 3.1415 * 2.0;`

        Function-like macros accept arguments, which are substituted into body as raw text:
        `#define SQUARE(x) ((x) * (x))`
        `SQUARE(a + 1)` -> `((a + 1) * (a + 1))`

    Command-Line-Interface (CLI) definitions:
        Definitions (macros) may be propagated from the CLI via `-D` flag, e.g: `-DMACRO_NAME` or `-DMACRO_NAME=128`
        They will be treated as same as file-contained (object-like) definitions would be.
    """

    # Where is that definition begins (an reference to `#define` line)
    # There is possibility that definition comes from CLI or toolchain
    location: SourceLocation

    # Definition name, always an valid identifier
    name: str

    # Raw replacement text, continuations are already joined and comments stripped
    body: str = ""

    kind: MacroKind = MacroKind.OBJECT

    # Ordered parameter names, only for function-like macros
    parameters: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        assert self.name.isidentifier(), f"Macro name must be an identifier, got {self.name!r}"
        assert len(set(self.parameters)) == len(self.parameters), (
            f"Macro {self.name} has duplicate parameters"
        )
        if self.kind == MacroKind.OBJECT:
            assert not self.parameters, "Object-like macro cannot have parameters"

    @property
    def is_function_like(self) -> bool:
        return self.kind == MacroKind.FUNCTION
