from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .config import PreprocessorConfig
from .include.stack import IncludeStack

if TYPE_CHECKING:
    from collections.abc import Callable

    from .macros import MacrosRegistry


@dataclass(frozen=False)
class PreprocessorState:
    """State of an single top-level preprocessing invocation, shared by all included files."""

    macros: MacrosRegistry
    config: PreprocessorConfig = field(default_factory=PreprocessorConfig)

    include_stack: IncludeStack = field(init=False)

    # Non-fatal diagnostics (e.g unsupported directives) are propagated here, if set
    on_warning: Callable[[str], None] | None = None

    def __post_init__(self) -> None:
        self.include_stack = IncludeStack(depth_limit=self.config.include_depth_limit)

    def warn(self, text: str) -> None:
        if self.on_warning:
            self.on_warning(text)
