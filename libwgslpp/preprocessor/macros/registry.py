from __future__ import annotations

from typing import TYPE_CHECKING

from .macro import Macro, MacroKind

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from libwgslpp.location import SourceLocation


class MacrosRegistry(dict[str, Macro]):
    """Top-level preprocessor mapping of macros.

    Single registry is shared by reference for whole preprocessing of an top-level file,
    including all files it includes (definitions are not scoped).
    """

    def define(
        self,
        location: SourceLocation,
        name: str,
        body: str,
        *,
        parameters: Sequence[str] | None = None,
    ) -> Macro:
        """Define (or silently redefine) macro with given body, function-like if parameters given."""
        macro = Macro(
            location=location,
            name=name,
            body=body,
            kind=MacroKind.OBJECT if parameters is None else MacroKind.FUNCTION,
            parameters=tuple(parameters or ()),
        )
        self.__setitem__(name, macro)
        return macro

    def undefine(self, name: str) -> Macro | None:
        """Remove macro definition if it exists, undefining unknown macro is an no-op."""
        return self.pop(name, None)

    def copy(self) -> MacrosRegistry:
        return MacrosRegistry(super().copy())


def registry_from_raw_definitions(
    location: SourceLocation,
    definitions: Mapping[str, str],
) -> MacrosRegistry:
    """Construct new macros registry from given 'raw' definitions (object-like name to body text).

    Definition is implied to be single-line.
    Location must not be from an `file` source as in that scenario you must use different approaches like preprocessing another file.
    """
    if location.source == "file":
        msg = (
            f"`{registry_from_raw_definitions.__name__}` implies raw definitions, but tried to pass parent location with `file` source, which is consider as an fatal error.\n"
            "Consider using other ways to propagate macros (e.g via preprocessing that file, or pass location with proper source.)"
        )
        raise ValueError(msg)

    registry = MacrosRegistry()
    for name, definition in definitions.items():
        if not name.isidentifier():
            msg = f"Raw definition name must be an identifier, got {name!r}"
            raise ValueError(msg)
        registry.define(location, name, definition.strip())
    return registry
