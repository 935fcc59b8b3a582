from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from libwgslpp.preprocessor.config import DEFAULT_INCLUDE_DEPTH_LIMIT
from libwgslpp.preprocessor.exceptions import PreprocessorRecursionLimitExceededError

from .exceptions import PreprocessorIncludeCycleError

if TYPE_CHECKING:
    from collections.abc import Generator, Iterator
    from pathlib import Path

    from libwgslpp.location import SourceLocation


class IncludeStack:
    """Ordered sequence of files that are currently being processed (used for cycle detection)."""

    def __init__(self, depth_limit: int = DEFAULT_INCLUDE_DEPTH_LIMIT) -> None:
        self.depth_limit = depth_limit
        self._paths: list[Path] = []

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    @contextmanager
    def entered(self, path: Path, location: SourceLocation) -> Generator[None]:
        """Mark file as being processed until context exits (on any exit path).

        :param path: Resolved (absolute) path of an file
        :param location: Where that file is included from, for error reporting
        """
        if path in self._paths:
            raise PreprocessorIncludeCycleError(
                location=location,
                chain=[*self._paths[self._paths.index(path) :], path],
            )

        if len(self._paths) >= self.depth_limit:
            raise PreprocessorRecursionLimitExceededError(
                location=location,
                kind="include",
                limit=self.depth_limit,
            )

        self._paths.append(path)
        try:
            yield
        finally:
            self._paths.pop()
