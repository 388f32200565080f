"""Source locations, node-to-location maps and line maps."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Any

__all__ = ["Location", "LocationMap", "Line", "LineMap"]


@dataclass(frozen=True)
class Location:
    """A position in source text: file path (if any), line and column."""

    file: str | None = None
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        prefix = f"{self.file}:" if self.file else ""
        return f"{prefix}{self.line}:{self.column}"


class LocationMap:
    """Associates syntax nodes, by identity, with their source locations."""

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Any, Location]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, node: object) -> bool:
        return id(node) in self._entries

    def record(self, node: Any, location: Location) -> None:
        """Record the location of ``node`` unless one is already recorded."""
        self._entries.setdefault(id(node), (node, location))

    def get(self, node: Any) -> Location:
        """Return the recorded location of ``node``, or an empty location."""
        entry = self._entries.get(id(node))
        return entry[1] if entry is not None else Location()


@dataclass(frozen=True)
class Line:
    """A numbered line, as the offsets ``[first, last)`` into a buffer."""

    number: int
    first: int
    last: int


class LineMap:
    """Maps character offsets to the lines that contain them."""

    def __init__(self) -> None:
        self._offsets: list[int] = []
        self._lines: dict[int, Line] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, offset: int, line: Line) -> None:
        """Register ``line`` at ``offset`` unless that offset is taken."""
        if offset in self._lines:
            return
        bisect.insort(self._offsets, offset)
        self._lines[offset] = line

    def line(self, offset: int) -> Line:
        """Return the line registered at the greatest offset not above ``offset``."""
        i = bisect.bisect_right(self._offsets, offset)
        if i == 0:
            raise KeyError(offset)
        return self._lines[self._offsets[i - 1]]