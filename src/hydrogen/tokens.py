"""Token data structures and source positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Position:
    """Source position: 1-based line and column in characters, 0-based UTF-8 byte offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single classified token with the exact text it was claimed from.

    ``start`` and ``length`` count UTF-8 bytes; ``line`` and ``column``
    count characters.
    """

    kind: Enum
    text: str
    start: int
    line: int
    column: int

    @property
    def length(self) -> int:
        return byte_length(self.text)

    @property
    def end(self) -> int:
        """Byte offset one past the last byte of the token."""
        return self.start + self.length

    @property
    def position(self) -> Position:
        return Position(self.line, self.column, self.start)


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def advance_position(position: Position, text: str) -> Position:
    """Return the position reached after consuming *text* from *position*."""
    offset = position.offset + byte_length(text)
    newlines = text.count("\n")
    if newlines:
        column = len(text) - text.rfind("\n")
        return Position(position.line + newlines, column, offset)
    return Position(position.line, position.column + len(text), offset)
