"""Error types with formatted source context."""

from __future__ import annotations

from hydrogen.tokens import Position


def format_context(
    message: str,
    position: Position,
    source: str,
    filename: str,
    width: int = 1,
) -> str:
    """Render *message* with the offending source line and a caret underline."""
    lines = source.splitlines(keepends=True)
    line_idx = position.line - 1
    col = position.column

    # Build the source line (strip trailing newline for display)
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\n").rstrip("\r")
    else:
        source_line = ""

    # Underline at least 1 char, but stay within the line
    underline_len = max(1, min(width, len(source_line) - col + 1))

    pad = " " * (col - 1)
    carets = "^" * underline_len

    line_num = str(position.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{position.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class LexError(Exception):
    """Raised on the first position no registered token kind can claim."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    @property
    def offset(self) -> int:
        return self.position.offset

    def format(self, filename: str = "input.hy") -> str:
        return format_context(self.message, self.position, self.source, filename)


class ParseError(Exception):
    """Raised when a token sequence does not form a program.

    The position is that of the furthest token the grammar failed to match.
    """

    def __init__(self, message: str, position: Position, source: str, width: int = 1) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.width = width
        super().__init__(self.format())

    def format(self, filename: str = "input.hy") -> str:
        return format_context(self.message, self.position, self.source, filename, self.width)


class CursorError(RuntimeError):
    """A claim strategy reported more input than is available."""


class RegistryError(ValueError):
    """A token kind registry is incomplete or orders its kinds so one can never win."""


class GrammarError(ValueError):
    """A grammar rule table does not bind every node kind."""
