"""Pattern nodes, the declarative elements of grammar rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Tok:
    """Match exactly one token of *kind*."""

    kind: Enum


@dataclass(frozen=True, slots=True)
class Rule:
    """Match the grammar rule bound to *kind* and build its node."""

    kind: Enum


@dataclass(frozen=True, slots=True, init=False)
class Seq:
    """All patterns, in order."""

    patterns: tuple[Pattern, ...]

    def __init__(self, *patterns: Pattern) -> None:
        object.__setattr__(self, "patterns", patterns)


@dataclass(frozen=True, slots=True, init=False)
class OneOf:
    """The first alternative that matches in full. ``OneOf()`` never matches."""

    patterns: tuple[Pattern, ...]

    def __init__(self, *patterns: Pattern) -> None:
        object.__setattr__(self, "patterns", patterns)


@dataclass(frozen=True, slots=True)
class Opt:
    """Zero or one *pattern*."""

    pattern: Pattern


@dataclass(frozen=True, slots=True)
class Many:
    """Zero or more *pattern*, greedy."""

    pattern: Pattern


Pattern = Tok | Rule | Seq | OneOf | Opt | Many
