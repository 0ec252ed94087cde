"""Grammar rule table binding each node kind to its pattern and node builder."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from hydrogen.ast import Node
from hydrogen.errors import GrammarError
from hydrogen.patterns import Many, OneOf, Opt, Pattern, Rule, Seq, Tok

logger = logging.getLogger(__name__)

Fragment = tuple[Node, ...]
Builder = Callable[[Fragment], Node]

# FIRST set of a pattern: the token kinds it can start with, and whether it
# can match without consuming anything. None means "unknown" (recursive rule
# reached while still being computed); such patterns are always attempted.
First = tuple[frozenset[Enum], bool] | None


def passthrough(fragment: Fragment) -> Node:
    """Builder for rules that only choose between other rules."""
    (node,) = fragment
    return node


@dataclass(frozen=True, slots=True)
class GrammarRule:
    pattern: Pattern
    build: Builder = passthrough


class GrammarTable:
    """Closed mapping from every member of a node kind enum to a rule.

    Rules the language does not implement yet are bound to ``OneOf()``,
    which never matches.
    """

    def __init__(self, kinds: type[Enum], rules: Mapping[Enum, GrammarRule], start: Enum) -> None:
        foreign = [k for k in rules if not isinstance(k, kinds)]
        if foreign:
            raise GrammarError(f"{foreign[0]!r} is not a {kinds.__name__}")
        missing = [k.name for k in kinds if k not in rules]
        if missing:
            raise GrammarError(f"no grammar rule for {', '.join(missing)}")
        if not isinstance(start, kinds):
            raise GrammarError(f"start rule {start!r} is not a {kinds.__name__}")
        self._rules = dict(rules)
        self._first: dict[Enum, First] = {}
        self._computing: set[Enum] = set()
        self.start = start

    def __getitem__(self, kind: Enum) -> GrammarRule:
        return self._rules[kind]

    def __contains__(self, kind: object) -> bool:
        return kind in self._rules

    # ------------------------------------------------------------------
    # Lookahead
    # ------------------------------------------------------------------

    def can_start(self, pattern: Pattern, kind: Enum) -> bool:
        """Return False only if *pattern* certainly cannot begin with *kind*."""
        first = self.first(pattern)
        if first is None:
            return True
        kinds, nullable = first
        return nullable or kind in kinds

    def first(self, pattern: Pattern) -> First:
        if isinstance(pattern, Tok):
            return frozenset({pattern.kind}), False

        if isinstance(pattern, Rule):
            return self._rule_first(pattern.kind)

        if isinstance(pattern, (Opt, Many)):
            inner = self.first(pattern.pattern)
            if inner is None:
                return None
            return inner[0], True

        if isinstance(pattern, Seq):
            kinds: set[Enum] = set()
            for element in pattern.patterns:
                first = self.first(element)
                if first is None:
                    return None
                kinds |= first[0]
                if not first[1]:
                    return frozenset(kinds), False
            return frozenset(kinds), True

        if isinstance(pattern, OneOf):
            kinds = set()
            nullable = False
            for alternative in pattern.patterns:
                first = self.first(alternative)
                if first is None:
                    return None
                kinds |= first[0]
                nullable = nullable or first[1]
            return frozenset(kinds), nullable

        raise TypeError(f"not a pattern: {pattern!r}")

    def _rule_first(self, kind: Enum) -> First:
        if kind in self._first:
            return self._first[kind]
        if kind in self._computing or kind not in self._rules:
            return None
        self._computing.add(kind)
        try:
            result = self.first(self._rules[kind].pattern)
        finally:
            self._computing.discard(kind)
        self._first[kind] = result
        logger.debug("FIRST(%s) = %s", kind.name, result)
        return result
