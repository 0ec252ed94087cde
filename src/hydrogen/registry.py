"""Token kind registry, the closed and ordered table of kinds and their claims."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from enum import Enum

from hydrogen.claims import Claim, Exact, Keyword
from hydrogen.cursor import LookaheadCursor
from hydrogen.errors import RegistryError
from hydrogen.tokens import Token

logger = logging.getLogger(__name__)


class TokenRegistry:
    """Bind every member of a token kind enum to one claim strategy.

    The order of *entries* is the tokenizing priority: at each position the
    first kind whose strategy claims wins. Construction rejects a registry
    that misses a kind, binds one twice, or places a literal kind after a
    kind that would always claim it first.
    """

    def __init__(
        self,
        kinds: type[Enum],
        entries: Sequence[tuple[Enum, Claim]],
        *,
        unclaimed: Iterable[Enum] = (),
        trivia: Iterable[Enum] = (),
    ) -> None:
        self._enum = kinds
        self._entries = tuple(entries)
        self._claims = dict(self._entries)
        self.unclaimed = frozenset(unclaimed)
        self.trivia = frozenset(trivia)
        self._check_closed()
        self._check_priority()

    @property
    def kinds(self) -> tuple[Enum, ...]:
        """Claimable kinds in priority order."""
        return tuple(kind for kind, _ in self._entries)

    def strategy(self, kind: Enum) -> Claim:
        return self._claims[kind]

    def __iter__(self) -> Iterator[tuple[Enum, Claim]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def significant(self, tokens: Iterable[Token]) -> Iterator[Token]:
        """Lazily drop trivia (whitespace) tokens."""
        return (tok for tok in tokens if tok.kind not in self.trivia)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _check_closed(self) -> None:
        seen: set[Enum] = set()
        for kind, _ in self._entries:
            if not isinstance(kind, self._enum):
                raise RegistryError(f"{kind!r} is not a {self._enum.__name__}")
            if kind in seen:
                raise RegistryError(f"{kind.name} is registered more than once")
            if kind in self.unclaimed:
                raise RegistryError(f"{kind.name} is both registered and unclaimed")
            seen.add(kind)

        missing = [k.name for k in self._enum if k not in seen and k not in self.unclaimed]
        if missing:
            raise RegistryError(f"no claim strategy for {', '.join(missing)}")

    def _check_priority(self) -> None:
        """Reject a literal kind that an earlier kind claims on its own text."""
        for idx, (kind, claim) in enumerate(self._entries):
            if not isinstance(claim, (Exact, Keyword)):
                continue
            for earlier, earlier_claim in self._entries[:idx]:
                if earlier_claim(LookaheadCursor(claim.literal)):
                    raise RegistryError(
                        f"{kind.name} ({claim.literal!r}) can never match: "
                        f"{earlier.name} is tried first and claims it"
                    )
        logger.debug("registry %s: %d kinds in priority order", self._enum.__name__, len(self))
