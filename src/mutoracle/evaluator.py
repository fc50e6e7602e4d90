"""Ordered predicate chain evaluation.

A chain is a flat, immutable tuple of predicates validated once at
construction. Evaluation walks the tuple in order and stops at the first
predicate whose trigger and guard both hold.

Construction checks:
    - Predicate names are unique
    - Strategies appear in non-decreasing exploration stage
    - With disjoint=True, no two triggers share a byte

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mutoracle.diagnostics import ChainDefinitionError, OverlappingTriggerError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from mutoracle.predicates import Predicate

__all__ = ["PredicateChain"]

logger = logging.getLogger(__name__)


class PredicateChain:
    """Immutable ordered collection of predicates.

    Evaluation order mirrors the order in which a deterministic fuzzer
    explores strategies. Because trigger bytes are disjoint in a disjoint
    chain, order only decides which predicate is reported when an input
    satisfies several; the crash/no-crash outcome is order-independent.

    Example:
        >>> chain = PredicateChain([bitflip, arith], disjoint=True)
        >>> chain.first_match(data)
        Predicate(name='arith_8_8', ...)
    """

    __slots__ = ("_by_name", "_disjoint", "_predicates")

    def __init__(self, predicates: Iterable[Predicate], *, disjoint: bool = False) -> None:
        """Build and validate a chain.

        Args:
            predicates: Predicates in evaluation order
            disjoint: Require trigger spans to be pairwise disjoint

        Raises:
            ChainDefinitionError: Duplicate names or out-of-order strategies
            OverlappingTriggerError: Shared trigger byte in a disjoint chain
        """
        self._predicates: tuple[Predicate, ...] = tuple(predicates)
        self._disjoint = disjoint
        self._by_name: dict[str, Predicate] = {}

        for predicate in self._predicates:
            if predicate.name in self._by_name:
                msg = f"Duplicate predicate name '{predicate.name}'"
                raise ChainDefinitionError(msg)
            self._by_name[predicate.name] = predicate

        self._check_order()
        if disjoint:
            self._check_disjoint()

    def _check_order(self) -> None:
        for earlier, later in zip(self._predicates, self._predicates[1:], strict=False):
            if later.strategy.stage < earlier.strategy.stage:
                msg = (
                    f"Predicate '{later.name}' ({later.strategy}) is ordered after "
                    f"'{earlier.name}' ({earlier.strategy})"
                )
                raise ChainDefinitionError(msg)

    def _check_disjoint(self) -> None:
        owner: dict[int, str] = {}
        for predicate in self._predicates:
            shared = tuple(o for o in predicate.span if o in owner)
            if shared:
                raise OverlappingTriggerError(owner[shared[0]], predicate.name, shared)
            for offset in predicate.span:
                owner[offset] = predicate.name

    @property
    def disjoint(self) -> bool:
        """Whether trigger spans were verified disjoint."""
        return self._disjoint

    @property
    def predicates(self) -> tuple[Predicate, ...]:
        return self._predicates

    def first_match(self, data: Sequence[int]) -> Predicate | None:
        """Return the first satisfied predicate, or None.

        Args:
            data: Buffer contents (bytes or InputBuffer)
        """
        for predicate in self._predicates:
            if predicate.holds(data):
                logger.debug("Predicate %s matched (%s)", predicate.name, predicate.strategy)
                return predicate
        return None

    def all_matches(self, data: Sequence[int]) -> tuple[Predicate, ...]:
        """Return every satisfied predicate, in chain order.

        Diagnostic only: a harness run stops at the first match.
        """
        return tuple(p for p in self._predicates if p.holds(data))

    def get(self, name: str) -> Predicate:
        """Look up a predicate by name.

        Raises:
            KeyError: If no predicate has that name
        """
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Predicate]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self._predicates)
        return f"PredicateChain([{names}], disjoint={self._disjoint})"
