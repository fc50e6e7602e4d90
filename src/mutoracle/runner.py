"""Harness run loop.

One linear pass per invocation:

    acquire input -> minimum length check -> evaluate chain -> abort or exit 0

All entry points share the same judgement:
    run()               - out-of-process harness; aborts on a match
    evaluate_bytes()    - pure evaluation; returns a Verdict
    explain_bytes()     - pure evaluation plus every satisfied predicate
    evaluate_or_raise() - in-process drivers; raises StrategyCrashError

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO

from mutoracle.constants import EXIT_OK
from mutoracle.core import InputBuffer, abort_process, read_bytes, zero_fill
from mutoracle.diagnostics import StrategyCrashError
from mutoracle.enums import Outcome

if TYPE_CHECKING:
    from mutoracle.config import HarnessConfig
    from mutoracle.evaluator import PredicateChain
    from mutoracle.predicates import Predicate

__all__ = [
    "Harness",
    "Verdict",
    "acquire_input",
    "evaluate_bytes",
    "evaluate_or_raise",
    "explain_bytes",
    "run",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Harness:
    """A harness configuration paired with its predicate chain."""

    config: HarnessConfig
    chain: PredicateChain

    @property
    def name(self) -> str:
        return self.config.name


@dataclass(frozen=True, slots=True)
class Verdict:
    """Outcome of evaluating one input.

    Attributes:
        outcome: What the harness would do
        predicate: The matched predicate when outcome is CRASH, else None
        bytes_read: Bytes consumed from the input (capped at read_size)
    """

    outcome: Outcome
    predicate: Predicate | None
    bytes_read: int

    @property
    def crashed(self) -> bool:
        return self.outcome is Outcome.CRASH

    @property
    def exit_status(self) -> int | None:
        """Normal exit status, or None when the process would abort."""
        return None if self.crashed else EXIT_OK


def acquire_input(harness: Harness, stream: BinaryIO | None = None) -> InputBuffer:
    """Zero a fresh buffer and fill it from stream.

    Args:
        harness: Harness whose geometry to use
        stream: Binary stream, or None for standard input
    """
    buffer = InputBuffer(harness.config.capacity)
    zero_fill(buffer)
    buffer.fill(read_bytes(stream, harness.config.read_size))
    return buffer


def _judge(harness: Harness, buffer: InputBuffer) -> Verdict:
    if not harness.config.accepts(buffer.filled):
        logger.debug(
            "Harness %s: %d bytes read, %d required; exiting normally",
            harness.name,
            buffer.filled,
            harness.config.min_length,
        )
        return Verdict(Outcome.INSUFFICIENT_INPUT, None, buffer.filled)

    predicate = harness.chain.first_match(buffer)
    if predicate is None:
        return Verdict(Outcome.NO_MATCH, None, buffer.filled)
    return Verdict(Outcome.CRASH, predicate, buffer.filled)


def _load(harness: Harness, data: bytes) -> InputBuffer:
    buffer = InputBuffer(harness.config.capacity)
    zero_fill(buffer)
    buffer.fill(data[: harness.config.read_size])
    return buffer


def evaluate_bytes(harness: Harness, data: bytes) -> Verdict:
    """Evaluate data as if it were the harness's standard input.

    Only the first read_size bytes are considered, exactly as a real run
    would read them. Never aborts.
    """
    return _judge(harness, _load(harness, data))


def explain_bytes(harness: Harness, data: bytes) -> tuple[Verdict, tuple[Predicate, ...]]:
    """Evaluate data and also list every predicate it satisfies.

    The verdict is identical to evaluate_bytes(); the match list is empty
    when the input is too short to be evaluated.
    """
    buffer = _load(harness, data)
    verdict = _judge(harness, buffer)
    if verdict.outcome is Outcome.INSUFFICIENT_INPUT:
        return verdict, ()
    return verdict, harness.chain.all_matches(buffer)


def evaluate_or_raise(harness: Harness, data: bytes) -> Verdict:
    """Evaluate data and raise on a match.

    Raises:
        StrategyCrashError: If a predicate matched
    """
    verdict = evaluate_bytes(harness, data)
    if verdict.predicate is not None:
        raise StrategyCrashError(verdict.predicate)
    return verdict


def run(harness: Harness, stream: BinaryIO | None = None) -> int:
    """Run a harness against one input stream.

    Returns:
        EXIT_OK when no predicate matched or input was too short. A match
        never returns: the process is aborted.
    """
    verdict = _judge(harness, acquire_input(harness, stream))
    if verdict.predicate is not None:
        logger.debug(
            "Harness %s: aborting on %s (%s)",
            harness.name,
            verdict.predicate.name,
            verdict.predicate.strategy,
        )
        abort_process()
    return EXIT_OK
