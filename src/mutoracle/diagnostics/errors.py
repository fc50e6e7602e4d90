"""mutoracle exception hierarchy.

Only two conditions are fatal at harness run time: a satisfied predicate
(reported by aborting the process, or by StrategyCrashError when evaluated
in-process) and a malformed chain definition (a programming error caught at
import time). Short input is not an error; it is a normal exit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mutoracle.predicates import Predicate


class OracleError(Exception):
    """Base exception for all mutoracle errors."""


class ChainDefinitionError(OracleError):
    """Predicate chain is malformed.

    Raised at construction time for duplicate predicate names or for a chain
    whose strategies are not in exploration order.
    """


class OverlappingTriggerError(ChainDefinitionError):
    """Two predicates in a disjoint chain trigger on the same byte.

    Attributes:
        first: Name of the earlier predicate
        second: Name of the later predicate
        offsets: Byte offsets both predicates trigger on
    """

    def __init__(self, first: str, second: str, offsets: tuple[int, ...]) -> None:
        """Initialize OverlappingTriggerError.

        Args:
            first: Name of the earlier predicate
            second: Name of the later predicate
            offsets: Byte offsets both predicates trigger on
        """
        shared = ", ".join(str(o) for o in offsets)
        super().__init__(f"Predicates '{first}' and '{second}' both trigger on byte(s) {shared}")
        self.first = first
        self.second = second
        self.offsets = offsets


class BufferOverflowError(OracleError):
    """Attempt to fill an input buffer past its capacity.

    Attributes:
        capacity: Buffer capacity in bytes
        requested: Number of bytes offered
    """

    def __init__(self, capacity: int, requested: int) -> None:
        """Initialize BufferOverflowError.

        Args:
            capacity: Buffer capacity in bytes
            requested: Number of bytes offered
        """
        super().__init__(f"Cannot fill {requested} bytes into a {capacity}-byte buffer")
        self.capacity = capacity
        self.requested = requested


class StrategyCrashError(OracleError):
    """A predicate matched while evaluating in-process.

    Out-of-process harness runs abort instead of raising. In-process drivers
    (Atheris) need an uncaught exception to register a finding, so they raise
    this with the matched predicate attached.

    Attributes:
        predicate: The predicate that matched
    """

    def __init__(self, predicate: Predicate) -> None:
        """Initialize StrategyCrashError.

        Args:
            predicate: The predicate that matched
        """
        super().__init__(f"Predicate '{predicate.name}' matched ({predicate.strategy})")
        self.predicate = predicate


class UnknownHarnessError(OracleError, KeyError):
    """Requested harness name is not registered.

    Subclasses KeyError so registry lookups behave like mapping lookups.
    """

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        """Initialize UnknownHarnessError.

        Args:
            name: The name that was requested
            known: Registered harness names
        """
        super().__init__(f"Unknown harness '{name}' (known: {', '.join(known)})")
        self.name = name
        self.known = known

    def __str__(self) -> str:
        """Return the message without KeyError's repr quoting."""
        return str(self.args[0])
