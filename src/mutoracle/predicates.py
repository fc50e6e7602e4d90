"""Predicate descriptors for mutation-strategy oracles.

A predicate pairs a trigger condition with an optional guard. The trigger is
the byte pattern a particular mutation strategy is expected to produce from
the seed; the guard reconfirms that other bytes still hold their seed value,
which rules out a broader mutation (havoc, arithmetic on a neighbour) as the
cause of the trigger.

Every descriptor is a frozen dataclass and every check is a pure function of
the buffer, so a chain can be evaluated any number of times, in any process,
with the same result.

Trigger kinds:
    ByteSequence - bytes at an offset equal a literal
    WordEquals   - little-endian word at an offset equals a constant
    AllOf        - conjunction of the above (splice boundaries)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mutoracle.core.words import bit_distance, pack_word, read_word
from mutoracle.enums import ComparisonKind, Strategy, Width

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "AllOf",
    "ByteSequence",
    "Condition",
    "Guard",
    "Predicate",
    "WordEquals",
]


@dataclass(frozen=True, slots=True)
class ByteSequence:
    """Bytes starting at offset equal literal.

    Example:
        >>> ByteSequence(30, b"HVC").holds(bytes(30) + b"HVC")
        True
    """

    offset: int
    literal: bytes

    def __post_init__(self) -> None:
        """Reject empty literals and negative offsets."""
        if not self.literal:
            msg = "literal must not be empty"
            raise ValueError(msg)
        if self.offset < 0:
            msg = "offset must not be negative"
            raise ValueError(msg)

    @property
    def kind(self) -> ComparisonKind:
        return ComparisonKind.BYTE_SEQUENCE

    @property
    def width(self) -> Width | None:
        return None

    @property
    def span(self) -> tuple[int, ...]:
        return tuple(range(self.offset, self.offset + len(self.literal)))

    def holds(self, data: Sequence[int]) -> bool:
        return all(data[self.offset + i] == b for i, b in enumerate(self.literal))

    def assignments(self) -> dict[int, int]:
        return {self.offset + i: b for i, b in enumerate(self.literal)}

    def describe(self) -> str:
        return f"bytes[{self.offset}:{self.offset + len(self.literal)}] == {self.literal!r}"


@dataclass(frozen=True, slots=True)
class WordEquals:
    """Little-endian word of the given width at offset equals value.

    Example:
        >>> WordEquals(12, Width.U16, 0x0100).holds(bytes(12) + b"\\x00\\x01")
        True
    """

    offset: int
    width: Width
    value: int

    def __post_init__(self) -> None:
        """Reject values that cannot be represented at width."""
        if self.offset < 0:
            msg = "offset must not be negative"
            raise ValueError(msg)
        # Raises ValueError for out-of-range values.
        pack_word(self.value, self.width)

    @property
    def kind(self) -> ComparisonKind:
        return ComparisonKind.NUMERIC

    @property
    def span(self) -> tuple[int, ...]:
        return tuple(range(self.offset, self.offset + self.width.size))

    def holds(self, data: Sequence[int]) -> bool:
        return read_word(data, self.offset, self.width) == self.value

    def assignments(self) -> dict[int, int]:
        encoded = pack_word(self.value, self.width)
        return {self.offset + i: b for i, b in enumerate(encoded)}

    def describe(self) -> str:
        digits = self.width.size * 2
        return f"u{int(self.width)}le@{self.offset} == 0x{self.value:0{digits}X}"


@dataclass(frozen=True, slots=True)
class AllOf:
    """Every sub-condition holds.

    Used where one mutation leaves two marks at once, such as the boundary
    between two spliced seeds.
    """

    conditions: tuple[ByteSequence | WordEquals, ...]

    def __post_init__(self) -> None:
        """Require at least two sub-conditions."""
        if len(self.conditions) < 2:
            msg = "AllOf needs at least two conditions"
            raise ValueError(msg)

    @property
    def kind(self) -> ComparisonKind:
        kinds = {c.kind for c in self.conditions}
        if len(kinds) == 1:
            return kinds.pop()
        return ComparisonKind.BYTE_SEQUENCE

    @property
    def width(self) -> Width | None:
        widths = {c.width for c in self.conditions}
        return widths.pop() if len(widths) == 1 else None

    @property
    def offset(self) -> int:
        return min(self.span)

    @property
    def span(self) -> tuple[int, ...]:
        return tuple(sorted({o for c in self.conditions for o in c.span}))

    def holds(self, data: Sequence[int]) -> bool:
        return all(c.holds(data) for c in self.conditions)

    def assignments(self) -> dict[int, int]:
        merged: dict[int, int] = {}
        for condition in self.conditions:
            merged.update(condition.assignments())
        return merged

    def describe(self) -> str:
        return " and ".join(c.describe() for c in self.conditions)


type Condition = ByteSequence | WordEquals | AllOf


@dataclass(frozen=True, slots=True)
class Guard:
    """Bytes that must still hold their seed value.

    Guards only read; they may look at bytes another predicate triggers on.

    Attributes:
        expected: (offset, value) pairs that must all match
        reason: Which alternative cause the guard rules out
    """

    expected: tuple[tuple[int, int], ...]
    reason: str = ""

    @classmethod
    def unchanged(cls, seed: bytes, *offsets: int, reason: str = "") -> Guard:
        """Build a guard requiring bytes at offsets to equal the seed's.

        Offsets past the end of the seed are expected to be zero, matching a
        zero-initialized buffer.
        """
        expected = tuple((o, seed[o] if o < len(seed) else 0) for o in offsets)
        return cls(expected=expected, reason=reason)

    @property
    def kind(self) -> ComparisonKind:
        return ComparisonKind.RECONFIRM

    @property
    def offsets(self) -> tuple[int, ...]:
        return tuple(o for o, _ in self.expected)

    def holds(self, data: Sequence[int]) -> bool:
        return all(data[o] == v for o, v in self.expected)

    def describe(self) -> str:
        return " and ".join(f"byte {o} == 0x{v:02X}" for o, v in self.expected)


@dataclass(frozen=True, slots=True)
class Predicate:
    """One oracle entry: strategy tag, trigger, and optional guard.

    Example:
        >>> p = Predicate(
        ...     "arith_8_8",
        ...     Strategy.ARITH_8_8,
        ...     WordEquals(10, Width.U8, 0x0A),
        ...     Guard.unchanged(bytes(64), 0),
        ... )
        >>> p.holds(bytes(10) + b"\\x0a" + bytes(53))
        True
        >>> p.holds(b"\\x01" + bytes(9) + b"\\x0a" + bytes(53))
        False

    Attributes:
        name: Unique identifier within a chain
        strategy: Mutation strategy expected to reach the trigger
        trigger: Condition on the trigger bytes
        guard: Seed reconfirmation, or None
        note: Free-form explanation shown in tables
    """

    name: str
    strategy: Strategy
    trigger: Condition
    guard: Guard | None = None
    note: str = ""

    @property
    def kind(self) -> ComparisonKind:
        return self.trigger.kind

    @property
    def width(self) -> Width | None:
        return self.trigger.width

    @property
    def offset(self) -> int:
        return self.trigger.offset

    @property
    def span(self) -> tuple[int, ...]:
        """Byte offsets the trigger reads (guard offsets excluded)."""
        return self.trigger.span

    def triggered(self, data: Sequence[int]) -> bool:
        """Check the trigger alone, ignoring the guard."""
        return self.trigger.holds(data)

    def holds(self, data: Sequence[int]) -> bool:
        """Check trigger and guard."""
        if not self.trigger.holds(data):
            return False
        return self.guard is None or self.guard.holds(data)

    def witness(self, baseline: bytes) -> bytes:
        """Build an input that satisfies this predicate.

        Starts from baseline, zero-extends it to cover the trigger span, and
        overwrites only the trigger bytes. Guard bytes keep their baseline
        value, so the witness satisfies the guard whenever the baseline does.
        """
        data = bytearray(baseline)
        end = max(self.span) + 1
        if len(data) < end:
            data.extend(bytes(end - len(data)))
        for offset, value in self.trigger.assignments().items():
            data[offset] = value
        return bytes(data)

    def seed_distance(self, baseline: bytes) -> int:
        """Count trigger bits that differ between baseline and the witness.

        A distance of 1 means a single walking bit flip reaches the trigger.
        """
        witness = self.witness(baseline)
        padded = baseline.ljust(len(witness), b"\x00")
        return sum(bit_distance(witness[o], padded[o]) for o in self.span)
