"""Shadow Oracle - Reference tables for differential testing.

A deliberately flat restatement of both harnesses: every predicate is a
dict of required byte values plus a dict of guard bytes, written out by
hand from the harness layout. No words, no endianness, no shared code
with the real evaluator, so a disagreement points at one side or the
other rather than at a common helper.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

_ZERO = {0: 0x00}


@dataclass(frozen=True)
class ShadowPredicate:
    """Required bytes and guard bytes, both as offset -> value."""

    name: str
    required: dict[int, int]
    guard: dict[int, int] = field(default_factory=dict)

    def holds(self, buf: bytes) -> bool:
        wanted = {**self.required, **self.guard}
        return all(buf[o] == v for o, v in wanted.items())


@dataclass(frozen=True)
class ShadowHarness:
    """Reference harness: geometry plus an ordered predicate list."""

    capacity: int
    read_size: int
    min_length: int
    predicates: tuple[ShadowPredicate, ...]

    def evaluate(self, data: bytes) -> str:
        """Return the matched predicate name or the non-crash outcome value."""
        data = data[: self.read_size]
        if len(data) < self.min_length:
            return "insufficient_input"
        buf = data + bytes(self.capacity - len(data))
        for predicate in self.predicates:
            if predicate.holds(buf):
                return predicate.name
        return "no_match"


def _run(offset: int, values: bytes) -> dict[int, int]:
    return {offset + i: b for i, b in enumerate(values)}


SHADOW_A = ShadowHarness(
    capacity=100,
    read_size=50,
    min_length=0,
    predicates=(
        ShadowPredicate("bitflip_byte0", {0: 0x43}),
        ShadowPredicate("arith_byte1", {1: 0x4B}),
        ShadowPredicate("interest_byte2", {2: 0x00}, {0: 0x41, 1: 0x41}),
        ShadowPredicate("dictionary_abcd", _run(0, b"ABCD")),
    ),
)

SHADOW_B = ShadowHarness(
    capacity=128,
    read_size=100,
    min_length=64,
    predicates=(
        ShadowPredicate("bitflip_1_1", {0: 0x01}, {1: 0x00}),
        ShadowPredicate("bitflip_2_1", {1: 0x03}, _ZERO),
        ShadowPredicate("bitflip_4_1", {2: 0x0F}, _ZERO),
        ShadowPredicate("bitflip_8_8", {3: 0xFF}, _ZERO),
        ShadowPredicate("bitflip_16_8", _run(4, b"\xff\xff"), _ZERO),
        ShadowPredicate("bitflip_32_8", _run(6, b"\xff\xff\xff\xff"), _ZERO),
        ShadowPredicate("arith_8_8", {10: 0x0A}, _ZERO),
        ShadowPredicate("arith_16_8", _run(12, b"\x00\x01"), _ZERO),
        ShadowPredicate("arith_32_8", _run(16, b"\x00\x00\x01\x00"), _ZERO),
        ShadowPredicate("interest_8_8", {20: 0x7F}, _ZERO),
        ShadowPredicate("interest_16_8", _run(22, b"\xfe\xff"), _ZERO),
        ShadowPredicate("interest_32_8", _run(26, b"\xff\xff\xff\x7f"), _ZERO),
        ShadowPredicate("havoc_hvc", _run(30, b"HVC"), _ZERO),
        ShadowPredicate("splice_boundary", _run(40, bytes(4) + b"\xff" * 4)),
        ShadowPredicate("dictionary_abcd", _run(50, b"ABCD"), _ZERO),
    ),
)
