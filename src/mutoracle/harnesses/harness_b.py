"""Harness B: the full deterministic strategy matrix.

Seeds: 64 bytes of 0x00 (primary) and 64 bytes of 0xFF (splice partner).
Reads up to 100 bytes into a 128-byte buffer and exits normally when fewer
than 64 bytes arrive.

Layout (trigger bytes are pairwise disjoint):

    0       bitflip 1/1   0x00 -> 0x01        guard: byte 1 still 0
    1       bitflip 2/1   0x00 -> 0x03        guard: byte 0 still 0
    2       bitflip 4/1   0x00 -> 0x0F
    3       bitflip 8/8   0x00 -> 0xFF
    4-5     bitflip 16/8  0x0000 -> 0xFFFF
    6-9     bitflip 32/8  0x00000000 -> 0xFFFFFFFF
    10      arith 8/8     0x00 + 10
    12-13   arith 16/8    0x0000 -> 0x0100 (LE 00 01)
    16-19   arith 32/8    0x00000000 -> 0x00010000 (LE 00 00 01 00)
    20      interest 8/8  0x7F
    22-23   interest 16/8 0xFFFE
    26-29   interest 32/8 0x7FFFFFFF
    30-32   havoc         "HVC"
    40-47   splice        0x00000000 then 0xFFFFFFFF
    50-53   user extras   "ABCD"

Unless noted, the guard is "byte 0 still 0": a changed byte 0 means the
input already carries an earlier find, so the trigger may be havoc debris.
The splice predicate has no guard; a crossover may carry any prefix.

Usage:
    mutoracle-harness-b < input
    python -m mutoracle.harnesses.harness_b < input
"""

from __future__ import annotations

import sys

from mutoracle.config import HarnessConfig
from mutoracle.constants import (
    DICTIONARY_TOKEN,
    HARNESS_B_CAPACITY,
    HARNESS_B_MIN_LENGTH,
    HARNESS_B_READ_SIZE,
    HAVOC_TOKEN,
    INTERESTING_8,
    INTERESTING_16,
    INTERESTING_32,
    ONES_SEED,
    ZERO_SEED,
)
from mutoracle.enums import Strategy, Width
from mutoracle.evaluator import PredicateChain
from mutoracle.predicates import AllOf, ByteSequence, Guard, Predicate, WordEquals
from mutoracle.runner import Harness, run

__all__ = ["CHAIN", "CONFIG", "HARNESS", "main"]

CONFIG = HarnessConfig(
    name="b",
    capacity=HARNESS_B_CAPACITY,
    read_size=HARNESS_B_READ_SIZE,
    min_length=HARNESS_B_MIN_LENGTH,
    seeds=(ZERO_SEED, ONES_SEED),
    dictionary=(DICTIONARY_TOKEN,),
)

_BYTE0_UNCHANGED = Guard.unchanged(ZERO_SEED, 0, reason="byte 0 already mutated")

CHAIN = PredicateChain(
    [
        # Walking bit flips
        Predicate(
            "bitflip_1_1",
            Strategy.BITFLIP_1_1,
            WordEquals(0, Width.U8, 0x01),
            Guard.unchanged(ZERO_SEED, 1, reason="arith +1 spilling into byte 1"),
            note="also reachable by arith +1; bit flips run first",
        ),
        Predicate(
            "bitflip_2_1",
            Strategy.BITFLIP_2_1,
            WordEquals(1, Width.U8, 0x03),
            _BYTE0_UNCHANGED,
            note="two adjacent bits; 1/1 yields 0x01 or 0x02 only",
        ),
        Predicate(
            "bitflip_4_1",
            Strategy.BITFLIP_4_1,
            WordEquals(2, Width.U8, 0x0F),
            _BYTE0_UNCHANGED,
        ),
        # Walking byte flips
        Predicate(
            "bitflip_8_8",
            Strategy.BITFLIP_8_8,
            WordEquals(3, Width.U8, 0xFF),
            _BYTE0_UNCHANGED,
        ),
        Predicate(
            "bitflip_16_8",
            Strategy.BITFLIP_16_8,
            WordEquals(4, Width.U16, 0xFFFF),
            _BYTE0_UNCHANGED,
        ),
        Predicate(
            "bitflip_32_8",
            Strategy.BITFLIP_32_8,
            WordEquals(6, Width.U32, 0xFFFFFFFF),
            _BYTE0_UNCHANGED,
        ),
        # Simple arithmetics
        Predicate(
            "arith_8_8",
            Strategy.ARITH_8_8,
            WordEquals(10, Width.U8, 0x0A),
            _BYTE0_UNCHANGED,
            note="0000 1010 needs two bit flips; +10 reaches it directly",
        ),
        Predicate(
            "arith_16_8",
            Strategy.ARITH_16_8,
            WordEquals(12, Width.U16, 0x0100),
            _BYTE0_UNCHANGED,
            note="LE +256 or BE +1 on bytes 12-13",
        ),
        Predicate(
            "arith_32_8",
            Strategy.ARITH_32_8,
            WordEquals(16, Width.U32, 0x00010000),
            _BYTE0_UNCHANGED,
        ),
        # Known integers
        Predicate(
            "interest_8_8",
            Strategy.INTEREST_8_8,
            WordEquals(20, Width.U8, INTERESTING_8),
            _BYTE0_UNCHANGED,
            note="127; 0x80 would be a single bit flip",
        ),
        Predicate(
            "interest_16_8",
            Strategy.INTEREST_16_8,
            WordEquals(22, Width.U16, INTERESTING_16),
            _BYTE0_UNCHANGED,
            note="-2; 0x8000 would be a single bit flip",
        ),
        Predicate(
            "interest_32_8",
            Strategy.INTEREST_32_8,
            WordEquals(26, Width.U32, INTERESTING_32),
            _BYTE0_UNCHANGED,
            note="INT32_MAX",
        ),
        # Stacked tweaks and splicing
        Predicate(
            "havoc_hvc",
            Strategy.HAVOC,
            ByteSequence(30, HAVOC_TOKEN),
            _BYTE0_UNCHANGED,
            note="three-byte block overwrite",
        ),
        Predicate(
            "splice_boundary",
            Strategy.SPLICE,
            AllOf(
                (
                    WordEquals(40, Width.U32, 0x00000000),
                    WordEquals(44, Width.U32, 0xFFFFFFFF),
                ),
            ),
            note="zero-seed head joined to 0xFF-seed tail at offset 44",
        ),
        # Dictionary
        Predicate(
            "dictionary_abcd",
            Strategy.USER_EXTRAS,
            ByteSequence(50, DICTIONARY_TOKEN),
            _BYTE0_UNCHANGED,
        ),
    ],
    disjoint=True,
)

HARNESS = Harness(CONFIG, CHAIN)


def main() -> int:
    """Entry point: evaluate standard input, abort on a match."""
    return run(HARNESS)


if __name__ == "__main__":
    sys.exit(main())
