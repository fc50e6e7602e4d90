"""Harness A: four strategies against the ASCII seed "AAAA".

Reads up to 50 bytes into a 100-byte buffer. Every predicate sits in the
first four bytes and is one mutation away from the seed:

    byte 0   'A' -> 'C'   bitflip 1/1   (0x41 -> 0x43, bit 1)
    byte 1   'A' -> 'K'   arith 8/8     (0x41 + 10)
    byte 2   'A' -> 0x00  interest 8/8  (only while bytes 0-1 are still 'A')
    0..3     "ABCD"       user extras   (dictionary overwrite)

Triggers overlap here (the dictionary token covers bytes 0-3), so the chain
is not declared disjoint. "ABCD" still reaches the last predicate because
'A', 'B' and 'C' fail the three single-byte triggers.

Usage:
    mutoracle-harness-a < input
    python -m mutoracle.harnesses.harness_a < input
"""

from __future__ import annotations

import sys

from mutoracle.config import HarnessConfig
from mutoracle.constants import (
    ASCII_SEED,
    DICTIONARY_TOKEN,
    HARNESS_A_CAPACITY,
    HARNESS_A_MIN_LENGTH,
    HARNESS_A_READ_SIZE,
)
from mutoracle.enums import Strategy, Width
from mutoracle.evaluator import PredicateChain
from mutoracle.predicates import ByteSequence, Guard, Predicate, WordEquals
from mutoracle.runner import Harness, run

__all__ = ["CHAIN", "CONFIG", "HARNESS", "main"]

CONFIG = HarnessConfig(
    name="a",
    capacity=HARNESS_A_CAPACITY,
    read_size=HARNESS_A_READ_SIZE,
    min_length=HARNESS_A_MIN_LENGTH,
    seeds=(ASCII_SEED,),
    dictionary=(DICTIONARY_TOKEN,),
)

CHAIN = PredicateChain(
    [
        Predicate(
            "bitflip_byte0",
            Strategy.BITFLIP_1_1,
            WordEquals(0, Width.U8, ord("C")),
            note="'A' (0100 0001) -> 'C' (0100 0011)",
        ),
        Predicate(
            "arith_byte1",
            Strategy.ARITH_8_8,
            WordEquals(1, Width.U8, ord("K")),
            note="'A' + 10",
        ),
        Predicate(
            "interest_byte2",
            Strategy.INTEREST_8_8,
            WordEquals(2, Width.U8, 0x00),
            Guard.unchanged(ASCII_SEED, 0, 1, reason="zeroing byte 2 alone"),
            note="byte replaced with interesting value 0",
        ),
        Predicate(
            "dictionary_abcd",
            Strategy.USER_EXTRAS,
            ByteSequence(0, DICTIONARY_TOKEN),
            note="token overwritten at offset 0",
        ),
    ],
)

HARNESS = Harness(CONFIG, CHAIN)


def main() -> int:
    """Entry point: evaluate standard input, abort on a match."""
    return run(HARNESS)


if __name__ == "__main__":
    sys.exit(main())
