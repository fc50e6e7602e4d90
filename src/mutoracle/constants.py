"""Shared constants for mutoracle.

Single source of truth for buffer geometry, seed corpora, and the literal
values the harness predicates look for. Harness modules import from here
so that predicate tables, seed writers, and tests agree on every byte.

Constants are grouped by domain:
- Exit status: Normal process termination code
- Harness A geometry: ASCII seed harness (4 predicates)
- Harness B geometry: Strategy matrix harness (zero/0xFF seeds)
- Literals: Tokens and interesting values planted in predicates

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Exit status
    "EXIT_OK",
    # Harness A geometry
    "HARNESS_A_CAPACITY",
    "HARNESS_A_READ_SIZE",
    "HARNESS_A_MIN_LENGTH",
    "ASCII_SEED",
    # Harness B geometry
    "HARNESS_B_CAPACITY",
    "HARNESS_B_READ_SIZE",
    "HARNESS_B_MIN_LENGTH",
    "ZERO_SEED",
    "ONES_SEED",
    # Literals
    "DICTIONARY_TOKEN",
    "HAVOC_TOKEN",
    "INTERESTING_8",
    "INTERESTING_16",
    "INTERESTING_32",
]

# ============================================================================
# EXIT STATUS
# ============================================================================

# Returned when no predicate matched or when input was too short.
# A matched predicate never returns: the process dies with SIGABRT.
EXIT_OK: int = 0

# ============================================================================
# HARNESS A GEOMETRY
# ============================================================================

# Buffer is twice the read size; bytes 50..99 are always zero.
HARNESS_A_CAPACITY: int = 100
HARNESS_A_READ_SIZE: int = 50
HARNESS_A_MIN_LENGTH: int = 0

# Seed the fuzzer starts from. Every predicate is one mutation away from it.
ASCII_SEED: bytes = b"AAAA"

# ============================================================================
# HARNESS B GEOMETRY
# ============================================================================

HARNESS_B_CAPACITY: int = 128
HARNESS_B_READ_SIZE: int = 100

# Inputs shorter than this cannot reach the dictionary predicate at 50..53
# with room to spare, so the harness exits normally without evaluating.
HARNESS_B_MIN_LENGTH: int = 64

# Primary seed and the second seed used for splicing.
ZERO_SEED: bytes = bytes(64)
ONES_SEED: bytes = b"\xff" * 64

# ============================================================================
# LITERALS
# ============================================================================

# Token supplied to the fuzzer through its dictionary file.
DICTIONARY_TOKEN: bytes = b"ABCD"

# Three-byte overwrite that only stacked havoc tweaks are expected to produce.
HAVOC_TOKEN: bytes = b"HVC"

# Interesting values planted at 8/16/32-bit width. Each needs at least two
# bit flips from a zero seed, so walking bit flips cannot reach them.
# 0x80 and 0x8000 are single-bit values and would be found by bitflip 1/1;
# 0xFFFE (-2) stands in for the 16-bit slot.
INTERESTING_8: int = 0x7F
INTERESTING_16: int = 0xFFFE
INTERESTING_32: int = 0x7FFFFFFF
