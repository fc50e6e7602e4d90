"""Enumerations for mutoracle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion and IntEnum for
word widths so that a Width can be used directly in bit arithmetic.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Strategy(StrEnum):
    """Mutation strategy a predicate is designed to be reached by.

    Values follow the stage names a fuzzer prints in its status screen:
    str(Strategy.ARITH_16_8) == "arith 16/8"
    """

    BITFLIP_1_1 = "bitflip 1/1"
    """Walking single-bit flip."""

    BITFLIP_2_1 = "bitflip 2/1"
    """Walking flip of two adjacent bits."""

    BITFLIP_4_1 = "bitflip 4/1"
    """Walking flip of four adjacent bits."""

    BITFLIP_8_8 = "bitflip 8/8"
    """Walking byte flip."""

    BITFLIP_16_8 = "bitflip 16/8"
    """Walking word flip."""

    BITFLIP_32_8 = "bitflip 32/8"
    """Walking dword flip."""

    ARITH_8_8 = "arith 8/8"
    """Small add/subtract on a byte."""

    ARITH_16_8 = "arith 16/8"
    """Small add/subtract on a word, either endianness."""

    ARITH_32_8 = "arith 32/8"
    """Small add/subtract on a dword, either endianness."""

    INTEREST_8_8 = "interest 8/8"
    """Byte replaced with an interesting constant."""

    INTEREST_16_8 = "interest 16/8"
    """Word replaced with an interesting constant."""

    INTEREST_32_8 = "interest 32/8"
    """Dword replaced with an interesting constant."""

    HAVOC = "havoc"
    """Stacked random tweaks, including block overwrites."""

    SPLICE = "splice"
    """Crossover of two seed inputs."""

    USER_EXTRAS = "user extras"
    """Token from the user-supplied dictionary, overwritten or inserted."""

    @property
    def stage(self) -> int:
        """Position of this strategy in the deterministic exploration order.

        Lower stages are tried first by the fuzzer. Predicate chains must be
        ordered by non-decreasing stage.
        """
        return _STAGE_ORDER.index(self)


_STAGE_ORDER: tuple[Strategy, ...] = tuple(Strategy)


class Width(IntEnum):
    """Bit width of a numeric comparison."""

    U8 = 8
    U16 = 16
    U32 = 32

    @property
    def size(self) -> int:
        """Number of bytes covered by this width."""
        return self.value // 8

    @property
    def max_value(self) -> int:
        """Largest unsigned value representable at this width."""
        return (1 << self.value) - 1


class ComparisonKind(StrEnum):
    """How a condition compares buffer bytes.

    StrEnum provides automatic string conversion: str(ComparisonKind.NUMERIC) == "numeric"
    """

    BYTE_SEQUENCE = "byte_sequence"
    """Bytes at an offset equal a literal sequence."""

    NUMERIC = "numeric"
    """Little-endian word at an offset equals a constant."""

    RECONFIRM = "reconfirm"
    """Bytes still hold their seed value (disambiguation guard)."""


class Outcome(StrEnum):
    """Result of evaluating one input against a harness."""

    CRASH = "crash"
    """A predicate matched; the process aborts."""

    NO_MATCH = "no_match"
    """Every predicate was evaluated and none matched."""

    INSUFFICIENT_INPUT = "insufficient_input"
    """Input shorter than the harness minimum; nothing was evaluated."""


__all__ = [
    "ComparisonKind",
    "Outcome",
    "Strategy",
    "Width",
]
