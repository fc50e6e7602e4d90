"""State Machine Fuzzer for the oracle harnesses using Shadow Testing.

Applies the same kinds of edits a mutation fuzzer makes (bit flips, byte
arithmetic, interesting values, token overwrites, splicing with the other
seed, truncation) to a working input, and after every step checks that
the real evaluator and the flat shadow tables agree on the outcome.

Run with:
    pytest tests/fuzz/test_harness_oracle.py -v

For intensive fuzzing:
    pytest -m fuzz --hypothesis-seed=0

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st
from hypothesis.stateful import (
    RuleBasedStateMachine,
    initialize,
    invariant,
    rule,
)

from mutoracle.constants import ONES_SEED, ZERO_SEED
from mutoracle.harnesses import harness_a, harness_b
from mutoracle.runner import evaluate_bytes

from .shadow_oracle import SHADOW_A, SHADOW_B

# Mark entire module as fuzz tests (excluded from normal test runs)
pytestmark = pytest.mark.fuzz

# Offsets weighted towards the trigger region of harness B.
_offsets = st.one_of(st.integers(0, 55), st.integers(0, 99))
_interesting_8 = st.sampled_from([0x00, 0x01, 0x10, 0x20, 0x40, 0x64, 0x7F, 0x80, 0xFF])
_tokens = st.sampled_from([b"HVC", b"ABCD", b"\xfe\xff", b"\xff\xff\xff\x7f", b"\x00\x01"])


def _label(data: bytes) -> str:
    verdict = evaluate_bytes(harness_b.HARNESS, data)
    if verdict.predicate is not None:
        return verdict.predicate.name
    return str(verdict.outcome)


class HarnessBOracleStateMachine(RuleBasedStateMachine):
    """Mutate a harness B input and compare against the shadow tables.

    Invariants:
    - Real evaluator and shadow agree on the matched predicate or outcome
    - A crash reported by the real evaluator is the first of all matches
    """

    def __init__(self) -> None:
        super().__init__()
        self.data = bytearray(ZERO_SEED)

    @initialize(seed=st.sampled_from([ZERO_SEED, ONES_SEED]))
    def start_from_seed(self, seed: bytes) -> None:
        self.data = bytearray(seed)
        event(f"seed={'zero' if seed == ZERO_SEED else 'ones'}")

    def _reach(self, end: int) -> None:
        if len(self.data) < end:
            self.data.extend(bytes(end - len(self.data)))

    @rule(offset=_offsets, bit=st.integers(0, 7))
    def flip_bit(self, offset: int, bit: int) -> None:
        self._reach(offset + 1)
        self.data[offset] ^= 1 << bit

    @rule(offset=_offsets)
    def flip_byte(self, offset: int) -> None:
        self._reach(offset + 1)
        self.data[offset] ^= 0xFF

    @rule(offset=_offsets, delta=st.integers(-35, 35))
    def add_arith(self, offset: int, delta: int) -> None:
        self._reach(offset + 1)
        self.data[offset] = (self.data[offset] + delta) & 0xFF

    @rule(offset=_offsets, value=_interesting_8)
    def set_interesting(self, offset: int, value: int) -> None:
        self._reach(offset + 1)
        self.data[offset] = value

    @rule(offset=_offsets, token=_tokens)
    def overwrite_token(self, offset: int, token: bytes) -> None:
        self._reach(offset + len(token))
        self.data[offset : offset + len(token)] = token

    @rule(cut=st.integers(1, 63))
    def splice_with_ones(self, cut: int) -> None:
        self.data = bytearray(self.data[:cut]) + bytearray(ONES_SEED[cut:])

    @rule(length=st.integers(0, 100))
    def truncate(self, length: int) -> None:
        del self.data[length:]

    @invariant()
    def agrees_with_shadow(self) -> None:
        real = _label(bytes(self.data))
        shadow = SHADOW_B.evaluate(bytes(self.data))
        event(f"outcome={real}")
        assert real == shadow, f"real={real} shadow={shadow} data={bytes(self.data).hex()}"

    @invariant()
    def first_of_all_matches(self) -> None:
        data = bytes(self.data)
        verdict = evaluate_bytes(harness_b.HARNESS, data)
        if verdict.predicate is not None:
            buf = data[:100].ljust(128, b"\x00")
            assert harness_b.CHAIN.all_matches(buf)[0] is verdict.predicate


TestHarnessBOracle = HarnessBOracleStateMachine.TestCase
TestHarnessBOracle.settings = settings(max_examples=300, stateful_step_count=30)


class TestHarnessAShadow:
    """Harness A against its shadow table over seed-like inputs."""

    @given(
        data=st.lists(
            st.sampled_from(b"ABCDK\x00"), min_size=0, max_size=8
        ).map(bytes)
        | st.binary(max_size=60),
    )
    @settings(max_examples=1000)
    def test_agrees_with_shadow(self, data: bytes) -> None:
        verdict = evaluate_bytes(harness_a.HARNESS, data)
        real = verdict.predicate.name if verdict.predicate else str(verdict.outcome)
        event(f"outcome={real}")
        assert real == SHADOW_A.evaluate(data)


class TestHarnessBShadow:
    """Harness B against its shadow table over raw bytes."""

    @given(data=st.binary(min_size=60, max_size=110))
    @settings(max_examples=1000)
    def test_agrees_with_shadow(self, data: bytes) -> None:
        real = _label(data)
        event(f"outcome={real}")
        assert real == SHADOW_B.evaluate(data)
