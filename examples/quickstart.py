"""Quickstart example for mutoracle.

Evaluates inputs against both harnesses without aborting, builds a custom
predicate chain, and writes a seed corpus to a temporary directory.

Note: evaluate_bytes() never aborts. Only run() (the harness executables)
terminates the process on a match.
"""

import tempfile
from pathlib import Path

from mutoracle import (
    ByteSequence,
    Guard,
    Harness,
    HarnessConfig,
    Predicate,
    PredicateChain,
    Strategy,
    StrategyCrashError,
    Width,
    WordEquals,
    evaluate_bytes,
)
from mutoracle.corpus import write_corpus
from mutoracle.registry import get_harness
from mutoracle.runner import evaluate_or_raise, explain_bytes

# Example 1: Harness A
print("=" * 50)
print("Example 1: Harness A (seed 'AAAA')")
print("=" * 50)

harness_a = get_harness("a")
for data in (b"AAAA", b"CAAA", b"AKAA", b"AA\x00A", b"ABCD"):
    verdict = evaluate_bytes(harness_a, data)
    name = verdict.predicate.name if verdict.predicate else "-"
    print(f"{data!r:16} {verdict.outcome:<20} {name}")
# Output:
# b'AAAA'          no_match             -
# b'CAAA'          crash                bitflip_byte0
# ...

# Example 2: Harness B, minimum length and splice
print("\n" + "=" * 50)
print("Example 2: Harness B (64-byte minimum)")
print("=" * 50)

harness_b = get_harness("b")
splice = bytes(44) + b"\xff" * 20
print(evaluate_bytes(harness_b, splice[:63]).outcome)
# Output: insufficient_input
print(evaluate_bytes(harness_b, splice).predicate.name)
# Output: splice_boundary

# Every predicate an input satisfies, not just the first
crowded = bytearray(64)
crowded[3] = 0xFF
crowded[30:33] = b"HVC"
verdict, matches = explain_bytes(harness_b, bytes(crowded))
print(f"first={verdict.predicate.name} all={[p.name for p in matches]}")
# Output: first=bitflip_8_8 all=['bitflip_8_8', 'havoc_hvc']

# Example 3: In-process drivers raise instead of aborting
print("\n" + "=" * 50)
print("Example 3: StrategyCrashError")
print("=" * 50)

try:
    evaluate_or_raise(harness_b, splice)
except StrategyCrashError as e:
    print(f"[CRASH] {e}")
# Output: [CRASH] Predicate 'splice_boundary' matched (splice)

# Example 4: A custom chain
print("\n" + "=" * 50)
print("Example 4: Custom Harness")
print("=" * 50)

seed = b"\x00" * 16
custom = Harness(
    HarnessConfig(name="custom", capacity=32, read_size=16, min_length=8, seeds=(seed,)),
    PredicateChain(
        [
            Predicate("word", Strategy.ARITH_16_8, WordEquals(2, Width.U16, 0x0100)),
            Predicate(
                "magic",
                Strategy.USER_EXTRAS,
                ByteSequence(8, b"MAGIC"),
                Guard.unchanged(seed, 0),
            ),
        ],
        disjoint=True,
    ),
)
print(evaluate_bytes(custom, bytes(8) + b"MAGIC").predicate.name)
# Output: magic

# Example 5: Seed corpus
print("\n" + "=" * 50)
print("Example 5: Seed Corpus")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    layout = write_corpus(harness_b, Path(tmp), witnesses=True)
    print(f"seeds: {len(layout.seeds)}  witnesses: {len(layout.witnesses)}")
    # Output: seeds: 2  witnesses: 15

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
