#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: oracle - Mutation-Strategy Oracle Harnesses
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# FUZZ_PLUGIN_HEADER_END
"""Mutation-Strategy Oracle Fuzzer (Atheris).

Targets: mutoracle.harnesses.harness_a / harness_b (in-process)

Feeds libFuzzer's raw input straight into a harness's predicate chain. Each
libFuzzer input is treated exactly like the harness's standard input: the
first read_size bytes are copied into a zeroed buffer and the chain is
walked once.

Two modes:
- default: a matched predicate raises StrategyCrashError, which libFuzzer
  reports as a crash and writes to crash-<sha1>. Same contract as the
  out-of-process harness aborting.
- --collect: matches are counted instead of raised, so a single run shows
  which predicates (and therefore which mutation strategies) libFuzzer's
  engine reaches, with the iteration of each first hit.

Requires Python 3.13+ (uses PEP 695 type aliases).
"""

from __future__ import annotations

import argparse
import atexit
import gc
import logging
import pathlib
import sys
from typing import Any

# --- Dependency Checks ---
_psutil_mod: Any = None
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for check_dependencies
    import psutil as _psutil_mod  # type: ignore[no-redef]
except ImportError:
    pass

try:  # noqa: SIM105 - need module ref for check_dependencies
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

from fuzz_common import (  # noqa: E402 - after dependency capture  # pylint: disable=C0413
    GC_INTERVAL,
    MEMORY_SAMPLE_INTERVAL,
    BaseFuzzerState,
    build_base_stats_dict,
    check_dependencies,
    emit_checkpoint_report,
    emit_final_report,
    get_process,
    record_memory,
    record_outcome,
)

check_dependencies(["psutil", "atheris"], [_psutil_mod, _atheris_mod])

import atheris  # noqa: E402  # pylint: disable=C0412,C0413

# --- Suppress logging and instrument imports ---
logging.getLogger("mutoracle").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["mutoracle"]):
    from mutoracle.diagnostics import StrategyCrashError
    from mutoracle.registry import get_harness
    from mutoracle.runner import evaluate_bytes


# --- Module State ---

_state = BaseFuzzerState()
_harness = get_harness("b")
_collect = False

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "oracle"


def _report_filename() -> str:
    return f"fuzz_oracle_{_harness.name}_report.json"


def _build_stats_dict() -> dict[str, Any]:
    return build_base_stats_dict(_state, [p.name for p in _harness.chain])


def _emit_report() -> None:
    """Emit crash-proof final report."""
    emit_final_report(_state, _build_stats_dict(), _REPORT_DIR, _report_filename())


atexit.register(_emit_report)


# --- Main Entry Point ---


def test_one_input(data: bytes) -> None:
    """Atheris entry point: evaluate one input against the selected harness."""
    if _state.iterations == 0:
        _state.initial_memory_mb = get_process().memory_info().rss / (1024 * 1024)

    _state.iterations += 1
    _state.status = "running"

    if _state.iterations % _state.checkpoint_interval == 0:
        emit_checkpoint_report(_build_stats_dict())

    try:
        verdict = evaluate_bytes(_harness, data)
        predicate = verdict.predicate
        record_outcome(
            _state, str(verdict.outcome), predicate.name if predicate else None, data,
        )
        if predicate is not None and not _collect:
            raise StrategyCrashError(predicate)

    except KeyboardInterrupt:
        _state.status = "stopped"
        raise

    finally:
        if _state.iterations % GC_INTERVAL == 0:
            gc.collect()

        if _state.iterations % MEMORY_SAMPLE_INTERVAL == 0:
            record_memory(_state)


def main() -> None:
    """Run the oracle fuzzer with CLI support."""
    global _harness, _collect  # noqa: PLW0603  # pylint: disable=global-statement

    parser = argparse.ArgumentParser(
        description="Mutation-strategy oracle fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--harness", default="b",
        help="Harness to evaluate: a or b (default: b)",
    )
    parser.add_argument(
        "--collect", action="store_true",
        help="Count predicate hits instead of crashing on the first one",
    )
    parser.add_argument(
        "--checkpoint-interval", type=int, default=10000,
        help="Emit report every N iterations (default: 10000)",
    )

    args, remaining = parser.parse_known_args()
    _harness = get_harness(args.harness)
    _collect = args.collect
    _state.harness = _harness.name
    _state.checkpoint_interval = args.checkpoint_interval

    # libFuzzer's -max_len caps input; anything past read_size is ignored anyway.
    if not any(arg.startswith("-max_len") for arg in remaining):
        remaining.append(f"-max_len={_harness.config.read_size}")
    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=4096")

    sys.argv = [sys.argv[0], *remaining]

    print()
    print("=" * 80)
    print("Mutation-Strategy Oracle Fuzzer (Atheris)")
    print("=" * 80)
    print(f"Harness:    {_harness.name} ({len(_harness.chain)} predicates)")
    print(f"Read size:  {_harness.config.read_size} bytes (min {_harness.config.min_length})")
    print(f"Mode:       {'collect' if _collect else 'crash on first match'}")
    print(f"Checkpoint: Every {_state.checkpoint_interval} iterations")
    print(f"GC Cycle:   Every {GC_INTERVAL} iterations")
    print("Stopping:   Press Ctrl+C (report auto-saved)")
    print("=" * 80)
    print()

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
