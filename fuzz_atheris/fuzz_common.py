"""Shared fuzzing infrastructure for Atheris-driven oracle runs.

Provides observability state, memory sampling, and the JSON summary report
used by fuzz_oracle.py. Keeps counts per outcome and per matched predicate
so a run shows which mutation strategies libFuzzer actually reached.

Not a fuzz target itself -- no FUZZ_PLUGIN header.
"""

from __future__ import annotations

import hashlib
import json
import os
import pathlib
import statistics
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

try:
    import psutil
except ImportError:
    psutil = None  # type: ignore[assignment]


# --- PEP 695 Type Aliases ---

type FuzzStats = dict[str, int | str | float | list[Any]]

# --- Constants ---

GC_INTERVAL = 256
"""Periodic gc.collect() interval to reclaim Atheris instrumentation cycles."""

MEMORY_SAMPLE_INTERVAL = 100
"""Sample RSS every N iterations."""


# --- Process Handle (lazy singleton) ---

_process: psutil.Process | None = None


def get_process() -> psutil.Process:
    """Lazy-initialize psutil process handle."""
    global _process  # noqa: PLW0603  # pylint: disable=global-statement
    if _process is None:
        _process = psutil.Process(os.getpid())
    return _process


# --- Dependency Checks ---


def check_dependencies(dep_names: Sequence[str], dep_modules: Sequence[Any]) -> None:
    """Verify fuzzing dependencies are importable, exit with instructions if not.

    Args:
        dep_names: Human-readable names (e.g., ["psutil", "atheris"])
        dep_modules: Corresponding module objects (None if import failed)
    """
    missing = [name for name, mod in zip(dep_names, dep_modules, strict=True) if mod is None]
    if missing:
        print("-" * 80, file=sys.stderr)
        print("ERROR: Missing required dependencies for fuzzing:", file=sys.stderr)
        for dep in missing:
            print(f"  - {dep}", file=sys.stderr)
        print("", file=sys.stderr)
        print("Install with: pip install 'mutoracle[atheris]'", file=sys.stderr)
        print("-" * 80, file=sys.stderr)
        sys.exit(1)


# --- Base Fuzzer State ---


@dataclass
class BaseFuzzerState:
    """Observability state for one Atheris run."""

    harness: str = ""
    iterations: int = 0
    findings: int = 0
    status: str = "incomplete"

    memory_history: deque[float] = field(
        default_factory=lambda: deque(maxlen=1000),
    )
    initial_memory_mb: float = 0.0

    # Outcome name -> count, predicate name -> count
    outcome_counts: dict[str, int] = field(default_factory=dict)
    predicate_hits: dict[str, int] = field(default_factory=dict)

    # Iteration at which each predicate was first hit, and the input hash
    first_hit: dict[str, tuple[int, str]] = field(default_factory=dict)

    checkpoint_interval: int = 10000


# --- Input Hashing ---


def hash_input(data: bytes) -> str:
    """Compute truncated SHA-256 hex digest for finding deduplication."""
    return hashlib.sha256(data).hexdigest()[:16]


# --- Recording ---


def record_outcome(
    state: BaseFuzzerState,
    outcome: str,
    predicate: str | None,
    data: bytes,
) -> None:
    """Count one evaluated input.

    Args:
        state: Fuzzer state to update
        outcome: Outcome value of the verdict
        predicate: Matched predicate name, or None
        data: Raw input, hashed on a predicate's first hit
    """
    state.outcome_counts[outcome] = state.outcome_counts.get(outcome, 0) + 1
    if predicate is None:
        return
    state.findings += 1
    state.predicate_hits[predicate] = state.predicate_hits.get(predicate, 0) + 1
    if predicate not in state.first_hit:
        state.first_hit[predicate] = (state.iterations, hash_input(data))


def record_memory(state: BaseFuzzerState) -> None:
    """Sample current RSS memory usage."""
    current_mb = get_process().memory_info().rss / (1024 * 1024)
    state.memory_history.append(current_mb)


# --- Stats Building ---


def build_base_stats_dict(state: BaseFuzzerState, predicate_names: Sequence[str]) -> FuzzStats:
    """Build stats dictionary for the JSON report.

    Args:
        state: Fuzzer state to report on
        predicate_names: Every predicate in the harness, in chain order

    Returns:
        Stats dictionary suitable for JSON serialization
    """
    stats: FuzzStats = {
        "harness": state.harness,
        "status": state.status,
        "iterations": state.iterations,
        "findings": state.findings,
    }

    for outcome, count in sorted(state.outcome_counts.items()):
        stats[f"outcome_{outcome}"] = count

    reached = [name for name in predicate_names if name in state.predicate_hits]
    stats["predicates_total"] = len(predicate_names)
    stats["predicates_reached"] = len(reached)
    stats["predicates_missed"] = [name for name in predicate_names if name not in reached]
    for name in reached:
        stats[f"hits_{name}"] = state.predicate_hits[name]
        iteration, input_hash = state.first_hit[name]
        stats[f"first_hit_iter_{name}"] = iteration
        stats[f"first_hit_hash_{name}"] = input_hash

    if state.memory_history:
        mem_data = list(state.memory_history)
        stats["memory_mean_mb"] = round(statistics.mean(mem_data), 2)
        stats["memory_peak_mb"] = round(max(mem_data), 2)
        stats["memory_delta_mb"] = round(max(mem_data) - state.initial_memory_mb, 2)

    return stats


# --- Reporting ---


def emit_checkpoint_report(stats: FuzzStats) -> None:
    """Print an intermediate report to stderr."""
    report = json.dumps(stats, sort_keys=True)
    print(f"\n[CHECKPOINT-JSON-BEGIN]{report}[CHECKPOINT-JSON-END]", file=sys.stderr, flush=True)


def emit_final_report(
    state: BaseFuzzerState,
    stats: FuzzStats,
    report_dir: pathlib.Path,
    report_filename: str,
) -> None:
    """Emit crash-proof JSON report to stderr and file.

    Args:
        state: Fuzzer state (status set to "complete")
        stats: Pre-built stats dictionary
        report_dir: Directory for the JSON report file
        report_filename: Filename for the JSON report
    """
    state.status = "complete"
    stats["status"] = state.status
    report = json.dumps(stats, sort_keys=True)

    print(
        f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]",
        file=sys.stderr,
        flush=True,
    )

    try:
        report_dir.mkdir(parents=True, exist_ok=True)
        (report_dir / report_filename).write_text(report, encoding="utf-8")
    except OSError as e:
        print(f"[WARN] Could not write report: {e}", file=sys.stderr)
