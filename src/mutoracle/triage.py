"""Crash triage: map fuzzer findings back to the strategy that produced them.

Replays saved inputs (a single file or a directory such as a fuzzer's
crashes/ folder) through the pure evaluator and groups them by the predicate
they satisfy. Nothing is executed out of process and nothing aborts.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mutoracle.runner import explain_bytes

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from mutoracle.predicates import Predicate
    from mutoracle.runner import Harness, Verdict

__all__ = ["TriageEntry", "TriageReport", "iter_inputs", "triage"]

logger = logging.getLogger(__name__)

# Bookkeeping files fuzzers leave next to findings.
_SKIPPED_NAMES = frozenset({"README.txt"})


@dataclass(frozen=True, slots=True)
class TriageEntry:
    """One replayed input.

    Attributes:
        path: Input file
        verdict: What the harness does with it
        matches: Every predicate the input satisfies, in chain order
    """

    path: Path
    verdict: Verdict
    matches: tuple[Predicate, ...]

    @property
    def label(self) -> str:
        """Matched predicate name, or the non-crash outcome."""
        if self.verdict.predicate is not None:
            return self.verdict.predicate.name
        return str(self.verdict.outcome)


@dataclass(frozen=True, slots=True)
class TriageReport:
    """All entries for one triage run."""

    harness: str
    entries: tuple[TriageEntry, ...]

    @property
    def crashes(self) -> int:
        return sum(1 for e in self.entries if e.verdict.crashed)

    def groups(self) -> dict[str, list[Path]]:
        """Paths grouped by label, largest group first."""
        grouped: dict[str, list[Path]] = defaultdict(list)
        for entry in self.entries:
            grouped[entry.label].append(entry.path)
        return dict(sorted(grouped.items(), key=lambda item: (-len(item[1]), item[0])))

    def to_dict(self) -> dict[str, object]:
        """JSON-serializable summary."""
        return {
            "harness": self.harness,
            "inputs": len(self.entries),
            "crashes": self.crashes,
            "groups": {label: [str(p) for p in paths] for label, paths in self.groups().items()},
        }


def iter_inputs(path: Path) -> Iterator[Path]:
    """Yield input files under path in sorted order.

    A file yields itself. A directory yields its regular files, skipping
    hidden entries and fuzzer README files; subdirectories are not entered.

    Raises:
        FileNotFoundError: If path does not exist
    """
    if path.is_file():
        yield path
        return
    if not path.is_dir():
        msg = f"No such file or directory: {path}"
        raise FileNotFoundError(msg)
    for child in sorted(path.iterdir()):
        if child.is_file() and not child.name.startswith(".") and child.name not in _SKIPPED_NAMES:
            yield child


def triage(harness: Harness, path: Path) -> TriageReport:
    """Replay every input under path against harness.

    Only the first read_size bytes of each file are read.
    """
    entries: list[TriageEntry] = []
    for input_path in iter_inputs(path):
        with input_path.open("rb") as f:
            data = f.read(harness.config.read_size)
        verdict, matches = explain_bytes(harness, data)
        logger.debug("%s: %s", input_path.name, verdict.outcome)
        entries.append(TriageEntry(input_path, verdict, matches))
    return TriageReport(harness.name, tuple(entries))
