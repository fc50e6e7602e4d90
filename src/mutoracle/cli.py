"""Command-line tools for inspecting and preparing oracle harnesses.

The harness executables themselves take no flags; this CLI is the
operator-facing side: it prints predicate tables, explains what a harness
would do with an input without aborting, writes seed corpora, and triages
crash directories.

Usage:
    mutoracle table [a|b]
    mutoracle explain b crash_input.bin
    mutoracle explain a < input
    mutoracle seeds b campaign/ --witnesses
    mutoracle triage b out/default/crashes --json

Exit Codes:
    0   No crash (explain/triage), or command succeeded
    1   Input would crash the harness (explain), or a crash reproduced (triage)
    2   Usage error, unknown harness, or unreadable path

Python 3.13+.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from mutoracle.core import read_bytes
from mutoracle.corpus import write_corpus
from mutoracle.diagnostics import UnknownHarnessError
from mutoracle.registry import HARNESSES, get_harness
from mutoracle.runner import explain_bytes
from mutoracle.triage import triage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mutoracle.runner import Harness

__all__ = ["build_parser", "main"]

EXIT_CRASH = 1
EXIT_USAGE = 2


def _format_table(harness: Harness) -> list[str]:
    baseline = harness.config.baseline
    rows = [
        (
            p.name,
            str(p.strategy),
            str(p.kind),
            p.trigger.describe(),
            p.guard.describe() if p.guard else "-",
            str(p.seed_distance(baseline)),
        )
        for p in harness.chain
    ]
    header = ("predicate", "strategy", "kind", "trigger", "guard", "bits")
    widths = [max(len(r[i]) for r in [header, *rows]) for i in range(len(header))]
    lines = [" | ".join(h.ljust(w) for h, w in zip(header, widths, strict=True))]
    lines.append("-" * len(lines[0]))
    lines.extend(" | ".join(c.ljust(w) for c, w in zip(r, widths, strict=True)) for r in rows)
    return lines


def _cmd_table(args: argparse.Namespace) -> int:
    names = [args.harness] if args.harness else list(HARNESSES)
    for i, name in enumerate(names):
        harness = get_harness(name)
        config = harness.config
        if i:
            print()
        print(
            f"Harness {harness.name}: capacity={config.capacity} read={config.read_size} "
            f"min={config.min_length} predicates={len(harness.chain)}"
            f"{' (disjoint)' if harness.chain.disjoint else ''}"
        )
        for line in _format_table(harness):
            print(line)
    return 0


def _cmd_explain(args: argparse.Namespace) -> int:
    harness = get_harness(args.harness)
    if args.input is None:
        data = read_bytes(None, harness.config.read_size)
        source = "<stdin>"
    else:
        with Path(args.input).open("rb") as f:
            data = f.read(harness.config.read_size)
        source = args.input

    verdict, matches = explain_bytes(harness, data)

    if args.json:
        print(
            json.dumps(
                {
                    "harness": harness.name,
                    "input": source,
                    "bytes_read": verdict.bytes_read,
                    "outcome": str(verdict.outcome),
                    "predicate": verdict.predicate.name if verdict.predicate else None,
                    "strategy": str(verdict.predicate.strategy) if verdict.predicate else None,
                    "all_matches": [p.name for p in matches],
                },
                sort_keys=True,
            )
        )
    else:
        print(f"[{verdict.outcome.upper()}] harness {harness.name}, {verdict.bytes_read} byte(s) read")
        if verdict.predicate is not None:
            print(f"  first match: {verdict.predicate.name} ({verdict.predicate.strategy})")
            print(f"  trigger:     {verdict.predicate.trigger.describe()}")
        for extra in matches[1:]:
            print(f"  also:        {extra.name} ({extra.strategy})")

    return EXIT_CRASH if verdict.crashed else 0


def _cmd_seeds(args: argparse.Namespace) -> int:
    harness = get_harness(args.harness)
    layout = write_corpus(harness, Path(args.outdir), witnesses=args.witnesses)
    for path in layout.seeds:
        print(f"seed       {path}")
    if layout.dictionary is not None:
        print(f"dictionary {layout.dictionary}")
    for path in layout.witnesses:
        print(f"witness    {path}")
    return 0


def _cmd_triage(args: argparse.Namespace) -> int:
    harness = get_harness(args.harness)
    report = triage(harness, Path(args.path))

    if args.json:
        print(json.dumps(report.to_dict(), sort_keys=True))
    else:
        print(f"Replayed {len(report.entries)} input(s) against harness {harness.name}")
        for label, paths in report.groups().items():
            print(f"[{label}] x{len(paths)}")
            for path in paths[: args.samples]:
                print(f"   {path}")

    return EXIT_CRASH if report.crashes else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the mutoracle command."""
    parser = argparse.ArgumentParser(
        prog="mutoracle",
        description="Inspect, seed, and triage mutation-strategy oracle harnesses",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_table = sub.add_parser("table", help="Print predicate tables")
    p_table.add_argument("harness", nargs="?", help="Harness name (default: all)")
    p_table.set_defaults(func=_cmd_table)

    p_explain = sub.add_parser("explain", help="Evaluate one input without aborting")
    p_explain.add_argument("harness", help="Harness name")
    p_explain.add_argument("input", nargs="?", help="Input file (default: stdin)")
    p_explain.add_argument("--json", action="store_true", help="Machine-readable output")
    p_explain.set_defaults(func=_cmd_explain)

    p_seeds = sub.add_parser("seeds", help="Write seed corpus and dictionary")
    p_seeds.add_argument("harness", help="Harness name")
    p_seeds.add_argument("outdir", help="Output directory")
    p_seeds.add_argument(
        "--witnesses", action="store_true", help="Also write one crashing input per predicate"
    )
    p_seeds.set_defaults(func=_cmd_seeds)

    p_triage = sub.add_parser("triage", help="Group crash files by matched predicate")
    p_triage.add_argument("harness", help="Harness name")
    p_triage.add_argument("path", help="Crash file or directory")
    p_triage.add_argument("--json", action="store_true", help="Machine-readable output")
    p_triage.add_argument(
        "--samples", type=int, default=5, help="Paths to list per group (default: 5)"
    )
    p_triage.set_defaults(func=_cmd_triage)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the mutoracle command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return int(args.func(args))
    except (UnknownHarnessError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
