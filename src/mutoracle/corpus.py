"""Seed corpus, dictionary, and crash witness generation.

Produces the files a fuzzing campaign against a harness starts from:

    <outdir>/in/seed_00 ...        one file per configured seed
    <outdir>/harness_<name>.dict   dictionary in name="value" syntax
    <outdir>/witnesses/<name>      optional: one crashing input per predicate

Witnesses are derived from the primary seed by overwriting only the trigger
bytes, so each one is the smallest step from the seed that the predicate's
strategy has to find. Every witness is checked to reach its own predicate
before anything is written.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from mutoracle.diagnostics import ChainDefinitionError
from mutoracle.runner import evaluate_bytes

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from mutoracle.runner import Harness

__all__ = [
    "CorpusLayout",
    "build_witnesses",
    "escape_token",
    "format_dictionary",
    "write_corpus",
]

logger = logging.getLogger(__name__)

_PRINTABLE = range(0x20, 0x7F)


@dataclass(frozen=True, slots=True)
class CorpusLayout:
    """Paths written by write_corpus()."""

    seeds: tuple[Path, ...]
    dictionary: Path | None
    witnesses: tuple[Path, ...] = field(default=())


def escape_token(token: bytes) -> str:
    """Escape a token for a dictionary file.

    Printable ASCII is kept except for quote and backslash; everything else
    becomes a \\xNN escape.

    Example:
        >>> escape_token(b'A"\\xff')
        'A\\\\"\\\\xFF'
    """
    parts: list[str] = []
    for byte in token:
        if byte in (ord('"'), ord("\\")):
            parts.append("\\" + chr(byte))
        elif byte in _PRINTABLE:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:02X}")
    return "".join(parts)


def format_dictionary(tokens: Iterable[bytes], prefix: str = "token") -> str:
    """Render tokens as dictionary lines: token_1="ABCD"."""
    lines = [f'{prefix}_{i}="{escape_token(t)}"' for i, t in enumerate(tokens, start=1)]
    return "\n".join(lines) + "\n" if lines else ""


def build_witnesses(harness: Harness) -> dict[str, bytes]:
    """Build one crashing input per predicate, keyed by predicate name.

    Raises:
        ChainDefinitionError: If a witness is shadowed by an earlier
            predicate or fails to crash at all
    """
    baseline = harness.config.baseline
    witnesses: dict[str, bytes] = {}
    for predicate in harness.chain:
        data = predicate.witness(baseline)
        if len(data) < harness.config.min_length:
            data += bytes(harness.config.min_length - len(data))
        verdict = evaluate_bytes(harness, data)
        if verdict.predicate is not predicate:
            reached = verdict.predicate.name if verdict.predicate else verdict.outcome
            msg = f"Witness for '{predicate.name}' reaches '{reached}' in harness {harness.name}"
            raise ChainDefinitionError(msg)
        witnesses[predicate.name] = data
    return witnesses


def write_corpus(harness: Harness, outdir: Path, *, witnesses: bool = False) -> CorpusLayout:
    """Write seed files, dictionary, and optionally witnesses under outdir.

    Existing files with the same names are overwritten.

    Args:
        harness: Harness to generate files for
        outdir: Destination directory (created if missing)
        witnesses: Also write one crashing input per predicate

    Returns:
        CorpusLayout listing every written path
    """
    seed_dir = outdir / "in"
    seed_dir.mkdir(parents=True, exist_ok=True)

    seed_paths: list[Path] = []
    for i, seed in enumerate(harness.config.seeds):
        path = seed_dir / f"seed_{i:02d}"
        path.write_bytes(seed)
        seed_paths.append(path)

    dict_path: Path | None = None
    if harness.config.dictionary:
        dict_path = outdir / f"harness_{harness.name}.dict"
        dict_path.write_text(format_dictionary(harness.config.dictionary), encoding="utf-8")

    witness_paths: list[Path] = []
    if witnesses:
        witness_dir = outdir / "witnesses"
        witness_dir.mkdir(parents=True, exist_ok=True)
        for name, data in build_witnesses(harness).items():
            path = witness_dir / name
            path.write_bytes(data)
            witness_paths.append(path)

    logger.info(
        "Wrote %d seed(s), %d witness(es) for harness %s to %s",
        len(seed_paths),
        len(witness_paths),
        harness.name,
        outdir,
    )
    return CorpusLayout(tuple(seed_paths), dict_path, tuple(witness_paths))
